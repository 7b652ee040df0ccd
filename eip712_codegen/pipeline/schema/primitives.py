"""
Primitive EIP-712 type tags and their encoding class.
"""

from __future__ import annotations

import re
from enum import Enum

_INTEGER = re.compile(r"^u?int(\d*)$")
_FIXED_BYTES = re.compile(r"^bytes(\d+)$")


class PrimitiveKind(Enum):
    """How a primitive value is embedded in an encoding."""

    DYNAMIC = "dynamic"  # bytes, string: pre-hashed
    FIXED = "fixed"  # address, bool, intN, uintN, bytesN: embedded as is


DYNAMIC_PRIMITIVES = {"bytes", "string"}
FIXED_PRIMITIVES = {"address", "bool"}


def primitive_kind(type_name: str) -> PrimitiveKind | None:
    """Classify a type tag, returning None when it is not a primitive."""
    if type_name in DYNAMIC_PRIMITIVES:
        return PrimitiveKind.DYNAMIC
    if type_name in FIXED_PRIMITIVES:
        return PrimitiveKind.FIXED

    match = _INTEGER.match(type_name)
    if match:
        bits = int(match.group(1) or 256)
        return PrimitiveKind.FIXED if 0 < bits <= 256 and bits % 8 == 0 else None

    match = _FIXED_BYTES.match(type_name)
    if match:
        size = int(match.group(1))
        return PrimitiveKind.FIXED if 0 < size <= 32 else None

    return None


def is_primitive(type_name: str) -> bool:
    return primitive_kind(type_name) is not None
