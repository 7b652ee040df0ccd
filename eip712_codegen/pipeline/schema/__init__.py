"""
Schema module.

Phase 1 of the pipeline: parse and merge type maps into an ordered schema.
"""

from __future__ import annotations

from .baseline import BASELINE_TYPES, DOMAIN_TYPE
from .merger import SchemaMerger
from .nodes import FieldDef, Schema, TypeDef, TypeRef
from .primitives import PrimitiveKind, is_primitive, primitive_kind

__all__ = [
    "BASELINE_TYPES",
    "DOMAIN_TYPE",
    "SchemaMerger",
    "FieldDef",
    "Schema",
    "TypeDef",
    "TypeRef",
    "PrimitiveKind",
    "is_primitive",
    "primitive_kind",
]
