"""
Schema merger.

Parses the baseline and extension type maps into type definitions and merges
them into a single ordered schema: baseline types first, extension types after,
each in declaration order. A type name declared on both sides is a hard error.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import NameCollisionError, SchemaResolutionError
from .nodes import FieldDef, Schema, TypeDef
from .primitives import is_primitive

logger = logging.getLogger(__name__)


class SchemaMerger:
    """Builds the merged schema of one generation run."""

    def merge(
        self,
        baseline: dict[str, list[dict[str, str]]],
        extension: dict[str, list[dict[str, str]]],
    ) -> Schema:
        """
        Merge baseline and extension type maps.

        Args:
            baseline: Fixed type map shipped with the generator
            extension: Caller supplied type map

        Returns:
            The merged schema, baseline types first

        Raises:
            NameCollisionError: If a type name is declared in both maps
            SchemaResolutionError: If a type declaration is malformed
        """
        collisions = [name for name in extension if name in baseline]
        if collisions:
            raise NameCollisionError(
                collisions[0],
                [f"baseline:{collisions[0]}", f"extension:{collisions[0]}"],
                "extension types may not redeclare baseline types",
            )

        types = [self.parse_type(name, fields, "baseline") for name, fields in baseline.items()]
        types += [self.parse_type(name, fields, "extension") for name, fields in extension.items()]

        logger.debug("Merged %d baseline and %d extension types", len(baseline), len(extension))
        return Schema(tuple(types))

    def parse_type(self, name: str, fields: Any, origin: str) -> TypeDef:
        """Parse one `name -> [{name, type}, ...]` entry into a TypeDef."""
        if is_primitive(name):
            raise SchemaResolutionError(name, "", name, "type name shadows a primitive")
        if not isinstance(fields, list):
            raise SchemaResolutionError(name, "", name, "a type must declare a list of fields")
        if not fields:
            raise SchemaResolutionError(name, "", name, "a type must declare at least one field")

        parsed: list[FieldDef] = []
        seen: set[str] = set()
        for raw in fields:
            if not isinstance(raw, dict) or not isinstance(raw.get("name"), str) or not isinstance(raw.get("type"), str):
                raise SchemaResolutionError(name, str(raw), name, "fields must be {name, type} string pairs")
            if raw["name"] in seen:
                raise SchemaResolutionError(name, raw["name"], raw["type"], "duplicate field name")
            seen.add(raw["name"])
            parsed.append(FieldDef(name=raw["name"], type=raw["type"]))

        return TypeDef(name=name, fields=tuple(parsed), origin=origin)
