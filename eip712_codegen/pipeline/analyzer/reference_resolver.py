"""
Reference resolver for field types.

Resolves a field's type string ("Person", "uint256", "Person[][]") to a
TypeRef against the merged schema.
"""

from __future__ import annotations

import re

from ..errors import SchemaResolutionError
from ..schema.nodes import FieldDef, Schema, TypeDef, TypeRef
from ..schema.primitives import is_primitive

_TYPE_PATTERN = re.compile(r"^([A-Za-z_$][A-Za-z0-9_$]*)((?:\[\d*\])*)$")


class ReferenceResolver:
    """Resolves field type strings to schema types or primitives."""

    def __init__(self, schema: Schema):
        """
        Initialize the resolver.

        Args:
            schema: The merged schema
        """
        self.schema = schema
        self._cache: dict[str, TypeRef] = {}

    def resolve(self, type_def: TypeDef, field: FieldDef) -> TypeRef:
        """
        Resolve the type of one field.

        Raises:
            SchemaResolutionError: If the type is malformed, a fixed-size array,
                or references an undeclared type
        """
        cached = self._cache.get(field.type)
        if cached is not None:
            return cached

        match = _TYPE_PATTERN.match(field.type)
        if not match:
            raise SchemaResolutionError(type_def.name, field.name, field.type, "malformed type")

        base, suffix = match.group(1), match.group(2)
        if "[]" * (len(suffix) // 2) != suffix:
            raise SchemaResolutionError(type_def.name, field.name, field.type, "fixed-size arrays are not supported")

        if is_primitive(base):
            type_ref = TypeRef(base, len(suffix) // 2, is_primitive=True)
        elif base in self.schema:
            type_ref = TypeRef(base, len(suffix) // 2)
        else:
            raise SchemaResolutionError(type_def.name, field.name, base)

        self._cache[field.type] = type_ref
        return type_ref

    def resolve_all(self) -> dict[tuple[str, str], TypeRef]:
        """
        Resolve every field of every type, failing on the first dangling reference.

        Returns:
            Mapping from (type name, field name) to the field's TypeRef
        """
        resolved: dict[tuple[str, str], TypeRef] = {}
        for type_def in self.schema:
            for field in type_def.fields:
                resolved[(type_def.name, field.name)] = self.resolve(type_def, field)
        return resolved
