"""
Type graph walker.

Phase 2 of the pipeline: walk the merged schema in declaration order and
emit, for every type, its struct declaration, type hash constant and packet
hash getter, plus an array getter for every array field (recursing through
nested array levels).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..collaborators import TypeEncoder, encode_type, keccak
from ..schema.nodes import Schema, TypeDef, TypeRef
from ..templates import render
from .artifacts import ArtifactKind, PacketHashGetter, StructDecl, TypeArtifacts, TypeHashConst
from .encoders import ArrayEncoderGenerator, PacketHashEncoderGenerator
from .name_resolver import NameResolver
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkResult:
    """Artifacts in emission order; getters may repeat until deduplicated."""

    types: tuple[TypeArtifacts, ...]
    packet_hash_getters: tuple[PacketHashGetter, ...]


class TypeGraphWalker:
    """Emits the per-type artifacts of a schema."""

    def __init__(self, schema: Schema, names: NameResolver, type_encoder: TypeEncoder = encode_type):
        """
        Initialize the walker.

        Args:
            schema: The merged schema
            names: Name resolver of the run
            type_encoder: Canonical type signature encoder
        """
        self.schema = schema
        self.names = names
        self.type_encoder = type_encoder
        self.ref_resolver = ReferenceResolver(schema)
        self.packet_encoder = PacketHashEncoderGenerator(names)
        self.array_encoder = ArrayEncoderGenerator(names)

        # (base, depth) -> rendered array getter
        self._array_getters: dict[tuple[str, int], PacketHashGetter] = {}

    def array_refs(self, field_refs: dict[tuple[str, str], TypeRef]) -> list[TypeRef]:
        """Every distinct array type referenced by the schema, nested levels included."""
        found: dict[tuple[str, int], TypeRef] = {}
        for type_ref in field_refs.values():
            while type_ref.is_array:
                found.setdefault((type_ref.base, type_ref.depth), type_ref)
                type_ref = type_ref.element
        return list(found.values())

    def walk(self) -> WalkResult:
        """
        Walk the schema.

        All references are resolved and names checked before any artifact is
        built, so a failing schema produces no artifacts at all.

        Raises:
            SchemaResolutionError: On a reference to an undeclared type
            NameCollisionError: On two owners of the same generated name
        """
        field_refs = self.ref_resolver.resolve_all()
        self.names.check_collisions(self.schema, self.array_refs(field_refs))

        types_dict = self.schema.to_dict()
        types: list[TypeArtifacts] = []
        getters: list[PacketHashGetter] = []

        for type_def in self.schema:
            refs = [field_refs[(type_def.name, field.name)] for field in type_def.fields]
            types.append(
                TypeArtifacts(
                    type_def=type_def,
                    struct=self._struct(type_def),
                    type_hash=self._type_hash(type_def, types_dict),
                )
            )
            getters.append(self.packet_encoder.generate(type_def, refs))

            for type_ref in refs:
                if type_ref.is_array:
                    getters.extend(self._array_getter_chain(type_ref))

            logger.debug("Walked type %s (%d fields)", type_def.name, len(type_def.fields))

        return WalkResult(types=tuple(types), packet_hash_getters=tuple(getters))

    def _array_getter_chain(self, array_ref: TypeRef) -> list[PacketHashGetter]:
        """Array getter of `array_ref` followed by those of its nested array elements."""
        chain = []
        while array_ref.is_array:
            key = (array_ref.base, array_ref.depth)
            if key not in self._array_getters:
                self._array_getters[key] = self.array_encoder.generate(array_ref)
            chain.append(self._array_getters[key])
            array_ref = array_ref.element
        return chain

    def _struct(self, type_def: TypeDef) -> StructDecl:
        body = render("solidity/struct.sol.jinja2", type_name=type_def.name, fields=type_def.fields)
        return StructDecl(kind=ArtifactKind.STRUCT, name=type_def.name, body=body, type_name=type_def.name)

    def _type_hash(self, type_def: TypeDef, types_dict: dict[str, list[dict[str, str]]]) -> TypeHashConst:
        name = self.names.type_hash_name(type_def.name)
        encoded_type = self.type_encoder(type_def.name, types_dict)
        body = render(
            "solidity/type_hash.sol.jinja2",
            type_name=type_def.name,
            name=name,
            fields=type_def.fields,
            encoded_type=encoded_type,
        )
        return TypeHashConst(
            kind=ArtifactKind.TYPE_HASH,
            name=name,
            body=body,
            type_name=type_def.name,
            encoded_type=encoded_type,
            type_hash="0x" + keccak(text=encoded_type).hex(),
        )
