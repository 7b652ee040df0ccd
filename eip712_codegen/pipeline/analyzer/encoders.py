"""
Packet hash encoders.

Each field is encoded according to its type:

- dynamic primitives (`bytes`, `string`) are hashed first,
- fixed-width primitives are embedded as they are,
- composite and array values embed the result of their own packet hash getter.

The packet hash of a struct is `keccak256(abi.encode(TYPEHASH, ...))` over the
fields in declared order. An array hash is the keccak256 of the concatenated
element encodings, so an empty array hashes to `keccak256("")`.
"""

from __future__ import annotations

from ..schema.nodes import TypeDef, TypeRef
from ..schema.primitives import PrimitiveKind, primitive_kind
from ..templates import render
from .artifacts import ArtifactKind, PacketHashGetter
from .name_resolver import NameResolver

_VALUE_SEPARATOR = ",\n            "


def encode_value(names: NameResolver, type_ref: TypeRef, expression: str) -> str:
    """Solidity expression encoding `expression` as a 32-byte `abi.encode` member."""
    if not type_ref.is_array and type_ref.is_primitive:
        kind = primitive_kind(type_ref.base)
        if kind == PrimitiveKind.DYNAMIC:
            if type_ref.base == "string":
                return f"keccak256(bytes({expression}))"
            return f"keccak256({expression})"
        return expression

    return f"{names.packet_hash_getter_name(type_ref)}({expression})"


def encode_element(names: NameResolver, type_ref: TypeRef, expression: str) -> str:
    """Like `encode_value`, but as a `bytes` operand of `bytes.concat`."""
    if not type_ref.is_array and primitive_kind(type_ref.base) == PrimitiveKind.FIXED:
        return f"abi.encode({expression})"
    return encode_value(names, type_ref, expression)


class PacketHashEncoderGenerator:
    """Generates the packet hash getter of a declared type."""

    def __init__(self, names: NameResolver):
        self.names = names

    def generate(self, type_def: TypeDef, field_refs: list[TypeRef]) -> PacketHashGetter:
        """
        Generate the getter for one type.

        Args:
            type_def: The type to encode
            field_refs: Resolved type of each field, in declared order

        Returns:
            The packet hash getter artifact
        """
        type_ref = TypeRef(type_def.name)
        values = [self.names.type_hash_name(type_def.name)]
        values += [encode_value(self.names, ref, f"$input.{field.name}") for field, ref in zip(type_def.fields, field_refs)]

        name = self.names.packet_hash_getter_name(type_ref)
        parameter_type = self.names.parameter_type(type_ref)
        body = render(
            "solidity/packet_hash.sol.jinja2",
            type_name=type_def.name,
            name=name,
            parameter_type=parameter_type,
            encoded_values=_VALUE_SEPARATOR.join(values),
        )
        return PacketHashGetter(
            kind=ArtifactKind.PACKET_HASH,
            name=name,
            body=body,
            type_name=type_def.name,
            parameter_type=parameter_type,
            type_ref=type_ref,
        )


class ArrayEncoderGenerator:
    """Generates the element-wise packet hash getter of an array type."""

    def __init__(self, names: NameResolver):
        self.names = names

    def generate(self, array_ref: TypeRef) -> PacketHashGetter:
        if not array_ref.is_array:
            raise ValueError(f"{array_ref.type_string} is not an array type")

        name = self.names.packet_hash_getter_name(array_ref)
        parameter_type = self.names.parameter_type(array_ref)
        body = render(
            "solidity/array_hash.sol.jinja2",
            type_name=array_ref.type_string,
            name=name,
            parameter_type=parameter_type,
            encoded_element=encode_element(self.names, array_ref.element, "$input[i]"),
        )
        return PacketHashGetter(
            kind=ArtifactKind.PACKET_HASH,
            name=name,
            body=body,
            type_name=array_ref.type_string,
            parameter_type=parameter_type,
            type_ref=array_ref,
        )
