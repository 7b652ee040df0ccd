"""
Off-chain reference implementation of the generated encoders.

`TypedDataHasher` computes the same values as the generated Solidity getters
(type hash, packet hash, array hash, digest and signer), which makes it
possible to check a schema's hashes without compiling the contract.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from eth_abi import encode
from eth_utils import to_bytes, to_canonical_address

from .pipeline.analyzer.pairing import Pairing, PairingPolicy
from .pipeline.analyzer.reference_resolver import ReferenceResolver
from .pipeline.collaborators import encode_type, keccak, recover
from .pipeline.config import CodeGeneratorConfig
from .pipeline.errors import InvalidPairingError
from .pipeline.schema.baseline import BASELINE_TYPES, DOMAIN_TYPE
from .pipeline.schema.merger import SchemaMerger
from .pipeline.schema.nodes import FieldDef, Schema, TypeDef, TypeRef
from .pipeline.schema.primitives import PrimitiveKind, primitive_kind

DIGEST_PREFIX = b"\x19\x01"


def _as_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return to_bytes(hexstr=value)


class TypedDataHasher:
    """Hashes typed data exactly as the generated getters do."""

    def __init__(
        self,
        schema: Schema,
        pairs: Iterable = (),
        domain: dict[str, Any] | None = None,
    ):
        """
        Initialize the hasher.

        Args:
            schema: The merged schema
            pairs: Explicit (payload type, envelope type) pairs
            domain: Values of the domain type, required for digests and signers
        """
        self.schema = schema
        self.domain = domain
        self.pairings: dict[str, Pairing] = {p.envelope_type: p for p in PairingPolicy(pairs).validate(schema)}
        self._types = schema.to_dict()
        self._resolver = ReferenceResolver(schema)
        self._domain_separator: bytes | None = None

    @classmethod
    def from_config(cls, config: CodeGeneratorConfig, domain: dict[str, Any] | None = None) -> TypedDataHasher:
        baseline = BASELINE_TYPES if config.baseline_types is None else config.baseline_types
        return cls(SchemaMerger().merge(baseline, config.types), config.pairs, domain)

    def encode_type(self, type_name: str) -> str:
        return encode_type(type_name, self._types)

    def type_hash(self, type_name: str) -> bytes:
        return keccak(text=self.encode_type(type_name))

    def resolve(self, type_string: str) -> TypeRef:
        """Resolve a type string such as `Person[]` against the schema."""
        return self._resolver.resolve(TypeDef(name="<input>"), FieldDef(name="<input>", type=type_string))

    def encode_value(self, type_ref: TypeRef, value: Any) -> bytes:
        """32-byte encoding of one value, as embedded in a packet hash."""
        if type_ref.is_array:
            return self.hash_array(type_ref, value)
        if not type_ref.is_primitive:
            return self.hash_struct(type_ref.base, value)

        if primitive_kind(type_ref.base) == PrimitiveKind.DYNAMIC:
            if type_ref.base == "string":
                return keccak(text=value)
            return keccak(_as_bytes(value))

        abi_type = type_ref.base
        if abi_type in ("uint", "int"):
            abi_type += "256"
        elif abi_type == "address":
            value = to_canonical_address(value)
        elif abi_type.startswith("bytes"):
            value = _as_bytes(value)
        return encode([abi_type], [value])

    def hash_struct(self, type_name: str, value: dict[str, Any]) -> bytes:
        """Packet hash of one instance: keccak256(typeHash || encoded fields)."""
        type_def = self.schema[type_name]
        encoded = [self.type_hash(type_name)]
        for field in type_def.fields:
            encoded.append(self.encode_value(self._resolver.resolve(type_def, field), value[field.name]))
        return keccak(b"".join(encoded))

    def hash_array(self, array_type: TypeRef | str, values: Sequence[Any]) -> bytes:
        """Hash of the concatenated element encodings; `keccak256("")` when empty."""
        if isinstance(array_type, str):
            array_type = self.resolve(array_type)
        element = array_type.element
        return keccak(b"".join(self.encode_value(element, item) for item in values))

    def domain_separator(self) -> bytes:
        if self.domain is None:
            raise ValueError("A domain is required to compute digests")
        if self._domain_separator is None:
            self._domain_separator = self.hash_struct(DOMAIN_TYPE, self.domain)
        return self._domain_separator

    def digest(self, type_name: str, value: dict[str, Any]) -> bytes:
        """
        Domain-bound digest of a payload type.

        Raises:
            InvalidPairingError: If the type is not a paired payload type
        """
        if type_name not in PairingPolicy.payload_types(list(self.pairings.values())):
            raise InvalidPairingError(type_name, "", "not a paired payload type")
        return keccak(DIGEST_PREFIX + self.domain_separator() + self.hash_struct(type_name, value))

    def recover_signer(self, envelope_type: str, value: dict[str, Any]) -> str:
        """
        Recover the signer of an envelope from its payload digest and signature.

        Raises:
            InvalidPairingError: If the type is not a paired envelope type
            InvalidSignatureFormat: If the signature is malformed
        """
        pairing = self.pairings.get(envelope_type)
        if pairing is None:
            raise InvalidPairingError("", envelope_type, "not a paired envelope type")
        digest = self.digest(pairing.payload_type, value[pairing.payload_field])
        return recover(digest, _as_bytes(value[pairing.signature_field]))
