"""
Digest and signer getters for explicitly paired types.

A pairing `(payload, envelope)` makes `payload` digest-eligible and gives
`envelope` a signer getter. The envelope must carry exactly one `bytes
signature` field and exactly one field of the payload type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import InvalidPairingError
from ..schema.nodes import Schema, TypeRef
from ..templates import render
from .artifacts import ArtifactKind, DigestGetter, SignerGetter
from .name_resolver import NameResolver

logger = logging.getLogger(__name__)

SIGNATURE_FIELD = "signature"
SIGNATURE_TYPE = "bytes"


@dataclass(frozen=True)
class Pairing:
    """A validated payload/envelope pair."""

    payload_type: str
    envelope_type: str
    payload_field: str
    signature_field: str = SIGNATURE_FIELD


class PairingPolicy:
    """Explicit, auditable list of (payload type, envelope type) pairs."""

    def __init__(self, pairs: Iterable):
        self.pairs = tuple(pairs)

    def validate(self, schema: Schema) -> list[Pairing]:
        """
        Validate every pair against the schema.

        Returns:
            Validated pairings in configuration order

        Raises:
            InvalidPairingError: On the first missing or malformed pair
        """
        pairings: list[Pairing] = []
        seen: set[tuple[str, str]] = set()

        for pair in self.pairs:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2 or not all(isinstance(p, str) for p in pair):
                raise InvalidPairingError(str(pair), "", "a pair must be [payload type, envelope type]")

            payload, envelope = pair
            if (payload, envelope) in seen:
                raise InvalidPairingError(payload, envelope, "pair listed twice")
            if any(envelope == other for _, other in seen):
                raise InvalidPairingError(payload, envelope, f"envelope '{envelope}' is already paired")
            seen.add((payload, envelope))

            for type_name in (payload, envelope):
                if type_name not in schema:
                    raise InvalidPairingError(payload, envelope, f"type '{type_name}' is not declared")
            if payload == envelope:
                raise InvalidPairingError(payload, envelope, "a type cannot be its own envelope")

            envelope_def = schema[envelope]
            signature_fields = [f for f in envelope_def.fields if f.name == SIGNATURE_FIELD]
            if len(signature_fields) != 1 or signature_fields[0].type != SIGNATURE_TYPE:
                raise InvalidPairingError(payload, envelope, f"envelope must declare exactly one '{SIGNATURE_TYPE} {SIGNATURE_FIELD}' field")

            payload_fields = [f for f in envelope_def.fields if f.type == payload]
            if len(payload_fields) != 1:
                raise InvalidPairingError(payload, envelope, f"envelope must declare exactly one field of type '{payload}', found {len(payload_fields)}")

            pairings.append(Pairing(payload_type=payload, envelope_type=envelope, payload_field=payload_fields[0].name))

        return pairings

    @staticmethod
    def payload_types(pairings: list[Pairing]) -> list[str]:
        """Digest-eligible types, in first-pairing order."""
        return list(dict.fromkeys(p.payload_type for p in pairings))


class PairedDigestSignerGenerator:
    """Generates domain-bound digest getters and signer getters."""

    def __init__(self, names: NameResolver, pairings: list[Pairing]):
        self.names = names
        self.pairings = pairings

    def generate(self) -> tuple[list[DigestGetter], list[SignerGetter]]:
        """
        Generate one digest getter per pairing payload and one signer getter per envelope.

        Payloads shared by several envelopes produce repeated digest getters; the
        deduplicator collapses them.
        """
        digests = [self.digest_getter(p.payload_type) for p in self.pairings]
        signers = [self.signer_getter(p) for p in self.pairings]
        logger.debug("Generated %d digest and %d signer getters", len(digests), len(signers))
        return digests, signers

    def digest_getter(self, type_name: str) -> DigestGetter:
        type_ref = TypeRef(type_name)
        name = self.names.digest_getter_name(type_name)
        parameter_type = self.names.parameter_type(type_ref)
        body = render(
            "solidity/digest.sol.jinja2",
            type_name=type_name,
            name=name,
            parameter_type=parameter_type,
            packet_hash_getter=self.names.packet_hash_getter_name(type_ref),
        )
        return DigestGetter(kind=ArtifactKind.DIGEST, name=name, body=body, type_name=type_name, parameter_type=parameter_type)

    def signer_getter(self, pairing: Pairing) -> SignerGetter:
        type_ref = TypeRef(pairing.envelope_type)
        name = self.names.signer_getter_name(pairing.envelope_type)
        parameter_type = self.names.parameter_type(type_ref)
        body = render(
            "solidity/signer.sol.jinja2",
            type_name=pairing.envelope_type,
            name=name,
            parameter_type=parameter_type,
            digest_getter=self.names.digest_getter_name(pairing.payload_type),
            payload_field=pairing.payload_field,
            signature_field=pairing.signature_field,
        )
        return SignerGetter(
            kind=ArtifactKind.SIGNER,
            name=name,
            body=body,
            type_name=pairing.envelope_type,
            parameter_type=parameter_type,
            payload_type=pairing.payload_type,
            payload_field=pairing.payload_field,
        )
