"""
Adapters over the external typed-data and cryptography libraries.

The generator never canonicalizes types or hashes bytes itself:
`encode_type` comes from eth-account, `keccak` from eth-utils and signature
recovery from eth-keys.
"""

from __future__ import annotations

from typing import Protocol

from eth_account._utils.encode_typed_data.encoding_and_hashing import encode_type as _encode_type
from eth_keys import keys
from eth_keys.exceptions import BadSignature, ValidationError
from eth_utils import keccak

from .errors import InvalidSignatureFormat

__all__ = ["TypeEncoder", "encode_type", "keccak", "recover"]

SIGNATURE_LENGTH = 65


class TypeEncoder(Protocol):
    def __call__(self, type_name: str, types: dict[str, list[dict[str, str]]]) -> str: ...


def encode_type(type_name: str, types: dict[str, list[dict[str, str]]]) -> str:
    """Canonical EIP-712 type signature, e.g. `Mail(Person from,...)Person(...)`."""
    return _encode_type(type_name, types)


def recover(digest: bytes, signature: bytes) -> str:
    """
    Recover the checksummed address that signed `digest`.

    Args:
        digest: 32-byte message digest
        signature: 65-byte `r || s || v` signature, `v` in {0, 1, 27, 28}

    Raises:
        InvalidSignatureFormat: If the digest or signature is malformed or
            does not recover to a public key
    """
    if len(digest) != 32:
        raise InvalidSignatureFormat(f"Digest must be 32 bytes, got {len(digest)}")
    if len(signature) != SIGNATURE_LENGTH:
        raise InvalidSignatureFormat(f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}")

    v = signature[64]
    if v in (27, 28):
        v -= 27
    if v not in (0, 1):
        raise InvalidSignatureFormat(f"Invalid signature recovery id {signature[64]}")

    try:
        parsed = keys.Signature(signature_bytes=signature[:64] + bytes([v]))
        public_key = parsed.recover_public_key_from_msg_hash(digest)
    except (BadSignature, ValidationError) as e:
        raise InvalidSignatureFormat(f"Cannot recover signer: {e}") from e

    return public_key.to_checksum_address()
