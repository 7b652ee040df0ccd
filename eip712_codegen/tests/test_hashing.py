"""
Tests for the off-chain typed data hasher against the EIP-712 "Ether Mail" vectors.
"""

from __future__ import annotations

import pytest
from conftest import MAIL_TYPES, SIGNED_MAIL, make_config
from eth_abi import encode
from eth_keys import keys
from eth_utils import keccak

from eip712_codegen import TypedDataHasher
from eip712_codegen.pipeline import InvalidPairingError, InvalidSignatureFormat
from eip712_codegen.pipeline.collaborators import recover

DOMAIN = {
    "name": "Ether Mail",
    "version": "1",
    "chainId": 1,
    "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
}

COW = {"name": "Cow", "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"}
BOB = {"name": "Bob", "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"}
MESSAGE = {"from": COW, "to": BOB, "contents": "Hello, Bob!"}

MAIL_TYPE_HASH = "a0cedeb2dc280ba39b857546d74f5549c3a1d7bdc2dd96bf881f76108e23dac2"
MAIL_HASH = "c52c0ee5d84264471806290a3f2c4cecfc5490626bf912d01f240d7a274b371e"
DOMAIN_SEPARATOR = "f2cee375fa42b42143804025fc449deafd50cc031ca257e0b194a650a912090f"
DIGEST = "be609aee343fb3c4b28e1df9e632fca64fcfaede20f02e86244efddf30957bd2"

# The wallets of the example are derived from keccak256 of the name
COW_KEY = keys.PrivateKey(keccak(text="cow"))


@pytest.fixture
def hasher():
    config = make_config({**MAIL_TYPES, "SignedMail": SIGNED_MAIL}, pairs=[("Mail", "SignedMail")])
    return TypedDataHasher.from_config(config, DOMAIN)


class TestTypedDataHasher:
    def test_encode_type(self, hasher):
        assert hasher.encode_type("Mail") == "Mail(Person from,Person to,string contents)Person(string name,address wallet)"

    def test_type_hash(self, hasher):
        assert hasher.type_hash("Mail").hex() == MAIL_TYPE_HASH

    def test_struct_hash(self, hasher):
        assert hasher.hash_struct("Mail", MESSAGE).hex() == MAIL_HASH

    def test_domain_separator(self, hasher):
        assert hasher.domain_separator().hex() == DOMAIN_SEPARATOR

    def test_digest(self, hasher):
        assert hasher.digest("Mail", MESSAGE).hex() == DIGEST

    def test_digest_requires_pairing(self, hasher):
        with pytest.raises(InvalidPairingError):
            hasher.digest("Person", COW)

    def test_digest_requires_domain(self):
        config = make_config({**MAIL_TYPES, "SignedMail": SIGNED_MAIL}, pairs=[("Mail", "SignedMail")])
        with pytest.raises(ValueError):
            TypedDataHasher.from_config(config).digest("Mail", MESSAGE)

    def test_struct_hash_depends_on_field_order(self):
        reordered = {"Person": [{"name": "wallet", "type": "address"}, {"name": "name", "type": "string"}]}
        original = TypedDataHasher.from_config(make_config(MAIL_TYPES))
        permuted = TypedDataHasher.from_config(make_config(reordered))
        assert original.hash_struct("Person", COW) != permuted.hash_struct("Person", COW)


class TestArrays:
    def test_empty_array_hashes_empty_bytes(self, hasher):
        assert hasher.hash_array("Person[]", []) == keccak(b"")
        assert hasher.hash_array("uint256[]", []) == keccak(b"")

    def test_struct_array_concatenates_element_hashes(self, hasher):
        expected = keccak(hasher.hash_struct("Person", COW) + hasher.hash_struct("Person", BOB))
        assert hasher.hash_array("Person[]", [COW, BOB]) == expected

    def test_primitive_array_encodes_each_element(self, hasher):
        expected = keccak(encode(["uint256"], [1]) + encode(["uint256"], [2]))
        assert hasher.hash_array("uint256[]", [1, 2]) == expected

    def test_string_array_hashes_each_element(self, hasher):
        expected = keccak(keccak(text="a") + keccak(text="b"))
        assert hasher.hash_array("string[]", ["a", "b"]) == expected

    def test_array_field_embeds_array_hash(self):
        types = {"Person": MAIL_TYPES["Person"], "Group": [{"name": "members", "type": "Person[]"}]}
        hasher = TypedDataHasher.from_config(make_config(types))
        expected = keccak(hasher.type_hash("Group") + hasher.hash_array("Person[]", [COW]))
        assert hasher.hash_struct("Group", {"members": [COW]}) == expected


class TestSignerRecovery:
    def _signed(self, hasher, v_offset=0):
        signature = COW_KEY.sign_msg_hash(hasher.digest("Mail", MESSAGE)).to_bytes()
        signature = signature[:64] + bytes([signature[64] + v_offset])
        return {"mail": MESSAGE, "signature": signature}

    @pytest.mark.parametrize("v_offset", [0, 27])
    def test_recovers_signer(self, hasher, v_offset):
        assert hasher.recover_signer("SignedMail", self._signed(hasher, v_offset)) == COW["wallet"]

    def test_hex_signature(self, hasher):
        signed = self._signed(hasher)
        signed["signature"] = "0x" + signed["signature"].hex()
        assert hasher.recover_signer("SignedMail", signed) == COW["wallet"]

    def test_unpaired_envelope(self, hasher):
        with pytest.raises(InvalidPairingError):
            hasher.recover_signer("Mail", MESSAGE)

    def test_short_signature(self):
        with pytest.raises(InvalidSignatureFormat):
            recover(b"\x00" * 32, b"\x00" * 64)

    def test_short_digest(self):
        with pytest.raises(InvalidSignatureFormat):
            recover(b"\x00" * 31, b"\x00" * 65)

    def test_invalid_recovery_id(self):
        with pytest.raises(InvalidSignatureFormat):
            recover(b"\x00" * 32, b"\x01" * 64 + bytes([5]))
