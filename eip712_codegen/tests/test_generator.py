"""
End-to-end tests for the generation pipeline.
"""

from __future__ import annotations

import pytest
from conftest import MAIL_TYPES, MAIL_WITH_SIGNERS_TYPES, PERSON, SIGNED_MAIL, make_config

from eip712_codegen.pipeline import (
    InvalidPairingError,
    NameCollisionError,
    NamingMode,
    PipelineGenerator,
    SchemaResolutionError,
)


class TestPipelineGenerator:
    def test_deterministic(self, paired_mail_config):
        first = PipelineGenerator(paired_mail_config).run()
        second = PipelineGenerator(paired_mail_config).run()
        assert first.source == second.source
        assert first.documentation == second.documentation

    def test_analysis_keys_are_unique(self, paired_mail_config):
        generator = PipelineGenerator(paired_mail_config)
        result = generator.analyze(generator.build_schema())
        for artifacts in (result.structs, result.type_hashes, result.packet_hash_getters, result.digest_getters, result.signer_getters):
            keys = [a.key for a in artifacts]
            assert len(keys) == len(set(keys))

    def test_shared_array_getter_appears_once(self):
        types = {
            "Person": PERSON,
            "Team": [{"name": "members", "type": "Person[]"}],
            "Club": [{"name": "members", "type": "Person[]"}, {"name": "guests", "type": "Person[]"}],
        }
        source = PipelineGenerator(make_config(types)).generate()
        assert source.count("function getPersonArrayHash(") == 1
        assert source.count("getPersonArrayHash($input.") == 3

    def test_every_array_getter_has_a_referencing_field(self):
        source = PipelineGenerator(make_config(MAIL_WITH_SIGNERS_TYPES)).generate()
        assert source.count("function getPersonArrayHash(") == 1
        assert "getPersonArrayHash($input.signers)" in source
        assert "ArrayHash(" not in source.replace("getPersonArrayHash(", "")

    def test_unpaired_schema_has_no_digests_or_signers(self, mail_config):
        generator = PipelineGenerator(mail_config)
        result = generator.analyze(generator.build_schema())
        assert result.digest_getters == ()
        assert result.signer_getters == ()

    def test_overloaded_mode(self):
        config = make_config({**MAIL_WITH_SIGNERS_TYPES, "SignedMail": SIGNED_MAIL}, pairs=[("Mail", "SignedMail")])
        config.naming_mode = NamingMode.OVERLOADED
        generator = PipelineGenerator(config)
        result = generator.analyze(generator.build_schema())
        assert [g.key for g in result.packet_hash_getters] == [
            "getHash(MailLib.EIP712Domain)",
            "getHash(MailLib.Person)",
            "getHash(MailLib.Mail)",
            "getArrayHash(MailLib.Person[])",
            "getHash(MailLib.SignedMail)",
        ]
        assert [g.key for g in result.digest_getters] == ["getDigest(MailLib.Mail)"]
        assert [g.key for g in result.signer_getters] == ["getSigner(MailLib.SignedMail)"]
        source = generator.generate()
        assert "domainHash = getHash(MailLib.EIP712Domain({" in source

    def test_custom_baseline(self):
        config = make_config(MAIL_TYPES)
        config.baseline_types = {"EIP712Domain": [{"name": "name", "type": "string"}]}
        source = PipelineGenerator(config).generate()
        assert "EIP712Domain(string name)" in source
        assert "string memory $version" not in source


class TestFailures:
    @pytest.mark.parametrize(
        "types, pairs, error",
        [
            ({"Mail": [{"name": "from", "type": "Ghost"}]}, [], SchemaResolutionError),
            ({"EIP712Domain": PERSON}, [], NameCollisionError),
            ({"FooBar": PERSON, "Foo_Bar": PERSON}, [], NameCollisionError),
            ({"address": PERSON, "Box": [{"name": "owner", "type": "address"}]}, [], SchemaResolutionError),
            ({"Empty": [], "Box": PERSON}, [], SchemaResolutionError),
            (MAIL_TYPES, [("Mail", "SignedMail")], InvalidPairingError),
        ],
    )
    def test_generation_is_all_or_nothing(self, types, pairs, error):
        with pytest.raises(error):
            PipelineGenerator(make_config(types, pairs=pairs)).run()
