"""Shared schemas for the generator tests."""

from __future__ import annotations

import copy

import pytest

from eip712_codegen.pipeline import CodeGeneratorConfig, ContractConfig

PERSON = [
    {"name": "name", "type": "string"},
    {"name": "wallet", "type": "address"},
]

MAIL = [
    {"name": "from", "type": "Person"},
    {"name": "to", "type": "Person"},
    {"name": "contents", "type": "string"},
]

SIGNED_MAIL = [
    {"name": "mail", "type": "Mail"},
    {"name": "signature", "type": "bytes"},
]

# Scenario A: the EIP-712 "Ether Mail" example
MAIL_TYPES = {"Person": PERSON, "Mail": MAIL}

# Scenario B: Mail with an array of Person signers
MAIL_WITH_SIGNERS_TYPES = {"Person": PERSON, "Mail": MAIL + [{"name": "signers", "type": "Person[]"}]}


def make_config(types: dict, pairs: list | None = None, **kwargs) -> CodeGeneratorConfig:
    config = CodeGeneratorConfig(
        contract=ContractConfig(name="Mail", license="MIT", solidity="^0.8.23", authors=["@alice"]),
        types=copy.deepcopy(types),
        pairs=list(pairs or []),
        add_generation_comment=False,
    )
    for k, v in kwargs.items():
        setattr(config, k, v)
    return config


@pytest.fixture
def mail_config() -> CodeGeneratorConfig:
    return make_config(MAIL_TYPES)


@pytest.fixture
def paired_mail_config() -> CodeGeneratorConfig:
    return make_config({**MAIL_TYPES, "SignedMail": SIGNED_MAIL}, pairs=[("Mail", "SignedMail")])
