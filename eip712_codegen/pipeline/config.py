"""
Configuration for the generation pipeline.

A run is described by the contract metadata, the naming mode, the caller's
extension types and the explicit pairing policy for digest and signer getters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NamingMode(str, Enum):
    """How packet hash, digest and signer accessors are named."""

    QUALIFIED = "qualified"  # getPersonHash, getMailDigest, ...
    OVERLOADED = "overloaded"  # getHash, getDigest, ... resolved by parameter type


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate the bundle before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class ContractConfig:
    """Metadata of the generated library and abstract contract."""

    name: str = "Types"
    license: str = "MIT"
    solidity: str = "^0.8.23"
    authors: list[str] = field(default_factory=list)


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    contract: ContractConfig = field(default_factory=ContractConfig)

    naming_mode: NamingMode = NamingMode.QUALIFIED

    # Caller supplied types, merged after the baseline (type name -> fields)
    types: dict[str, list[dict[str, str]]] = field(default_factory=dict)

    # Baseline types; None means the built-in EIP712Domain baseline
    baseline_types: dict[str, list[dict[str, str]]] | None = None

    # Explicit (payload type, envelope type) pairs for digest and signer getters
    pairs: list[tuple[str, str]] = field(default_factory=list)

    # Add the generating command line to the file header
    add_generation_comment: bool = True

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "contract" and isinstance(v, dict):
                config.contract = ContractConfig(**v)
            elif k == "naming_mode":
                config.naming_mode = NamingMode(v)
            elif k == "pairs":
                config.pairs = [tuple(pair) for pair in v]
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "contract": {
                "name": self.contract.name,
                "license": self.contract.license,
                "solidity": self.contract.solidity,
                "authors": list(self.contract.authors),
            },
            "naming_mode": self.naming_mode.value,
            "types": self.types,
            "baseline_types": self.baseline_types,
            "pairs": [list(pair) for pair in self.pairs],
            "add_generation_comment": self.add_generation_comment,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
