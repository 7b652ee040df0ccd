"""EIP-712 Solidity Generator

A Python package for generating Solidity typed-data helpers (type hashes,
packet hash, digest and signer getters) and their documentation from a
declarative EIP-712 type schema.
"""

__version__ = "1.0.0"

from .hashing import TypedDataHasher
from .pipeline import (
    AtomicWriter,
    CodeGenerationError,
    CodeGeneratorConfig,
    ContractConfig,
    GenerationOutput,
    NamingMode,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "GenerationOutput",
    "CodeGeneratorConfig",
    "ContractConfig",
    "NamingMode",
    "OutputConfig",
    "OutputMode",
    "CodeGenerationError",
    "AtomicWriter",
    "TypedDataHasher",
]
