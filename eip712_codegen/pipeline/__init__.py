"""
Pipeline - EIP-712 type graph to Solidity generator.

This module provides a multi-phase architecture for generating Solidity
typed-data helpers from a declarative type schema:

1. Phase 1 (Schema): Merge baseline and extension types into one schema
2. Phase 2 (Analyzer): Resolve references, walk the type graph and derive artifacts
3. Phase 3 (Documentation): Render one page per type and accessor
4. Phase 4 (Assembler): Concatenate artifacts into the Solidity bundle
5. Phase 5 (Writer): Optional atomic write of the bundle and documentation
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, ContractConfig, NamingMode, OutputConfig, OutputMode
from .errors import (
    CodeGenerationError,
    CodeWriteError,
    InvalidPairingError,
    InvalidSignatureFormat,
    NameCollisionError,
    SchemaResolutionError,
)
from .generator import GenerationOutput, PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "GenerationOutput",
    "CodeGeneratorConfig",
    "ContractConfig",
    "NamingMode",
    "OutputConfig",
    "OutputMode",
    "CodeGenerationError",
    "CodeWriteError",
    "InvalidPairingError",
    "InvalidSignatureFormat",
    "NameCollisionError",
    "SchemaResolutionError",
    "AtomicWriter",
]
