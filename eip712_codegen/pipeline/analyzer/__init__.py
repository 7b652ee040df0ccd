"""
Analyzer module.

Phase 2 of the pipeline: resolve references and derive every artifact.
"""

from __future__ import annotations

from .artifacts import (
    Artifact,
    ArtifactKind,
    DigestGetter,
    DocumentationPage,
    GenerationResult,
    PacketHashGetter,
    SignerGetter,
    StructDecl,
    TypeArtifacts,
    TypeHashConst,
)
from .deduplicator import Deduplicator
from .encoders import ArrayEncoderGenerator, PacketHashEncoderGenerator
from .name_resolver import NameResolver
from .pairing import PairedDigestSignerGenerator, Pairing, PairingPolicy
from .reference_resolver import ReferenceResolver
from .type_graph import TypeGraphWalker, WalkResult

__all__ = [
    "Artifact",
    "ArtifactKind",
    "DigestGetter",
    "DocumentationPage",
    "GenerationResult",
    "PacketHashGetter",
    "SignerGetter",
    "StructDecl",
    "TypeArtifacts",
    "TypeHashConst",
    "Deduplicator",
    "ArrayEncoderGenerator",
    "PacketHashEncoderGenerator",
    "NameResolver",
    "PairedDigestSignerGenerator",
    "Pairing",
    "PairingPolicy",
    "ReferenceResolver",
    "TypeGraphWalker",
    "WalkResult",
]
