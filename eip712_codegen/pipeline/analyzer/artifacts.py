"""
Artifact definitions.

Artifacts are the generated pieces of Solidity, each with a key used for
deduplication, a name and a rendered body. Their documentation pages are
emitted alongside them. Artifacts are created once per generation pass and
never mutated afterwards.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from enum import Enum

from ..schema.nodes import TypeDef, TypeRef


class ArtifactKind(Enum):
    """Kind of generated artifact."""

    STRUCT = "struct"
    TYPE_HASH = "type_hash"
    PACKET_HASH = "packet_hash"
    DIGEST = "digest"
    SIGNER = "signer"


@dataclass(frozen=True)
class DocumentationPage:
    """A Markdown page, with a path relative to the documentation root."""

    path: str
    content: str


@dataclass(frozen=True)
class Artifact:
    """A generated declaration.

    Attributes:
        kind: What kind of declaration this is
        name: Resolved Solidity name (shared between overloads)
        parameter_type: Solidity type of the single parameter, empty for
            structs and constants
        body: Rendered Solidity
        type_name: The schema type (or array type string) it belongs to
    """

    kind: ArtifactKind
    name: str
    body: str
    type_name: str
    parameter_type: str = ""

    @property
    def key(self) -> str:
        """Identity used for deduplication: the accessor's signature."""
        if self.parameter_type:
            return f"{self.name}({self.parameter_type})"
        return self.name

    @property
    def implementation(self) -> str:
        """The body without its NatSpec comment, dedented."""
        return textwrap.dedent(self.body.split("*/\n", 1)[-1])


@dataclass(frozen=True)
class StructDecl(Artifact):
    pass


@dataclass(frozen=True)
class TypeHashConst(Artifact):
    """Type hash constant.

    Attributes:
        encoded_type: Canonical EIP-712 type signature
        type_hash: Hex encoded keccak256 of `encoded_type`
    """

    encoded_type: str = ""
    type_hash: str = ""


@dataclass(frozen=True)
class PacketHashGetter(Artifact):
    """Packet hash getter for a type or an array type."""

    type_ref: TypeRef | None = None


@dataclass(frozen=True)
class DigestGetter(Artifact):
    pass


@dataclass(frozen=True)
class SignerGetter(Artifact):
    """Signer getter of an envelope type.

    Attributes:
        payload_type: Type of the signed payload field
        payload_field: Name of the signed payload field
    """

    payload_type: str = ""
    payload_field: str = ""


@dataclass(frozen=True)
class TypeArtifacts:
    """The struct declaration and type hash constant of one declared type."""

    type_def: TypeDef
    struct: StructDecl
    type_hash: TypeHashConst


@dataclass(frozen=True)
class GenerationResult:
    """The complete, immutable output of one generation pass."""

    types: tuple[TypeArtifacts, ...] = ()
    packet_hash_getters: tuple[PacketHashGetter, ...] = ()
    digest_getters: tuple[DigestGetter, ...] = ()
    signer_getters: tuple[SignerGetter, ...] = ()
    documentation: tuple[DocumentationPage, ...] = ()

    @property
    def structs(self) -> list[StructDecl]:
        return [t.struct for t in self.types]

    @property
    def type_hashes(self) -> list[TypeHashConst]:
        return [t.type_hash for t in self.types]
