"""
Pipeline generator.

Runs one generation pass:

1. Merge the baseline and extension schemas
2. Walk the type graph (structs, type hashes, packet hash getters)
3. Validate the pairing policy and generate digest and signer getters
4. Deduplicate getters
5. Emit documentation pages
6. Assemble the Solidity bundle

A pass either returns a complete output or raises; nothing partial is exposed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .analyzer.artifacts import DocumentationPage, GenerationResult
from .analyzer.deduplicator import Deduplicator
from .analyzer.name_resolver import NameResolver
from .analyzer.pairing import PairedDigestSignerGenerator, PairingPolicy
from .analyzer.type_graph import TypeGraphWalker
from .assembler import ArtifactAssembler
from .collaborators import TypeEncoder, encode_type
from .config import CodeGeneratorConfig
from .documentation import DocumentationEmitter
from .schema.baseline import BASELINE_TYPES, DOMAIN_TYPE
from .schema.merger import SchemaMerger
from .schema.nodes import Schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationOutput:
    """The assembled Solidity source and its documentation pages."""

    source: str
    documentation: tuple[DocumentationPage, ...]


class PipelineGenerator:
    """Generates the Solidity bundle and documentation for one configuration."""

    def __init__(
        self,
        config: CodeGeneratorConfig,
        generation_command: str = "",
        type_encoder: TypeEncoder = encode_type,
    ):
        """
        Initialize the generator.

        Args:
            config: Generation configuration
            generation_command: Command line recorded in the file header when
                `config.add_generation_comment` is set
            type_encoder: Canonical type signature encoder
        """
        self.config = config
        self.type_encoder = type_encoder
        self.names = NameResolver(config.contract.name, config.naming_mode)
        self.assembler = ArtifactAssembler(
            config.contract,
            self.names,
            generation_command if config.add_generation_comment else "",
        )
        self.emitter = DocumentationEmitter(self.names, source_name=f"{config.contract.name}.sol")
        self.deduplicator = Deduplicator()

    def build_schema(self) -> Schema:
        baseline = BASELINE_TYPES if self.config.baseline_types is None else self.config.baseline_types
        return SchemaMerger().merge(baseline, self.config.types)

    def analyze(self, schema: Schema) -> GenerationResult:
        """Derive every artifact and documentation page of the schema."""
        walk = TypeGraphWalker(schema, self.names, self.type_encoder).walk()

        pairings = PairingPolicy(self.config.pairs).validate(schema)
        digests, signers = PairedDigestSignerGenerator(self.names, pairings).generate()

        packet_hash_getters = self.deduplicator.deduplicate(walk.packet_hash_getters)
        digest_getters = self.deduplicator.deduplicate(digests)
        signer_getters = self.deduplicator.deduplicate(signers)
        logger.debug(
            "Kept %d of %d packet hash getters after deduplication",
            len(packet_hash_getters),
            len(walk.packet_hash_getters),
        )

        documentation = self.emitter.emit(list(walk.types), packet_hash_getters, digest_getters, signer_getters)

        return GenerationResult(
            types=walk.types,
            packet_hash_getters=tuple(packet_hash_getters),
            digest_getters=tuple(digest_getters),
            signer_getters=tuple(signer_getters),
            documentation=tuple(documentation),
        )

    def run(self) -> GenerationOutput:
        """Run a full generation pass."""
        schema = self.build_schema()
        result = self.analyze(schema)
        domain_initializer = self.assembler.domain_initializer(schema, DOMAIN_TYPE)
        source = self.assembler.assemble(result, domain_initializer)
        logger.debug("Generated %s with %d types", self.config.contract.name, len(schema))
        return GenerationOutput(source=source, documentation=result.documentation)

    def generate(self) -> str:
        """Generate the Solidity source only."""
        return self.run().source
