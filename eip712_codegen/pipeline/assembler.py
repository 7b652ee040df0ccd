"""
Artifact assembler.

Concatenates a generation result into one Solidity source file in a fixed
section order: header, struct declarations, type hash constants, domain
initialization, packet hash getters, digest getters, signer getters.
"""

from __future__ import annotations

from dataclasses import dataclass

from .analyzer.artifacts import GenerationResult
from .analyzer.name_resolver import NameResolver
from .config import ContractConfig
from .errors import SchemaResolutionError
from .schema.nodes import Schema, TypeRef
from .schema.primitives import PrimitiveKind, primitive_kind
from .templates import render

_ARTIFACT_SEPARATOR = "\n\n"

# Domain fields filled from the execution context instead of the constructor
CONTEXT_DOMAIN_FIELDS = {
    "chainId": "block.chainid",
    "verifyingContract": "address(this)",
}


@dataclass(frozen=True)
class DomainParameter:
    name: str
    declaration: str


class ArtifactAssembler:
    """Renders the final Solidity bundle."""

    def __init__(self, contract: ContractConfig, names: NameResolver, generation_command: str = ""):
        self.contract = contract
        self.names = names
        self.generation_command = generation_command

    def domain_initializer(self, schema: Schema, domain_type: str) -> str:
        """
        Render the constructor setting the immutable domain separator.

        Raises:
            SchemaResolutionError: If the domain type is not declared
        """
        domain = schema.get(domain_type)
        if domain is None:
            raise SchemaResolutionError(domain_type, "", domain_type, "the domain type must be declared in the baseline schema")

        parameters: list[DomainParameter] = []
        assignments: list[str] = []
        for field in domain.fields:
            if field.name in CONTEXT_DOMAIN_FIELDS:
                assignments.append(f"{field.name}: {CONTEXT_DOMAIN_FIELDS[field.name]}")
                continue
            parameters.append(DomainParameter(field.name, f"{self._declaration_type(field.type)} ${field.name}"))
            assignments.append(f"{field.name}: ${field.name}")

        return render(
            "solidity/domain.sol.jinja2",
            parameters=parameters,
            parameter_list=",\n        ".join(p.declaration for p in parameters),
            assignment_list=",\n            ".join(assignments),
            packet_hash_getter=self.names.packet_hash_getter_name(TypeRef(domain_type)),
            library_name=self.names.library_name,
            domain_type=domain_type,
        )

    def assemble(self, result: GenerationResult, domain_initializer: str) -> str:
        """Concatenate all sections; identical inputs give byte-identical output."""
        source = render(
            "solidity/contract.sol.jinja2",
            contract=self.contract,
            library_name=self.names.library_name,
            generation_command=self.generation_command,
            structs=_ARTIFACT_SEPARATOR.join(a.body for a in result.structs),
            type_hashes=_ARTIFACT_SEPARATOR.join(a.body for a in result.type_hashes),
            domain_initializer=domain_initializer,
            packet_hash_getters=_ARTIFACT_SEPARATOR.join(a.body for a in result.packet_hash_getters),
            digest_getters=_ARTIFACT_SEPARATOR.join(a.body for a in result.digest_getters),
            signer_getters=_ARTIFACT_SEPARATOR.join(a.body for a in result.signer_getters),
        )
        return source + "\n"

    def _declaration_type(self, type_string: str) -> str:
        base = type_string.split("[", 1)[0]
        kind = primitive_kind(base)
        if kind == PrimitiveKind.FIXED and "[" not in type_string:
            return type_string
        if kind is not None:
            return f"{type_string} memory"
        return f"{self.names.library_name}.{type_string} memory"
