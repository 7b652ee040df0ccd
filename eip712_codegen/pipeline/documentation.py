"""
Documentation emitter.

Renders one Markdown page per declared type and per public accessor. Page
paths always use the qualified accessor name, so overloaded accessors that
share a Solidity name still get distinct pages.
"""

from __future__ import annotations

import re

from .analyzer.artifacts import (
    Artifact,
    DigestGetter,
    DocumentationPage,
    PacketHashGetter,
    SignerGetter,
    TypeArtifacts,
)
from .analyzer.name_resolver import NameResolver
from .config import NamingMode
from .schema.nodes import TypeRef
from .schema.primitives import is_primitive
from .templates import render

_TYPE_SEGMENT = re.compile(r"[^()]+\([^)]*\)")


def _split_type(type_string: str) -> TypeRef:
    base = type_string.split("[", 1)[0]
    return TypeRef(base, type_string.count("[]"), is_primitive(base))


def typescript_type(type_ref: TypeRef) -> str:
    """TypeScript (viem/abitype style) representation of a field type."""
    if type_ref.is_array:
        return f"Array<{typescript_type(type_ref.element)}>"
    base = type_ref.base
    if not type_ref.is_primitive:
        return base
    if base == "address" or base.startswith("bytes"):
        return "`0x${string}`"
    if base.startswith("uint") or base.startswith("int"):
        return "bigint"
    if base == "bool":
        return "boolean"
    return "string"


class DocumentationEmitter:
    """Renders documentation pages for a generation result."""

    def __init__(self, names: NameResolver, source_name: str = "Types.sol"):
        self.names = names
        self.source_name = source_name

    def type_link(self, type_string: str) -> str:
        type_ref = _split_type(type_string)
        if type_ref.is_primitive:
            return f"`{type_string}`"
        return f"[{type_string}](/generated/base-types/{type_ref.base})"

    def type_page(self, type_artifacts: TypeArtifacts) -> DocumentationPage:
        type_def = type_artifacts.type_def
        type_hash = type_artifacts.type_hash

        nested = []
        for field in type_def.fields:
            type_ref = _split_type(field.type)
            if not type_ref.is_primitive and type_ref.base not in nested:
                nested.append(type_ref.base)

        content = render(
            "docs/base_type.md.jinja2",
            type_name=type_def.name,
            contract_name=self.names.contract_name,
            nested_links=[self.type_link(name) for name in nested],
            typescript_fields=[f"{field.name}: {typescript_type(_split_type(field.type))}" for field in type_def.fields],
            fields=type_def.fields,
            field_names=[f"`{field.name}`" for field in type_def.fields],
            type_hash_name=type_hash.name,
            type_segments=_TYPE_SEGMENT.findall(type_hash.encoded_type),
            encoded_type=type_hash.encoded_type,
            type_hash=type_hash.type_hash,
        )
        return DocumentationPage(path=f"/base-types/{type_def.name}.md", content=content)

    def packet_hash_page(self, getter: PacketHashGetter) -> DocumentationPage:
        type_ref = getter.type_ref or _split_type(getter.type_name)
        slug = self.names.packet_hash_getter_name(type_ref, NamingMode.QUALIFIED)
        type_name = getter.type_name

        if type_ref.is_array:
            element = type_ref.element.type_string
            summary = f"Encode an array of {element} into a hash and verify the decoded data to verify type compliance."
            description = f"Encode an array of {self.type_link(element)} into a hash and verify the decoded data from a hash to verify type compliance."
            return_description = f"The hash of the encoded {self.type_link(type_name)} array data."
        else:
            summary = f"Encode a {type_name} into a hash and verify the decoded data to verify type compliance."
            description = f"Encode a {self.type_link(type_name)} into a hash and verify the decoded {self.type_link(type_name)} data from a hash to verify type compliance."
            return_description = f"The packet hash of the encoded {self.type_link(type_name)} data."

        usage = (
            f"With `{getter.name}` you can call the function as a `read` and get the encoded data back as a hash.\n\n"
            f"This is helpful in times when you need to build a message hash without tracking down all the types "
            f"as well as when you need to verify a signed message hash containing a `{type_name}` data type."
        )
        return self._getter_page(
            f"/hash-getters/{slug}.md",
            getter,
            summary=summary,
            description=description,
            return_name="$hash",
            return_type="bytes32",
            return_description=return_description,
            usage=usage,
        )

    def digest_page(self, getter: DigestGetter) -> DocumentationPage:
        slug = self.names.digest_getter_name(getter.type_name, NamingMode.QUALIFIED)
        type_link = self.type_link(getter.type_name)
        return self._getter_page(
            f"/digest-getters/{slug}.md",
            getter,
            summary=f"Encode {getter.type_name} data into a digest hash that has been localized to the domain of the contract.",
            description=f"Encode {type_link} data into a digest hash that has been localized to the domain of the contract.",
            return_name="$digest",
            return_type="bytes32",
            return_description=f"The digest hash of the encoded {type_link} data.",
        )

    def signer_page(self, getter: SignerGetter) -> DocumentationPage:
        slug = self.names.signer_getter_name(getter.type_name, NamingMode.QUALIFIED)
        type_link = self.type_link(getter.type_name)
        return self._getter_page(
            f"/signer-getters/{slug}.md",
            getter,
            summary=f"Get the signer of a {getter.type_name} data type.",
            description=f"Get the signer of a {type_link} data type, recovered from the digest of its `{getter.payload_field}` and its signature.",
            return_name="$signer",
            return_type="address",
            return_description=f"The signer of the {type_link} data.",
        )

    def emit(
        self,
        types: list[TypeArtifacts],
        packet_hash_getters: list[PacketHashGetter],
        digest_getters: list[DigestGetter],
        signer_getters: list[SignerGetter],
    ) -> list[DocumentationPage]:
        """All pages: types, then hash, digest and signer getters."""
        pages = [self.type_page(t) for t in types]
        pages += [self.packet_hash_page(g) for g in packet_hash_getters]
        pages += [self.digest_page(g) for g in digest_getters]
        pages += [self.signer_page(g) for g in signer_getters]
        return pages

    def _getter_page(self, path: str, artifact: Artifact, **context) -> DocumentationPage:
        content = render(
            "docs/getter.md.jinja2",
            name=artifact.name,
            input_link=self.type_link(artifact.type_name),
            input_type=artifact.type_name,
            source_name=self.source_name,
            implementation=artifact.implementation.strip("\n"),
            usage=context.pop("usage", ""),
            **context,
        )
        return DocumentationPage(path=path, content=content)
