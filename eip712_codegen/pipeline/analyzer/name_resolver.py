"""
Name resolver for generated Solidity artifacts.

Every name is a pure function of (type, array depth, naming mode), so the
same schema always yields the same names.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...utils import to_upper_snake_case, upper_first
from ..config import NamingMode
from ..errors import NameCollisionError
from ..schema.nodes import Schema, TypeRef


class NameResolver:
    """Derives constant, accessor and documentation names."""

    def __init__(self, contract_name: str, naming_mode: NamingMode = NamingMode.QUALIFIED):
        """
        Initialize the resolver.

        Args:
            contract_name: Contract name; structs live in `<contract_name>Lib`
            naming_mode: Qualified or overloaded accessor names
        """
        self.contract_name = contract_name
        self.naming_mode = naming_mode

    @property
    def library_name(self) -> str:
        return f"{self.contract_name}Lib"

    def type_hash_name(self, type_name: str) -> str:
        """Constant holding the type hash, e.g. `MAIL_TYPEHASH`."""
        return f"{to_upper_snake_case(type_name)}_TYPEHASH"

    def qualified_stem(self, type_ref: TypeRef) -> str:
        """Name fragment identifying a type in qualified accessor names.

        Nested arrays stack the suffix: `Person[][]` -> `PersonArrayArray` when
        used as an array element.
        """
        return upper_first(type_ref.base) + "Array" * type_ref.depth

    def packet_hash_getter_name(self, type_ref: TypeRef, naming_mode: NamingMode | None = None) -> str:
        mode = naming_mode or self.naming_mode
        if type_ref.is_array:
            if mode == NamingMode.OVERLOADED:
                return "getArrayHash"
            return f"get{self.qualified_stem(type_ref.element)}ArrayHash"

        if mode == NamingMode.OVERLOADED:
            return "getHash"
        return f"get{self.qualified_stem(type_ref)}Hash"

    def digest_getter_name(self, type_name: str, naming_mode: NamingMode | None = None) -> str:
        if (naming_mode or self.naming_mode) == NamingMode.OVERLOADED:
            return "getDigest"
        return f"get{upper_first(type_name)}Digest"

    def signer_getter_name(self, type_name: str, naming_mode: NamingMode | None = None) -> str:
        if (naming_mode or self.naming_mode) == NamingMode.OVERLOADED:
            return "getSigner"
        return f"get{upper_first(type_name)}Signer"

    def parameter_type(self, type_ref: TypeRef) -> str:
        """Solidity type of an accessor parameter (without data location)."""
        if type_ref.is_primitive:
            return type_ref.type_string
        return f"{self.library_name}.{type_ref.type_string}"

    def check_collisions(self, schema: Schema, array_refs: Iterable[TypeRef] = ()) -> None:
        """
        Check that constant and qualified accessor names are injective.

        Qualified names are checked in both modes: overloaded accessors share a
        Solidity name, but their documentation pages are named after the
        qualified accessor.

        Raises:
            NameCollisionError: On the first name claimed by two different owners
        """
        self._check_unique(
            ((self.type_hash_name(type_def.name), type_def.name) for type_def in schema),
            "type hash constants must be unique",
        )

        # A type named `FooArray` and a `Foo[]` field both claim `getFooArrayHash`
        owners = [(self.packet_hash_getter_name(TypeRef(type_def.name), NamingMode.QUALIFIED), type_def.name) for type_def in schema]
        owners += [(self.packet_hash_getter_name(type_ref, NamingMode.QUALIFIED), type_ref.type_string) for type_ref in array_refs]
        self._check_unique(owners, "packet hash getter names must be unique")

        self._check_unique(
            ((self.digest_getter_name(type_def.name, NamingMode.QUALIFIED), type_def.name) for type_def in schema),
            "digest getter names must be unique",
        )

    @staticmethod
    def _check_unique(pairs, rule: str) -> None:
        seen: dict[str, str] = {}
        for name, owner in pairs:
            if name in seen and seen[name] != owner:
                raise NameCollisionError(name, [seen[name], owner], rule)
            seen.setdefault(name, owner)
