"""
Schema node definitions.

A schema is an ordered arena of type definitions indexed by name. Fields refer
to other types by name only, never by object, so self and mutual references
cannot create ownership cycles.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldDef:
    """A single named member of a type; its position is part of the type identity."""

    name: str
    type: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class TypeDef:
    """A named record type with an ordered list of fields."""

    name: str
    fields: tuple[FieldDef, ...] = ()

    # Where the type was declared ("baseline" or "extension")
    origin: str = "extension"


@dataclass(frozen=True)
class TypeRef:
    """A resolved reference to a type, possibly wrapped in one or more array levels.

    Attributes:
        base: Primitive tag or declared type name
        depth: Number of "[]" suffixes (0 for a plain reference)
        is_primitive: Whether the base is a primitive tag
    """

    base: str
    depth: int = 0
    is_primitive: bool = False

    @property
    def is_array(self) -> bool:
        return self.depth > 0

    @property
    def element(self) -> TypeRef:
        """The type one array level down."""
        if not self.is_array:
            raise ValueError(f"{self.type_string} is not an array type")
        return TypeRef(self.base, self.depth - 1, self.is_primitive)

    @property
    def type_string(self) -> str:
        return self.base + "[]" * self.depth


@dataclass(frozen=True)
class Schema:
    """Merged, ordered, read-only collection of type definitions."""

    types: tuple[TypeDef, ...] = ()
    _index: dict[str, int] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self._index:
            self._index.update({type_def.name: i for i, type_def in enumerate(self.types)})

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[TypeDef]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def get(self, name: str) -> TypeDef | None:
        index = self._index.get(name)
        return None if index is None else self.types[index]

    def __getitem__(self, name: str) -> TypeDef:
        type_def = self.get(name)
        if type_def is None:
            raise KeyError(name)
        return type_def

    @property
    def names(self) -> list[str]:
        return [type_def.name for type_def in self.types]

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Plain mapping form, as consumed by the typed-data encoder."""
        return {type_def.name: [f.to_dict() for f in type_def.fields] for type_def in self.types}
