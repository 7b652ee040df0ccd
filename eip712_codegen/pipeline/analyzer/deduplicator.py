"""
Artifact deduplication.

Many parents may reference the same nested or array type, so the same getter
is emitted more than once. Deduplication keeps the first occurrence and the
relative order of the rest, which keeps regenerated output diff-friendly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from ..errors import NameCollisionError
from .artifacts import Artifact

A = TypeVar("A", bound=Artifact)


class Deduplicator:
    """Collapses artifacts sharing a key, first occurrence wins."""

    def deduplicate(self, artifacts: Iterable[A]) -> list[A]:
        """
        Deduplicate artifacts by key.

        Raises:
            NameCollisionError: If two artifacts share a key but differ in body,
                which would silently drop generated code
        """
        kept: dict[str, A] = {}
        for artifact in artifacts:
            first = kept.get(artifact.key)
            if first is None:
                kept[artifact.key] = artifact
            elif first.body != artifact.body:
                raise NameCollisionError(artifact.key, [first.type_name, artifact.type_name], "accessors with the same signature must be identical")
        return list(kept.values())
