"""
Error taxonomy for the generation pipeline.

Every error is fatal to the current run: generation is all-or-nothing and
nothing is retried, since a failure always points at a schema or
configuration defect.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for all generation failures."""

    pass


class SchemaResolutionError(CodeGenerationError):
    """Raised when a field references a type that is neither primitive nor declared."""

    def __init__(self, type_name: str, field_name: str, referenced_type: str, reason: str = "undeclared type"):
        self.type_name = type_name
        self.field_name = field_name
        self.referenced_type = referenced_type
        super().__init__(f"Cannot resolve type '{referenced_type}' of field '{field_name}' in type '{type_name}': {reason}")


class NameCollisionError(CodeGenerationError):
    """Raised when two types resolve to the same type name, constant or accessor name."""

    def __init__(self, name: str, owners: list[str], rule: str):
        self.name = name
        self.owners = owners
        super().__init__(f"Name collision on '{name}' between {', '.join(owners)}: {rule}")


class InvalidPairingError(CodeGenerationError):
    """Raised when the pairing policy references a missing or malformed type pair."""

    def __init__(self, payload_type: str, envelope_type: str, reason: str):
        self.payload_type = payload_type
        self.envelope_type = envelope_type
        super().__init__(f"Invalid pairing ({payload_type}, {envelope_type}): {reason}")


class InvalidSignatureFormat(CodeGenerationError):
    """Raised by the recovery collaborator on a malformed signature or digest."""

    pass


class CodeWriteError(CodeGenerationError):
    """Raised when generated output fails validation before being written."""

    pass
