"""Exception hierarchy for the CRUD generator.

Every failure the CLI reports as a non-zero exit derives from
:class:`GeneratorError`.  Messages are human-readable and prefixed; there are
no structured error codes.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator failures."""


class EntityTypeNotFound(GeneratorError):
    """Raised when an entity type key is not present in the preset registry."""

    def __init__(self, entity_type: str, available: list[str]) -> None:
        self.entity_type = entity_type
        self.available = list(available)
        super().__init__(f"Entity type '{entity_type}' not found.")


class GateFailure(GeneratorError):
    """Raised by a quality gate.  Aborts the whole generation run."""

    def __init__(self, gate: str, message: str) -> None:
        self.gate = gate
        self.detail = message
        super().__init__(f"QUALITY GATE FAILURE [{gate}]: {message}")


class DependencyGateFailure(GateFailure):
    """Raised once with every unresolved component import collected."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "dependencies",
            "Missing component dependencies: " + ", ".join(self.missing),
        )


class DuplicateImportError(GeneratorError):
    """Raised when rendered output imports the same binding twice.

    This is a renderer defect, never a problem with the preset or the CLI
    input.
    """

    def __init__(self, artifact: str, names: list[str]) -> None:
        self.artifact = artifact
        self.names = list(names)
        super().__init__(
            f"Duplicate import binding(s) in generated {artifact}: {', '.join(self.names)}"
        )
