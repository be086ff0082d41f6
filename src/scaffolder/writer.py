"""Staged, all-or-nothing writing of generated artifacts.

Each artifact is first written to a hidden sibling file next to its final
location.  The post-generation quality gates inspect the staged files, and
only then are they moved into place with :func:`os.replace`.  If a gate
fails, :meth:`StagedWrite.rollback` removes the staged files and every
directory the staging step created, leaving the project tree untouched.
"""

from __future__ import annotations

import os
from pathlib import Path

from src.scaffolder.generator import GeneratedArtifact


def staged_name(final: Path) -> Path:
    """``page.tsx`` is staged as ``.page.staged.tsx`` in the same directory.

    The real suffix is kept last so tools that dispatch on the extension
    (the TypeScript compiler) still accept the staged file.
    """
    return final.with_name(f".{final.stem}.staged{final.suffix}")


class StagedWrite:
    """Write a batch of artifacts below *project_root* atomically per file.

    Usage::

        staged = StagedWrite(project_root, artifacts)
        staged.stage()
        try:
            run_gates(staged.staged_path(page))
        except GateFailure:
            staged.rollback()
            raise
        staged.commit()
    """

    def __init__(self, project_root: str | Path, artifacts: list[GeneratedArtifact]) -> None:
        self.project_root = Path(project_root)
        self.artifacts = list(artifacts)
        self._staged: dict[Path, Path] = {}
        self._created_dirs: list[Path] = []

    # -- Public API --------------------------------------------------------

    def final_path(self, relative: str) -> Path:
        """Absolute final location of an artifact path."""
        return self.project_root / relative

    def staged_path(self, relative: str) -> Path:
        """Absolute staged location of an artifact path (after :meth:`stage`)."""
        return self._staged[self.final_path(relative)]

    @property
    def created_dirs(self) -> list[Path]:
        return list(self._created_dirs)

    def stage(self) -> list[Path]:
        """Create missing directories and write every artifact to its temp file.

        If any artifact cannot be staged, everything staged so far is rolled
        back before the error propagates.

        Returns:
            The staged file paths, in artifact order.
        """
        try:
            for artifact in self.artifacts:
                final = self.final_path(artifact.path)
                self._make_parents(final.parent)
                temp = staged_name(final)
                temp.write_bytes(artifact.content.encode("utf-8"))
                self._staged[final] = temp
        except BaseException:
            self.rollback()
            raise
        return list(self._staged.values())

    def commit(self) -> list[Path]:
        """Move every staged file onto its final path, overwriting.

        Returns:
            The final file paths, in artifact order.
        """
        written: list[Path] = []
        for final, temp in self._staged.items():
            os.replace(temp, final)
            written.append(final)
        self._staged.clear()
        self._created_dirs.clear()
        return written

    def rollback(self) -> None:
        """Discard staged files and remove directories created by :meth:`stage`."""
        for temp in self._staged.values():
            temp.unlink(missing_ok=True)
        self._staged.clear()

        # Deepest first; a directory that gained other content is kept.
        for directory in reversed(self._created_dirs):
            if directory.is_dir() and not any(directory.iterdir()):
                directory.rmdir()
        self._created_dirs.clear()

    # -- Internal helpers --------------------------------------------------

    def _make_parents(self, directory: Path) -> None:
        """``mkdir -p`` that remembers which directories it created."""
        missing: list[Path] = []
        current = directory
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent
        for path in reversed(missing):
            path.mkdir(exist_ok=True)
            self._created_dirs.append(path)
