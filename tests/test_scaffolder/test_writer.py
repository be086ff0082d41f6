"""Tests for staged artifact writing (src.scaffolder.writer)."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.scaffolder.generator import GeneratedArtifact
from src.scaffolder.writer import StagedWrite, staged_name

pytestmark = pytest.mark.unit


def _artifacts() -> list[GeneratedArtifact]:
    return [
        GeneratedArtifact(path="src/app/crm/leads/page.tsx", content="'use client'\n"),
        GeneratedArtifact(path="src/app/api/v1/crm/leads/route.ts", content="export {}\n"),
    ]


class TestStagedName:
    def test_keeps_suffix_last(self):
        assert staged_name(Path("a/page.tsx")) == Path("a/.page.staged.tsx")

    def test_json(self):
        assert staged_name(Path("entity.config.json")) == Path(".entity.config.staged.json")


class TestStagedWrite:
    def test_stage_writes_only_temp_files(self, tmp_path):
        staged = StagedWrite(tmp_path, _artifacts())
        temps = staged.stage()

        assert all(t.is_file() for t in temps)
        assert not (tmp_path / "src/app/crm/leads/page.tsx").exists()
        assert staged.staged_path("src/app/crm/leads/page.tsx").read_text() == "'use client'\n"

    def test_commit_moves_into_place(self, tmp_path):
        staged = StagedWrite(tmp_path, _artifacts())
        staged.stage()
        written = staged.commit()

        assert written == [
            tmp_path / "src/app/crm/leads/page.tsx",
            tmp_path / "src/app/api/v1/crm/leads/route.ts",
        ]
        assert written[0].read_text() == "'use client'\n"
        assert not list(tmp_path.rglob(".*.staged.*"))

    def test_commit_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "src/app/crm/leads/page.tsx"
        target.parent.mkdir(parents=True)
        target.write_text("old", encoding="utf-8")

        staged = StagedWrite(tmp_path, _artifacts())
        staged.stage()
        staged.commit()
        assert target.read_text() == "'use client'\n"

    def test_rollback_removes_temps_and_created_dirs(self, tmp_path):
        (tmp_path / "src").mkdir()
        staged = StagedWrite(tmp_path, _artifacts())
        staged.stage()
        assert staged.created_dirs

        staged.rollback()
        assert [p.name for p in tmp_path.iterdir()] == ["src"]
        assert list((tmp_path / "src").iterdir()) == []

    def test_rollback_keeps_preexisting_files(self, tmp_path):
        existing = tmp_path / "src/app/crm/leads/page.tsx"
        existing.parent.mkdir(parents=True)
        existing.write_text("keep me", encoding="utf-8")

        staged = StagedWrite(tmp_path, _artifacts())
        staged.stage()
        staged.rollback()

        assert existing.read_text() == "keep me"
        assert not (tmp_path / "src/app/api").exists()
        assert not list(tmp_path.rglob(".*.staged.*"))

    def test_content_written_byte_for_byte(self, tmp_path):
        artifact = GeneratedArtifact(path="x/README.md", content="line one\r\nunicode: é\n")
        staged = StagedWrite(tmp_path, [artifact])
        staged.stage()
        staged.commit()
        assert (tmp_path / "x/README.md").read_bytes() == "line one\r\nunicode: é\n".encode("utf-8")

    def test_failed_stage_cleans_up_earlier_artifacts(self, tmp_path):
        # A directory squatting on the route's temp name makes its write fail.
        blocker = tmp_path / "src/app/api/v1/crm/leads/.route.staged.ts"
        blocker.mkdir(parents=True)
        before = sorted(p.relative_to(tmp_path).as_posix() for p in tmp_path.rglob("*"))

        staged = StagedWrite(tmp_path, _artifacts())
        with pytest.raises(OSError):
            staged.stage()

        after = sorted(p.relative_to(tmp_path).as_posix() for p in tmp_path.rglob("*"))
        assert after == before
        assert not (tmp_path / "src/app/crm").exists()
        assert staged.created_dirs == []
