"""Tests for save_table()."""

import json
from pathlib import Path

import pytest

from tablecraft.export import save_table
from tablecraft.model import RenderModel


class TestSaveTable:
    """Tests for writing rendered tables to disk."""

    def test_default_formats(self, plain_model: RenderModel, tmp_path: Path) -> None:
        """Markdown, LaTeX and HTML are written by default."""
        paths = save_table(plain_model, "tab01_ranking", tmp_path / "tables")
        assert [p.name for p in paths] == [
            "tab01_ranking.md",
            "tab01_ranking.tex",
            "tab01_ranking.html",
        ]
        assert all(p.exists() for p in paths)
        assert paths[0].read_text().startswith("| Rank |")

    def test_requested_formats_only(self, plain_model: RenderModel, tmp_path: Path) -> None:
        """Only the requested formats are written."""
        paths = save_table(plain_model, "ranking", tmp_path, formats=["json"])
        assert [p.name for p in paths] == ["ranking.json"]
        assert sorted(f.name for f in tmp_path.iterdir()) == ["ranking.json"]

        data = json.loads(paths[0].read_text())
        assert [h["label"] for h in data["headers"]] == ["Rank", "Model", "Time"]
        assert data["body"][0][1]["content"] == {"kind": "text", "value": "A"}

    def test_unknown_format(self, plain_model: RenderModel, tmp_path: Path) -> None:
        """Unsupported formats fail before anything is written."""
        with pytest.raises(ValueError, match="docx"):
            save_table(plain_model, "ranking", tmp_path / "out", formats=["md", "docx"])
        assert not (tmp_path / "out").exists()
