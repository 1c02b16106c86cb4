"""Tests for the deckedit command line."""

from __future__ import annotations

import json

import pytest

from deckedit.__main__ import build_parser, main


class TestParser:
    def test_edit_defaults_from_settings(self):
        args = build_parser().parse_args(["edit"])
        assert args.src == "Resources/Presentation.pptx"
        assert args.dst == "Resources/NewPresentation.pptx"
        assert args.image == "Resources/earth.jpg"
        assert args.verbose is False

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    def test_edit_then_outline(self, restore_root_logger, make_deck_file, jpeg_file, tmp_path, capsys):
        src = make_deck_file(["A", "B", "C"])
        dst = tmp_path / "out" / "NewPresentation.pptx"

        assert main(["edit", "--src", str(src), "--dst", str(dst), "--image", str(jpeg_file)]) == 0
        assert f"Saved as {dst}" in capsys.readouterr().out

        assert main(["outline", str(dst)]) == 0
        outline = json.loads(capsys.readouterr().out)
        assert [s["title"] for s in outline["slides"]] == ["A", "C", "B", "New Slide"]
        assert outline["slides"][3]["shapes"][-1]["kind"] == "table"

    def test_edit_logs_session(self, restore_root_logger, make_deck_file, jpeg_file, tmp_path):
        src = make_deck_file(["A", "B", "C"])
        main(["edit", "--src", str(src), "--dst", str(tmp_path / "o.pptx"), "--image", str(jpeg_file)])
        for h in restore_root_logger.handlers:
            h.flush()

        records = [json.loads(line) for line in (tmp_path / "deckedit.log").read_text(encoding="utf-8").splitlines()]
        steps = [r["step"] for r in records if "step" in r]
        assert steps == ["duplicate_file", "embed_image", "append_text", "move_slide", "insert_slide", "append_table", "save"]
        assert len({r["session_id"] for r in records}) == 1

    def test_missing_source_propagates(self, restore_root_logger, tmp_path, jpeg_file):
        with pytest.raises(FileNotFoundError):
            main(["edit", "--src", str(tmp_path / "missing.pptx"), "--image", str(jpeg_file)])
