"""
Tests for the command-line interface.
"""

import json

import pytest

from urlpreview import __version__
from urlpreview.app import main


class TestResolveCommands:
    def test_version(self, capsys):
        main(["--version"])
        assert capsys.readouterr().out.strip() == __version__

    def test_resolve(self, capsys):
        main(["resolve", "--url", "https://vimeo.com/12345"])
        assert capsys.readouterr().out.strip() == "https://player.vimeo.com/video/12345"

    def test_resolve_no_match(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["resolve", "--url", "https://example.com/"])
        assert exc.value.code == 1
        assert "No preview" in capsys.readouterr().out

    def test_resolve_file(self, tmp_path, capsys):
        input_path = tmp_path / "cells.txt"
        input_path.write_text(
            "# exported cells\n"
            "https://youtu.be/KYz2wyBy3kc\n"
            "\n"
            "not a link\n"
            "https://open.spotify.com/show/abc123\n",
            encoding="utf-8",
        )
        main(["resolve-file", "--input", str(input_path)])

        out = capsys.readouterr().out
        assert "[youtube] https://www.youtube.com/embed/KYz2wyBy3kc" in out
        assert "[no-preview] not a link" in out
        assert "[spotify] https://open.spotify.com/embed-podcast/show/abc123" in out
        assert "Done. total=3 resolved=2 unresolved=1" in out
        assert "Resolved: 2/3" in out

    def test_resolve_file_missing(self, tmp_path):
        with pytest.raises(SystemExit, match="Input file not found"):
            main(["resolve-file", "--input", str(tmp_path / "nope.txt")])

    def test_log_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("URLPREVIEW_LOG_DIR", str(tmp_path / "logs"))
        main(["resolve", "--url", "https://vimeo.com/12345"])
        assert list((tmp_path / "logs").glob("urlpreview_*.log"))


class TestPreviewCommand:
    def test_preview(self, capsys):
        main(["preview", "--value", "https://youtu.be/KYz2wyBy3kc"])
        out = capsys.readouterr().out
        assert "Status: preview" in out
        assert "Src: https://www.youtube.com/embed/KYz2wyBy3kc" in out
        assert "Allow: accelerometer; autoplay" in out

    def test_preview_empty(self, capsys):
        main(["preview", "--field", "Video"])
        out = capsys.readouterr().out
        assert "Status: empty" in out
        assert "The “Video” field is empty" in out

    def test_services(self, capsys):
        main(["services"])
        out = capsys.readouterr().out
        assert " 1. Airtable share links [airtable]" in out
        assert " 6. Figma [figma]" in out
        assert "Airtable share links, Figma, SoundCloud, Spotify, Vimeo, YouTube" in out


class TestValidateSettingsCommand:
    def test_valid(self, base_file, write_config, capsys):
        config = write_config({"isEnforced": True, "urlTableId": "tblVideos", "urlFieldId": "fldLink"})
        main(["validate-settings", "--config", str(config), "--base", str(base_file)])
        assert capsys.readouterr().out.strip().endswith("Valid")

    def test_unenforced_is_valid(self, base_file, write_config, capsys):
        config = write_config({"isEnforced": False})
        main(["validate-settings", "--config", str(config), "--base", str(base_file)])
        assert "Valid" in capsys.readouterr().out

    def test_invalid_settings(self, base_file, write_config, capsys):
        config = write_config({"isEnforced": True, "urlTableId": "tblVideos"})
        with pytest.raises(SystemExit) as exc:
            main(["validate-settings", "--config", str(config), "--base", str(base_file)])
        assert exc.value.code == 2
        out = capsys.readouterr().out
        assert "Invalid:" in out
        assert " - Pick a field for previews" in out

    def test_malformed_payload(self, base_file, write_config, capsys):
        config = write_config({"isEnforced": "yes", "extra": 1})
        with pytest.raises(SystemExit) as exc:
            main(["validate-settings", "--config", str(config), "--base", str(base_file)])
        assert exc.value.code == 2
        out = capsys.readouterr().out
        assert "isEnforced" in out
        assert "Unknown setting: extra" in out

    def test_malformed_json(self, tmp_path, base_file):
        config = tmp_path / "bad.json"
        config.write_text("{oops")
        with pytest.raises(SystemExit, match="Invalid JSON"):
            main(["validate-settings", "--config", str(config), "--base", str(base_file)])

    def test_missing_file(self, tmp_path, base_file):
        with pytest.raises(SystemExit, match="Input file not found"):
            main(["validate-settings", "--config", str(tmp_path / "nope.json"), "--base", str(base_file)])

    def test_malformed_base(self, tmp_path, write_config):
        config = write_config({"isEnforced": False})
        base = tmp_path / "bad_base.json"
        base.write_text(json.dumps({"tables": ["tbl1"]}))
        with pytest.raises(SystemExit, match="Table #0 must be an object"):
            main(["validate-settings", "--config", str(config), "--base", str(base)])
