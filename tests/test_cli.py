"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

from dronenav.cli import main


class TestClassifyCommand:
    def test_tribhuvan(self, capsys):
        assert main(["classify", "--lat", "27.6989", "--lng", "85.3592"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["airspaceType"] == "restricted"
        assert data["district"] == "Kathmandu"

    def test_ray_casting_mode(self, capsys):
        assert main(["--polygon-mode", "ray_casting", "classify", "--lat", "27.52", "--lng", "84.22"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [z["id"] for z in data["zones"]] == ["a2"]

    def test_invalid_coordinates(self, capsys):
        assert main(["classify", "--lat", "95", "--lng", "85"]) == 2
        assert capsys.readouterr().out == ""


class TestCheckCommand:
    def test_open_country_commercial(self, capsys):
        code = main([
            "check", "--lat", "29.3", "--lng", "81.6",
            "--operator", "commercial", "--altitude", "150", "--night", "--weight", "Over 2kg",
        ])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["isPermitted"] is True
        assert data["permissionsRequired"] == []
        assert "Commercial Operations" in data["regulationsApplicable"]
        assert len(data["advisoryMessages"]) == 3

    def test_missing_catalog_dir(self, tmp_path, capsys):
        assert main(["--catalog-dir", str(tmp_path), "check", "--lat", "27.7", "--lng", "85.3"]) == 1
        assert capsys.readouterr().out == ""

    def test_unknown_operator_rejected(self):
        with pytest.raises(SystemExit):
            main(["check", "--lat", "27.7", "--lng", "85.3", "--operator", "military"])
