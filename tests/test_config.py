"""Tests for configuration and command line handling."""

import json

import pytest

from table2geojson.cli import main
from table2geojson.config import DEFAULT_CONFIG, get_config, parse_args


class TestGetConfig:

    def test_defaults(self, monkeypatch):
        for key in DEFAULT_CONFIG:
            monkeypatch.delenv(f"TABLE2GEOJSON_{key.upper()}", raising=False)

        assert get_config() == DEFAULT_CONFIG

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TABLE2GEOJSON_LIMIT", "5")
        monkeypatch.setenv("TABLE2GEOJSON_VERBOSE", "yes")
        monkeypatch.setenv("TABLE2GEOJSON_GEOMETRY", "polygon")

        config = get_config()

        assert config["limit"] == 5
        assert config["verbose"] is True
        assert config["geometry"] == "polygon"


class TestParseArgs:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TABLE2GEOJSON_GEOMETRY", raising=False)
        monkeypatch.delenv("TABLE2GEOJSON_LIMIT", raising=False)

        args = parse_args(["input.csv"])

        assert args.input_file == "input.csv"
        assert args.geometry == "point"
        assert args.limit == 0
        assert args.key is None

    def test_options(self):
        args = parse_args([
            "input.csv", "-g", "linestring", "-k", "route",
            "--longitude", "x", "--latitude", "y", "-l", "3", "-v",
        ])

        assert args.geometry == "linestring"
        assert args.key == "route"
        assert (args.longitude, args.latitude) == ("x", "y")
        assert args.limit == 3
        assert args.verbose is True

    def test_negative_limit(self):
        with pytest.raises(SystemExit):
            parse_args(["input.csv", "--limit", "-1"])


class TestMain:

    def test_writes_output(self, tmp_path):
        path = tmp_path / "stops.csv"
        path.write_text("name,longitude,latitude\nx,1.5,2.5\n", encoding="utf-8")
        out_dir = tmp_path / "out"

        assert main([str(path), "-o", str(out_dir), "--log_dir", str(tmp_path / "logs")]) == 0

        data = json.loads((out_dir / "stops.geojson").read_text(encoding="utf-8"))
        assert data["features"][0]["geometry"]["coordinates"] == [1.5, 2.5]
        assert list((tmp_path / "logs").glob("*.log"))

    def test_missing_columns_exit_status(self, tmp_path):
        path = tmp_path / "plain.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")

        assert main([str(path), "-o", str(tmp_path)]) == 1

    def test_missing_file_exit_status(self, tmp_path):
        assert main([str(tmp_path / "missing.csv"), "-o", str(tmp_path)]) == 1
