"""Tests for configuration loading and validation."""

import json
import tempfile

import pytest
import yaml

from doc_distance.config import load_config, validate_config


class TestLoadConfig:
    def test_load_defaults(self):
        config = load_config(config_dict={})
        assert config.version == "1.0"
        assert config.encoding == "utf-8"
        assert config.parallel is False
        assert config.tokenizer.policy == "alphanumeric"
        assert config.report.precision == 6
        assert config.report.format == "text"

    def test_load_from_dict(self):
        config = load_config(config_dict={
            "encoding": "latin-1",
            "parallel": True,
            "tokenizer": {"policy": "whitespace"},
            "report": {"precision": 3, "format": "json"},
        })
        assert config.encoding == "latin-1"
        assert config.parallel is True
        assert config.tokenizer.policy == "whitespace"
        assert config.report.precision == 3
        assert config.report.format == "json"

    def test_load_from_yaml_file(self):
        raw = {"report": {"precision": 2}}
        with tempfile.NamedTemporaryFile(suffix=".yaml", mode="w", delete=False) as f:
            yaml.dump(raw, f)
            f.flush()
            config = load_config(config_path=f.name)
        assert config.report.precision == 2

    def test_load_from_json_file(self, tmp_path):
        path = tmp_path / "doc-distance.json"
        path.write_text(json.dumps({"tokenizer": {"policy": "whitespace"}}))
        config = load_config(config_path=path)
        assert config.tokenizer.policy == "whitespace"

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "doc-distance.yaml"
        path.write_text("")
        config = load_config(config_path=path)
        assert config.report.precision == 6

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "nope.yaml")

    def test_discovers_config_in_parent(self, tmp_cwd, monkeypatch):
        (tmp_cwd / "doc-distance.yml").write_text("report:\n  precision: 4\n")
        nested = tmp_cwd / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config().report.precision == 4

    def test_no_config_found_uses_defaults(self, tmp_cwd):
        assert load_config().report.precision == 6


class TestValidateConfig:
    def test_defaults_valid(self):
        assert validate_config(load_config(config_dict={})) == []

    def test_unknown_policy(self):
        config = load_config(config_dict={"tokenizer": {"policy": "stemmed"}})
        errors = validate_config(config)
        assert len(errors) == 1
        assert "tokenizer policy" in errors[0]

    @pytest.mark.parametrize("precision", [-1, 16, "6", True])
    def test_bad_precision(self, precision):
        config = load_config(config_dict={"report": {"precision": precision}})
        assert any("precision" in e for e in validate_config(config))

    def test_unknown_format(self):
        config = load_config(config_dict={"report": {"format": "xml"}})
        assert any("report format" in e for e in validate_config(config))

    def test_unknown_encoding(self):
        config = load_config(config_dict={"encoding": "no-such-codec"})
        assert any("encoding" in e for e in validate_config(config))

    def test_empty_encoding(self):
        config = load_config(config_dict={"encoding": ""})
        assert validate_config(config) == ["encoding must not be empty"]

    def test_non_string_encoding(self):
        config = load_config(config_dict={"encoding": 1252})
        assert validate_config(config) == ["encoding must be a string, got 1252"]

    @pytest.mark.parametrize("value", ["false", "true", 0, None])
    def test_parallel_must_be_bool(self, value):
        config = load_config(config_dict={"parallel": value})
        assert config.parallel == value
        assert any("parallel must be true or false" in e for e in validate_config(config))

    def test_parallel_bool_from_yaml(self, tmp_path):
        path = tmp_path / "doc-distance.yaml"
        path.write_text("parallel: true\n")
        config = load_config(config_path=path)
        assert config.parallel is True
        assert validate_config(config) == []
