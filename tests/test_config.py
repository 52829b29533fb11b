# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Configuration Manager Tests
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────

import pytest

from factuality_eval.core.config import EvalConfig
from factuality_eval.core.exceptions import ConfigError


class TestEvalConfig:
    """Tests for EvalConfig dataclass."""

    def test_default_values(self):
        cfg = EvalConfig()
        assert cfg.data_dir == "./data/audit"
        assert cfg.output_dir == "./eval_results"
        assert cfg.valid_flag == "valid"
        assert cfg.na_rep == "NA"
        assert cfg.write_row_flags is False
        assert cfg.metrics_enabled is True
        assert cfg.profile == "default"

    def test_custom_values(self):
        cfg = EvalConfig(data_dir="/srv/audit", write_row_flags=True)
        assert cfg.data_dir == "/srv/audit"
        assert cfg.write_row_flags is True

    def test_to_dict(self):
        d = EvalConfig().to_dict()
        assert d["valid_flag"] == "valid"
        assert set(d) >= {"data_dir", "output_dir", "log_level"}


class TestValidation:
    @pytest.mark.parametrize("field", ["data_dir", "output_dir", "valid_flag"])
    def test_empty_rejected(self, field):
        with pytest.raises(ConfigError, match=field):
            EvalConfig(**{field: ""})

    def test_bad_log_level(self):
        with pytest.raises(ConfigError, match="log_level"):
            EvalConfig(log_level="CHATTY")

    def test_log_level_case_insensitive(self):
        assert EvalConfig(log_level="debug").log_level == "debug"

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            EvalConfig(valid_flag="")


class TestEnvLoading:
    """Tests for from_env()."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FACTEVAL_DATA_DIR", "/tmp/audit")
        monkeypatch.setenv("FACTEVAL_WRITE_ROW_FLAGS", "yes")
        monkeypatch.setenv("FACTEVAL_METRICS_ENABLED", "0")
        cfg = EvalConfig.from_env()
        assert cfg.data_dir == "/tmp/audit"
        assert cfg.write_row_flags is True
        assert cfg.metrics_enabled is False

    def test_env_ignores_unknown(self, monkeypatch):
        monkeypatch.setenv("FACTEVAL_TOTALLY_UNKNOWN", "value")
        cfg = EvalConfig.from_env()
        assert cfg.data_dir == "./data/audit"

    def test_invalid_bool(self, monkeypatch):
        monkeypatch.setenv("FACTEVAL_LOG_JSON", "sometimes")
        with pytest.raises(ConfigError, match="FACTEVAL_LOG_JSON"):
            EvalConfig.from_env()

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("AUDIT_VALID_FLAG", "ok")
        assert EvalConfig.from_env(prefix="AUDIT_").valid_flag == "ok"


class TestYamlLoading:
    """Tests for from_yaml()."""

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "factuality.yaml"
        path.write_text(
            "data_dir: /srv/audit\n"
            "write_row_flags: true\n"
            "na_rep: ''\n"
            "unknown_key: 1\n"
        )
        cfg = EvalConfig.from_yaml(str(path))
        assert cfg.data_dir == "/srv/audit"
        assert cfg.write_row_flags is True
        assert cfg.na_rep == ""

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert EvalConfig.from_yaml(str(path)) == EvalConfig()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            EvalConfig.from_yaml(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EvalConfig.from_yaml(str(tmp_path / "nope.yaml"))
