"""Tests for configuration models and YAML loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from deferqueue.core.config import (
    Config,
    DeferQueueConfig,
    check_unexpanded_vars,
    expand_env_vars,
    load_config,
)
from deferqueue.runtime.defer_queue import DeferQueue, RemovalOrder


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "deferqueue.yaml"
    path.write_text(content)
    return path


class TestDeferQueueConfig:
    """Tests for the per-queue model."""

    def test_defaults(self):
        config = DeferQueueConfig()
        assert config.name == ""
        assert config.removal_order == RemovalOrder.LIFO
        assert config.report_outcomes is True

    def test_invalid_removal_order_rejected(self):
        with pytest.raises(ValidationError):
            DeferQueueConfig(removal_order="random")

    def test_from_config(self):
        """DeferQueue.from_config carries every setting over."""
        queue = DeferQueue.from_config(
            DeferQueueConfig(name="cleanup", removal_order="fifo", report_outcomes=False)
        )
        assert queue.name == "cleanup"
        assert queue.removal_order == RemovalOrder.FIFO
        assert queue.report_outcomes is False


class TestConfig:
    """Tests for the root model."""

    def test_queue_name_defaults_to_key(self):
        config = Config(queues={"shutdown": {}, "named": {"name": "explicit"}})
        assert config.queues["shutdown"].name == "shutdown"
        assert config.queues["named"].name == "explicit"

    def test_model_entry_without_name_takes_key(self):
        """An unnamed DeferQueueConfig instance is named after its key."""
        config = Config(
            queues={
                "teardown": DeferQueueConfig(removal_order="fifo"),
                "named": DeferQueueConfig(name="explicit"),
            }
        )
        assert config.queues["teardown"].name == "teardown"
        assert config.queues["teardown"].removal_order == RemovalOrder.FIFO
        assert config.queues["named"].name == "explicit"

    def test_null_queues_means_none_configured(self):
        assert Config(queues=None).queues == {}

    def test_build_queue(self):
        config = Config(queues={"shutdown": {"removal_order": "fifo"}})
        queue = config.build_queue("shutdown")
        assert queue.name == "shutdown"
        assert queue.removal_order == RemovalOrder.FIFO

    def test_build_unknown_queue_raises(self):
        with pytest.raises(KeyError, match="missing"):
            Config().build_queue("missing")


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_with_env_expansion(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("DEFER_ORDER", "fifo")
        path = _write(
            tmp_path,
            "logging:\n"
            "  level: DEBUG\n"
            "queues:\n"
            "  teardown:\n"
            "    removal_order: ${DEFER_ORDER}\n"
            "    report_outcomes: false\n",
        )

        config = load_config(path)

        assert config.logging.level == "DEBUG"
        assert config.logging.directory is None
        teardown = config.queues["teardown"]
        assert teardown.name == "teardown"
        assert teardown.removal_order == RemovalOrder.FIFO
        assert teardown.report_outcomes is False

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config = load_config(_write(tmp_path, ""))
        assert config.queues == {}
        assert config.logging.level == "INFO"

    def test_bare_queues_key_gives_no_queues(self, tmp_path: Path):
        """A queues: key with no entries loads as an empty mapping."""
        config = load_config(_write(tmp_path, "queues:\n"))
        assert config.queues == {}

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unresolved_var_raises(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("DEFER_UNSET_VAR", raising=False)
        path = _write(tmp_path, "queues:\n  q:\n    name: ${DEFER_UNSET_VAR}\n")
        with pytest.raises(ValueError, match="DEFER_UNSET_VAR"):
            load_config(path)


class TestEnvExpansion:
    """Tests for ${VAR} helpers."""

    def test_expand_known_and_unknown(self, monkeypatch):
        monkeypatch.setenv("DEFER_KNOWN", "value")
        monkeypatch.delenv("DEFER_UNKNOWN", raising=False)
        assert expand_env_vars("${DEFER_KNOWN}/${DEFER_UNKNOWN}") == "value/${DEFER_UNKNOWN}"

    def test_check_reports_all_unresolved(self):
        with pytest.raises(ValueError, match="VAR_A") as exc_info:
            check_unexpanded_vars({"a": "${VAR_A}", "b": ["${VAR_B}"]}, source="test.yaml")
        assert "VAR_B" in str(exc_info.value)
        assert "test.yaml" in str(exc_info.value)

    def test_check_ignores_non_strings(self):
        check_unexpanded_vars({"n": 1, "none": None, "flag": True}, source="test.yaml")
