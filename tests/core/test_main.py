"""Tests for the application coordinator and CLI."""

import json
import sys

import pytest

from frameflow_media import main as main_module
from frameflow_media.main import FrameFlowMediaHost


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"system": {"log_file": str(tmp_path / "host.log"), "api_port": 9123}}))
    return str(path)


def test_host_wires_app(config_file, restore_logging) -> None:
    host = FrameFlowMediaHost(config_file)

    assert host.config.system.api_port == 9123
    assert host.app.state.media_module is host.media_module
    assert "media_module_init" in host.performance_logger.durations


def test_main_applies_overrides(config_file, monkeypatch, restore_logging) -> None:
    started = []
    monkeypatch.setattr(FrameFlowMediaHost, "run", lambda self: started.append(self))
    monkeypatch.setattr(sys, "argv", ["frameflow-media", "--config", config_file, "--host", "0.0.0.0", "--port", "9000"])

    main_module.main()

    assert len(started) == 1
    assert started[0].config.system.api_host == "0.0.0.0"
    assert started[0].config.system.api_port == 9000


def test_main_exits_on_server_error(config_file, monkeypatch, restore_logging) -> None:
    def fail(self):
        raise OSError("address already in use")

    monkeypatch.setattr(FrameFlowMediaHost, "run", fail)
    monkeypatch.setattr(sys, "argv", ["frameflow-media", "--config", config_file])

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code == 1
