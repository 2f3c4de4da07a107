"""Client and server entry point tests"""

from unittest.mock import patch

from doer.client import cli
from doer.client.rpc import TaskServiceClient
from doer.client.service import LocalTaskService
from doer.config import Config
from doer.server import run


def test_version_flag(capsys) -> None:
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "doer version 0.1.0"


def test_build_service_local() -> None:
    args = cli.parse_args(["--local"])
    assert isinstance(cli.build_service(args, Config()), LocalTaskService)


def test_build_service_remote_uses_config() -> None:
    args = cli.parse_args([])
    service = cli.build_service(args, Config())

    assert isinstance(service, TaskServiceClient)
    assert service.base_url == "http://127.0.0.1:50051"
    assert service.timeout == 1.0


def test_build_service_flags_override_config() -> None:
    args = cli.parse_args(["--url", "http://other:9000", "--timeout", "3"])
    service = cli.build_service(args, Config())

    assert service.base_url == "http://other:9000"
    assert service.timeout == 3.0


@patch("doer.server.run.setup_logger")
@patch("doer.server.run.uvicorn.run")
def test_server_main_binds_flags(mock_run, mock_setup_logger, tmp_path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("server:\n  port: 6000\n", encoding="utf-8")

    run.main(["--config", str(config_path), "--host", "0.0.0.0"])

    _, kwargs = mock_run.call_args
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 6000


@patch("doer.server.run.setup_logger")
@patch("doer.server.run.uvicorn.run")
def test_server_main_uses_env_port(mock_run, mock_setup_logger, tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("server:\n  port: 6000\n", encoding="utf-8")
    monkeypatch.setenv("DOER_PORT", "6100")

    run.main(["--config", str(config_path)])

    _, kwargs = mock_run.call_args
    assert kwargs["port"] == 6100
