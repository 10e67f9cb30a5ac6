import pytest

from propmap import __version__
from propmap.__main__ import main


def test_name_prints_modern_then_legacy(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["name", "server.command-line-args"]) == 0
    assert capsys.readouterr().out.splitlines() == ["SERVER_COMMANDLINEARGS", "SERVER_COMMAND_LINE_ARGS"]


def test_name_with_default_source(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--source", "default", "name", "server.command-line-args"]) == 0
    assert capsys.readouterr().out.splitlines() == ["server.command-line-args"]


def test_name_rejects_invalid_property_name(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = main(["name", "Server.Port"])
    assert exc_info.value.code == 2
    assert "invalid property name" in capsys.readouterr().err


def test_source_prints_property_name(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["source", "SERVERS_0_HOST"]) == 0
    assert capsys.readouterr().out == "servers[0].host\n"


def test_source_without_mapping_exits_with_one(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-v", "source", "FOO.BAR"]) == 1
    assert capsys.readouterr().out == ""


def test_ancestor(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["ancestor", "server", "server.port"]) == 0
    assert capsys.readouterr().out == "true\n"
    assert main(["ancestor", "server.port", "server"]) == 1
    assert capsys.readouterr().out == "false\n"
    assert main(["ancestor", "my-app", "my.app.name"]) == 0
    assert main(["--source", "default", "ancestor", "my-app", "my.app.name"]) == 1


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
