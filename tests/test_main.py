"""Tests de la ligne de commande."""

import json

import pytest

from smoke_sysinfo.main import main


@pytest.fixture(autouse=True)
def _isolated_logger(reset_logger):
    yield


def test_text_report(fake_uname, capsys, tmp_path):
    code = main(["--os", "plan9", "--config", str(tmp_path / "absent.ini")])

    out = capsys.readouterr().out
    assert code == 0
    assert "Number of CPU's: \n" in out
    assert "Processor type: x86_64" in out
    assert "Processor description: x86_64" in out
    assert "Host name: smokehost" in out


def test_json_report(fake_uname, clean_windows_env, monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("NUMBER_OF_PROCESSORS", "8")

    code = main(["--os", "Windows", "--format", "json", "-c", str(tmp_path / "absent.ini")])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data == {"ncpu": 8, "cpu": "", "cpu_type": "", "host": "smokehost", "os_name": "Windows"}


def test_report_written_to_file(fake_uname, tmp_path, capsys):
    output = tmp_path / "sysinfo.json"

    code = main(["--os", "plan9", "-f", "json", "-o", str(output), "-c", str(tmp_path / "absent.ini")])

    assert code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["host"] == "smokehost"
    assert str(output) in capsys.readouterr().out


def test_os_name_from_config_file(fake_uname, fake_commands, tmp_path, capsys):
    config = tmp_path / "config.ini"
    config.write_text("[probe]\nos_name = HP-UX\n", encoding="utf-8")
    fake_commands["ioscan -fnkC processor"] = "processor 0 160 processor CLAIMED PROCESSOR Processor\n"

    code = main(["-c", str(config)])

    assert code == 0
    assert "Number of CPU's: 1" in capsys.readouterr().out


def test_create_and_validate_config(tmp_path, capsys):
    config = tmp_path / "conf" / "config.ini"

    assert main(["--create-config", "-c", str(config)]) == 0
    assert config.exists()
    assert main(["--validate-config", "-c", str(config)]) == 0
    assert "Configuration valide" in capsys.readouterr().out


def test_create_config_requires_path(capsys):
    assert main(["--create-config"]) == 1
    assert "--config" in capsys.readouterr().err


def test_invalid_config(tmp_path):
    config = tmp_path / "config.ini"
    config.write_text("[logging]\nlog_level = LOUD\n", encoding="utf-8")

    assert main(["--validate-config", "-c", str(config)]) == 1
