"""Tests de la configuration."""

from smoke_sysinfo.core.config import ProbeConfig, create_default_config


def test_defaults_when_file_is_missing(tmp_path):
    config = ProbeConfig(str(tmp_path / "absent.ini"))

    assert config.get_probe_config() == {"os_name": "", "command_timeout": 0.0}
    assert config.get_logging_config() == {
        "log_level": "WARNING",
        "log_file": "",
        "max_log_size": 1048576,
        "backup_count": 3,
    }
    assert config.validate()


def test_values_loaded_from_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[probe]\nos_name = SunOS\ncommand_timeout = 5\n\n"
        "[logging]\nlog_level = DEBUG\n",
        encoding="utf-8",
    )

    config = ProbeConfig(str(path))

    assert config.get("probe", "os_name") == "SunOS"
    assert config.getfloat("probe", "command_timeout") == 5.0
    assert config.get("logging", "log_level") == "DEBUG"
    # Valeur par défaut conservée pour les clés absentes
    assert config.getint("logging", "backup_count") == 3


def test_invalid_file_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "config.ini"
    path.write_text("pas une section\n", encoding="utf-8")

    config = ProbeConfig(str(path))

    assert config.get("logging", "log_level") == "WARNING"
    assert "Erreur lors du chargement" in capsys.readouterr().err


def test_validate_rejects_bad_values(tmp_path):
    config = ProbeConfig(str(tmp_path / "absent.ini"))
    config.set("logging", "log_level", "VERBOSE")
    assert not config.validate()

    config.set("logging", "log_level", "info")
    config.set("probe", "command_timeout", "-1")
    assert not config.validate()

    config.set("probe", "command_timeout", "soon")
    assert not config.validate()
    assert config.getfloat("probe", "command_timeout", 0.0) == 0.0


def test_create_default_config_writes_file(tmp_path):
    path = tmp_path / "etc" / "smoke-sysinfo" / "config.ini"

    create_default_config(str(path))

    assert path.exists()
    reloaded = ProbeConfig(str(path))
    assert reloaded.get("logging", "log_level") == "WARNING"
    assert reloaded.get("probe", "command_timeout") == "0"
