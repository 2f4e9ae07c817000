import pytest

from fault_demo.config import Settings
from fault_demo.exceptions import ConfigurationError


def test_defaults_without_environment():
    settings = Settings.load_from_env({})
    assert settings.WORK_DIR is None
    assert settings.MISSING_FILE == "nonexistent.txt"
    assert settings.RECORDS_FILE == "test.txt"
    assert settings.DATABASE_URL.endswith("/nonexistentdb")
    assert settings.DB_CONNECT_TIMEOUT == 2.0
    assert settings.UNKNOWN_TYPE == "com.example.NonExistentClass"
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FILE is None


def test_load_from_env_overrides():
    settings = Settings.load_from_env({
        "FAULT_DEMO_WORK_DIR": "/tmp/faults",
        "FAULT_DEMO_DB_CONNECT_TIMEOUT": "0.5",
        "FAULT_DEMO_UNKNOWN_TYPE": "acme.Widget",
        "LOG_LEVEL": "debug",
        "FAULT_DEMO_LOG_FILE": "",
    })
    assert settings.WORK_DIR == "/tmp/faults"
    assert settings.DB_CONNECT_TIMEOUT == 0.5
    assert settings.UNKNOWN_TYPE == "acme.Widget"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FILE is None


@pytest.mark.parametrize("environ, field", [
    ({"FAULT_DEMO_DB_CONNECT_TIMEOUT": "-1"}, "DB_CONNECT_TIMEOUT"),
    ({"FAULT_DEMO_DB_CONNECT_TIMEOUT": "soon"}, "DB_CONNECT_TIMEOUT"),
    ({"LOG_LEVEL": "LOUD"}, "LOG_LEVEL"),
    ({"FAULT_DEMO_MISSING_FILE": "   "}, "MISSING_FILE"),
])
def test_invalid_values_raise_configuration_error(environ, field):
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.load_from_env(environ)
    assert field in exc_info.value.message


def test_load_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("FAULT_DEMO_RECORDS_FILE", "records.bin")
    assert Settings.load_from_env().RECORDS_FILE == "records.bin"
