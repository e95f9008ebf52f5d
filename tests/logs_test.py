import logging
import subprocess
import sys
import textwrap

from bool_convert import logs


def _record(name, level=logging.INFO, msg="hello"):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_logger_name_resolution():
    assert logs.logger("__main__", None, "bool_convert.bools").name == "bool_convert.bools"
    assert logs.logger("/tmp/some/script.py").name == "script"
    assert logs.logger() is logging.getLogger()


def test_formatter_client_mode():
    formatter = logs.Formatter(server=False)
    assert formatter.format(_record("convert")) == "INFO [convert] | hello"
    assert formatter.format(_record("root", logging.WARNING)) == "WARNING | hello"


def test_formatter_server_mode_has_timestamp():
    line = logs.Formatter(server=True).format(_record("convert"))
    assert line.endswith("INFO [convert] | hello")
    assert line[:4].isdigit()


def test_env_flag(monkeypatch):
    monkeypatch.delenv("LOGGING_SERVER", raising=False)
    assert logs._env_flag("LOGGING_SERVER", False) is False
    monkeypatch.setenv("LOGGING_SERVER", "TRUE")
    assert logs._env_flag("LOGGING_SERVER", False) is True
    assert logs._is_server() is True
    monkeypatch.setenv("LOGGING_SERVER", "nope")
    assert logs._env_flag("LOGGING_SERVER", True) is False


def test_application_basic_config_replaces_auto_config():
    script = textwrap.dedent(
        """
        import logging
        import sys

        from bool_convert import bools

        bools.to_bool("1")
        logging.basicConfig(level=logging.DEBUG, format="APP %(message)s", stream=sys.stdout)
        logging.getLogger("app").debug("hello")
        print(len(logging.getLogger().handlers))
        """
    )
    result = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, check=True
    )
    assert result.stdout.splitlines() == ["APP hello", "1"]


def test_auto_config_disabled(monkeypatch):
    monkeypatch.setenv("LOGGING_AUTO_CONFIG", "false")
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    logs.auto_config()
    assert root.handlers == []
