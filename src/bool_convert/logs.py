"""
Lightweight logging helpers.

Environment variables
- LOGGING_AUTO_CONFIG: if false, leave root logger configuration to the caller
- LOGGING_SERVER: if true, prefix records with a timestamp even on a TTY
"""

import logging
import os
import sys

from bool_convert import parsers

_AUTO_CONFIG_MARK = object()


def auto_config():
    """
    Install default stdout/stderr handlers on an unconfigured root logger.

    A later logging.basicConfig call from the application replaces these
    handlers instead of being ignored.
    """
    if not _env_flag("LOGGING_AUTO_CONFIG", True):
        return
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=logging.INFO, handlers=_auto_config_handlers())
    if getattr(logging.basicConfig, "auto_config_mark", None) is _AUTO_CONFIG_MARK:
        return

    logging_basic_config = logging.basicConfig

    def logging_basic_config_wrapper(*args, **kwargs):
        if not kwargs.get("force") and _has_auto_config_handler():
            kwargs["force"] = True
        logging_basic_config(*args, **kwargs)

    logging_basic_config_wrapper.auto_config_mark = _AUTO_CONFIG_MARK
    logging.basicConfig = logging_basic_config_wrapper


def logger(*names: str | None) -> logging.Logger:
    """
    Return a logger for the first usable name, or the root logger.

    Empty names and "__main__" are skipped; file paths become their basename
    without extension.
    """
    auto_config()
    for name in names:
        if name and (os.sep in name or name.endswith(".py")):
            name = os.path.splitext(os.path.basename(name))[0]
        if name and name != "__main__":
            return logging.getLogger(name)
    return logging.getLogger()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return parsers.parse_bool(value)


def _has_auto_config_handler() -> bool:
    return any(
        getattr(handler, "auto_config_mark", None) is _AUTO_CONFIG_MARK
        for handler in logging.getLogger().handlers
    )


def _auto_config_handlers() -> list[logging.Handler]:
    out = logging.StreamHandler(sys.stdout)
    out.addFilter(lambda record: record.levelno < logging.WARNING)
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    for handler, stream in ((out, sys.stdout), (err, sys.stderr)):
        handler.auto_config_mark = _AUTO_CONFIG_MARK
        handler.setFormatter(Formatter(server=_is_server(stream)))
    return [out, err]


def _is_server(stream=None) -> bool:
    """Return True if this process looks like a server or non interactive runtime."""
    if _env_flag("LOGGING_SERVER", False):
        return True
    isatty = getattr(stream if stream is not None else sys.stdin, "isatty", None)
    try:
        return not (isatty and isatty())
    except ValueError:
        # closed stream
        return True


class Formatter(logging.Formatter):
    """
    Compact "[timestamp] LEVEL [name] | message" lines.

    The timestamp is only written in server mode and the name is omitted for
    the root logger.
    """

    def __init__(self, *args, server: bool = False, **kwargs):
        super().__init__(*args, datefmt="%Y-%m-%d %H:%M:%S", **kwargs)
        self._server = server

    def formatMessage(self, record):
        header = [record.levelname]
        if self._server:
            header.insert(0, self.formatTime(record, self.datefmt))
        if record.name and record.name != logging.root.name:
            header.append(f"[{record.name}]")
        return f"{' '.join(header)} | {record.message}"
