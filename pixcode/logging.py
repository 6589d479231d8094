import logging
import sys

from pixcode.settings import settings

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    # Interactive menus redraw the terminal; a log file keeps records out of the prompts.
    if settings.log_file:
        return logging.FileHandler(settings.log_file, encoding="utf-8")
    return logging.StreamHandler(sys.stderr)


def configure_logging() -> None:
    """Configure the root logger from ``PIXCODE_LOG_*`` settings.

    Call once at startup.  Library modules only create loggers; they never
    install handlers themselves.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = _build_handler()

    if settings.log_json:
        from pythonjsonlogger.json import JsonFormatter

        handler.setFormatter(
            JsonFormatter(
                fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"asctime": "timestamp", "levelname": "level"},
            )
        )
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    for old in root.handlers[:]:
        root.removeHandler(old)
        if isinstance(old, logging.FileHandler):
            old.close()
    root.addHandler(handler)
