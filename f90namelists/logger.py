from typing import NotRequired, TypedDict
import logging
from f90namelists.utils import resolve_config

ROOT_LOGGER_NAME = "f90namelists"


class LoggerConfig(TypedDict):
    verbose_level: NotRequired[int]
    quiet_level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    verbose_level: int
    quiet_level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "verbose_level": logging.DEBUG,
    "quiet_level": logging.WARNING,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class Logger:
    """Logger for one component, named ``f90namelists.<component>``.

    Verbose components log every token or line at DEBUG through a stream
    handler on the package logger. Quiet components still pass warnings and
    errors on to the standard logging setup.
    """

    def __init__(self, component: str, is_enabled: bool = False, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.is_enabled = is_enabled
        self.logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
        self.set_configuration()

    def set_configuration(self):
        if not self.is_enabled:
            self.logger.setLevel(self.config["quiet_level"])
            return

        self.logger.setLevel(self.config["verbose_level"])
        root = logging.getLogger(ROOT_LOGGER_NAME)
        # loggers are process-wide, only attach our handler once
        if any(getattr(handler, "_f90namelists", False) for handler in root.handlers):
            return
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(self.config["format"]))
        handler._f90namelists = True  # type: ignore[attr-defined]
        root.addHandler(handler)
