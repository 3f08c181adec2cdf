#
# Licensed to the Apache Software Foundation (ASF) under one or more
# contributor license agreements.  See the NOTICE file distributed with
# this work for additional information regarding copyright ownership.
# The ASF licenses this file to You under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with
# the License.  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Optional

from spikit.common import constants

from ._base import ConsoleOptions, ExtLogger, FileOptions, LoggerLevel

__all__ = ["LoggingLogger"]


_LEVEL_TO_LOGGING = {
    LoggerLevel.DEBUG: logging.DEBUG,
    LoggerLevel.INFO: logging.INFO,
    LoggerLevel.WARNING: logging.WARNING,
    LoggerLevel.ERROR: logging.ERROR,
    LoggerLevel.CRITICAL: logging.CRITICAL,
}

_DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(module)s:%(funcName)s:%(lineno)d | %(message)s"
# Rendered by `colorlog`
_DEFAULT_COLOR_LOG_FORMAT = (
    "%(green)s%(asctime)s "
    "%(red)s| "
    "%(log_color)s%(levelname)s "
    "%(red)s| "
    "%(cyan)s%(module)s:%(funcName)s:%(lineno)d "
    "%(red)s- "
    "%(purple)s[spikit] "
    "%(log_color)s%(message)s%(reset)s"
)

_DEFAULT_LOG_COLORS = {
    "DEBUG": "blue",
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


_DEFAULT_CONSOLE_OPTIONS = ConsoleOptions(
    level=LoggerLevel.INFO, log_format=_DEFAULT_LOG_FORMAT, date_format=_DEFAULT_DATE_FORMAT, colorize=False
)

_DEFAULT_FILE_OPTIONS = FileOptions(
    enable=False,
    log_format=_DEFAULT_LOG_FORMAT,
    date_format=_DEFAULT_DATE_FORMAT,
)


class LoggingLogger(ExtLogger):
    """
    Backend writing to the standard library logger named ``spikit``.

    Installs a console handler (plain, or colorized through ``colorlog``) and,
    when enabled, a file handler with optional size or time based rotation.
    Creating a new instance replaces the handlers of the previous one.
    """

    _logger: logging.Logger

    def __init__(self, console_options: Optional[ConsoleOptions] = None, file_options: Optional[FileOptions] = None):
        super().__init__(console_options, file_options)
        self._initialize()

    @property
    def logger(self) -> logging.Logger:
        """The underlying ``logging.Logger``."""
        return self._logger

    def _merge_console_options(self, custom: Optional[ConsoleOptions]) -> ConsoleOptions:
        if not custom:
            return _DEFAULT_CONSOLE_OPTIONS

        default_log_format = _DEFAULT_COLOR_LOG_FORMAT if custom.colorize else _DEFAULT_LOG_FORMAT

        return ConsoleOptions(
            level=custom.level or _DEFAULT_CONSOLE_OPTIONS.level,
            log_format=custom.log_format or default_log_format,
            date_format=custom.date_format or _DEFAULT_CONSOLE_OPTIONS.date_format,
            colorize=custom.colorize,
        )

    def _merge_file_options(self, custom: Optional[FileOptions]) -> FileOptions:
        if not custom:
            return _DEFAULT_FILE_OPTIONS

        return FileOptions(
            enable=custom.enable,
            path=custom.path or _DEFAULT_FILE_OPTIONS.path,
            level=custom.level or _DEFAULT_FILE_OPTIONS.level,
            log_format=custom.log_format or _DEFAULT_FILE_OPTIONS.log_format,
            date_format=custom.date_format or _DEFAULT_FILE_OPTIONS.date_format,
            rotation=custom.rotation if custom.rotation is not None else _DEFAULT_FILE_OPTIONS.rotation,
            retention=custom.retention if custom.retention is not None else _DEFAULT_FILE_OPTIONS.retention,
        )

    def _initialize(self) -> None:
        self._logger = logging.getLogger(constants.SPIKIT)

        # The logger itself must pass everything that any handler wants
        levels = [self._console_options.level]
        if self._file_options.enable:
            levels.append(self._file_options.level)
        self._logger.setLevel(_LEVEL_TO_LOGGING[min(levels)])

        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)
            handler.close()

        self._logger.addHandler(self._console_handler())
        if self._file_options.enable:
            self._logger.addHandler(self._file_handler())

    def _console_handler(self) -> logging.Handler:
        options = self._console_options
        if not options.colorize:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(fmt=options.log_format, datefmt=options.date_format))
        else:
            try:
                import colorlog
            except ImportError:
                raise ImportError(
                    "The 'colorlog' package is required for colorized logging. "
                    "Please install it using 'pip install colorlog'."
                )

            handler = colorlog.StreamHandler()
            handler.setFormatter(
                colorlog.ColoredFormatter(
                    fmt=options.log_format,
                    datefmt=options.date_format,
                    log_colors=_DEFAULT_LOG_COLORS,
                    reset=True,
                    style="%",
                )
            )
        handler.setLevel(_LEVEL_TO_LOGGING[options.level])
        return handler

    def _file_handler(self) -> logging.Handler:
        options = self._file_options
        backup_count = int(options.retention or 0)
        if isinstance(options.rotation, int):
            handler: logging.Handler = RotatingFileHandler(
                filename=options.path,
                maxBytes=options.rotation,
                backupCount=backup_count,
                encoding=constants.UTF_8,
            )
        elif isinstance(options.rotation, str):
            handler = TimedRotatingFileHandler(
                filename=options.path,
                when=options.rotation,
                interval=1,
                backupCount=backup_count,
                encoding=constants.UTF_8,
            )
        else:
            handler = logging.FileHandler(filename=options.path, encoding=constants.UTF_8)

        handler.setLevel(_LEVEL_TO_LOGGING[options.level])
        handler.setFormatter(logging.Formatter(fmt=options.log_format, datefmt=options.date_format))
        return handler

    def log(self, level: LoggerLevel, msg: str, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.pop("stacklevel", 1) + 1
        self._logger.log(_LEVEL_TO_LOGGING[level], msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.pop("stacklevel", 1) + 1
        self._logger.exception(msg, *args, **kwargs)
