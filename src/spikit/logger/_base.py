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

import abc
import enum
import os
from dataclasses import dataclass
from typing import Optional, Union

from spikit.extension._marker import extension_point

__all__ = ["ExtLogger", "LoggerLevel", "ConsoleOptions", "FileOptions"]


class LoggerLevel(enum.IntEnum):
    """
    Severity of a log record.

    :cvar DEBUG: Discovery details such as skipped lines and duplicate names.
    :cvar INFO: Normal progress, e.g. an extension point finished discovery.
    :cvar WARNING: A configuration entry was dropped.
    :cvar ERROR: Discovery of a whole extension point failed.
    :cvar CRITICAL: The process cannot continue.
    """

    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


@dataclass
class ConsoleOptions:
    """
    Configuration options for console logging.
    """

    level: LoggerLevel = LoggerLevel.INFO
    log_format: Optional[str] = None
    date_format: Optional[str] = None
    colorize: bool = False


@dataclass
class FileOptions:
    """
    Configuration options for file logging.

    ``rotation`` is either a size in bytes (int) or a time/size string such as
    ``"midnight"`` or ``"10 MB"``; ``retention`` is a backup count (int) or a
    loguru-style duration string.
    """

    enable: bool
    path: str = os.path.join(os.getcwd(), "spikit.log")
    level: LoggerLevel = LoggerLevel.INFO
    log_format: Optional[str] = None
    date_format: Optional[str] = None
    rotation: Optional[Union[int, str]] = None
    retention: Optional[Union[int, str]] = None


@extension_point(default="logging")
class ExtLogger(abc.ABC):
    """
    Abstract logger used by every spikit component.

    Backends are extensions of this class and are registered under
    ``extensions/spikit.logger._base.ExtLogger``; the default backend is the
    one named ``logging``.
    """

    _console_options: ConsoleOptions
    _file_options: FileOptions

    def __init__(self, console_options: Optional[ConsoleOptions] = None, file_options: Optional[FileOptions] = None):
        """
        Initialize the logger with console and file options.

        :param console_options: Options for console logging.
        :type console_options: ConsoleOptions
        :param file_options: Options for file logging.
        :type file_options: FileOptions
        """
        self._console_options = self._merge_console_options(console_options)
        self._file_options = self._merge_file_options(file_options)

    @property
    def console_options(self) -> ConsoleOptions:
        return self._console_options

    @property
    def file_options(self) -> FileOptions:
        return self._file_options

    @abc.abstractmethod
    def _merge_console_options(self, custom: Optional[ConsoleOptions]) -> ConsoleOptions:
        """
        Fill the unset fields of ``custom`` from the backend defaults.

        :param custom: Options for console logging.
        :type custom: ConsoleOptions
        :return: Merged console options.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def _merge_file_options(self, custom: Optional[FileOptions]) -> FileOptions:
        """
        Fill the unset fields of ``custom`` from the backend defaults.

        :param custom: Options for file logging.
        :type custom: FileOptions
        :return: Merged file options.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def log(self, level: LoggerLevel, msg: str, *args, **kwargs):
        """
        Log a message with the specified severity level.

        :param level: The severity level of the message.
        :type level: LoggerLevel
        :param msg: The log message, %-style placeholders are filled from ``args``.
        :type msg: str
        """
        raise NotImplementedError()

    # Each helper adds one frame, so callers see their own location in records.
    def debug(self, msg: str, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.pop("stacklevel", 1) + 1
        self.log(LoggerLevel.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.pop("stacklevel", 1) + 1
        self.log(LoggerLevel.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.pop("stacklevel", 1) + 1
        self.log(LoggerLevel.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.pop("stacklevel", 1) + 1
        self.log(LoggerLevel.ERROR, msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs):
        kwargs["stacklevel"] = kwargs.pop("stacklevel", 1) + 1
        self.log(LoggerLevel.CRITICAL, msg, *args, **kwargs)

    @abc.abstractmethod
    def exception(self, msg: str, *args, **kwargs):
        """
        Log an ERROR level message together with the active exception's traceback.

        :param msg: The error message.
        :type msg: str
        """
        raise NotImplementedError()
