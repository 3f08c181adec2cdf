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

import threading
from typing import Optional

from ._base import ConsoleOptions, ExtLogger, FileOptions, LoggerLevel

__all__ = [
    "get_instance",
    "set_instance",
    "use_backend",
    "LoggerLevel",
    "ConsoleOptions",
    "FileOptions",
    "ExtLogger",
]

_instance: Optional[ExtLogger] = None
_instance_lock = threading.RLock()


def get_instance() -> ExtLogger:
    """
    Get the process-wide logger, creating a ``LoggingLogger`` on first use.

    The default backend is built directly rather than through the extension
    registry, because the registry itself logs through this function.

    :return: The current logger instance.
    :rtype: ExtLogger
    """
    global _instance
    # Fast path: check if instance exists without acquiring lock
    if _instance is not None:
        return _instance

    # Slow path: acquire lock and create instance if needed
    with _instance_lock:
        if _instance is None:
            # Lazy import to avoid circular dependency
            from ._logging import LoggingLogger

            _instance = LoggingLogger()

        return _instance


def set_instance(logger: ExtLogger) -> None:
    """
    Replace the process-wide logger.

    :param logger: The new logger instance to set.
    :type logger: ExtLogger
    :raises TypeError: If ``logger`` is not an ExtLogger.
    """
    if not isinstance(logger, ExtLogger):
        raise TypeError("Logger must be an instance of ExtLogger")

    global _instance
    with _instance_lock:
        _instance = logger


def use_backend(name: Optional[str] = None) -> ExtLogger:
    """
    Select a logger backend registered for ``ExtLogger`` and install it.

    :param name: The backend name (``logging``, ``loguru``, or any name a
        resource file registers). Uses the declared default when omitted.
    :type name: Optional[str]
    :return: The installed logger.
    :rtype: ExtLogger
    :raises spikit.extension.ExtensionError: If the backend cannot be loaded.
    """
    from spikit.extension import get_extension_loader

    loader = get_extension_loader(ExtLogger)
    backend = loader.get_default() if name is None else loader.get(name)
    set_instance(backend)
    return backend
