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
from typing import Any, Generic, Optional, TypeVar

from spikit import logger

from .exceptions import InstantiationError
from ._marker import get_identifier

__all__ = ["Holder", "InstanceCache"]

_T = TypeVar("_T")


class Holder(Generic[_T]):
    """A mutable slot that is published before its value is filled."""

    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value: Optional[_T] = None


class InstanceCache:
    """Process-wide singletons keyed by concrete implementation class.

    Shared by every loader of an ``ExtensionDirectory``, so one class is
    instantiated once even when it is registered under several names or for
    several extension points. Each class gets its own re-entrant lock, so
    different classes can be constructed concurrently.
    """

    __slots__ = ("_instances", "_locks")

    def __init__(self) -> None:
        self._instances: dict[type, Holder[Any]] = {}
        self._locks: dict[type, threading.RLock] = {}

    def get_or_create(self, cls: type) -> Any:
        """Return the singleton of ``cls``, calling ``cls()`` if there is none yet.

        Raises:
            InstantiationError: If calling ``cls()`` raises.
        """
        holder = self._instances.get(cls)
        if holder is not None:
            return holder.value

        lock = self._locks.get(cls)
        if lock is None:
            lock = self._locks.setdefault(cls, threading.RLock())

        with lock:
            holder = self._instances.get(cls)
            if holder is None:
                try:
                    instance = cls()
                except Exception as e:
                    raise InstantiationError(f"Failed to instantiate '{get_identifier(cls)}': {e}") from e

                holder = Holder()
                holder.value = instance
                holder = self._instances.setdefault(cls, holder)
                logger.get_instance().debug("Instantiated extension '%s'", get_identifier(cls))
            return holder.value

    def get(self, cls: type) -> Optional[Any]:
        """Return the cached singleton of ``cls`` without creating it."""
        holder = self._instances.get(cls)
        return None if holder is None else holder.value

    def __contains__(self, cls: type) -> bool:
        return cls in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def clear(self) -> None:
        self._instances.clear()
        self._locks.clear()
