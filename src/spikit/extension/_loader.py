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
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic, TypeVar

from spikit import logger
from spikit.common.utils.common import is_blank

from .exceptions import (
    InvalidArgumentError,
    MissingDefaultError,
    TypeMismatchError,
    TypeNotFoundError,
    UnknownExtensionError,
)
from ._cache import Holder
from ._marker import get_extension_point_info, get_identifier
from ._parser import parse_config
from ._resolver import ImplementationResolver

if TYPE_CHECKING:
    from ._directory import ExtensionDirectory

__all__ = ["ExtensionLoader"]

_T = TypeVar("_T")


class ExtensionLoader(Generic[_T]):
    """Named, lazily created singletons of one extension point.

    The name -> class mapping is discovered from configuration resources the
    first time it is needed and then kept until ``clear()``. Instances are
    created on the first ``get()`` of a name and shared process-wide per
    class through the directory's ``InstanceCache``.

    Loaders are obtained from ``ExtensionDirectory.get_loader()``, never
    constructed directly.
    """

    def __init__(self, interface: type[_T], directory: "ExtensionDirectory") -> None:
        """Initialize a loader for a validated extension point.

        Args:
            interface: The extension point class.
            directory: The directory owning this loader; provides the resource
                reader and the shared instance cache.
        """
        self._interface = interface
        self._identifier = get_identifier(interface)
        self._directory = directory
        self._resolver = ImplementationResolver(interface)
        # Guards discovery only; construction is serialized per name
        self._lock = threading.RLock()
        self._name_locks: dict[str, threading.RLock] = {}
        self._instances: dict[str, Holder[_T]] = {}
        self._classes: Holder[Mapping[str, type]] = Holder()

    @property
    def interface(self) -> type[_T]:
        """The extension point class."""
        return self._interface

    @property
    def identifier(self) -> str:
        """The extension point identifier used to locate resources."""
        return self._identifier

    def get(self, name: str) -> _T:
        """Get the instance registered under ``name``.

        Args:
            name: The extension name.

        Returns:
            The shared instance; the same object on every call until ``clear()``.

        Raises:
            InvalidArgumentError: If the name is None, not a string, or blank.
            UnknownExtensionError: If nothing valid is registered under the name.
            InstantiationError: If the implementation cannot be instantiated.
        """
        if is_blank(name):
            raise InvalidArgumentError(f"Extension name must be a non-blank string, got {name!r}.")

        holder = self._instances.get(name)
        if holder is None:
            # Unknown names never get a holder
            self.load_class(name)
            holder = self._instances.setdefault(name, Holder())

        instance = holder.value
        if instance is not None:
            return instance

        # Serialized per name, not per loader
        with self._name_lock(name):
            instance = holder.value
            if instance is None:
                instance = self._create_extension(name)
                holder.value = instance
        return instance

    def get_default(self) -> _T:
        """Get the instance registered under the extension point's default name.

        Raises:
            MissingDefaultError: If the extension point declares no default name.
        """
        info = get_extension_point_info(self._interface)
        default = info.default if info else None
        if is_blank(default):
            raise MissingDefaultError(f"Extension point '{self._identifier}' does not declare a default name.")
        return self.get(default)

    def load_class(self, name: str) -> type[_T]:
        """Get the class registered under ``name`` without instantiating it.

        Raises:
            UnknownExtensionError: If nothing valid is registered under the name.
        """
        cls = self._class_map().get(name)
        if cls is None:
            raise UnknownExtensionError(
                f"No implementation registered under name '{name}' for extension point '{self._identifier}'."
            )
        return cls

    def has_extension(self, name: str) -> bool:
        return name in self._class_map()

    def list_names(self) -> list[str]:
        """Registered names in discovery order."""
        return list(self._class_map())

    def clear(self) -> None:
        """Reset the whole registry, not only this extension point.

        Empties the owning directory, the shared instance cache and every
        known loader's caches. The next lookup rediscovers from configuration.
        """
        self._directory.clear()

    def _reset(self) -> None:
        with self._lock:
            self._instances.clear()
            self._name_locks.clear()
            self._classes.value = None

    def _name_lock(self, name: str) -> threading.RLock:
        lock = self._name_locks.get(name)
        if lock is None:
            lock = self._name_locks.setdefault(name, threading.RLock())
        return lock

    def _create_extension(self, name: str) -> _T:
        cls = self.load_class(name)
        return self._directory.instances.get_or_create(cls)

    def _class_map(self) -> Mapping[str, type]:
        classes = self._classes.value
        if classes is not None:
            return classes

        with self._lock:
            if self._classes.value is None:
                self._classes.value = MappingProxyType(self._load_class_map())
            return self._classes.value

    def _load_class_map(self) -> dict[str, type]:
        log = logger.get_instance()
        try:
            blocks = self._directory.reader.read(self._identifier)
        except Exception as e:
            log.error("Failed to read extensions of '%s', none will be available: %s", self._identifier, e)
            return {}

        classes: dict[str, type] = {}
        for block in blocks:
            for name, identifier in parse_config(block, source=self._identifier):
                if name in classes:
                    log.debug("Ignoring duplicate extension '%s=%s' for '%s'", name, identifier, self._identifier)
                    continue
                try:
                    cls = self._resolver.resolve(identifier)
                except (TypeNotFoundError, TypeMismatchError) as e:
                    log.warning("Dropping extension '%s' of '%s': %s", name, self._identifier, e)
                    continue
                classes.setdefault(name, cls)

        log.debug("Discovered %d extension(s) for '%s': %s", len(classes), self._identifier, list(classes))
        return classes

    def __repr__(self) -> str:
        return f"ExtensionLoader({self._identifier!r})"
