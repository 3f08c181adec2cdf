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

from typing import Any, Optional, TypeVar

from spikit import logger
from spikit.config import LoaderConfig

from .exceptions import InvalidExtensionPointError
from ._cache import InstanceCache
from ._loader import ExtensionLoader
from ._marker import is_extension_point
from ._reader import ResourceReader, SearchPathReader

__all__ = ["ExtensionDirectory"]

_T = TypeVar("_T")


class ExtensionDirectory:
    """Owns one ExtensionLoader per extension point and the instance cache they share.

    Provides unified access to extension implementations across extension
    points. Most code uses the module-level default directory through
    ``spikit.extension.get_extension_loader``; tests and embedding hosts can
    create their own with a custom reader.
    """

    __slots__ = ("_loaders", "_instances", "_reader")

    def __init__(self, reader: Optional[ResourceReader] = None, config: Optional[LoaderConfig] = None) -> None:
        """Initialize an empty directory.

        Args:
            reader: Source of configuration blocks. Defaults to a
                SearchPathReader built from ``config``.
            config: Used only when ``reader`` is omitted. Defaults to
                ``LoaderConfig.from_env()``.
        """
        self._loaders: dict[type, ExtensionLoader] = {}
        self._instances = InstanceCache()
        self._reader = reader or SearchPathReader(config)

    @property
    def reader(self) -> ResourceReader:
        return self._reader

    @property
    def instances(self) -> InstanceCache:
        return self._instances

    def get_loader(self, interface: type[_T]) -> ExtensionLoader[_T]:
        """Get the loader for an extension point, creating it on first request.

        Concurrent first requests all receive the same loader.

        Args:
            interface: An abstract class marked with ``@extension_point``.

        Returns:
            The loader responsible for ``interface``.

        Raises:
            InvalidExtensionPointError: If ``interface`` is not a class, is not
                abstract, or is not marked.
        """
        if not is_extension_point(interface):
            raise InvalidExtensionPointError(f"{interface!r} is not an abstract class marked with @extension_point.")

        loader = self._loaders.get(interface)
        if loader is None:
            loader = self._loaders.setdefault(interface, ExtensionLoader(interface, self))
        return loader

    def list_names(self, interface: type) -> list[str]:
        """List the registered implementation names of an extension point.

        Example:
            names = directory.list_names(ExtLogger)
            # ['logging', 'loguru']
        """
        return self.get_loader(interface).list_names()

    def load_class(self, interface: type[_T], name: str) -> type[_T]:
        """Load an implementation class of an extension point without instantiating it."""
        return self.get_loader(interface).load_class(name)

    def get_extension(self, interface: type[_T], name: str) -> _T:
        """Get the shared instance registered under ``name`` for an extension point."""
        return self.get_loader(interface).get(name)

    def clear(self) -> None:
        """Forget every loader, every discovered mapping and every instance."""
        for loader in list(self._loaders.values()):
            loader._reset()
        self._loaders.clear()
        self._instances.clear()
        logger.get_instance().debug("Cleared extension directory")

    def __contains__(self, interface: Any) -> bool:
        return interface in self._loaders

    def __len__(self) -> int:
        return len(self._loaders)
