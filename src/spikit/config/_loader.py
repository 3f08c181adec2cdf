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

import codecs
import os
from collections.abc import Iterable
from typing import Optional

from spikit.common import constants
from spikit.common.types import PathLike

from ._base import BaseConfig

__all__ = ["LoaderConfig"]


class LoaderConfig(BaseConfig):
    """
    Configuration for locating extension resources.

    Resources for an extension point are looked up as
    ``<root>/<directory><identifier>`` under every package root first and
    every filesystem search path afterwards.
    """

    __slots__ = ("_directory", "_search_paths", "_packages", "_encoding")

    _directory: str
    _search_paths: list[str]
    _packages: list[str]
    _encoding: str

    def __init__(
        self,
        *,
        directory: str = constants.EXT_DIRECTORY,
        search_paths: Optional[Iterable[PathLike]] = None,
        packages: Optional[Iterable[str]] = None,
        encoding: str = constants.UTF_8,
    ) -> None:
        self.directory = directory
        self.search_paths = search_paths or []
        self.packages = constants.DEFAULT_PACKAGES if packages is None else packages
        self.encoding = encoding

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None, **kwargs) -> "LoaderConfig":
        """Build a config whose search paths come from the ``SPIKIT_PATH`` environment variable.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
            **kwargs: Any other ``LoaderConfig`` keyword argument.

        Returns:
            A new LoaderConfig.

        Example:
            # SPIKIT_PATH=/etc/myapp:/opt/plugins
            config = LoaderConfig.from_env()
            config.search_paths  # ['/etc/myapp', '/opt/plugins']
        """
        environ = os.environ if environ is None else environ
        raw = environ.get(constants.SEARCH_PATH_ENV, "")
        search_paths = [path for path in raw.split(os.pathsep) if path.strip()]
        return cls(search_paths=search_paths, **kwargs)

    @property
    def directory(self) -> str:
        """Get the base resource directory, always ending with '/'."""
        return self._directory

    @directory.setter
    def directory(self, value: str) -> None:
        """Set the base resource directory."""
        value = value.strip().strip("/")
        if not value:
            raise ValueError("Resource directory must be a non-empty relative path.")
        self._directory = f"{value}/"

    @property
    def search_paths(self) -> list[str]:
        """Get the filesystem search roots."""
        return list(self._search_paths)

    @search_paths.setter
    def search_paths(self, value: Iterable[PathLike]) -> None:
        """Set the filesystem search roots."""
        self._search_paths = [os.fspath(path) for path in value]

    @property
    def packages(self) -> list[str]:
        """Get the packages whose bundled resources are searched."""
        return list(self._packages)

    @packages.setter
    def packages(self, value: Iterable[str]) -> None:
        """Set the packages whose bundled resources are searched."""
        self._packages = list(value)

    @property
    def encoding(self) -> str:
        """Get the encoding used to decode resources."""
        return self._encoding

    @encoding.setter
    def encoding(self, value: str) -> None:
        """Set the encoding used to decode resources."""
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Invalid encoding: {value}.")
        self._encoding = value
