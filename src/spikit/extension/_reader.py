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
import importlib.resources
import os
from collections.abc import Iterable, Mapping
from typing import Optional

from spikit import logger
from spikit.common.types import StrOrBytes
from spikit.common.utils.common import to_str
from spikit.config import LoaderConfig
from spikit.exceptions import map_exceptions

from .exceptions import ResourceReadError

__all__ = ["ResourceReader", "SearchPathReader", "StaticReader"]

_READ_ERRORS = {OSError: ResourceReadError, UnicodeDecodeError: ResourceReadError}


class ResourceReader(abc.ABC):
    """
    Source of raw configuration blocks for extension points.
    """

    @abc.abstractmethod
    def read(self, identifier: str) -> list[str]:
        """
        Return every configuration block registered for an extension point.

        :param identifier: The extension point identifier.
        :type identifier: str
        :return: The raw blocks in lookup order; empty if there are none.
        :rtype: list[str]
        :raises ResourceReadError: If an existing resource cannot be read.
        """
        raise NotImplementedError()


class SearchPathReader(ResourceReader):
    """
    Reads ``<root>/<directory><identifier>`` from every configured root.

    Package roots (resolved with ``importlib.resources``) come first, in the
    order given by the config, followed by the filesystem search paths.
    Missing resources are skipped, and so are packages that fail to
    import or cannot act as a resource root.
    """

    __slots__ = ("_config",)

    def __init__(self, config: Optional[LoaderConfig] = None) -> None:
        self._config = config or LoaderConfig.from_env()

    @property
    def config(self) -> LoaderConfig:
        return self._config

    def read(self, identifier: str) -> list[str]:
        parts = [*self._config.directory.strip("/").split("/"), identifier]
        blocks = []

        for package in self._config.packages:
            try:
                resource = importlib.resources.files(package)
            except Exception as e:
                # Not importable, or not a package
                logger.get_instance().warning("Extension package '%s' is not usable, skipping it: %s", package, e)
                continue
            for part in parts:
                resource = resource / part
            if resource.is_file():
                with map_exceptions(_READ_ERRORS):
                    blocks.append(to_str(resource.read_bytes(), self._config.encoding))

        for search_path in self._config.search_paths:
            path = os.path.join(search_path, *parts)
            if os.path.isfile(path):
                with map_exceptions(_READ_ERRORS):
                    with open(path, "rb") as f:
                        blocks.append(to_str(f.read(), self._config.encoding))

        return blocks


class StaticReader(ResourceReader):
    """
    Serves configuration blocks held in memory.

    Example:
        reader = StaticReader({
            "myapp.codec.Codec": ["json=myapp.codec.json:JsonCodec"],
        })
        directory = ExtensionDirectory(reader)
    """

    __slots__ = ("_blocks",)

    def __init__(self, blocks: Optional[Mapping[str, Iterable[StrOrBytes]]] = None) -> None:
        self._blocks: dict[str, list[str]] = {}
        for identifier, items in (blocks or {}).items():
            for block in items:
                self.add(identifier, block)

    def add(self, identifier: str, block: StrOrBytes) -> None:
        """
        Append a configuration block for an extension point.

        Loaders that already finished discovery will not see it until ``clear()``.

        :param identifier: The extension point identifier.
        :type identifier: str
        :param block: The raw configuration text.
        :type block: StrOrBytes
        """
        self._blocks.setdefault(identifier, []).append(to_str(block))

    def read(self, identifier: str) -> list[str]:
        return list(self._blocks.get(identifier, ()))
