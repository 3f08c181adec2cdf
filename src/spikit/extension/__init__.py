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

from typing import TypeVar

from ._cache import InstanceCache
from ._directory import ExtensionDirectory
from ._loader import ExtensionLoader
from ._marker import ExtensionPointInfo, extension_point, get_extension_point_info, get_identifier, is_extension_point
from ._parser import parse_config
from ._reader import ResourceReader, SearchPathReader, StaticReader
from ._resolver import ImplementationResolver
from .exceptions import (
    ExtensionError,
    InstantiationError,
    InvalidArgumentError,
    InvalidExtensionPointError,
    MissingDefaultError,
    ResourceReadError,
    TypeMismatchError,
    TypeNotFoundError,
    UnknownExtensionError,
)

__all__ = [
    "extension_point",
    "get_extension_point_info",
    "is_extension_point",
    "get_identifier",
    "ExtensionPointInfo",
    "ExtensionLoader",
    "ExtensionDirectory",
    "InstanceCache",
    "ImplementationResolver",
    "ResourceReader",
    "SearchPathReader",
    "StaticReader",
    "parse_config",
    "get_extension_loader",
    "extension_directory",
    "ExtensionError",
    "InvalidExtensionPointError",
    "InvalidArgumentError",
    "UnknownExtensionError",
    "MissingDefaultError",
    "TypeNotFoundError",
    "TypeMismatchError",
    "InstantiationError",
    "ResourceReadError",
]

_T = TypeVar("_T")

# The process-wide default directory, reading resources from the packages and
# SPIKIT_PATH roots known at import time
extension_directory = ExtensionDirectory()


def get_extension_loader(interface: type[_T]) -> ExtensionLoader[_T]:
    """
    Get the loader of an extension point from the default directory.

    Example:
        compressor = get_extension_loader(Compressor).get("gzip")
    """
    return extension_directory.get_loader(interface)
