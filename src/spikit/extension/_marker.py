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

import inspect
from dataclasses import dataclass
from typing import Optional, TypeVar

from spikit.common import constants

__all__ = ["ExtensionPointInfo", "extension_point", "get_extension_point_info", "is_extension_point", "get_identifier"]

_T = TypeVar("_T", bound=type)


@dataclass(frozen=True)
class ExtensionPointInfo:
    """Marker metadata attached to an extension point class.

    Args:
        default: The name used by ``ExtensionLoader.get_default()``, if any.
    """

    default: Optional[str] = None


def extension_point(cls: Optional[_T] = None, *, default: Optional[str] = None):
    """Mark an abstract class as an extension point.

    The marker is an ordinary class attribute, so subclasses inherit it
    together with the default name unless they are marked themselves.

    Example:
        @extension_point(default="gzip")
        class Compressor(abc.ABC):
            ...

        @extension_point
        class Serializer(abc.ABC):
            ...
    """

    def wrap(klass: _T) -> _T:
        setattr(klass, constants.EXTENSION_POINT_ATTR, ExtensionPointInfo(default=default))
        return klass

    if cls is None:
        return wrap
    return wrap(cls)


def get_extension_point_info(cls) -> Optional[ExtensionPointInfo]:
    """Return the marker metadata of ``cls`` or of its nearest marked ancestor.

    Returns:
        The ExtensionPointInfo, or None if ``cls`` is not a marked class.
    """
    if not isinstance(cls, type):
        return None
    info = getattr(cls, constants.EXTENSION_POINT_ATTR, None)
    return info if isinstance(info, ExtensionPointInfo) else None


def is_extension_point(cls) -> bool:
    """Whether ``cls`` is a marked abstract class."""
    return get_extension_point_info(cls) is not None and inspect.isabstract(cls)


def get_identifier(cls: type) -> str:
    """Stable identifier of a class, e.g. ``spikit.logger._base.ExtLogger``."""
    return f"{cls.__module__}.{cls.__qualname__}"
