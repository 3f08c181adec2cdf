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

__all__ = [
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


class ExtensionError(Exception):
    """
    Base class of every error raised by the extension registry.
    """


class InvalidExtensionPointError(ExtensionError, TypeError):
    """
    The requested type is not an abstract class marked with ``@extension_point``.
    """


class InvalidArgumentError(ExtensionError, ValueError):
    """
    An extension name is missing, not a string, or blank.
    """


class UnknownExtensionError(ExtensionError, LookupError):
    """
    No implementation is registered under the requested name.
    """


class MissingDefaultError(ExtensionError):
    """
    The extension point does not declare a default name.
    """


class TypeNotFoundError(ExtensionError):
    """
    An implementation identifier could not be imported.
    """


class TypeMismatchError(ExtensionError, TypeError):
    """
    An implementation identifier resolved to something that is not a subclass of the extension point.
    """


class InstantiationError(ExtensionError):
    """
    Calling the implementation class without arguments failed. The original error is the ``__cause__``.
    """


class ResourceReadError(ExtensionError):
    """
    A configuration resource exists but could not be read or decoded.
    """
