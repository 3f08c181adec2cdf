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

import importlib

from spikit.common import constants

from .exceptions import TypeMismatchError, TypeNotFoundError
from ._marker import get_identifier

__all__ = ["ImplementationResolver"]


class ImplementationResolver:
    """Turns implementation identifiers into classes of one extension point.

    Two identifier forms are accepted:
    1. ``package.module:ClassName`` (the attribute part may be dotted for nested classes)
    2. ``package.module.ClassName``, where the longest importable prefix is the module
    """

    __slots__ = ("_interface",)

    def __init__(self, interface: type) -> None:
        self._interface = interface

    @property
    def interface(self) -> type:
        return self._interface

    def resolve(self, identifier: str) -> type:
        """Import the class named by ``identifier`` and check it against the extension point.

        Args:
            identifier: The implementation identifier.

        Returns:
            The implementation class.

        Raises:
            TypeNotFoundError: If the module or attribute cannot be found.
            TypeMismatchError: If the object is not a subclass of the extension point.
        """
        try:
            if constants.MODULE_ATTR_SEPARATOR in identifier:
                module_name, attr_path = identifier.rsplit(constants.MODULE_ATTR_SEPARATOR, 1)
                obj = importlib.import_module(module_name)
                attrs = attr_path.split(".")
            else:
                obj, attrs = self._import_longest_prefix(identifier)

            for attr in attrs:
                obj = getattr(obj, attr)
        except Exception as e:
            raise TypeNotFoundError(f"Failed to load implementation '{identifier}': {e}") from e

        if not isinstance(obj, type):
            raise TypeMismatchError(f"Implementation '{identifier}' is not a class.")
        if not issubclass(obj, self._interface):
            raise TypeMismatchError(
                f"Loaded class '{get_identifier(obj)}' is not a subclass of '{get_identifier(self._interface)}'."
            )
        return obj

    @staticmethod
    def _import_longest_prefix(identifier: str):
        parts = identifier.split(".")
        for index in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:index])
            try:
                return importlib.import_module(module_name), parts[index:]
            except ModuleNotFoundError as e:
                # Only a missing prefix means "try a shorter one"; anything else is a broken module
                if e.name and (module_name == e.name or module_name.startswith(f"{e.name}.")):
                    continue
                raise
        raise ModuleNotFoundError(f"No module found in '{identifier}'")
