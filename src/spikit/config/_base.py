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

__all__ = ["BaseConfig"]


class BaseConfig(abc.ABC):
    """
    Base class for all spikit configuration objects.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        fields = ", ".join(f"{slot.lstrip('_')}={getattr(self, slot)!r}" for slot in self._all_slots())
        return f"{type(self).__name__}({fields})"

    @classmethod
    def _all_slots(cls) -> list[str]:
        slots: list[str] = []
        for klass in reversed(cls.__mro__):
            slots.extend(getattr(klass, "__slots__", ()))
        return slots
