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

import pytest

from spikit.exceptions import map_exceptions


class SourceError(Exception):
    pass


class TargetError(Exception):
    pass


class TestMapExceptions:
    """
    Tests for map_exceptions.
    """

    def test_mapped(self):
        with pytest.raises(TargetError) as excinfo:
            with map_exceptions({SourceError: TargetError}):
                raise SourceError("original")
        assert str(excinfo.value) == "original"
        assert isinstance(excinfo.value.__cause__, SourceError)

    def test_subclass_is_mapped(self):
        with pytest.raises(TargetError):
            with map_exceptions({OSError: TargetError}):
                raise FileNotFoundError("missing")

    def test_unmapped_is_reraised(self):
        with pytest.raises(KeyError):
            with map_exceptions({SourceError: TargetError}):
                raise KeyError("key")

    def test_no_exception(self):
        with map_exceptions({SourceError: TargetError}):
            value = 1
        assert value == 1
