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

from spikit.common import constants
from spikit.common.utils.common import is_blank, to_str


class TestToStr:
    """
    Tests for to_str function.
    """

    def test_string_input(self):
        """Strings are returned unchanged."""
        data = "gzip=myapp.codec:Gzip"
        assert to_str(data) is data

        data = ""
        assert to_str(data) is data

    def test_bytes_conversion(self):
        assert to_str(b"gzip=myapp.codec:Gzip") == "gzip=myapp.codec:Gzip"
        assert to_str(b"") == ""
        assert to_str("名字=myapp:Impl".encode(constants.UTF_8)) == "名字=myapp:Impl"
        assert to_str(b"caf\xe9", encoding="latin1") == "café"

    def test_bytearray_and_memoryview(self):
        assert to_str(bytearray(b"a=b:C")) == "a=b:C"
        assert to_str(memoryview(b"a=b:C")) == "a=b:C"
        assert to_str(memoryview(bytearray(b""))) == ""

    @pytest.mark.parametrize("data", [123, None, [1, 2, 3]])
    def test_invalid_input(self, data):
        with pytest.raises(TypeError) as excinfo:
            to_str(data)
        assert "Expected str, bytes, bytearray, or memoryview" in str(excinfo.value)

    def test_encoding_errors(self):
        invalid_utf8 = b"\xff\xfe\xfd"

        with pytest.raises(UnicodeDecodeError):
            to_str(invalid_utf8)

        assert to_str(invalid_utf8, errors="ignore") == ""


class TestIsBlank:
    """
    Tests for is_blank function.
    """

    @pytest.mark.parametrize("value", ["", " ", "\t\n", None, 0, b"gzip"])
    def test_blank(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["gzip", " gzip ", "-"])
    def test_not_blank(self, value):
        assert not is_blank(value)
