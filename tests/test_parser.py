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

from spikit.extension import parse_config


class TestParseConfig:
    """
    Tests for the name=identifier configuration syntax.
    """

    def test_basic(self):
        text = "gzip=myapp.codec:Gzip\nbzip2=myapp.codec.Bzip2\n"
        assert parse_config(text) == [("gzip", "myapp.codec:Gzip"), ("bzip2", "myapp.codec.Bzip2")]

    def test_comments_and_blank_lines(self):
        text = """
        # full line comment

           gzip = myapp.codec:Gzip   # trailing comment
        #bzip2=myapp.codec:Bzip2
        """
        assert parse_config(text) == [("gzip", "myapp.codec:Gzip")]

    def test_duplicates_are_kept_in_order(self):
        """The parser reports every occurrence; the loader keeps the first."""
        text = "a=Impl1\n#comment\nb=Impl2\nmalformed-line\na=Impl3"
        assert parse_config(text) == [("a", "Impl1"), ("b", "Impl2"), ("a", "Impl3")]

    @pytest.mark.parametrize(
        "line",
        [
            "no-separator",
            "a=b=c",
            "=myapp.codec:Gzip",
            "gzip=",
            "   =   ",
            "gzip=   # only a comment after the separator",
            "=",
        ],
    )
    def test_malformed_lines_are_skipped(self, line):
        text = f"first=myapp:First\n{line}\nlast=myapp:Last"
        assert parse_config(text) == [("first", "myapp:First"), ("last", "myapp:Last")]

    def test_comment_hides_separator(self):
        assert parse_config("gzip # =myapp.codec:Gzip") == []

    def test_windows_line_endings(self):
        assert parse_config("a=x:A\r\nb=x:B\r\n") == [("a", "x:A"), ("b", "x:B")]

    def test_empty(self):
        assert parse_config("") == []
        assert parse_config("# nothing here\n\n") == []
