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

import os

import pytest

from spikit.common import constants
from spikit.config import LoaderConfig


class TestLoaderConfig:
    """
    Tests for LoaderConfig.
    """

    def test_defaults(self):
        config = LoaderConfig()
        assert config.directory == constants.EXT_DIRECTORY
        assert config.search_paths == []
        assert config.packages == ["spikit"]
        assert config.encoding == "utf-8"

    def test_directory_is_normalized(self):
        assert LoaderConfig(directory="/plugins/myapp").directory == "plugins/myapp/"
        assert LoaderConfig(directory=" plugins/ ").directory == "plugins/"

    @pytest.mark.parametrize("directory", ["", "   ", "/", "//"])
    def test_blank_directory(self, directory):
        with pytest.raises(ValueError):
            LoaderConfig(directory=directory)

    def test_invalid_encoding(self):
        with pytest.raises(ValueError) as excinfo:
            LoaderConfig(encoding="no-such-codec")
        assert "Invalid encoding" in str(excinfo.value)

    def test_search_paths_accept_path_objects(self, tmp_path):
        config = LoaderConfig(search_paths=[tmp_path, "relative/dir"])
        assert config.search_paths == [str(tmp_path), "relative/dir"]

    def test_accessors_return_copies(self):
        config = LoaderConfig(search_paths=["a"], packages=["spikit"])
        config.search_paths.append("b")
        config.packages.append("other")
        assert config.search_paths == ["a"]
        assert config.packages == ["spikit"]

    def test_setters(self):
        config = LoaderConfig()
        config.packages = ["myapp", "spikit"]
        config.search_paths = ["/etc/myapp"]
        config.encoding = "latin-1"
        assert config.packages == ["myapp", "spikit"]
        assert config.search_paths == ["/etc/myapp"]
        assert config.encoding == "latin-1"

    def test_from_env(self):
        environ = {"SPIKIT_PATH": os.pathsep.join(["/etc/myapp", "", "  ", "/opt/plugins"])}
        config = LoaderConfig.from_env(environ, packages=[])
        assert config.search_paths == ["/etc/myapp", "/opt/plugins"]
        assert config.packages == []

    def test_from_env_unset(self):
        assert LoaderConfig.from_env({}).search_paths == []

    def test_repr(self):
        text = repr(LoaderConfig(search_paths=["/etc/myapp"]))
        assert text.startswith("LoaderConfig(")
        assert "search_paths=['/etc/myapp']" in text
