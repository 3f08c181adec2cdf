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

SPIKIT = "spikit"

UTF_8 = "utf-8"

# Resource layout: <search root>/<EXT_DIRECTORY><extension point identifier>
EXT_DIRECTORY = "extensions/"
DEFAULT_PACKAGES = (SPIKIT,)

# Environment variables
SEARCH_PATH_ENV = "SPIKIT_PATH"

# Config file syntax
COMMENT_PREFIX = "#"
NAME_VALUE_SEPARATOR = "="

# Implementation identifier: "package.module:ClassName" or "package.module.ClassName"
MODULE_ATTR_SEPARATOR = ":"

# Marker attribute set on extension point classes
EXTENSION_POINT_ATTR = "__extension_point__"
