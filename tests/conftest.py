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

from spikit import logger
from spikit.logger._logging import LoggingLogger


@pytest.fixture(autouse=True)
def restore_logger():
    """Put the process-wide logger back after tests that replace or reconfigure it."""
    previous = logger.get_instance()
    yield
    logger.set_instance(previous)
    if isinstance(previous, LoggingLogger):
        # Another LoggingLogger may have swapped the handlers of the shared stdlib logger
        previous._initialize()
