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

from spikit import logger
from spikit.common import constants

__all__ = ["parse_config"]


def parse_config(text: str, source: str = "<string>") -> list[tuple[str, str]]:
    """Parse one extension configuration block.

    Every line has the form ``name=identifier``. Anything from the first
    ``#`` to the end of the line is a comment. Lines that are blank after
    stripping comments and whitespace are skipped, and so are lines that
    do not split into exactly two non-blank parts on ``=``.

    Args:
        text: The raw configuration text.
        source: Where the text came from, used in log messages only.

    Returns:
        The ``(name, identifier)`` pairs in file order. Duplicate names are
        kept; the caller decides which occurrence wins.

    Example:
        parse_config("gzip=spikit_gzip:Gzip  # fast\\nbroken-line")
        # [('gzip', 'spikit_gzip:Gzip')]
    """
    entries: list[tuple[str, str]] = []
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split(constants.COMMENT_PREFIX, 1)[0].strip()
        if not line:
            continue

        parts = line.split(constants.NAME_VALUE_SEPARATOR)
        if len(parts) != 2:
            logger.get_instance().debug("Skipping malformed line %d in %s: %r", lineno, source, raw_line)
            continue

        name, identifier = parts[0].strip(), parts[1].strip()
        if not name or not identifier:
            logger.get_instance().debug("Skipping incomplete line %d in %s: %r", lineno, source, raw_line)
            continue

        entries.append((name, identifier))
    return entries
