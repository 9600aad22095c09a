# Copyright 2021-2023 Jason Tackaberry
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

__all__ = ['recache', 'slugify', 'files_str_to_list']

import re
import shlex
import unicodedata
from functools import lru_cache
from typing import List, Pattern

# Characters that are dropped outright rather than becoming a separator, so that
# "Foo's" slugifies to "foos" and not "foo-s".
STRIP_CHARS = '\'"‘’“”'


@lru_cache(maxsize=None)
def recache(pattern: str, flags: int = 0) -> Pattern[str]:
    """
    Returns a compiled regexp pattern, caching the result for subsequent invocations.
    """
    return re.compile(pattern, flags)


@lru_cache(maxsize=4096)
def slugify(text: str, separator: str = '-') -> str:
    """
    Returns a URL-safe anchor slug for the given display text.

    Accents are folded to their ASCII base letters, quote characters are removed,
    the result is lowercased, and any run of characters other than ASCII letters and
    digits collapses into a single separator.  Leading and trailing separators are
    trimmed, so text with no alphanumeric characters yields the empty string.
    """
    s = unicodedata.normalize('NFKD', str(text))
    s = s.encode('ascii', 'ignore').decode('ascii')
    s = s.translate({ord(c): None for c in STRIP_CHARS}).lower()
    s = recache(r'[^a-z0-9]+').sub(separator, s)
    return s.strip(separator)


def files_str_to_list(s: str) -> List[str]:
    """
    Splits a whitespace and newline separated list of file names (as found in config
    files) into a list, honoring shell quoting.
    """
    files: List[str] = []
    for line in s.strip().splitlines():
        files.extend(shlex.split(line))
    return files
