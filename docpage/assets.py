# Copyright 2021 Jason Tackaberry
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

__all__ = ['Assets', 'DEFAULT_TEMPLATE_PATH', 'TEMPLATE_PATTERNS']

import fnmatch
import glob
import os
from typing import IO, Iterator, List, Sequence, Tuple

# The bundled theme used when no template directory is configured.
DEFAULT_TEMPLATE_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), 'share', 'html'))
# Template sources, which are compiled rather than copied to the output.
TEMPLATE_PATTERNS = ('*.j2',)

class Assets:
    """
    The static files in a template directory, i.e. everything other than the
    templates themselves.
    """
    def __init__(self, path: str, exclude: Sequence[str] = TEMPLATE_PATTERNS):
        self.path = os.path.abspath(path)
        files = [f for f in glob.glob(os.path.join(self.path, '**'), recursive=True) if not os.path.isdir(f)]
        # Strip path prefix from files list and normalize to forward slashes, which
        # is what output file names use.
        names = (os.path.relpath(f, self.path).replace(os.path.sep, '/') for f in files)
        self.files: List[str] = sorted(
            name for name in names
            if not any(fnmatch.fnmatch(os.path.basename(name), pat) for pat in exclude)
        )

    def open(self, fname: str) -> IO[bytes]:
        return open(os.path.join(self.path, *fname.split('/')), 'rb')

    def get(self, fname: str) -> bytes:
        with self.open(fname) as f:
            return f.read()

    def __iter__(self) -> Iterator[Tuple[str, bytes]]:
        """
        Yields (relative name, contents) for every asset.
        """
        for fname in self.files:
            yield fname, self.get(fname)
