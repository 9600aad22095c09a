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

__all__ = ['Renderer', 'OutputFile', 'write_files']

import os
from configparser import ConfigParser
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..log import log

@dataclass
class OutputFile:
    """
    A rendered artifact.  The path is relative to the output directory and always
    uses forward slashes.
    """
    path: str
    contents: bytes


class Renderer:
    """
    Base class for renderers, which turn a full batch of documentation entries
    into a list of output files.
    """
    # Single-file renderers produce exactly one file named index<ext>.  When the
    # output location ends with this extension, it's taken as the file name.
    ext: Optional[str] = None

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        # Arbitrary user options, passed through to templates as-is.
        self.options: Dict[str, Any] = dict(options or {})

    @classmethod
    def from_config(cls, config: ConfigParser) -> 'Renderer':
        return cls(options=get_options(config))

    def render(self, batch: List[Dict[str, Any]]) -> List[OutputFile]: # pyright: ignore
        """
        Renders the batch of raw (as decoded from the input) documentation entries.

        The whole batch must be passed in one call, as links between entries can only
        be resolved once every entry is known.
        """
        raise NotImplementedError

    def write(self, files: List[OutputFile], dst: Optional[str]) -> None:
        """
        Writes rendered files to the given output directory (or file, for single-file
        renderers).
        """
        if self.ext and dst and dst.endswith(self.ext) and not os.path.isdir(dst) and len(files) == 1:
            dirname = os.path.dirname(dst)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            log.info('rendering to %s', dst)
            with open(dst, 'wb') as f:
                f.write(files[0].contents)
            return
        if not dst:
            log.warning('"out" is not defined in config file, assuming ./out/')
            dst = 'out'
        write_files(files, dst)


def get_options(config: ConfigParser) -> Dict[str, Any]:
    """
    Returns the template pass-through options from config: everything in the
    [options] section, plus the project name and title if set.
    """
    options: Dict[str, Any] = {}
    for prop in ('name', 'title'):
        value = config.get('project', prop, fallback=None)
        if value:
            options[prop] = value
    if config.has_section('options'):
        options.update(config.items('options', raw=True))
    return options


def write_files(files: List[OutputFile], outdir: str) -> None:
    """
    Writes all files under outdir, creating directories as needed.
    """
    os.makedirs(outdir, exist_ok=True)
    for file in files:
        outfile = os.path.join(outdir, *file.path.split('/'))
        dirname = os.path.dirname(outfile)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        log.debug('writing %s', outfile)
        with open(outfile, 'wb') as f:
            f.write(file.contents)
    log.info('wrote %d files to %s', len(files), outdir)
