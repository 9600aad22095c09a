# Copyright 2023 Jason Tackaberry
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

__all__ = ['YAMLRenderer']

from typing import Any, Dict, List

import yaml
try:
    from yaml import CSafeDumper as SafeDumper
except ImportError:
    from yaml import SafeDumper

from ..reference import load_entries
from .base import OutputFile
from .json import JSONRenderer

class BlockStringDumper(SafeDumper):
    pass


def str_representer(dumper: SafeDumper, data: str, **kwargs):
    """
    Represents strings containing newlines as a YAML block scalar.
    """
    if data.count('\n') >= 1:
        kwargs['style'] = '|'
    return dumper.represent_scalar('tag:yaml.org,2002:str', data, **kwargs)

BlockStringDumper.add_representer(str, str_representer)


class YAMLRenderer(JSONRenderer):
    """
    Dumps the input batch, untransformed, as index.yaml.
    """
    ext = '.yaml'

    def render(self, batch: List[Dict[str, Any]]) -> List[OutputFile]:
        load_entries(batch)
        text = yaml.dump(batch, sort_keys=False, allow_unicode=True, Dumper=BlockStringDumper)
        return [OutputFile('index.yaml', text.encode('utf8'))]
