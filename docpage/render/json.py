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

__all__ = ['JSONRenderer']

import json
from typing import Any, Dict, List

from ..reference import load_entries
from .base import Renderer, OutputFile

class JSONRenderer(Renderer):
    """
    Dumps the input batch, untransformed, as index.json.
    """
    ext = '.json'

    def render_json(self, batch: List[Dict[str, Any]]) -> OutputFile:
        return OutputFile('index.json', json.dumps(batch, indent=2, ensure_ascii=False).encode('utf8'))

    def render(self, batch: List[Dict[str, Any]]) -> List[OutputFile]:
        # Validates the batch shape; the entries themselves aren't needed.
        load_entries(batch)
        return [self.render_json(batch)]
