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

__all__ = ['BUILTINS', 'BUILTINS_URL', 'get_builtin', 'builtin_url']

from types import MappingProxyType
from typing import Mapping, Optional

# Base URL of the reference documentation for JavaScript's standard global objects.
BUILTINS_URL = 'https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/'

_NAMES = (
    'Array',
    'ArrayBuffer',
    'Boolean',
    'DataView',
    'Date',
    'Error',
    'EvalError',
    'Float32Array',
    'Float64Array',
    'Function',
    'Generator',
    'GeneratorFunction',
    'Infinity',
    'Int16Array',
    'Int32Array',
    'Int8Array',
    'InternalError',
    'Intl',
    'Intl.Collator',
    'Intl.DateTimeFormat',
    'Intl.NumberFormat',
    'Iterator',
    'JSON',
    'Map',
    'Math',
    'NaN',
    'Number',
    'Object',
    'ParallelArray',
    'Promise',
    'Proxy',
    'RangeError',
    'ReferenceError',
    'Reflect',
    'RegExp',
    'Set',
    'StopIteration',
    'String',
    'Symbol',
    'SyntaxError',
    'TypeError',
    'TypedArray',
    'URIError',
    'Uint16Array',
    'Uint32Array',
    'Uint8Array',
    'Uint8ClampedArray',
    'WeakMap',
    'WeakSet',
)

# lowercase name -> canonical name
BUILTINS: Mapping[str, str] = MappingProxyType({name.lower(): name for name in _NAMES})


def get_builtin(text: str) -> Optional[str]:
    """
    Returns the canonical name of the global object matching the given text
    case-insensitively, or None if there is no such builtin.
    """
    return BUILTINS.get(text.lower())


def builtin_url(name: str) -> str:
    return BUILTINS_URL + name
