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

__all__ = ['DocEntry', 'Parameter', 'InputError', 'load_entries', 'parse_path']

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .typeexpr import TypeExpression, parse_type

class InputError(ValueError):
    pass


@dataclass
class Parameter:
    """
    A single documented function parameter.
    """
    name: str
    # Parsed type annotation, or None if the parameter wasn't typed.
    type: Optional[TypeExpression] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Parameter':
        return cls(name=str(data.get('name', '')), type=parse_type(data.get('type')))


@dataclass
class DocEntry:
    """
    One documented symbol, as produced by the upstream comment parser.

    Only the fields needed for linking and signature formatting are lifted out of the
    input mapping.  Everything else (description, tags, examples, source context,
    etc.) stays in raw and is handed to templates untouched.
    """
    # Name segments locating the symbol in the documentation hierarchy, e.g.
    # ('Foo', 'bar') for the bar member of Foo.
    path: Tuple[str, ...] = ()
    # None if the entry has no parameter list at all (i.e. it's not a function),
    # which is distinct from an empty list.
    params: Optional[List[Parameter]] = None
    # Nested entries (e.g. instance and static members) flattened across all member
    # kinds, in input order.
    members: List['DocEntry'] = field(default_factory=list)
    # The input mapping this entry was built from.
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DocEntry':
        if not isinstance(data, Mapping):
            raise InputError('documentation entry must be an object, not {}'.format(type(data).__name__))
        params = data.get('params')
        return cls(
            path=parse_path(data.get('path')),
            params=[Parameter.from_dict(p) for p in params if isinstance(p, Mapping)] if isinstance(params, list) else None,
            members=[cls.from_dict(m) for m in _iter_members(data.get('members'))],
            raw=dict(data),
        )

    def walk(self) -> Iterator['DocEntry']:
        """
        Yields this entry followed by all nested members, depth first.
        """
        yield self
        for member in self.members:
            yield from member.walk()


def parse_path(value: Any) -> Tuple[str, ...]:
    """
    Returns the name segments of an entry's path as given in the input.
    """
    if not isinstance(value, Sequence) or isinstance(value, str):
        return ()
    return tuple(_segment_name(seg) for seg in value)


def _segment_name(seg: Any) -> str:
    # Path segments are either plain names or objects like {"name": "Foo", "kind": "class"}
    if isinstance(seg, Mapping):
        return str(seg.get('name', ''))
    return str(seg)


def _iter_members(members: Any) -> Iterator[Mapping[str, Any]]:
    if isinstance(members, Mapping):
        groups = list(members.values())
    else:
        groups = [members]
    for group in groups:
        if isinstance(group, Sequence) and not isinstance(group, str):
            yield from (m for m in group if isinstance(m, Mapping))


def load_entries(batch: Any) -> List[DocEntry]:
    """
    Builds DocEntry objects from a decoded input batch, which must be a list of
    entry objects.
    """
    if not isinstance(batch, list):
        raise InputError('input must be a list of documentation entries, not {}'.format(type(batch).__name__))
    return [DocEntry.from_dict(data) for data in batch]
