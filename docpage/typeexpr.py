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

__all__ = [
    'TypeExpression', 'NameExpression', 'UnionType', 'AllLiteral', 'OptionalType',
    'TypeApplication', 'UnknownType', 'parse_type',
]

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Type

class TypeExpression:
    """
    Base class for all nodes of a parsed type annotation.

    Nodes are immutable.  The upstream parser emits them as mappings whose 'type' key
    holds the node tag (e.g. {"type": "NameExpression", "name": "String"}), which
    parse_type() converts to instances of the subclasses below.
    """
    # Tag as it appears in the upstream mapping.
    tag: str = ''


@dataclass(frozen=True)
class NameExpression(TypeExpression):
    tag = 'NameExpression'
    name: str


@dataclass(frozen=True)
class UnionType(TypeExpression):
    tag = 'UnionType'
    elements: Tuple[TypeExpression, ...]


@dataclass(frozen=True)
class AllLiteral(TypeExpression):
    """
    The "*" type, meaning any type is accepted.
    """
    tag = 'AllLiteral'


@dataclass(frozen=True)
class OptionalType(TypeExpression):
    tag = 'OptionalType'
    expression: TypeExpression


@dataclass(frozen=True)
class TypeApplication(TypeExpression):
    """
    A generic type applied to arguments, such as Array<String>.
    """
    tag = 'TypeApplication'
    expression: TypeExpression
    applications: Tuple[TypeExpression, ...]


@dataclass(frozen=True)
class UnknownType(TypeExpression):
    """
    Any node the upstream grammar can produce that we have no rendering for (e.g.
    RecordType or FunctionType).  The original mapping is retained as-is.
    """
    tag: str
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)


KNOWN_TYPES: Dict[str, Type[TypeExpression]] = {
    cls.tag: cls for cls in (NameExpression, UnionType, AllLiteral, OptionalType, TypeApplication)
}


def parse_type(data: Any) -> Optional[TypeExpression]:
    """
    Converts an upstream type mapping (recursively) into a TypeExpression tree.

    Returns None for a missing type.  Already-parsed TypeExpression objects are
    passed through untouched.  Mappings with an unrecognized tag, or recognized tags
    missing their required payload, become UnknownType so that formatting can skip
    them without failing.
    """
    if not data:
        return None
    if isinstance(data, TypeExpression):
        return data
    if not isinstance(data, Mapping):
        return UnknownType(type(data).__name__)
    tag = data.get('type', '')
    cls = KNOWN_TYPES.get(tag)
    try:
        if cls is NameExpression:
            return NameExpression(str(data['name']))
        elif cls is UnionType:
            elements = tuple(_parse_required(e) for e in data['elements'])
            if elements:
                return UnionType(elements)
        elif cls is AllLiteral:
            return AllLiteral()
        elif cls is OptionalType:
            return OptionalType(_parse_required(data['expression']))
        elif cls is TypeApplication:
            applications = tuple(_parse_required(a) for a in data['applications'])
            if applications:
                return TypeApplication(_parse_required(data['expression']), applications)
    except (KeyError, TypeError):
        pass
    return UnknownType(str(tag), data)


def _parse_required(data: Any) -> TypeExpression:
    """
    Like parse_type() but for child positions, where an absent node is represented
    as UnknownType rather than None.
    """
    return parse_type(data) or UnknownType('')
