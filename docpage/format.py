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

__all__ = ['format_type', 'format_param', 'format_params']

from typing import Callable, Optional, Sequence

from .log import log
from .reference import Parameter
from .typeexpr import *

# Resolves a type name to (possibly linked) HTML.
AutolinkFunc = Callable[[str], str]

def _no_link(text: str) -> str:
    return text


def format_type(tp: Optional[TypeExpression], html: bool = False,
                autolink: Optional[AutolinkFunc] = None) -> str:
    """
    Renders a type expression as human-readable text, or as HTML when html is True.

    In HTML mode, names are wrapped in <code> and passed through autolink so that
    types documented on the page (or JavaScript builtins) become links.  Optional
    types are always rendered as <code>[type]</code>, even in text mode.

    Node types we don't know how to render produce an empty string.
    """
    if not tp:
        return ''
    link = autolink or _no_link
    if isinstance(tp, NameExpression):
        return '<code>{}</code>'.format(link(tp.name)) if html else tp.name
    elif isinstance(tp, UnionType):
        return ' or '.join(format_type(element, html, autolink) for element in tp.elements)
    elif isinstance(tp, AllLiteral):
        return 'Any'
    elif isinstance(tp, OptionalType):
        return '<code>[{}]</code>'.format(format_type(tp.expression, html, autolink))
    elif isinstance(tp, TypeApplication):
        # The generic itself (e.g. Array in Array<String>) is never linked.
        return '{}<{}>'.format(
            format_type(tp.expression),
            ', '.join(format_type(app, html, autolink) for app in tp.applications)
        )
    log.debug('no formatting for type expression %s', tp.tag or type(tp).__name__)
    return ''


def format_param(param: Parameter) -> str:
    """
    Returns the parameter name, in brackets if the parameter is optional.
    """
    return '[{}]'.format(param.name) if isinstance(param.type, OptionalType) else param.name


def format_params(params: Optional[Sequence[Parameter]]) -> str:
    """
    Formats a function's parameters into a quickly-readable summary resembling how
    the function would be called, e.g. "(a, [b])".  Types are not included.

    An absent parameter list renders as an empty string, while an empty list renders
    as "()".
    """
    if params is None:
        return ''
    return '({})'.format(', '.join(format_param(param) for param in params))
