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

__all__ = ['Linker', 'build_index', 'permalink']

from typing import FrozenSet, Iterable, Sequence

from markupsafe import escape

from .builtin import builtin_url, get_builtin
from .log import log
from .reference import DocEntry
from .utils import slugify

def permalink(path: Sequence[str]) -> str:
    """
    Returns the anchor slug for an entry path, e.g. ('Foo', 'Bar') -> 'foo/bar'.
    Each segment is slugified independently.
    """
    return '/'.join(slugify(segment) for segment in path)


def build_index(entries: Iterable[DocEntry]) -> FrozenSet[str]:
    """
    Returns the set of anchor slugs for all given entries and their nested members.
    Entries with an empty path (or a path that slugifies to nothing) are omitted.
    """
    slugs = set()
    for entry in entries:
        for ref in entry.walk():
            slug = permalink(ref.path)
            if slug:
                slugs.add(slug)
    return frozenset(slugs)


class Linker:
    """
    Resolves symbol names to links for a single render pass.

    A name links to an anchor on the page when its slug belongs to one of the
    documented entries, otherwise to the reference documentation if it names a
    JavaScript builtin.  Anything else is returned as plain (escaped) text.
    """
    def __init__(self, entries: Iterable[DocEntry]):
        self.slugs = build_index(entries)
        log.debug('indexed %d anchors', len(self.slugs))

    def autolink(self, text: str) -> str:
        """
        Returns an HTML fragment for the given name.  The name is HTML-escaped
        whether or not it resolves to a link.
        """
        slug = slugify(text)
        if slug in self.slugs:
            return '<a href="#{}">{}</a>'.format(slug, escape(text))
        name = get_builtin(text)
        if name:
            return '<a href="{}">{}</a>'.format(builtin_url(name), name)
        return str(escape(text))
