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

__all__ = ['HTMLRenderer', 'markdown_to_html']

from configparser import ConfigParser
from typing import Any, Dict, List, Mapping, Optional

import commonmark.blocks
import commonmark_extensions.tables
from markupsafe import Markup

from ..assets import Assets, DEFAULT_TEMPLATE_PATH
from ..format import format_params, format_type
from ..linker import Linker, permalink
from ..log import log
from ..reference import Parameter, load_entries, parse_path
from ..template import TemplateEngine
from ..typeexpr import parse_type
from .base import OutputFile, get_options
from .json import JSONRenderer

# Page template, rendered once with the whole batch
PAGE_TEMPLATE = 'index.html.j2'
# Partial included by the page template for each entry
SECTION_TEMPLATE = 'section.html.j2'

class CustomRendererWithTables(commonmark_extensions.tables.RendererWithTables):
    def make_table_node(self, _):
        return '<table class="user">'

# https://github.com/GovReady/CommonMark-py-Extensions/issues/3#issuecomment-756499491
# Thanks to hughdavenport
class TableWaitingForBug3(commonmark_extensions.tables.Table):
    @staticmethod
    def continue_(parser, _=None):
        ln = parser.current_line
        if not parser.indented and commonmark.blocks.peek(ln, parser.next_nonspace) == "|":
            parser.advance_next_nonspace()
            parser.advance_offset(1, False)
        elif not parser.indented and commonmark.blocks.peek(ln, parser.next_nonspace) not in ("", ">", "`", None):
            pass
        else:
            return 1
        return 0
commonmark.blocks.Table = TableWaitingForBug3 # pyright: ignore


def markdown_to_html(md: Any) -> str:
    """
    Renders the given markdown as HTML and returns the result.  Anything other than
    a string (e.g. a missing description) renders as an empty string.
    """
    if not isinstance(md, str) or not md:
        return ''
    parser = commonmark_extensions.tables.ParserWithTables()
    ast = parser.parse(md)
    return CustomRendererWithTables().render(ast)


class HTMLRenderer(JSONRenderer):
    """
    Renders the batch as a single HTML page from the templates in a template
    directory, alongside the index.json dump and all static assets from that
    directory.

    Templates are loaded when the renderer is created, so a missing or broken
    template fails before anything is rendered.
    """
    ext = None

    def __init__(self, path: Optional[str] = None, options: Optional[Dict[str, Any]] = None):
        super().__init__(options)
        self.path = path or DEFAULT_TEMPLATE_PATH
        # Set for the duration of a render pass.  Link resolution depends on knowing
        # every entry, so helpers that resolve links can't be used outside of render().
        self._linker: Optional[Linker] = None

        self.engine = TemplateEngine(self.path)
        self.engine.register_helper('md', self._md)
        self.engine.register_helper('format_type', self._format_type)
        self.engine.register_helper('format_params', self._format_params)
        self.engine.register_helper('permalink', self._permalink)
        self.engine.register_helper('autolink', self._autolink)
        self._page = self.engine.load(PAGE_TEMPLATE)
        # Not rendered directly, but loaded now so that it's compiled (and
        # validated) up front.
        self.engine.load(SECTION_TEMPLATE)

    @classmethod
    def from_config(cls, config: ConfigParser) -> 'HTMLRenderer':
        path = config.get('project', 'template', fallback=None)
        return cls(path=path, options=get_options(config))

    #
    # Template helpers
    #

    def _md(self, text: Any) -> Markup:
        return Markup(markdown_to_html(text))

    def _format_type(self, tp: Any) -> Markup:
        return Markup(format_type(parse_type(tp), True, self._autolink_text))

    def _format_params(self, value: Any) -> str:
        # Accepts either an entry (the way templates typically call it) or its list
        # of parameters.
        params = value.get('params') if isinstance(value, Mapping) else value
        if not isinstance(params, list):
            return ''
        return format_params([Parameter.from_dict(p) for p in params if isinstance(p, Mapping)])

    def _permalink(self, entry: Any) -> str:
        if not isinstance(entry, Mapping):
            return ''
        return permalink(parse_path(entry.get('path')))

    def _autolink(self, text: Any) -> Markup:
        return Markup(self._autolink_text(str(text)))

    def _autolink_text(self, text: str) -> str:
        assert self._linker, 'autolink used outside of a render pass'
        return self._linker.autolink(text)

    def render_html(self, batch: List[Dict[str, Any]]) -> OutputFile:
        html = self._page(docs=batch, options=self.options)
        return OutputFile('index.html', html.encode('utf8'))

    def render_assets(self) -> List[OutputFile]:
        assets = Assets(self.path)
        log.debug('copying %d assets from %s', len(assets.files), self.path)
        return [OutputFile(name, contents) for name, contents in assets]

    def render(self, batch: List[Dict[str, Any]]) -> List[OutputFile]:
        entries = load_entries(batch)
        log.info('rendering %d entries', len(entries))
        self._linker = Linker(entries)
        try:
            files = [self.render_json(batch), self.render_html(batch)]
        finally:
            self._linker = None
        files.extend(self.render_assets())
        return files
