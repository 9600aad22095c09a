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

__all__ = ['TemplateEngine', 'RenderFunc']

from typing import Any, Callable

import jinja2

from .log import log

# A compiled template: takes template data as keyword arguments and returns the
# rendered text.
RenderFunc = Callable[..., str]

class TemplateEngine:
    """
    Thin wrapper around a jinja2 environment rooted at a template directory.

    Helpers are made available to templates both as global functions and as filters,
    so templates may use either {{ md(doc.description) }} or
    {{ doc.description | md }}.  Templates in the directory may include one another
    by file name.
    """
    def __init__(self, path: str):
        self.path = path
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(path),
            autoescape=jinja2.select_autoescape(['html.j2', 'html', 'xml']),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def register_helper(self, name: str, fn: Callable[..., Any]) -> None:
        self.env.globals[name] = fn
        self.env.filters[name] = fn

    def compile(self, source: str) -> RenderFunc:
        return self.env.from_string(source).render

    def load(self, name: str) -> RenderFunc:
        """
        Loads and compiles the named template from the template directory.

        Raises jinja2.TemplateNotFound if the file doesn't exist, or
        jinja2.TemplateSyntaxError if it can't be compiled.
        """
        log.debug('loading template %s from %s', name, self.path)
        return self.env.get_template(name).render
