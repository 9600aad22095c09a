"""Shared test fixtures."""

from pathlib import Path

import pytest

PAGE_TEMPLATE = """\
<h1>{{ options.name }}</h1>
{% for doc in docs %}{% include 'section.html.j2' %}{% endfor %}
"""

SECTION_TEMPLATE = """\
<section id="{{ permalink(doc) }}">{{ doc.name }}{{ format_params(doc) }}
{% for param in doc.params or [] %}<span class="type">{{ format_type(param.type) }}</span>
{% endfor %}<div class="desc">{{ md(doc.description) }}</div>
{% for name in doc.see or [] %}<span class="see">{{ autolink(name) }}</span>
{% endfor %}</section>
"""


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Create a template directory with both templates and a couple of assets."""
    path = tmp_path / "theme"
    (path / "img").mkdir(parents=True)
    (path / "index.html.j2").write_text(PAGE_TEMPLATE)
    (path / "section.html.j2").write_text(SECTION_TEMPLATE)
    (path / "style.css").write_text("body { margin: 0; }\n")
    (path / "img" / "logo.svg").write_bytes(b"<svg></svg>\x00\xff")
    return path


@pytest.fixture
def batch() -> list:
    """A small batch of entries as emitted by the upstream parser."""
    return [
        {
            "name": "Foo",
            "kind": "class",
            "path": ["Foo"],
            "description": "A **Foo** thing.",
            "see": ["Bar", "promise", "Unknown"],
        },
        {
            "name": "Bar",
            "kind": "function",
            "path": ["Foo", "Bar"],
            "description": "Makes a bar.",
            "params": [
                {"name": "a", "type": {"type": "NameExpression", "name": "Foo"}},
                {
                    "name": "b",
                    "type": {
                        "type": "OptionalType",
                        "expression": {"type": "NameExpression", "name": "Map"},
                    },
                },
            ],
        },
        {"name": "orphan", "path": [], "description": None},
    ]
