"""Tests for slugs, the anchor index and autolinking."""

import pytest
from docpage.builtin import BUILTINS, BUILTINS_URL, get_builtin
from docpage.linker import Linker, build_index, permalink
from docpage.reference import DocEntry
from docpage.utils import slugify


def entry(*path: str) -> DocEntry:
    return DocEntry(path=tuple(path))


class TestSlugify:
    """Tests for slugify()."""

    def test__lowercases_and_dashes_whitespace(self) -> None:
        """Whitespace and punctuation runs collapse into single dashes."""
        assert slugify("Foo Bar") == "foo-bar"
        assert slugify("  Hello,   World!  ") == "hello-world"

    def test__drops_quotes(self) -> None:
        """Quotes are removed rather than becoming separators."""
        assert slugify("Foo's thing") == "foos-thing"

    def test__folds_accents(self) -> None:
        """Accented letters are folded to ASCII."""
        assert slugify("Café") == "cafe"

    def test__nothing_alphanumeric__is_empty(self) -> None:
        """Text with no letters or digits yields an empty slug."""
        assert slugify("") == ""
        assert slugify("!!!") == ""


class TestBuildIndex:
    """Tests for build_index() and permalink()."""

    def test__joins_slugified_segments(self) -> None:
        """Each path segment is slugified independently and joined with '/'."""
        assert permalink(("Foo", "Bar")) == "foo/bar"
        assert build_index([entry("Foo", "Bar")]) == frozenset({"foo/bar"})

    def test__empty_path_excluded(self) -> None:
        """Entries without a path contribute nothing."""
        assert build_index([entry(), entry("!!")]) == frozenset()

    def test__nested_members_included(self) -> None:
        """Members of an entry are indexed too."""
        parent = DocEntry.from_dict(
            {
                "path": ["Foo"],
                "members": {"static": [{"path": ["Foo", "create"]}], "instance": []},
            }
        )

        assert build_index([parent]) == frozenset({"foo", "foo/create"})


class TestBuiltins:
    """Tests for the builtin registry."""

    def test__lookup_is_case_insensitive(self) -> None:
        """Keys are lowercase and map to canonical names."""
        assert BUILTINS["weakset"] == "WeakSet"
        assert get_builtin("PROMISE") == "Promise"
        assert get_builtin("Widget") is None

    def test__registry_is_read_only(self) -> None:
        """The registry can't be mutated."""
        with pytest.raises(TypeError):
            BUILTINS["widget"] = "Widget"  # type: ignore[index]


class TestAutolink:
    """Tests for Linker.autolink()."""

    def test__internal_entry__links_to_anchor(self) -> None:
        """Text whose slug is indexed links to the anchor with the original label."""
        linker = Linker([entry("Foo")])

        assert linker.autolink("FOO") == '<a href="#foo">FOO</a>'

    def test__builtin__links_to_reference_with_canonical_name(self) -> None:
        """Builtins link to the reference docs labelled with the canonical name."""
        linker = Linker([])

        assert linker.autolink("promise") == f'<a href="{BUILTINS_URL}Promise">Promise</a>'

    def test__entry_takes_precedence_over_builtin(self) -> None:
        """A documented entry shadows a builtin of the same name."""
        linker = Linker([entry("Map")])

        assert linker.autolink("Map") == '<a href="#map">Map</a>'

    def test__unresolved__returned_unchanged(self) -> None:
        """Unknown names are returned exactly as given."""
        linker = Linker([entry("Foo")])

        assert linker.autolink("Unknown thing") == "Unknown thing"
        assert linker.autolink("") == ""

    def test__slug_of_text_must_match_path_slug(self) -> None:
        """'Foo Bar' slugifies to foo-bar, so it does not link to foo/bar."""
        linker = Linker([entry("Foo", "Bar")])

        assert "foo/bar" in linker.slugs
        assert linker.autolink("Foo Bar") == "Foo Bar"

    def test__text_is_escaped(self) -> None:
        """Names are HTML-escaped whether or not they resolve."""
        linker = Linker([entry("a<b")])

        assert linker.autolink("<img src=x>") == "&lt;img src=x&gt;"
        assert linker.autolink("a<b") == '<a href="#a-b">a&lt;b</a>'
