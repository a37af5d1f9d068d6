# tests/test_loader.py

import pytest

from works_graph.errors import DocumentLoadError
from works_graph.loader import load_works, parse_works
from works_graph.models import Works

SAMPLE = """
[authors.a1]
name = "Alice"

[authors.a2]
name = "Bob"

[works.w1]
title = "Paper One"
authors_string = "Alice and Bob"
authors = ["a1", "a2"]
pages = "1-10"
year = 2019
month = 4
urls = ["https://example.org/w1", "https://mirror.example.org/w1"]
media = { title = "Journal of Examples", organization = "ACME", number = "12" }

[works.w2]
title = "Paper Two"
authors_string = "Alice"
authors = ["a1"]

[[works.w2.references]]
work = "w1"
media_title = "J. Examples"
authors_string = "A. and B."
"""


def test_parse_full_document():
    doc = parse_works(SAMPLE)

    assert isinstance(doc, Works)
    assert set(doc.works) == {"w1", "w2"}
    assert doc.authors["a2"].name == "Bob"

    w1 = doc.works["w1"]
    assert w1.title == "Paper One"
    assert w1.authors == ["a1", "a2"]
    assert w1.year == 2019
    assert w1.month == 4
    assert w1.pages == "1-10"
    assert w1.media is not None
    assert w1.media.title == "Journal of Examples"
    assert w1.media.organization == "ACME"
    assert w1.media.number == "12"
    assert w1.primary_url == "https://example.org/w1"

    (ref,) = doc.works["w2"].references
    assert ref.work == "w1"
    assert ref.media_title == "J. Examples"
    assert ref.authors_string == "A. and B."


def test_optional_fields_default_to_absent_or_empty():
    doc = parse_works(SAMPLE)
    w2 = doc.works["w2"]

    assert w2.media is None
    assert w2.pages is None
    assert w2.year is None
    assert w2.month is None
    assert w2.urls == []
    assert w2.primary_url is None
    assert doc.works["w1"].references == []


@pytest.mark.parametrize("missing", ["title", "authors_string", "authors"])
def test_missing_required_work_field_fails(missing):
    fields = {
        "title": 'title = "T"',
        "authors_string": 'authors_string = "A"',
        "authors": "authors = []",
    }
    body = "\n".join(v for k, v in fields.items() if k != missing)
    text = f"[authors]\n\n[works.w1]\n{body}\n"

    with pytest.raises(DocumentLoadError) as excinfo:
        parse_works(text)
    assert missing in str(excinfo.value)


def test_missing_author_name_fails():
    text = "[works]\n\n[authors.a1]\n"
    with pytest.raises(DocumentLoadError, match="name"):
        parse_works(text)


def test_missing_top_level_section_fails():
    with pytest.raises(DocumentLoadError, match="authors"):
        parse_works('[works.w1]\ntitle = "T"\nauthors_string = ""\nauthors = []\n')


def test_reference_without_target_fails():
    text = """
[authors]

[works.w1]
title = "T"
authors_string = ""
authors = []
references = [{ media_title = "Somewhere" }]
"""
    with pytest.raises(DocumentLoadError, match="work"):
        parse_works(text)


def test_wrong_type_fails():
    text = """
[authors]

[works.w1]
title = "T"
authors_string = ""
authors = []
year = "last year"
"""
    with pytest.raises(DocumentLoadError, match="year"):
        parse_works(text)


def test_duplicate_work_id_is_rejected():
    text = """
[authors]

[works.w1]
title = "First"
authors_string = ""
authors = []

[works.w1]
title = "Second"
authors_string = ""
authors = []
"""
    with pytest.raises(DocumentLoadError):
        parse_works(text)


def test_syntax_error_fails():
    with pytest.raises(DocumentLoadError, match="Invalid TOML"):
        parse_works("[works\n")


def test_unknown_keys_are_ignored():
    text = """
[authors.a1]
name = "Alice"
affiliation = "Somewhere"

[works.w1]
title = "T"
authors_string = "Alice"
authors = ["a1"]
doi = "10.1000/xyz"
"""
    doc = parse_works(text)
    assert doc.works["w1"].title == "T"


def test_load_works_from_file(tmp_path):
    path = tmp_path / "works.toml"
    path.write_text(SAMPLE, encoding="utf-8")

    doc = load_works(path)
    assert set(doc.works) == {"w1", "w2"}


def test_load_works_missing_file(tmp_path):
    with pytest.raises(DocumentLoadError, match="Failed to read"):
        load_works(tmp_path / "does_not_exist.toml")


def test_load_works_error_names_file(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[works\n", encoding="utf-8")

    with pytest.raises(DocumentLoadError, match="broken.toml"):
        load_works(path)


def test_load_works_rejects_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.toml"
    path.write_bytes(b'[authors]\n[works.w1]\ntitle = "\xff\xfe"\n')

    with pytest.raises(DocumentLoadError, match="Failed to read"):
        load_works(path)
