from pathlib import Path
import textwrap

import pytest

from cssbuilder.core.definition_loader import (
    DefinitionLoader,
    SimpleSelectorDef,
    build_selector,
    load_definitions_file,
    render_document,
)
from cssbuilder.selectors import OutOfOrderError


def write_yaml(tmp_path: Path, body: str, name: str = "defs.yaml") -> Path:
    p = tmp_path / name
    p.write_text(textwrap.dedent(body), encoding="utf-8")
    return p


def test_load_definitions_file_multiple_docs(tmp_path: Path):
    f = write_yaml(
        tmp_path,
        """
        name: gallery-link
        tags: [links]
        selector:
          element: a
          attrs: ['href$=".png"']
          pseudo_classes: [focus]
        ---
        name: data-cells
        selector:
          left: {element: table, id: data}
          combinator: "~"
          right:
            left: {element: tr, pseudo_classes: ["nth-of-type(even)"]}
            combinator: " "
            right: {element: td}
        """,
    )

    docs = load_definitions_file(f)
    assert [d.name for d in docs] == ["gallery-link", "data-cells"]
    assert render_document(docs[0]).text == 'a[href$=".png"]:focus'
    assert render_document(docs[1]).text == "table#data ~ tr:nth-of-type(even)   td"


def test_fragment_list_keeps_written_order(tmp_path: Path):
    f = write_yaml(
        tmp_path,
        """
        name: bad-order
        selector:
          fragments:
            - {kind: attr, value: href}
            - {kind: class, value: link}
        """,
    )
    doc = load_definitions_file(f)[0]
    with pytest.raises(OutOfOrderError):
        build_selector(doc.selector)


def test_fragment_list_renders_in_order():
    defn = SimpleSelectorDef.model_validate(
        {"fragments": [{"kind": "id", "value": "main"}, {"kind": "class", "value": "a"}, {"kind": "class", "value": "b"}]}
    )
    assert build_selector(defn).stringify() == "#main.a.b"


def test_env_substitution(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("THEME_CLASS", "dark")
    f = write_yaml(
        tmp_path,
        """
        name: themed
        selector:
          element: body
          classes: ["${THEME_CLASS}"]
        """,
    )
    assert render_document(load_definitions_file(f)[0]).text == "body.dark"


@pytest.mark.parametrize(
    "body",
    [
        "name: empty\nselector: {}\n",
        "name: both\nselector: {element: a, fragments: [{kind: id, value: x}]}\n",
        "name: bad-combinator\nselector: {left: {element: a}, combinator: '>>', right: {element: b}}\n",
        "name: unknown-key\nselector: {element: a, colour: red}\n",
        "name: '  '\nselector: {element: a}\n",
    ],
)
def test_invalid_documents_raise_value_error(tmp_path: Path, body: str):
    f = tmp_path / "bad.yaml"
    f.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError) as exc:
        load_definitions_file(f)
    assert "Invalid selector definition" in str(exc.value)


def test_missing_file_and_bad_yaml(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_definitions_file(tmp_path / "nope.yaml")
    f = tmp_path / "broken.yaml"
    f.write_text("name: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="YAML parse error"):
        load_definitions_file(f)


def test_load_directory_filters_by_tag_and_skips_invalid(tmp_path: Path):
    write_yaml(tmp_path, "name: a\ntags: [nav]\nselector: {element: nav}\n", name="a.yaml")
    write_yaml(tmp_path, "name: b\nselector: {element: footer}\n", name="b.yml")
    write_yaml(tmp_path, "- not a mapping\n", name="c.yaml")

    loader = DefinitionLoader()
    assert sorted(d.name for d in loader.load_directory(tmp_path)) == ["a", "b"]
    assert [d.name for d in loader.load_directory(tmp_path, tag="nav")] == ["a"]
