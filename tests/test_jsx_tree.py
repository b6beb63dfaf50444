"""Tests for JSX element tree extraction."""

from __future__ import annotations

from hookflow.analyzer.jsx_tree import UNKNOWN_ELEMENT, extract_jsx_tree, jsx_element_name
from hookflow.analyzer.parser import parse_source
from hookflow.analyzer.syntax import walk


def _tree(code: str):
    root = parse_source(code, "View.tsx").root_node
    return extract_jsx_tree(root)


def test_nested_elements_depth_and_parents():
    nodes = _tree('''
const view = (
  <section>
    <div>
      <span>hi</span>
    </div>
  </section>
);
''')
    assert [(n.id, n.component, n.depth, n.parent_id) for n in nodes] == [
        ("jsx-1", "section", 0, None),
        ("jsx-2", "div", 1, "jsx-1"),
        ("jsx-3", "span", 2, "jsx-2"),
    ]


def test_ids_follow_preorder():
    nodes = _tree('''
const view = (
  <ul>
    <li><a /></li>
    <li><b /></li>
  </ul>
);
''')
    assert [n.component for n in nodes] == ["ul", "li", "a", "li", "b"]
    assert [n.id for n in nodes] == ["jsx-1", "jsx-2", "jsx-3", "jsx-4", "jsx-5"]
    assert [n.parent_id for n in nodes] == [None, "jsx-1", "jsx-2", "jsx-1", "jsx-4"]


def test_separate_roots():
    nodes = _tree('''
const a = <Header />;
const b = <Footer><p /></Footer>;
''')
    assert [(n.component, n.depth, n.parent_id) for n in nodes] == [
        ("Header", 0, None),
        ("Footer", 0, None),
        ("p", 1, "jsx-2"),
    ]


def test_elements_inside_expressions_are_children():
    nodes = _tree('''
const view = (
  <ul>
    {items.map((item) => <li key={item.id}>{item.name}</li>)}
    {open && <Dialog />}
  </ul>
);
''')
    assert [(n.component, n.depth, n.parent_id) for n in nodes] == [
        ("ul", 0, None),
        ("li", 1, "jsx-1"),
        ("Dialog", 1, "jsx-1"),
    ]


def test_fragment_is_transparent():
    nodes = _tree('''
const view = (
  <>
    <Title />
    <Body />
  </>
);
''')
    assert [(n.component, n.depth, n.parent_id) for n in nodes] == [
        ("Title", 0, None),
        ("Body", 0, None),
    ]


def test_fragment_inside_element():
    nodes = _tree("const view = <main><><p /></></main>;")
    assert [(n.component, n.depth, n.parent_id) for n in nodes] == [
        ("main", 0, None),
        ("p", 1, "jsx-1"),
    ]


def test_member_and_namespaced_names():
    nodes = _tree('''
const view = (
  <Card.Header.Title>
    <svg:rect />
  </Card.Header.Title>
);
''')
    assert [n.component for n in nodes] == ["Card.Header.Title", "svg:rect"]


def test_identifier_props_only():
    nodes = _tree('''
const view = (
  <Input
    value={value}
    label="Name"
    disabled
    onChange={(e) => setValue(e.target.value)}
    max={limits.max}
    count={10}
    ref={inputRef}
    {...rest}
    other={value}
  />
);
''')
    assert nodes[0].props == ["value", "inputRef"]


def test_location_is_opening_tag():
    nodes = _tree("\n\nconst v = <div>\n  <p />\n</div>;")
    assert nodes[0].defined_at.line == 3
    assert nodes[1].defined_at.line == 4
    assert nodes[1].defined_at.column == 2


def test_no_jsx():
    assert _tree("const x = 1 < 2;") == []


def test_location_column_counts_characters():
    nodes = _tree('\n  const v = <p title="ñandú">{"é"}<b /></p>;')
    assert nodes[1].component == "b"
    assert nodes[1].defined_at.line == 2
    assert nodes[1].defined_at.column == len('  const v = <p title="ñandú">{"é"}')


def test_missing_name_is_unknown():
    assert jsx_element_name(None) == UNKNOWN_ELEMENT == "Unknown"


def test_unrecognized_name_shape_is_unknown():
    root = parse_source("const n = 42;", "View.tsx").root_node
    number = next(n for n in walk(root) if n.type == "number")
    assert jsx_element_name(number) == "Unknown"
