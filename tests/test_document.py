import typing

from hypothesis import given
from hypothesis.strategies import integers, lists, text

import mzprint.document as document


def flatten_document(doc: document.Document) -> list:
    match doc:
        case document.NewLine():
            return ["<newline>"]
        case document.Indent():
            return [[f"<indent {doc.amount}>", flatten_document(doc.doc)]]
        case document.Literal(value):
            return [value]
        case document.Cons():
            result = []
            for d in doc.docs:
                result += flatten_document(d)
            return result
        case None:
            return []
        case _:
            typing.assert_never(doc)


def _output(txt: str) -> str:
    return txt.strip("\n").replace("*SPACE*", " ")


def test_cons_flattens_and_drops_empty():
    doc = document.cons(
        None,
        document.cons(document.text("a"), document.text("b")),
        None,
        document.text("c"),
    )
    assert isinstance(doc, document.Cons)
    assert [d.text for d in doc.docs] == ["a", "b", "c"]


def test_cons_of_nothing_is_nothing():
    assert document.cons() is None
    assert document.cons(None, None) is None


def test_cons_of_one_is_that_one():
    doc = document.text("x")
    assert document.cons(None, doc) is doc


def test_hsep_skips_empty_documents():
    doc = document.hsep(document.text("solve"), None, document.text("satisfy"))
    assert document.render(doc) == "solve satisfy"


def test_comma_sep():
    doc = document.comma_sep(document.text(t) for t in ["1", "2", "3"])
    assert flatten_document(doc) == ["1", ", ", "2", ", ", "3"]


def test_convert_nested_indent():
    doc = document.cons(
        document.text("let {"),
        document.indent(4, document.cons(document.NewLine(), document.text("x"))),
        document.NewLine(),
        document.text("}"),
    )
    assert flatten_document(doc) == [
        "let {",
        ["<indent 4>", ["<newline>", "x"]],
        "<newline>",
        "}",
    ]


def test_layout_indent_is_relative_to_block_not_column():
    doc = document.cons(
        document.text("predicate p ="),
        document.indent(
            2,
            document.cons(
                document.NewLine(),
                document.text("a"),
                document.indent(3, document.cons(document.NewLine(), document.text("b"))),
                document.NewLine(),
                document.text("c"),
            ),
        ),
        document.NewLine(),
        document.text("d"),
    )

    assert document.render(doc) == _output(
        """
predicate p =
  a
     b
  c
d
"""
    )


def test_layout_blank_lines_have_no_trailing_space():
    doc = document.indent(
        4,
        document.vcat([document.text("a"), document.text(""), document.text("b")]),
    )
    assert document.layout_document(doc).lines() == ["a", "", "b"]


def test_layout_vcat_hangs_nothing():
    doc = document.brackets(
        document.vcat([document.text("| 1, 2"), document.text("| 3, 4"), document.text("|")])
    )
    assert document.render(doc) == "[| 1, 2\n| 3, 4\n|]"


@given(lists(text(alphabet="abc xyz;", max_size=5), max_size=6))
def test_layout_of_flat_document_is_concatenation(pieces):
    doc = document.cons(*(document.text(p) for p in pieces))
    assert document.render(doc) == "".join(pieces)


@given(integers(min_value=0, max_value=12), lists(text(alphabet="abc", min_size=1), min_size=1))
def test_layout_indents_every_broken_line(amount, words):
    doc = document.indent(amount, document.vcat(document.text(w) for w in words))
    lines = document.layout_document(doc).lines()

    # The first line starts wherever the block started.
    assert lines[0] == words[0]
    for line, word in zip(lines[1:], words[1:]):
        assert line == (" " * amount) + word
