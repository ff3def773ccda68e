# A fixed-layout pretty printer.
"""Documents for laying out MiniZinc source.

This is a cut-down cousin of a Wadler-style pretty printer: there are no
groups and no line width, because MiniZinc output uses a fixed layout. What is
left is the useful part, a tree of documents that keeps indentation local.
An `Indent` only affects the line breaks inside it, so a block can be built
without knowing where it is going to end up.
"""
import dataclasses
import typing


############################################################################
# Documents
############################################################################


@dataclasses.dataclass(frozen=True)
class Cons:
    docs: list["Document"]


@dataclasses.dataclass(frozen=True)
class NewLine:
    pass


@dataclasses.dataclass(frozen=True)
class Indent:
    amount: int
    doc: "Document"


@dataclasses.dataclass(frozen=True)
class Literal:
    text: str


Document = None | Literal | NewLine | Cons | Indent


def cons(*documents: Document) -> Document:
    if len(documents) == 0:
        return None

    result = []
    for document in documents:
        if isinstance(document, Cons):
            result.extend(document.docs)
        elif document is not None:
            result.append(document)

    if len(result) == 0:
        return None
    if len(result) == 1:
        return result[0]

    return Cons(result)


def text(value: str) -> Document:
    return Literal(value)


def indent(amount: int, document: Document) -> Document:
    if document is None:
        return None
    return Indent(amount, document)


def hsep(*documents: Document) -> Document:
    """Concatenate with a single space between each pair; empty documents
    take no space at all."""
    result = []
    for document in documents:
        if document is None:
            continue
        if len(result) > 0:
            result.append(Literal(" "))
        result.append(document)
    return cons(*result)


def vcat(documents: typing.Iterable[Document]) -> Document:
    """Stack documents, one after the other, with a line break between."""
    result = []
    for document in documents:
        if len(result) > 0:
            result.append(NewLine())
        result.append(document)
    return cons(*result)


def punctuate(separator: Document, documents: typing.Iterable[Document]) -> Document:
    result = []
    for document in documents:
        if len(result) > 0:
            result.append(separator)
        result.append(document)
    return cons(*result)


def comma_sep(documents: typing.Iterable[Document]) -> Document:
    return punctuate(Literal(", "), documents)


def enclose(left: str, document: Document, right: str) -> Document:
    return cons(Literal(left), document, Literal(right))


def parens(document: Document) -> Document:
    return enclose("(", document, ")")


def brackets(document: Document) -> Document:
    return enclose("[", document, "]")


def braces(document: Document) -> Document:
    return enclose("{", document, "}")


def double_quotes(document: Document) -> Document:
    return enclose('"', document, '"')


############################################################################
# Layouts
############################################################################


class DocumentLayout:
    """The result of laying out a document: a list of string segments that
    only need joining."""

    segments: list[str]

    def __init__(self, segments):
        self.segments = segments

    def text(self) -> str:
        return "".join(self.segments)

    def lines(self) -> list[str]:
        return self.text().split("\n")


def layout_document(doc: Document) -> DocumentLayout:
    """Lay out a document.

    Line breaks move to the indentation of the enclosing `Indent` blocks.
    The indentation itself is only written once something lands on the new
    line, so blank lines stay blank.
    """

    @dataclasses.dataclass
    class Chunk:
        doc: Document
        indent: int

        def with_document(self, doc: Document, and_indent: int = 0) -> "Chunk":
            return Chunk(doc=doc, indent=self.indent + and_indent)

    chunks: list[Chunk] = [Chunk(doc=doc, indent=0)]
    pending_indent = 0

    output: list[str] = []
    while len(chunks) > 0:
        chunk = chunks.pop()
        match chunk.doc:
            case None:
                pass

            case Literal(value):
                if len(value) == 0:
                    continue
                if pending_indent > 0:
                    output.append(" " * pending_indent)
                    pending_indent = 0
                output.append(value)

            case NewLine():
                output.append("\n")
                pending_indent = chunk.indent

            case Cons(docs):
                chunks.extend(chunk.with_document(doc) for doc in reversed(docs))

            case Indent(amount, child):
                chunks.append(chunk.with_document(child, and_indent=amount))

            case _:
                typing.assert_never(chunk.doc)

    return DocumentLayout(output)


def render(doc: Document) -> str:
    return layout_document(doc).text()
