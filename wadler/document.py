# A prettier printer: the documents.
import dataclasses
import typing


############################################################################
# Documents
############################################################################

# Characters that end a line.
LINE_BREAKS = frozenset("\n\r\x0b\x0c\x85\u2028\u2029")


class _Composable:
    """Mixin that lets documents (and plain strings) be glued with `+`."""

    def __add__(self, other):
        if not isinstance(other, (str, _Composable)):
            return NotImplemented
        return concat(self, other)

    def __radd__(self, other):
        if not isinstance(other, (str, _Composable)):
            return NotImplemented
        return concat(other, self)


@dataclasses.dataclass(frozen=True)
class Empty(_Composable):
    pass


@dataclasses.dataclass(frozen=True)
class Text[A](_Composable):
    content: str
    annotation: A | None = None

    def __post_init__(self):
        if not isinstance(self.content, str):
            raise TypeError(
                f"Got {repr(self.content)} of type {type(self.content).__name__}, expected 'str'"
            )
        if any(c in LINE_BREAKS for c in self.content):
            raise ValueError(f"Text cannot contain line breaks: {repr(self.content)}")


@dataclasses.dataclass(frozen=True)
class Concat[A](_Composable):
    left: "Document[A]"
    right: "Document[A]"


@dataclasses.dataclass(frozen=True)
class NewLine(_Composable):
    pass


@dataclasses.dataclass(frozen=True)
class Indent[A](_Composable):
    doc: "Document[A]"


@dataclasses.dataclass(frozen=True)
class Hang[A](_Composable):
    doc: "Document[A]"


@dataclasses.dataclass(frozen=True)
class Choice[A](_Composable):
    # The wide document is the one we'd rather have, the narrow one is the
    # fallback when it doesn't fit.
    wide: "Document[A]"
    narrow: "Document[A]"


type Document[A] = Empty | Text[A] | Concat[A] | NewLine | Indent[A] | Hang[A] | Choice[A]


EMPTY = Empty()
NEWLINE = NewLine()
SPACE = Text(" ")


def to_document[A](value: "Document[A] | str") -> "Document[A]":
    """Convert a literal string into a document; documents pass through."""
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, _Composable):
        return value  # type: ignore[return-value]
    raise TypeError(f"Cannot make a document out of {repr(value)} of type {type(value).__name__}")


def text[A](content: str, annotation: A | None = None) -> Text[A]:
    return Text(content, annotation)


def concat[A](*documents: "Document[A] | str") -> "Document[A]":
    result: Document[A] = EMPTY
    for document in documents:
        document = to_document(document)
        if isinstance(document, Empty):
            continue
        if isinstance(result, Empty):
            result = document
        else:
            result = Concat(result, document)
    return result


def indent[A](*documents: "Document[A] | str") -> "Document[A]":
    return Indent(concat(*documents))


def hang[A](*documents: "Document[A] | str") -> "Document[A]":
    return Hang(concat(*documents))


def choice[A](wide: "Document[A] | str", narrow: "Document[A] | str") -> "Document[A]":
    return Choice(to_document(wide), to_document(narrow))


def join[A](
    elements: typing.Iterable["Document[A] | str"], separator: "Document[A] | str"
) -> "Document[A]":
    """Put the separator between each pair of elements, and nowhere else."""
    result: Document[A] | None = None
    for element in elements:
        if result is None:
            result = to_document(element)
        else:
            result = concat(result, separator, element)

    if result is None:
        return EMPTY
    return result


def flatten[A](doc: "Document[A]") -> "Document[A]":
    """Lay the document out on a single line: every line break becomes a
    space and every choice becomes its (flattened) wide alternative.

    This walks the document with an explicit stack rather than recursing so
    that very deep documents (long joins, say) don't blow the Python stack.
    Shared subtrees are only flattened once, and subtrees with nothing to
    flatten are returned unchanged.
    """
    done: dict[int, Document[A]] = {}
    stack: list[tuple[Document[A], bool]] = [(doc, False)]
    while len(stack) > 0:
        node, expanded = stack.pop()
        if id(node) in done:
            continue

        match node:
            case Empty() | Text():
                done[id(node)] = node

            case NewLine():
                done[id(node)] = SPACE

            case Concat(left, right):
                if expanded:
                    flat_left, flat_right = done[id(left)], done[id(right)]
                    if flat_left is left and flat_right is right:
                        done[id(node)] = node
                    else:
                        done[id(node)] = Concat(flat_left, flat_right)
                else:
                    stack.append((node, True))
                    stack.append((right, False))
                    stack.append((left, False))

            case Indent(child) | Hang(child):
                if expanded:
                    flat_child = done[id(child)]
                    if flat_child is child:
                        done[id(node)] = node
                    else:
                        done[id(node)] = type(node)(flat_child)
                else:
                    stack.append((node, True))
                    stack.append((child, False))

            case Choice(wide, _):
                if expanded:
                    done[id(node)] = done[id(wide)]
                else:
                    stack.append((node, True))
                    stack.append((wide, False))

            case _:
                typing.assert_never(node)

    return done[id(doc)]


def group[A](doc: "Document[A]") -> "Document[A]":
    """Flat if it fits on the line, otherwise as written."""
    return Choice(flatten(doc), doc)


def describe(doc: "Document") -> str:
    """Dump a document as an indented tree, one node per line. Chains of
    concatenations are shown as siblings at the same depth."""
    lines: list[str] = []
    stack: list[tuple[int, str | Document]] = [(0, doc)]
    while len(stack) > 0:
        depth, node = stack.pop()
        prefix = "    " * depth
        match node:
            case str():
                # A label, like the "wide" and "narrow" halves of a choice.
                lines.append(prefix + node)

            case Empty():
                lines.append(prefix + "empty")

            case Text(content, annotation):
                if annotation is None:
                    lines.append(f"{prefix}text {repr(content)}")
                else:
                    lines.append(f"{prefix}text {repr(content)} [{annotation}]")

            case Concat(left, right):
                stack.append((depth, right))
                stack.append((depth, left))

            case NewLine():
                lines.append(prefix + "newline")

            case Indent(child):
                lines.append(prefix + "indent")
                stack.append((depth + 1, child))

            case Hang(child):
                lines.append(prefix + "hang")
                stack.append((depth + 1, child))

            case Choice(wide, narrow):
                lines.append(prefix + "choice")
                stack.append((depth + 2, narrow))
                stack.append((depth + 1, "narrow"))
                stack.append((depth + 2, wide))
                stack.append((depth + 1, "wide"))

            case _:
                typing.assert_never(node)

    return "\n".join(lines)
