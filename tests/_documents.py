"""Shared bits for the document and renderer tests."""

from hypothesis.strategies import (
    SearchStrategy,
    builds,
    just,
    none,
    one_of,
    recursive,
    sampled_from,
    text as text_strategy,
)

from wadler.document import (
    EMPTY,
    NEWLINE,
    Choice,
    Concat,
    Document,
    Empty,
    Hang,
    Indent,
    NewLine,
    Text,
    group,
)
from wadler.runtime import TAB_WIDTH, fits


def documents(max_leaves: int = 12) -> SearchStrategy:
    """Small random documents with every kind of node in them."""
    leaves = one_of(
        builds(
            Text,
            text_strategy(alphabet="abc ", max_size=5),
            one_of(none(), sampled_from(["red", "blue"])),
        ),
        just(EMPTY),
        just(NEWLINE),
    )
    return recursive(
        leaves,
        lambda children: one_of(
            builds(Concat, children, children),
            builds(Indent, children),
            builds(Hang, children),
            builds(Choice, children, children),
            builds(group, children),
        ),
        max_leaves=max_leaves,
    )


def reference_render(doc: Document, width: int, tab_width: int = TAB_WIDTH) -> list[tuple]:
    """The renderer written the obvious way: recursion, with choices
    rendering each alternative to the very end of the document.

    Far too slow (and too recursive) for real use, but easy to believe.
    """

    def go(stack: tuple, column: int) -> list[tuple]:
        if len(stack) == 0:
            return []

        (indentation, node), rest = stack[-1], stack[:-1]
        match node:
            case Empty():
                return go(rest, column)
            case Text(content, annotation):
                return [(content, annotation)] + go(rest, column + len(content))
            case Concat(left, right):
                return go(rest + ((indentation, right), (indentation, left)), column)
            case NewLine():
                return [("\n" + " " * indentation, None)] + go(rest, indentation)
            case Indent(child):
                return go(rest + ((indentation + tab_width, child),), column)
            case Hang(child):
                return go(rest + ((column, child),), column)
            case Choice(wide, narrow):
                attempt = go(rest + ((indentation, wide),), column)
                if fits("".join(t for t, _ in attempt), width - column):
                    return attempt
                return go(rest + ((indentation, narrow),), column)
            case _:
                raise AssertionError(f"Unknown document {node!r}")

    return go(((0, doc),), 0)
