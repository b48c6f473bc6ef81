"""Show off the printer on a function signature.

    python -m wadler.demo --width 40 --width 30

prints a ruler of dots as wide as the requested width and then the
signature laid out to fit under it, with keywords and types in color.
"""

import argparse
import enum
import logging
import sys

from .document import NEWLINE, Document, choice, group, hang, indent, join, text
from .output import CharColor, ansi_text, plain_text
from .runtime import render


class SyntaxKind(enum.Enum):
    KEYWORD = "keyword"
    TYPE = "type"

    @property
    def color(self) -> CharColor:
        match self:
            case SyntaxKind.KEYWORD:
                return CharColor.CHAR_COLOR_MAGENTA
            case SyntaxKind.TYPE:
                return CharColor.CHAR_COLOR_CYAN


def keyword(s: str) -> Document[SyntaxKind]:
    return text(s, SyntaxKind.KEYWORD)


def type_name(s: str) -> Document[SyntaxKind]:
    return text(s, SyntaxKind.TYPE)


def parameters(params: list[Document[SyntaxKind]]) -> Document[SyntaxKind]:
    # Either all on one line, or hung under the open paren, or failing that
    # one per line indented under the function.
    j = group(join(params, "," + NEWLINE))
    return choice(hang(j), indent(NEWLINE + j) + NEWLINE)


def sample_document() -> Document[SyntaxKind]:
    arguments = parameters(
        [
            "proposal: " + type_name("ProposedViewSize"),
            "subviews: " + type_name("Subviews"),
            "cache: " + keyword("inout") + type_name(" ()"),
        ]
    )
    return (
        keyword("func")
        + " hello("
        + arguments
        + ") {"
        + indent(NEWLINE + 'print("Hello")')
        + NEWLINE
        + "}"
    )


def format_sample(width: int, plain: bool) -> list[str]:
    fragments = render(sample_document(), width)
    if plain:
        result = plain_text(fragments)
    else:
        result = ansi_text(fragments, lambda kind: kind.color)
    return ["." * width] + result.split("\n")


def main(args: list[str]):
    parser = argparse.ArgumentParser(description="Pretty-print a sample function signature")
    parser.add_argument(
        "--width",
        type=int,
        action="append",
        default=None,
        help="The number of columns to fit the signature into. Pass more than once to see "
        "the layout at several widths. The default is 20.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Don't color keywords and types.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="How chatty to be about layout decisions. DEBUG logs every choice the printer "
        "makes.",
    )

    parsed = parser.parse_args(args[1:])
    logging.basicConfig(level=getattr(logging, parsed.log_level), stream=sys.stderr)

    widths = parsed.width or [20]
    for i, width in enumerate(widths):
        if i > 0:
            print()
        for line in format_sample(width, parsed.plain):
            print(line)


if __name__ == "__main__":
    main(sys.argv)
