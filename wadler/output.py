# Turning rendered fragments into something you can show somebody.
import dataclasses
import enum
import typing

from .runtime import Fragment


def plain_text(fragments: typing.Iterable[Fragment]) -> str:
    """Just the text, annotations dropped on the floor."""
    return "".join(fragment.text for fragment in fragments)


@dataclasses.dataclass(frozen=True)
class StyledRun[S]:
    text: str
    style: S


def styled[A, S](
    fragments: typing.Iterable[Fragment[A]],
    style_for: typing.Callable[[A], S],
    default: S,
) -> list[StyledRun[S]]:
    """Fold fragments into runs of styled text.

    Each annotation is mapped to a style by `style_for`; fragments without an
    annotation get `default`. Neighbouring fragments that end up with the
    same style are merged into one run.
    """
    runs: list[StyledRun[S]] = []
    for text, annotation in fragments:
        style = default if annotation is None else style_for(annotation)
        if len(runs) > 0 and runs[-1].style == style:
            runs[-1] = StyledRun(runs[-1].text + text, style)
        else:
            runs.append(StyledRun(text, style))
    return runs


###############################################################################
# Terminal colors
###############################################################################

# https://en.wikipedia.org/wiki/ANSI_escape_code


class CharColor(enum.IntEnum):
    CHAR_COLOR_DEFAULT = 0
    CHAR_COLOR_BLACK = 30
    CHAR_COLOR_RED = enum.auto()
    CHAR_COLOR_GREEN = enum.auto()
    CHAR_COLOR_YELLOW = enum.auto()
    CHAR_COLOR_BLUE = enum.auto()
    CHAR_COLOR_MAGENTA = enum.auto()
    CHAR_COLOR_CYAN = enum.auto()
    CHAR_COLOR_WHITE = enum.auto()  # Really light gray
    CHAR_COLOR_BRIGHT_BLACK = 90  # Really dark gray
    CHAR_COLOR_BRIGHT_RED = enum.auto()
    CHAR_COLOR_BRIGHT_GREEN = enum.auto()
    CHAR_COLOR_BRIGHT_YELLOW = enum.auto()
    CHAR_COLOR_BRIGHT_BLUE = enum.auto()
    CHAR_COLOR_BRIGHT_MAGENTA = enum.auto()
    CHAR_COLOR_BRIGHT_CYAN = enum.auto()
    CHAR_COLOR_BRIGHT_WHITE = enum.auto()


def ESC(x: str) -> str:
    return "\033" + x


def CSI(x: str) -> str:
    return ESC("[" + x)


def SGR(color: CharColor) -> str:
    return CSI(f"{int(color)}m")


RESET = CSI("0m")


def ansi_text[A](
    fragments: typing.Iterable[Fragment[A]],
    color_for: typing.Callable[[A], CharColor | None],
) -> str:
    """Render fragments as a string with ANSI color escapes in it.

    Colors never leak across a line break (or into the indentation that
    follows one): every colored stretch is reset before the break and picked
    up again on the next line.
    """
    runs = styled(
        fragments,
        lambda annotation: color_for(annotation) or CharColor.CHAR_COLOR_DEFAULT,
        CharColor.CHAR_COLOR_DEFAULT,
    )

    result = ""
    for run in runs:
        lines = run.text.split("\n")
        for i, line in enumerate(lines):
            if i > 0:
                result += "\n"
            if len(line) == 0:
                continue
            if run.style == CharColor.CHAR_COLOR_DEFAULT:
                result += line
            else:
                result += SGR(run.style) + line + RESET
    return result
