# A prettier printer: the renderer.
import dataclasses
import logging
import typing

from .document import (
    LINE_BREAKS,
    Choice,
    Concat,
    Document,
    Empty,
    Hang,
    Indent,
    NewLine,
    Text,
)

TAB_WIDTH = 4


render_log = logging.getLogger("wadler.render")


class Fragment[A](typing.NamedTuple):
    text: str
    annotation: A | None = None


def fits(text: str, width: int) -> bool:
    """Does the first line of `text` fit in `width` columns?"""
    length = 0
    for c in text:
        if c in LINE_BREAKS:
            break
        length += 1
    return length <= width


class WorkStack[A](typing.NamedTuple):
    """One entry of the work stack, linked to the rest of it.

    Nothing is ever modified in place, so keeping a reference to a stack is
    the same as keeping a copy of it.
    """

    indentation: int
    doc: Document[A]
    parent: "WorkStack[A] | None"


@dataclasses.dataclass
class ChoicePoint[A]:
    """Everything we need to put back when the wide side of a choice doesn't
    work out."""

    stack: WorkStack[A] | None
    column: int
    newlines: int
    mark: int
    indentation: int
    narrow: Document[A]


class RenderState[A]:
    """The state of one render of one document.

    Conceptually, a choice renders its wide side all the way to the end of
    the document and then checks whether the first line of that output fits
    in what's left of the current line. If it does then that's the answer,
    otherwise we put everything back the way it was and render the narrow
    side (again, all the way to the end).

    Rather than recursing to do that we keep an explicit stack of pending
    choices, each with a snapshot of the work stack. Only the first line of
    a choice's output matters, so most choices are settled long before the
    end of the document:

    - A choice whose first line already runs past the width is rejected on
      the spot, since its output only ever grows to the right.
    - A choice whose first line ends at a line break that is still within
      the width is accepted right there.

    Whatever is still pending when the work stack runs dry gets judged from
    the inside out: either it's accepted and the next one out gets judged, or
    it's rejected and we resume from its snapshot with the narrow side.
    """

    width: int
    tab_width: int
    stack: WorkStack[A] | None
    column: int
    newlines: int
    output: list[Fragment[A]]
    choices: list[ChoicePoint[A]]

    def __init__(self, doc: Document[A], width: int, tab_width: int = TAB_WIDTH):
        self.width = width
        self.tab_width = tab_width
        self.stack = WorkStack(0, doc, None)
        self.column = 0
        self.newlines = 0
        self.output = []
        self.choices = []

    def render(self) -> list[Fragment[A]]:
        while True:
            self.run()

            # Ran out of work, so all the pending choices have their
            # candidates. Judge them from the inside out.
            while len(self.choices) > 0 and self.accept(self.choices[-1]):
                self.choices.pop()

            if len(self.choices) == 0:
                return self.output

            self.reject()

    def run(self):
        stack = self.stack
        while stack is not None:
            indentation, doc, stack = stack
            match doc:
                case Empty():
                    pass

                case Text(content, annotation):
                    self.output.append(Fragment(content, annotation))
                    self.column += len(content)
                    if self.overflowed():
                        self.reject()
                        stack = self.stack

                case Concat(left, right):
                    stack = WorkStack(indentation, right, stack)
                    stack = WorkStack(indentation, left, stack)

                case NewLine():
                    # A choice can start past the width and reach this break
                    # without printing anything.
                    if self.overflowed():
                        self.reject()
                        stack = self.stack
                    else:
                        self.settle()
                        self.output.append(Fragment("\n" + (" " * indentation), None))
                        self.column = indentation
                        self.newlines += 1

                case Indent(child):
                    stack = WorkStack(indentation + self.tab_width, child, stack)

                case Hang(child):
                    stack = WorkStack(self.column, child, stack)

                case Choice(wide, narrow):
                    self.choices.append(
                        ChoicePoint(
                            stack=stack,
                            column=self.column,
                            newlines=self.newlines,
                            mark=len(self.output),
                            indentation=indentation,
                            narrow=narrow,
                        )
                    )
                    stack = WorkStack(indentation, wide, stack)

                case _:
                    typing.assert_never(doc)

        self.stack = None

    def overflowed(self) -> bool:
        """Has the innermost pending choice already failed?

        With no line break since the choice began, its first line is
        everything since then, so it fits only while we're within the width.
        """
        if len(self.choices) == 0:
            return False
        choice = self.choices[-1]
        return self.newlines == choice.newlines and self.column > self.width

    def settle(self):
        """Accept every pending choice whose first line ends at the line break
        we're about to print.

        Those are the innermost choices with no line break since they began,
        and since nothing has overflowed they all fit.
        """
        choices = self.choices
        while len(choices) > 0 and choices[-1].newlines == self.newlines:
            self.keep(choices.pop())

    def accept(self, choice: ChoicePoint[A]) -> bool:
        line = []
        for index in range(choice.mark, len(self.output)):
            text = self.output[index].text
            line.append(text)
            if any(c in LINE_BREAKS for c in text):
                break

        result = fits("".join(line), self.width - choice.column)
        if result:
            self.keep(choice)
        return result

    def keep(self, choice: ChoicePoint[A]):
        if render_log.isEnabledFor(logging.DEBUG):
            render_log.debug(
                "choice at column %d fits in %d columns; keeping the wide layout",
                choice.column,
                self.width,
            )

    def reject(self):
        choice = self.choices.pop()
        if render_log.isEnabledFor(logging.DEBUG):
            render_log.debug(
                "choice at column %d does not fit in %d columns; taking the narrow layout",
                choice.column,
                self.width,
            )

        self.column = choice.column
        self.newlines = choice.newlines
        del self.output[choice.mark :]
        self.stack = WorkStack(choice.indentation, choice.narrow, choice.stack)


def render[A](doc: Document[A], width: int, *, tab_width: int = TAB_WIDTH) -> list[Fragment[A]]:
    """Lay out a document to fit within the given width, as far as possible.

    The result is a list of (text, annotation) fragments; line breaks (and
    the indentation that follows them) come out as their own fragments with
    no annotation.
    """
    return RenderState(doc, width, tab_width).render()
