# A prettier printer.
"""A [Wadler-style](https://homepages.inf.ed.ac.uk/wadler/papers/prettier/prettier.pdf)
pretty printer.

Build a document out of the pieces in the [document] module: text, line
breaks, indentation, and choices between a wide layout and a narrow one.
`group` is the usual way to make a choice: it offers the document laid out
flat on one line, falling back to the document as written.

    doc = group("foo(" + hang(join(["x", "y"], "," + NEWLINE)) + ")")

Then hand it to `render` in the [runtime] module with a width, and get back a
list of (text, annotation) fragments. The [output] module turns those into
plain text or colored terminal text.

    plain_text(render(doc, 80))  # "foo(x, y)"
    plain_text(render(doc, 5))   # "foo(x,\n    y)"
"""

from . import document
from . import output
from . import runtime

from .document import (
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
    choice,
    concat,
    describe,
    flatten,
    group,
    hang,
    indent,
    join,
    text,
    to_document,
)
from .output import CharColor, StyledRun, ansi_text, plain_text, styled
from .runtime import TAB_WIDTH, Fragment, RenderState, fits, render
