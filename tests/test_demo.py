import wadler.demo as demo
from wadler.output import plain_text
from wadler.runtime import render


WIDE = """
func hello(proposal: ProposedViewSize, subviews: Subviews, cache: inout ()) {
    print("Hello")
}
"""

HUNG = """
func hello(proposal: ProposedViewSize,
           subviews: Subviews,
           cache: inout ()) {
    print("Hello")
}
"""

NARROW = """
func hello(
    proposal: ProposedViewSize,
    subviews: Subviews,
    cache: inout ()
) {
    print("Hello")
}
"""


def _output(txt: str) -> list[str]:
    return txt.strip().split("\n")


def test_sample_layouts():
    doc = demo.sample_document()
    assert plain_text(render(doc, 80)).split("\n") == _output(WIDE)
    assert plain_text(render(doc, 40)).split("\n") == _output(HUNG)
    assert plain_text(render(doc, 30)).split("\n") == _output(NARROW)


def test_sample_annotations():
    fragments = render(demo.sample_document(), 80)
    keywords = [f.text for f in fragments if f.annotation == demo.SyntaxKind.KEYWORD]
    types = [f.text for f in fragments if f.annotation == demo.SyntaxKind.TYPE]
    assert keywords == ["func", "inout"]
    assert types == ["ProposedViewSize", "Subviews", " ()"]


def test_main_plain(capsys):
    demo.main(["demo", "--width", "80", "--width", "40", "--plain"])
    out = capsys.readouterr().out
    assert out.split("\n") == (
        ["." * 80] + _output(WIDE) + [""] + ["." * 40] + _output(HUNG) + [""]
    )


def test_main_default_width(capsys):
    demo.main(["demo", "--plain"])
    out = capsys.readouterr().out
    assert out.split("\n") == ["." * 20] + _output(NARROW) + [""]


def test_main_colors(capsys):
    demo.main(["demo", "--width", "80"])
    out = capsys.readouterr().out
    assert "\033[35mfunc\033[0m hello(" in out
    assert "\033[36mProposedViewSize\033[0m" in out
