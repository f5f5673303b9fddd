"""
Tests for importer.rendering.markdown_renderer
"""

from curriculum_importer.importer.rendering import render_markdown


def test_render_without_rewriter_keeps_references():
    html = render_markdown("[doc](doc.pdf) ![img](a.png)")

    assert 'href="doc.pdf"' in html
    assert 'src="a.png"' in html


def test_rewriter_sees_every_link_and_image():
    seen = []

    def rewrite(reference):
        seen.append(reference)
        return None

    render_markdown("[one](1.txt)\n\n![two](2.png)\n\n* [three](https://x.org/3)\n", rewrite)

    assert sorted(seen) == ["1.txt", "2.png", "https://x.org/3"]


def test_rewriter_replacement_is_substituted():
    html = render_markdown(
        "![pic](pic.png) [keep](keep.txt)",
        lambda ref: "/static/new.png" if ref == "pic.png" else None,
    )

    assert 'src="/static/new.png"' in html
    assert 'href="keep.txt"' in html
    assert "pic.png" not in html


def test_rewriter_not_called_for_code_blocks():
    seen = []

    render_markdown("```\n![not an image](x.png)\n```\n", lambda ref: seen.append(ref))

    assert seen == []


def test_rewriter_sees_backslash_escapes_resolved():
    seen = []

    def rewrite(reference):
        seen.append(reference)
        return None

    html = render_markdown(r"![x](a\_b.png) [y](c\*d.txt)", rewrite)

    assert sorted(seen) == ["a_b.png", "c*d.txt"]
    assert 'src="a_b.png"' in html


def test_escaped_reference_is_rewritten():
    html = render_markdown(
        r"![x](a\_b.png)",
        lambda ref: "/static/ab.png" if ref == "a_b.png" else None,
    )

    assert 'src="/static/ab.png"' in html
