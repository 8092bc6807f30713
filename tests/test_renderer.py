"""Tests renderer HTML — un fragment par bloc."""
from editorjs_html.blocks import (
    BaseBlock,
    HeaderBlock, HeaderData,
    ParagraphBlock, ParagraphData,
    MarkerBlock, MarkerData,
    ListBlock, ListData, ListItem,
    TableBlock, TableData,
    WarningBlock, WarningData,
    RawBlock, RawData,
)
from editorjs_html.renderer import HtmlRenderer, Renderer, render_block, render_blocks


def _list(style, items):
    return ListBlock(data=ListData.model_validate({"style": style, "items": items}))


def _table(with_headings, content):
    return TableBlock(data=TableData(withHeadings=with_headings, content=content))


# ── Blocs simples ────────────────────────────────────────────────────────────

def test_render_header():
    assert render_block(HeaderBlock(data=HeaderData(text="Hi", level=2))) == "<h2>Hi</h2>"


def test_render_paragraph():
    assert render_block(ParagraphBlock(data=ParagraphData(text="A"))) == "<p>A</p>"


def test_render_marker_like_paragraph():
    html = render_block(MarkerBlock(data=MarkerData(text='<mark class="cdx-marker">x</mark>')))
    assert html == '<p><mark class="cdx-marker">x</mark></p>'


def test_render_warning():
    html = render_block(WarningBlock(data=WarningData(title="Attention", message="Lire")))
    assert html == '<div role="alert"><h4>Attention</h4><p>Lire</p></div>'


def test_render_raw_verbatim():
    raw = '<div class="x"><script>alert(1)</script> &amp; </div>'
    assert render_block(RawBlock(data=RawData(html=raw))) == raw


def test_text_not_escaped():
    html = render_block(ParagraphBlock(data=ParagraphData(text="<b>gras</b> & co")))
    assert html == "<p><b>gras</b> & co</p>"


# ── List ─────────────────────────────────────────────────────────────────────

def test_render_list_unordered_nested():
    b = _list("unordered", [{"content": "a", "items": [{"content": "b", "items": []}]}])
    assert render_block(b) == "<ul><li>a<ul><li>b</li></ul></li></ul>"


def test_render_list_ordered_children_inherit_style():
    b = _list("ordered", [
        {"content": "1", "items": [{"content": "1.1"}, {"content": "1.2"}]},
        {"content": "2", "items": []},
    ])
    assert render_block(b) == "<ol><li>1<ol><li>1.1</li><li>1.2</li></ol></li><li>2</li></ol>"


def test_render_list_empty_and_absent_items_equivalent():
    with_empty = _list("unordered", [{"content": "a", "items": []}])
    without = _list("unordered", [{"content": "a"}])
    assert render_block(with_empty) == render_block(without) == "<ul><li>a</li></ul>"


def test_render_list_empty():
    assert render_block(_list("ordered", [])) == "<ol></ol>"


def test_render_list_deep_nesting():
    item = {"content": "leaf", "items": []}
    for depth in range(2000):
        item = {"content": str(depth), "items": [item]}
    html = render_block(_list("unordered", [item]))
    assert html.count("<ul>") == 2001
    assert html.count("</li>") == 2001
    assert html.startswith("<ul><li>1999<ul><li>1998<ul>")
    assert html.endswith("<li>leaf</li>" + "</ul></li>" * 2000 + "</ul>")


# ── Table ────────────────────────────────────────────────────────────────────

def test_render_table_with_headings():
    b = _table(True, [["H1", "H2"], ["a", "b"]])
    assert render_block(b) == (
        "<table><thead><tr><td>H1</td><td>H2</td></tr></thead>"
        "<tbody><tr><td>a</td><td>b</td></tr></tbody></table>"
    )


def test_render_table_without_headings():
    b = _table(False, [["a", "b"], ["c", "d"]])
    assert render_block(b) == (
        "<table><tbody><tr><td>a</td><td>b</td></tr>"
        "<tr><td>c</td><td>d</td></tr></tbody></table>"
    )


def test_render_table_headings_on_empty_content():
    assert render_block(_table(True, [])) == "<table><thead><tr></tr></thead><tbody></tbody></table>"


def test_render_table_does_not_mutate_content():
    b = _table(True, [["H"], ["a"]])
    render_block(b)
    render_block(b)
    assert b.data.content == [["H"], ["a"]]


# ── Dispatch ─────────────────────────────────────────────────────────────────

def test_render_unregistered_block_is_empty():
    assert render_block(BaseBlock(type="image")) == ""


def test_render_blocks_keeps_order():
    blocks = [
        ParagraphBlock(data=ParagraphData(text="1")),
        RawBlock(data=RawData(html="<hr>")),
        HeaderBlock(data=HeaderData(text="2", level=1)),
    ]
    assert render_blocks(blocks) == "<p>1</p><hr><h1>2</h1>"


def test_html_renderer_matches_protocol():
    renderer = HtmlRenderer()
    assert isinstance(renderer, Renderer)
    assert renderer.render_blocks([ParagraphBlock(data=ParagraphData(text="x"))]) == "<p>x</p>"
