from services.diff_generator import diff
from services.html_renderer import escape_text, render_diff_page, render_row, render_upload_form


def test_escape_text():
    assert escape_text("<a & b>") == "&lt;a &amp; b&gt;"
    assert escape_text('say "hi"') == 'say "hi"'


def test_escape_text_keeps_blank_rows_visible():
    assert escape_text("") == " "


def test_upload_form_has_both_inputs():
    page = render_upload_form()
    assert '<form action="/diff" method="post" enctype="multipart/form-data">' in page
    assert 'name="fileA"' in page
    assert 'name="fileB"' in page


def test_render_row_added():
    row = diff("", "new <line>")[0]
    assert render_row(row) == (
        '<tr><td class="line-num"></td><td></td>'
        '<td class="line-num">1</td><td class="added">new &lt;line&gt;</td></tr>'
    )


def test_render_row_removed():
    row = diff("old", "")[0]
    assert render_row(row) == (
        '<tr><td class="line-num">1</td><td class="removed">old</td>'
        '<td class="line-num"></td><td></td></tr>'
    )


def test_render_row_unchanged():
    row = diff("same", "same")[0]
    assert render_row(row) == (
        '<tr><td class="line-num">1</td><td>same</td>'
        '<td class="line-num">1</td><td>same</td></tr>'
    )


def test_diff_page_has_one_table_row_per_display_row():
    rows = diff("x\ny\nz", "x\nw\nz")
    page = render_diff_page(rows)
    body = page.split("<tbody>")[1].split("</tbody>")[0]
    assert body.count("<tr>") == len(rows) == 4
    assert 'id="minimap"' in page
    assert '<a href="/">Compare another</a>' in page
