"""
HTML Renderer - Upload form and side-by-side result page

Pages are complete HTML documents with embedded CSS. The result page is a
pure view over display rows: escaping, minimap markers and scroll behaviour
are all derived from the row sequence.
"""

from __future__ import annotations

import html

from models.diff import DisplayRow, RowKind

BASE_CSS = """
body { font-family: Arial, sans-serif; padding: 40px; }
.container { max-width: 1200px; margin: auto; }
"""

RESULT_CSS = """
.diff-wrapper { display: flex; gap: 12px; }
.diff-scroll { flex: 1; max-height: 80vh; overflow-y: auto; }

.minimap {
    width: 80px;
    position: relative;
    border-left: 1px solid #ccc;
    background: #fafafa;
}

.mini-change {
    position: absolute;
    left: 0;
    right: 0;
    height: 4px;
    cursor: pointer;
}

.mini-added { background: #8fd19e; }
.mini-removed { background: #f5a3a3; }

table { width: 100%; border-collapse: collapse; font-family: monospace; }
th, td { padding: 4px 8px; vertical-align: top; }
th { background: #f0f0f0; }

.line-num {
    width: 50px;
    text-align: right;
    color: #888;
    background: #fafafa;
}

.added { background: #e6ffed; }
.removed { background: #ffeef0; }

td { white-space: pre-wrap; word-break: break-word; }
"""

# Markers are placed at index / rowCount and scroll the table on click
MINIMAP_SCRIPT = """
const diffScroll = document.getElementById('diffScroll');
const minimap = document.getElementById('minimap');
const rows = diffScroll.querySelectorAll('tbody tr');

rows.forEach((row, index) => {
    const isAdded = row.querySelector('.added');
    const isRemoved = row.querySelector('.removed');
    if (!isAdded && !isRemoved) return;

    const marker = document.createElement('div');
    marker.className = 'mini-change ' + (isAdded ? 'mini-added' : 'mini-removed');
    marker.style.top = (index / rows.length) * 100 + '%';
    marker.onclick = () => {
        diffScroll.scrollTop = (index / rows.length) * diffScroll.scrollHeight;
    };

    minimap.appendChild(marker);
});
"""


def escape_text(text: str) -> str:
    """Escape a line for an HTML cell; empty lines keep their row height"""
    return html.escape(text or " ", quote=False)


def _page(title: str, body: str, extra_css: str = "", script: str = "") -> str:
    script_block = f"<script>{script}</script>\n" if script else ""
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8" />
<title>{title}</title>
<style>{BASE_CSS}{extra_css}</style>
</head>
<body>
<div class="container">
{body}
</div>
{script_block}</body>
</html>
"""


def render_upload_form() -> str:
    """Render the page with the two file inputs"""
    body = """<h1>Side-by-Side File Diff</h1>
<form action="/diff" method="post" enctype="multipart/form-data">
<div>
<label>Original file:</label><br />
<input type="file" name="fileA" required />
</div><br />
<div>
<label>Modified file:</label><br />
<input type="file" name="fileB" required />
</div><br />
<button type="submit">Compare</button>
</form>"""
    return _page("Side-by-Side File Diff", body)


def render_row(row: DisplayRow) -> str:
    """Render one display row as a four-cell table row"""
    if row.kind == RowKind.ADDED:
        cells = [
            '<td class="line-num"></td>',
            "<td></td>",
            f'<td class="line-num">{row.right_line_number}</td>',
            f'<td class="added">{escape_text(row.right_text)}</td>',
        ]
    elif row.kind == RowKind.REMOVED:
        cells = [
            f'<td class="line-num">{row.left_line_number}</td>',
            f'<td class="removed">{escape_text(row.left_text)}</td>',
            '<td class="line-num"></td>',
            "<td></td>",
        ]
    else:
        cells = [
            f'<td class="line-num">{row.left_line_number}</td>',
            f"<td>{escape_text(row.left_text)}</td>",
            f'<td class="line-num">{row.right_line_number}</td>',
            f"<td>{escape_text(row.right_text)}</td>",
        ]
    return "<tr>" + "".join(cells) + "</tr>"


def render_diff_page(rows: list[DisplayRow]) -> str:
    """Render the side-by-side table with its change minimap"""
    table_rows = "\n".join(render_row(row) for row in rows)

    body = f"""<h1>Diff Result</h1>

<div class="diff-wrapper">
<div class="diff-scroll" id="diffScroll">
<table border="1">
<thead>
<tr><th colspan="2">Original</th><th colspan="2">Modified</th></tr>
<tr><th>#</th><th>Code</th><th>#</th><th>Code</th></tr>
</thead>
<tbody>
{table_rows}
</tbody>
</table>
</div>
<div class="minimap" id="minimap"></div>
</div>

<br />
<a href="/">Compare another</a>"""
    return _page("Diff Result", body, extra_css=RESULT_CSS, script=MINIMAP_SCRIPT)
