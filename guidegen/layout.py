"""Page layout and the chapters sidebar."""

import html

from .indexer import Heading
from .render import render_inline

# ── per-page HTML template ──────────────────────────────────────────────────
HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{page_title}</title>
  <style>
    /* === base === */
    body {{
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto,
                   "Helvetica Neue", Arial, sans-serif;
      font-size: 14px;
      line-height: 1.6;
      color: #172b4d;
      max-width: 1120px;
      margin: 32px auto;
      padding: 0 24px;
    }}
    /* === layout === */
    #container {{ display: flex; gap: 32px; }}
    #mainCol {{ flex: 1; min-width: 0; }}
    #subCol {{ width: 260px; flex-shrink: 0; font-size: 13px; }}
    #subCol ol, #subCol ul {{ margin: 4px 0 4px 18px; padding: 0; }}
    .skip-link {{ position: absolute; left: -9999px; }}
    .skip-link:focus {{ left: 8px; top: 8px; }}
    .edge-badge {{
      display: inline-block;
      background: #de350b;
      color: #fff;
      font-weight: 600;
      padding: 2px 8px;
      border-radius: 3px;
    }}
    /* === headings === */
    h1 {{ font-size: 2em;   border-bottom: 2px solid #dfe1e6; padding-bottom: 8px;  margin-top: 32px; }}
    h2 {{ font-size: 1.5em; border-bottom: 1px solid #dfe1e6; padding-bottom: 4px;  margin-top: 28px; }}
    h3 {{ font-size: 1.17em; margin-top: 24px; }}
    h4 {{ font-size: 1em;   margin-top: 16px; }}
    /* === tables === */
    table {{ border-collapse: collapse; width: 100%; margin: 16px 0; font-size: 13px; }}
    th, td {{ border: 1px solid #dfe1e6; padding: 8px 12px; text-align: left; vertical-align: top; }}
    th {{ background-color: #f4f5f7; font-weight: 600; }}
    /* === code === */
    code {{
      font-family: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, monospace;
      font-size: 12px;
      background: #f4f5f7;
      padding: 2px 5px;
      border-radius: 3px;
    }}
    pre {{
      background: #f4f5f7;
      border: 1px solid #dfe1e6;
      border-radius: 4px;
      padding: 16px;
      overflow-x: auto;
      margin: 16px 0;
    }}
    pre code {{ background: none; padding: 0; }}
    /* === footnotes === */
    .footnote {{ font-size: 12px; color: #5e6c84; }}
    /* === links === */
    a {{ color: #0052cc; text-decoration: none; }}
    a:hover {{ text-decoration: underline; }}
  </style>
</head>
<body>
<a class="skip-link" href="#mainCol">Skip to content</a>
<div id="header">
{edge_badge}{header_section}
</div>
<div id="container">
{index_section}
<div id="mainCol">
{body}
</div>
</div>
</body>
</html>
"""

EDGE_BADGE = '<p><span class="edge-badge">Edge</span> These guides track the development branch.</p>\n'


def _link(heading: Heading) -> str:
    return f'<a href="#{html.escape(heading.id)}">{render_inline(heading.text)}</a>'


def render_sidebar(tree: dict[Heading, list[Heading]]) -> str:
    """Chapters list for two levels of headings."""
    items = []
    for chapter, sections in tree.items():
        children = "".join(f"<li>{_link(section)}</li>" for section in sections)
        children_ul = f"<ul>{children}</ul>" if children else ""
        items.append(f"<li>{_link(chapter)}{children_ul}</li>")

    return (
        '<div id="subCol">\n'
        '  <h3 class="chapter">Chapters</h3>\n'
        '  <ol class="chapters">\n'
        + "".join(f"    {item}\n" for item in items)
        + "  </ol>\n"
        "</div>"
    )


def render_page(
    page_title: str,
    header_section: str,
    index_section: str,
    body: str,
    edge: bool = False,
) -> str:
    return HTML_TEMPLATE.format(
        page_title=html.escape(page_title),
        edge_badge=EDGE_BADGE if edge else "",
        header_section=header_section,
        index_section=index_section,
        body=body,
    )
