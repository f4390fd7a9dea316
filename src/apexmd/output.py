"""Final HTML post-processing: pretty printing and standalone documents."""

from bs4 import BeautifulSoup
from mistune.util import escape

from apexmd import __version__

# Minimal styling used when no stylesheet is given
DEFAULT_STYLE = """\
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
      line-height: 1.6;
      max-width: 800px;
      margin: 2rem auto;
      padding: 0 1rem;
      color: #333;
    }
    pre { background: #f5f5f5; padding: 1rem; overflow-x: auto; }
    code { background: #f0f0f0; padding: 0.2em 0.4em; border-radius: 3px; }
    blockquote { border-left: 4px solid #ddd; margin: 0; padding-left: 1rem; color: #666; }
    table { border-collapse: collapse; width: 100%; }
    th, td { border: 1px solid #ddd; padding: 0.5rem; }
    th { background: #f5f5f5; }
    figure.table-figure { margin: 1rem 0; }
    figcaption { font-style: italic; margin: 0.5rem 0; }
"""


def pretty_print(html: str) -> str:
    """Re-indent *html* one element per line."""
    return BeautifulSoup(html, "html.parser").prettify()


def wrap_document(content: str, title: str | None = None, stylesheet: str | None = None) -> str:
    """Wrap an HTML fragment in a complete HTML5 document."""
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'  <meta name="generator" content="apexmd {__version__}">',
        f"  <title>{escape(title or 'Document')}</title>",
    ]
    if stylesheet:
        lines.append(f'  <link rel="stylesheet" href="{escape(stylesheet)}">')
    else:
        lines.append("  <style>")
        lines.append(DEFAULT_STYLE.rstrip("\n"))
        lines.append("  </style>")
    lines.extend(["</head>", "<body>", "", content.rstrip("\n"), "", "</body>", "</html>", ""])
    return "\n".join(lines)
