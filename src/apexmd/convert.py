"""Markdown to HTML conversion.

Pipeline: parse with mistune -> build the node tree -> advanced-table pass
(spans, footers, captions) -> render -> optional standalone wrapper and
pretty printing.
"""

import logging

from apexmd.config import ConversionOptions
from apexmd.document.builder import parse_markdown
from apexmd.output import pretty_print, wrap_document
from apexmd.render import HtmlRenderer
from apexmd.tables import pipeline

logger = logging.getLogger(__name__)


def markdown_to_html(text: str, options: ConversionOptions | None = None) -> str:
    """Convert markdown *text* to HTML according to *options*."""
    options = options or ConversionOptions()

    document = parse_markdown(text, options)
    if options.advanced_tables:
        pipeline.run(document)

    html = HtmlRenderer(options).render(document)

    if options.standalone:
        html = wrap_document(html, title=options.title, stylesheet=options.stylesheet)
    if options.pretty:
        html = pretty_print(html)

    logger.debug("Converted %d characters of markdown to %d characters of HTML", len(text), len(html))
    return html
