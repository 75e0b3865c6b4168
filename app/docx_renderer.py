"""Word voucher renderer.

This module fills a Word (.docx) voucher template with the voucher record
while preserving the template formatting. Placeholders are looked up in the
body, in tables (nested ones included) and in page headers and footers.
"""
import logging
from io import BytesIO
from typing import Iterator

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from .errors import RenderError
from .models import VoucherRecord
from .template_renderer import render

logger = logging.getLogger(__name__)


def iter_table_paragraphs(table: Table) -> Iterator[Paragraph]:
    """Yield paragraphs of every cell, descending into nested tables."""
    for row in table.rows:
        for cell in row.cells:
            yield from cell.paragraphs
            for nested in cell.tables:
                yield from iter_table_paragraphs(nested)


def iter_paragraphs(doc) -> Iterator[Paragraph]:
    """Yield every paragraph that may hold a placeholder."""
    yield from doc.paragraphs
    for table in doc.tables:
        yield from iter_table_paragraphs(table)

    for section in doc.sections:
        for part in (section.header, section.footer):
            # Linked parts have no content of their own
            if part.is_linked_to_previous:
                continue
            yield from part.paragraphs
            for table in part.tables:
                yield from iter_table_paragraphs(table)


def fill_paragraph(paragraph: Paragraph, record: VoucherRecord) -> None:
    """Replace placeholders in a paragraph, keeping run formatting where possible."""
    if "{{" not in paragraph.text:
        return

    runs = paragraph.runs
    for run in runs:
        if "{{" in run.text:
            run.text = render(run.text, record)

    # Word often splits "{{nome}}" over several runs; merge those into the first run
    filled = render(paragraph.text, record)
    if runs and filled != paragraph.text:
        runs[0].text = filled
        for run in runs[1:]:
            run.text = ""


def render_docx(template: bytes, record: VoucherRecord) -> bytes:
    """Fill a Word template and return the saved document bytes."""
    try:
        doc = Document(BytesIO(template))
    except Exception as e:
        raise RenderError(f"Invalid Word template: {str(e)}") from e

    try:
        for paragraph in iter_paragraphs(doc):
            fill_paragraph(paragraph, record)
    except (ValueError, TypeError) as e:
        # lxml refuses control characters in run text
        raise RenderError(f"Failed to fill Word template: {str(e)}") from e

    output = BytesIO()
    try:
        doc.save(output)
    except Exception as e:
        raise RenderError(f"Failed to save Word voucher: {str(e)}") from e

    logger.info(f"Rendered Word voucher {record.voucher_id}")
    return output.getvalue()
