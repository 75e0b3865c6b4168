"""Voucher generation service.

Runs one generation at a time: validate and build the record, load the
template chain, render to Word, PDF or HTML, and fall back to the HTML
template when packaging fails.
"""
import logging
import re
import threading
from contextlib import contextmanager
from datetime import date
from typing import Optional

from .config import Settings
from .docx_renderer import render_docx
from .errors import (
    GenerationInProgressError, RenderError, TemplateLoadError, VoucherGenerationError
)
from .models import GeneratedVoucher, OutputFormat, VoucherInput, VoucherRecord
from .pdf_converter import PdfCapability, convert_to_pdf, detect_pdf_capability
from .template_loader import LoadedTemplate, TemplateLoader
from .template_renderer import render
from .voucher_builder import build_record

logger = logging.getLogger(__name__)


def build_voucher_filename(guest_name: str, voucher_id: str, output_format: OutputFormat) -> str:
    """Voucher_<guest name>_<voucher id>.<ext>, whitespace runs become '_'."""
    safe_name = re.sub(r"\s+", "_", guest_name)
    return f"Voucher_{safe_name}_{voucher_id}.{output_format.value}"


class GenerationGuard:
    """Allows a single voucher generation in flight.

    A second caller is rejected right away instead of waiting.
    """

    def __init__(self):
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def hold(self):
        if not self._lock.acquire(blocking=False):
            raise GenerationInProgressError("A voucher is already being generated")
        try:
            yield
        finally:
            self._lock.release()


class VoucherService:
    """Generates voucher documents from form input."""

    def __init__(
        self,
        loader: TemplateLoader,
        pdf_capability: PdfCapability = PdfCapability.NONE,
        guard: Optional[GenerationGuard] = None
    ):
        self.loader = loader
        self.pdf_capability = pdf_capability
        self.guard = guard or GenerationGuard()

    @classmethod
    def from_settings(cls, settings: Settings) -> "VoucherService":
        return cls(
            loader=TemplateLoader.from_settings(settings),
            pdf_capability=detect_pdf_capability(settings.pdf_enabled),
        )

    def generate(self, voucher_input: VoucherInput, issued_on: Optional[date] = None) -> GeneratedVoucher:
        """Generate a voucher file.

        Validation errors propagate untouched. Rendering errors fall back to
        the HTML template; if that fails too, VoucherGenerationError is raised.
        """
        with self.guard.hold():
            record = build_record(voucher_input, issued_on=issued_on)

            try:
                return self._render(record)
            except (RenderError, TemplateLoadError) as e:
                logger.error(f"Voucher {record.voucher_id} rendering failed, falling back to HTML: {e}")

            try:
                return self._render_html(record, self.loader.load_html())
            except Exception as e:
                logger.exception(f"HTML fallback failed for voucher {record.voucher_id}")
                raise VoucherGenerationError("Erro ao gerar voucher. Tente novamente.") from e

    def _render(self, record: VoucherRecord) -> GeneratedVoucher:
        template = self.loader.load()
        voucher = self._render_document(record, template)

        if self.pdf_capability is PdfCapability.NONE:
            return voucher

        pdf = convert_to_pdf(voucher.content, voucher.output_format, record, self.pdf_capability)
        return self._package(record, pdf, OutputFormat.PDF)

    def _render_document(self, record: VoucherRecord, template: LoadedTemplate) -> GeneratedVoucher:
        if template.is_word:
            return self._package(record, render_docx(template.content, record), OutputFormat.DOCX)
        return self._render_html(record, template)

    def _render_html(self, record: VoucherRecord, template: LoadedTemplate) -> GeneratedVoucher:
        try:
            text = template.text()
        except UnicodeDecodeError as e:
            raise RenderError(f"HTML template {template.source} is not valid UTF-8") from e

        html = render(text, record)
        return self._package(record, html.encode("utf-8"), OutputFormat.HTML)

    def _package(self, record: VoucherRecord, content: bytes, output_format: OutputFormat) -> GeneratedVoucher:
        filename = build_voucher_filename(record.guest_name, record.voucher_id, output_format)
        logger.info(f"Generated voucher file: {filename} ({len(content)} bytes)")
        return GeneratedVoucher(
            filename=filename,
            content=content,
            output_format=output_format,
            voucher_id=record.voucher_id,
        )
