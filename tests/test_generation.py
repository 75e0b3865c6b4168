from datetime import date
from decimal import Decimal
from io import BytesIO

import pytest
from docx import Document
from PyPDF2 import PdfReader, PdfWriter

from app import pdf_converter
from app.errors import (
    DateOrderError, GenerationInProgressError, RenderError, VoucherGenerationError
)
from app.generation import GenerationGuard, VoucherService, build_voucher_filename
from app.models import OutputFormat
from app.pdf_converter import PdfCapability
from app.template_loader import TemplateLoader


def _blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=595, height=842)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def test_filename_pattern():
    assert build_voucher_filename("Ana Silva", "VOUCHER-1-ABCDE", OutputFormat.DOCX) == \
        "Voucher_Ana_Silva_VOUCHER-1-ABCDE.docx"
    assert build_voucher_filename("Ana  Maria\tSilva", "V", OutputFormat.HTML) == \
        "Voucher_Ana_Maria_Silva_V.html"


def test_guard_rejects_second_holder():
    guard = GenerationGuard()
    with guard.hold():
        assert guard.busy
        with pytest.raises(GenerationInProgressError):
            with guard.hold():
                pass
    assert not guard.busy


def test_guard_released_after_exception():
    guard = GenerationGuard()
    with pytest.raises(ValueError):
        with guard.hold():
            raise ValueError("boom")
    assert not guard.busy


def test_html_voucher_from_inline_template(html_service, make_input):
    voucher = html_service.generate(make_input(), issued_on=date(2024, 2, 20))
    html = voucher.content.decode("utf-8")

    assert voucher.output_format is OutputFormat.HTML
    assert voucher.filename == f"Voucher_Ana_Silva_{voucher.voucher_id}.html"
    assert voucher.media_type.startswith("text/html")
    assert "Ana Silva" in html
    assert "{{nome}}" not in html
    assert "status-badge status-pending" in html
    assert "getStatusClass" not in html
    assert "20/02/2024" in html


def test_word_voucher_from_docx_template(tmp_path, docx_template, make_input):
    primary = tmp_path / "voucher_template.docx"
    primary.write_bytes(docx_template)
    service = VoucherService(TemplateLoader(str(primary), []))

    voucher = service.generate(make_input())

    assert voucher.output_format is OutputFormat.DOCX
    assert voucher.filename.endswith(".docx")
    text = "\n".join(p.text for p in Document(BytesIO(voucher.content)).paragraphs)
    assert "HÓSPEDES: Ana Silva" in text


def test_secondary_html_template_used(tmp_path, make_input):
    secondary = tmp_path / "voucher_template_hotel.html"
    secondary.write_text("<h1>{{nome}}</h1><p>{{total}}</p>", encoding="utf-8")
    service = VoucherService(TemplateLoader(str(tmp_path / "missing.docx"), [str(secondary)]))

    voucher = service.generate(make_input())

    assert voucher.content.decode("utf-8") == "<h1>Ana Silva</h1><p>R$\u00a0300,00</p>"


def test_broken_word_template_falls_back_to_html(tmp_path, make_input):
    primary = tmp_path / "voucher_template.docx"
    primary.write_bytes(b"PK\x03\x04 broken package")
    service = VoucherService(TemplateLoader(str(primary), []))

    voucher = service.generate(make_input())

    assert voucher.output_format is OutputFormat.HTML
    assert "Ana Silva" in voucher.content.decode("utf-8")


def test_undecodable_html_template_is_generic_failure(tmp_path, make_input):
    secondary = tmp_path / "voucher_template_hotel.html"
    secondary.write_bytes(b"\xff\xfe{{nome}}\xff")
    service = VoucherService(TemplateLoader(None, [str(secondary)]))

    with pytest.raises(VoucherGenerationError):
        service.generate(make_input())
    assert not service.guard.busy


def test_no_template_at_all_is_generic_failure(tmp_path, make_input):
    service = VoucherService(TemplateLoader(str(tmp_path / "a.docx"), [], use_inline_template=False))

    with pytest.raises(VoucherGenerationError):
        service.generate(make_input())
    assert not service.guard.busy


def test_validation_error_produces_no_output(html_service, make_input):
    with pytest.raises(DateOrderError):
        html_service.generate(make_input(checkout_date=date(2024, 3, 1)))
    assert not html_service.guard.busy


def test_generation_rejected_while_busy(html_service, make_input):
    with html_service.guard.hold():
        with pytest.raises(GenerationInProgressError):
            html_service.generate(make_input())

    assert html_service.generate(make_input()).output_format is OutputFormat.HTML


def test_pdf_voucher(monkeypatch, inline_loader, make_input):
    monkeypatch.setattr(pdf_converter, "convert_with_libreoffice", lambda content, fmt: _blank_pdf())
    service = VoucherService(inline_loader, pdf_capability=PdfCapability.LIBREOFFICE)

    voucher = service.generate(make_input())

    assert voucher.output_format is OutputFormat.PDF
    assert voucher.filename.endswith(".pdf")
    assert PdfReader(BytesIO(voucher.content)).metadata.subject == voucher.voucher_id


def test_pdf_failure_falls_back_to_html(monkeypatch, inline_loader, make_input):
    def failing_convert(content, fmt):
        raise RenderError("PDF conversion timed out")

    monkeypatch.setattr(pdf_converter, "convert_with_libreoffice", failing_convert)
    service = VoucherService(inline_loader, pdf_capability=PdfCapability.LIBREOFFICE)

    voucher = service.generate(make_input(advance_payment=Decimal("300")))

    assert voucher.output_format is OutputFormat.HTML
    assert "status-badge status-paid" in voucher.content.decode("utf-8")


def test_control_character_in_word_voucher_falls_back_to_html(tmp_path, docx_template, make_input):
    primary = tmp_path / "voucher_template.docx"
    primary.write_bytes(docx_template)
    service = VoucherService(TemplateLoader(str(primary), []))

    voucher = service.generate(make_input(guest_name="Ana\x01Silva"))

    assert voucher.output_format is OutputFormat.HTML
    assert "Ana\x01Silva" in voucher.content.decode("utf-8")
    assert not service.guard.busy
