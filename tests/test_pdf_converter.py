from io import BytesIO

import pytest
from PyPDF2 import PdfReader, PdfWriter

from app import pdf_converter
from app.errors import RenderError
from app.models import OutputFormat
from app.pdf_converter import PdfCapability, convert_to_pdf, detect_pdf_capability, stamp_metadata


def make_pdf(pages: int = 1) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=595, height=842)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def test_disabled_pdf_has_no_capability(monkeypatch):
    monkeypatch.setattr(pdf_converter, "find_libreoffice", lambda: "/usr/bin/soffice")
    assert detect_pdf_capability(False) is PdfCapability.NONE


def test_capability_detected_when_libreoffice_present(monkeypatch):
    monkeypatch.setattr(pdf_converter, "find_libreoffice", lambda: "/usr/bin/soffice")
    assert detect_pdf_capability(True) is PdfCapability.LIBREOFFICE


def test_no_capability_without_libreoffice(monkeypatch):
    monkeypatch.setattr(pdf_converter, "find_libreoffice", lambda: None)
    assert detect_pdf_capability(True) is PdfCapability.NONE


def test_stamp_metadata(record):
    stamped = stamp_metadata(make_pdf(pages=2), record)
    reader = PdfReader(BytesIO(stamped))
    assert len(reader.pages) == 2
    assert reader.metadata.subject == record.voucher_id
    assert reader.metadata.title == "Voucher Ana Silva"


def test_stamp_metadata_rejects_garbage(record):
    with pytest.raises(RenderError):
        stamp_metadata(b"not a pdf", record)


def test_convert_without_capability_fails(record):
    with pytest.raises(RenderError):
        convert_to_pdf(b"<html></html>", OutputFormat.HTML, record, PdfCapability.NONE)


def test_convert_uses_libreoffice_and_stamps(monkeypatch, record):
    calls = []

    def fake_convert(content, source_format):
        calls.append((content, source_format))
        return make_pdf()

    monkeypatch.setattr(pdf_converter, "convert_with_libreoffice", fake_convert)
    pdf = convert_to_pdf(b"docx bytes", OutputFormat.DOCX, record, PdfCapability.LIBREOFFICE)

    assert calls == [(b"docx bytes", OutputFormat.DOCX)]
    assert PdfReader(BytesIO(pdf)).metadata.subject == record.voucher_id


def test_missing_libreoffice_raises(monkeypatch):
    monkeypatch.setattr(pdf_converter, "find_libreoffice", lambda: None)
    with pytest.raises(RenderError):
        pdf_converter.convert_with_libreoffice(b"x", OutputFormat.DOCX)
