"""Shared fixtures for the voucher generator tests."""
from datetime import date
from decimal import Decimal
from io import BytesIO

import pytest
from docx import Document

from app.generation import VoucherService
from app.models import VoucherInput
from app.template_loader import TemplateLoader
from app.voucher_builder import build_record


@pytest.fixture
def make_input():
    """Factory for VoucherInput with sensible defaults."""

    def _make(**overrides):
        values = {
            "guest_name": "Ana Silva",
            "accommodation_type": "double",
            "checkin_date": date(2024, 3, 1),
            "checkout_date": date(2024, 3, 4),
            "daily_rate": Decimal("100.00"),
            "advance_payment": Decimal("150.00"),
            "observations": "",
        }
        values.update(overrides)
        return VoucherInput(**values)

    return _make


@pytest.fixture
def record(make_input):
    return build_record(make_input(), issued_on=date(2024, 2, 20))


@pytest.fixture
def docx_template() -> bytes:
    """A Word template using placeholders in the body, a table and split runs."""
    doc = Document()
    doc.add_paragraph("HÓSPEDES: {{nome}}")
    doc.add_paragraph("TIPO DE ACOMODAÇÃO: {{tipoAcomodacao}}")

    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "CHECK IN"
    table.cell(0, 1).text = "{{checkin}}"
    table.cell(1, 0).text = "VALOR A PAGAR"
    table.cell(1, 1).text = "{{restante}}"

    p = doc.add_paragraph()
    p.add_run("Voucher: ")
    p.add_run("{{vouch")
    p.add_run("erId}}")

    doc.add_paragraph("Campo livre: {{desconhecido}}")

    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def inline_loader() -> TemplateLoader:
    return TemplateLoader(template_path=None, html_template_paths=[], use_inline_template=True)


@pytest.fixture
def html_service(inline_loader) -> VoucherService:
    return VoucherService(loader=inline_loader)
