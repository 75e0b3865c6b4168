"""Data models for the voucher generator."""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional


class AccommodationType(Enum):
    SINGLE = "single"
    DOUBLE = "double"
    TWIN = "twin"
    SUITE = "suite"
    FAMILY = "family"


class PaymentStatus(Enum):
    PAID = "Pago"
    PENDING = "Pendente"


class OutputFormat(Enum):
    DOCX = "docx"
    PDF = "pdf"
    HTML = "html"

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self]


MEDIA_TYPES = {
    OutputFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    OutputFormat.PDF: "application/pdf",
    OutputFormat.HTML: "text/html; charset=utf-8",
}


@dataclass
class VoucherInput:
    """Raw booking data as collected by the voucher form."""
    guest_name: str
    accommodation_type: str
    checkin_date: Optional[date]
    checkout_date: Optional[date]
    daily_rate: Decimal
    advance_payment: Decimal
    observations: str = ""


@dataclass(frozen=True)
class VoucherRecord:
    """Everything a voucher template needs, already computed and formatted.

    Built once per generation request and thrown away after rendering.
    """
    guest_name: str
    accommodation_label: str
    observations: str
    nights: int
    total_value: Decimal
    remaining_value: Decimal
    status: PaymentStatus
    formatted_checkin: str
    formatted_checkout: str
    formatted_issue_date: str
    formatted_daily_rate: str
    formatted_advance: str
    formatted_total: str
    formatted_remaining: str
    voucher_id: str

    @property
    def is_paid(self) -> bool:
        return self.status is PaymentStatus.PAID

    def placeholders(self) -> Dict[str, object]:
        """Map template placeholder names to record values.

        The names are the ones used by the existing voucher templates.
        """
        return {
            "nome": self.guest_name,
            "tipoAcomodacao": self.accommodation_label,
            "observacoes": self.observations,
            "checkin": self.formatted_checkin,
            "checkout": self.formatted_checkout,
            "dataEmissao": self.formatted_issue_date,
            "valorDiaria": self.formatted_daily_rate,
            "valorAntecipado": self.formatted_advance,
            "total": self.formatted_total,
            "restante": self.formatted_remaining,
            "quantidadeDiarias": self.nights,
            "voucherId": self.voucher_id,
            "status": self.status.value,
        }


@dataclass
class GeneratedVoucher:
    """A rendered voucher ready to be sent as a download."""
    filename: str
    content: bytes
    output_format: OutputFormat
    voucher_id: str

    @property
    def media_type(self) -> str:
        return self.output_format.media_type
