"""Placeholder substitution for voucher templates.

Templates mark fields as {{name}}. This is plain keyed string replacement,
not a templating engine: names the record does not know about are left in
the output untouched. Values are inserted as-is, without HTML escaping, so
the form text reaches the voucher exactly as typed.
"""
from typing import Mapping

from .models import VoucherRecord


# Status badge markup used by the HTML voucher templates
STATUS_BADGE_PATTERN = "status-badge ${this.getStatusClass('{{status}}')}"
STATUS_CLASS_PAID = "status-paid"
STATUS_CLASS_PENDING = "status-pending"


def placeholder(name: str) -> str:
    return "{{" + name + "}}"


def get_status_class(record: VoucherRecord) -> str:
    """CSS class for the payment status badge."""
    return STATUS_CLASS_PAID if record.is_paid else STATUS_CLASS_PENDING


def replace_status_badge(template: str, record: VoucherRecord) -> str:
    """Swap the status badge expression for the matching CSS class."""
    return template.replace(STATUS_BADGE_PATTERN, f"status-badge {get_status_class(record)}")


def replace_placeholders(template: str, values: Mapping[str, object]) -> str:
    """Replace every {{name}} occurrence; falsy values become ''."""
    result = template
    for name, value in values.items():
        result = result.replace(placeholder(name), str(value) if value else "")
    return result


def render(template: str, record: VoucherRecord) -> str:
    """Fill a template with the voucher record.

    The status badge runs first: it contains the {{status}} placeholder
    itself, which the generic pass would otherwise consume.
    """
    result = replace_status_badge(template, record)
    return replace_placeholders(result, record.placeholders())
