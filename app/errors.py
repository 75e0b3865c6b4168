"""Exceptions raised while generating a voucher."""


class VoucherError(Exception):
    """Base class for voucher generation errors."""


class ValidationError(VoucherError):
    """Form data rejected before any document is produced."""


class DateOrderError(ValidationError):
    """Check-out is not strictly after check-in."""

    def __init__(self, message: str = "A data de check-out deve ser posterior à data de check-in"):
        super().__init__(message)
        self.message = message


class InvalidAmountError(ValidationError):
    """A monetary amount is negative or out of range."""

    def __init__(self, field_name: str, amount, reason: str = "não pode ser negativo"):
        self.field_name = field_name
        self.amount = amount
        self.message = f"O valor de '{field_name}' {reason}: {amount}"
        super().__init__(self.message)


class TemplateLoadError(VoucherError):
    """A template source could not be read."""

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Erro ao carregar template {source}{detail}")


class RenderError(VoucherError):
    """Packaging the filled template into a document failed."""


class GenerationInProgressError(VoucherError):
    """Another voucher is being generated right now."""


class VoucherGenerationError(VoucherError):
    """Every rendering path failed."""
