"""Application settings read from environment variables."""
import os
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

VERSION = "1.0.0"


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "t", "yes", "on")


@dataclass
class Settings:
    """Template locations, output options and server options."""
    template_path: str = str(BASE_DIR / "templates" / "voucher_template.docx")
    html_template_path: str = str(BASE_DIR / "templates" / "voucher_template_hotel.html")
    pdf_enabled: bool = False
    use_inline_template: bool = True
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            template_path=os.environ.get("VOUCHER_TEMPLATE_PATH", defaults.template_path),
            html_template_path=os.environ.get("VOUCHER_HTML_TEMPLATE_PATH", defaults.html_template_path),
            pdf_enabled=_env_flag("VOUCHER_PDF_ENABLED", defaults.pdf_enabled),
            use_inline_template=_env_flag("VOUCHER_USE_INLINE_TEMPLATE", defaults.use_inline_template),
            host=os.environ.get("VOUCHER_HOST", defaults.host),
            port=int(os.environ.get("VOUCHER_PORT", defaults.port)),
            reload=_env_flag("VOUCHER_RELOAD", defaults.reload),
        )
