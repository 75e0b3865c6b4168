"""Voucher template loading.

Templates are tried in order until one can be read:
1. Word template (voucher_template.docx)
2. HTML template (voucher_template_hotel.html)
3. Built-in inline HTML template

Each source is read once, without retry. A failed read is logged and the
chain moves on to the next source.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .config import Settings
from .errors import TemplateLoadError
from .inline_template import INLINE_TEMPLATE_NAME, get_inline_template

logger = logging.getLogger(__name__)

# .docx files are ZIP packages
ZIP_SIGNATURE = b"PK\x03\x04"


@dataclass
class LoadedTemplate:
    """Raw template bytes and where they came from."""
    content: bytes
    source: str

    @property
    def is_word(self) -> bool:
        return is_word_template(self.content)

    def text(self) -> str:
        return self.content.decode("utf-8")


def is_word_template(content: bytes) -> bool:
    """Check for the ZIP signature of a Word document."""
    return content[:4] == ZIP_SIGNATURE


def read_template_file(path: str) -> LoadedTemplate:
    """Read one template file, raising TemplateLoadError on any failure."""
    try:
        content = Path(path).read_bytes()
    except OSError as e:
        raise TemplateLoadError(path, str(e)) from e

    if not content:
        raise TemplateLoadError(path, "empty file")

    return LoadedTemplate(content=content, source=path)


def get_inline_loaded_template() -> LoadedTemplate:
    return LoadedTemplate(
        content=get_inline_template().encode("utf-8"),
        source=INLINE_TEMPLATE_NAME,
    )


class TemplateLoader:
    """Walks the template fallback chain."""

    def __init__(
        self,
        template_path: Optional[str] = None,
        html_template_paths: Sequence[str] = (),
        use_inline_template: bool = True,
    ):
        self.template_path = template_path
        self.html_template_paths = [p for p in html_template_paths if p]
        self.use_inline_template = use_inline_template

    @classmethod
    def from_settings(cls, settings: Settings) -> "TemplateLoader":
        return cls(
            template_path=settings.template_path,
            html_template_paths=[settings.html_template_path],
            use_inline_template=settings.use_inline_template,
        )

    def sources(self) -> List[str]:
        """Every file path in the chain, in the order they are tried."""
        paths = [self.template_path] if self.template_path else []
        return paths + self.html_template_paths

    def load(self) -> LoadedTemplate:
        """Load the first available template, Word template first."""
        return self._load_chain(self.sources())

    def load_html(self) -> LoadedTemplate:
        """Load the first available HTML template, skipping the Word one."""
        return self._load_chain(self.html_template_paths)

    def _load_chain(self, paths: Sequence[str]) -> LoadedTemplate:
        for path in paths:
            try:
                template = read_template_file(path)
                logger.info(f"Loaded voucher template: {path}")
                return template
            except TemplateLoadError as e:
                logger.warning(f"{e} - trying next template source")

        if self.use_inline_template:
            logger.info("Using built-in inline HTML template")
            return get_inline_loaded_template()

        raise TemplateLoadError(", ".join(paths) or "<none>", "no template source available")
