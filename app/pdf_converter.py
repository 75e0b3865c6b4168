"""PDF conversion module.

This module converts a filled voucher (Word or HTML) to PDF with LibreOffice
in headless mode and stamps the result with document metadata.

The conversion method is detected once at startup with
detect_pdf_capability(); rendering code never probes for tools itself.
"""
import logging
import os
import platform
import shutil
import subprocess
import tempfile
from enum import Enum
from io import BytesIO
from typing import Optional

from PyPDF2 import PdfReader, PdfWriter

from .errors import RenderError
from .models import OutputFormat, VoucherRecord

logger = logging.getLogger(__name__)

CONVERSION_TIMEOUT = 60

# LibreOffice export filter per source document
PDF_FILTERS = {
    OutputFormat.DOCX: "pdf",
    OutputFormat.HTML: "pdf:writer_web_pdf_Export",
}


class PdfCapability(Enum):
    LIBREOFFICE = "libreoffice"
    NONE = "none"


def find_libreoffice() -> Optional[str]:
    """Find LibreOffice installation path."""
    system = platform.system()

    if system == "Windows":
        possible_paths = [
            r"C:\Program Files\LibreOffice\program\soffice.exe",
            r"C:\Program Files (x86)\LibreOffice\program\soffice.exe",
        ]
    elif system == "Darwin":
        possible_paths = [
            "/Applications/LibreOffice.app/Contents/MacOS/soffice",
        ]
    else:
        possible_paths = [
            "/usr/bin/libreoffice",
            "/usr/bin/soffice",
            "/usr/local/bin/libreoffice",
        ]

    for path in possible_paths:
        if os.path.exists(path):
            return path

    return shutil.which("libreoffice") or shutil.which("soffice")


def detect_pdf_capability(enabled: bool) -> PdfCapability:
    """Decide at startup whether vouchers can be delivered as PDF."""
    if not enabled:
        return PdfCapability.NONE

    if find_libreoffice():
        logger.info("Using LibreOffice for PDF conversion")
        return PdfCapability.LIBREOFFICE

    logger.warning("PDF output enabled but LibreOffice was not found - PDF disabled")
    return PdfCapability.NONE


def convert_with_libreoffice(content: bytes, source_format: OutputFormat) -> bytes:
    """Convert a Word or HTML document to PDF using LibreOffice."""
    libreoffice_path = find_libreoffice()
    if not libreoffice_path:
        raise RenderError("LibreOffice not found")

    with tempfile.TemporaryDirectory(prefix="voucher_pdf_") as work_dir:
        source_path = os.path.join(work_dir, f"voucher.{source_format.value}")
        with open(source_path, "wb") as f:
            f.write(content)

        cmd = [
            libreoffice_path,
            "--headless",
            "--convert-to", PDF_FILTERS[source_format],
            "--outdir", work_dir,
            source_path
        ]

        logger.info(f"Converting to PDF (LibreOffice): {source_path}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=CONVERSION_TIMEOUT
            )
        except subprocess.TimeoutExpired as e:
            raise RenderError("PDF conversion timed out") from e
        except OSError as e:
            raise RenderError(f"Could not start LibreOffice: {str(e)}") from e

        if result.returncode != 0:
            logger.error(f"LibreOffice error: {result.stderr}")
            raise RenderError(f"PDF conversion failed: {result.stderr}")

        pdf_path = os.path.join(work_dir, "voucher.pdf")
        if not os.path.exists(pdf_path):
            raise RenderError(f"PDF file was not created: {pdf_path}")

        with open(pdf_path, "rb") as f:
            return f.read()


def stamp_metadata(pdf: bytes, record: VoucherRecord) -> bytes:
    """Copy the PDF pages and set title, subject and author."""
    try:
        reader = PdfReader(BytesIO(pdf))
        if len(reader.pages) == 0:
            raise RenderError("Converted PDF has no pages")

        writer = PdfWriter()
        for page in reader.pages:
            writer.add_page(page)

        writer.add_metadata({
            "/Title": f"Voucher {record.guest_name}",
            "/Subject": record.voucher_id,
            "/Author": "VoucherPro",
        })

        output = BytesIO()
        writer.write(output)
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"Invalid PDF produced: {str(e)}") from e

    return output.getvalue()


def convert_to_pdf(
    content: bytes,
    source_format: OutputFormat,
    record: VoucherRecord,
    capability: PdfCapability
) -> bytes:
    """Convert a filled voucher to a PDF stamped with the voucher id."""
    if capability is not PdfCapability.LIBREOFFICE:
        raise RenderError("No PDF conversion method available")

    pdf = convert_with_libreoffice(content, source_format)
    return stamp_metadata(pdf, record)
