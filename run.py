"""Run the Hotel Voucher Generator application."""
import os
import sys
from pathlib import Path

import uvicorn

# Add the project root to the Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def main():
    """Run the FastAPI application."""
    from app.config import Settings
    from app.pdf_converter import PdfCapability, detect_pdf_capability, find_libreoffice

    settings = Settings.from_env()

    # Check which templates exist
    missing = [
        path for path in (settings.template_path, settings.html_template_path)
        if not os.path.exists(path)
    ]
    if missing:
        print("=" * 60)
        print("WARNING: Voucher template(s) not found:")
        for path in missing:
            print(f"  {path}")
        print()
        if settings.use_inline_template:
            print("The built-in HTML template will be used as fallback.")
        else:
            print("Inline template is disabled - generation will fail!")
        print("=" * 60)
        print()

    # Check for PDF conversion method
    if settings.pdf_enabled:
        if detect_pdf_capability(True) is PdfCapability.LIBREOFFICE:
            print(f"PDF conversion: Using LibreOffice ({find_libreoffice()})")
        else:
            print("=" * 60)
            print("WARNING: PDF output is enabled but LibreOffice was not found!")
            print("Install LibreOffice: https://www.libreoffice.org/download/")
            print("Vouchers will be delivered as Word or HTML.")
            print("=" * 60)
            print()
    else:
        print("PDF conversion: disabled (set VOUCHER_PDF_ENABLED=1 to enable)")

    print()
    print("Starting VoucherPro...")
    print(f"Open http://localhost:{settings.port} in your browser")
    print("Press Ctrl+C to stop the server")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload
    )


if __name__ == "__main__":
    main()
