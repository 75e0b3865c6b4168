"""Main FastAPI application for the Hotel Voucher Generator."""
import logging
import os
import re
from datetime import date
from decimal import Decimal
from typing import Optional
from urllib.parse import quote

from fastapi import Depends, FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse, Response

from .config import Settings, VERSION
from .errors import GenerationInProgressError, ValidationError, VoucherError
from .generation import VoucherService
from .models import VoucherInput
from .voucher_builder import ACCOMMODATION_LABELS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Erro ao gerar voucher. Tente novamente."

# Create FastAPI app
app = FastAPI(
    title="VoucherPro",
    description="Geração de vouchers de hospedagem em Word, PDF ou HTML",
    version=VERSION
)

settings = Settings.from_env()
voucher_service = VoucherService.from_settings(settings)
logger.info(f"PDF output: {voucher_service.pdf_capability.value}")


def get_voucher_service() -> VoucherService:
    return voucher_service


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback name for old clients."""
    fallback = re.sub(r'[?"\\\x00-\x1f\x7f]', "_", filename.encode("ascii", "replace").decode("ascii"))
    return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename)}'


def get_html_page() -> str:
    """Generate the HTML page for the voucher form."""
    options = "\n".join(
        f'                        <option value="{code}">{label}</option>'
        for code, label in ACCOMMODATION_LABELS.items()
    )
    return '''<!DOCTYPE html>
<html lang="pt-BR">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>VoucherPro - Gerador de Vouchers</title>
    <style>
        :root {
            --primary: #0f3d5c;
            --primary-light: #1d5b85;
            --accent: #f2b134;
            --surface: #ffffff;
            --muted: #6b7785;
            --error: #c0392b;
            --success: #1e8449;
            --shadow: 0 4px 24px rgba(0,0,0,0.12);
        }

        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: 'Segoe UI', Roboto, sans-serif;
            background: linear-gradient(135deg, var(--primary) 0%, #07202f 100%);
            min-height: 100vh;
            color: #1a1a1a;
        }

        .container {
            max-width: 720px;
            margin: 0 auto;
            padding: 40px 24px;
        }

        header {
            text-align: center;
            margin-bottom: 32px;
            color: #fff;
        }

        h1 {
            font-size: 2rem;
            letter-spacing: 1px;
            color: var(--accent);
            margin-bottom: 8px;
        }

        .card {
            background: var(--surface);
            border-radius: 16px;
            padding: 32px;
            box-shadow: var(--shadow);
        }

        .form-row {
            display: flex;
            gap: 16px;
        }

        .form-group {
            flex: 1;
            margin-bottom: 20px;
        }

        label {
            display: block;
            font-weight: 600;
            margin-bottom: 6px;
        }

        .required {
            color: var(--error);
            margin-left: 2px;
        }

        input, select, textarea {
            width: 100%;
            padding: 10px 12px;
            border: 1px solid #ccd3da;
            border-radius: 8px;
            font-size: 1rem;
        }

        textarea {
            min-height: 80px;
            resize: vertical;
        }

        .summary {
            background: #f4f7fa;
            border-radius: 8px;
            padding: 12px 16px;
            margin-bottom: 20px;
            color: var(--muted);
        }

        .btn-submit {
            width: 100%;
            padding: 14px;
            border: none;
            border-radius: 8px;
            background: var(--primary);
            color: #fff;
            font-size: 1.05rem;
            font-weight: 600;
            cursor: pointer;
        }

        .btn-submit:hover {
            background: var(--primary-light);
        }

        .btn-submit:disabled {
            opacity: 0.6;
            cursor: wait;
        }

        .message {
            display: none;
            margin-top: 16px;
            padding: 12px;
            border-radius: 8px;
        }

        .message.error {
            display: block;
            background: #fdecea;
            color: var(--error);
        }

        .message.success {
            display: block;
            background: #e9f7ef;
            color: var(--success);
        }
    </style>
</head>
<body>
    <div class="container">
        <header>
            <h1>VoucherPro</h1>
            <p>Gerador de vouchers de hospedagem</p>
        </header>

        <div class="card">
            <form id="voucherForm">
                <div class="form-group">
                    <label>Nome do hóspede<span class="required">*</span></label>
                    <input type="text" name="guest_name" id="guestName" required>
                </div>

                <div class="form-group">
                    <label>Tipo de acomodação<span class="required">*</span></label>
                    <select name="accommodation_type" id="accommodationType" required>
''' + options + '''
                    </select>
                </div>

                <div class="form-row">
                    <div class="form-group">
                        <label>Check-in<span class="required">*</span></label>
                        <input type="date" name="checkin_date" id="checkinDate" required>
                    </div>
                    <div class="form-group">
                        <label>Check-out<span class="required">*</span></label>
                        <input type="date" name="checkout_date" id="checkoutDate" required>
                    </div>
                </div>

                <div class="form-row">
                    <div class="form-group">
                        <label>Valor da diária (R$)<span class="required">*</span></label>
                        <input type="number" name="daily_rate" id="dailyRate" min="0" step="0.01" required>
                    </div>
                    <div class="form-group">
                        <label>Valor antecipado (R$)<span class="required">*</span></label>
                        <input type="number" name="advance_payment" id="advancePayment" min="0" step="0.01" value="0" required>
                    </div>
                </div>

                <div class="form-group">
                    <label>Observações</label>
                    <textarea name="observations" id="observations"></textarea>
                </div>

                <div class="summary" id="summary">Preencha as datas e a diária para ver o total.</div>

                <button type="submit" class="btn-submit" id="confirmButton">
                    Confirmar Voucher
                </button>

                <div class="message" id="message"></div>
            </form>
        </div>
    </div>

    <script>
        const form = document.getElementById('voucherForm');
        const confirmButton = document.getElementById('confirmButton');
        const messageDiv = document.getElementById('message');
        const summary = document.getElementById('summary');
        const checkin = document.getElementById('checkinDate');
        const checkout = document.getElementById('checkoutDate');
        const dailyRate = document.getElementById('dailyRate');

        function updateSummary() {
            if (!checkin.value || !checkout.value) return;
            const nights = Math.ceil((new Date(checkout.value) - new Date(checkin.value)) / 86400000);
            if (nights <= 0) {
                summary.textContent = 'A data de check-out deve ser posterior à data de check-in';
                return;
            }
            const total = nights * (parseFloat(dailyRate.value) || 0);
            summary.textContent = nights + ' diária(s) - total ' +
                total.toLocaleString('pt-BR', { style: 'currency', currency: 'BRL' });
        }

        [checkin, checkout, dailyRate].forEach(el => el.addEventListener('change', updateSummary));

        form.addEventListener('submit', async (e) => {
            e.preventDefault();

            confirmButton.disabled = true;
            confirmButton.textContent = 'Gerando voucher...';
            messageDiv.className = 'message';

            try {
                const response = await fetch('/generate', {
                    method: 'POST',
                    body: new FormData(form)
                });

                if (response.ok) {
                    const blob = await response.blob();
                    const contentDisposition = response.headers.get('Content-Disposition');

                    let filename = 'Voucher.html';
                    if (contentDisposition) {
                        const match = contentDisposition.match(/filename="?([^";]+)"?/);
                        if (match) filename = match[1];
                    }

                    const url = window.URL.createObjectURL(blob);
                    const a = document.createElement('a');
                    a.href = url;
                    a.download = filename;
                    document.body.appendChild(a);
                    a.click();
                    window.URL.revokeObjectURL(url);
                    document.body.removeChild(a);

                    showMessage('Voucher gerado com sucesso!', 'success');
                } else {
                    const error = await response.json();
                    showMessage(error.detail || 'Erro ao gerar voucher. Tente novamente.', 'error');
                }
            } catch (error) {
                showMessage('Erro ao gerar voucher. Tente novamente.', 'error');
            } finally {
                confirmButton.disabled = false;
                confirmButton.textContent = 'Confirmar Voucher';
            }
        });

        function showMessage(text, type) {
            messageDiv.textContent = text;
            messageDiv.className = 'message ' + type;
        }
    </script>
</body>
</html>'''


@app.get("/", response_class=HTMLResponse)
async def home():
    """Serve the voucher form."""
    return get_html_page()


@app.post("/generate")
def generate_voucher(
    guest_name: str = Form(..., description="Guest name"),
    accommodation_type: str = Form(..., description="single, double, twin, suite or family"),
    checkin_date: date = Form(..., description="Check-in date (YYYY-MM-DD)"),
    checkout_date: date = Form(..., description="Check-out date (YYYY-MM-DD)"),
    daily_rate: Decimal = Form(..., description="Daily rate in BRL"),
    advance_payment: Decimal = Form(..., description="Amount paid in advance in BRL"),
    observations: Optional[str] = Form("", description="Notes printed on the voucher"),
    service: VoucherService = Depends(get_voucher_service)
):
    """Generate a voucher and return it as a file download."""
    logger.info(f"Request: guest={guest_name}, type={accommodation_type}, {checkin_date} -> {checkout_date}")

    voucher_input = VoucherInput(
        guest_name=guest_name.strip(),
        accommodation_type=accommodation_type,
        checkin_date=checkin_date,
        checkout_date=checkout_date,
        daily_rate=daily_rate,
        advance_payment=advance_payment,
        observations=observations or "",
    )

    try:
        voucher = service.generate(voucher_input)
    except ValidationError as e:
        logger.warning(f"Voucher rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except GenerationInProgressError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=409, detail="Um voucher já está sendo gerado. Aguarde.")
    except VoucherError as e:
        logger.error(f"Voucher generation failed: {e}")
        raise HTTPException(status_code=500, detail=GENERIC_ERROR_MESSAGE)
    except Exception:
        logger.exception("Unexpected error")
        raise HTTPException(status_code=500, detail=GENERIC_ERROR_MESSAGE)

    return Response(
        content=voucher.content,
        media_type=voucher.media_type,
        headers={"Content-Disposition": content_disposition(voucher.filename)}
    )


@app.get("/health")
async def health_check(service: VoucherService = Depends(get_voucher_service)):
    """Health check endpoint."""
    loader = service.loader
    return {
        "status": "healthy",
        "templates": {path: os.path.exists(path) for path in loader.sources()},
        "inline_template": loader.use_inline_template,
        "pdf": service.pdf_capability.value,
        "version": VERSION
    }
