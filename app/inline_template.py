"""Built-in HTML voucher template.

Last entry of the template fallback chain, always available in-process.
The page carries a "Gerar PDF" button that prints the voucher to PDF in the
browser with html2pdf.
"""

INLINE_TEMPLATE_NAME = "inline:voucher_template_hotel.html"


def get_inline_template() -> str:
    """Return the built-in hotel voucher template."""
    return '''<!DOCTYPE html>
<html lang="pt-BR">
<head>
    <meta charset="UTF-8">
    <title>Voucher Hotel Porto da Lua - {{voucherId}}</title>
    <style>
        * { box-sizing: border-box; }
        body {
            margin: 16px;
            background: #fff;
            color: #000;
            font-family: "Times New Roman", Times, serif;
            font-size: 14px;
            line-height: 1.2;
        }
        .voucher-container {
            width: 746px;
            border: 1px solid #000;
            margin: 5rem auto 0;
            display: flex;
            flex-direction: column;
        }
        .header { display: flex; width: 100%; height: 106px; border-bottom: 1px solid #000; }
        .header-logo { width: 146px; text-align: center; border-right: 1px solid #000; }
        .header-logo img { width: 100px; height: 90px; margin-top: 8px; object-fit: contain; }
        .header-info {
            flex: 1;
            text-align: center;
            padding: 8px 9px 0 9px;
            display: flex;
            flex-direction: column;
            justify-content: center;
        }
        .hotel-name { font-weight: 800; text-transform: uppercase; font-size: 20px; margin: 0; }
        .hotel-address { font-size: 14px; margin-top: 6px; }
        .voucher-title {
            height: 50px;
            text-align: center;
            font-weight: 800;
            text-transform: uppercase;
            padding-top: 6px;
            border-bottom: 1px solid #000;
        }
        .voucher-id { font-size: 12px; font-weight: 400; margin-top: 4px; }
        .main-info { display: flex; width: 100%; height: 60px; border-bottom: 1px solid #000; }
        .label-cell {
            width: 130px;
            font-weight: 700;
            text-transform: uppercase;
            display: flex;
            align-items: center;
            justify-content: center;
            border-right: 1px solid #000;
        }
        .info-cell { flex: 1; display: flex; }
        .split-left {
            flex: 1;
            display: flex;
            align-items: center;
            justify-content: center;
            border-right: 1px solid #000;
        }
        .split-right { flex: 2; display: grid; grid-template-columns: 250px 1fr; }
        .col-2-label { font-weight: 700; text-transform: uppercase; display: flex; align-items: center; padding-left: 9px; }
        .value-cell { display: flex; align-items: center; padding-left: 12px; }
        .hospedes { display: flex; align-items: center; height: 4.5rem; padding: 4px 8px; }
        .hospedes .label-cell { border-right: none; width: auto; margin-right: 12px; }
        .payment-title {
            height: 32px;
            text-align: center;
            font-weight: 800;
            text-transform: uppercase;
            padding-top: 6px;
            border-top: 1px solid #000;
            border-bottom: 1px solid #000;
        }
        .payment-section { display: flex; width: 100%; }
        .policy-cell { width: 50%; padding: 10px 14px 12px 14px; }
        .policy-cell ul { margin: 8px 0 0 0; padding-left: 18px; list-style-type: none; }
        .policy-cell li { margin: 7px 0; }
        .values-table { width: 50%; }
        .values-table-row { display: flex; border-bottom: 1px solid #000; border-left: 1px solid #000; height: 36px; }
        .values-table-row:last-child { border-bottom: none; }
        .val-label { flex: 2; font-weight: 700; text-transform: uppercase; display: flex; align-items: center; padding-left: 12px; }
        .val-amount { flex: 1; text-align: right; padding-right: 12px; display: flex; align-items: center; justify-content: flex-end; }
        .status-badge { display: inline-block; padding: 2px 10px; border-radius: 10px; font-weight: 700; }
        .status-paid { background: #d4edda; color: #155724; }
        .status-pending { background: #fff3cd; color: #856404; }
        .footer-notes {
            padding: 10px 12px;
            font-weight: 800;
            line-height: 1.5;
            font-size: 16px;
            border-top: 1px solid #000;
        }
        .signature-date { display: flex; width: 100%; height: 68px; border-top: 1px solid #000; }
        .signature-box { flex: 2; border-right: 1px solid #000; }
        .signature-box img { width: 250px; height: 66px; margin-left: 10px; object-fit: contain; }
        .date-cell { flex: 1; display: flex; align-items: center; justify-content: center; }
        #gerarPdf {
            position: fixed;
            top: 20px;
            right: 20px;
            background-color: #007bff;
            color: #fff;
            border: none;
            padding: 10px 18px;
            border-radius: 8px;
            cursor: pointer;
            font-size: 15px;
            font-weight: bold;
        }
        @media print { #gerarPdf { display: none; } }
    </style>
</head>
<body>
    <div class="voucher-container">
        <div class="header">
            <div class="header-logo">
                <img src="../img/logo.png" alt="Logo Hotel Porto da Lua">
            </div>
            <div class="header-info">
                <div class="hotel-name">HOTEL PORTO DA LUA - MARUDÁ</div>
                <div class="hotel-address">Av. Beira Mar – Alegre – Marudá</div>
                <div class="hotel-address">Marapanim – Pará – Brasil</div>
                <div class="hotel-address">Fone: (91) 9 9369-1074</div>
            </div>
        </div>

        <div class="voucher-title">
            VOUCHER - {{tipoAcomodacao}}
            <div class="voucher-id">{{voucherId}}</div>
        </div>

        <div class="main-info">
            <div class="label-cell">CHECK IN</div>
            <div class="info-cell">
                <div class="split-left">{{checkin}}</div>
                <div class="split-right">
                    <div class="col-2-label">TIPO DE ACOMODAÇÃO:</div>
                    <div class="value-cell">{{tipoAcomodacao}}</div>
                </div>
            </div>
        </div>

        <div class="main-info">
            <div class="label-cell">CHECK OUT</div>
            <div class="info-cell">
                <div class="split-left">{{checkout}}</div>
                <div class="split-right">
                    <div class="col-2-label">OBSERVAÇÃO:</div>
                    <div class="value-cell">{{observacoes}}</div>
                </div>
            </div>
        </div>

        <div class="hospedes">
            <div class="label-cell">HÓSPEDES:</div>
            <div class="value-cell">{{nome}}</div>
        </div>

        <div class="payment-title">
            DADOS DO PAGAMENTO
            <span class="status-badge ${this.getStatusClass('{{status}}')}">{{status}}</span>
        </div>
        <div class="payment-section">
            <div class="policy-cell">
                <strong>Política de Cancelamento</strong>
                <ul>
                    <li>- 14 Dias antes: Reembolso Integral</li>
                    <li>- 7 dias antes: Crédito em diárias</li>
                    <li>- 48h: No Show Integral sem reembolso ou crédito</li>
                </ul>
            </div>
            <div class="values-table">
                <div class="values-table-row">
                    <div class="val-label">VALOR DA DIÁRIA</div>
                    <div class="val-amount">{{valorDiaria}}</div>
                </div>
                <div class="values-table-row">
                    <div class="val-label">QUANTIDADE DE DIÁRIAS</div>
                    <div class="val-amount">{{quantidadeDiarias}}</div>
                </div>
                <div class="values-table-row">
                    <div class="val-label">VALOR TOTAL</div>
                    <div class="val-amount">{{total}}</div>
                </div>
                <div class="values-table-row">
                    <div class="val-label">VALOR ANTECIPADO</div>
                    <div class="val-amount">{{valorAntecipado}}</div>
                </div>
                <div class="values-table-row">
                    <div class="val-label">VALOR A PAGAR</div>
                    <div class="val-amount">{{restante}}</div>
                </div>
            </div>
        </div>

        <div class="footer-notes">
            OBS.: DIÁRIA INICIA AS 12:00 DA DATA DE ENTRADA E ENCERRA AS 12:00 DA DATA DE SAÍDA.<br>
            O HÓSPEDE DEVERÁ QUITAR O DÉBITO NO <strong>CHECK IN</strong>.
        </div>

        <div class="signature-date">
            <div class="signature-box">
                <img src="../img/assinatura.jfif" alt="Assinatura">
            </div>
            <div class="date-cell">{{dataEmissao}}</div>
        </div>
    </div>

    <button id="gerarPdf">Gerar PDF</button>

    <script src="https://cdnjs.cloudflare.com/ajax/libs/html2pdf.js/0.10.1/html2pdf.bundle.min.js"></script>
    <script>
        document.getElementById('gerarPdf').addEventListener('click', () => {
            const voucher = document.querySelector('.voucher-container');
            html2pdf().set({
                margin: 0,
                filename: '{{voucherId}}.pdf',
                image: { type: 'jpeg', quality: 0.98 },
                html2canvas: { scale: 3, useCORS: true },
                jsPDF: { unit: 'pt', format: 'a4', orientation: 'portrait' }
            }).from(voucher).save();
        });
    </script>
</body>
</html>
'''
