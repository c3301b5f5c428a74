"""
Invoice Rendering

HTML rendering of consolidated invoices through a jinja2 template.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ocl.data import AWB_CHARGE, BILLER_GSTIN
from ocl.surcharges import FUEL

from .consolidated import (
    InvoiceDocument,
    amount_in_words,
    format_inr,
    format_invoice_date,
)


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["inr"] = format_inr
    env.filters["invoice_date"] = format_invoice_date
    return env


def render_invoice_html(invoice: InvoiceDocument) -> str:
    """Self-contained HTML document for a consolidated invoice."""
    totals = invoice.totals
    template = _get_env().get_template("invoice.html")
    return template.render(
        invoice=invoice,
        totals=totals,
        awb_charge=AWB_CHARGE,
        fuel_percent=round(FUEL.rate() * 100),
        biller_gstin=BILLER_GSTIN,
        # Whole rupees only; paise are dropped, not rounded
        amount_words=amount_in_words(int(totals.grand_total)) if totals.grand_total > 0 else "",
    )


def export_invoice_html(invoice: InvoiceDocument, *, output_path: Path) -> Path:
    """Render and write the invoice; parent directories are created."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_invoice_html(invoice), encoding="utf-8")
    return output_path
