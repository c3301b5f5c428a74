"""
OCL Invoicing

Consolidated invoice totals for corporate customers, invoice numbering and
HTML rendering.
"""

from .consolidated import (
    InvoiceItem,
    InvoiceTotals,
    InvoiceDocument,
    invoice_frame,
    calculate_invoice_totals,
    financial_year,
    financial_year_invoice_number,
    format_invoice_date,
    invoice_period,
    amount_in_words,
    format_inr,
)
from .render import render_invoice_html, export_invoice_html

__all__ = [
    "InvoiceItem",
    "InvoiceTotals",
    "InvoiceDocument",
    "invoice_frame",
    "calculate_invoice_totals",
    "financial_year",
    "financial_year_invoice_number",
    "format_invoice_date",
    "invoice_period",
    "amount_in_words",
    "format_inr",
    "render_invoice_html",
    "export_invoice_html",
]
