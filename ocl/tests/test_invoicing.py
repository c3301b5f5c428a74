"""
Unit Tests for Consolidated Invoices
"""

from datetime import date

import pytest

from ocl.invoicing import (
    InvoiceDocument,
    InvoiceItem,
    amount_in_words,
    calculate_invoice_totals,
    export_invoice_html,
    financial_year_invoice_number,
    format_inr,
    format_invoice_date,
    invoice_frame,
    invoice_period,
    render_invoice_html,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def items():
    return [
        InvoiceItem(
            consignment_number=100234,
            booking_date="2025-05-02T10:00:00.000Z",
            service_type="DOX",
            destination="Bengaluru",
            weight=0.5,
            freight_charges=100.0,
        ),
        InvoiceItem(
            consignment_number=100235,
            booking_date="2025-05-09T10:00:00.000Z",
            service_type="NON-DOX",
            destination="Delhi",
            weight=4.0,
            freight_charges=200.0,
            awb_number="AWB-7781",
        ),
    ]


@pytest.fixture
def invoice(items):
    return InvoiceDocument(
        invoice_number="25-26/00042",
        invoice_date=date(2025, 5, 31),
        invoice_period=invoice_period(date(2025, 5, 31)),
        corporate_name="Brahmaputra Traders & Sons",
        corporate_address="GS Road, Guwahati",
        items=tuple(items),
        corporate_gst_number="18AABCB1234C1Z5",
        corporate_state="Assam",
    )


# =============================================================================
# TOTALS
# =============================================================================

class TestInvoiceTotals:

    def test_same_state_splits_cgst_sgst(self, items):
        totals = calculate_invoice_totals(items, "Assam", "Assam")
        assert totals.total_bills == 2
        assert totals.total_freight == pytest.approx(300.0)
        assert totals.total_awb == pytest.approx(100.0)
        assert totals.total_amount == pytest.approx(400.0)
        assert totals.fuel_charge == pytest.approx(30.0)
        assert totals.subtotal == pytest.approx(430.0)
        assert totals.cgst == pytest.approx(38.7)
        assert totals.sgst == pytest.approx(38.7)
        assert totals.igst == 0
        assert totals.grand_total == pytest.approx(507.4)

    def test_state_match_ignores_case_and_spaces(self, items):
        totals = calculate_invoice_totals(items, "Assam", "  ASSAM ")
        assert totals.cgst == pytest.approx(38.7)
        assert totals.igst == 0

    def test_other_state_charges_igst(self, items):
        totals = calculate_invoice_totals(items, "Assam", "Karnataka")
        assert totals.cgst == 0
        assert totals.sgst == 0
        assert totals.igst == pytest.approx(77.4)
        assert totals.gst == pytest.approx(77.4)
        assert totals.grand_total == pytest.approx(507.4)

    def test_unknown_customer_state_charges_igst(self, items):
        totals = calculate_invoice_totals(items, "Assam", "")
        assert totals.igst == pytest.approx(77.4)

    def test_no_items(self):
        totals = calculate_invoice_totals([], "Assam", "Assam")
        assert totals.total_bills == 0
        assert totals.grand_total == 0

    def test_invoice_frame(self, items):
        df = invoice_frame(items)
        assert df["cost_awb"].to_list() == [50.0, 50.0]
        assert df["line_amount"].to_list() == [150.0, 250.0]

    def test_item_from_api(self):
        item = InvoiceItem.from_api({
            "consignmentNumber": 100234,
            "bookingDate": "2025-05-02T10:00:00.000Z",
            "serviceType": "DOX",
            "destination": "Bengaluru",
            "weight": 0.5,
            "freightCharges": 100,
        })
        assert item.freight_charges == 100.0
        assert item.awb_number is None


# =============================================================================
# WORDS AND FORMATTING
# =============================================================================

class TestAmountInWords:

    @pytest.mark.parametrize("amount,expected", [
        (0, "Zero"),
        (5, "Five Rupees Only"),
        (19, "Nineteen Rupees Only"),
        (40, "Forty Rupees Only"),
        (507.4, "Five Hundred Seven Rupees Only"),
        (1234, "One Thousand Two Hundred Thirty Four Rupees Only"),
        (100000, "One Lakh Rupees Only"),
        (250050, "Two Lakh Fifty Thousand Fifty Rupees Only"),
        (12345678, "One Crore Twenty Three Lakh Forty Five Thousand Six Hundred Seventy Eight Rupees Only"),
        (1_000_000_000, "One Hundred Crore Rupees Only"),
    ])
    def test_indian_numbering(self, amount, expected):
        assert amount_in_words(amount) == expected

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            amount_in_words(-1)


class TestFormatting:

    @pytest.mark.parametrize("amount,expected", [
        (0, "₹0.00"),
        (999, "₹999.00"),
        (1000, "₹1,000.00"),
        (123456.7, "₹1,23,457.00"),
        (12345678, "₹1,23,45,678.00"),
        (-1500, "-₹1,500.00"),
    ])
    def test_format_inr(self, amount, expected):
        assert format_inr(amount) == expected

    def test_format_invoice_date(self):
        assert format_invoice_date(date(2025, 5, 2)) == "02/05/2025"
        assert format_invoice_date("2025-05-02T10:00:00.000Z") == "02/05/2025"
        assert format_invoice_date("") == "-"
        assert format_invoice_date("soon") == "-"


class TestNumbering:

    def test_before_april_belongs_to_previous_year(self):
        assert financial_year_invoice_number(date(2025, 3, 31), 42) == "24-25/00042"

    def test_april_starts_new_year(self):
        assert financial_year_invoice_number(date(2025, 4, 1), 42) == "25-26/00042"

    def test_century_rollover(self):
        assert financial_year_invoice_number(date(2099, 12, 1), 1) == "99-00/00001"

    def test_negative_serial_raises(self):
        with pytest.raises(ValueError):
            financial_year_invoice_number(date(2025, 4, 1), -1)

    def test_invoice_period(self):
        assert invoice_period(date(2024, 2, 10)) == "01/02/2024 - 29/02/2024"
        assert invoice_period(date(2025, 12, 31)) == "01/12/2025 - 31/12/2025"


# =============================================================================
# RENDERING
# =============================================================================

class TestRender:

    def test_html(self, invoice):
        html = render_invoice_html(invoice)
        assert "25-26/00042" in html
        assert "01/05/2025 - 31/05/2025" in html
        assert "Brahmaputra Traders &amp; Sons" in html
        assert "CGST 9%" in html
        assert "IGST" not in html
        assert "₹507.00" in html
        assert "Five Hundred Seven Rupees Only" in html
        assert "AWB-7781" in html
        assert "N-DOX" in html

    def test_interstate_html(self, invoice):
        from dataclasses import replace
        html = render_invoice_html(replace(invoice, corporate_state="Karnataka"))
        assert "IGST 18%" in html
        assert "CGST" not in html

    def test_export(self, invoice, tmp_path):
        path = export_invoice_html(invoice, output_path=tmp_path / "invoices" / "inv.html")
        assert path.exists()
        assert "25-26/00042" in path.read_text(encoding="utf-8")
