"""
Tax and Invoice Charge Configuration

GST on courier services is 18% of the taxable value. Intra-state supply
splits it into CGST and SGST (9% each); inter-state supply charges IGST.
"""

GST_RATE = 0.18
CGST_RATE = 0.09
SGST_RATE = 0.09
IGST_RATE = 0.18

# Flat air waybill charge per consignment on consolidated invoices
AWB_CHARGE = 50.0

# Default biller (OCL Services, Guwahati)
DEFAULT_BILLER_STATE = "Assam"
BILLER_GSTIN = "18AACCO3877C1ZE"

# Quotes stay valid for 30 days
QUOTE_VALIDITY_DAYS = 30
