"""
Fuel Surcharge Configuration

OCL applies a fuel surcharge as a percentage of freight. The same rate is
used on rate quotes (percentage of base amount) and on consolidated
corporate invoices (percentage of total freight). AWB and other flat
charges are excluded.

Last updated: 2025-11-01
"""

LIST_RATE = 0.10              # 10% published fuel surcharge
DISCOUNT = 0.00               # No contracted discount
