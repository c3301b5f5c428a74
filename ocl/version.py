"""
Calculator Version

Stamped on every batch calculation output. Bump when the rate table, fuel
rate or pricing logic changes.
"""

VERSION = "2025.11.01"
