"""OCL reference data: rate table, weight rules, fuel and tax configuration."""

from pathlib import Path

REFERENCE_DIR = Path(__file__).parent
RATES_FILE = REFERENCE_DIR / "rates.json"
