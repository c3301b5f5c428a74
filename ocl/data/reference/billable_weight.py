"""
Billable Weight Configuration

Volumetric (dimensional) weight rules for domestic courier shipments.
"""

# Industry-standard domestic divisor for dimensions in centimetres
DIM_FACTOR = 5000             # Cubic centimetres per kilogram

# Dimensions are converted to cubic centimetres before dividing by DIM_FACTOR.
# Any unit not listed is treated as inches and scaled by OTHER_UNIT_MULTIPLIER.
UNIT_MULTIPLIERS = {
    "cm": 1.0,
    "mm": 0.1,
}
OTHER_UNIT_MULTIPLIER = 100.0
DEFAULT_UNIT = "cm"

# Weights are reported to 10 grams
WEIGHT_DECIMALS = 2
