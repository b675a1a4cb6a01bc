"""
Column Schema Definitions

Documents the columns at each stage of calculate_billable_weights.
"""


# =============================================================================
# REQUIRED INPUT COLUMNS
# =============================================================================

REQUIRED_INPUT_COLS = [
    "width_in",             # Package width (whole inches)
    "height_in",            # Package height (whole inches)
    "length_in",            # Package length (whole inches)
    "weight_lbs",           # Actual weight (whole pounds)
]

# Field name reported in InvalidArgument for each input column, in the
# order rows are validated
FIELD_BY_COLUMN = {
    "width_in": "width",
    "height_in": "height",
    "length_in": "length",
    "weight_lbs": "weight",
}


# =============================================================================
# OUTPUT COLUMNS (added by calculate_billable_weights)
# =============================================================================

BILLABLE_WEIGHT_COLS = [
    "cubic_in",             # W x H x L (cubic inches)
    "dim_weight_lbs",       # round(cubic_in / divisor), half away from zero
    "uses_dim_weight",      # True if dim weight > actual weight
    "billable_weight_lbs",  # Max of actual and dim weight
]

METADATA_COLS = [
    "dim_divisor",          # DimDivisor member name (e.g. "FEDEX")
    "calculator_version",   # Version stamp from billable_weight/version.py
]


# =============================================================================
# COLUMN SETS
# =============================================================================

AFTER_CALCULATE = REQUIRED_INPUT_COLS + BILLABLE_WEIGHT_COLS + METADATA_COLS
