"""
Package Limits Configuration

Upper bounds for package dimensions and weight. These are packaging policy,
not physical limits - adjust here when the accepted package envelope changes.

Lower bounds are exclusive zero for every field:
    0 < width_in  <= MAX_WIDTH_IN
    0 < height_in <= MAX_HEIGHT_IN
    0 < length_in <= MAX_LENGTH_IN
    0 < weight_lbs <= MAX_WEIGHT_LBS

Units must match the divisor convention (inches and pounds for FEDEX).
"""

MAX_WIDTH_IN = 80      # Inches
MAX_HEIGHT_IN = 70     # Inches
MAX_LENGTH_IN = 120    # Inches
MAX_WEIGHT_LBS = 150   # Pounds
