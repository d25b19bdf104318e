"""Numeric constants for the precision comparison.

Centralizes the fixed-point scale and the demo formula's default inputs.
"""

# Fixed-point scale: 1 unit of Currency is stored as 1_000_000
SCALE = 10**6

# Number of decimal digits carried by SCALE
SCALE_DIGITS = 6

# Parsing bound: the scaled magnitude must fit in a 64-bit unsigned integer
UINT64_MAX = 2**64 - 1

# Default operands for the formula a + (b * b + c)
DEFAULT_A = "1000.00"
DEFAULT_B = "23.23"
DEFAULT_C = "45.20"

# 15 iterations are enough for float32 and float64 to drift visibly
DEFAULT_ITERATIONS = 15

# Column width used by the console table
DEFAULT_WIDTH = 20
