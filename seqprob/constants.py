"""Constants for the project."""

from pathlib import Path

PACKAGE_ROOT = Path(__file__).parent

# ============================================================================
# Data assets
# ============================================================================
DATA_FOLDER = PACKAGE_ROOT / "data"

# NCBI BLOSUM62 (blastp distribution), used as the default substitution matrix
BLOSUM62_PATH = DATA_FOLDER / "blosum62.txt"

# ============================================================================
# Symbols
# ============================================================================
GAP = "-"
WILDCARD = "X"
MIN_PROB_MARKER = "*"

# Stop/gap column label used by NCBI matrix files
NCBI_GAP_LABEL = "*"

# ============================================================================
# Alignment parameters
# ============================================================================
DEFAULT_GAP_SCORE = -2

# ============================================================================
# Display and export
# ============================================================================
PROFILE_DECIMALS = 4
TABLE_MIN_WIDTH = 4
TABLE_PADDING = 3
PRECISION = 6
