"""
Kece Market Theme - colour tokens for the product screen.
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Main accent, progress ring
RED_PRIMARY = "#FF3B30"        # Errors (attention colour)

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_PRODUCT = "#E6EEF5"       # Product payload
TEXT_ERROR = RED_PRIMARY       # Error message
TEXT_SUBTLE = "#7A8A96"        # Version label

# =============================================================================
# BACKGROUND COLORS
# =============================================================================
BG_PAGE = "#0a0f1c"

# =============================================================================
# SIZES
# =============================================================================
PRODUCT_TEXT_SIZE = 20
VERSION_TEXT_SIZE = 12
PROGRESS_SIZE = 32
