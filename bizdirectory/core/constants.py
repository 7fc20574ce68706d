"""Core constants shared by search, paging, and the API layer."""

# Paging bounds used when settings are not consulted (pure domain code)
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50

# Longest name fragment or area kept after trimming; longer input is truncated
MAX_CRITERION_LENGTH = 200

# Label used when a business owner has no display name
FALLBACK_NAME_TEMPLATE = "Business #{business_id}"

# Star values a review may carry
MIN_RATING = 1
MAX_RATING = 5
