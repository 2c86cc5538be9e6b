""" Constants for page wiring and static assets.

"""

# Session state keys
SEARCH_STATE_KEY = "search_state"
LOOKUP_OUTCOME_KEY = "lookup_outcome"

# Page paths, relative to the entry script
SEARCH_PAGE = "00_Search.py"
RESULT_PAGE = "pages/01_Result.py"

# Search form
SEARCH_PLACEHOLDER = "Enter USN No."
SEARCH_BUTTON_LABEL = "Check"

# Asset file names (without extension) in src/app/assets
LOGO_ASSET = "sbjit_logo"
LOGO_WIDTH = 320
PHOTO_WIDTH = 200
