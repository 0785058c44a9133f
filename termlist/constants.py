"""Constants used across termlist.

This module defines shared defaults to ensure consistency between the engine,
the configuration schema and the Textual widget.
"""

# List defaults (user-configurable via VirtualListConfig)
DEFAULT_HEIGHT = 10  # Lines, when height is fixed
DEFAULT_ITEM_HEIGHT = 1  # Lines consumed per item
DEFAULT_RESERVED_LINES = 0
DEFAULT_OVERFLOW_INDICATOR_THRESHOLD = 1  # Declared, never consulted

# Height mode names ("auto" is accepted as an alias of "fill")
HEIGHT_MODE_FILL = "fill"
HEIGHT_MODE_AUTO = "auto"

# Overflow indicators reserve one line above and one below the items
INDICATOR_LINES = 2
INDICATOR_PADDING = 2  # Left padding so indicators align with list content

# Terminal fallbacks when the stream cannot report its size
DEFAULT_ROWS = 24
DEFAULT_COLUMNS = 80

# Environment variables
ENV_LOG_LEVEL = "TERMLIST_LOG_LEVEL"
ENV_LOG_FILE = "TERMLIST_LOG_FILE"
ENV_CONFIG_PATH = "TERMLIST_CONFIG"
ENV_DOTENV_PATH = "TERMLIST_ENV_PATH"

DEFAULT_CONFIG_PATH = "~/.termlist/termlist.yml"
CONFIG_SECTION = "virtual_list"
