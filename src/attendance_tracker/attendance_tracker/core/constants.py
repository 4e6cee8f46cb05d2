"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_DATA_FILE = "data/data.json"
EXPORT_FILENAME_PREFIX = "kohaloleku"
NOT_AVAILABLE = "N/A"
