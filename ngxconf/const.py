"""
Package constants and metadata.
"""

# Package info
APP_NAME = "ngxconf"
APP_VERSION = "0.1.0"

# Default parser options
DEFAULT_FILENAME = "<string>"
DEFAULT_ENCODING = "utf-8"
DEFAULT_BRACE_ENDS_WORD = True

# Escape sequences recognised inside quoted words
QUOTED_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "'": "'",
    "\\": "\\",
}
