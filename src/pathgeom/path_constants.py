# Default deviation allowed when simplifying a freshly drawn stroke
DEFAULT_SIMPLIFY_THRESHOLD = 1.0

# SVG-like encoding: leading command marker and the pair separator
SVG_COMMAND_MARKER = "M"
SVG_SEGMENT_SEPARATOR = "L"

# Legacy encoding only treats space and tab as token separators
LEGACY_TOKEN_SEPARATORS = " \t"

JSON_INDENT = 4
