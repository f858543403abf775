# Colors are opaque, pre-validated CSS strings by the time they reach the renderer.
DEFAULT_WHITE = "#fff"
DEFAULT_BLACK = "#000"
DEFAULT_BLUE = "#0366d6"
DEFAULT_GRAY = "#f6f8fa"
DEFAULT_GRAY_DARK = "#24292e"

# Social style palette
SOCIAL_ICON_GRAY = "#555"
SOCIAL_TEXT = "#333"
SOCIAL_BORDER = "#d5d5d5"
SOCIAL_SUBJECT_FILL = "#fcfcfc"
SOCIAL_CONTENT_FILL = "#fff"
