"""
Constants for markup annotation appearance generation.

The squiggly values reproduce the appearance produced by Adobe Reader.
There is no published formula for them, so they are kept here in one place.
"""

# Border width used for geometry when the annotation declares a zero width
# (value found in Adobe Reader)
DEFAULT_MARKUP_BORDER_WIDTH = 1.5

# Border width implied by the PDF format when neither /BS nor /Border is set
DEFAULT_BORDER_WIDTH = 1.0

# Squiggly wave: the tile assumes a text height of 40 units and is squashed
# vertically by 1.8
SQUIGGLY_WAVE_HEIGHT = 40.0
SQUIGGLY_VERTICAL_SQUASH = 1.8

# Pattern cell and repeat grid
SQUIGGLY_CELL_BBOX = (0.0, 0.0, 10.0, 12.0)
SQUIGGLY_X_STEP = 10.0
SQUIGGLY_Y_STEP = 13.0

# Zig-zag stroke inside one cell
SQUIGGLY_WAVE_POINTS = ((0.0, 1.0), (5.0, 11.0), (10.0, 1.0))

# Stroke parameters of the zig-zag
SQUIGGLY_LINE_CAP = 1      # round
SQUIGGLY_LINE_JOIN = 1     # round
SQUIGGLY_LINE_WIDTH = 1.0
SQUIGGLY_MITER_LIMIT = 10.0

# Half-unit inset applied by the per-run form
SQUIGGLY_FORM_INSET = 0.5
SQUIGGLY_FORM_HEIGHT = 13.0
SQUIGGLY_FILL_HEIGHT = 12.0

# Number of floats per quadrilateral in /QuadPoints
QUAD_POINT_STRIDE = 8

# Device colour space for a given number of colour components
COLOR_SPACE_BY_COMPONENTS = {
    1: 'DeviceGray',
    3: 'DeviceRGB',
    4: 'DeviceCMYK',
}

# Markup annotation subtypes
SUBTYPE_SQUIGGLY = 'Squiggly'
SUBTYPE_UNDERLINE = 'Underline'
SUBTYPE_STRIKEOUT = 'StrikeOut'
SUBTYPE_HIGHLIGHT = 'Highlight'

TEXT_MARKUP_SUBTYPES = [
    SUBTYPE_HIGHLIGHT,
    SUBTYPE_UNDERLINE,
    SUBTYPE_SQUIGGLY,
    SUBTYPE_STRIKEOUT,
]

# /BS /S values
BORDER_STYLE_SOLID = 'S'
BORDER_STYLE_DASHED = 'D'
BORDER_STYLE_UNDERLINE = 'U'

# Tag used when logging appearance generation failures
APPEARANCE_LOG_TAG = 'squiggly appearance'
