"""
Configuration file for the exact line-analysis demo.

Contains a COMPACT and a LARGE canvas parameter set.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True for a small preview canvas
COMPACT_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"
RUN_ID = "demo"
SAVE_IMAGES = True


# ---------------------------------------------------------------
# DEMO INPUT
# ---------------------------------------------------------------

# (a, b, c) for a*x + b*y + c = 0
DEMO_LINES = [
    (1, -1, -3),
    (2, -2, 1),
    (1, -1, 4),
    (1, 2, -5),
]


# ===============================================================
# COMPACT-MODE PARAMETERS
# ===============================================================

COMPACT = {
    "CANVAS_HEIGHT": 400,
    "CANVAS_WIDTH": 400,
    "PIXELS_PER_UNIT": 20,
}


# ===============================================================
# LARGE-MODE PARAMETERS
# ===============================================================

LARGE = {
    "CANVAS_HEIGHT": 1000,
    "CANVAS_WIDTH": 1000,
    "PIXELS_PER_UNIT": 40,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

LINE_THICKNESS = 2
POINT_RADIUS = 4

# Console labels
LABEL_LINE = "Line"
LABEL_X_AXIS = "Intersection with X axis"
LABEL_Y_AXIS = "Intersection with Y axis"
LABEL_NONE = "none"


# ---------------------------------------------------------------
# VISUALIZATION COLORS (B, G, R)
# ---------------------------------------------------------------

COLOR_BACKGROUND = (255, 255, 255)  # white
COLOR_AXES = (128, 128, 128)        # grey
COLOR_POINT = (0, 0, 255)           # red

# Cycled per line
LINE_COLORS = [
    (255, 0, 0),    # blue
    (0, 160, 0),    # green
    (0, 128, 255),  # orange
    (255, 0, 255),  # magenta
    (128, 64, 0),   # navy-ish
]


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the rasterizer and drawing code so they only import one dictionary.
    """

    base = {
        "LINE_THICKNESS": LINE_THICKNESS,
        "POINT_RADIUS": POINT_RADIUS,
        "LINE_COLORS": LINE_COLORS,
        "COLOR_BACKGROUND": COLOR_BACKGROUND,
        "COLOR_AXES": COLOR_AXES,
        "COLOR_POINT": COLOR_POINT,
    }

    # Merge in compact or large mode values
    if COMPACT_MODE:
        base.update(COMPACT)
    else:
        base.update(LARGE)

    return base
