"""Global constants for the application."""

# Canvas dimensions (iPhone 14 Pro lock screen)
CANVAS_WIDTH = 1170
CANVAS_HEIGHT = 2532

WEEKS_PER_YEAR = 52
DAYS_PER_WEEK = 7

# Life expectancy bounds in years
DEFAULT_LIFE_EXPECTANCY = 80
MIN_LIFE_EXPECTANCY = 1
MAX_LIFE_EXPECTANCY = 150

# Shared page bands in pixels
SAFE_AREA_TOP = 250  # Reserved for the device clock and notch
HEADER_HEIGHT = 300
MARGIN_BOTTOM = 100

# Life mode grid: 52 columns, one row per year
LIFE_COLUMNS = WEEKS_PER_YEAR
LIFE_DOT_DIAMETER = 8
LIFE_SPACING = 3
LIFE_MARGIN_LEFT = 80
LIFE_MARGIN_RIGHT = 50
LIFE_YEAR_LABEL_WIDTH = 40

# Year mode grid: 13 columns x 4 rows
YEAR_COLUMNS = 13
YEAR_ROWS = 4
YEAR_DOT_DIAMETER = 50
YEAR_SPACING = 15
YEAR_MARGIN_SIDE = 80

# Axis tick intervals
WEEK_TICK_INTERVAL = 10
YEAR_TICK_INTERVAL = 10

# Legend band
LEGEND_OFFSET_BOTTOM = 60  # Legend baseline distance from the canvas bottom
LEGEND_SWATCH_RADIUS = 4
LEGEND_LABEL_GAP = 12

PNG_MEDIA_TYPE = "image/png"
