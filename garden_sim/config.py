"""
Configuration constants for the Garden Simulation.
"""

# Simulation Time Unit: Seconds
SIM_TIME = 600  # 10 minutes
TICK_INTERVAL = 1  # World.tick every simulated second
FPS = 30 # Visualizer FPS

# Real time -> calendar date
DEFAULT_EPOCH = 1577836800.0  # 2020-01-01 00:00 UTC
DEFAULT_TIME_DILATION = 1440  # one real minute is one garden day

# Layout / Visuals
SCREEN_WIDTH = 900
SCREEN_HEIGHT = 640
BED_ORIGIN = (30, 90)
SECTION_SIZE = 50
BED_SPACING = 20
PANEL_X = 500

# Beds
BED_SIZE = 8

# Plant catalog
# Times are seconds since planting, scores are accumulated growth points.
PLANTS = {
    "tomato": {
        "icon": "🍅",
        "germination_time": 10,
        "production_time": 50,
        "life_span": 100,
        "germination_score": 10,
        "production_score": 50,
    },
    "kale": {
        "icon": "🥬",
        "germination_time": 20,
        "production_time": 30,
        "life_span": 80,
        "germination_score": 20,
        "production_score": 30,
    },
}

# Growth models: "time" (elapsed thresholds) or "score" (accumulated points)
GROWTH_MODEL = "time"

# Growth points per tick, checked from the hottest bracket down
TEMPERATURE_BRACKETS = [
    (80, 3),
    (60, 2),
]
BASE_GROWTH_POINTS = 1

# Weather (degrees Fahrenheit)
BASE_TEMPERATURE = 65.0
SEASONAL_AMPLITUDE = 15.0
DIURNAL_AMPLITUDE = 10.0
WEATHER_JITTER = 3.0
DAY_LENGTH = 86400  # seconds in a garden day
YEAR_LENGTH = 365 * DAY_LENGTH
WEATHER_SEED = 1856

# Scenarios
# Scenario A: a single bed, only kale
SCENARIO_A = {
    "NAME": "Scenario A (Single Bed)",
    "BEDS": 1,
    "GROWTH_MODEL": "time",
    "CROPS": ["kale"],
    "AUTO_GARDENER": True,
    "VERBOSE": False,
}

# Scenario B: more beds, mixed crops, growth driven by the weather
SCENARIO_B = {
    "NAME": "Scenario B (Weather Driven)",
    "BEDS": 3,
    "GROWTH_MODEL": "score",
    "CROPS": ["tomato", "kale"],
    "AUTO_GARDENER": True,
    "VERBOSE": False,
}
