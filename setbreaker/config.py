import os

APP_TITLE = "SetBreaker"
APP_DATA_DIR = os.path.join(os.getenv("APPDATA") or os.path.expanduser("~"), ".setbreaker")

DB_FILE = os.path.join(APP_DATA_DIR, "setbreaker.db")

LOG_DIR = os.path.join(APP_DATA_DIR, "logs")
LOG_FILE = os.path.join(LOG_DIR, "setbreaker.log")

TICK_INTERVAL_MS = 1000
SCROLL_THRESHOLD = 20
WHEEL_BURST_IDLE_MS = 250
WHEEL_UNITS_PER_NOTCH = 30
WARNING_THRESHOLD_SEC = 10

REST_PERIOD_MIN_SEC = 15
REST_PERIOD_MAX_SEC = 300
REST_PERIOD_STEP_SEC = 15

DEFAULT_REST_PERIOD_SEC = 60
DEFAULT_AUTO_START = True
DEFAULT_START_ON_SCROLL = False

BLOCK_MESSAGE = "Time to start your next set!"
EXPIRY_TITLE = "Rest Period Complete!"
ABOUT_TEXT = (
    "SetBreaker helps you maintain your workout rhythm by timing your "
    "rest periods while browsing social media."
)
