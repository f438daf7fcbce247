"""
Configuration constants and environment setup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# TODOIST CREDENTIALS (from environment)
# =============================================================================

TODOIST_API_KEY = os.environ.get("TODOIST_API_KEY", "")

# =============================================================================
# TASK CONFIGURATION
# =============================================================================

TASK_PRIORITY = 3  # shown as p2 in the Todoist UI
TASK_DURATION = 5
TASK_DURATION_UNIT = "minute"
TASK_LABEL = "api"
TASK_DUE_TIME = "9pm"
TASK_SUFFIX = "wegbringen"
TASK_JOINER = " && "

# =============================================================================
# CSV SCHEDULE FORMAT
# =============================================================================

CSV_ENCODING = "iso-8859-1"
CSV_DELIMITER = ";"
CSV_DATE_FIELD = "Datum"
CSV_CATEGORY_FIELD = "Abfallart"
CSV_DATE_FORMAT = "%d.%m.%Y"

# Bin label -> display color
CSV_BINS = {
    "Bio": "#955b2c",
    "Restmüll": "#323232",
    "Papier": "#0091d4",
    "Gelbe Tonne": "#c7be01",
}

# UTF-8 exports read as latin-1 -> bin label
CSV_BIN_ALIASES = {
    "RestmÃ¼ll": "Restmüll",
}

# =============================================================================
# ICALENDAR SCHEDULE FORMAT
# =============================================================================

ICS_SUFFIXES = {".ics", ".ical", ".ifb", ".icalendar"}

# First word of the event summary -> display color
ICS_BINS = {
    "Biotonne": "#955b2c",
    "Restmülltonne": "#323232",
    "Papiertonne": "#0091d4",
    "Wertstofftonne": "#c7be01",
}

# =============================================================================
# DRY RUN
# =============================================================================

DRY_RUN_BIN = "Bio"
