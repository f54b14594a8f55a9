"""Constants for Cecotec Mambo integration.

This module contains all the constants used throughout the integration,
including API endpoints, configuration keys, and status defaults.
"""

DOMAIN = "cecotec_mambo"

BASE_URL = "https://api.cecotec.com"

DEFAULT_POLL_INTERVAL = 30
PULSE_DURATION = 5  # Seconds a pulse sensor stays on before reverting

CONF_RECIPES_PATH = "recipes_path"
RECIPES_FILE = "mambo_recipes.yaml"

ERROR_INVALID_AUTH = "invalid_auth"
ERROR_CANNOT_CONNECT = "cannot_connect"
ERROR_TIMEOUT = "timeout_error"
ERROR_UNKNOWN = "unknown_error"

KEEP_WARM_TEMPERATURE = 60

EDITED_RECIPE_NAME = "Receta Editada"
EDITED_STEP_TIME = 15

DEFAULT_TEMPERATURE = 0
DEFAULT_HUMIDITY = 0
DEFAULT_PRESSURE = 1013
DEFAULT_WEIGHT = 0

EVENT_MAMBO = f"{DOMAIN}_event"
EVENT_TYPE_STEP = "step"
EVENT_TYPE_FINISHED = "finished"
EVENT_TYPE_STARTED = "started"

PULSE_STEP = "step"
PULSE_FINISHED = "finished"
PULSE_STARTED = "started"
