"""
Constants used throughout the application
"""
import json
import os

# Config loader
def _load_config():
    """Load config.json from the application root"""
    # Get the path to config.json (one level up from utils/)
    current_dir = os.path.dirname(os.path.abspath(__file__))
    config_path = os.path.join(os.path.dirname(current_dir), 'config.json')

    try:
        with open(config_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        # Return empty dict if config doesn't exist or is invalid
        return {}

# Load config once on module import
_CONFIG = _load_config()

# Directory holding airport JSON files
AIRPORT_DATA_DIR = _CONFIG.get('airport_data_dir', 'airport_data')

# Console logging level name (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = _CONFIG.get('log_level', 'INFO')

# Unit conversion
KM_PER_NM = 1.852
EARTH_RADIUS_NM = 3440.065
FEET_PER_FLIGHT_LEVEL_UNIT = 100  # Altitudes are typed in hundreds of feet

# Hold defaults
DEFAULT_HOLD_TURN_DIRECTION = "right"
DEFAULT_HOLD_LEG_LENGTH = _CONFIG.get('default_hold_leg_length', '1min')

# Token separator for operator input
COMMAND_ARGS_SEPARATOR = " "
