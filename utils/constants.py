"""
Constants for the surfaces comparison application.
"""

# Comparison modes accepted by compare(); anything other than DYNAMIC_MODE
# selects the fixed-epsilon strategy
DYNAMIC_MODE = "Dynamic"
FIXED_MODE = "Fixed"
DEFAULT_MODE = FIXED_MODE

# Worker threads for the plane fan-out (None lets the executor decide)
DEFAULT_MAX_WORKERS = None

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
