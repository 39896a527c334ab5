"""RCG - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(core models, geometry, CLI) and must not have side effects.
"""

APP_NAME = "RusticChartGeom"
APP_SHORT = "RCG"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"
# Chart request schema version used for .rcg.json files.
# NOTE: must be int because `rcg.core.models.ChartRequest` compares it as integer.
SCHEMA_VERSION = 1

# Defaults (in px / user units)
# NOTE: keep these stable; changing them changes every chart without explicit config.
DEFAULT_PIE_DIAMETER = 140.0
DEFAULT_RADAR_SIZE = 360.0
DEFAULT_RADAR_MAX_VALUE = 100.0
DEFAULT_RADAR_LEVELS = 5
