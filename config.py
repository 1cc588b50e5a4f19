"""
SciCalc Configuration Settings
"""

# Application Settings
APP_NAME = "SciCalc Scientific Calculator"
VERSION = "1.0.0"

# Display Settings
ERROR_TEXT = "ERROR"
DISPLAY_PRECISION = 23   # max fractional digits shown for non-integer results

# Operation limits
FACTORIAL_LIMIT = 10     # largest n accepted by x!

# Button harness messages
RESULT_PREFIX = "The result is: "
INVALID_INPUT = "invalid input"
INVALID_DISPLAY = "invalid display"

# Web API settings
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
