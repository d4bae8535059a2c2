"""
Constants for the Bakery Plan Client application.

This module defines all system-wide constants including:
- Application metadata
- Ingredient units used by plan recipes
- Plan editing and scaling defaults
- API envelope values
- UI constants (colors, sizes)
- Validation messages
"""

from typing import List

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Bakery Plan Client"
APP_VERSION = "0.1.0"

# ============================================================================
# Units
# ============================================================================

# Units offered when editing an ingredient line of a plan recipe
UNIT_GRAM = "g"
UNIT_MILLILITER = "ml"
UNIT_COUNT = "개"

RECIPE_UNITS: List[str] = [UNIT_GRAM, UNIT_MILLILITER, UNIT_COUNT]

# New ingredient lines start with a mass unit
DEFAULT_UNIT = UNIT_GRAM

# ============================================================================
# Plan Editing
# ============================================================================

DEFAULT_PERCENT = 100

# Debounce delays (milliseconds)
SCALE_PREVIEW_DEBOUNCE_MS = 500
INGREDIENT_SEARCH_DEBOUNCE_MS = 300

# Recipe search used by the "add recipe" dialog
RECIPE_SEARCH_PAGE_SIZE = 10
RECIPE_SEARCH_SORT = "name"

# Login PIN length
PIN_LENGTH = 4

# Shop search opened for a lacking ingredient
SHOPPING_SEARCH_URL = "https://www.coupang.com/np/search?q={query}"

# ============================================================================
# API
# ============================================================================

RESULT_CODE_OK = "OK"

DEFAULT_API_BASE_URL = "http://localhost:8080"
DEFAULT_REQUEST_TIMEOUT = 10.0

# ============================================================================
# UI Constants
# ============================================================================

DEFAULT_WINDOW_WIDTH = 1200
DEFAULT_WINDOW_HEIGHT = 850
MIN_WINDOW_WIDTH = 900
MIN_WINDOW_HEIGHT = 600

COLOR_SUCCESS = "#4CAF50"

# Bakery palette for plan screens
COLOR_HEADER_BG = ("#FFD8A9", "#5D4037")
COLOR_LACKING = ("#CC0000", "#FF3333")

PADDING_SMALL = 5
PADDING_MEDIUM = 10
PADDING_LARGE = 20

# ============================================================================
# Validation
# ============================================================================

MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000
MAX_MEMO_LENGTH = 2000

ERROR_REQUIRED_FIELD = "This field is required"
ERROR_INVALID_NUMBER = "Please enter a valid number"
ERROR_INVALID_POSITIVE = "Value must be greater than zero"

ERROR_INGREDIENTS_INCOMPLETE = "Every ingredient needs a name, a quantity and a unit."
ERROR_QUANTITY_NOT_NUMERIC = "Ingredient quantities must be numbers."
ERROR_INVALID_PERCENT = "Enter a valid percentage (a number greater than 0)."
ERROR_INVALID_GOAL_QUANTITY = "Enter a valid goal quantity."
ERROR_PART_PERCENTS_INCOMPLETE = "Enter a percentage for every part."
ERROR_LAST_PART = "A recipe needs at least one part."
ERROR_LAST_INGREDIENT = "Each part needs at least one ingredient."
ERROR_CROSS_PART_MOVE = "Ingredients cannot be moved to a different part."
ERROR_MOVE_OUT_OF_RANGE = "That ingredient cannot be moved there."
ERROR_PLAN_HAS_LACKING = "Not enough ingredients in stock to complete this plan."
