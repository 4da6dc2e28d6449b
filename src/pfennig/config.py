"""
Central configuration for the pfennig application.

Path resolution lives in pfennig.workspace.Workspace, which provides a single
workspace root with computed path properties for all data locations:
  1. Explicit --data-dir CLI option
  2. PFENNIG_DATA environment variable
  3. Current working directory
"""

DEFAULT_CATEGORY = "lebensmittel"
DEFAULT_CATEGORY_DISPLAY_NAME = "Lebensmittel"

UNTITLED_NAME = "(untitled)"

# Override records are keyed "<scope>_<YYYY>-<MM>"
DEFAULT_OVERRIDE_SCOPE = "food_spent_override"

CURRENCY_SYMBOL = "€"
