"""Constants for the Meal Planner integration."""

DOMAIN = "meal_planner"

# Configuration and option keys
CONF_LANGUAGE = "language"
CONF_DEFAULT_TODO_ENTITY = "default_todo_entity"
CONF_REQUEST_TIMEOUT = "request_timeout"

# Fetch limits
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_RESPONSE_SIZE = 5 * 1024 * 1024
DEFAULT_MAX_REDIRECTS = 5

# Recipe defaults applied after extraction
DEFAULT_LANGUAGE = "en"
DEFAULT_COOK_TIME = 30
DEFAULT_SERVINGS = 2

AVAILABLE_LANGUAGES = ["en", "ja"]

# Placeholders that depend on the display language
LOCALIZED_DEFAULTS = {
    "en": {
        "category": "other",
        "amount": "as needed",
        "fallback_name": "extraction failed",
    },
    "ja": {
        "category": "その他",
        "amount": "適量",
        "fallback_name": "レシピ名取得できませんでした",
    },
}

# Shopping list categories
CATEGORY_VEGETABLES = "vegetables"
CATEGORY_PROTEIN = "protein"
CATEGORY_OTHER = "other"

MEAL_TYPES = ["breakfast", "lunch", "dinner"]

# Service names
SERVICE_IMPORT_RECIPE = "import_recipe"
SERVICE_ADD_MEAL_PLAN = "add_meal_plan"
SERVICE_GENERATE_SHOPPING_LIST = "generate_shopping_list"
SERVICE_CHECK_ITEM = "check_item"
SERVICE_SEARCH_RECIPES = "search_recipes"
SERVICE_DELETE_RECIPE = "delete_recipe"
SERVICE_LIST_MEAL_PLANS = "list_meal_plans"
SERVICE_DELETE_MEAL_PLAN = "delete_meal_plan"
SERVICE_GET_SHOPPING_LIST = "get_shopping_list"

# Event names
EVENT_RECIPE_IMPORTED = "meal_planner_recipe_imported"
EVENT_IMPORT_FAILED = "meal_planner_import_failed"
EVENT_SHOPPING_LIST_GENERATED = "meal_planner_shopping_list_generated"

# Service data keys
DATA_URL = "url"
DATA_SAVE = "save"
DATA_RECIPE = "recipe"
DATA_RECIPE_ID = "recipe_id"
DATA_DATE = "date"
DATA_MEAL_TYPE = "meal_type"
DATA_MEAL_PLAN_IDS = "meal_plan_ids"
DATA_ITEM_ID = "item_id"
DATA_CHECKED = "checked"
DATA_ITEMS = "items"
DATA_ERROR = "error"
DATA_TODO_ENTITY = "todo_entity"
DATA_QUERY = "query"
DATA_CATEGORY = "category"
DATA_MAX_COOK_TIME = "max_cook_time"
DATA_START = "start"
DATA_END = "end"
DATA_MEAL_PLAN_ID = "meal_plan_id"
DATA_RECIPES = "recipes"
DATA_MEAL_PLANS = "meal_plans"

# hass.data key for the shared record store
DATA_STORE = f"{DOMAIN}_store"
