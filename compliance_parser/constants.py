# compliance_parser/constants.py
"""
Constants shared by the workbook parser and the dashboard summary.

JSON_KEY_* names are the keys of the serialized district/village payload
consumed by the dashboard; STATUS_* and PARSE_* values are the literal
tokens found in (or derived from) the checklist workbook.
"""

# --- Statuses ---
STATUS_COMPLETED = "Completed"
STATUS_PENDING = "Pending"

# --- Section prefixes (used in item ids) ---
SECTION_92 = "9(2)"
SECTION_13 = "13"

# --- Tokens searched in the workbook ---
PARSE_VILLAGE_IDENTIFIER = "Village"
PARSE_STAGE_92_PUBLISHED = ("9(2)", "published")
PARSE_STAGE_13_PUBLISHED = ("13 published", "section 13 published")
PARSE_STAGE_ABOVE_90 = (
    "above 90",
    "above90",
    ">90",
    "> 90",
    "above 90%",
    "above90%",
    ">90%",
    "> 90%",
)

# --- Defaults ---
DEFAULT_ITEM_NAME = "Unknown Item"
DEFAULT_STAGE = "Unknown"
DEFAULT_PERSONNEL = "Not Assigned"

# --- Spreadsheet serial dates ---
EXCEL_EPOCH_YEAR = 1899
EXCEL_EPOCH_MONTH = 12
EXCEL_EPOCH_DAY = 30

# --- Compliance item keys ---
JSON_KEY_ID = "id"
JSON_KEY_NAME = "name"
JSON_KEY_VALUE = "value"
JSON_KEY_STATUS = "status"
JSON_KEY_RAW = "raw"

# --- Village keys ---
JSON_KEY_DISTRICT = "district"
JSON_KEY_HEAD_SURVEYOR = "headSurveyor"
JSON_KEY_GOVERNMENT_SURVEYOR = "governmentSurveyor"
JSON_KEY_ASSISTANT_DIRECTOR = "assistantDirector"
JSON_KEY_SUPERINTENDENT = "superintendent"
JSON_KEY_STAGE = "stage"
JSON_KEY_PUBLISHED_DATE = "publishedDate"
JSON_KEY_DAYS_PASSED_AFTER_92 = "daysPassedAfter92"
JSON_KEY_IS_CRITICAL = "isCritical"
JSON_KEY_SEC92_ITEMS = "sec92_items"
JSON_KEY_SEC92_COMPLETED_COUNT = "sec92_completed_count"
JSON_KEY_SEC92_TOTAL_COUNT = "sec92_total_count"
JSON_KEY_SEC92_PERCENT = "sec92_percent"
JSON_KEY_SEC92_STATUS = "sec92_status"
JSON_KEY_SEC13_ITEMS = "sec13_items"
JSON_KEY_SEC13_COMPLETED_COUNT = "sec13_completed_count"
JSON_KEY_SEC13_TOTAL_COUNT = "sec13_total_count"
JSON_KEY_SEC13_PERCENT = "sec13_percent"
JSON_KEY_SEC13_STATUS = "sec13_status"
JSON_KEY_OVERALL_PERCENT = "overall_percent"
JSON_KEY_OVERALL_STATUS = "overall_status"

# --- District keys ---
JSON_KEY_VILLAGES = "villages"
JSON_KEY_TOTAL_VILLAGES = "total_villages"
JSON_KEY_AVG_92_PERCENT = "avg_92_percent"
JSON_KEY_AVG_13_PERCENT = "avg_13_percent"

# --- Dashboard summary keys ---
JSON_KEY_SECTION = "section"
JSON_KEY_TOTAL_DISTRICTS = "total_districts"
JSON_KEY_AVG_PERCENT = "avg_percent"
JSON_KEY_COMPLETED_VILLAGES = "completed_villages"
JSON_KEY_PENDING_VILLAGES = "pending_villages"
JSON_KEY_CRITICAL_VILLAGES = "critical_villages"

# --- Compliance bands ---
BAND_COMPLETED = "completed"
BAND_HIGH = "high"
BAND_MEDIUM = "medium"
BAND_LOW = "low"
