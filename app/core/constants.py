from pathlib import Path


APP_DIR = Path(__file__).resolve().parents[1]

TEMPLATES_DIR = APP_DIR / "templates"
STATIC_DIR = APP_DIR / "static"

TYPE_INVOICE = "invoice"
TYPE_EXPENSE = "expense"

DEFAULT_INVENTORY_STATUS = "ok"

EXPORT_HEADER = ("Date", "Reference", "Type", "Account", "Debit", "Credit")

SERVER_ERROR_MESSAGE = "Server error"

DEFAULT_DASHBOARD_PATH = "/dashboard"
