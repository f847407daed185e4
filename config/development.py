import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON file backing the key-value store
STORE_PATH = os.getenv("STORE_PATH", "instance/staff_console.json")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# Payroll rules
DEFAULT_STANDARD_HOURS = float(os.getenv("DEFAULT_STANDARD_HOURS", "10"))
OVERTIME_UNIT_HOURS = float(os.getenv("OVERTIME_UNIT_HOURS", "2"))
EXTRA_PAY_POLICY = os.getenv("EXTRA_PAY_POLICY", "additive")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seed the demo roster/ledger when the store is empty
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "1")))
