import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_PATH = os.getenv("STORE_PATH", "/var/lib/staff-console/store.json")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "please-set-ADMIN_PASSWORD")

DEFAULT_STANDARD_HOURS = float(os.getenv("DEFAULT_STANDARD_HOURS", "10"))
OVERTIME_UNIT_HOURS = float(os.getenv("OVERTIME_UNIT_HOURS", "2"))
EXTRA_PAY_POLICY = os.getenv("EXTRA_PAY_POLICY", "additive")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))
