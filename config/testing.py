SECRET_KEY = "test-secret"

# No path: in-memory store
STORE_PATH = None

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"

DEFAULT_STANDARD_HOURS = 8
OVERTIME_UNIT_HOURS = 2
EXTRA_PAY_POLICY = "additive"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_SEED_DATA = False
