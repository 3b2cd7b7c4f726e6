import os
import tempfile

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "student-roster-test"))
STORAGE_KEY = "students"

DEFAULT_ATTENDANCE = "Absent"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

SEED_DEMO = False
