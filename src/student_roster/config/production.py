import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/student-roster")
STORAGE_KEY = os.getenv("STORAGE_KEY", "students")

DEFAULT_ATTENDANCE = os.getenv("DEFAULT_ATTENDANCE", "Absent")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO = bool(int(os.getenv("SEED_DEMO", "0")))
