import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Thư mục chứa các slot JSON (mỗi key một file)
DATA_DIR = os.getenv("DATA_DIR", "instance/data")
STORAGE_KEY = os.getenv("STORAGE_KEY", "students")

# Trạng thái điểm danh mặc định cho học sinh mới
DEFAULT_ATTENDANCE = os.getenv("DEFAULT_ATTENDANCE", "Absent")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Optional: seed demo students on startup when the store is empty
SEED_DEMO = bool(int(os.getenv("SEED_DEMO", "0")))
