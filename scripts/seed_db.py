from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from student_roster.config import get_settings_module
from student_roster.container import build_container
from student_roster.demo import seed_demo_students


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        data_dir=settings.DATA_DIR,
        storage_key=settings.STORAGE_KEY,
        default_attendance=settings.DEFAULT_ATTENDANCE,
    )

    added = seed_demo_students(container.roster_service)
    print(f"OK: Seeded {added} students -> {settings.DATA_DIR}/{settings.STORAGE_KEY}.json")


if __name__ == "__main__":
    main()
