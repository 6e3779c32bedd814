"""Backup the subject list.

Note: Loads through the configured backend, so a corrupt blob fails here
instead of producing an empty backup.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from attendance_tracker.container import build_container
from attendance_tracker.subjects.codec import encode_subjects


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    subjects = container.subject_store.load()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"subjects_{ts}.json"
    out_file.write_text(encode_subjects(subjects), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(subjects)} subjects)")


if __name__ == "__main__":
    main()
