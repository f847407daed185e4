from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "staff_console"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from staff_console.storage.bootstrap import ensure_demo_data
from staff_console.storage.connection import StoreConfig, open_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store_path = getattr(settings, "STORE_PATH", None)
    if not store_path:
        raise SystemExit("STORE_PATH is not set; nothing to seed for an in-memory store.")

    seeded = ensure_demo_data(open_store(StoreConfig(path=store_path)))
    if seeded:
        print(f"OK: Seeded {', '.join(seeded)} -> {store_path}")
    else:
        print(f"OK: {store_path} already has data, nothing seeded")


if __name__ == "__main__":
    main()
