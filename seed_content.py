"""Write the default site content into empty file-store collections.

Collections that already hold rows are left alone, so the script is
safe to run against a live data directory.

Usage:
    python seed_content.py [DATA_DIR]
"""
import logging
import sys

from pan_eventz_api.app.core.config import settings
from pan_eventz_api.app.core.fallbacks import DEFAULT_CONTENT
from pan_eventz_api.app.core.file_storage import FileStorage
from pan_eventz_api.app.core.logging_config import setup_logging


def main(data_dir: str) -> int:
    setup_logging(settings.log_level)
    storage = FileStorage(data_dir)
    total = 0
    for collection, rows in DEFAULT_CONTENT.items():
        written = storage.seed(collection, rows)
        if not written:
            logging.getLogger(__name__).info("Skipping %s: collection is not empty", collection)
        total += written
    return total


if __name__ == "__main__":
    count = main(sys.argv[1] if len(sys.argv) > 1 else settings.data_dir)
    print(f"Seeded {count} rows")
