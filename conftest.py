import shutil
from pathlib import Path

import pytest

from campaign_store import storage

TEST_DATA_DIR = Path("data-tests")
TEST_DATA_FILE = TEST_DATA_DIR / "campaign.json"


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    storage.init_storage(TEST_DATA_FILE)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it
