import os
import sys
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import the 'plantplan' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Point the app at a throwaway sqlite file before plantplan is imported
os.environ["DATABASE_URL"] = f"sqlite:///{ROOT / 'test_plant.db'}"

from plantplan.db import Base, engine


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so the test DB matches the current models exactly
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
