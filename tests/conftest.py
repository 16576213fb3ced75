import os
import sys
from pathlib import Path

import pytest

# Ensure `import backend.jobboard...` works regardless of where pytest is run from.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Must be set before backend.jobboard.config is imported so a local .env can't leak in.
os.environ["DISABLE_DOTENV"] = "1"

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from backend.jobboard.main import create_app  # noqa: E402
from backend.jobboard.services.credential_store import CredentialStore  # noqa: E402

# Lowest cost bcrypt accepts; keeps the suite fast.
TEST_ROUNDS = 4


@pytest.fixture()
def store() -> CredentialStore:
    return CredentialStore(rounds=TEST_ROUNDS)


@pytest.fixture()
def app(store: CredentialStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
