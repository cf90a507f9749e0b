import itertools
import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_policies.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.core.security import create_access_token
from app.main import app
from app.repositories.insurance_policy import InMemoryPolicyStore
from app.services.insurance_policy import PolicyRegistry

ALICE = "alice-principal"
BOB = "bob-principal"


class SteppingClock:
    """Deterministic clock: every reading is ``step`` ns after the previous one."""

    def __init__(self, start: int = 1_000_000, step: int = 10):
        self.current = start
        self.step = step

    def now(self) -> int:
        self.current += self.step
        return self.current


class SequentialIds:
    def __init__(self, prefix: str = "policy"):
        self._counter = itertools.count(1)
        self.prefix = prefix

    def new_id(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


class SwitchableIdentity:
    """Identity whose principal a test can change between calls."""

    def __init__(self, principal: str):
        self.principal = principal

    def current_principal(self) -> str:
        return self.principal


@pytest.fixture(scope="function")
def store() -> InMemoryPolicyStore:
    return InMemoryPolicyStore()


@pytest.fixture(scope="function")
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture(scope="function")
def identity() -> SwitchableIdentity:
    return SwitchableIdentity(ALICE)


@pytest.fixture(scope="function")
def registry(store, clock, identity) -> PolicyRegistry:
    """Registry over an isolated in-memory store with deterministic collaborators."""
    return PolicyRegistry(store=store, clock=clock, ids=SequentialIds(), identity=identity)


@pytest.fixture(scope="function")
def policy_payload() -> dict:
    return {
        "policy_holder_name": "Alice",
        "coverage_amount": 100000,
        "premium_amount": 500,
        "policy_start_date": 1000,
        "policy_end_date": 2000,
        "is_claimed": False,
    }


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def alice_headers() -> dict:
    token = create_access_token(data={"sub": ALICE})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def bob_headers() -> dict:
    token = create_access_token(data={"sub": BOB})
    return {"Authorization": f"Bearer {token}"}
