import pytest
from sqlalchemy import create_engine, text

TABLES = (
    "CREATE TABLE test (id INT NOT NULL, value VARCHAR NOT NULL)",
    "CREATE TABLE events ("
    " id INTEGER NOT NULL,"
    " name VARCHAR(64) NOT NULL,"
    " created_at TIMESTAMP,"
    " updated_at TIMESTAMP,"
    " payload JSONB NOT NULL,"
    " score REAL"
    ")",
    "CREATE TABLE user_accounts ("
    " user_id BIGINT NOT NULL,"
    " email_address TEXT NOT NULL,"
    " is_active BOOLEAN NOT NULL"
    ")",
)


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    with engine.begin() as conn:
        for statement in TABLES:
            conn.execute(text(statement))
    yield engine
    engine.dispose()


@pytest.fixture
def database_url(engine):
    return str(engine.url)
