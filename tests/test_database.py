import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from database.db import build_engine


@pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:", "sqlite+pysqlite://", "sqlite+pysqlite:///:memory:"])
def test_in_memory_urls_share_one_connection(url):
    engine = build_engine(url)
    assert isinstance(engine.pool, StaticPool)

    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE t (x INTEGER)"))
        conn.execute(text("INSERT INTO t VALUES (1)"))
    with engine.connect() as conn:
        assert conn.execute(text("SELECT x FROM t")).scalar() == 1
    engine.dispose()


def test_file_url_does_not_use_static_pool(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'a.db'}")
    assert not isinstance(engine.pool, StaticPool)
    engine.dispose()
