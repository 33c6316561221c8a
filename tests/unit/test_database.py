"""Unit tests for catalog/infrastructure/database.py.

Tests cover Settings defaults, env var overrides, object types and the
get_session transaction wrapper.
No database connection is required.
"""

import logging
from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

import catalog.infrastructure.database as database
from catalog.infrastructure.database import AsyncSessionLocal, Base, Settings, engine


def test_settings_default_url_uses_asyncpg(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "postgresql+asyncpg" in Settings(_env_file=None).database_url


def test_settings_default_url_targets_localhost(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "localhost" in Settings(_env_file=None).database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_sql_echo_defaults_off(monkeypatch):
    monkeypatch.delenv("SQL_ECHO", raising=False)
    assert Settings(_env_file=None).sql_echo is False


def test_settings_reads_sql_echo_from_env(monkeypatch):
    monkeypatch.setenv("SQL_ECHO", "true")
    assert Settings().sql_echo is True


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_async():
    assert isinstance(engine, AsyncEngine)


def test_session_factory_produces_async_sessions():
    assert isinstance(AsyncSessionLocal, async_sessionmaker)
    assert AsyncSessionLocal.class_ is AsyncSession


# --- get_session ---

def _fake_session_factory(monkeypatch):
    session = MagicMock()
    session.__aenter__.return_value = session
    session.__aexit__.return_value = False
    begin_cm = MagicMock()
    begin_cm.__aexit__.return_value = False
    session.begin.return_value = begin_cm
    monkeypatch.setattr(database, "AsyncSessionLocal", MagicMock(return_value=session))
    return session, begin_cm


async def test_get_session_yields_session_inside_transaction(monkeypatch):
    session, begin_cm = _fake_session_factory(monkeypatch)

    gen = database.get_session()
    assert await gen.__anext__() is session

    begin_cm.__aenter__.assert_awaited_once()
    begin_cm.__aexit__.assert_not_awaited()

    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()

    begin_cm.__aexit__.assert_awaited_once()
    assert begin_cm.__aexit__.await_args.args == (None, None, None)
    session.__aexit__.assert_awaited_once()


async def test_get_session_passes_error_to_transaction_and_reraises(monkeypatch, caplog):
    session, begin_cm = _fake_session_factory(monkeypatch)

    gen = database.get_session()
    await gen.__anext__()

    with caplog.at_level(logging.WARNING, logger=database.__name__):
        with pytest.raises(RuntimeError, match="boom"):
            await gen.athrow(RuntimeError("boom"))

    exc_type = begin_cm.__aexit__.await_args.args[0]
    assert exc_type is RuntimeError
    session.__aexit__.assert_awaited_once()
    assert "rolled back: RuntimeError" in caplog.text
