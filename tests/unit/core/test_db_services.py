"""Unit tests for the database session service and sample data seeding."""

import pytest
from sqlalchemy import StaticPool, inspect

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from src.catalog.runtime.init_db import SAMPLE_BOOKS, seed_sample_data


@pytest.fixture
def database_service():
    service = DbSessionService(ConfigData(database=DatabaseConfig(url="sqlite://")))
    DbManageService(service).create_all()
    yield service
    service.dispose()


class TestDbSessionService:
    def test_in_memory_sqlite_uses_static_pool(self, database_service):
        assert isinstance(database_service.engine.pool, StaticPool)

    def test_file_sqlite_engine(self, tmp_path):
        service = DbSessionService(
            ConfigData(database=DatabaseConfig(url=f"sqlite:///{tmp_path}/c.db"))
        )
        try:
            assert not isinstance(service.engine.pool, StaticPool)
            assert service.health_check() is True
        finally:
            service.dispose()

    def test_create_all_creates_book_table(self, database_service):
        assert "booktable" in inspect(database_service.engine).get_table_names()

    def test_drop_all(self, database_service):
        DbManageService(database_service).drop_all()

        assert inspect(database_service.engine).get_table_names() == []

    def test_session_scope_commits(self, database_service, make_candidate):
        with database_service.session_scope() as session:
            BookRepository(session).create(make_candidate())

        with database_service.session_scope() as session:
            assert BookRepository(session).count() == 1

    def test_session_scope_propagates_errors(self, database_service):
        with pytest.raises(RuntimeError):
            with database_service.session_scope():
                raise RuntimeError("boom")

    def test_health_check(self, database_service):
        assert database_service.health_check() is True

    def test_health_check_failure(self, database_service, monkeypatch):
        def refuse():
            raise ConnectionError("refused")

        monkeypatch.setattr(database_service.engine, "connect", refuse)

        assert database_service.health_check() is False


class TestSeedSampleData:
    def test_seeds_empty_catalog(self, database_service):
        assert seed_sample_data(database_service) == len(SAMPLE_BOOKS) == 4

        with database_service.session_scope() as session:
            repository = BookRepository(session)
            design_patterns = repository.get_by_isbn("9780201633610")
            assert repository.count() == 4
            assert design_patterns is not None
            assert design_patterns.available is False
            assert len(repository.find_by_available(True)) == 3

    def test_skips_populated_catalog(self, database_service, make_candidate):
        with database_service.session_scope() as session:
            BookRepository(session).create(make_candidate(isbn="1111111111"))

        assert seed_sample_data(database_service) == 0

        with database_service.session_scope() as session:
            assert BookRepository(session).count() == 1
