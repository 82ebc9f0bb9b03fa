import importlib.util

import pytest

from airline_api.db.init_db import seed_airports
from airline_api.db.session import normalize_database_url
from airline_api.services.airport_directory import AirportDirectory


def test_seed_airports_is_idempotent(db):
    created = seed_airports()
    assert sorted(a.code for a in created) == ["JFK", "LAX"]
    assert seed_airports() == []
    assert [a.code for a in AirportDirectory(db).list_all()] == ["JFK", "LAX"]


@pytest.mark.skipif(importlib.util.find_spec("psycopg2") is not None, reason="psycopg2 installed, URL left as is")
@pytest.mark.parametrize("url", ["postgres://u:p@db/app", "postgresql://u:p@db/app"])
def test_postgres_url_uses_psycopg_driver(url):
    assert normalize_database_url(url) == "postgresql+psycopg://u:p@db/app"


@pytest.mark.parametrize("url", ["sqlite://", "postgresql+psycopg://u:p@db/app"])
def test_other_urls_untouched(url):
    assert normalize_database_url(url) == url
