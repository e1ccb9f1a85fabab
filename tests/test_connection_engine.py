import pytest
from sqlalchemy.exc import ArgumentError
from torneo.database.config.connection_engine import build_connection_url, create_connection_engine
from torneo.database.core.models import ConnectionConfig


def test_mysql_url_keeps_empty_password():
    config = ConnectionConfig(
        driver_name="mysql+pymysql",
        host="localhost",
        database_name="c2142086_torneo",
        username="c2142086_torneo",
        password="",
    )
    url = build_connection_url(config)
    assert url.password == ""
    assert url.render_as_string(hide_password=False) == "mysql+pymysql://c2142086_torneo:@localhost/c2142086_torneo"


def test_url_includes_port_and_escapes_credentials():
    config = ConnectionConfig(
        driver_name="mysql+pymysql",
        host="db.internal",
        port=3307,
        database_name="torneo",
        username="admin",
        password="p@ss/word",
    )
    url = build_connection_url(config)
    assert url.port == 3307
    assert url.password == "p@ss/word"
    assert "p%40ss%2Fword" in url.render_as_string(hide_password=False)
    assert "p@ss" not in url.render_as_string(hide_password=True)


def test_empty_host_and_username_are_omitted(memory_config):
    url = build_connection_url(memory_config)
    assert url.host is None
    assert url.username is None
    assert url.database == ":memory:"


def test_engine_uses_configured_dialect(memory_config):
    engine = create_connection_engine(memory_config)
    try:
        assert engine.dialect.name == "sqlite"
    finally:
        engine.dispose()


def test_unknown_driver_is_an_argument_error():
    with pytest.raises(ArgumentError):
        create_connection_engine(ConnectionConfig(driver_name="nosuchdb", database_name="torneo"))
