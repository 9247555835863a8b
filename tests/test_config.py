from geo_cql.config import DefaultConfiguration


def test_defaults():
    config = DefaultConfiguration()
    assert config.log_level == "WARNING"
    assert config.wkt_trim is True
    assert config.wkt_rounding_precision == -1
    assert config.url_safe_characters == "!*'()"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GEO_CQL_LOG_LEVEL", "debug")
    monkeypatch.setenv("GEO_CQL_WKT_ROUNDING_PRECISION", "3")
    config = DefaultConfiguration()
    assert config.log_level == "DEBUG"
    assert config.wkt_rounding_precision == 3
