import pytest
from order_access.config import AppConfig, set_config_for_test, get_config

@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for var in [
        "APP_ENV", "LOG_LEVEL", "SERVER_API_URL", "HTTP_TIMEOUT",
        "DEFAULT_SORT_PREDICATE", "DEFAULT_SORT_ASCENDING"
    ]:
        monkeypatch.delenv(var, raising=False)

def test_defaults():
    """Test the built-in defaults when nothing is configured."""
    set_config_for_test()
    config = get_config()
    assert config.server_api_url == "http://localhost:8080/"
    assert config.http_timeout == 10.0
    assert config.default_sort_predicate == "id"
    assert config.default_sort_ascending is True

def test_env_override(monkeypatch):
    """Test values are read from the environment."""
    monkeypatch.setenv("SERVER_API_URL", "https://shop.example.com/")
    monkeypatch.setenv("DEFAULT_SORT_ASCENDING", "false")
    config = AppConfig()
    assert config.server_api_url == "https://shop.example.com/"
    assert config.default_sort_ascending is False

def test_endpoint_for():
    """Test a relative path is joined to the server prefix."""
    config = AppConfig(server_api_url="https://shop.example.com/")
    assert config.get_endpoint_for("api/orders") == "https://shop.example.com/api/orders"

def test_endpoint_for_prefix_without_slash():
    """Test a prefix missing its trailing slash still joins cleanly."""
    config = AppConfig(server_api_url="https://shop.example.com")
    assert config.get_endpoint_for("api/goods") == "https://shop.example.com/api/goods"

def test_endpoint_for_microservice():
    """Test gateway routing through services/<name>/."""
    config = AppConfig(server_api_url="https://gateway.example.com/")
    assert (
        config.get_endpoint_for("api/orders", "store")
        == "https://gateway.example.com/services/store/api/orders"
    )

def test_set_config_for_test_replaces_singleton():
    """Test the singleton is swapped for the overridden values."""
    set_config_for_test(log_level="INFO")
    first = get_config()
    assert first.log_level == "INFO"
    set_config_for_test(log_level="WARNING")
    assert get_config() is not first
    assert get_config().log_level == "WARNING"
