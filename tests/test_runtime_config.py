import pytest
from pydantic import ValidationError

from wayzo.core.config import Settings
from wayzo.services.runtime_config import (
    build_runtime_config,
    classify_environment,
    render_config_script,
)


"""Unit tests for the hostname-derived runtime configuration (wayzo.services.runtime_config).

classify_environment is pure, so these tests need no app or client.
"""


@pytest.mark.parametrize(
    "hostname, base_url, environment",
    [
        ("localhost:3000", "http://localhost:3000", "production"),
        ("localhost", "http://localhost:3000", "production"),
        ("app.example.com", "", "production"),
        ("staging.example.com", "", "staging"),
        ("staging.localhost", "http://localhost:3000", "staging"),
        ("", "", "production"),
    ],
)
def test_classify_environment(hostname, base_url, environment):
    env = classify_environment(hostname)
    assert env.base_url == base_url
    assert env.environment == environment


def test_classify_is_case_sensitive():
    """Substring matching mirrors the browser check exactly. - test_classify_is_case_sensitive"""
    env = classify_environment("STAGING.LOCALHOST")
    assert env.base_url == ""
    assert env.environment == "production"


def test_custom_local_base_url():
    env = classify_environment("localhost", "http://localhost:8080")
    assert env.base_url == "http://localhost:8080"


def test_build_runtime_config_flags_enabled():
    config = build_runtime_config("app.example.com")
    assert config.API_BASE_URL == ""
    assert config.ENVIRONMENT == "production"
    assert config.ENABLE_AUTHENTICATION is True
    assert config.ENABLE_PAYMENTS is True
    assert config.ENABLE_GOOGLE_OAUTH is True


def test_build_runtime_config_uses_settings():
    settings = Settings(local_api_base_url="http://localhost:9999")
    config = build_runtime_config("localhost:3000", settings)
    assert config.API_BASE_URL == "http://localhost:9999"


def test_runtime_config_is_immutable():
    config = build_runtime_config("localhost")
    with pytest.raises(ValidationError):
        config.API_BASE_URL = "http://elsewhere"


def test_render_config_script():
    script = render_config_script(build_runtime_config("staging.example.com"))
    assert script.startswith("window.WAYZO_CONFIG = {")
    assert script.rstrip().endswith("};")
    assert '"ENVIRONMENT": "staging"' in script
    assert '"ENABLE_GOOGLE_OAUTH": true' in script
