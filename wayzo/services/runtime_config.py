import json
from typing import Optional

from wayzo.api.schemas import EnvironmentInfo, RuntimeConfig
from wayzo.core.config import Settings


"""Browser runtime configuration.

The configuration record is a pure function of the page hostname. It is built
once per page load and handed to consumers explicitly; nothing here keeps
global state.
- runtime_config
"""

LOCAL_API_BASE_URL = "http://localhost:3000"
CONFIG_GLOBAL_NAME = "WAYZO_CONFIG"


def classify_environment(hostname: str, local_api_base_url: str = LOCAL_API_BASE_URL) -> EnvironmentInfo:
    """Pick the API base URL and environment name for a hostname. - classify_environment

    - hostname containing "localhost" -> local_api_base_url, otherwise "" (same origin)
    - hostname containing "staging" -> "staging", otherwise "production"
    """
    hostname = hostname or ""
    base_url = local_api_base_url if "localhost" in hostname else ""
    environment = "staging" if "staging" in hostname else "production"
    return EnvironmentInfo(base_url=base_url, environment=environment)


def build_runtime_config(hostname: str, settings: Optional[Settings] = None) -> RuntimeConfig:
    """Build the configuration record for a page loaded from hostname. - build_runtime_config"""
    local_url = settings.local_api_base_url if settings is not None else LOCAL_API_BASE_URL
    env = classify_environment(hostname, local_url)
    return RuntimeConfig(
        API_BASE_URL=env.base_url,
        ENABLE_AUTHENTICATION=True,
        ENABLE_PAYMENTS=True,
        ENABLE_GOOGLE_OAUTH=True,
        ENVIRONMENT=env.environment,
    )


def render_config_script(config: RuntimeConfig) -> str:
    """Render the record as a script assigning window.WAYZO_CONFIG. - render_config_script"""
    body = json.dumps(config.model_dump(), indent=2)
    return f"window.{CONFIG_GLOBAL_NAME} = {body};\n"
