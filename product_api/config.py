# product_api/config.py
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_REST_PORT = 3000
DEFAULT_GRAPHQL_PORT = 4000
DEFAULT_LOG_LEVEL = "info"


@dataclass
class Settings:
    host: str = DEFAULT_HOST
    rest_port: int = DEFAULT_REST_PORT
    graphql_port: int = DEFAULT_GRAPHQL_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except (ValueError, TypeError):
        logger.warning(f"Invalid {name} value: {raw}. Using default: {default}")
        return default
    if not 0 < value < 65536:
        logger.warning(f"{name} value {value} is not a valid port. Using default: {default}")
        return default
    return value


def get_settings() -> Settings:
    return Settings(
        host=os.getenv("PRODUCT_API_HOST") or DEFAULT_HOST,
        rest_port=_int_env("PRODUCT_API_REST_PORT", DEFAULT_REST_PORT),
        graphql_port=_int_env("PRODUCT_API_GRAPHQL_PORT", DEFAULT_GRAPHQL_PORT),
        log_level=(os.getenv("PRODUCT_API_LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower(),
    )
