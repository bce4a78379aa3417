from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - LOG_LEVEL: root logging level name (default: INFO)
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - HOST: interface the server binds to (default: 0.0.0.0)
    - PORT: TCP port the server listens on (default: 8080)
    """

    log_level: str
    cors_allow_origins: List[str]
    host: str
    port: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_parse_port(_get_env("PORT", "8080"), 8080),
    )
