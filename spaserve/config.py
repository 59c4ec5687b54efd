"""
Server configuration loaded from CLI arguments and environment variables.
"""
import ipaddress
import os
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spaserve.errors import StartupError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_STATIC_ROOT = "build/web"
DEFAULT_FALLBACK_NAME = "index.html"
DEFAULT_LOG_LEVEL = "info"

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")

_HOSTNAME_RE = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*\.?$")


class ServerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=0, le=65535)
    static_root: Path
    fallback: Path
    log_level: str = DEFAULT_LOG_LEVEL


def is_valid_host(host: str) -> bool:
    """Accept IPv4/IPv6 literals and syntactically valid hostnames."""
    if not host:
        return False
    try:
        ipaddress.ip_address(host.strip("[]"))
        return True
    except ValueError:
        pass
    if len(host) > 253:
        return False
    return _HOSTNAME_RE.match(host) is not None


def load_config(
    host: Optional[str] = None,
    port: Optional[int] = None,
    static_root: Optional[str] = None,
    fallback: Optional[str] = None,
    log_level: Optional[str] = None,
) -> ServerConfig:
    """Build a validated ServerConfig.

    Explicit arguments win over environment variables (HOST, APP_PORT,
    STATIC_ROOT, FALLBACK_DOCUMENT, LOG_LEVEL), which win over defaults.
    Raises StartupError if the result cannot be served.
    """
    host = host if host is not None else os.getenv("HOST", DEFAULT_HOST)
    if port is None:
        port = os.getenv("APP_PORT", str(DEFAULT_PORT))
    root_value = static_root if static_root is not None else os.getenv("STATIC_ROOT", DEFAULT_STATIC_ROOT)
    fallback_value = fallback if fallback is not None else os.getenv("FALLBACK_DOCUMENT")
    log_level = (log_level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).lower()

    if not is_valid_host(host):
        raise StartupError(f"Invalid bind address: {host!r}")
    if log_level not in LOG_LEVELS:
        raise StartupError(f"Invalid log level: {log_level!r} (expected one of {', '.join(LOG_LEVELS)})")

    root_dir = Path(root_value).expanduser().resolve()
    if not root_dir.is_dir():
        raise StartupError(f"Static root not found: {root_dir}")
    if not os.access(root_dir, os.R_OK | os.X_OK):
        raise StartupError(f"Static root is not readable: {root_dir}")

    if fallback_value:
        fallback_path = Path(fallback_value).expanduser().resolve()
    else:
        fallback_path = root_dir / DEFAULT_FALLBACK_NAME
    if not fallback_path.is_file():
        raise StartupError(f"Fallback document not found: {fallback_path}")
    if not os.access(fallback_path, os.R_OK):
        raise StartupError(f"Fallback document is not readable: {fallback_path}")

    try:
        return ServerConfig(
            host=host.strip("[]"),
            port=port,
            static_root=root_dir,
            fallback=fallback_path,
            log_level=log_level,
        )
    except ValidationError as e:
        raise StartupError(f"Invalid configuration: {e.errors()[0]['msg']} (port={port!r})") from e
