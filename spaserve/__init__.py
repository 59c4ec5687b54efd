"""
spaserve: static file server for single-page web apps.
"""
from spaserve.config import ServerConfig, load_config
from spaserve.errors import BindError, FileReadError, SpaServeError, StartupError
from spaserve.main import create_app
from spaserve.server import serve

__all__ = [
    "BindError",
    "FileReadError",
    "ServerConfig",
    "SpaServeError",
    "StartupError",
    "create_app",
    "load_config",
    "serve",
]
