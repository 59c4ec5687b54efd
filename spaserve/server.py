"""
Listener: binds the socket, prints the startup notice and runs uvicorn.
"""
import socket

import uvicorn

from spaserve.config import ServerConfig
from spaserve.errors import BindError
from spaserve.main import create_app


def bind_socket(config: ServerConfig) -> socket.socket:
    """Bind a TCP socket on (host, port) or raise BindError."""
    try:
        infos = socket.getaddrinfo(config.host, config.port, type=socket.SOCK_STREAM)
    except socket.gaierror as e:
        raise BindError(config.host, config.port, str(e)) from e

    family, sock_type, proto, _, address = infos[0]
    sock = socket.socket(family, sock_type, proto)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(address)
    except OSError as e:
        sock.close()
        raise BindError(config.host, config.port, e.strerror or str(e)) from e

    sock.set_inheritable(True)
    return sock


def server_url(sock: socket.socket) -> str:
    host, port = sock.getsockname()[:2]
    if sock.family == socket.AF_INET6:
        host = f"[{host}]"
    return f"http://{host}:{port}"


def serve(config: ServerConfig) -> None:
    """Serve the static site until interrupted. Raises BindError if the port is unavailable."""
    sock = bind_socket(config)
    try:
        app = create_app(config)
        url = server_url(sock)
        print(f"Static web app server running at {url}")
        print(f"Open {url} in your browser")

        server = uvicorn.Server(uvicorn.Config(app, log_level=config.log_level))
        server.run(sockets=[sock])
    finally:
        sock.close()
