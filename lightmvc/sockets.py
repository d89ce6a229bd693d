"""TCP sockets: a thin wrapper plus ready-configured client and server kinds."""

from __future__ import annotations

import errno
import socket
import struct

__all__ = ["Socket", "ClientSocket", "ServerSocket"]

SERVER_BUFFER_SIZE = 10 * 1024
SERVER_BACKLOG = 1024


def _tcp_socket() -> socket.socket:
    return socket.socket(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)


class Socket:
    """A possibly unopened stream socket; failures raise ``OSError``."""

    def __init__(self, ip: str = "", port: int = 0, sock: socket.socket | None = None) -> None:
        self.ip = ip
        self.port = port
        self.sock = sock

    def _socket(self) -> socket.socket:
        if self.sock is None:
            raise OSError(errno.EBADF, "socket is not open")
        return self.sock

    def fileno(self) -> int:
        """The descriptor, or -1 when no socket is open."""
        return self.sock.fileno() if self.sock is not None else -1

    def bind(self, ip: str, port: int) -> None:
        """Bind to ``ip`` (all interfaces when empty) and ``port``."""
        self._socket().bind((ip, port))
        self.ip, self.port = ip, port

    def listen(self, backlog: int) -> None:
        self._socket().listen(backlog)

    def connect(self, ip: str, port: int) -> None:
        self._socket().connect((ip, port))
        self.ip, self.port = ip, port

    def close(self) -> None:
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def accept(self) -> Socket:
        """Accept one connection and wrap it."""
        conn, address = self._socket().accept()
        host, port = (address[0], address[1]) if isinstance(address, tuple) else ("", 0)
        return Socket(host, port, conn)

    def recv(self, size: int = 1024) -> bytes:
        return self._socket().recv(size)

    def send(self, data: bytes) -> int:
        return self._socket().send(data)

    def set_non_blocking(self) -> None:
        self._socket().setblocking(False)

    def set_send_buffer(self, size: int) -> None:
        self._socket().setsockopt(socket.SOL_SOCKET, socket.SO_SNDBUF, size)

    def set_recv_buffer(self, size: int) -> None:
        self._socket().setsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF, size)

    def set_linger(self, active: bool, seconds: int) -> None:
        value = struct.pack("ii", 1 if active else 0, seconds)
        self._socket().setsockopt(socket.SOL_SOCKET, socket.SO_LINGER, value)

    def set_keep_alive(self) -> None:
        self._socket().setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)

    def set_reuse_addr(self) -> None:
        self._socket().setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

    def set_reuse_port(self) -> None:
        option = getattr(socket, "SO_REUSEPORT", None)
        if option is None:
            raise OSError(errno.ENOPROTOOPT, "SO_REUSEPORT is not supported")
        self._socket().setsockopt(socket.SOL_SOCKET, option, 1)

    def __enter__(self) -> Socket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class ClientSocket(Socket):
    """A TCP socket, connected at once when an address is given."""

    def __init__(self, ip: str | None = None, port: int = 0) -> None:
        super().__init__(ip or "", port, _tcp_socket())
        if ip is not None:
            try:
                self.connect(ip, port)
            except OSError:
                self.close()
                raise


class ServerSocket(Socket):
    """A non-blocking listening TCP socket; unopened when no address is given."""

    def __init__(self, ip: str | None = None, port: int = 0) -> None:
        super().__init__(ip or "", port)
        if ip is None:
            return
        self.sock = _tcp_socket()
        try:
            self.set_non_blocking()
            self.set_recv_buffer(SERVER_BUFFER_SIZE)
            self.set_send_buffer(SERVER_BUFFER_SIZE)
            self.set_linger(True, 0)
            self.set_keep_alive()
            self.set_reuse_addr()
            self.bind(ip, port)
            self.listen(SERVER_BACKLOG)
        except OSError:
            self.close()
            raise