import select
import socket
import struct

import pytest

from lightmvc.sockets import ClientSocket, ServerSocket, Socket


@pytest.fixture
def server():
    srv = ServerSocket("127.0.0.1", 0)
    yield srv
    srv.close()


def _port(srv):
    return srv.sock.getsockname()[1]


def _accept(srv):
    ready, _, _ = select.select([srv.sock], [], [], 5)
    assert ready
    return srv.accept()


def test_client_server_round_trip(server):
    with ClientSocket("127.0.0.1", _port(server)) as client:
        with _accept(server) as conn:
            assert client.send(b"ping") == 4
            assert conn.recv(16) == b"ping"
            conn.send(b"pong")
            assert client.recv(16) == b"pong"
            assert conn.ip == "127.0.0.1"


def test_server_socket_options(server):
    raw = server.sock
    assert raw.getblocking() is False
    linger = raw.getsockopt(socket.SOL_SOCKET, socket.SO_LINGER, struct.calcsize("ii"))
    assert struct.unpack("ii", linger) == (1, 0)
    assert raw.getsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE) != 0
    assert raw.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) != 0
    assert server.ip == "127.0.0.1"


def test_accept_without_pending_connection_raises(server):
    with pytest.raises(BlockingIOError):
        server.accept()


def test_unopened_server_socket():
    srv = ServerSocket()
    assert srv.fileno() == -1
    with pytest.raises(OSError):
        srv.bind("127.0.0.1", 0)


def test_close_is_idempotent():
    sock = Socket(sock=socket.socket())
    assert sock.fileno() >= 0
    sock.close()
    sock.close()
    assert sock.fileno() == -1
    with pytest.raises(OSError):
        sock.recv(1)


def test_buffer_sizes_are_at_least_requested():
    with Socket(sock=socket.socket()) as sock:
        sock.set_recv_buffer(8192)
        sock.set_send_buffer(8192)
        assert sock.sock.getsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF) >= 8192
        assert sock.sock.getsockopt(socket.SOL_SOCKET, socket.SO_SNDBUF) >= 8192


def test_linger_off():
    with Socket(sock=socket.socket()) as sock:
        sock.set_linger(False, 3)
        value = sock.sock.getsockopt(socket.SOL_SOCKET, socket.SO_LINGER, struct.calcsize("ii"))
        assert struct.unpack("ii", value)[0] == 0


def test_client_without_address_connects_later(server):
    with ClientSocket() as client:
        assert client.fileno() >= 0
        client.connect("127.0.0.1", _port(server))
        assert client.port == _port(server)
        with _accept(server) as conn:
            client.send(b"x")
            assert conn.recv(1) == b"x"


def test_bind_records_address():
    with Socket(sock=socket.socket()) as sock:
        sock.bind("127.0.0.1", 0)
        assert sock.ip == "127.0.0.1"
        assert sock.sock.getsockname()[0] == "127.0.0.1"