import pathlib
import socket
import threading
from http import server

import pytest

DATA_PATH = pathlib.Path(__file__).parent / 'data'


class ProviderHandler(server.BaseHTTPRequestHandler):
    """Echoes POST bodies and fails on `/fail`; stands in for a fullnode."""

    protocol_version = 'HTTP/1.1'

    def do_GET(self):
        self.reply(200, b'')

    def do_POST(self):
        body = self.rfile.read(int(self.headers.get('Content-Length', 0)))
        self.server.requests.append((self.path, self.headers.get('Content-Type'), body))
        if self.path.endswith('/fail'):
            self.reply(400, b'Incorrect url or query parameters.')
        else:
            self.reply(200, body)

    def reply(self, status, body):
        self.send_response(status)
        self.send_header('Content-Type', 'application/octet-stream')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


class Provider(server.ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self):
        super().__init__(('127.0.0.1', 0), ProviderHandler)
        self.requests = []

    @property
    def url(self):
        host, port = self.server_address[:2]
        return f'http://{host}:{port}'


def start_thread(func, *args, **kwargs):
    t = threading.Thread(target=func, args=args, kwargs=kwargs)
    t.daemon = True
    t.start()
    return t


@pytest.fixture(scope='session', autouse=True)
def socket_timeout():
    socket.setdefaulttimeout(5)


@pytest.fixture
def provider():
    srv = Provider()
    start_thread(srv.serve_forever)
    yield srv
    srv.shutdown()
    srv.server_close()


@pytest.fixture
def unused_url():
    with socket.socket() as sock:
        sock.bind(('127.0.0.1', 0))
        port = sock.getsockname()[1]
    return f'http://127.0.0.1:{port}'


@pytest.fixture
def arguments_path():
    return DATA_PATH / 'arguments.json'
