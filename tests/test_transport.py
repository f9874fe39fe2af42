import pytest

from chaincall import errors, transport
from chaincall.client import Client
from chaincall.transport.http import HTTPTransport
from chaincall.utils.url import Url


def test_create_by_scheme():
    assert isinstance(transport.create('http://127.0.0.1:8080'), HTTPTransport)
    assert isinstance(transport.create('https://rpc.example.com'), HTTPTransport)
    assert isinstance(transport.create('127.0.0.1:8080'), HTTPTransport)


def test_create_passthrough():
    t = HTTPTransport('http://127.0.0.1:8080')
    assert transport.create(t) is t


def test_create_unknown_scheme():
    with pytest.raises(errors.RegistryError):
        transport.create('ftp://127.0.0.1:21')


def test_timeout_default():
    assert HTTPTransport('http://127.0.0.1:1').timeout == transport.DEFAULT_TIMEOUT
    assert HTTPTransport('http://127.0.0.1:1', timeout=2.5).timeout == 2.5


def test_post(provider):
    t = transport.create(provider.url)
    assert t.post('view', b'\x00\x01\x02') == b'\x00\x01\x02'
    assert provider.requests == [('/view', 'application/octet-stream', b'\x00\x01\x02')]


def test_post_with_base_path(provider):
    t = transport.create(f'{provider.url}/rpc/')
    t.post('/submit_transaction', b'x')
    assert provider.requests[0][0] == '/rpc/submit_transaction'


def test_post_failure(provider):
    t = transport.create(provider.url)
    with pytest.raises(errors.RequestFailed) as exc_info:
        t.post('fail', b'')
    assert exc_info.value.status == 400
    assert exc_info.value.body == 'Incorrect url or query parameters.'


def test_connection_refused(unused_url):
    t = transport.create(unused_url, timeout=1)
    with pytest.raises(errors.TransportError):
        t.post('view', b'')


##
## url
##


@pytest.mark.parametrize(
    'url, expected, address, path',
    [
        ('http://127.0.0.1:8080', 'http://127.0.0.1:8080', ('127.0.0.1', 8080), ''),
        ('127.0.0.1:8080', 'http://127.0.0.1:8080', ('127.0.0.1', 8080), ''),
        ('https://rpc.example.com', 'https://rpc.example.com:443', ('rpc.example.com', 443), ''),
        ('http://node:80/v1/', 'http://node:80/v1', ('node', 80), '/v1'),
    ],
)
def test_url(url, expected, address, path):
    u = Url(url)
    assert str(u) == expected
    assert u.address == address
    assert u.path == path
    assert Url(u) == u


@pytest.mark.parametrize(
    'base, path, expected',
    [
        ('http://node:80', 'view', '/view'),
        ('http://node:80', '', '/'),
        ('http://node:80/v1', 'view', '/v1/view'),
        ('http://node:80/v1/', '/view', '/v1/view'),
    ],
)
def test_url_join(base, path, expected):
    assert Url(base).join(path) == expected


def test_url_requires_port():
    with pytest.raises(ValueError):
        Url('ws://node')


##
## client
##


def test_client_post(provider):
    client = Client(provider.url)
    assert client.url == provider.url
    assert client.post('block', b'\x07') == b'\x07'


def test_client_provider_up(provider, unused_url):
    assert Client(provider.url).is_provider_up()
    assert not Client(unused_url, timeout=1).is_provider_up()


def test_client_call_data_and_result(provider):
    client = Client(transport.create(provider.url))
    doc = '{"arguments": [{"argument_type": "u16", "argument_value": "513"}]}'
    data = client.call_data(doc)
    assert data == b'\x01\x02'

    result = client.post('view', data)
    assert client.call_result(result, 'u16') == '513'
