from __future__ import annotations

from http import HTTPStatus, client

from .. import __version__, errors, logs, utils
from . import Transport

USER_AGENT = f'chaincall/{__version__}'
CONTENT_TYPE = 'application/octet-stream'

log = logs.get(__name__)


class HTTPTransport(Transport):
    """Sends one HTTP request per call to a fullnode provider."""

    SCHEMES = ('http', 'https')

    def __init__(
        self,
        url: str | utils.url.Url,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(url, timeout)
        self.headers = headers or {}

    def post(self, path: str, payload: bytes) -> bytes:
        return self.request('POST', path, payload)

    def get(self, path: str) -> bytes:
        return self.request('GET', path)

    def request(self, method: str, path: str, body: bytes | None = None) -> bytes:
        """Issue a request and return the body of a 200 response."""
        target = self._url.join(path)
        headers = {'User-Agent': USER_AGENT, **self.headers}
        if body is not None:
            headers['Content-Type'] = CONTENT_TYPE

        con = self._connection()
        try:
            log.debug('%s %s%s (%d bytes)', method, self._url.netloc, target, len(body or b''))
            con.request(method, target, body=body, headers=headers)
            res = con.getresponse()
            data = res.read()
        except (OSError, client.HTTPException) as exc:
            raise errors.TransportError(f'{method} {target}: {utils.format.format_exc(exc)}') from exc
        finally:
            con.close()

        log.debug('%s %s -> %d (%d bytes)', method, target, res.status, len(data))
        if res.status != HTTPStatus.OK:
            raise errors.RequestFailed(res.status, data.decode('utf8', errors='replace'))
        return data

    def _connection(self) -> client.HTTPConnection:
        host, port = self._url.address
        if self._url.scheme == 'https':
            return client.HTTPSConnection(host, port, timeout=self.timeout)
        return client.HTTPConnection(host, port, timeout=self.timeout)
