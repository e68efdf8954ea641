import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that counts the requests it has served."""

    def __init__(self, handler):
        self.calls: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.calls.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def make_client():
    """Build an AsyncClient whose requests go to ``handler``.

    Returns (client, transport) so tests can assert on transport.calls.
    """

    def _make(handler):
        transport = RecordingTransport(handler)
        return httpx.AsyncClient(transport=transport), transport

    return _make
