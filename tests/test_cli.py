import json

import httpx
import pytest

from bookfetch import cli
from bookfetch.core.exceptions import FetchFailed
from bookfetch.schemas.books import CanonicalBook


def test_missing_url_prints_usage_and_exits_2(capsys):
    assert cli.main([]) == 2
    out, err = capsys.readouterr()
    assert out == ""
    assert "usage: bookfetch" in err


def test_empty_url_prints_usage_and_exits_2(capsys):
    assert cli.main([""]) == 2
    assert "usage: bookfetch" in capsys.readouterr().err


def test_success_prints_pretty_json(monkeypatch, capsys):
    async def fake_fetch(api_url, *, client=None):
        assert api_url == "https://books.example.test/api"
        return [CanonicalBook(title="Dune", author="Frank Herbert", isbn="9780441013593")]

    monkeypatch.setattr(cli, "fetch_books", fake_fetch)

    assert cli.main(["https://books.example.test/api"]) == 0
    out, err = capsys.readouterr()
    assert json.loads(out) == [{"title": "Dune", "author": "Frank Herbert", "isbn": "9780441013593"}]
    assert '\n  {\n    "title": "Dune"' in out


def test_fetch_failure_prints_message_and_exits_1(monkeypatch, capsys):
    async def fake_fetch(api_url, *, client=None):
        raise FetchFailed("connection refused")

    monkeypatch.setattr(cli, "fetch_books", fake_fetch)

    assert cli.main(["https://books.example.test/api"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "Failed to fetch books: connection refused" in err


def test_timeout_option_passes_a_client(monkeypatch, capsys):
    seen = {}

    async def fake_fetch(api_url, *, client=None):
        seen["timeout"] = client.timeout.read
        return []

    monkeypatch.setattr(cli, "fetch_books", fake_fetch)

    assert cli.main(["--timeout", "2.5", "https://books.example.test/api"]) == 0
    assert seen["timeout"] == 2.5
    assert json.loads(capsys.readouterr().out) == []


@pytest.mark.parametrize("argv", [["--timeout", "soon", "https://x.test"]])
def test_bad_option_is_an_argparse_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2


def _mock_client_factory(handler):
    def _factory(timeout=None):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory


def test_real_fetch_failure_writes_one_stderr_line(monkeypatch, capsys):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(cli, "new_client", _mock_client_factory(refuse))

    assert cli.main(["https://books.example.test/api"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "Failed to fetch books: connection refused\n"


def test_non_ascii_is_written_verbatim(monkeypatch, capsys):
    def ok(request):
        return httpx.Response(200, json={"books": [{"title": "Cien años de soledad", "author": "Gabriel García Márquez"}]})

    monkeypatch.setattr(cli, "new_client", _mock_client_factory(ok))

    assert cli.main(["https://books.example.test/api"]) == 0
    out = capsys.readouterr().out
    assert "Cien años de soledad" in out
    assert "García Márquez" in out
    assert "\\u" not in out
