import pytest

from craftsymphony.client import AdminClient, ApiClientError, parse_response


class FakeResponse:
    def __init__(self, status_code=200, body=None, text="", content_type=""):
        self.status_code = status_code
        self._body = body
        self.text = text
        self.headers = {"content-type": content_type}

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class FakeSession:
    def __init__(self, response):
        self.headers = {}
        self.response = response
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.response


def test_json_body_is_decoded():
    resp = FakeResponse(body={"ok": True}, text='{"ok": true}', content_type="application/json")
    assert parse_response(resp) == {"ok": True}


def test_empty_body_is_none():
    assert parse_response(FakeResponse(status_code=204)) is None


def test_plain_text_is_wrapped():
    assert parse_response(FakeResponse(text="hello")) == {"raw": "hello"}


def test_error_message_comes_from_body():
    resp = FakeResponse(status_code=409, body={"error": "Slug already exists"}, content_type="application/json")
    with pytest.raises(ApiClientError) as excinfo:
        parse_response(resp)
    assert excinfo.value.status == 409
    assert excinfo.value.message == "Slug already exists"


def test_error_without_body_uses_status():
    with pytest.raises(ApiClientError, match="HTTP 502"):
        parse_response(FakeResponse(status_code=502))


def test_error_with_text_body():
    with pytest.raises(ApiClientError, match="Bad Gateway"):
        parse_response(FakeResponse(status_code=502, text="Bad Gateway"))


def test_client_sends_password_header_and_json():
    session = FakeSession(FakeResponse(status_code=201, body={"id": 1}, content_type="application/json"))
    client = AdminClient("http://shop.local/", "s3cret", session=session, timeout=5)

    assert client.create_category("Paski", slug="paski") == {"id": 1}
    assert session.headers["x-admin-password"] == "s3cret"
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://shop.local/api/admin/categories")
    assert kwargs == {"json": {"name": "Paski", "slug": "paski"}, "timeout": 5}


def test_client_move_category():
    session = FakeSession(FakeResponse(body=[], content_type="application/json"))
    AdminClient("http://shop.local", "pw", session=session).move_category(4, "up")
    method, url, kwargs = session.calls[0]
    assert url == "http://shop.local/api/admin/categories/4/move"
    assert kwargs["json"] == {"direction": "up"}


def test_client_upload(tmp_path):
    path = tmp_path / "belt.png"
    path.write_bytes(b"png")
    session = FakeSession(FakeResponse(status_code=201, body={"url": "/u/belt.png"}, content_type="application/json"))
    result = AdminClient("http://shop.local", "pw", session=session).upload(str(path), "image/png")
    assert result == {"url": "/u/belt.png"}
    _, url, kwargs = session.calls[0]
    assert url == "http://shop.local/api/admin/upload"
    name, _, content_type = kwargs["files"]["file"]
    assert (name, content_type) == ("belt.png", "image/png")
