"""Small HTTP client for the admin API, for scripts and remote maintenance."""
import requests

from craftsymphony.auth import ADMIN_HEADER


class ApiClientError(Exception):
    def __init__(self, status, message):
        super().__init__(message)
        self.status = status
        self.message = message


def parse_response(resp):
    """Return the decoded body of ``resp`` or raise ``ApiClientError``.

    Error bodies are reduced to the server's message text; empty successful
    bodies (204) decode to None and non-JSON text comes back as ``{"raw": text}``.
    """
    if not resp.ok:
        message = ""
        try:
            body = resp.json()
            if isinstance(body, dict):
                message = body.get("error") or body.get("message") or ""
        except ValueError:
            message = resp.text or ""
        raise ApiClientError(resp.status_code, message or f"HTTP {resp.status_code}")

    if "application/json" in resp.headers.get("content-type", ""):
        return resp.json()
    if not resp.text:
        return None
    try:
        return resp.json()
    except ValueError:
        return {"raw": resp.text}


class AdminClient:
    def __init__(self, base_url, password, session=None, timeout=30):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers[ADMIN_HEADER] = password
        self.timeout = timeout

    def request(self, method, path, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        resp = self.session.request(method, f"{self.base_url}{path}", **kwargs)
        return parse_response(resp)

    def categories(self):
        return self.request("GET", "/api/admin/categories")

    def create_category(self, name, slug=None):
        body = {"name": name}
        if slug:
            body["slug"] = slug
        return self.request("POST", "/api/admin/categories", json=body)

    def move_category(self, category_id, direction):
        return self.request("POST", f"/api/admin/categories/{category_id}/move",
                            json={"direction": direction})

    def create_item(self, payload):
        return self.request("POST", "/api/admin/items", json=payload)

    def upload(self, path, content_type="image/jpeg"):
        with open(path, "rb") as fh:
            files = {"file": (path.rsplit("/", 1)[-1], fh, content_type)}
            return self.request("POST", "/api/admin/upload", files=files)
