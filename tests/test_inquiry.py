import smtplib

import pytest

from craftsymphony.utils import mailer


class FakeSMTP:
    sent = []
    connections = []
    fail_connect = False
    fail_login = False
    fail_send = False
    offers_starttls = False
    noop_code = 250

    def __init__(self, host, port, timeout=None, context=None):
        if self.fail_connect:
            raise OSError("connection refused")
        self.host = host
        self.port = port
        self.ssl_context = context
        self.tls = False
        self.closed = False
        FakeSMTP.connections.append(self)

    def ehlo(self):
        return 250, b"hello"

    def has_extn(self, name):
        return name == "starttls" and self.offers_starttls

    def starttls(self, context=None):
        self.tls = True
        return 220, b"ready"

    def login(self, user, password):
        if self.fail_login:
            raise smtplib.SMTPAuthenticationError(535, b"bad credentials")

    def noop(self):
        return self.noop_code, b"ok"

    def send_message(self, msg):
        if self.fail_send:
            raise smtplib.SMTPDataError(554, b"rejected")
        FakeSMTP.sent.append(msg)

    def quit(self):
        self.closed = True

    def close(self):
        self.closed = True


@pytest.fixture
def smtp(monkeypatch):
    FakeSMTP.sent = []
    FakeSMTP.connections = []
    for flag in ("fail_connect", "fail_login", "fail_send", "offers_starttls"):
        monkeypatch.setattr(FakeSMTP, flag, False)
    monkeypatch.setattr(FakeSMTP, "noop_code", 250)
    monkeypatch.setattr(mailer.smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(mailer.smtplib, "SMTP_SSL", FakeSMTP)
    return FakeSMTP


def test_json_inquiry_is_sent(client, smtp):
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}

    (msg,) = smtp.sent
    assert msg["To"] == "owner@example.com"
    assert msg["From"] == "shop@example.com"
    assert msg["Reply-To"] == "jan@example.com"
    assert msg["Subject"] == "Zapytanie o produkt #12"
    assert "Produkt: 12" in msg.get_body(("plain",)).get_content()


def test_form_inquiry_is_sent(client, smtp):
    resp = client.post("/api/inquiry", data={"email": "jan@example.com", "productNo": "7"})
    assert resp.get_json() == {"ok": True}
    assert len(smtp.sent) == 1


def test_numeric_product_number_is_accepted(client, smtp):
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": 42})
    assert resp.status_code == 200


def test_honeypot_pretends_success(client, smtp):
    resp = client.post("/api/inquiry", data={"email": "bot@example.com", "productNo": "1", "company": "ACME"})
    assert resp.get_json() == {"ok": True}
    assert smtp.sent == []


@pytest.mark.parametrize("payload", [
    {"email": "not-an-email", "productNo": "12"},
    {"email": "jan@example.com", "productNo": ""},
    {"email": "jan@example.com", "productNo": "1234567"},
    {},
])
def test_validation_error(client, smtp, payload):
    resp = client.post("/api/inquiry", json=payload)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"]
    assert smtp.sent == []


def test_missing_recipient_is_config_error(app, client, smtp):
    app.config["INQUIRY_TO"] = ""
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "CONFIG_ERROR"}


def test_missing_host_is_config_error(app, client, smtp):
    app.config["SMTP_HOST"] = ""
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.get_json() == {"error": "CONFIG_ERROR"}


def test_unreachable_server_fails_verification(client, smtp):
    smtp.fail_connect = True
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "SMTP_VERIFY_FAILED"}


def test_bad_credentials_fail_verification(client, smtp):
    smtp.fail_login = True
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.get_json() == {"error": "SMTP_VERIFY_FAILED"}


def test_rejected_message_is_send_failure(client, smtp):
    smtp.fail_send = True
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "SEND_FAILED"}


def test_unexpected_failure(client, smtp, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("craftsymphony.routes.inquiry.send_inquiry", boom)
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.get_json() == {"error": "UNEXPECTED"}


def test_starttls_is_used_when_offered(client, smtp):
    smtp.offers_starttls = True
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.get_json() == {"ok": True}
    (conn,) = smtp.connections
    assert conn.tls
    assert conn.ssl_context is None
    assert conn.closed


def test_plain_connection_without_starttls(client, smtp):
    client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    (conn,) = smtp.connections
    assert not conn.tls


def test_secure_connection_uses_implicit_tls(app, client, smtp):
    app.config["SMTP_SECURE"] = True
    app.config["SMTP_PORT"] = 465
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.get_json() == {"ok": True}
    (conn,) = smtp.connections
    assert conn.ssl_context is not None
    assert conn.port == 465
    assert not conn.tls
    assert len(smtp.sent) == 1


def test_secure_connection_failure(app, client, smtp):
    app.config["SMTP_SECURE"] = True
    smtp.fail_connect = True
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.get_json() == {"error": "SMTP_VERIFY_FAILED"}


def test_rejected_noop_fails_verification(client, smtp):
    smtp.noop_code = 421
    resp = client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "SMTP_VERIFY_FAILED"}
    assert smtp.sent == []
    (conn,) = smtp.connections
    assert conn.closed


def test_failed_login_closes_connection(client, smtp):
    smtp.fail_login = True
    client.post("/api/inquiry", json={"email": "jan@example.com", "productNo": "12"})
    (conn,) = smtp.connections
    assert conn.closed
