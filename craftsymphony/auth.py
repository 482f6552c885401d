"""Admin identity for both the JSON API and the dashboard.

There is a single operator account. API clients authenticate every request
with the ``x-admin-password`` header; the dashboard logs in once and keeps
the identity in the session cookie.
"""
import hmac

from flask import current_app, jsonify, redirect, request, url_for
from flask_login import UserMixin

ADMIN_HEADER = "x-admin-password"


class AdminUser(UserMixin):
    id = "admin"


def check_admin_password(candidate):
    expected = current_app.config.get("ADMIN_PASSWORD") or ""
    if not expected or not candidate:
        return False
    return hmac.compare_digest(str(candidate).encode("utf-8"), expected.encode("utf-8"))


def init_auth(login_manager):
    @login_manager.user_loader
    def load_user(user_id):
        if user_id == AdminUser.id:
            return AdminUser()
        return None

    @login_manager.request_loader
    def load_user_from_request(req):
        if check_admin_password(req.headers.get(ADMIN_HEADER)):
            return AdminUser()
        return None

    @login_manager.unauthorized_handler
    def unauthorized():
        if request.path.startswith("/api/"):
            return jsonify({"error": "Unauthorized"}), 401
        return redirect(url_for(login_manager.login_view, next=request.path))
