import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from craftsymphony.schemas import InquiryPayload
from craftsymphony.utils.mailer import MailError, send_inquiry

logger = logging.getLogger(__name__)

inquiry_bp = Blueprint("inquiry", __name__, url_prefix="/api")

HONEYPOT_FIELD = "company"


def read_payload():
    """Return the submitted fields from a JSON or form body."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return {
        "email": request.form.get("email", ""),
        "productNo": request.form.get("productNo", ""),
        HONEYPOT_FIELD: request.form.get(HONEYPOT_FIELD, ""),
    }


@inquiry_bp.route("/inquiry", methods=["POST"])
def inquiry():
    try:
        data = read_payload()
        if data.get(HONEYPOT_FIELD):
            logger.info("Inquiry dropped by honeypot")
            return jsonify({"ok": True})

        try:
            payload = InquiryPayload.model_validate(data)
        except ValidationError as exc:
            details = [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in exc.errors()
            ]
            return jsonify({"error": "VALIDATION_ERROR", "details": details}), 400

        send_inquiry(current_app.config, payload.email, payload.product_no)
        return jsonify({"ok": True})
    except MailError as exc:
        return jsonify({"error": exc.code}), 500
    except Exception:
        logger.exception("Unexpected inquiry failure")
        return jsonify({"error": "UNEXPECTED"}), 500
