import logging
import os
import re
import secrets
import shutil
from datetime import datetime, timezone

from flask import current_app
from werkzeug.utils import secure_filename

from craftsymphony.errors import ApiError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = ("jpg", "jpeg", "png", "webp", "gif")


def ext_from_mime(mimetype):
    m = (mimetype or "").lower()
    if "jpeg" in m or "jpg" in m:
        return "jpg"
    for ext in ("png", "webp", "gif"):
        if ext in m:
            return ext
    return None


def resolve_extension(filename, mimetype):
    ext = filename.rsplit('.', 1)[1].lower() if '.' in filename else ""
    if ext == "jpeg":
        ext = "jpg"
    if ext in ALLOWED_EXTENSIONS:
        return ext
    return ext_from_mime(mimetype)


def unique_filename(original, ext):
    """``<utc timestamp>-<random hex>-<safe base>.<ext>``"""
    base = secure_filename(re.sub(r"\.[^.]+$", "", original or "")) or "upload"
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S%f")
    return f"{stamp}-{secrets.token_hex(4)}-{base}.{ext}"


def file_size(storage):
    stream = storage.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def validate_image(storage):
    if storage is None or not storage.filename:
        raise ApiError(400, "No file")

    mimetype = (storage.mimetype or "application/octet-stream").lower()
    if not mimetype.startswith("image/"):
        raise ApiError(415, "Only image/* allowed")

    ext = resolve_extension(storage.filename, mimetype)
    if ext is None:
        raise ApiError(415, f"Unsupported format. Allowed: {', '.join(ALLOWED_EXTENSIONS)}")

    max_mb = current_app.config["MAX_UPLOAD_MB"]
    size = file_size(storage)
    if size > max_mb * 1024 * 1024:
        raise ApiError(413, f"File too large (max {max_mb:g} MB)")
    return ext, size, mimetype


def _store(storage, folder, url_prefix):
    ext, size, mimetype = validate_image(storage)
    filename = unique_filename(storage.filename, ext)
    storage.save(os.path.join(folder, filename))
    return {
        "url": f"{url_prefix}/{filename}",
        "path": f"{url_prefix}/{filename}",
        "name": filename,
        "size": size,
        "contentType": mimetype,
    }


def save_upload(storage):
    """Store an uploaded image in the public uploads folder."""
    cfg = current_app.config
    stored = _store(storage, cfg["UPLOAD_FOLDER"], cfg["UPLOAD_URL_PREFIX"])
    logger.info("Stored upload %s (%s bytes)", stored["name"], stored["size"])
    return stored


def save_preview(storage):
    """Stage a file chosen in an edit form until the draft is saved or cancelled."""
    cfg = current_app.config
    return _store(storage, cfg["PREVIEW_FOLDER"], cfg["PREVIEW_URL_PREFIX"])


def preview_path(name):
    return os.path.join(current_app.config["PREVIEW_FOLDER"], os.path.basename(name))


def promote_preview(name):
    """Move a staged preview into the public uploads folder and return its URL."""
    cfg = current_app.config
    target = os.path.join(cfg["UPLOAD_FOLDER"], os.path.basename(name))
    shutil.move(preview_path(name), target)
    logger.info("Promoted preview %s to uploads", name)
    return f"{cfg['UPLOAD_URL_PREFIX']}/{os.path.basename(name)}"


def release_preview(name):
    path = preview_path(name)
    if os.path.exists(path):
        os.remove(path)


def discard_upload(name):
    """Remove a stored upload that no record ended up pointing at."""
    path = os.path.join(current_app.config["UPLOAD_FOLDER"], os.path.basename(name))
    if os.path.exists(path):
        os.remove(path)
        logger.info("Discarded unused upload %s", name)
