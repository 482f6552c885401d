"""Edit drafts for the dashboard forms.

A draft holds the operator's unsaved field values for one entity, keyed by
``kind:id`` in the session, plus an optional staged preview image. The
preview file is released when the draft is cancelled or submitted.
"""
from flask import session

from craftsymphony.utils.file_rules import promote_preview, release_preview, save_preview

SESSION_KEY = "drafts"


def draft_key(kind, entity_id):
    return f"{kind}:{entity_id}"


def _drafts():
    return session.setdefault(SESSION_KEY, {})


def start_draft(kind, entity_id, values):
    """Open a draft seeded from the stored entity, or return the open one."""
    drafts = _drafts()
    key = draft_key(kind, entity_id)
    if key not in drafts:
        drafts[key] = {"values": dict(values), "preview": None}
        session.modified = True
    return drafts[key]


def update_draft(kind, entity_id, values):
    draft = _drafts()[draft_key(kind, entity_id)]
    draft["values"].update(values)
    session.modified = True
    return draft


def stage_preview(kind, entity_id, storage):
    """Keep a newly chosen file as the draft's preview, replacing an older one."""
    draft = _drafts()[draft_key(kind, entity_id)]
    staged = save_preview(storage)
    if draft.get("preview"):
        release_preview(draft["preview"]["name"])
    draft["preview"] = {"name": staged["name"], "url": staged["url"]}
    session.modified = True
    return draft


def discard_draft(kind, entity_id):
    draft = _drafts().pop(draft_key(kind, entity_id), None)
    session.modified = True
    if draft and draft.get("preview"):
        release_preview(draft["preview"]["name"])
    return draft


def commit_draft(kind, entity_id):
    """Close the draft and return ``(values, new_image_url)``.

    ``new_image_url`` is None when no new file was chosen, so the caller keeps
    the existing image path.
    """
    draft = _drafts().pop(draft_key(kind, entity_id), None)
    session.modified = True
    if draft is None:
        return {}, None
    new_url = None
    if draft.get("preview"):
        new_url = promote_preview(draft["preview"]["name"])
    return draft["values"], new_url
