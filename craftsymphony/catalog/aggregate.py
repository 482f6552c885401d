"""Build the public catalog structure served by ``/api/catalog``.

Categories come sorted by ``(order, created_at)`` and items by
``(belt_number, created_at)``. Every item's image list is normalized so the
public pages can rely on it: blank URLs are dropped, missing order keys are
filled in from the list position, images are sorted, and exactly one image
is flagged primary.
"""
from collections import defaultdict

from craftsymphony.catalog.pricing import format_price, format_size, size_bounds
from craftsymphony.models.category import Category
from craftsymphony.models.item import Item


def normalize_images(images):
    """Return a cleaned, sorted copy of ``images`` with a single primary.

    ``images`` is a list of dicts shaped like ``ItemImage.to_dict()``. The
    input list and its dicts are not modified.
    """
    kept = []
    for img in images or []:
        url = (img.get("url") or "").strip()
        if not url:
            continue
        clean = dict(img)
        clean["url"] = url
        clean["isPrimary"] = bool(img.get("isPrimary"))
        kept.append(clean)

    for index, img in enumerate(kept):
        if img.get("order") is None:
            img["order"] = index

    kept.sort(key=lambda img: img["order"])

    seen_primary = False
    for img in kept:
        if img["isPrimary"]:
            if seen_primary:
                img["isPrimary"] = False
            seen_primary = True
    if kept and not seen_primary:
        kept[0]["isPrimary"] = True
    return kept


def pick_primary(images):
    for img in images:
        if img.get("isPrimary"):
            return img
    return images[0] if images else None


def serialize_item(item):
    images = normalize_images([img.to_dict() for img in item.images])
    upper, lower = size_bounds(item.size_min, item.size_max)
    return {
        "id": item.id,
        "title": item.title,
        "titleEn": item.title_en,
        "description": item.description or "",
        "descriptionEn": item.description_en,
        "cenaPLN": item.price_pln,
        "price": format_price(item.price_pln, "pl"),
        "rozmiarMin": item.size_min,
        "rozmiarMax": item.size_max,
        "upperSize": upper,
        "lowerSize": lower,
        "rozmiarGlowny": item.main_size,
        "mainSize": format_size(item.main_size),
        "rozSprz": item.buckle_size,
        "buckleSize": format_size(item.buckle_size),
        "numerPaska": item.belt_number,
        "images": images,
    }


def category_fallback_images(items):
    """One image per item: its primary, or its first when none is flagged."""
    fallback = []
    for item in items:
        primary = pick_primary(item["images"])
        if primary is not None:
            fallback.append(primary)
    return fallback


def group_items(items):
    grouped = defaultdict(list)
    for item in items:
        grouped[item.category_id].append(item)
    return grouped


def build_catalog(categories, items):
    grouped = group_items(items)
    out = []
    for category in categories:
        serialized = [serialize_item(item) for item in grouped.get(category.id, [])]
        out.append({
            "id": category.id,
            "slug": category.slug,
            "title": category.name,
            "order": category.order,
            "images": category_fallback_images(serialized),
            "items": serialized,
        })
    return {"categories": out}


def load_catalog():
    return build_catalog(Category.ordered().all(), Item.ordered().all())
