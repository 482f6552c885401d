"""Write operations shared by the admin JSON API and the dashboard forms.

Functions validate through the pydantic payloads and raise ``ApiError`` for
anything the operator has to fix. Each one commits on success; callers roll
back the session on failure.
"""
import logging

from craftsymphony import db
from craftsymphony.errors import ApiError
from craftsymphony.models.category import Category
from craftsymphony.models.image import ItemImage
from craftsymphony.models.item import Item
from craftsymphony.models.wood_item import WoodItem
from craftsymphony.schemas import (
    CategoryCreate,
    CategoryUpdate,
    ItemCreate,
    ItemUpdate,
    WoodCreate,
    WoodUpdate,
)
from craftsymphony.utils.ordering import parse_direction, swap_with_neighbour
from craftsymphony.utils.text import slugify

logger = logging.getLogger(__name__)

ITEM_REQUIRED = {"category_id", "title", "size_min", "size_max", "price_pln", "belt_number", "images"}
WOOD_REQUIRED = {"description_pl", "price_pln", "image"}


def get_or_404(model, entity_id, message="Not found"):
    obj = db.session.get(model, entity_id)
    if obj is None:
        raise ApiError(404, message)
    return obj


def _ensure_slug_free(slug, exclude_id=None):
    clash = Category.query.filter_by(slug=slug).first()
    if clash is not None and clash.id != exclude_id:
        raise ApiError(409, "Slug already exists")


def _direction(value):
    direction = parse_direction(value)
    if direction is None:
        raise ApiError(400, "direction must be 'up' or 'down'")
    return direction


# categories

def create_category(data):
    payload = CategoryCreate.model_validate(data)
    slug = (payload.slug or "").lower() or slugify(payload.name)
    if not slug:
        raise ApiError(400, "Cannot derive a slug from the name")
    _ensure_slug_free(slug)

    category = Category(name=payload.name, slug=slug, order=Category.next_order())
    db.session.add(category)
    db.session.commit()
    logger.info("Created category %s (order %s)", category.slug, category.order)
    return category


def update_category(category, data):
    changes = CategoryUpdate.model_validate(data).model_dump(exclude_unset=True, exclude_none=True)
    if "slug" in changes:
        _ensure_slug_free(changes["slug"], exclude_id=category.id)
    for key, value in changes.items():
        setattr(category, key, value)
    db.session.commit()
    logger.info("Updated category %s: %s", category.id, sorted(changes))
    return category


def delete_category(category):
    count = len(category.items)
    db.session.delete(category)
    db.session.commit()
    logger.info("Deleted category %s with %d item(s)", category.slug, count)


def move_category(category, direction):
    siblings = Category.ordered().all()
    other = swap_with_neighbour(siblings, category, _direction(direction))
    db.session.commit()
    return other


# items

def _build_images(images):
    return [
        ItemImage(
            url=img.url,
            alt_pl=img.alt_pl,
            alt_en=img.alt_en,
            is_primary=img.is_primary,
            order=img.order,
        )
        for img in images
    ]


def _require_category(category_id):
    if db.session.get(Category, category_id) is None:
        raise ApiError(400, "Category does not exist")


def create_item(data):
    payload = ItemCreate.model_validate(data)
    _require_category(payload.category_id)

    fields = payload.model_dump(exclude={"images"})
    item = Item(**fields)
    item.images = _build_images(payload.images)
    db.session.add(item)
    db.session.commit()
    logger.info("Created item #%s in category %s", item.belt_number, item.category_id)
    return item


def update_item(item, data):
    payload = ItemUpdate.model_validate(data)
    changes = payload.model_dump(exclude_unset=True, exclude={"images"})
    changes = {k: v for k, v in changes.items() if v is not None or k not in ITEM_REQUIRED}

    if "category_id" in changes:
        _require_category(changes["category_id"])
    for key, value in changes.items():
        setattr(item, key, value)
    if payload.images is not None:
        item.images = _build_images(payload.images)
    db.session.commit()
    logger.info("Updated item %s", item.id)
    return item


def delete_item(item):
    db.session.delete(item)
    db.session.commit()
    logger.info("Deleted item %s", item.id)


def move_item(item, direction):
    siblings = Item.query.filter_by(category_id=item.category_id).order_by(
        Item.belt_number, Item.created_at, Item.id
    ).all()
    other = swap_with_neighbour(siblings, item, _direction(direction), attr="belt_number")
    db.session.commit()
    return other


def replace_primary_image(item, url):
    """Point the item's primary image at ``url``, keeping its alt texts."""
    primary = item.primary_image()
    if primary is None:
        item.images.append(ItemImage(url=url, is_primary=True, order=0))
    else:
        primary.url = url


# wood

def create_wood(data):
    payload = WoodCreate.model_validate(data)
    wood = WoodItem(**payload.model_dump())
    db.session.add(wood)
    db.session.commit()
    logger.info("Created wood item %s", wood.id)
    return wood


def update_wood(wood, data):
    changes = WoodUpdate.model_validate(data).model_dump(exclude_unset=True)
    for key, value in changes.items():
        if value is None and key in WOOD_REQUIRED:
            continue
        if key == "order" and value is None:
            value = 0
        setattr(wood, key, value)
    db.session.commit()
    logger.info("Updated wood item %s", wood.id)
    return wood


def delete_wood(wood):
    db.session.delete(wood)
    db.session.commit()
    logger.info("Deleted wood item %s", wood.id)


def move_wood(wood, direction):
    siblings = WoodItem.ordered().all()
    other = swap_with_neighbour(siblings, wood, _direction(direction))
    db.session.commit()
    return other
