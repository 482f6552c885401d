from flask import Blueprint, abort, render_template, request

from craftsymphony.catalog.aggregate import load_catalog
from craftsymphony.catalog.filters import CatalogFilter, is_renderable
from craftsymphony.catalog.gallery import GalleryState
from craftsymphony.models.wood_item import WoodItem

public_bp = Blueprint('public', __name__)


@public_bp.route('/')
def home():
    filters = CatalogFilter.from_args(request.args)
    categories = filters.apply(load_catalog()["categories"])
    galleries = {c["slug"]: GalleryState(c["items"], c["images"]) for c in categories}
    return render_template("public/index.html", categories=categories,
                           galleries=galleries, filters=filters)


@public_bp.route('/category/<slug>')
def category_detail(slug):
    category = next((c for c in load_catalog()["categories"] if c["slug"] == slug), None)
    if category is None or not is_renderable(category):
        abort(404)
    gallery = GalleryState.from_args(category, request.args)
    return render_template("public/category.html", category=category, gallery=gallery)


@public_bp.route('/wood')
def wood():
    items = [w for w in WoodItem.ordered().all() if w.image]
    return render_template("public/wood.html", items=items)
