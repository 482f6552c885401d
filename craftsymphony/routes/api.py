from flask import Blueprint, jsonify, request

from craftsymphony.catalog.aggregate import load_catalog
from craftsymphony.catalog.filters import CatalogFilter
from craftsymphony.models.wood_item import WoodItem
from craftsymphony.utils.visits import register_visit

api_bp = Blueprint("api", __name__, url_prefix="/api")


@api_bp.route("/catalog")
def catalog():
    data = load_catalog()
    filters = CatalogFilter.from_args(request.args)
    if filters.active:
        data["categories"] = filters.apply(data["categories"])
    response = jsonify(data)
    response.headers["Cache-Control"] = "no-store"
    return response


@api_bp.route("/wood")
def wood():
    return jsonify([w.to_dict() for w in WoodItem.ordered().all()])


@api_bp.route("/visits")
def visits():
    return jsonify({"count": register_visit()})
