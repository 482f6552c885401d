from flask import Blueprint, jsonify, request
from flask_login import login_required

from craftsymphony.catalog import admin
from craftsymphony.errors import ApiError
from craftsymphony.models.category import Category
from craftsymphony.models.item import Item
from craftsymphony.models.wood_item import WoodItem
from craftsymphony.utils.file_rules import save_upload

admin_api_bp = Blueprint("admin_api", __name__, url_prefix="/api/admin")


def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ApiError(400, "Invalid JSON body")
    return data


# categories

@admin_api_bp.route("/categories", methods=["GET"])
@login_required
def list_categories():
    return jsonify([c.to_dict() for c in Category.ordered().all()])


@admin_api_bp.route("/categories", methods=["POST"])
@login_required
def create_category():
    category = admin.create_category(json_body())
    return jsonify(category.to_dict()), 201


@admin_api_bp.route("/categories/<int:category_id>", methods=["PATCH"])
@login_required
def update_category(category_id):
    category = admin.get_or_404(Category, category_id)
    return jsonify(admin.update_category(category, json_body()).to_dict())


@admin_api_bp.route("/categories/<int:category_id>", methods=["DELETE"])
@login_required
def delete_category(category_id):
    admin.delete_category(admin.get_or_404(Category, category_id))
    return jsonify({"ok": True})


@admin_api_bp.route("/categories/<int:category_id>/move", methods=["POST"])
@login_required
def move_category(category_id):
    category = admin.get_or_404(Category, category_id)
    admin.move_category(category, json_body().get("direction"))
    return jsonify([c.to_dict() for c in Category.ordered().all()])


# items

@admin_api_bp.route("/items", methods=["GET"])
@login_required
def list_items():
    query = Item.ordered()
    category_id = request.args.get("categoryId", type=int)
    if category_id is not None:
        query = query.filter(Item.category_id == category_id)
    return jsonify([it.to_dict() for it in query.all()])


@admin_api_bp.route("/items", methods=["POST"])
@login_required
def create_item():
    item = admin.create_item(json_body())
    return jsonify({"ok": True, "item": item.to_dict()}), 201


@admin_api_bp.route("/items/<int:item_id>", methods=["PATCH"])
@login_required
def update_item(item_id):
    item = admin.get_or_404(Item, item_id)
    return jsonify(admin.update_item(item, json_body()).to_dict())


@admin_api_bp.route("/items/<int:item_id>", methods=["DELETE"])
@login_required
def delete_item(item_id):
    admin.delete_item(admin.get_or_404(Item, item_id))
    return jsonify({"ok": True})


@admin_api_bp.route("/items/<int:item_id>/move", methods=["POST"])
@login_required
def move_item(item_id):
    item = admin.get_or_404(Item, item_id)
    admin.move_item(item, json_body().get("direction"))
    siblings = Item.ordered().filter(Item.category_id == item.category_id).all()
    return jsonify([it.to_dict() for it in siblings])


# wood

@admin_api_bp.route("/wood", methods=["GET"])
@login_required
def list_wood():
    return jsonify([w.to_dict() for w in WoodItem.ordered().all()])


@admin_api_bp.route("/wood", methods=["POST"])
@login_required
def create_wood():
    return jsonify(admin.create_wood(json_body()).to_dict()), 201


@admin_api_bp.route("/wood/<int:wood_id>", methods=["PATCH"])
@login_required
def update_wood(wood_id):
    wood = admin.get_or_404(WoodItem, wood_id)
    return jsonify(admin.update_wood(wood, json_body()).to_dict())


@admin_api_bp.route("/wood/<int:wood_id>", methods=["DELETE"])
@login_required
def delete_wood(wood_id):
    admin.delete_wood(admin.get_or_404(WoodItem, wood_id))
    return jsonify({"ok": True})


@admin_api_bp.route("/wood/<int:wood_id>/move", methods=["POST"])
@login_required
def move_wood(wood_id):
    wood = admin.get_or_404(WoodItem, wood_id)
    admin.move_wood(wood, json_body().get("direction"))
    return jsonify([w.to_dict() for w in WoodItem.ordered().all()])


# uploads

@admin_api_bp.route("/upload", methods=["POST"])
@login_required
def upload():
    stored = save_upload(request.files.get("file"))
    return jsonify(stored), 201
