import logging

from flask import Blueprint, render_template, request, redirect, url_for, flash
from flask_login import login_required
from pydantic import ValidationError

from craftsymphony import db
from craftsymphony.catalog import admin
from craftsymphony.errors import ApiError, describe_validation_error
from craftsymphony.models.category import Category
from craftsymphony.models.item import Item
from craftsymphony.models.wood_item import WoodItem
from craftsymphony.utils import drafts
from craftsymphony.utils.file_rules import discard_upload, save_upload

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")

CATEGORY_FIELDS = ("name", "slug")
ITEM_FIELDS = ("categoryId", "title", "titleEn", "description", "descriptionEn", "rozmiarMin",
               "rozmiarMax", "rozmiarGlowny", "rozSprz", "cenaPLN", "numerPaska")
WOOD_FIELDS = ("descriptionPl", "descriptionEn", "pricePLN", "order")


def error_message(exc):
    if isinstance(exc, ValidationError):
        return describe_validation_error(exc)
    return exc.message


def form_values(fields):
    return {name: request.form.get(name, "").strip() for name in fields if name in request.form}


def chosen_file(name="image"):
    file = request.files.get(name)
    if file and file.filename != '':
        return file
    return None


def item_values(item):
    data = item.to_dict()
    return {name: "" if data.get(name) is None else data[name] for name in ITEM_FIELDS}


def wood_values(wood):
    data = wood.to_dict()
    return {name: "" if data.get(name) is None else data[name] for name in WOOD_FIELDS}


@dashboard_bp.route("/")
@login_required
def panel():
    categories = Category.ordered().all()
    items = {c.id: Item.ordered().filter(Item.category_id == c.id).all() for c in categories}
    wood = WoodItem.ordered().all()
    return render_template("dashboard/panel.html", categories=categories, items=items, wood=wood)


# categories

@dashboard_bp.route("/categories", methods=["POST"])
@login_required
def create_category():
    try:
        category = admin.create_category(form_values(CATEGORY_FIELDS))
        flash(f"Kategoria {category.name} utworzona", "success")
    except (ApiError, ValidationError) as exc:
        db.session.rollback()
        flash(error_message(exc), "error")
    return redirect(url_for("dashboard.panel"))


@dashboard_bp.route("/categories/<int:category_id>/edit", methods=["GET", "POST"])
@login_required
def edit_category(category_id):
    category = db.get_or_404(Category, category_id)
    draft = drafts.start_draft("category", category.id, {"name": category.name, "slug": category.slug})

    if request.method == "POST":
        if request.form.get("action") == "cancel":
            drafts.discard_draft("category", category.id)
            return redirect(url_for("dashboard.panel"))

        drafts.update_draft("category", category.id, form_values(CATEGORY_FIELDS))
        try:
            admin.update_category(category, draft["values"])
        except (ApiError, ValidationError) as exc:
            db.session.rollback()
            flash(error_message(exc), "error")
            return redirect(url_for("dashboard.edit_category", category_id=category.id))
        drafts.commit_draft("category", category.id)
        flash("Kategoria zaktualizowana", "success")
        return redirect(url_for("dashboard.panel"))

    return render_template("dashboard/edit_category.html", category=category, draft=draft)


@dashboard_bp.route("/categories/<int:category_id>/delete", methods=["POST"])
@login_required
def delete_category(category_id):
    category = db.get_or_404(Category, category_id)
    drafts.discard_draft("category", category.id)
    for item in category.items:
        drafts.discard_draft("item", item.id)
    admin.delete_category(category)
    flash("Kategoria usunięta razem z produktami", "success")
    return redirect(url_for("dashboard.panel"))


@dashboard_bp.route("/categories/<int:category_id>/move/<direction>", methods=["POST"])
@login_required
def move_category(category_id, direction):
    try:
        admin.move_category(db.get_or_404(Category, category_id), direction)
    except ApiError as exc:
        flash(exc.message, "error")
    return redirect(url_for("dashboard.panel"))


# items

@dashboard_bp.route("/items", methods=["POST"])
@login_required
def create_item():
    file = chosen_file()
    if file is None:
        flash("Wybierz zdjęcie", "error")
        return redirect(url_for("dashboard.panel"))
    stored = None
    try:
        stored = save_upload(file)
        values = form_values(ITEM_FIELDS)
        values["images"] = [{
            "url": stored["url"],
            "altPl": values.get("title"),
            "altEn": values.get("titleEn"),
            "isPrimary": True,
            "order": 0,
        }]
        item = admin.create_item(values)
        flash(f"Pasek #{item.belt_number} dodany", "success")
    except (ApiError, ValidationError) as exc:
        db.session.rollback()
        if stored:
            discard_upload(stored["name"])
        flash(error_message(exc), "error")
    return redirect(url_for("dashboard.panel"))


@dashboard_bp.route("/items/<int:item_id>/edit", methods=["GET", "POST"])
@login_required
def edit_item(item_id):
    item = db.get_or_404(Item, item_id)
    draft = drafts.start_draft("item", item.id, item_values(item))

    if request.method == "POST":
        action = request.form.get("action", "save")
        if action == "cancel":
            drafts.discard_draft("item", item.id)
            return redirect(url_for("dashboard.panel"))

        drafts.update_draft("item", item.id, form_values(ITEM_FIELDS))
        try:
            file = chosen_file()
            if file is not None:
                drafts.stage_preview("item", item.id, file)
            if action == "preview":
                return redirect(url_for("dashboard.edit_item", item_id=item.id))
            admin.update_item(item, draft["values"])
        except (ApiError, ValidationError) as exc:
            db.session.rollback()
            flash(error_message(exc), "error")
            return redirect(url_for("dashboard.edit_item", item_id=item.id))

        _, new_url = drafts.commit_draft("item", item.id)
        if new_url:
            admin.replace_primary_image(item, new_url)
            db.session.commit()
        flash("Produkt zaktualizowany", "success")
        return redirect(url_for("dashboard.panel"))

    categories = Category.ordered().all()
    primary = item.primary_image()
    current_image = primary.url if primary else None
    return render_template("dashboard/edit_item.html", item=item, draft=draft,
                           categories=categories, current_image=current_image)


@dashboard_bp.route("/items/<int:item_id>/delete", methods=["POST"])
@login_required
def delete_item(item_id):
    item = db.get_or_404(Item, item_id)
    drafts.discard_draft("item", item.id)
    admin.delete_item(item)
    flash("Produkt usunięty", "success")
    return redirect(url_for("dashboard.panel"))


@dashboard_bp.route("/items/<int:item_id>/move/<direction>", methods=["POST"])
@login_required
def move_item(item_id, direction):
    try:
        admin.move_item(db.get_or_404(Item, item_id), direction)
    except ApiError as exc:
        flash(exc.message, "error")
    return redirect(url_for("dashboard.panel"))


# wood

@dashboard_bp.route("/wood", methods=["POST"])
@login_required
def create_wood():
    file = chosen_file()
    if file is None:
        flash("Wybierz zdjęcie", "error")
        return redirect(url_for("dashboard.panel"))
    stored = None
    try:
        values = form_values(WOOD_FIELDS)
        if not values.get("order"):
            values.pop("order", None)
        stored = save_upload(file)
        values["image"] = stored["url"]
        admin.create_wood(values)
        flash("Produkt drewniany dodany", "success")
    except (ApiError, ValidationError) as exc:
        db.session.rollback()
        if stored:
            discard_upload(stored["name"])
        flash(error_message(exc), "error")
    return redirect(url_for("dashboard.panel"))


@dashboard_bp.route("/wood/<int:wood_id>/edit", methods=["GET", "POST"])
@login_required
def edit_wood(wood_id):
    wood = db.get_or_404(WoodItem, wood_id)
    draft = drafts.start_draft("wood", wood.id, wood_values(wood))

    if request.method == "POST":
        action = request.form.get("action", "save")
        if action == "cancel":
            drafts.discard_draft("wood", wood.id)
            return redirect(url_for("dashboard.panel"))

        values = form_values(WOOD_FIELDS)
        if "order" in values and not values["order"]:
            values["order"] = "0"
        drafts.update_draft("wood", wood.id, values)
        try:
            file = chosen_file()
            if file is not None:
                drafts.stage_preview("wood", wood.id, file)
            if action == "preview":
                return redirect(url_for("dashboard.edit_wood", wood_id=wood.id))
            admin.update_wood(wood, draft["values"])
        except (ApiError, ValidationError) as exc:
            db.session.rollback()
            flash(error_message(exc), "error")
            return redirect(url_for("dashboard.edit_wood", wood_id=wood.id))

        _, new_url = drafts.commit_draft("wood", wood.id)
        if new_url:
            wood.image = new_url
            db.session.commit()
        flash("Produkt drewniany zaktualizowany", "success")
        return redirect(url_for("dashboard.panel"))

    return render_template("dashboard/edit_wood.html", wood=wood, draft=draft)


@dashboard_bp.route("/wood/<int:wood_id>/delete", methods=["POST"])
@login_required
def delete_wood(wood_id):
    wood = db.get_or_404(WoodItem, wood_id)
    drafts.discard_draft("wood", wood.id)
    admin.delete_wood(wood)
    flash("Produkt drewniany usunięty", "success")
    return redirect(url_for("dashboard.panel"))


@dashboard_bp.route("/wood/<int:wood_id>/move/<direction>", methods=["POST"])
@login_required
def move_wood(wood_id, direction):
    try:
        admin.move_wood(db.get_or_404(WoodItem, wood_id), direction)
    except ApiError as exc:
        flash(exc.message, "error")
    return redirect(url_for("dashboard.panel"))
