import io

import pytest

from craftsymphony import create_app, db
from craftsymphony.catalog import admin

ADMIN = {"x-admin-password": "s3cret"}

# 1x1 transparent PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00"
    b"\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00\x05\x18\xd8N\x00"
    b"\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def app(tmp_path):
    app = create_app("craftsymphony.config.TestingConfig", overrides={
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
        "PREVIEW_FOLDER": str(tmp_path / "previews"),
        "VISITS_FILE": str(tmp_path / "data" / "visits.json"),
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/admin/login", data={"password": "s3cret"})
    assert resp.status_code == 302
    return client


def png_file(name="belt.png"):
    return (io.BytesIO(PNG_BYTES), name)


def make_category(name, slug=None):
    data = {"name": name}
    if slug:
        data["slug"] = slug
    return admin.create_category(data)


def make_item(category, belt_number, **overrides):
    data = {
        "categoryId": category.id,
        "title": f"Pasek {belt_number}",
        "titleEn": f"Belt {belt_number}",
        "description": "Skóra licowa",
        "descriptionEn": "Full grain leather",
        "rozmiarMin": 90,
        "rozmiarMax": 110,
        "rozmiarGlowny": 100,
        "rozSprz": 4,
        "cenaPLN": 100,
        "numerPaska": belt_number,
        "images": [{"url": f"/img/{belt_number}-a.jpg"}, {"url": f"/img/{belt_number}-b.jpg"}],
    }
    data.update(overrides)
    return admin.create_item(data)


def make_wood(description, order=0, price=200):
    return admin.create_wood({
        "descriptionPl": description,
        "pricePLN": price,
        "image": f"/img/{description}.jpg",
        "order": order,
    })
