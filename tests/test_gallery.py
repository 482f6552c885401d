from craftsymphony.catalog.gallery import GalleryState


def img(url, primary=False):
    return {"url": url, "isPrimary": primary}


ITEMS = [
    {"title": "A", "images": [img("/a1.jpg"), img("/a2.jpg", True), img("/a3.jpg")]},
    {"title": "B", "images": [img("/b1.jpg", True)]},
    {"title": "C", "images": []},
]
FALLBACK = [img("/a2.jpg", True), img("/b1.jpg", True)]


def test_starts_on_primary_image_of_first_item():
    g = GalleryState(ITEMS, FALLBACK)
    assert g.active_item == 0
    assert g.active_image == 1
    assert g.hero["url"] == "/a2.jpg"


def test_image_navigation_wraps():
    g = GalleryState(ITEMS, FALLBACK)
    g.next_image()
    assert g.active_image == 2
    g.next_image()
    assert g.active_image == 0
    g.prev_image()
    assert g.active_image == 2


def test_item_without_images_uses_category_fallback():
    g = GalleryState(ITEMS, FALLBACK, active_item=2)
    assert g.images == FALLBACK
    assert g.hero["url"] == "/a2.jpg"


def test_swipe_left_advances_and_right_retreats():
    g = GalleryState(ITEMS, FALLBACK)
    g.swipe(-41)
    assert g.active_item == 1
    assert g.hero["url"] == "/b1.jpg"
    g.swipe(80)
    assert g.active_item == 0


def test_small_swipe_is_ignored_and_ends_are_clamped():
    g = GalleryState(ITEMS, FALLBACK)
    g.swipe(-40)
    assert g.active_item == 0
    g.swipe(100)
    assert g.active_item == 0
    g.select_item(99)
    assert g.active_item == 2


def test_crossfade_keeps_previous_until_loaded():
    g = GalleryState(ITEMS, FALLBACK)
    assert not g.transitioning
    g.next_image()
    assert g.previous_url == "/a2.jpg"
    assert g.current_url == "/a3.jpg"
    g.image_loaded("/a2.jpg")
    assert g.transitioning
    g.image_loaded("/a3.jpg")
    assert not g.transitioning


def test_from_args():
    category = {"items": ITEMS, "images": FALLBACK}
    g = GalleryState.from_args(category, {"item": "0", "dx": "-60"})
    assert g.active_item == 1
    g = GalleryState.from_args(category, {"item": "0", "img": "2"})
    assert g.hero["url"] == "/a3.jpg"
    g = GalleryState.from_args(category, {"item": "x"})
    assert g.active_item == 0


def test_empty_gallery():
    g = GalleryState([], [])
    assert g.item is None
    assert g.hero is None
    g.next_image()
    g.swipe(-100)
    assert g.active_item == 0
