from craftsymphony.catalog.aggregate import pick_primary

SWIPE_THRESHOLD = 40


class GalleryState:
    """Navigation state of one category's gallery.

    Tracks the active item, the active image within that item and the
    crossfade between the outgoing and incoming hero image. When an item has
    no images of its own the category's fallback images are shown instead.
    """

    def __init__(self, items, category_images=None, active_item=0):
        self.items = list(items)
        self.category_images = list(category_images or [])
        self.active_item = 0
        self.active_image = 0
        self.current_url = None
        self.previous_url = None
        self.select_item(active_item)

    @classmethod
    def from_args(cls, category, args):
        state = cls(category.get("items", []), category.get("images"), _int_arg(args, "item", 0))
        dx = _int_arg(args, "dx", None)
        if dx is not None:
            state.swipe(dx)
        image = _int_arg(args, "img", None)
        if image is not None:
            state.select_image(image)
        return state

    @property
    def item(self):
        if not self.items:
            return None
        return self.items[self.active_item]

    @property
    def images(self):
        own = (self.item or {}).get("images") or []
        return own if own else self.category_images

    @property
    def hero(self):
        images = self.images
        if not images:
            return None
        return images[min(self.active_image, len(images) - 1)]

    def select_item(self, index):
        if not self.items:
            return
        self.active_item = max(0, min(len(self.items) - 1, index))
        images = self.images
        primary = pick_primary(images)
        self.active_image = images.index(primary) if primary is not None else 0
        self.show(self.hero)

    def select_image(self, index):
        images = self.images
        if not images:
            return
        self.active_image = max(0, min(len(images) - 1, index))
        self.show(self.hero)

    def next_image(self):
        images = self.images
        if images:
            self.select_image(self.active_image + 1 if self.active_image < len(images) - 1 else 0)

    def prev_image(self):
        images = self.images
        if images:
            self.select_image(self.active_image - 1 if self.active_image > 0 else len(images) - 1)

    def swipe(self, dx):
        """Map a horizontal touch gesture to the next/previous item."""
        if abs(dx) <= SWIPE_THRESHOLD:
            return
        self.select_item(self.active_item + (1 if dx < 0 else -1))

    # crossfade: the outgoing image stays on screen until the new one loads

    def show(self, image):
        url = image.get("url") if image else None
        if url == self.current_url:
            return
        if self.current_url is not None:
            self.previous_url = self.current_url
        self.current_url = url

    def image_loaded(self, url):
        if url == self.current_url:
            self.previous_url = None

    @property
    def transitioning(self):
        return self.previous_url is not None


def _int_arg(args, name, default):
    try:
        return int(args.get(name))
    except (TypeError, ValueError):
        return default
