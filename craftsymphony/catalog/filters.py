from dataclasses import dataclass, field
from typing import Optional

from craftsymphony.catalog.pricing import to_number


@dataclass
class Range:
    low: Optional[float] = None
    high: Optional[float] = None

    @property
    def active(self) -> bool:
        return self.low is not None or self.high is not None

    def contains(self, value) -> bool:
        if not self.active:
            return True
        number = to_number(value)
        if number is None:
            return False
        if self.low is not None and number < self.low:
            return False
        if self.high is not None and number > self.high:
            return False
        return True


@dataclass
class CatalogFilter:
    """Multi-field item filter for the public catalog.

    Every active sub-filter must match (logical AND). Inactive sub-filters
    are ignored, so an empty filter matches everything.
    """
    text: str = ""
    price: Range = field(default_factory=Range)
    main_size: Range = field(default_factory=Range)
    buckle_size: Range = field(default_factory=Range)
    belt_number: Optional[int] = None

    @classmethod
    def from_args(cls, args):
        def num(name):
            return to_number(args.get(name))

        belt = num("belt")
        return cls(
            text=(args.get("q") or "").strip(),
            price=Range(num("price_min"), num("price_max")),
            main_size=Range(num("size_min"), num("size_max")),
            buckle_size=Range(num("buckle_min"), num("buckle_max")),
            belt_number=int(belt) if belt is not None else None,
        )

    @property
    def active(self) -> bool:
        return bool(
            self.text
            or self.price.active
            or self.main_size.active
            or self.buckle_size.active
            or self.belt_number is not None
        )

    def matches_text(self, item) -> bool:
        if not self.text:
            return True
        haystack = " ".join(
            str(item.get(key) or "")
            for key in ("title", "titleEn", "description", "descriptionEn")
        )
        return self.text.lower() in haystack.lower()

    def matches_belt(self, item) -> bool:
        if self.belt_number is None:
            return True
        number = to_number(item.get("numerPaska"))
        return number is not None and int(number) == self.belt_number

    def matches(self, item) -> bool:
        return (
            self.matches_text(item)
            and self.price.contains(item.get("cenaPLN"))
            and self.main_size.contains(item.get("rozmiarGlowny"))
            and self.buckle_size.contains(item.get("rozSprz"))
            and self.matches_belt(item)
        )

    def apply(self, categories):
        """Filter items inside each category and drop categories left unrenderable."""
        visible = []
        for category in categories:
            items = [item for item in category.get("items", []) if self.matches(item)]
            filtered = dict(category, items=items)
            if is_renderable(filtered):
                visible.append(filtered)
        return visible


def is_renderable(category) -> bool:
    items = category.get("items") or []
    if not items:
        return False
    any_item_images = any(item.get("images") for item in items)
    return any_item_images or bool(category.get("images"))
