from craftsymphony import db
from craftsymphony.models.category import utcnow
from craftsymphony.models.image import ItemImage


class Item(db.Model):
    __tablename__ = "items"

    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(
        db.Integer, db.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = db.Column(db.String(255), nullable=False)
    title_en = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=False, default="")
    description_en = db.Column(db.Text, nullable=True)
    # Unordered pair, display code takes min/max
    size_min = db.Column(db.Float, nullable=False)
    size_max = db.Column(db.Float, nullable=False)
    main_size = db.Column(db.Float, nullable=True)
    buckle_size = db.Column(db.Float, nullable=True)
    price_pln = db.Column(db.Float, nullable=False)
    belt_number = db.Column(db.Integer, nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    images = db.relationship(
        ItemImage,
        backref="item",
        lazy=True,
        cascade="all, delete-orphan",
        order_by=ItemImage.id,
    )

    @classmethod
    def ordered(cls):
        return cls.query.order_by(cls.belt_number, cls.created_at, cls.id)

    def primary_image(self):
        flagged = [img for img in self.images if img.is_primary and img.url]
        if flagged:
            return flagged[0]
        with_url = [img for img in self.images if img.url]
        return with_url[0] if with_url else None

    def to_dict(self):
        return {
            "id": self.id,
            "categoryId": self.category_id,
            "category": {"id": self.category.id, "name": self.category.name, "slug": self.category.slug}
            if self.category is not None else None,
            "title": self.title,
            "titleEn": self.title_en,
            "description": self.description or "",
            "descriptionEn": self.description_en,
            "rozmiarMin": self.size_min,
            "rozmiarMax": self.size_max,
            "rozmiarGlowny": self.main_size,
            "rozSprz": self.buckle_size,
            "cenaPLN": self.price_pln,
            "numerPaska": self.belt_number,
            "images": [img.to_dict() for img in self.images],
        }

    def __repr__(self):
        return f"<Item {self.belt_number} {self.title}>"
