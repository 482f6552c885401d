from craftsymphony import db


class ItemImage(db.Model):
    __tablename__ = "item_images"

    id = db.Column(db.Integer, primary_key=True)
    url = db.Column(db.String(500), nullable=False, default="")
    alt_pl = db.Column(db.String(255), nullable=True)
    alt_en = db.Column(db.String(255), nullable=True)
    is_primary = db.Column(db.Boolean, nullable=False, default=False)
    order = db.Column(db.Integer, nullable=True)

    item_id = db.Column(db.Integer, db.ForeignKey("items.id", ondelete="CASCADE"), nullable=False)

    def to_dict(self):
        return {
            "url": self.url,
            "altPl": self.alt_pl,
            "altEn": self.alt_en,
            "isPrimary": bool(self.is_primary),
            "order": self.order,
        }

    def __repr__(self):
        return f"<ItemImage {self.url}>"
