from craftsymphony import db
from craftsymphony.models.category import utcnow


class WoodItem(db.Model):
    __tablename__ = "wood_items"

    id = db.Column(db.Integer, primary_key=True)
    description_pl = db.Column(db.Text, nullable=False)
    description_en = db.Column(db.Text, nullable=True)
    price_pln = db.Column(db.Float, nullable=False)
    image = db.Column(db.String(500), nullable=False)
    order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    @classmethod
    def ordered(cls):
        return cls.query.order_by(cls.order, cls.created_at, cls.id)

    def to_dict(self):
        return {
            "id": self.id,
            "descriptionPl": self.description_pl,
            "descriptionEn": self.description_en,
            "pricePLN": self.price_pln,
            "image": self.image,
            "order": self.order,
        }

    def __repr__(self):
        return f"<WoodItem {self.id}>"
