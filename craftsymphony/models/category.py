from datetime import datetime, timezone

from craftsymphony import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    order = db.Column(db.Integer, nullable=False, default=0, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    items = db.relationship(
        "Item",
        backref="category",
        lazy=True,
        cascade="all, delete-orphan",
    )

    @classmethod
    def ordered(cls):
        return cls.query.order_by(cls.order, cls.created_at, cls.id)

    @classmethod
    def next_order(cls):
        last = cls.query.order_by(cls.order.desc()).first()
        return (last.order if last is not None else -1) + 1

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "order": self.order,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Category {self.slug}>"
