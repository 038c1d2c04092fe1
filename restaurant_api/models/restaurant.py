# restaurant_api/models/restaurant.py
from __future__ import annotations

from ..extensions import db

class Restaurant(db.Model):
    __tablename__ = "restaurants"

    restaurant_id = db.Column(db.Integer, primary_key=True)
    restaurant_name = db.Column(db.Text, nullable=False)
    area_id = db.Column(db.Integer, db.ForeignKey("areas.area_id"), nullable=False, index=True)
    cuisine = db.Column(db.Text, nullable=True)
    website = db.Column(db.Text, nullable=True)

    # never hand out an id again once its row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    def to_dict(self):
        return {
            "restaurant_id": self.restaurant_id,
            "restaurant_name": self.restaurant_name,
            "area_id": self.area_id,
            "cuisine": self.cuisine,
            "website": self.website,
        }

class Rating(db.Model):
    __tablename__ = "ratings"

    rating_id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(
        db.Integer,
        db.ForeignKey("restaurants.restaurant_id", ondelete="CASCADE"),
        nullable=False,
    )
    rating = db.Column(db.SmallInteger, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    __table_args__ = (
        db.Index("idx_ratings_restaurant_id", "restaurant_id"),
    )
