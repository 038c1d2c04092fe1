# restaurant_api/models/area.py
from ..extensions import db

class Area(db.Model):
    __tablename__ = "areas"

    area_id = db.Column(db.Integer, primary_key=True)
    area_name = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {
            "area_id": self.area_id,
            "area_name": self.area_name,
        }
