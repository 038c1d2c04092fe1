from .area import Area
from .restaurant import Restaurant, Rating

__all__ = ["Area", "Restaurant", "Rating"]
