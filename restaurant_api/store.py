from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreError
from .models import Area, Restaurant
from .queries import DEFAULT_SORT, build_listing_query, pick_writable_fields

logger = logging.getLogger(__name__)


def _num(v):
    # normalize Decimal -> float for JSON
    if isinstance(v, (Decimal, int)):
        return float(v)
    return v


class RestaurantStore:
    """
    Data access for restaurants and areas.

    Wraps a SQLAlchemy session; in the app this is the Flask-SQLAlchemy
    scoped session, so one store instance serves every request.
    """

    def __init__(self, session):
        self.session = session

    def _fail(self, action: str, error: SQLAlchemyError):
        self.session.rollback()
        logger.error("Store error while %s: %s", action, error, exc_info=True)
        return StoreError()

    ###############################
    # RESTAURANTS
    ###############################
    def list_restaurants(self, search: str = "", sort_by: str = DEFAULT_SORT) -> list[dict]:
        # build before the try so InvalidSort is raised as itself
        stmt = build_listing_query(search, sort_by)
        try:
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError as e:
            raise self._fail("listing restaurants", e) from e

        out = []
        for restaurant, average_rating in rows:
            row = restaurant.to_dict()
            row["average_rating"] = _num(average_rating)
            out.append(row)
        return out

    def create_restaurant(self, fields) -> dict:
        restaurant = Restaurant(**pick_writable_fields(fields))
        try:
            self.session.add(restaurant)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("creating restaurant", e) from e

        logger.info("Created restaurant %s", restaurant.restaurant_id)
        return restaurant.to_dict()

    def delete_restaurant(self, restaurant_id: int) -> dict | None:
        try:
            restaurant = self.session.get(Restaurant, restaurant_id)
            if restaurant is None:
                return None
            deleted = restaurant.to_dict()
            self.session.delete(restaurant)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("deleting restaurant", e) from e

        logger.info("Deleted restaurant %s", restaurant_id)
        return deleted

    def update_restaurant(self, restaurant_id: int, fields: dict) -> dict | None:
        try:
            restaurant = self.session.get(Restaurant, restaurant_id)
            if restaurant is None:
                return None
            for column, value in fields.items():
                setattr(restaurant, column, value)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("updating restaurant", e) from e

        logger.info("Updated restaurant %s (%s)", restaurant_id, ", ".join(sorted(fields)))
        return restaurant.to_dict()

    ###############################
    # AREAS
    ###############################
    def get_area(self, area_id: int) -> dict | None:
        try:
            area = self.session.get(Area, area_id)
        except SQLAlchemyError as e:
            raise self._fail("fetching area", e) from e
        return area.to_dict() if area is not None else None

    def list_restaurants_by_area(self, area_id: int) -> list[dict]:
        stmt = (
            select(Restaurant)
            .filter(Restaurant.area_id == area_id)
            .order_by(Restaurant.restaurant_id.asc())
        )
        try:
            restaurants = self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise self._fail("listing restaurants by area", e) from e
        return [r.to_dict() for r in restaurants]
