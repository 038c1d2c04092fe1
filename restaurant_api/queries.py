"""
Building blocks for the dynamic parts of restaurant SQL.

Values supplied by clients are always bound as parameters. Column names only
ever come from the allow-lists below.
"""
from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy import func, select

from .errors import InvalidSort, NoUpdatableFields
from .models import Rating, Restaurant

UPDATABLE_FIELDS = ("area_id", "restaurant_name", "cuisine", "website")
SORTABLE_COLUMNS = ("restaurant_name", "area_id", "cuisine", "website", "average_rating")

DEFAULT_SORT = "restaurant_name"


def build_listing_query(search: str | None = "", sort_by: str | None = DEFAULT_SORT):
    """
    Restaurants joined with their ratings, one row per restaurant with its
    mean rating as ``average_rating``.

    Restaurants without ratings drop out because of the inner join. Names are
    filtered by case-sensitive substring and rows ordered descending by
    ``sort_by`` with NULLs last, then by ``restaurant_id`` ascending.

    Raises InvalidSort when ``sort_by`` is not one of SORTABLE_COLUMNS.
    """
    if search is None:
        search = ""
    if sort_by is None or sort_by == "":
        sort_by = DEFAULT_SORT

    if sort_by not in SORTABLE_COLUMNS:
        raise InvalidSort(sort_by)

    average_rating = func.avg(Rating.rating).label("average_rating")

    if sort_by == "average_rating":
        sort_key = average_rating
    else:
        sort_key = getattr(Restaurant, sort_by)

    stmt = (
        select(Restaurant, average_rating)
        .join(Rating, Rating.restaurant_id == Restaurant.restaurant_id)
        .group_by(Restaurant.restaurant_id)
        .order_by(sort_key.desc().nulls_last(), Restaurant.restaurant_id.asc())
    )

    if search:
        stmt = stmt.where(Restaurant.restaurant_name.contains(search, autoescape=True))

    return stmt


def pick_writable_fields(payload) -> dict:
    """Allow-listed subset of ``payload``; anything that is not a mapping has none."""
    if not isinstance(payload, Mapping):
        return {}
    return {key: payload[key] for key in UPDATABLE_FIELDS if key in payload}


def filter_updatable_fields(payload) -> dict:
    """
    Keep only the columns a PATCH may change.

    Unknown keys are dropped without complaint; if nothing is left, raises
    NoUpdatableFields so the caller never issues an empty UPDATE.
    """
    fields = pick_writable_fields(payload)
    if not fields:
        raise NoUpdatableFields()
    return fields
