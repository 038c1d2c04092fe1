# restaurant_api/routes/restaurants.py
from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..errors import RestaurantNotFound
from ..queries import DEFAULT_SORT, filter_updatable_fields

bp = Blueprint("restaurants", __name__)

def _store():
    return current_app.extensions["restaurant_store"]

###############################
# GET ALL RESTAURANTS
###############################
@bp.get("")
def get_restaurants():
    search = request.args.get("search", "")
    sort_by = request.args.get("sort_by", DEFAULT_SORT)

    restaurants = _store().list_restaurants(search, sort_by)
    return jsonify({"restaurants": restaurants}), 200


###############################
# POST RESTAURANT (CREATE)
###############################
@bp.post("")
def create_restaurant():
    body = request.get_json(silent=True) or {}

    restaurant = _store().create_restaurant(body)
    return jsonify({"restaurant": restaurant}), 201


###############################
# DELETE RESTAURANT
###############################
@bp.delete("/<id:restaurant_id>")
def delete_restaurant(restaurant_id: int):
    # 204 whether or not the row existed
    _store().delete_restaurant(restaurant_id)
    return "", 204


###############################
# PATCH RESTAURANT
###############################
@bp.patch("/<id:restaurant_id>")
def update_restaurant(restaurant_id: int):
    body = request.get_json(silent=True)
    fields = filter_updatable_fields(body)

    restaurant = _store().update_restaurant(restaurant_id, fields)
    if restaurant is None:
        raise RestaurantNotFound(restaurant_id)

    return jsonify({"restaurant": restaurant}), 200
