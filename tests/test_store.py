import pytest
from sqlalchemy import text

from restaurant_api.errors import InvalidSort, StoreError
from restaurant_api.extensions import db
from restaurant_api.models import Rating, Restaurant
from restaurant_api.store import RestaurantStore


def _ids(rows):
    return [r["restaurant_id"] for r in rows]


###############################
# list_restaurants
###############################
def test_list_orders_by_name_descending_by_default(store):
    restaurants = store.list_restaurants()

    names = [r["restaurant_name"] for r in restaurants]
    assert names == sorted(names, reverse=True)
    assert _ids(restaurants) == [4, 2, 3, 5, 1]


def test_list_averages_ratings_as_floats(store):
    averages = {r["restaurant_id"]: r["average_rating"] for r in store.list_restaurants()}

    assert averages[1] == pytest.approx(4.5)
    assert averages[3] == pytest.approx(14 / 3)
    assert all(isinstance(v, float) for v in averages.values())


def test_list_omits_restaurants_without_ratings(store):
    assert 6 not in _ids(store.list_restaurants())
    assert 6 in _ids(store.list_restaurants_by_area(1))


def test_list_sort_by_average_rating_breaks_ties_by_id(store):
    assert _ids(store.list_restaurants(sort_by="average_rating")) == [3, 1, 5, 2, 4]


def test_list_search_is_case_sensitive(store):
    assert _ids(store.list_restaurants(search="Pi")) == [3, 5]
    assert store.list_restaurants(search="pi") == []


def test_list_search_matches_wildcards_literally(store):
    assert store.list_restaurants(search="%") == []
    assert _ids(store.list_restaurants(search="&")) == [4, 1]


def test_list_puts_null_sort_values_last(store):
    restaurant = Restaurant(restaurant_name="Unnamed Kitchen", area_id=3, cuisine=None, website=None)
    db.session.add(restaurant)
    db.session.flush()
    db.session.add(Rating(restaurant_id=restaurant.restaurant_id, rating=3))
    db.session.commit()

    for sort_by in ("cuisine", "website"):
        assert _ids(store.list_restaurants(sort_by=sort_by))[-1] == restaurant.restaurant_id


def test_list_invalid_sort_raises(store):
    with pytest.raises(InvalidSort):
        store.list_restaurants(sort_by="restaurant_id")


###############################
# create / update / delete
###############################
def test_create_returns_record_with_new_id(store):
    restaurant = store.create_restaurant({
        "restaurant_name": "McDonald's",
        "area_id": 2,
        "cuisine": "American",
        "website": "www.mcdonalds.com",
    })

    assert restaurant == {
        "restaurant_id": 7,
        "restaurant_name": "McDonald's",
        "area_id": 2,
        "cuisine": "American",
        "website": "www.mcdonalds.com",
    }


def test_create_ignores_client_supplied_id(store):
    restaurant = store.create_restaurant({
        "restaurant_id": 1,
        "restaurant_name": "Almost Famous",
        "area_id": 1,
        "cuisine": "Burgers",
        "website": "",
    })

    assert restaurant["restaurant_id"] == 7


def test_create_with_unknown_area_is_store_error(store):
    with pytest.raises(StoreError):
        store.create_restaurant({"restaurant_name": "Nowhere", "area_id": 99})

    # session is usable again after the rollback
    assert len(store.list_restaurants()) == 5


def test_update_changes_only_given_columns(store):
    restaurant = store.update_restaurant(1, {"area_id": 2, "restaurant_name": "Burger King"})

    assert restaurant == {
        "restaurant_id": 1,
        "restaurant_name": "Burger King",
        "area_id": 2,
        "cuisine": "Mexican",
        "website": "http://lucklustliquorburn.com/",
    }


def test_update_unknown_id_returns_none(store):
    assert store.update_restaurant(999, {"cuisine": "Thai"}) is None


def test_delete_returns_deleted_row(store):
    deleted = store.delete_restaurant(2)

    assert deleted["restaurant_name"] == "The Oast House"
    row = db.session.execute(
        text("SELECT restaurant_id FROM restaurants WHERE restaurant_id = :id"), {"id": 2}
    ).first()
    assert row is None


def test_delete_cascades_ratings(store):
    store.delete_restaurant(3)

    count = db.session.execute(
        text("SELECT COUNT(*) FROM ratings WHERE restaurant_id = :id"), {"id": 3}
    ).scalar()
    assert count == 0


def test_delete_unknown_id_returns_none(store):
    assert store.delete_restaurant(999) is None


###############################
# areas
###############################
def test_get_area(store):
    assert store.get_area(2) == {"area_id": 2, "area_name": "Ancoats"}
    assert store.get_area(99) is None


def test_list_restaurants_by_area_has_no_average_rating(store):
    restaurants = store.list_restaurants_by_area(2)

    assert _ids(restaurants) == [3, 5]
    assert all("average_rating" not in r for r in restaurants)


def test_list_restaurants_by_empty_area(store):
    assert store.list_restaurants_by_area(3) == []


###############################
# store failures
###############################
def test_database_failure_becomes_store_error(broken_session):
    broken = RestaurantStore(broken_session)

    with pytest.raises(StoreError) as excinfo:
        broken.list_restaurants()

    assert broken_session.rolled_back
    assert "connection lost" not in excinfo.value.message


def test_area_lookup_failure_becomes_store_error(broken_session):
    with pytest.raises(StoreError):
        RestaurantStore(broken_session).get_area(1)
