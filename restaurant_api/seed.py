# restaurant_api/seed.py
import logging

import click
from flask import Flask
from flask.cli import with_appcontext

from .extensions import db
from .models import Area, Rating, Restaurant

logger = logging.getLogger(__name__)

AREAS = [
    {"area_name": "Northern Quarter"},
    {"area_name": "Ancoats"},
    {"area_name": "Didsbury"},
]

RESTAURANTS = [
    {
        "restaurant_name": "Luck Lust Liquor & Burn",
        "area_id": 1,
        "cuisine": "Mexican",
        "website": "http://lucklustliquorburn.com/",
    },
    {
        "restaurant_name": "The Oast House",
        "area_id": 1,
        "cuisine": "Pub",
        "website": "",
    },
    {
        "restaurant_name": "Rudys Pizza",
        "area_id": 2,
        "cuisine": "Neapolitan Pizzeria",
        "website": "http://rudyspizza.co.uk/",
    },
    {
        "restaurant_name": "This & That",
        "area_id": 1,
        "cuisine": "Rice and Three",
        "website": "http://www.thisandthatcafe.co.uk/",
    },
    {
        "restaurant_name": "Pieminister",
        "area_id": 2,
        "cuisine": "Pies And More Pies",
        "website": "",
    },
    # no ratings
    {
        "restaurant_name": "Mowgli",
        "area_id": 1,
        "cuisine": "Indian street food",
        "website": "http://www.mowglistreetfood.com/",
    },
]

# (restaurant_id, rating)
RATINGS = [
    (1, 5), (1, 4),
    (2, 3),
    (3, 5), (3, 5), (3, 4),
    (4, 2), (4, 4),
    (5, 4),
]


def seed_database():
    """Drop and recreate every table, then load the sample data."""
    db.drop_all()
    db.create_all()

    # ids in RESTAURANTS and RATINGS are 1-based positions in the lists above
    areas = []
    for area in AREAS:
        areas.append(Area(**area))
        db.session.add(areas[-1])
        db.session.flush()

    restaurants = []
    for restaurant in RESTAURANTS:
        fields = dict(restaurant, area_id=areas[restaurant["area_id"] - 1].area_id)
        restaurants.append(Restaurant(**fields))
        db.session.add(restaurants[-1])
        db.session.flush()

    db.session.add_all(
        Rating(restaurant_id=restaurants[position - 1].restaurant_id, rating=rating)
        for position, rating in RATINGS
    )
    db.session.commit()

    logger.info(
        "Seeded %d areas, %d restaurants, %d ratings",
        len(AREAS), len(RESTAURANTS), len(RATINGS),
    )


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    db.create_all()
    click.echo("Initialized the database.")


@click.command("seed-db")
@with_appcontext
def seed_db_command():
    """Reset the database to the sample data set."""
    seed_database()
    click.echo("Seeded the database.")


def init_app(app: Flask) -> None:
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_db_command)
