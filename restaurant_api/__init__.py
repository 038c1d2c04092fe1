import logging

from flask import Flask, jsonify

from .config import Config
from .extensions import db, cors
from .store import RestaurantStore
from . import errors, seed


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.getLogger(__name__).setLevel(app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)

    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": app.config["CORS_ORIGINS"],
                "methods": ["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
                "allow_headers": ["Content-Type"]
            }},
    )

    # Import models so SQLAlchemy knows them
    from . import models  # noqa: F401

    app.extensions["restaurant_store"] = RestaurantStore(db.session)

    errors.init_app(app)
    seed.init_app(app)

    from .routes import IdConverter
    app.url_map.converters["id"] = IdConverter

    # Register blueprints
    from .routes.restaurants import bp as restaurants_bp
    from .routes.areas import bp as areas_bp

    app.register_blueprint(restaurants_bp, url_prefix="/api/restaurants")
    app.register_blueprint(areas_bp, url_prefix="/api/areas")

    @app.get("/api")
    def index():
        return jsonify(message="all ok"), 200

    @app.get("/api/health")
    def health():
        db.session.execute(db.text("SELECT 1"))
        return jsonify(status="ok")

    return app
