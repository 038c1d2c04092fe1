"""Exception types raised by the API and the single place they become responses."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_response(self):
        return jsonify({"message": self.message}), self.status_code


class ValidationError(ApiError):
    status_code = 400
    message = "Bad request"


class NoUpdatableFields(ValidationError):
    message = "No updatable fields supplied"

    def to_response(self):
        return "", self.status_code


class InvalidSort(ValidationError):
    def __init__(self, sort_by):
        super().__init__(f"Invalid sort_by value: {sort_by!r}")
        self.sort_by = sort_by


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class AreaNotFound(NotFound):
    def __init__(self, area_id):
        super().__init__(f"Area {area_id} not found")
        self.area_id = area_id


class RestaurantNotFound(NotFound):
    def __init__(self, restaurant_id):
        super().__init__(f"Restaurant {restaurant_id} not found")
        self.restaurant_id = restaurant_id


class StoreError(ApiError):
    """A failure in the backing database. Detail is logged, never returned."""


def handle_api_error(error: ApiError):
    return error.to_response()


def handle_http_exception(error: HTTPException):
    status_code = error.code if error.code is not None else 500
    return jsonify({"message": error.description or "HTTP error occurred"}), status_code


def handle_exception(error: Exception):
    logger.error("Unhandled exception: %s", error, exc_info=True)
    return jsonify({"message": "Internal server error"}), 500


def init_app(app: Flask) -> None:
    app.register_error_handler(ApiError, handle_api_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_exception)
