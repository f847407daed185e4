"""Helpers shared by the Flask controllers."""

from __future__ import annotations

import logging
from datetime import date
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError, DomainError, PolicyError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if session.get("role") != "admin":
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def parse_date_arg(value: str | None, *, default: date | None) -> date | None:
    if not value:
        return default
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}") from None


def register_error_handlers(app: Flask) -> None:
    """Refusals become ``{"success": false, "message": ...}``; nothing was changed."""

    @app.errorhandler(AuthenticationError)
    def _auth_error(e: AuthenticationError):
        return jsonify({"success": False, "message": str(e)}), 401

    @app.errorhandler(PolicyError)
    def _policy_error(e: PolicyError):
        return jsonify({"success": False, "message": str(e)}), 409

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return jsonify({"success": False, "message": str(e)}), 400
