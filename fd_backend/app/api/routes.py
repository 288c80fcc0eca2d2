"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from fd_backend.core.compounding import calculate
from fd_backend.core.display import form_options, summarize
from fd_backend.schemas.ping import ErrorResponse, PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong")
    return jsonify(response.model_dump())


@api_bp.get("/deposit/options")
def deposit_options() -> Any:
    """Default form values and the selectable compounding frequencies."""
    return jsonify(form_options().model_dump(mode="json"))


@api_bp.post("/deposit/calculate")
def deposit_calculate() -> Any:
    """Validate the submitted form and return the deposit summary."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        response = ErrorResponse(detail="Request body must be a JSON object.")
        return jsonify(response.model_dump(mode="json")), HTTPStatus.BAD_REQUEST

    outcome = calculate(payload)
    if not outcome.ok:
        logger.info("Deposit calculation rejected: %d field error(s)", len(outcome.errors))
        response = ErrorResponse(detail=outcome.errors)
        return jsonify(response.model_dump(mode="json")), HTTPStatus.UNPROCESSABLE_ENTITY

    summary = summarize(outcome.request, outcome.value)
    return current_app.response_class(summary.model_dump_json(), mimetype="application/json")
