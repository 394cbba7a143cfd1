"""Health and version API endpoints."""

from flask import Blueprint, jsonify

from tailspin import __version__

bp = Blueprint("api_health", __name__)


@bp.route("/api/v1/health")
def health():
    """Health check endpoint."""
    from tailspin.web.app import get_store

    return jsonify({"status": "ok", "campaigns": get_store().count()})


@bp.route("/api/v1/version")
def version():
    """Version info endpoint."""
    return jsonify(
        {
            "version": __version__,
            "api_version": "v1",
            "name": "Tailspin Toys",
        }
    )
