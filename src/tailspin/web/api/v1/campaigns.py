"""Campaign REST API endpoints (read-only)."""

import logging

from flask import Blueprint, jsonify

from tailspin.campaign.models import Campaign

logger = logging.getLogger(__name__)

bp = Blueprint("api_campaigns", __name__, url_prefix="/api/v1/campaigns")


def _get_store():
    from tailspin.web.app import get_store

    return get_store()


def campaign_to_json(campaign: Campaign) -> dict:
    data = campaign.model_dump(mode="json")
    data["percent_funded"] = campaign.percent_funded
    data["is_funded"] = campaign.is_funded
    return data


@bp.route("/", methods=["GET"])
def list_campaigns():
    """List all campaigns in insertion order."""
    campaigns = _get_store().list_all()
    return jsonify(
        {
            "items": [campaign_to_json(c) for c in campaigns],
            "total": len(campaigns),
        }
    )


@bp.route("/<int:campaign_id>", methods=["GET"])
def get_campaign(campaign_id):
    """Get a single campaign."""
    campaign = _get_store().find_by_id(campaign_id)
    if campaign is None:
        logger.debug(f"Campaign {campaign_id} not found")
        return jsonify({"error": "Campaign not found"}), 404
    return jsonify(campaign_to_json(campaign))
