"""Campaigns blueprint — list and detail pages."""

from flask import Blueprint, flash, redirect, render_template, request, url_for

bp = Blueprint("campaigns", __name__)


@bp.route("/")
def list_campaigns():
    """Campaign list page."""
    from tailspin.web.app import get_store

    campaigns = get_store().list_all()
    return render_template("campaigns/list.html", campaigns=campaigns)


@bp.route("/campaign")
@bp.route("/campaign/<int(signed=True):campaign_id>")
def detail(campaign_id=None):
    """Campaign detail page. Unknown IDs go back to the list."""
    from tailspin.web.app import get_store

    if campaign_id is None:
        campaign_id = request.args.get("id", type=int)

    campaign = get_store().find_by_id(campaign_id) if campaign_id is not None else None
    if campaign is None:
        flash("Campaign not found", "error")
        return redirect(url_for("campaigns.list_campaigns"))

    return render_template("campaigns/detail.html", campaign=campaign)
