"""Tests for campaign Pydantic models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from tailspin.campaign.models import Campaign, CampaignDraft


class TestCampaignDraft:
    def test_minimal(self):
        draft = CampaignDraft(name="Sky Surfer")
        assert draft.description == ""
        assert draft.goal_amount == Decimal("0")
        assert draft.current_amount == Decimal("0")

    def test_amounts_parsed_as_decimal(self):
        draft = CampaignDraft(name="Sky Surfer", goal_amount=5000, current_amount="1200.50")
        assert isinstance(draft.goal_amount, Decimal)
        assert draft.current_amount == Decimal("1200.50")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            CampaignDraft(name="")

    def test_negative_amounts_rejected(self):
        with pytest.raises(ValidationError):
            CampaignDraft(name="x", goal_amount=-1)
        with pytest.raises(ValidationError):
            CampaignDraft(name="x", current_amount=-0.01)


class TestCampaign:
    def test_from_draft(self):
        draft = CampaignDraft(name="RoboRacer", goal_amount=8000, current_amount=3500)
        campaign = Campaign.from_draft(draft, 7)
        assert campaign.id == 7
        assert campaign.name == "RoboRacer"
        assert campaign.goal_amount == Decimal("8000")

    def test_percent_funded_rounds_down(self):
        c = Campaign(id=1, name="x", goal_amount=3, current_amount=2)
        assert c.percent_funded == 66

    def test_percent_funded_zero_goal(self):
        c = Campaign(id=1, name="x", goal_amount=0, current_amount=100)
        assert c.percent_funded == 0
        assert c.is_funded is False

    def test_current_may_exceed_goal(self):
        c = Campaign(id=1, name="x", goal_amount=100, current_amount=250)
        assert c.percent_funded == 250
        assert c.is_funded is True

    def test_exactly_funded(self):
        c = Campaign(id=1, name="x", goal_amount=25000, current_amount=25000)
        assert c.percent_funded == 100
        assert c.is_funded is True

    def test_partially_funded(self):
        c = Campaign(id=1, name="x", goal_amount=5000, current_amount=1200)
        assert c.percent_funded == 24
        assert c.is_funded is False
