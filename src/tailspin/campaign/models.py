"""Pydantic models for fundraising campaigns."""

from decimal import ROUND_FLOOR, Decimal

from pydantic import BaseModel, Field


class CampaignDraft(BaseModel):
    """A campaign that has not been stored yet (no identifier)."""

    name: str = Field(min_length=1)
    description: str = ""
    goal_amount: Decimal = Field(default=Decimal("0"), ge=0)
    current_amount: Decimal = Field(default=Decimal("0"), ge=0)


class Campaign(CampaignDraft):
    """A stored campaign. The id is assigned by the store on insertion."""

    id: int

    @property
    def percent_funded(self) -> int:
        """Whole percent of the goal raised so far. May exceed 100."""
        if self.goal_amount == 0:
            return 0
        ratio = self.current_amount * 100 / self.goal_amount
        return int(ratio.to_integral_value(rounding=ROUND_FLOOR))

    @property
    def is_funded(self) -> bool:
        return self.goal_amount > 0 and self.current_amount >= self.goal_amount

    @classmethod
    def from_draft(cls, draft: CampaignDraft, campaign_id: int) -> "Campaign":
        """Build a stored campaign. Any id already on the draft is replaced."""
        return cls(id=campaign_id, **draft.model_dump(exclude={"id"}))
