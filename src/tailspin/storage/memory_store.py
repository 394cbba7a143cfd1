"""In-process campaign store."""

import logging
from typing import Dict, List, Optional, Sequence

from tailspin.campaign.models import Campaign, CampaignDraft

from .base import CampaignStore

logger = logging.getLogger(__name__)


class MemoryStore(CampaignStore):
    """Campaign store backed by a dict that lives as long as the process.

    Identifiers start at 1 and increase by one per inserted campaign.
    Reads return copies, so callers never hold the store's own records.
    """

    def __init__(self) -> None:
        self._campaigns: Dict[int, Campaign] = {}
        self._next_id = 1

    def insert_all(self, drafts: Sequence[CampaignDraft]) -> List[Campaign]:
        inserted: List[Campaign] = []
        for draft in drafts:
            campaign = Campaign.from_draft(draft, self._next_id)
            self._campaigns[campaign.id] = campaign
            self._next_id += 1
            inserted.append(campaign.model_copy())

        logger.debug(f"Inserted {len(inserted)} campaigns (total {len(self._campaigns)})")
        return inserted

    def find_by_id(self, campaign_id: int) -> Optional[Campaign]:
        campaign = self._campaigns.get(campaign_id)
        if campaign is None:
            return None
        return campaign.model_copy()

    def list_all(self) -> List[Campaign]:
        return [c.model_copy() for c in self._campaigns.values()]

    def count(self) -> int:
        return len(self._campaigns)
