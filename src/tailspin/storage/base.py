"""Abstract base class for campaign storage backends."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from tailspin.campaign.models import Campaign, CampaignDraft


class CampaignStore(ABC):
    """Abstract interface for storing and reading campaigns."""

    @abstractmethod
    def insert_all(self, drafts: Sequence[CampaignDraft]) -> List[Campaign]:
        """Store a batch of campaigns.

        Args:
            drafts: Campaigns without identifiers, in the order to store them.

        Returns:
            The stored campaigns with identifiers assigned, in input order.
        """

    @abstractmethod
    def find_by_id(self, campaign_id: int) -> Optional[Campaign]:
        """Retrieve a single campaign by ID.

        Returns:
            The campaign, or None if no campaign has that ID.
        """

    @abstractmethod
    def list_all(self) -> List[Campaign]:
        """List all stored campaigns in insertion order."""

    @abstractmethod
    def count(self) -> int:
        """Number of campaigns currently stored."""
