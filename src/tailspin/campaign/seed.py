"""Initial campaign data and one-time seeding of a store."""

import logging
from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

from pydantic import ValidationError

from tailspin.config.loader import ConfigError, load_yaml

from .models import Campaign, CampaignDraft

if TYPE_CHECKING:
    from tailspin.config.models import WebConfig
    from tailspin.storage.base import CampaignStore

logger = logging.getLogger(__name__)


DEFAULT_CAMPAIGNS: List[CampaignDraft] = [
    CampaignDraft(
        name="AI-Powered Learning Assistant",
        description=(
            "Revolutionary educational toy that uses AI to adapt to each child's "
            "learning style. Featuring GitHub Copilot integration for coding "
            "activities and interactive STEM challenges."
        ),
        goal_amount=Decimal("50000"),
        current_amount=Decimal("42500"),
    ),
    CampaignDraft(
        name="Cloud-Native Robotics Kit",
        description=(
            "Build and program robots that connect to Azure cloud services. "
            "Perfect for teaching modern DevOps practices and cloud-first "
            "development to the next generation."
        ),
        goal_amount=Decimal("75000"),
        current_amount=Decimal("28750"),
    ),
    CampaignDraft(
        name="Live360 STEM Scholarship Fund",
        description=(
            "Supporting aspiring developers and IT professionals with conference "
            "attendance, training materials, and mentorship opportunities. "
            "Empowering the future of technology."
        ),
        goal_amount=Decimal("100000"),
        current_amount=Decimal("87500"),
    ),
    CampaignDraft(
        name="GitHub Copilot for Kids",
        description=(
            "Introducing young minds to AI-assisted programming with "
            "age-appropriate coding toys and interactive learning experiences. "
            "Making programming accessible and fun!"
        ),
        goal_amount=Decimal("25000"),
        current_amount=Decimal("25000"),
    ),
]


def seed_if_empty(
    store: "CampaignStore", dataset: Sequence[CampaignDraft]
) -> List[Campaign]:
    """Insert the dataset only when the store holds no campaigns.

    Args:
        store: Store to populate.
        dataset: Campaigns to insert, in order.

    Returns:
        The inserted campaigns, or an empty list if the store already had data.
    """
    existing = store.count()
    if existing > 0:
        logger.debug(f"Store already holds {existing} campaigns, skipping seed")
        return []

    inserted = store.insert_all(dataset)
    logger.info(f"Seeded {len(inserted)} campaigns")
    return inserted


def load_seed_file(path: Path) -> List[CampaignDraft]:
    """Load seed campaigns from a YAML file.

    The file holds either a list of campaign mappings or a mapping
    with a ``campaigns`` list.

    Raises:
        ConfigError: If the file is missing, malformed, or fails validation.
    """
    data = load_yaml(path)
    if isinstance(data, dict):
        if not data:
            return []
        if "campaigns" not in data:
            raise ConfigError(f"Seed file {path} has no 'campaigns' key")
        data = data["campaigns"]
    if not isinstance(data, list):
        raise ConfigError(f"Seed file {path} must contain a list of campaigns")

    drafts = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ConfigError(f"Campaign at index {i} in {path} must be a mapping")
        try:
            drafts.append(CampaignDraft(**entry))
        except ValidationError as e:
            raise ConfigError(f"Invalid campaign at index {i} in {path}: {e}") from e
    return drafts


def resolve_dataset(config: Optional["WebConfig"] = None) -> List[CampaignDraft]:
    """Seed dataset for a config: its seed file if set, else the defaults."""
    if config is not None and config.seed_file is not None:
        return load_seed_file(config.seed_file)
    return list(DEFAULT_CAMPAIGNS)
