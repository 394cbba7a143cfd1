"""Campaign records and seeding."""

from .models import Campaign, CampaignDraft
from .seed import DEFAULT_CAMPAIGNS, load_seed_file, resolve_dataset, seed_if_empty

__all__ = [
    "Campaign",
    "CampaignDraft",
    "DEFAULT_CAMPAIGNS",
    "load_seed_file",
    "resolve_dataset",
    "seed_if_empty",
]
