"""Sample registry.

Maps the ``action`` query parameter to a sample class. The order here is
the order of the links on the index page.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from dv360_samples.examples.advertisers import GetAdvertiser, ListAdvertisers
from dv360_samples.examples.assets import UploadCreativeAsset
from dv360_samples.examples.base import (
    BaseExample,
    ExampleRunner,
    ParameterDescriptor,
    RequestContext,
)
from dv360_samples.examples.campaigns import ListCampaigns
from dv360_samples.examples.partners import ListPartners

EXAMPLES: Dict[str, Type[BaseExample]] = {
    "list_partners": ListPartners,
    "list_advertisers": ListAdvertisers,
    "get_advertiser": GetAdvertiser,
    "list_campaigns": ListCampaigns,
    "upload_creative_asset": UploadCreativeAsset,
}


def get_example_class(action: Optional[str]) -> Optional[Type[BaseExample]]:
    if not action:
        return None
    return EXAMPLES.get(action)


__all__ = [
    "BaseExample",
    "EXAMPLES",
    "ExampleRunner",
    "ParameterDescriptor",
    "RequestContext",
    "get_example_class",
]
