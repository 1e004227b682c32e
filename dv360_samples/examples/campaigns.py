"""Sample: list campaigns of an advertiser, optionally filtered."""

from __future__ import annotations

from typing import Any, Dict

from dv360_samples.examples.base import BaseExample, ParameterDescriptor, RequestContext
from dv360_samples.utils.html import render_result_list


class ListCampaigns(BaseExample):
    @classmethod
    def get_name(cls) -> str:
        return "List Campaigns"

    def get_input_parameters(self):
        return (
            ParameterDescriptor("advertiser_id", "Advertiser ID", required=True),
            # e.g. entityStatus="ENTITY_STATUS_ACTIVE"
            ParameterDescriptor("filter", "Filter"),
        )

    def run(self, ctx: RequestContext) -> str:
        kwargs: Dict[str, Any] = {"advertiserId": self.form_values["advertiser_id"]}
        if self.form_values.get("filter"):
            kwargs["filter"] = self.form_values["filter"]

        campaigns = []
        api = self.service.advertisers().campaigns()
        request = api.list(**kwargs)
        # list_next returns None after the last page
        while request is not None:
            response = request.execute()
            campaigns.extend(response.get("campaigns") or [])
            request = api.list_next(request, response)

        return render_result_list(
            "Campaigns",
            [(c.get("displayName", ""), c.get("campaignId", "")) for c in campaigns],
        )
