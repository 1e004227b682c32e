"""Samples: list advertisers under a partner, and fetch one advertiser."""

from __future__ import annotations

from typing import List, Tuple

from dv360_samples.config import Config
from dv360_samples.examples.base import BaseExample, ParameterDescriptor, RequestContext
from dv360_samples.utils.html import render_result_list


class ListAdvertisers(BaseExample):
    @classmethod
    def get_name(cls) -> str:
        return "List Advertisers"

    def get_input_parameters(self):
        return (
            ParameterDescriptor("partner_id", "Partner ID", required=True),
            ParameterDescriptor("page_size", "Page size"),
        )

    def run(self, ctx: RequestContext) -> str:
        page_size = int(self.form_values.get("page_size") or Config.DEFAULT_PAGE_SIZE)
        response = (
            self.service.advertisers()
            .list(partnerId=self.form_values["partner_id"], pageSize=page_size)
            .execute()
        )
        advertisers = response.get("advertisers") or []
        return render_result_list(
            f"Advertisers under partner {self.form_values['partner_id']}",
            [(a.get("displayName", ""), a.get("advertiserId", "")) for a in advertisers],
        )


class GetAdvertiser(BaseExample):
    @classmethod
    def get_name(cls) -> str:
        return "Get Advertiser"

    def get_input_parameters(self):
        return (ParameterDescriptor("advertiser_id", "Advertiser ID", required=True),)

    def run(self, ctx: RequestContext) -> str:
        advertiser = (
            self.service.advertisers()
            .get(advertiserId=self.form_values["advertiser_id"])
            .execute()
        )
        rows: List[Tuple[str, str]] = [
            ("Advertiser ID", advertiser.get("advertiserId", "")),
            ("Display name", advertiser.get("displayName", "")),
            ("Partner ID", advertiser.get("partnerId", "")),
            ("Entity status", advertiser.get("entityStatus", "")),
        ]
        return render_result_list("Advertiser", rows)
