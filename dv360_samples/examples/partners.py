"""Sample: list the partners the service account can access."""

from __future__ import annotations

from dv360_samples.config import Config
from dv360_samples.examples.base import BaseExample, RequestContext
from dv360_samples.utils.html import render_result_list


class ListPartners(BaseExample):
    @classmethod
    def get_name(cls) -> str:
        return "List Partners"

    def run(self, ctx: RequestContext) -> str:
        response = self.service.partners().list(pageSize=Config.DEFAULT_PAGE_SIZE).execute()
        partners = response.get("partners") or []
        return render_result_list(
            "Partners",
            [(p.get("displayName", ""), p.get("partnerId", "")) for p in partners],
        )
