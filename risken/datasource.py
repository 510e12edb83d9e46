"""Cross data source analysis endpoints of the RISKEN API."""

from __future__ import annotations

from typing import Any

from risken.client import BaseClient, decode_body_with_data_key


class DataSourceAPI(BaseClient):
    """Analyses spanning several data sources."""

    def analyze_attack_flow(self, req: Any) -> Any:
        """Return the attack flow analysis for a cloud resource."""
        request = self.new_request("GET", "/api/v1/datasource/get-attack-flow-analysis", req)
        return decode_body_with_data_key(self.do(request))