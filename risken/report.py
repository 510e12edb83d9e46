"""Report endpoints of the RISKEN API."""

from __future__ import annotations

from typing import Any

from risken.client import BaseClient, decode_body_with_data_key


class ReportAPI(BaseClient):
    """Finding reports aggregated over a date range."""

    def get_report_finding(self, req: Any) -> Any:
        """Return the finding report for a project and date range."""
        request = self.new_request("GET", "/api/v1/report/get-report", req)
        return decode_body_with_data_key(self.do(request))