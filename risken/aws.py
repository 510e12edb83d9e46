"""AWS data source endpoints of the RISKEN API."""

from __future__ import annotations

from typing import Any

from risken.client import BaseClient, decode_body_with_data_key


class AWSAPI(BaseClient):
    """AWS accounts and their data sources."""

    def _fetch(self, method: str, path: str, req: Any) -> Any:
        return decode_body_with_data_key(self.do(self.new_request(method, path, req)))

    def _send(self, method: str, path: str, req: Any) -> None:
        self.do(self.new_request(method, path, req)).close()

    def list_aws(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/aws/list-aws", req)

    def list_data_source(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/aws/list-datasource", req)

    def put_aws(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/aws/put-aws", req)

    def delete_aws(self, req: Any) -> None:
        self._send("POST", "/api/v1/aws/delete-aws", req)

    def invoke_scan(self, req: Any) -> None:
        self._send("POST", "/api/v1/aws/invoke-scan", req)

    def attach_data_source(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/aws/attach-datasource", req)

    def detach_data_source(self, req: Any) -> None:
        self._send("POST", "/api/v1/aws/detach-datasource", req)