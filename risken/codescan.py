"""Source code scanning endpoints of the RISKEN API."""

from __future__ import annotations

from typing import Any

from risken.client import BaseClient, decode_body_with_data_key


class CodeAPI(BaseClient):
    """GitHub settings and the gitleaks, dependency and code scans run on them."""

    def _fetch(self, method: str, path: str, req: Any) -> Any:
        return decode_body_with_data_key(self.do(self.new_request(method, path, req)))

    def _send(self, method: str, path: str, req: Any) -> None:
        self.do(self.new_request(method, path, req)).close()

    def list_code_data_source(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/code/list-datasource", req)

    def list_github_setting(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/code/list-github-setting", req)

    def list_gitleaks_cache(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/code/list-gitleaks-cache", req)

    def put_github_setting(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/code/put-github-setting", req)

    def delete_github_setting(self, req: Any) -> None:
        self._send("POST", "/api/v1/code/delete-github-setting", req)

    def put_gitleaks_setting(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/code/put-gitleaks-setting", req)

    def delete_gitleaks_setting(self, req: Any) -> None:
        self._send("POST", "/api/v1/code/delete-gitleaks-setting", req)

    def put_dependency_setting(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/code/put-dependency-setting", req)

    def delete_dependency_setting(self, req: Any) -> None:
        self._send("POST", "/api/v1/code/delete-dependency-setting", req)

    def put_code_scan_setting(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/code/put-code-scan-setting", req)

    def delete_code_scan_setting(self, req: Any) -> None:
        self._send("POST", "/api/v1/code/delete-code-scan-setting", req)

    def invoke_scan_gitleaks(self, req: Any) -> None:
        self._send("POST", "/api/v1/code/invoke-scan-gitleaks", req)

    def invoke_scan_dependency(self, req: Any) -> None:
        self._send("POST", "/api/v1/code/invoke-scan-dependency", req)

    def invoke_scan_code_scan(self, req: Any) -> None:
        self._send("POST", "/api/v1/code/invoke-scan-code-scan", req)