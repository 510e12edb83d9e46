"""Project endpoints of the RISKEN API."""

from __future__ import annotations

from typing import Any

from risken.client import BaseClient, decode_body_with_data_key


class ProjectAPI(BaseClient):
    """Projects and their tags."""

    def _fetch(self, method: str, path: str, req: Any) -> Any:
        return decode_body_with_data_key(self.do(self.new_request(method, path, req)))

    def _send(self, method: str, path: str, req: Any) -> None:
        self.do(self.new_request(method, path, req)).close()

    def list_project(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/project/list-project", req)

    def update_project(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/project/update-project", req)

    def delete_project(self, req: Any) -> None:
        self._send("POST", "/api/v1/project/delete-project", req)

    def tag_project(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/project/tag-project", req)

    def untag_project(self, req: Any) -> None:
        self._send("POST", "/api/v1/project/untag-project", req)