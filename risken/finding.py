"""Finding and resource endpoints of the RISKEN API."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Any

from risken.client import BaseClient, decode_body_with_data_key


class FindingStatus(IntEnum):
    """Filter on the state of findings."""

    FINDING_UNKNOWN = 0
    FINDING_ACTIVE = 1
    FINDING_PENDING = 2


_STATUS_QUERY = {
    FindingStatus.FINDING_UNKNOWN: "0",
    FindingStatus.FINDING_ACTIVE: "1",
    FindingStatus.FINDING_PENDING: "2",
}
_DEFAULT_STATUS_QUERY = "1"


def _field(req: Any, name: str) -> Any:
    if isinstance(req, Mapping):
        return req.get(name)
    return getattr(req, name, None)


def _coerce_status(value: Any) -> FindingStatus | None:
    if value is None:
        return FindingStatus.FINDING_UNKNOWN
    try:
        if isinstance(value, str):
            return FindingStatus[value]
        return FindingStatus(value)
    except (KeyError, ValueError):
        return None


class FindingAPI(BaseClient):
    """Findings, resources, tags, pending findings, settings and recommendations."""

    def _fetch(self, method: str, path: str, req: Any) -> Any:
        return decode_body_with_data_key(self.do(self.new_request(method, path, req)))

    def _send(self, method: str, path: str, req: Any) -> None:
        self.do(self.new_request(method, path, req)).close()

    def list_finding(self, req: Any) -> Any:
        """List findings; an unset status lists all, an unrecognised one lists active."""
        request = self.new_request("GET", "/api/v1/finding/list-finding", req)
        status = _coerce_status(_field(req, "status"))
        request.params["status"] = [_STATUS_QUERY.get(status, _DEFAULT_STATUS_QUERY)]
        return decode_body_with_data_key(self.do(request))

    def get_finding(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/get-finding", req)

    def list_finding_tag(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/list-finding-tag", req)

    def list_finding_tag_name(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/list-finding-tag-name", req)

    def list_resource(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/list-resource", req)

    def list_resource_tag(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/list-resource-tag", req)

    def list_resource_tag_name(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/list-resource-tag-name", req)

    def get_resource(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/get-resource", req)

    def get_pend_finding(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/get-pend-finding", req)

    def list_finding_setting(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/list-finding-setting", req)

    def get_recommend(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/get-recommend", req)

    def get_ai_summary(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/finding/get-ai-summary", req)

    def put_finding(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/finding/put-finding", req)

    def delete_finding(self, req: Any) -> None:
        self._send("POST", "/api/v1/finding/delete-finding", req)

    def tag_finding(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/finding/tag-finding", req)

    def untag_finding(self, req: Any) -> None:
        self._send("POST", "/api/v1/finding/untag-finding", req)

    def put_resource(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/finding/put-resource", req)

    def delete_resource(self, req: Any) -> None:
        self._send("POST", "/api/v1/finding/delete-resource", req)

    def put_pend_finding(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/finding/put-pend-finding", req)

    def delete_pend_finding(self, req: Any) -> None:
        self._send("POST", "/api/v1/finding/delete-pend-finding", req)

    def put_finding_setting(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/finding/put-finding-setting", req)

    def delete_finding_setting(self, req: Any) -> None:
        self._send("POST", "/api/v1/finding/delete-finding-setting", req)

    def put_recommend(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/finding/put-recommend", req)