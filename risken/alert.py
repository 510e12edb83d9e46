"""Alert endpoints of the RISKEN API."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Any

from risken.client import BaseClient, decode_body_with_data_key


class AlertStatus(IntEnum):
    """Lifecycle state of an alert."""

    UNKNOWN = 0
    ACTIVE = 1
    PENDING = 2
    DEACTIVE = 3


_STATUS_QUERY = {
    AlertStatus.ACTIVE: "1",
    AlertStatus.PENDING: "2",
    AlertStatus.DEACTIVE: "3",
}


def _field(req: Any, name: str) -> Any:
    if isinstance(req, Mapping):
        return req.get(name)
    return getattr(req, name, None)


def _coerce_status(value: Any) -> AlertStatus | None:
    try:
        if isinstance(value, str):
            return AlertStatus[value]
        return AlertStatus(value)
    except (KeyError, ValueError):
        return None


class AlertAPI(BaseClient):
    """Alerts, alert conditions, rules and notifications."""

    def _fetch(self, method: str, path: str, req: Any) -> Any:
        return decode_body_with_data_key(self.do(self.new_request(method, path, req)))

    def _send(self, method: str, path: str, req: Any) -> None:
        self.do(self.new_request(method, path, req)).close()

    def list_alert(self, req: Any) -> Any:
        """List alerts; without a status filter only active alerts are listed."""
        request = self.new_request("GET", "/api/v1/alert/list-alert", req)
        statuses = _field(req, "status")
        if statuses is None:
            request.params["status"] = ["1"]
        else:
            if not isinstance(statuses, (list, tuple)):
                statuses = [statuses]
            for status in statuses:
                code = _STATUS_QUERY.get(_coerce_status(status))
                if code is not None:
                    request.params["status"] = [code]
        return decode_body_with_data_key(self.do(request))

    def list_alert_history(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/alert/list-history", req)

    def list_rel_alert_finding(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/alert/list-rel_alert_finding", req)

    def list_alert_condition(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/alert/list-condition", req)

    def list_alert_rule(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/alert/list-rule", req)

    def list_alert_cond_rule(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/alert/list-condition_rule", req)

    def list_notification(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/alert/list-notification", req)

    def list_alert_cond_notification(self, req: Any) -> Any:
        return self._fetch("GET", "/api/v1/alert/list-condition_notification", req)

    def put_alert(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/alert/put-alert", req)

    def put_alert_first_viewed_at(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/put-alert-first-viewed-at", req)

    def put_alert_condition(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/alert/put-condition", req)

    def put_alert_rule(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/alert/put-rule", req)

    def put_alert_cond_rule(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/alert/put-condition_rule", req)

    def put_notification(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/alert/put-notification", req)

    def put_alert_cond_notification(self, req: Any) -> Any:
        return self._fetch("POST", "/api/v1/alert/put-condition_notification", req)

    def delete_alert_condition(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/delete-condition", req)

    def delete_alert_rule(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/delete-rule", req)

    def delete_alert_cond_rule(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/delete-condition_rule", req)

    def delete_notification(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/delete-notification", req)

    def delete_alert_cond_notification(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/delete-condition_notification", req)

    def analyze_alert(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/analyze-alert", req)

    def test_notification(self, req: Any) -> None:
        self._send("POST", "/api/v1/alert/test-notification", req)