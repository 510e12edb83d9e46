"""HTTP client core for the RISKEN API: requests, responses and errors."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Any

import requests

VERSION = "0.0.1"
USER_AGENT = f"risken/{VERSION}"
ACCEPT_HEADER = "application/json"
CONTENT_TYPE_HEADER = "application/json"

_SCALARS = (str, int, float, bool, Enum)


class APIError(Exception):
    """An error response returned by the API."""

    def __init__(self, status: int, message: str = "") -> None:
        super().__init__(status, message)
        self.status = status
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return self.message
        return f"HTTP response with status code {self.status}"


@dataclass
class SigninResponse:
    """Result of a successful sign-in."""

    project_id: int = 0
    access_token_id: int = 0


def _named_values(param: Any):
    if is_dataclass(param) and not isinstance(param, type):
        return [(f.name, getattr(param, f.name)) for f in fields(param)]
    if isinstance(param, Mapping):
        return list(param.items())
    raise TypeError(f"expected a dataclass or a mapping, got {type(param).__name__}")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def _is_zero_scalar(value: Any) -> bool:
    if isinstance(value, Enum):
        return isinstance(value, int) and value == 0
    return not value


def struct_to_query_params(param: Any) -> dict[str, list[str]]:
    """Turn a request object into query parameters, sorted by name.

    Sequences add one value per element; scalar fields are added only when
    they are not zero values; anything else is skipped.
    """
    params: dict[str, list[str]] = {}
    for name, value in _named_values(param):
        if not name or name == "-" or value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                params.setdefault(name, []).append(_format_value(item))
        elif isinstance(value, _SCALARS):
            if not _is_zero_scalar(value):
                params.setdefault(name, []).append(_format_value(value))
    return dict(sorted(params.items()))


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Enum):
        return isinstance(value, int) and value == 0
    if isinstance(value, (str, int, float, bool, list, tuple, dict)):
        return not value
    return False


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_jsonable(getattr(value, f.name))
            for f in fields(value)
            if not _is_empty(getattr(value, f.name))
        }
    if isinstance(value, Mapping):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def struct_to_json_request_body(param: Any) -> bytes:
    """Serialise a request object as a compact JSON body."""
    return json.dumps(_to_jsonable(param), separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def decode_body(response: requests.Response) -> Any:
    """Decode the JSON body of a response."""
    try:
        return response.json()
    finally:
        response.close()


def decode_body_with_data_key(response: requests.Response) -> Any:
    """Decode a JSON body and return the value under its "data" key."""
    payload = decode_body(response)
    if not isinstance(payload, Mapping) or "data" not in payload:
        raise ValueError("response body has no data key")
    data = payload["data"]
    return {} if data is None else data


def _error_from_response(response: requests.Response) -> APIError:
    status = response.status_code
    content_type = response.headers.get("Content-Type", "")
    if not content_type.startswith("application/json"):
        response.close()
        return APIError(status, f"HTTP response with status code {status}")
    try:
        payload = decode_body(response)
        if not isinstance(payload, Mapping):
            raise ValueError("error object is not a JSON object")
        body_status = payload.get("status", status)
        message = payload.get("error", "")
        if not isinstance(body_status, int) or not isinstance(message, str):
            raise ValueError("error object has fields of the wrong type")
    except ValueError as exc:
        return APIError(
            status,
            f"HTTP response with status code {status}, JSON error object decode failed: {exc}",
        )
    return APIError(body_status, message)


class BaseClient:
    """Builds, sends and checks requests against the RISKEN API."""

    def __init__(
        self,
        api_token: str,
        api_endpoint: str = "",
        http_client: Any = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.api_token = api_token
        self.api_endpoint = api_endpoint
        self.http_client = http_client if http_client is not None else requests.Session()
        self.logger = logger if logger is not None else logging.getLogger("risken")

    def new_request(self, method: str, path: str, param: Any = None) -> requests.Request:
        """Build a GET request with query parameters or a POST request with a JSON body."""
        url = self.api_endpoint + path
        if method == "GET":
            params = struct_to_query_params(param) if param is not None else {}
            return requests.Request("GET", url, params=params)
        if method == "POST":
            body = struct_to_json_request_body(param) if param is not None else b""
            return requests.Request("POST", url, data=body)
        raise ValueError(f"invalid method: {method}")

    def _prepare(self, request: requests.Request) -> requests.PreparedRequest:
        request.headers.update(
            {
                "Accept": ACCEPT_HEADER,
                "Authorization": f"Bearer {self.api_token}",
                "User-Agent": USER_AGENT,
                "Content-Type": CONTENT_TYPE_HEADER,
            }
        )
        if isinstance(request.params, Mapping):
            request.params = dict(sorted(request.params.items()))
        return request.prepare()

    def do(self, request: requests.Request) -> requests.Response:
        """Send a request and return its response, raising on failure."""
        prepared = self._prepare(request)
        try:
            response = self.http_client.send(prepared)
        except requests.RequestException as exc:
            raise ConnectionError(f"error calling the API endpoint: {exc}") from exc
        if not 200 <= response.status_code <= 299:
            raise _error_from_response(response)
        return response

    def signin(self) -> SigninResponse:
        """Sign in with the API token and return the project it belongs to."""
        response = self.do(self.new_request("GET", "/api/v1/signin"))
        payload = decode_body(response)
        if not isinstance(payload, Mapping):
            raise ValueError("signin response is not a JSON object")
        return SigninResponse(
            project_id=payload.get("project_id", 0) or 0,
            access_token_id=payload.get("access_token_id", 0) or 0,
        )