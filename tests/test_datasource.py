from urllib.parse import parse_qs, urlparse

import pytest
import responses

from risken.client import APIError
from risken.datasource import DataSourceAPI

ENDPOINT = "http://localhost:8001"
PATH = "/api/v1/datasource/get-attack-flow-analysis"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def make_client():
    return DataSourceAPI("token", ENDPOINT)


def test_analyze_attack_flow_sends_query(rsps):
    payload = {"nodes": [{"resource_name": "arn:aws:s3:::bucket-name"}], "edges": []}
    rsps.add(responses.GET, ENDPOINT + PATH, json={"data": payload})
    req = {
        "project_id": 1,
        "cloud_type": "aws",
        "cloud_id": "123456789012",
        "resource_name": "arn:aws:s3:::bucket-name",
    }
    result = make_client().analyze_attack_flow(req)
    assert result == payload
    call = rsps.calls[0]
    assert call.request.method == "GET"
    assert parse_qs(urlparse(call.request.url).query) == {
        "cloud_id": ["123456789012"],
        "cloud_type": ["aws"],
        "project_id": ["1"],
        "resource_name": ["arn:aws:s3:::bucket-name"],
    }


def test_null_data_decodes_to_empty(rsps):
    rsps.add(responses.GET, ENDPOINT + PATH, json={"data": None})
    assert make_client().analyze_attack_flow({"project_id": 1}) == {}


def test_error_is_raised(rsps):
    rsps.add(
        responses.GET,
        ENDPOINT + PATH,
        json={"status": 400, "error": "bad request"},
        status=400,
    )
    with pytest.raises(APIError) as exc_info:
        make_client().analyze_attack_flow({"project_id": 1})
    assert exc_info.value.status == 400
    assert exc_info.value.message == "bad request"