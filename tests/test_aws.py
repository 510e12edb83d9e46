import json
from dataclasses import dataclass
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from risken.aws import AWSAPI
from risken.client import APIError

ENDPOINT = "http://localhost:8001"


@dataclass
class ListAWSRequest:
    project_id: int = 0
    aws_id: int = 0
    aws_account_id: str = ""


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def make_client():
    return AWSAPI("token", ENDPOINT)


def test_list_aws_skips_zero_fields(rsps):
    payload = {"aws": [{"aws_id": 2}]}
    rsps.add(responses.GET, f"{ENDPOINT}/api/v1/aws/list-aws", json={"data": payload})
    result = make_client().list_aws(ListAWSRequest(project_id=5))
    assert result == payload
    query = parse_qs(urlparse(rsps.calls[0].request.url).query)
    assert query == {"project_id": ["5"]}


def test_list_data_source(rsps):
    payload = {"data_source": [{"aws_data_source_id": 1}]}
    rsps.add(responses.GET, f"{ENDPOINT}/api/v1/aws/list-datasource", json={"data": payload})
    assert make_client().list_data_source({"project_id": 5, "aws_id": 2}) == payload
    query = parse_qs(urlparse(rsps.calls[0].request.url).query)
    assert query == {"aws_id": ["2"], "project_id": ["5"]}


@pytest.mark.parametrize(
    "method, path",
    [
        ("put_aws", "/api/v1/aws/put-aws"),
        ("attach_data_source", "/api/v1/aws/attach-datasource"),
    ],
)
def test_post_with_response(rsps, method, path):
    payload = {"aws": {"aws_id": 11}}
    rsps.add(responses.POST, ENDPOINT + path, json={"data": payload})
    req = {"project_id": 5, "aws": {"name": "test", "aws_account_id": "123456789012"}}
    assert getattr(make_client(), method)(req) == payload
    call = rsps.calls[0]
    assert json.loads(call.request.body) == req
    assert call.request.headers["Accept"] == "application/json"


@pytest.mark.parametrize(
    "method, path",
    [
        ("delete_aws", "/api/v1/aws/delete-aws"),
        ("invoke_scan", "/api/v1/aws/invoke-scan"),
        ("detach_data_source", "/api/v1/aws/detach-datasource"),
    ],
)
def test_post_without_response(rsps, method, path):
    rsps.add(responses.POST, ENDPOINT + path, body="")
    req = {"project_id": 5, "aws_id": 11, "aws_data_source_id": 1}
    assert getattr(make_client(), method)(req) is None
    call = rsps.calls[0]
    assert urlparse(call.request.url).path == path
    assert json.loads(call.request.body) == req


def test_dataclass_body_omits_zero_fields(rsps):
    rsps.add(
        responses.POST,
        f"{ENDPOINT}/api/v1/aws/put-aws",
        json={"data": {"aws": {"aws_id": 12}}},
    )
    result = make_client().put_aws(ListAWSRequest(project_id=5, aws_account_id="123456789012"))
    assert result == {"aws": {"aws_id": 12}}
    body = json.loads(rsps.calls[0].request.body)
    assert body == {"project_id": 5, "aws_account_id": "123456789012"}


def test_server_error_with_json_content_type(rsps):
    rsps.add(
        responses.POST,
        f"{ENDPOINT}/api/v1/aws/delete-aws",
        body="",
        status=500,
        content_type="application/json",
    )
    with pytest.raises(APIError) as exc_info:
        make_client().delete_aws({"project_id": 5})
    assert exc_info.value.status == 500


def test_unreachable_endpoint_raises_connection_error():
    with responses.RequestsMock():
        with pytest.raises(ConnectionError):
            make_client().list_aws({"project_id": 5})