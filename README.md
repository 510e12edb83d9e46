# risken

A Python client for the RISKEN HTTP API. It covers sign-in and the
finding, alert, project, report, AWS, code-scan and data-source
endpoints.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Each group of endpoints has its own client class, and every one of them
is built on `risken.client.BaseClient`:

| Module               | Class           |
|----------------------|-----------------|
| `risken.finding`     | `FindingAPI`    |
| `risken.alert`       | `AlertAPI`      |
| `risken.project`     | `ProjectAPI`    |
| `risken.report`      | `ReportAPI`     |
| `risken.aws`         | `AWSAPI`        |
| `risken.codescan`    | `CodeAPI`       |
| `risken.datasource`  | `DataSourceAPI` |

Create one with an API token and the endpoint of your RISKEN gateway,
then sign in to learn which project the token belongs to:

```python
from risken.finding import FindingAPI

findings_api = FindingAPI(api_token="token", api_endpoint="http://localhost:8001")

signin = findings_api.signin()
print(signin.project_id, signin.access_token_id)

findings = findings_api.list_finding({"project_id": signin.project_id})
```

`BaseClient` also takes an `http_client` (anything with a `send` method
for a prepared request; a `requests.Session` by default) and a `logger`.

Requests may be dataclasses or mappings. `GET` endpoints send the
fields as query parameters: lists add one value per element, and
scalar fields are left out when they are zero, empty or false. `POST`
endpoints send the request as a compact JSON body; fields of a
dataclass that are empty are left out. Replies are decoded from JSON
and the value under their `data` key is returned as plain Python
dicts and lists. Calls whose endpoint returns nothing useful return
`None`.

Two list calls set the `status` filter themselves:

- `FindingAPI.list_finding` lists all findings when no status is given;
  `FindingStatus.FINDING_ACTIVE` and `FindingStatus.FINDING_PENDING`
  narrow the list, and an unrecognised status lists active findings.
- `AlertAPI.list_alert` lists active alerts when no status is given;
  otherwise the last recognised `AlertStatus` in the list is used.

Every request carries `Authorization: Bearer <token>`, a JSON
`Accept` and `Content-Type`, and the package's `User-Agent`.

## Errors

A reply outside the 2xx range raises `risken.client.APIError`. When the
server answers with JSON, its `error` field becomes the message;
otherwise the message names the HTTP status code. A failure to reach
the server raises `ConnectionError`.

```python
from risken.client import APIError

try:
    findings_api.get_finding({"project_id": 1, "finding_id": 42})
except APIError as err:
    print(err.status, err)
```

## What this package does not do

There is no single client object that gathers every endpoint; use the
class for the group of endpoints you need. User, role and policy
management, Google Cloud, OSINT and diagnosis endpoints are not
covered, and the package installs no command-line program.