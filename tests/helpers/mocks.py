"""
HTTP mocks for RPC client tests.
"""

import json
from unittest.mock import Mock

import requests


class MockResponse:
    """Mock requests.Response"""

    def __init__(self, status_code=200, json_data=None, raise_for_status=None,
                 reason="OK", raise_for_json=False):
        self.status_code = status_code
        self.reason = reason
        self._json_data = json_data if json_data is not None else {}
        self._raise_for_status = raise_for_status
        self._raise_for_json = raise_for_json

    def json(self):
        if self._raise_for_json:
            raise json.JSONDecodeError("Invalid JSON", "", 0)
        return self._json_data

    def raise_for_status(self):
        if self._raise_for_status:
            raise self._raise_for_status


def mock_session(*responses):
    """A requests.Session whose post() returns the given responses in order."""
    session = Mock(spec=requests.Session)
    session.post.side_effect = list(responses)
    return session


def rpc_result(result, request_id=1):
    return MockResponse(json_data={"jsonrpc": "2.0", "result": result, "id": request_id})


def rpc_error(message, code=-32000, request_id=1):
    return MockResponse(json_data={
        "jsonrpc": "2.0",
        "error": {"code": code, "message": message},
        "id": request_id,
    })


def sent_payload(session, call_index=0):
    """JSON body of the n-th POST made through a mock session."""
    return session.post.call_args_list[call_index][1]["json"]
