"""Shared fixtures: a recording HTTP mock and isolated configuration."""

import json

import pytest
from googleapiclient.http import HttpMockSequence


class RecordingHttp(HttpMockSequence):
    """HttpMockSequence that also keeps every request it served."""

    def __init__(self, iterable):
        super().__init__(iterable)
        self.calls = []

    def request(self, uri, method="GET", body=None, headers=None, redirections=1, connection_type=None):
        self.calls.append({
            "uri": uri,
            "method": method,
            "body": json.loads(body) if body else None,
            "headers": dict(headers or {}),
        })
        return super().request(uri, method, body, headers, redirections, connection_type)


def http_sequence(*responses):
    """Build a RecordingHttp from (status, json_body) pairs.

    A body of None produces an empty response.
    """
    return RecordingHttp([
        ({"status": str(status)}, json.dumps(body) if body is not None else "")
        for status, body in responses
    ])


def error_body(code, message):
    return {"error": {"code": code, "message": message}}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of configuration tests."""
    monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS", raising=False)
    monkeypatch.delenv("GAPI_WIRE_LOG_LEVEL", raising=False)
