import json

import requests


def make_response(status_code=200, payload=None, content=None):
    """Builds a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    if content is not None:
        response._content = content
    elif payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = b""
    response.headers["Content-Type"] = "application/json; charset=utf-8"
    return response


def entries_payload(count):
    return [
        {"userId": 1, "id": i, "title": f"Title {i}", "body": f"Body {i}"}
        for i in range(1, count + 1)
    ]


class FakeSleep:
    """Records requested delays instead of waiting."""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)
