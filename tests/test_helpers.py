import asyncio

import pytest
import requests

from tests.helpers import make_response
from utils.helpers import MAX_RETRIES, NetworkRequestError, fetch_with_retry, truncate_text

URL = "https://example.test/posts"


def test_success_on_first_attempt(session, fake_sleep):
    session.request.return_value = make_response(200, {"id": 1})

    result = asyncio.run(fetch_with_retry(URL, session=session, sleep=fake_sleep))

    assert result == {"id": 1}
    assert fake_sleep.delays == []
    session.request.assert_called_once()
    args, kwargs = session.request.call_args
    assert args == ("GET", URL)
    assert kwargs["headers"] is None
    assert kwargs["data"] is None


def test_retries_then_succeeds_with_backoff(session, fake_sleep):
    session.request.side_effect = [
        requests.exceptions.ConnectionError("down"),
        make_response(503),
        make_response(200, [{"id": 1}]),
    ]

    result = asyncio.run(fetch_with_retry(URL, session=session, sleep=fake_sleep))

    assert result == [{"id": 1}]
    assert fake_sleep.delays == [1, 2]
    assert session.request.call_count == 3


def test_exhausted_retries_raise_generic_error(session, fake_sleep):
    session.request.return_value = make_response(500)

    with pytest.raises(NetworkRequestError) as excinfo:
        asyncio.run(fetch_with_retry(URL, session=session, sleep=fake_sleep))

    assert str(excinfo.value) == "Network request failed."
    assert excinfo.value.__cause__ is None
    assert session.request.call_count == MAX_RETRIES + 1
    assert fake_sleep.delays == [1, 2, 4]


def test_exhaustion_is_logged(session, fake_sleep, caplog):
    session.request.side_effect = requests.exceptions.Timeout("slow")

    with pytest.raises(NetworkRequestError):
        asyncio.run(fetch_with_retry(URL, session=session, sleep=fake_sleep))

    assert f"Failed to fetch {URL} after {MAX_RETRIES + 1} attempts." in caplog.text


def test_starting_attempt_shortens_remaining_retries(session, fake_sleep):
    session.request.return_value = make_response(500)

    with pytest.raises(NetworkRequestError):
        asyncio.run(fetch_with_retry(URL, attempt=2, session=session, sleep=fake_sleep))

    assert session.request.call_count == 2
    assert fake_sleep.delays == [4]


def test_delete_returns_empty_dict_without_parsing(session, fake_sleep):
    session.request.return_value = make_response(200, content=b"not json at all")

    result = asyncio.run(fetch_with_retry(URL + "/7", {"method": "DELETE"},
                                          session=session, sleep=fake_sleep))

    assert result == {}
    assert fake_sleep.delays == []


def test_no_content_returns_empty_dict(session, fake_sleep):
    session.request.return_value = make_response(204)

    result = asyncio.run(fetch_with_retry(URL, {"method": "PUT", "body": "{}"},
                                          session=session, sleep=fake_sleep))

    assert result == {}


def test_empty_body_returns_empty_dict(session, fake_sleep):
    session.request.return_value = make_response(201)

    result = asyncio.run(fetch_with_retry(URL, {"method": "POST", "body": "{}"},
                                          session=session, sleep=fake_sleep))

    assert result == {}
    assert fake_sleep.delays == []
    session.request.assert_called_once()


def test_invalid_json_is_retried(session, fake_sleep):
    session.request.side_effect = [
        make_response(200, content=b"<html>oops</html>"),
        make_response(200, {"ok": True}),
    ]

    result = asyncio.run(fetch_with_retry(URL, session=session, sleep=fake_sleep))

    assert result == {"ok": True}
    assert fake_sleep.delays == [1]


def test_options_are_passed_through(session, fake_sleep):
    session.request.return_value = make_response(201, {"id": 101})
    options = {
        "method": "post",
        "headers": {"Content-Type": "application/json"},
        "body": '{"title": "A"}',
    }

    asyncio.run(fetch_with_retry(URL, options, session=session, sleep=fake_sleep, timeout=3))

    args, kwargs = session.request.call_args
    assert args == ("POST", URL)
    assert kwargs == {
        "headers": {"Content-Type": "application/json"},
        "data": '{"title": "A"}',
        "timeout": 3,
    }


def test_backoff_does_not_block_other_tasks(session):
    session.request.side_effect = [make_response(500), make_response(200, {"id": 1})]
    progress = []

    async def other_work():
        for step in range(3):
            progress.append(step)
            await asyncio.sleep(0)

    async def short_sleep(seconds):
        await asyncio.sleep(0.01)

    async def main():
        return await asyncio.gather(
            fetch_with_retry(URL, session=session, sleep=short_sleep),
            other_work(),
        )

    result, _ = asyncio.run(main())

    assert result == {"id": 1}
    assert progress == [0, 1, 2]


def test_truncate_text():
    assert truncate_text("short", 10) == "short"
    assert truncate_text("a" * 20, 10) == "aaaaaaa..."
    assert truncate_text(None, 5) == ""
