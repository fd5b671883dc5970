"""
Logic:
- Provides utility functions for the Journal app
- Includes the retrying fetch with exponential backoff used for every API call
- Text helpers for compact card display
"""

import asyncio
import logging

import requests

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
DEFAULT_TIMEOUT = 10


class NetworkRequestError(Exception):
    """Raised when a request still fails after all retries."""


async def fetch_with_retry(url, options=None, attempt=0, *, session=None,
                           sleep=asyncio.sleep, timeout=DEFAULT_TIMEOUT):
    """
    Input: URL, fetch options (method, headers, serialized body), prior attempt count,
           optional requests session, sleep coroutine and timeout
    Process: Issues the request, retrying with exponential backoff (1s, 2s, 4s) on failure
    Output: Parsed JSON body, or an empty dict for DELETE or an empty response
    """
    options = options or {}
    method = options.get('method', 'GET').upper()
    send = session.request if session is not None else requests.request

    while True:
        try:
            # requests blocks, so run it off the event loop
            response = await asyncio.to_thread(
                send,
                method,
                url,
                headers=options.get('headers'),
                data=options.get('body'),
                timeout=timeout,
            )
            response.raise_for_status()

            if response.status_code == 204 or method == 'DELETE' or not response.content:
                return {}
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            if attempt < MAX_RETRIES:
                delay = 2 ** attempt
                logger.warning("Request %s %s failed (%s), retrying in %ss", method, url, e, delay)
                await sleep(delay)
                attempt += 1
                continue
            logger.error("Failed to fetch %s after %s attempts.", url, attempt + 1, exc_info=e)
            raise NetworkRequestError("Network request failed.") from None


def run_async(coro):
    """Runs a coroutine to completion from the synchronous Streamlit script."""
    return asyncio.run(coro)


def truncate_text(text, limit):
    """Shortens text to at most limit characters, ending with '...' when cut."""
    text = text or ""
    if len(text) <= limit:
        return text
    return text[:max(limit - 3, 0)].rstrip() + "..."
