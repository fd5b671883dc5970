"""
Logic:
- Provides CRUD operations for journal entries
- Talks to the remote posts endpoint (collection at base_url, records at base_url/id)
- Every call goes through fetch_with_retry
"""

import asyncio
import json
import logging

from api.models import JournalEntry
from utils.helpers import DEFAULT_TIMEOUT, fetch_with_retry

logger = logging.getLogger(__name__)

JSON_HEADERS = {'Content-Type': 'application/json; charset=UTF-8'}


def entry_url(base_url, entry_id):
    return f"{base_url.rstrip('/')}/{entry_id}"


async def list_entries(base_url, session=None, sleep=asyncio.sleep, timeout=DEFAULT_TIMEOUT):
    """
    Input: collection URL and transport options
    Process: Fetches all entries from the collection
    Output: List of JournalEntry
    """
    data = await fetch_with_retry(base_url, session=session, sleep=sleep, timeout=timeout)
    if not isinstance(data, list):
        raise TypeError(f"Expected a list of entries, got {type(data).__name__}")
    return [JournalEntry.from_dict(item) for item in data]


async def create_entry(base_url, entry, session=None, sleep=asyncio.sleep, timeout=DEFAULT_TIMEOUT):
    """
    Input: collection URL, entry to create and transport options
    Process: POSTs the entry payload
    Output: JournalEntry as returned by the server
    """
    options = {
        'method': 'POST',
        'headers': JSON_HEADERS,
        'body': json.dumps(entry.to_payload()),
    }
    data = await fetch_with_retry(base_url, options, session=session, sleep=sleep, timeout=timeout)
    created = JournalEntry.from_dict(data)
    logger.info("Created journal entry %s", created.id)
    return created


async def update_entry(base_url, entry, session=None, sleep=asyncio.sleep, timeout=DEFAULT_TIMEOUT):
    """
    Input: collection URL, full entry record and transport options
    Process: PUTs the record to its per-id URL
    Output: JournalEntry as returned by the server
    """
    options = {
        'method': 'PUT',
        'headers': JSON_HEADERS,
        'body': json.dumps(entry.to_payload()),
    }
    data = await fetch_with_retry(entry_url(base_url, entry.id), options,
                                  session=session, sleep=sleep, timeout=timeout)
    updated = JournalEntry.from_dict(data)
    logger.info("Updated journal entry %s", updated.id)
    return updated


async def delete_entry(base_url, entry_id, session=None, sleep=asyncio.sleep, timeout=DEFAULT_TIMEOUT):
    """
    Input: collection URL, entry id and transport options
    Process: DELETEs the record at its per-id URL
    Output: None
    """
    await fetch_with_retry(entry_url(base_url, entry_id), {'method': 'DELETE'},
                           session=session, sleep=sleep, timeout=timeout)
    logger.info("Deleted journal entry %s", entry_id)
