"""
Logic:
- Owns the in-memory list of journal entries and its load status
- Dispatches create/update/delete to the API and reconciles the list with server responses
- Keeps the client-only importance flags
"""

import asyncio
import logging
from enum import Enum

from api import journal_ops
from api.client_init import DEFAULT_BASE_URL, DEFAULT_LIST_LIMIT
from api.models import PLACEHOLDER_USER_ID, JournalEntry
from utils.helpers import DEFAULT_TIMEOUT, NetworkRequestError

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load journal entries. Please try again later."
DELETE_ERROR_MESSAGE = "Failed to delete journal entry. Please try again."


class ListStatus(str, Enum):
    LOADING = 'loading'
    READY = 'ready'
    ERRORED = 'errored'


class JournalController:
    """State and operations behind the journal list.

    Renderers read ``entries``, ``status``, ``error``, ``notice`` and
    ``important_ids`` and call the coroutine methods in response to user
    actions. The list is only ever replaced or edited here.
    """

    def __init__(self, base_url=DEFAULT_BASE_URL, session=None, sleep=asyncio.sleep,
                 timeout=DEFAULT_TIMEOUT, list_limit=DEFAULT_LIST_LIMIT):
        self.base_url = base_url
        self.session = session
        self.sleep = sleep
        self.timeout = timeout
        self.list_limit = list_limit

        self.entries = []
        self.status = ListStatus.LOADING
        self.is_loading = True
        self.error = None
        self.notice = None
        self.important_ids = set()

    def _transport(self):
        return {'session': self.session, 'sleep': self.sleep, 'timeout': self.timeout}

    async def load(self):
        """
        Input: None
        Process: Fetches the collection and keeps the first list_limit entries
        Output: None (sets status to READY or ERRORED)
        """
        self.status = ListStatus.LOADING
        self.is_loading = True
        self.error = None
        try:
            entries = await journal_ops.list_entries(self.base_url, **self._transport())
            self.entries = entries[:self.list_limit]
            self.status = ListStatus.READY
        except NetworkRequestError:
            self.error = LOAD_ERROR_MESSAGE
            self.status = ListStatus.ERRORED
        except (KeyError, TypeError, ValueError) as e:
            # Well-formed JSON that is not a list of entry records
            logger.error("Unexpected entry list payload from %s: %r", self.base_url, e)
            self.error = LOAD_ERROR_MESSAGE
            self.status = ListStatus.ERRORED
        finally:
            self.is_loading = False

    def next_temporary_id(self):
        """Returns an id that no entry currently in view uses."""
        return max((entry.id for entry in self.entries), default=0) + 1

    async def create(self, title, body):
        """
        Input: title and body text
        Process: POSTs a new entry with a temporary id and prepends the server's record
        Output: The created JournalEntry; NetworkRequestError propagates with the list untouched
        """
        temporary_id = self.next_temporary_id()
        draft = JournalEntry(
            id=temporary_id,
            title=title.strip(),
            body=body.strip(),
            user_id=PLACEHOLDER_USER_ID,
        )
        created = await journal_ops.create_entry(self.base_url, draft, **self._transport())

        # The mock API hands out the same id for every POST
        if any(entry.id == created.id for entry in self.entries):
            logger.warning("Server id %s already in view, keeping temporary id %s",
                           created.id, temporary_id)
            created = JournalEntry(temporary_id, created.title, created.body, created.user_id)

        self.entries = [created] + self.entries
        return created

    async def update(self, entry):
        """
        Input: Full JournalEntry with an existing id
        Process: PUTs the record and swaps it into the list by id
        Output: The updated JournalEntry; NetworkRequestError propagates with the list untouched
        """
        updated = await journal_ops.update_entry(self.base_url, entry, **self._transport())
        self.entries = [updated if item.id == entry.id else item for item in self.entries]
        return updated

    async def save(self, entry, is_new):
        """Save callback for the entry form."""
        if is_new:
            return await self.create(entry.title, entry.body)
        return await self.update(entry)

    async def delete(self, entry_id, confirmed=False):
        """
        Input: entry id and whether the user confirmed
        Process: DELETEs a confirmed entry and removes it from the list
        Output: True if the entry was removed
        """
        if not confirmed:
            return False
        try:
            await journal_ops.delete_entry(self.base_url, entry_id, **self._transport())
        except NetworkRequestError:
            self.notice = DELETE_ERROR_MESSAGE
            return False

        self.entries = [entry for entry in self.entries if entry.id != entry_id]
        self.important_ids.discard(entry_id)
        return True

    def toggle_important(self, entry_id):
        if entry_id in self.important_ids:
            self.important_ids.discard(entry_id)
        else:
            self.important_ids.add(entry_id)
        return entry_id in self.important_ids

    def is_important(self, entry_id):
        return entry_id in self.important_ids

    def dismiss_notice(self):
        self.notice = None
