"""
Logic:
- Holds the create/edit form's fields, saving flag and inline error
- Validates input before anything is sent
"""

import logging

from api.models import PLACEHOLDER_USER_ID, JournalEntry
from utils.helpers import NetworkRequestError

logger = logging.getLogger(__name__)

SAVE_ERROR_MESSAGE = "Failed to save journal entry. Please check your connection."


class EntryFormState:
    def __init__(self, entry=None):
        self.entry = entry
        self.title = entry.title if entry else ""
        self.body = entry.body if entry else ""
        self.is_saving = False
        self.error = None

    @property
    def is_new(self):
        return self.entry is None

    @property
    def is_valid(self):
        return bool(self.title.strip()) and bool(self.body.strip())

    @property
    def can_submit(self):
        return self.is_valid and not self.is_saving

    def build_payload(self):
        """
        Input: None
        Process: Trims the fields; edits keep the entry's id and owner
        Output: JournalEntry (id 0 for new entries, the controller assigns one)
        """
        return JournalEntry(
            id=self.entry.id if self.entry else 0,
            title=self.title.strip(),
            body=self.body.strip(),
            user_id=self.entry.user_id if self.entry else PLACEHOLDER_USER_ID,
        )

    async def submit(self, on_save):
        """
        Input: async save callback taking (entry, is_new)
        Process: Rejects blank input locally, otherwise saves and records any failure inline
        Output: True when saved, False otherwise
        """
        if not self.can_submit:
            return False

        self.error = None
        self.is_saving = True
        try:
            await on_save(self.build_payload(), self.is_new)
            return True
        except NetworkRequestError as e:
            logger.error("Error saving entry: %s", e)
            self.error = SAVE_ERROR_MESSAGE
            return False
        finally:
            self.is_saving = False
