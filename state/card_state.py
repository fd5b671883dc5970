"""
Logic:
- Two-step delete confirmation for a single entry card: idle -> confirming -> executing
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class DeletePhase(str, Enum):
    IDLE = 'idle'
    CONFIRMING = 'confirming'
    EXECUTING = 'executing'


class DeleteConfirmation:
    def __init__(self, entry_id):
        self.entry_id = entry_id
        self.phase = DeletePhase.IDLE

    @property
    def is_confirming(self):
        return self.phase == DeletePhase.CONFIRMING

    def request(self):
        if self.phase == DeletePhase.IDLE:
            self.phase = DeletePhase.CONFIRMING

    def cancel(self):
        if self.phase == DeletePhase.CONFIRMING:
            self.phase = DeletePhase.IDLE

    async def confirm(self, on_delete):
        """
        Input: async delete callback taking the entry id
        Process: Runs the delete only after request(); failures are logged, not raised
        Output: Callback result, or False when not confirming or on error
        """
        if self.phase != DeletePhase.CONFIRMING:
            return False

        self.phase = DeletePhase.EXECUTING
        try:
            return await on_delete(self.entry_id)
        except Exception as e:
            logger.error("Failed to delete entry %s: %s", self.entry_id, e)
            return False
        finally:
            self.phase = DeletePhase.IDLE
