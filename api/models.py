"""
Logic:
- Defines the journal entry record exchanged with the posts endpoint
- Converts between the wire shape (camelCase userId) and Python attributes
"""

from dataclasses import dataclass

# The app only ever acts as one fixed pseudo-user
PLACEHOLDER_USER_ID = 1


@dataclass(frozen=True)
class JournalEntry:
    id: int
    title: str
    body: str
    user_id: int = PLACEHOLDER_USER_ID

    @classmethod
    def from_dict(cls, data):
        """
        Input: dict as returned by the API
        Process: Maps userId to user_id, falling back to the placeholder owner
        Output: JournalEntry
        """
        return cls(
            id=int(data['id']),
            title=data.get('title', ''),
            body=data.get('body', ''),
            user_id=int(data.get('userId', PLACEHOLDER_USER_ID)),
        )

    def to_payload(self):
        return {
            'id': self.id,
            'title': self.title,
            'body': self.body,
            'userId': self.user_id,
        }
