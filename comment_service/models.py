# comment_service/models.py
"""
Value types for the comment endpoint.

CommentSubmission is what the browser form sends (untrusted).
CommentRecord is what gets committed to the GitHub repository.
"""

import hashlib
from dataclasses import dataclass, field
from datetime import datetime, timezone

from uuid6 import uuid6


def _as_text(value):
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CommentSubmission:
    slug: str = ""
    name: str = ""
    email: str = ""
    reply_to: str = ""
    comment: str = ""

    @classmethod
    def from_payload(cls, payload):
        """
        Builds a submission from a parsed form or JSON body.
        Missing keys become empty strings; the form field is called 'replyTo'.
        """
        payload = payload or {}
        return cls(
            slug=_as_text(payload.get('slug')),
            name=_as_text(payload.get('name')),
            email=_as_text(payload.get('email')),
            reply_to=_as_text(payload.get('replyTo')),
            comment=_as_text(payload.get('comment')),
        )


def hash_email(email):
    """MD5 hex digest of the address, the key Gravatar uses for avatars."""
    return hashlib.md5(email.encode('utf-8')).hexdigest()


def iso_timestamp(moment=None):
    moment = moment or datetime.now(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True)
class CommentRecord:
    """
    A comment as persisted in the repository.

    'id' is a version 6 UUID, so records sort chronologically by identifier.
    'email' holds the hashed address; 'email_real' keeps the original one
    so the commenter can be notified of replies later on.
    """
    name: str
    email: str
    email_real: str
    reply_to: str
    comment: str
    id: str = field(default_factory=lambda: str(uuid6()))
    date: str = field(default_factory=iso_timestamp)

    @classmethod
    def from_submission(cls, submission):
        return cls(
            name=submission.name,
            email=hash_email(submission.email),
            email_real=submission.email,
            reply_to=submission.reply_to,
            comment=submission.comment,
        )

    def to_dict(self):
        # '_id' is the key the static site reads when rendering threads
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "email_real": self.email_real,
            "reply_to": self.reply_to,
            "comment": self.comment,
            "date": self.date,
        }

    @property
    def filename(self):
        return f"comment-{self.id}.json"
