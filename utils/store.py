"""
Store Module - Append-only contact record stores

Two backends share the ContactStore interface:
    MemoryContactStore    records live for the process lifetime
    DatabaseContactStore  records live in the contact_messages table

Both serialize writes behind a lock so id assignment is strictly increasing
and no concurrent submission is lost.
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageError


@dataclass(frozen=True)
class ContactRecord:
    id: int
    name: str
    email: str
    company: Optional[str]
    message: str
    created_at: datetime

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'company': self.company,
            'message': self.message,
            'createdAt': self.created_at.isoformat(),
        }


class ContactStore(ABC):
    """Authoritative collection of ContactRecords"""

    @abstractmethod
    def create(self, draft) -> ContactRecord:
        """Assign id and timestamp to a validated draft and retain it"""

    @abstractmethod
    def list_all(self) -> List[ContactRecord]:
        """Return every retained record in insertion order"""


class MemoryContactStore(ContactStore):

    def __init__(self):
        self._records = []
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, draft):
        with self._lock:
            record = ContactRecord(
                id=self._next_id,
                name=draft.name,
                email=draft.email,
                company=draft.company,
                message=draft.message,
                created_at=datetime.now(timezone.utc),
            )
            self._records.append(record)
            self._next_id += 1
        return record

    def list_all(self):
        with self._lock:
            return list(self._records)

    def __len__(self):
        with self._lock:
            return len(self._records)


class DatabaseContactStore(ContactStore):
    """Store backed by the ContactMessage model.

    Must be used inside an application context bound to ``db``.
    """

    def __init__(self, db):
        self.db = db
        self._lock = threading.Lock()

    @staticmethod
    def _to_record(row):
        created_at = row.created_at
        # SQLite drops tzinfo on the way back
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return ContactRecord(
            id=row.id,
            name=row.name,
            email=row.email,
            company=row.company,
            message=row.message,
            created_at=created_at,
        )

    def create(self, draft):
        from models import ContactMessage

        with self._lock:
            row = ContactMessage(
                name=draft.name,
                email=draft.email,
                company=draft.company,
                message=draft.message,
                created_at=datetime.now(timezone.utc),
            )
            try:
                self.db.session.add(row)
                self.db.session.flush()
                # Snapshot before commit expires the row's attributes
                record = self._to_record(row)
                self.db.session.commit()
            except SQLAlchemyError as e:
                self.db.session.rollback()
                raise StorageError(f"Could not store contact message: {str(e)}") from e
        return record

    def list_all(self):
        from models import ContactMessage

        try:
            rows = self.db.session.execute(
                self.db.select(ContactMessage).order_by(ContactMessage.id)
            ).scalars().all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageError(f"Could not read contact messages: {str(e)}") from e
        return [self._to_record(row) for row in rows]


STORE_BACKENDS = ('memory', 'database')


def build_store(app):
    """
    Construct the contact store selected by CONTACT_STORE

    Args:
        app (Flask): Application with extensions already initialized

    Returns:
        ContactStore: Fresh store instance
    """
    backend = app.config.get('CONTACT_STORE', 'database')
    if backend == 'memory':
        return MemoryContactStore()
    if backend == 'database':
        from extensions import db
        return DatabaseContactStore(db)
    raise ValueError(f"Unknown CONTACT_STORE '{backend}', expected one of {', '.join(STORE_BACKENDS)}")


__all__ = [
    'ContactRecord',
    'ContactStore',
    'MemoryContactStore',
    'DatabaseContactStore',
    'build_store',
]
