from extensions import db
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


class ContactMessage(db.Model):
    __tablename__ = 'contact_messages'
    # sqlite_autoincrement keeps SQLite from reusing ids of removed rows
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255))
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
