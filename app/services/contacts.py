"""Contact form intake and admin review."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models import ContactMessage
from app.schemas.contacts import ContactCreate

logger = logging.getLogger(__name__)


def submit_contact(session: Session, data: ContactCreate) -> ContactMessage:
    row = ContactMessage(**data.model_dump())
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info("Contact message received", extra={"contact_id": row.id})
    return row


def list_contacts(session: Session, *, limit: int = 50, offset: int = 0) -> list[ContactMessage]:
    return (
        session.query(ContactMessage)
        .order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def get_contact(session: Session, contact_id: int) -> ContactMessage:
    row = session.get(ContactMessage, contact_id)
    if row is None:
        raise NotFound("Contact message not found")
    return row


def delete_contact(session: Session, contact_id: int) -> None:
    row = get_contact(session, contact_id)
    session.delete(row)
    session.commit()
    logger.info("Contact message deleted", extra={"contact_id": contact_id})
