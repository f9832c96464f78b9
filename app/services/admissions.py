"""Admission form intake and admin review."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models import Admission
from app.schemas.admissions import AdmissionCreate

logger = logging.getLogger(__name__)


def submit_admission(session: Session, data: AdmissionCreate) -> Admission:
    row = Admission(**data.model_dump())
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info("Admission application received", extra={"admission_id": row.id})
    return row


def list_admissions(session: Session, *, limit: int = 50, offset: int = 0) -> list[Admission]:
    return (
        session.query(Admission)
        .order_by(Admission.created_at.desc(), Admission.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def get_admission(session: Session, admission_id: int) -> Admission:
    row = session.get(Admission, admission_id)
    if row is None:
        raise NotFound("Admission application not found")
    return row


def delete_admission(session: Session, admission_id: int) -> None:
    row = get_admission(session, admission_id)
    session.delete(row)
    session.commit()
    logger.info("Admission application deleted", extra={"admission_id": admission_id})
