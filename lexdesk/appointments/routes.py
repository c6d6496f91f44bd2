import logging
from datetime import timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from lexdesk.database import get_db
from lexdesk.models import Appointment, Case, Client, User
from lexdesk.appointments.schemas import AppointmentCreate, AppointmentResponse, AppointmentListResponse
from lexdesk.errors import integrity_error_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])

# Optional links checked before insert: field -> (model, label)
LINKS = {
    "case_id": (Case, "Case"),
    "client_id": (Client, "Client"),
    "user_id": (User, "User"),
}


@router.get("", response_model=List[AppointmentListResponse])
def list_appointments(
    client_id: Optional[str] = Query(None, alias="clientId"),
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    """List appointments.

    ``clientId`` matches appointments booked directly with the client and
    those attached to one of the client's cases; ``userId`` adds the
    appointments of a staff member. Any matching condition is enough.
    """
    try:
        query = db.query(Appointment).options(
            joinedload(Appointment.case),
            joinedload(Appointment.client),
            joinedload(Appointment.user)
        )

        conditions = []
        if client_id:
            conditions.append(Appointment.case.has(Case.client_id == client_id))
            conditions.append(Appointment.client_id == client_id)
        if user_id:
            conditions.append(Appointment.user_id == user_id)
        if conditions:
            query = query.filter(or_(*conditions))

        return query.order_by(Appointment.datetime).all()
    except Exception:
        logger.exception("Failed to fetch appointments")
        raise HTTPException(status_code=500, detail="Failed to fetch appointments")


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(appointment_data: AppointmentCreate, db: Session = Depends(get_db)):
    data = appointment_data.dict()
    for field, (model, label) in LINKS.items():
        if data[field] and not db.query(model.id).filter(model.id == data[field]).first():
            raise HTTPException(status_code=404, detail=f"{label} not found")

    when = data["datetime"]
    if when.tzinfo is not None:
        # Stored as naive UTC
        data["datetime"] = when.astimezone(timezone.utc).replace(tzinfo=None)

    appointment = Appointment(**data)
    try:
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=integrity_error_status(e), detail="Failed to create appointment")
    except Exception:
        db.rollback()
        logger.exception("Failed to create appointment")
        raise HTTPException(status_code=500, detail="Failed to create appointment")

    logger.info(f"Created {appointment.type.value} appointment {appointment.id}")
    return appointment
