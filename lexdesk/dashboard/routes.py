import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from lexdesk.database import get_db
from lexdesk.models import Appointment, AppointmentStatus, Case, CaseStatus, Client, User
from lexdesk.auth.dependencies import get_current_user
from lexdesk.schemas import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


class DashboardStats(CamelModel):
    total_cases: int
    active_cases: int
    pending_cases: int
    upcoming_appointments: int
    total_clients: int


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Practice overview for staff: case counts, upcoming appointments, clients."""
    try:
        status_counts = dict(
            db.query(Case.status, func.count(Case.id)).group_by(Case.status).all()
        )
        upcoming = db.query(func.count(Appointment.id)).filter(
            Appointment.status == AppointmentStatus.SCHEDULED,
            Appointment.datetime >= datetime.utcnow()
        ).scalar()
        total_clients = db.query(func.count(Client.id)).scalar()
    except Exception:
        logger.exception("Failed to load dashboard stats")
        raise HTTPException(status_code=500, detail="Failed to load dashboard stats")

    return DashboardStats(
        total_cases=sum(status_counts.values()),
        active_cases=status_counts.get(CaseStatus.ACTIVE, 0),
        pending_cases=status_counts.get(CaseStatus.PENDING, 0),
        upcoming_appointments=upcoming or 0,
        total_clients=total_clients or 0,
    )
