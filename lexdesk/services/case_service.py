from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy import asc
from typing import List, Optional
from datetime import datetime, date
import uuid

from lexdesk.models import Appointment, Billing, Case, CaseStatus, Client, User
from lexdesk.cases.schemas import CaseCreate


class ReferenceNotFound(Exception):
    """Raised when a case refers to a client or lawyer that does not exist."""

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class CaseService:
    def __init__(self, db: Session):
        self.db = db

    def generate_case_number(self) -> str:
        """Generate a unique case number."""
        timestamp = datetime.now().strftime("%Y%m%d")
        unique_id = str(uuid.uuid4())[:8].upper()
        return f"CASE-{timestamp}-{unique_id}"

    def create_case(self, case_data: CaseCreate) -> Case:
        """Create a new case for an existing client."""
        if not self.db.query(Client.id).filter(Client.id == case_data.client_id).first():
            raise ReferenceNotFound("Client")
        if case_data.assigned_lawyer_id and not self.db.query(User.id).filter(
            User.id == case_data.assigned_lawyer_id
        ).first():
            raise ReferenceNotFound("Lawyer")

        data = case_data.dict()
        data["filing_date"] = data["filing_date"] or date.today()
        db_case = Case(case_number=self.generate_case_number(), **data)
        if db_case.status == CaseStatus.CLOSED:
            db_case.closure_date = date.today()

        self.db.add(db_case)
        self.db.commit()
        self.db.refresh(db_case)
        return db_case

    def list_cases(self, client_id: Optional[str] = None, status: Optional[CaseStatus] = None) -> List[Case]:
        """List cases with their client and next upcoming appointment attached."""
        query = self.db.query(Case).options(joinedload(Case.client))
        if client_id:
            query = query.filter(Case.client_id == client_id)
        if status:
            query = query.filter(Case.status == status)
        cases = query.order_by(Case.created_at.desc()).all()

        upcoming = self.next_appointments([c.id for c in cases])
        for case in cases:
            case.next_appointment = upcoming.get(case.id)
        return cases

    def next_appointments(self, case_ids: List[str]) -> dict:
        """Map each case id to its earliest appointment that is not in the past."""
        if not case_ids:
            return {}
        appointments = self.db.query(Appointment).filter(
            Appointment.case_id.in_(case_ids),
            Appointment.datetime >= datetime.utcnow()
        ).order_by(asc(Appointment.datetime)).all()

        upcoming = {}
        for appointment in appointments:
            upcoming.setdefault(appointment.case_id, appointment)
        return upcoming

    def get_case_with_relationships(self, case_id: str) -> Optional[Case]:
        """Get case with all relationships loaded."""
        return self.db.query(Case).options(
            joinedload(Case.client),
            joinedload(Case.assigned_lawyer),
            selectinload(Case.appointments),
            selectinload(Case.documents),
            selectinload(Case.billings).selectinload(Billing.payments)
        ).filter(Case.id == case_id).first()

    def update_status(self, case_id: str, status: CaseStatus) -> Optional[Case]:
        """Move a case to ``status``; returns None when the case does not exist."""
        case = self.db.query(Case).options(joinedload(Case.client)).filter(Case.id == case_id).first()
        if not case:
            return None

        if status == CaseStatus.CLOSED and case.status != CaseStatus.CLOSED:
            case.closure_date = date.today()
        elif status != CaseStatus.CLOSED:
            case.closure_date = None
        case.status = status

        self.db.commit()
        self.db.refresh(case)
        return case
