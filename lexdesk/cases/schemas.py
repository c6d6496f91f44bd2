from pydantic import Field
from typing import Optional, List
from datetime import datetime, date

from lexdesk.models import CaseStatus, CaseType, PriorityLevel, AppointmentType, AppointmentStatus, DocumentType, BillingStatus
from lexdesk.schemas import CamelModel, ClientBasic, UserBasic

# Statuses a case may be moved to through PATCH
UPDATABLE_STATUSES = (CaseStatus.ACTIVE, CaseStatus.PENDING, CaseStatus.CLOSED)

class CaseBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    case_type: CaseType = CaseType.OTHER
    priority: PriorityLevel = PriorityLevel.MEDIUM
    court_name: Optional[str] = Field(None, max_length=255)
    opposing_party: Optional[str] = Field(None, max_length=255)

class CaseCreate(CaseBase):
    client_id: str = Field(..., min_length=1)
    assigned_lawyer_id: Optional[str] = None
    status: CaseStatus = CaseStatus.PENDING
    filing_date: Optional[date] = None

class CaseStatusUpdate(CamelModel):
    status: Optional[str] = None

class AppointmentSummary(CamelModel):
    id: str
    datetime: datetime
    location: Optional[str] = None
    type: AppointmentType
    status: AppointmentStatus

class DocumentSummary(CamelModel):
    id: str
    filename: str
    mime_type: Optional[str] = None
    url: str
    document_type: DocumentType
    uploaded_at: Optional[datetime] = None

class BillingSummary(CamelModel):
    id: str
    invoice_number: str
    total_cents: int
    status: BillingStatus
    balance_cents: int

class CaseResponse(CaseBase):
    id: str
    case_number: str
    client_id: str
    assigned_lawyer_id: Optional[str] = None
    status: CaseStatus
    filing_date: Optional[date] = None
    closure_date: Optional[date] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

class CaseListResponse(CaseResponse):
    client: Optional[ClientBasic] = None
    next_appointment: Optional[AppointmentSummary] = None

class CaseDetailResponse(CaseResponse):
    client: Optional[ClientBasic] = None
    assigned_lawyer: Optional[UserBasic] = None
    appointments: List[AppointmentSummary] = []
    documents: List[DocumentSummary] = []
    billings: List[BillingSummary] = []

class CaseStatusResponse(CamelModel):
    id: str
    title: str
    status: CaseStatus
    closure_date: Optional[date] = None
    client: Optional[ClientBasic] = None
