from pydantic import Field
from typing import Optional
from datetime import datetime

from lexdesk.models import AppointmentType, AppointmentStatus
from lexdesk.schemas import CamelModel, CaseBasic, ClientBasic, UserBasic

class AppointmentBase(CamelModel):
    datetime: datetime
    type: AppointmentType
    duration_minutes: int = Field(60, gt=0)
    location: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

class AppointmentCreate(AppointmentBase):
    case_id: Optional[str] = None
    client_id: Optional[str] = None
    user_id: Optional[str] = None

class AppointmentResponse(AppointmentBase):
    id: str
    case_id: Optional[str] = None
    client_id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None

class AppointmentListResponse(AppointmentResponse):
    case: Optional[CaseBasic] = None
    client: Optional[ClientBasic] = None
    user: Optional[UserBasic] = None
