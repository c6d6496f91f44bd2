from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, date

from lexdesk.models import CaseStatus, UserRole


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# Summaries embedded in other responses
class UserBasic(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole

class ClientBasic(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None

class CaseBasic(CamelModel):
    id: str
    case_number: str
    client_id: str
    title: str
    status: CaseStatus
    filing_date: Optional[date] = None
    created_at: Optional[datetime] = None
