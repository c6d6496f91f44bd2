from pydantic import EmailStr, Field
from typing import Optional, List
from datetime import datetime

from lexdesk.schemas import CamelModel, CaseBasic

class ClientBase(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    notes: Optional[str] = None

class ClientCreate(ClientBase):
    # Setting a password gives the client portal access
    password: Optional[str] = None

class ClientResponse(ClientBase):
    id: str
    email: str
    created_at: datetime

class ClientDetailResponse(ClientResponse):
    cases: List[CaseBasic] = []
