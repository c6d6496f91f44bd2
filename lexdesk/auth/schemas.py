from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from lexdesk.models import UserRole
from lexdesk.schemas import CamelModel

class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.LAWYER
    phone: Optional[str] = Field(None, max_length=20)

class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class TokenData(BaseModel):
    subject: str
    user_type: str

class UserResponse(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    phone: Optional[str] = None
    created_at: datetime

class AccountResponse(CamelModel):
    """A staff user or a client, as returned by login and ``/me``."""
    id: str
    email: str
    first_name: str
    last_name: str
    role: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    user_type: str
    access_token: Optional[str] = None
    token_type: Optional[str] = None
