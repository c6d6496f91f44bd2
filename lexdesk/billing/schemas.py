from pydantic import Field
from typing import Optional
from datetime import datetime, date

from lexdesk.models import BillingStatus, PaymentMethod, PaymentStatus
from lexdesk.schemas import CamelModel, CaseBasic

# =====================================================
# BILLINGS
# =====================================================

class BillingCreate(CamelModel):
    case_id: str = Field(..., min_length=1)
    amount_cents: int = Field(..., ge=0)
    tax_cents: int = Field(0, ge=0)
    description: Optional[str] = None
    status: BillingStatus = BillingStatus.DRAFT
    issue_date: Optional[date] = None
    due_date: Optional[date] = None

class BillingResponse(CamelModel):
    id: str
    invoice_number: str
    case_id: str
    amount_cents: int
    tax_cents: int
    total_cents: int
    paid_cents: int
    balance_cents: int
    status: BillingStatus
    description: Optional[str] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    created_at: Optional[datetime] = None

class BillingListResponse(BillingResponse):
    case: Optional[CaseBasic] = None

# =====================================================
# PAYMENTS
# =====================================================

class PaymentCreate(CamelModel):
    billing_id: str = Field(..., min_length=1)
    amount_cents: int = Field(..., gt=0)
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.COMPLETED
    transaction_reference: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None

class PaymentBilling(CamelModel):
    id: str
    invoice_number: str
    case_id: str
    total_cents: int
    status: BillingStatus

class PaymentResponse(CamelModel):
    id: str
    billing_id: str
    amount_cents: int
    method: PaymentMethod
    status: PaymentStatus
    transaction_reference: Optional[str] = None
    notes: Optional[str] = None
    payment_date: Optional[datetime] = None

class PaymentListResponse(PaymentResponse):
    billing: Optional[PaymentBilling] = None
