import logging
from datetime import date, datetime
from typing import List, Optional
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from lexdesk.database import get_db
from lexdesk.models import Billing, Case, Payment
from lexdesk.billing.schemas import (
    BillingCreate, BillingResponse, BillingListResponse,
    PaymentCreate, PaymentResponse, PaymentListResponse
)
from lexdesk.errors import integrity_error_status

logger = logging.getLogger(__name__)

billings_router = APIRouter(prefix="/api/billings", tags=["Billing"])
payments_router = APIRouter(prefix="/api/payments", tags=["Billing"])


def generate_invoice_number() -> str:
    """Generate a unique invoice number."""
    timestamp = datetime.now().strftime("%Y%m%d")
    unique_id = str(uuid.uuid4())[:8].upper()
    return f"INV-{timestamp}-{unique_id}"

# =====================================================
# BILLINGS
# =====================================================

@billings_router.get("", response_model=List[BillingListResponse])
def list_billings(
    client_id: Optional[str] = Query(None, alias="clientId"),
    case_id: Optional[str] = Query(None, alias="caseId"),
    db: Session = Depends(get_db)
):
    """List billings with their case and outstanding balance."""
    try:
        query = db.query(Billing).options(
            joinedload(Billing.case),
            selectinload(Billing.payments)
        )
        if client_id:
            query = query.filter(Billing.case.has(Case.client_id == client_id))
        if case_id:
            query = query.filter(Billing.case_id == case_id)
        return query.order_by(Billing.created_at.desc()).all()
    except Exception:
        logger.exception("Failed to fetch billings")
        raise HTTPException(status_code=500, detail="Failed to fetch billings")


@billings_router.post("", response_model=BillingResponse, status_code=status.HTTP_201_CREATED)
def create_billing(billing_data: BillingCreate, db: Session = Depends(get_db)):
    if not db.query(Case.id).filter(Case.id == billing_data.case_id).first():
        raise HTTPException(status_code=404, detail="Case not found")

    data = billing_data.dict()
    data["issue_date"] = data["issue_date"] or date.today()
    billing = Billing(
        invoice_number=generate_invoice_number(),
        total_cents=billing_data.amount_cents + billing_data.tax_cents,
        **data
    )

    try:
        db.add(billing)
        db.commit()
        db.refresh(billing)
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=integrity_error_status(e), detail="Failed to create billing")
    except Exception:
        db.rollback()
        logger.exception("Failed to create billing")
        raise HTTPException(status_code=500, detail="Failed to create billing")

    logger.info(f"Created billing {billing.invoice_number} for case {billing.case_id}")
    return billing

# =====================================================
# PAYMENTS
# =====================================================

@payments_router.get("", response_model=List[PaymentListResponse])
def list_payments(
    billing_id: Optional[str] = Query(None, alias="billingId"),
    client_id: Optional[str] = Query(None, alias="clientId"),
    db: Session = Depends(get_db)
):
    try:
        query = db.query(Payment).options(joinedload(Payment.billing))
        if billing_id:
            query = query.filter(Payment.billing_id == billing_id)
        if client_id:
            query = query.filter(
                Payment.billing.has(Billing.case.has(Case.client_id == client_id))
            )
        return query.order_by(Payment.payment_date.desc()).all()
    except Exception:
        logger.exception("Failed to fetch payments")
        raise HTTPException(status_code=500, detail="Failed to fetch payments")


@payments_router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(payment_data: PaymentCreate, db: Session = Depends(get_db)):
    if not db.query(Billing.id).filter(Billing.id == payment_data.billing_id).first():
        raise HTTPException(status_code=404, detail="Billing not found")

    payment = Payment(**payment_data.dict())
    try:
        db.add(payment)
        db.commit()
        db.refresh(payment)
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=integrity_error_status(e), detail="Failed to create payment")
    except Exception:
        db.rollback()
        logger.exception("Failed to create payment")
        raise HTTPException(status_code=500, detail="Failed to create payment")

    logger.info(f"Recorded {payment.method.value} payment {payment.id} against billing {payment.billing_id}")
    return payment
