import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lexdesk.database import get_db
from lexdesk.models import CaseStatus
from lexdesk.cases.schemas import (
    CaseCreate, CaseResponse, CaseListResponse, CaseDetailResponse,
    CaseStatusUpdate, CaseStatusResponse, UPDATABLE_STATUSES
)
from lexdesk.services.case_service import CaseService, ReferenceNotFound
from lexdesk.errors import integrity_error_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cases", tags=["Cases"])

# =====================================================
# CASE CRUD OPERATIONS
# =====================================================

@router.get("", response_model=List[CaseListResponse])
def list_cases(
    client_id: Optional[str] = Query(None, alias="clientId"),
    status: Optional[CaseStatus] = None,
    db: Session = Depends(get_db)
):
    """List cases, optionally for one client."""
    try:
        return CaseService(db).list_cases(client_id=client_id, status=status)
    except Exception:
        logger.exception("Failed to fetch cases")
        raise HTTPException(status_code=500, detail="Failed to fetch cases")


@router.post("", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
def create_case(case_data: CaseCreate, db: Session = Depends(get_db)):
    """Create a new case."""
    try:
        db_case = CaseService(db).create_case(case_data)
    except ReferenceNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=integrity_error_status(e), detail="Failed to create case")
    except Exception:
        db.rollback()
        logger.exception("Failed to create case")
        raise HTTPException(status_code=500, detail="Failed to create case")

    logger.info(f"Created case {db_case.case_number} for client {db_case.client_id}")
    return db_case


@router.get("/{case_id}", response_model=CaseDetailResponse)
def get_case(case_id: str, db: Session = Depends(get_db)):
    """Get a specific case with its appointments, documents and billings."""
    case = CaseService(db).get_case_with_relationships(case_id)
    if not case:
        raise HTTPException(status_code=404, detail="Case not found")
    return case


@router.patch("/{case_id}", response_model=CaseStatusResponse)
def update_case_status(
    case_id: str,
    update: Optional[CaseStatusUpdate] = Body(None),
    db: Session = Depends(get_db)
):
    """Change the status of a case. Only ``status`` may be updated."""
    allowed = [s.value for s in UPDATABLE_STATUSES]
    if update is None or update.status not in allowed:
        raise HTTPException(status_code=400, detail="Invalid status value")

    try:
        case = CaseService(db).update_status(case_id, CaseStatus(update.status))
    except Exception:
        db.rollback()
        logger.exception(f"Failed to update case {case_id}")
        raise HTTPException(status_code=500, detail="Failed to update case status")

    if not case:
        raise HTTPException(status_code=404, detail="Case not found")
    return case
