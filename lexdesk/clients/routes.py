import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from lexdesk.database import get_db
from lexdesk.models import Client
from lexdesk.auth.utils import get_password_hash
from lexdesk.clients.schemas import ClientCreate, ClientResponse, ClientDetailResponse
from lexdesk.errors import integrity_error_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clients", tags=["Clients"])


@router.get("", response_model=List[ClientResponse])
def list_clients(db: Session = Depends(get_db)):
    """List all clients, ordered by name."""
    try:
        return db.query(Client).order_by(Client.last_name, Client.first_name).all()
    except Exception:
        logger.exception("Failed to fetch clients")
        raise HTTPException(status_code=500, detail="Failed to fetch clients")


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(client_data: ClientCreate, db: Session = Depends(get_db)):
    existing_client = db.query(Client).filter(Client.email == client_data.email).first()
    if existing_client:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Client with this email already exists"
        )

    data = client_data.dict(exclude={"password"})
    db_client = Client(
        **data,
        password_hash=get_password_hash(client_data.password) if client_data.password else None,
    )

    try:
        db.add(db_client)
        db.commit()
        db.refresh(db_client)
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=integrity_error_status(e), detail="Email already exists")
    except Exception:
        db.rollback()
        logger.exception("Failed to create client")
        raise HTTPException(status_code=500, detail="Failed to create client")

    logger.info(f"Created client {db_client.id}")
    return db_client


@router.get("/{client_id}", response_model=ClientDetailResponse)
def get_client(client_id: str, db: Session = Depends(get_db)):
    client = db.query(Client).options(
        selectinload(Client.cases)
    ).filter(Client.id == client_id).first()
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return client
