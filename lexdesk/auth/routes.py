import logging
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lexdesk.database import get_db
from lexdesk.models import Client, User
from lexdesk.auth.schemas import UserCreate, UserLogin, UserResponse, AccountResponse
from lexdesk.auth.utils import verify_password, get_password_hash, create_access_token
from lexdesk.auth.dependencies import Account, get_current_account
from lexdesk.errors import integrity_error_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def account_payload(account: Account, user_type: str) -> dict:
    """Shape a user or client row as an account, never exposing the password."""
    return {
        "id": account.id,
        "email": account.email,
        "first_name": account.first_name,
        "last_name": account.last_name,
        "role": account.role.value if user_type == "user" else "client",
        "phone": account.phone,
        "created_at": account.created_at,
        "user_type": user_type,
    }


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(user_data: UserCreate, db: Session = Depends(get_db)):
    # Check if user already exists
    existing_user = db.query(User).filter(User.email == user_data.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists"
        )

    db_user = User(
        email=user_data.email,
        password_hash=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        role=user_data.role,
        phone=user_data.phone,
    )

    try:
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=integrity_error_status(e), detail="User with this email already exists")
    except Exception:
        db.rollback()
        logger.exception("Failed to register user")
        raise HTTPException(status_code=500, detail="Failed to register user")

    logger.info(f"Registered {db_user.role.value} {db_user.id}")
    return db_user


@router.post("/login", response_model=AccountResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Authenticate a staff user, falling back to a client with portal access."""
    invalid = HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    try:
        account = db.query(User).filter(User.email == credentials.email).first()
        user_type = "user"
        if account is None:
            account = db.query(Client).filter(
                Client.email == credentials.email,
                Client.password_hash.isnot(None)
            ).first()
            user_type = "client"
    except Exception:
        logger.exception("Failed to login")
        raise HTTPException(status_code=500, detail="Failed to login")

    if account is None or not verify_password(credentials.password, account.password_hash):
        logger.warning(f"Rejected login for {credentials.email}")
        raise invalid

    payload = account_payload(account, user_type)
    payload["access_token"] = create_access_token(data={"sub": account.id, "type": user_type})
    payload["token_type"] = "bearer"
    return payload


@router.get("/me", response_model=AccountResponse)
def read_current_account(current: Tuple[Account, str] = Depends(get_current_account)):
    account, user_type = current
    return account_payload(account, user_type)


@router.post("/logout")
def logout():
    # Tokens are stateless; the client discards its own copy
    return {"message": "Logged out successfully"}
