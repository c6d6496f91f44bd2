from typing import Optional, Tuple, Union

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from lexdesk.database import get_db
from lexdesk.models import Client, User
from lexdesk.auth.utils import verify_token

bearer_scheme = HTTPBearer(auto_error=False)

Account = Union[User, Client]


def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> Tuple[Account, str]:
    """Resolve the bearer token to a staff user or a client.

    Returns the record together with its ``userType`` ("user" or "client").
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    token_data = verify_token(credentials.credentials, credentials_exception)
    model = User if token_data.user_type == "user" else Client
    account = db.query(model).filter(model.id == token_data.subject).first()
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    return account, token_data.user_type


def get_current_user(
    current: Tuple[Account, str] = Depends(get_current_account)
) -> User:
    account, user_type = current
    if user_type != "user":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Staff account required"
        )
    return account
