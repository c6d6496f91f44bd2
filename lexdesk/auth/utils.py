from datetime import datetime, timedelta, timezone
from typing import Optional

from decouple import config
from fastapi import HTTPException
from jose import JWTError, jwt
from passlib.hash import pbkdf2_sha256

from lexdesk.auth.schemas import TokenData

SECRET_KEY = config("SECRET_KEY", default="change-me")
ALGORITHM = config("ALGORITHM", default="HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = config("ACCESS_TOKEN_EXPIRE_MINUTES", default=60 * 24, cast=int)


def get_password_hash(password: str) -> str:
    return pbkdf2_sha256.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    try:
        return pbkdf2_sha256.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a pbkdf2 hash
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str, credentials_exception: HTTPException) -> TokenData:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise credentials_exception

    subject = payload.get("sub")
    user_type = payload.get("type")
    if subject is None or user_type not in ("user", "client"):
        raise credentials_exception
    return TokenData(subject=subject, user_type=user_type)
