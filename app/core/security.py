from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

from app.core.config import settings
from app.core.errors import Unauthorized

bearer_scheme = HTTPBearer(auto_error=False)


# Token generation
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


# Token verification
def verify_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        raise Unauthorized("Invalid or expired token")


def get_current_user_id(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Identity of the caller, or None for anonymous requests.

    Rejecting anonymous callers is left to the services, which know which
    operations need a user.
    """
    if creds is None or creds.scheme.lower() != "bearer":
        return None

    payload = verify_token(creds.credentials)
    user_id = payload.get("sub")
    if not user_id:
        raise Unauthorized("Invalid token payload")

    return str(user_id)
