"""
Authentication utilities - JWT, password hashing, and permission checks
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Dict
import bcrypt
from jose import JWTError, jwt
from fastapi import HTTPException, status, Depends, Header
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.config.settings import settings
from app.database.db_operations import db_ops
from app.config.database import Collections

logger = logging.getLogger(__name__)

# JWT Bearer token; missing credentials are reported by get_current_user
security = HTTPBearer(auto_error=False)

def hash_password(password: str) -> str:
    """Hash a password using bcrypt directly"""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash"""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        return False

def create_access_token(data: Dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str) -> Dict:
    """Decode and verify a JWT token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError as e:
        logger.warning("JWT verification failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Dict:
    """Get the token payload of the authenticated caller"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    if not payload.get("sub"):
        logger.warning("Token rejected: payload carries no subject")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials"
        )
    return payload

async def require_admin(
    current_user: Dict = Depends(get_current_user),
    actor_id: Optional[str] = Header(None, alias="id"),
) -> Dict:
    """Dependency resolving the acting user from the token and requiring the admin role.

    The legacy ``id`` header is only honoured when it names the same user as
    the token subject.
    """
    subject = current_user["sub"]
    if actor_id and actor_id != subject:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Actor header does not match token"
        )

    user = await db_ops.get_by_id(Collections.USERS, subject)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    if user.get("role") != settings.ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have admin access"
        )
    return user

async def require_write_access(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    actor_id: Optional[str] = Header(None, alias="id"),
) -> Optional[Dict]:
    """Guard for single-record writes (update, delete one).

    Open to anyone unless STRICT_ADMIN_WRITES is enabled.
    """
    if not settings.STRICT_ADMIN_WRITES:
        return None
    current_user = await get_current_user(credentials)
    return await require_admin(current_user, actor_id)

async def require_bulk_delete_access(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    actor_id: Optional[str] = Header(None, alias="id"),
) -> Dict:
    """Guard for delete-all: a valid token, plus the admin role in strict mode"""
    current_user = await get_current_user(credentials)
    if not settings.STRICT_ADMIN_WRITES:
        return current_user
    return await require_admin(current_user, actor_id)
