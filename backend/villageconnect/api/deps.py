"""API dependencies for dependency injection and authentication."""

from typing import Optional
from datetime import datetime, timedelta
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from jose import JWTError, jwt

from villageconnect.database import get_db
from villageconnect.config import get_settings
from villageconnect.exceptions import Unauthenticated
from villageconnect.models.user import User
from villageconnect.schemas.user import UserUpsert
from villageconnect.services.business_service import BusinessService
from villageconnect.services.user_service import UserService

settings = get_settings()
security = HTTPBearer(auto_error=False)

# Optional profile claims copied onto the user record
PROFILE_CLAIMS = ("email", "first_name", "last_name", "profile_image_url")


# =============================================================================
# JWT Token Utilities
# =============================================================================

def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    extra_claims: Optional[dict] = None,
) -> str:
    """
    Create a token in the identity provider's format.

    Used for local development and tests; production tokens come from the
    provider and share the same secret and claims.
    """
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    
    to_encode = {
        "sub": subject,
        "exp": expire,
    }
    if settings.JWT_AUDIENCE:
        to_encode["aud"] = settings.JWT_AUDIENCE
    
    if extra_claims:
        to_encode.update(extra_claims)
    
    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            options={"verify_aud": settings.JWT_AUDIENCE is not None},
        )
    except JWTError:
        raise Unauthenticated("Could not validate credentials")


def claims_to_profile(claims: dict) -> UserUpsert:
    """Build the user record from token claims. ``sub`` is required."""
    user_id = claims.get("sub")
    if not user_id:
        raise Unauthenticated("Invalid token - no subject")
    
    return UserUpsert(
        id=str(user_id),
        **{claim: claims.get(claim) for claim in PROFILE_CLAIMS},
    )


# =============================================================================
# Authentication Dependencies
# =============================================================================

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the caller from the bearer token and upsert their profile."""
    if credentials is None:
        raise Unauthenticated()
    
    claims = decode_token(credentials.credentials)
    profile = claims_to_profile(claims)
    return await UserService(db).upsert(profile)


# =============================================================================
# Service Dependencies
# =============================================================================

async def get_business_service(
    db: AsyncSession = Depends(get_db),
) -> BusinessService:
    """Business store bound to the request's session."""
    return BusinessService(db)
