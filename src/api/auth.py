"""Bearer-token authentication against Supabase Auth."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import AuthApiError

from src.transcription.storage import get_supabase_client

logger = logging.getLogger(__name__)

# Routes check their input before identity.
_bearer = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)]


@dataclass(frozen=True)
class AuthenticatedUser:
    """The caller, as verified by Supabase Auth."""

    id: str
    access_token: str


def authenticate(credentials: HTTPAuthorizationCredentials | None) -> AuthenticatedUser:
    """Resolve a bearer token to a Supabase user or raise 401.

    Only a rejection from Supabase Auth is a 401. Network errors and outages
    propagate to the app's catch-all handler as 500s.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Unauthorized")

    token = credentials.credentials
    try:
        response = get_supabase_client().auth.get_user(token)
    except AuthApiError as exc:
        logger.warning("Token rejected by Supabase Auth: %s", exc.message)
        raise HTTPException(status_code=401, detail="Unauthorized") from exc

    user = response.user if response else None
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")

    return AuthenticatedUser(id=str(user.id), access_token=token)


def get_current_user(credentials: BearerCredentials) -> AuthenticatedUser:
    return authenticate(credentials)


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
