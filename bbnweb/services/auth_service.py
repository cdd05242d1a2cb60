"""Per-request authentication state.

Pages never look auth up from ambient state: the ``get_auth_state``
dependency builds an :class:`AuthState` for the request and the route passes
it explicitly to the document shell and to any component that reads it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Request

from ..core.config import Config
from ..core.validation import is_valid_access_token
from . import supabase_service


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthState:
    user: Optional[Dict[str, Any]] = None
    profile: Optional[Dict[str, Any]] = None
    makeup_artist: Optional[Dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_makeup_artist(self) -> bool:
        return self.makeup_artist is not None

    @property
    def display_name(self) -> Optional[str]:
        if self.profile and self.profile.get('full_name'):
            return self.profile['full_name']
        if self.user:
            return self.user.get('email')
        return None


ANONYMOUS = AuthState()


def load_auth_state(access_token: Optional[str], client=None) -> AuthState:
    """Resolve user, profile and artist record for ``access_token``.

    Any lookup failure yields the anonymous state; rendering never fails
    because of auth.
    """
    if not is_valid_access_token(access_token):
        return ANONYMOUS

    try:
        user = supabase_service.get_session_user(access_token, client=client)
        if not user:
            logger.info("No active session for access token")
            return ANONYMOUS

        profile = supabase_service.get_user_profile(user['id'], client=client)
        if not profile:
            logger.info(f"No profile found for user {user['id']}")
            return AuthState(user=user)

        artist = supabase_service.get_makeup_artist_by_profile(profile['id'], client=client)
        return AuthState(user=user, profile=profile, makeup_artist=artist)
    except Exception as e:
        logger.error(f"Session load error, continuing anonymously: {e}")
        return ANONYMOUS


def get_auth_state(request: Request) -> AuthState:
    """FastAPI dependency returning the auth state of the current request."""
    access_token = request.cookies.get(Config.AUTH_COOKIE_NAME)
    if not access_token:
        return ANONYMOUS
    return load_auth_state(access_token)
