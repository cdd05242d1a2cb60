import logging
from typing import Any, Dict, Optional

from supabase import create_client, Client

from ..core.config import Config


logger = logging.getLogger(__name__)


def get_client() -> Client:
    return create_client(Config.SUPABASE_URL, Config.SUPABASE_ANON_KEY)


def get_session_user(access_token: str, client: Optional[Client] = None) -> Optional[Dict[str, Any]]:
    """Resolve the auth user behind ``access_token``, or None when there is no session."""
    try:
        supabase: Client = client or get_client()
        response = supabase.auth.get_user(access_token)

        user = getattr(response, 'user', None)
        if user is None:
            return None
        if hasattr(user, 'model_dump'):
            return user.model_dump()
        return dict(user)
    except Exception as e:
        logger.error(f"Failed to resolve session user: {e}")
        raise


def get_user_profile(auth_user_id: str, client: Optional[Client] = None) -> Optional[Dict[str, Any]]:

    try:
        supabase: Client = client or get_client()

        result = (
            supabase
            .table('user_profiles')
            .select('*')
            .eq('auth_user_id', auth_user_id)
            .limit(1)
            .execute()
        )

        if not result.data:
            return None
        return result.data[0]
    except Exception as e:
        logger.error(f"Failed to fetch user profile for {auth_user_id}: {e}")
        raise


def get_makeup_artist_by_profile(profile_id: str, client: Optional[Client] = None) -> Optional[Dict[str, Any]]:

    try:
        supabase: Client = client or get_client()

        result = (
            supabase
            .table('makeup_artists')
            .select('*')
            .eq('user_profile_id', profile_id)
            .limit(1)
            .execute()
        )

        if not result.data:
            return None
        return result.data[0]
    except Exception as e:
        logger.error(f"Failed to fetch makeup artist for profile {profile_id}: {e}")
        raise


def check_connection(client: Optional[Client] = None) -> None:
    supabase: Client = client or get_client()
    supabase.table('user_profiles').select('id').limit(1).execute()
