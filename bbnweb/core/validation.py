import logging
import re
from typing import Optional


logger = logging.getLogger(__name__)

MAX_TOKEN_LENGTH = 8 * 1024
ACCESS_TOKEN_PATTERN = re.compile(r'^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*$')


def is_valid_access_token(token: Optional[str]) -> bool:
    """Cheap shape check for a Supabase JWT before it is sent anywhere."""
    if not token:
        return False
    if len(token) > MAX_TOKEN_LENGTH:
        logger.warning(f"Rejected access token longer than {MAX_TOKEN_LENGTH} characters")
        return False
    if not ACCESS_TOKEN_PATTERN.match(token):
        logger.warning("Rejected malformed access token")
        return False
    return True
