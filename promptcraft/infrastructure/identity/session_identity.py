"""
Session identity - holds the user id handed over by the sign-in flow.

The sign-in flow itself lives outside this package; it calls sign_in()
with the authenticated user's id and sign_out() when the session ends.
"""

import logging
from typing import Optional

from promptcraft.domain.ports.identity_provider import IdentityProvider
from promptcraft.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class SessionIdentityProvider(IdentityProvider):
    def __init__(self, user_id: Optional[UserId] = None):
        self._user_id = user_id

    def current_user_id(self) -> Optional[UserId]:
        return self._user_id

    def sign_in(self, user_id: UserId) -> None:
        self._user_id = user_id
        logger.info(f"[Auth] Signed in {user_id}")

    def sign_out(self) -> None:
        if self._user_id is not None:
            logger.info(f"[Auth] Signed out {self._user_id}")
        self._user_id = None
