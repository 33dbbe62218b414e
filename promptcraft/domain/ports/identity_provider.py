"""
Identity Provider Port - who is signed in, if anyone.
"""

from abc import ABC, abstractmethod
from typing import Optional

from promptcraft.domain.value_objects.user_id import UserId


class IdentityProvider(ABC):
    @abstractmethod
    def current_user_id(self) -> Optional[UserId]: ...
