"""UI state for the profile screen.

All mutation goes through the transition methods below. Each search started
with ``set_loading`` gets a new generation number; completions that carry an
older generation are dropped, so the latest search wins no matter in which
order the network answers arrive.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .models import GitHubProfile

logger = logging.getLogger(__name__)


VALIDATION_ERROR = "Please enter a GitHub username."
DECODE_ERROR = "Error decoding response."


def network_error(message: str) -> str:
    return f"Error: {message}"


@dataclass
class ProfileViewState:
    username: str = ""
    profile: Optional[GitHubProfile] = None
    avatar: Optional[Any] = None
    error_message: Optional[str] = None
    loading: bool = False
    generation: int = 0

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def _accept(self, generation: int, what: str) -> bool:
        if self.is_current(generation):
            return True
        logger.debug(f"Dropping stale {what} from search #{generation} (current #{self.generation})")
        return False

    def reject_input(self, message: str = VALIDATION_ERROR) -> None:
        """Show a validation error without starting a search."""
        self.error_message = message

    def set_loading(self, username: str) -> int:
        """Start a new search and return its generation."""
        self.generation += 1
        self.username = username
        self.loading = True
        self.error_message = None
        return self.generation

    def set_profile(self, generation: int, profile: GitHubProfile) -> bool:
        if not self._accept(generation, "profile"):
            return False
        self.profile = profile
        # the old picture belongs to the old profile
        self.avatar = None
        self.error_message = None
        self.loading = False
        return True

    def set_error(self, generation: int, message: str) -> bool:
        """Show an error; a profile already on screen stays where it is."""
        if not self._accept(generation, "error"):
            return False
        self.error_message = message
        self.loading = False
        return True

    def set_avatar(self, generation: int, image: Any) -> bool:
        if not self._accept(generation, "avatar"):
            return False
        self.avatar = image
        return True
