import logging
from typing import Dict, Optional
from urllib.parse import quote

import cv2
import numpy as np
import requests
from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import ProfileDecodeError, ProfileFetchError
from .models import GitHubProfile

logger = logging.getLogger(__name__)


USER_ENDPOINT = "{base}/users/{username}"


class GitHubClient:
    """Unauthenticated access to the GitHub user endpoint and avatar images.

    Both calls block; the search controller runs them on worker threads.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()
        self.session.headers.update(self._github_headers())

    def _github_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.settings.user_agent,
        }

    def profile_url(self, username: str) -> str:
        return USER_ENDPOINT.format(base=self.settings.api_base_url, username=quote(username, safe=""))

    def fetch_profile(self, username: str) -> GitHubProfile:
        """Look up a user and decode the response into a GitHubProfile.

        The status code is not checked: an error payload such as
        ``{"message": "Not Found"}`` simply fails to decode.

        Raises:
            ProfileFetchError: no response was received
            ProfileDecodeError: the body is not a user profile
        """
        url = self.profile_url(username)
        try:
            resp = self.session.get(url, timeout=self.settings.request_timeout)
        except requests.RequestException as e:
            logger.warning(f"Profile request for '{username}' failed: {e}")
            raise ProfileFetchError(str(e)) from e

        try:
            profile = GitHubProfile.model_validate_json(resp.content)
        except ValidationError as e:
            logger.warning(f"Could not decode profile for '{username}' (HTTP {resp.status_code}): {e}")
            raise ProfileDecodeError(f"Unexpected response for '{username}'") from e

        logger.info(f"Decoded profile for '{profile.login}'")
        return profile

    def fetch_avatar(self, avatar_url: str) -> Optional[np.ndarray]:
        """Download and decode an avatar, or return None if that is not possible."""
        if not avatar_url:
            return None
        try:
            resp = self.session.get(avatar_url, timeout=self.settings.request_timeout)
        except requests.RequestException as e:
            logger.debug(f"Avatar request to {avatar_url} failed: {e}")
            return None
        return decode_image(resp.content)


def decode_image(data: bytes) -> Optional[np.ndarray]:
    """Decode PNG/JPEG bytes into a BGR array; None if they are not an image."""
    if not data:
        return None
    nparr = np.frombuffer(data, np.uint8)
    img = cv2.imdecode(nparr, cv2.IMREAD_COLOR)
    if img is None:
        logger.debug(f"Discarding {len(data)} bytes that are not a decodable image")
    return img
