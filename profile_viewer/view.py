from typing import List

from .models import GitHubProfile


TITLE = "GitHub Profile Viewer"
INPUT_LABEL = "GitHub username"
INPUT_PLACEHOLDER = "Enter GitHub username"
SEARCH_LABEL = "Search"
LINK_LABEL = "GitHub URL"
AVATAR_WIDTH = 120


def profile_lines(profile: GitHubProfile) -> List[str]:
    """Text of the profile block, one entry per line, in display order."""
    return [
        f"Username: {profile.login}",
        f"Name: {profile.name or ''}",
        f"Bio: {profile.bio or ''}",
        f"Public Repositories: {profile.public_repos}",
        f"Followers: {profile.followers}",
        f"Following: {profile.following}",
    ]
