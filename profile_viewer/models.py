from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GitHubProfile(BaseModel):
    """Subset of the `GET /users/{username}` payload shown on screen."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    login: str
    name: Optional[str] = None
    bio: Optional[str] = None
    public_repos: int = Field(ge=0, description="Number of public repositories")
    followers: int = Field(ge=0)
    following: int = Field(ge=0)
    html_url: str = Field(description="Profile page on github.com")
    avatar_url: str = Field(description="Avatar image; GitHub may send an empty string")
