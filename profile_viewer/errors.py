class ProfileViewerError(Exception):
    pass


class ProfileFetchError(ProfileViewerError):
    """The request never produced a response (DNS, connection, timeout...)."""
    pass


class ProfileDecodeError(ProfileViewerError):
    """A response arrived but its body is not a GitHub user profile."""
    pass
