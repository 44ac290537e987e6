"""
Errors raised while loading or changing posts from the admin.

Validation failures are not errors: they come back from the dispatcher as a
ValidationErrors result so the form can be redisplayed.
"""


class PostAdminError(Exception):
    """Base class for post admin errors."""


class Unauthorized(PostAdminError):
    """The requester is not allowed to manage posts."""

    def __init__(self, message='Admin access required', authenticated=False):
        super().__init__(message)
        self.authenticated = authenticated


class InvalidInput(PostAdminError):
    """The route did not supply a post identifier."""


class NotFound(PostAdminError):
    """No post exists for the requested slug."""

    def __init__(self, slug):
        super().__init__(f'No post with slug "{slug}"')
        self.slug = slug


class UnknownIntent(PostAdminError):
    """The submitted intent is not one of create, update or delete."""

    def __init__(self, value):
        super().__init__(f'Unknown intent: {value!r}')
        self.value = value
