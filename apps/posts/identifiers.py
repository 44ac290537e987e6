"""
Route identifiers and submitted intents for the post admin.
"""
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidInput, UnknownIntent

NEW_POST_SLUG = 'new'


@dataclass(frozen=True)
class NewPost:
    """The creation route: no post exists yet."""

    @property
    def slug(self):
        return NEW_POST_SLUG


@dataclass(frozen=True)
class ExistingPost:
    """A route naming a stored post by its current slug."""
    slug: str


def parse_identifier(raw):
    """
    Turn the route's slug parameter into NewPost or ExistingPost.

    Raises InvalidInput when the parameter is missing or empty.
    """
    if not raw:
        raise InvalidInput('slug is required')
    if raw == NEW_POST_SLUG:
        return NewPost()
    return ExistingPost(slug=raw)


class Intent(str, Enum):
    CREATE = 'create'
    UPDATE = 'update'
    DELETE = 'delete'


def parse_intent(raw):
    """Map the submitted intent field onto Intent, rejecting anything else."""
    try:
        return Intent(raw)
    except ValueError:
        raise UnknownIntent(raw) from None
