"""
Loading and changing posts on behalf of the admin.

PostAdmin holds the two operations behind the admin post page:

- load: what the edit form should show for a route identifier
- dispatch: what a form submission should do (create, update or delete)

Authorization and persistence are injected so the logic can be exercised
without a database or a logged-in user.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from django.urls import reverse

from .exceptions import NotFound
from .identifiers import ExistingPost, Intent, NewPost, parse_identifier, parse_intent

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'slug', 'markdown')


@dataclass(frozen=True)
class PostView:
    """What the edit form is rendered from. post is None on the creation route."""
    post: Optional[Any] = None

    @property
    def is_new(self) -> bool:
        return self.post is None


@dataclass(frozen=True)
class Redirect:
    location: str


class ValidationErrors(dict):
    """
    Per-field messages for a rejected create or update.

    Every required field has an entry: None when it was filled in, otherwise
    a message such as "Title is required".
    """

    @classmethod
    def check(cls, fields: Mapping[str, Any]) -> 'ValidationErrors':
        return cls({
            name: None if fields.get(name) else f'{name.capitalize()} is required'
            for name in REQUIRED_FIELDS
        })

    @property
    def has_errors(self) -> bool:
        return any(message for message in self.values())


def admin_index_url() -> str:
    return reverse('posts:admin_index')


class PostAdmin:
    """Post loading and form dispatch for admins."""

    def __init__(self, authorize: Callable[[Any], Any], store):
        self.authorize = authorize
        self.store = store

    def load(self, identifier: Optional[str], requester) -> PostView:
        """
        Return the post named by identifier for editing.

        The creation route yields an empty PostView. Raises NotFound when
        an existing slug has no post.
        """
        self.authorize(requester)
        target = parse_identifier(identifier)

        if isinstance(target, NewPost):
            return PostView()

        post = self.store.get_post(target.slug)
        if post is None:
            raise NotFound(target.slug)
        return PostView(post=post)

    def dispatch(self, identifier: Optional[str], requester, fields: Mapping[str, Any]):
        """
        Act on a submitted post form.

        Returns a Redirect to the admin listing after a change, or
        ValidationErrors when a create or update is missing fields.
        """
        self.authorize(requester)
        target = parse_identifier(identifier)
        intent = parse_intent(fields.get('intent'))

        if intent is Intent.DELETE:
            self.store.delete_post(target.slug)
            logger.info(f"Deleted post {target.slug}")
            return Redirect(admin_index_url())

        errors = ValidationErrors.check(fields)
        if errors.has_errors:
            logger.debug(f"Rejected {intent.value} for {target.slug}: {dict(errors)}")
            return errors

        values = {name: fields[name] for name in REQUIRED_FIELDS}

        if isinstance(target, ExistingPost):
            # Keyed by the slug in the route, the submitted slug may be a rename
            self.store.update_post(target.slug, **values)
            logger.info(f"Updated post {target.slug} -> {values['slug']}")
        else:
            self.store.create_post(**values)
            logger.info(f"Created post {values['slug']}")

        return Redirect(admin_index_url())
