"""
Data access for blog posts.

PostStore is the persistence collaborator handed to the admin handler; tests
swap it for an in-memory fake with the same methods.
"""
import logging

from .models import Post

logger = logging.getLogger(__name__)


class PostStore:
    """Django ORM backed post storage."""

    def get_posts(self):
        return Post.objects.all()

    def get_post(self, slug):
        """Return the post for slug, or None."""
        return Post.objects.filter(slug=slug).first()

    def create_post(self, *, title, slug, markdown):
        post = Post.objects.create(title=title, slug=slug, markdown=markdown)
        logger.debug(f"Stored new post {post.pk} ({slug})")
        return post

    def update_post(self, identifier, *, title, slug, markdown):
        """
        Update the post currently stored under identifier.

        The slug itself may change, so the lookup key and the new slug are
        passed separately.
        """
        post = Post.objects.get(slug=identifier)
        post.title = title
        post.slug = slug
        post.markdown = markdown
        post.save()
        return post

    def delete_post(self, identifier):
        """Delete the post stored under identifier. Missing slugs are a no-op."""
        deleted, _ = Post.objects.filter(slug=identifier).delete()
        return deleted
