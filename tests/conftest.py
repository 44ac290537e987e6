import pytest

from apps.posts.exceptions import Unauthorized


class FakePost:
    def __init__(self, title, slug, markdown):
        self.title = title
        self.slug = slug
        self.markdown = markdown


class FakePostStore:
    """In-memory stand-in for PostStore that records every call."""

    def __init__(self, posts=()):
        self.posts = {post.slug: post for post in posts}
        self.calls = []

    def get_posts(self):
        return list(self.posts.values())

    def get_post(self, slug):
        self.calls.append(('get', slug))
        return self.posts.get(slug)

    def create_post(self, *, title, slug, markdown):
        self.calls.append(('create', {'title': title, 'slug': slug, 'markdown': markdown}))
        post = FakePost(title, slug, markdown)
        self.posts[slug] = post
        return post

    def update_post(self, identifier, *, title, slug, markdown):
        self.calls.append(('update', identifier, {'title': title, 'slug': slug, 'markdown': markdown}))
        self.posts.pop(identifier)
        post = FakePost(title, slug, markdown)
        self.posts[slug] = post
        return post

    def delete_post(self, identifier):
        self.calls.append(('delete', identifier))
        return 1 if self.posts.pop(identifier, None) else 0

    @property
    def mutations(self):
        return [call for call in self.calls if call[0] != 'get']


@pytest.fixture
def store():
    return FakePostStore([FakePost('Old title', 'old-slug', '# Old')])


@pytest.fixture
def allow():
    seen = []

    def authorize(requester):
        seen.append(requester)

    authorize.seen = seen
    return authorize


@pytest.fixture
def deny():
    def authorize(requester):
        raise Unauthorized('nope', authenticated=True)

    return authorize


@pytest.fixture
def owner(django_user_model):
    """Non-staff user whose email matches ADMIN_EMAIL."""
    return django_user_model.objects.create_user(
        username='owner', email='Owner@Example.com', password='secret-pass-1'
    )


@pytest.fixture
def reader(django_user_model):
    return django_user_model.objects.create_user(
        username='reader', email='reader@example.com', password='secret-pass-1'
    )
