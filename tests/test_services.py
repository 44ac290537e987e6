import pytest
from django.db import IntegrityError

from apps.posts.models import Post
from apps.posts.services import PostStore

pytestmark = pytest.mark.django_db


@pytest.fixture
def post_store():
    return PostStore()


def test_get_post(post_store):
    post = Post.objects.create(title='T', slug='t', markdown='m')

    assert post_store.get_post('t') == post
    assert post_store.get_post('missing') is None


def test_create_post(post_store):
    post = post_store.create_post(title='T', slug='t', markdown='m')

    assert Post.objects.get(slug='t') == post


def test_duplicate_slug_raises(post_store):
    post_store.create_post(title='T', slug='t', markdown='m')

    with pytest.raises(IntegrityError):
        post_store.create_post(title='Other', slug='t', markdown='m')


def test_update_post_can_rename(post_store):
    Post.objects.create(title='T', slug='t', markdown='m')

    post_store.update_post('t', title='T2', slug='t2', markdown='m2')

    post = Post.objects.get()
    assert (post.title, post.slug, post.markdown) == ('T2', 't2', 'm2')


def test_update_missing_post_raises(post_store):
    with pytest.raises(Post.DoesNotExist):
        post_store.update_post('missing', title='T', slug='t', markdown='m')


def test_delete_post(post_store):
    Post.objects.create(title='T', slug='t', markdown='m')

    assert post_store.delete_post('t') == 1
    assert post_store.delete_post('t') == 0
    assert not Post.objects.exists()


def test_long_title_and_slug_are_accepted(post_store):
    title, slug = 'T' * 500, 's' * 500

    post_store.create_post(title=title, slug=slug, markdown='m')

    post = Post.objects.get(slug=slug)
    assert post.title == title
    assert Post._meta.get_field('title').max_length is None
    assert Post._meta.get_field('slug').max_length is None
