import pytest

from apps.posts.exceptions import InvalidInput, UnknownIntent
from apps.posts.identifiers import ExistingPost, Intent, NewPost, parse_identifier, parse_intent


def test_new_is_the_creation_route():
    assert parse_identifier('new') == NewPost()
    assert NewPost().slug == 'new'


def test_other_slugs_name_existing_posts():
    assert parse_identifier('hello-world') == ExistingPost(slug='hello-world')


@pytest.mark.parametrize('raw', [None, ''])
def test_missing_identifier_is_invalid(raw):
    with pytest.raises(InvalidInput):
        parse_identifier(raw)


@pytest.mark.parametrize('raw, intent', [
    ('create', Intent.CREATE),
    ('update', Intent.UPDATE),
    ('delete', Intent.DELETE),
])
def test_known_intents(raw, intent):
    assert parse_intent(raw) is intent


@pytest.mark.parametrize('raw', [None, '', 'Delete', 'updte', 'publish'])
def test_unknown_intents_are_rejected(raw):
    with pytest.raises(UnknownIntent) as excinfo:
        parse_intent(raw)
    assert excinfo.value.value == raw
