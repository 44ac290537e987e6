"""
Context processors for the accounts app.

These functions add variables to all template contexts.
"""
from .decorators import is_admin_user


def admin_status(request):
    """
    Expose whether the current user may use the post admin.
    """
    user = getattr(request, 'user', None)
    return {
        'is_blog_admin': user is not None and is_admin_user(user),
    }
