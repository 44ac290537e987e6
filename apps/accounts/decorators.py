"""
Admin access checks for the blog.
"""
from functools import wraps

from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied

from apps.posts.exceptions import Unauthorized


def is_admin_user(user):
    """Staff accounts and the account registered with ADMIN_EMAIL are admins."""
    if not user.is_authenticated:
        return False
    if user.is_staff:
        return True
    admin_email = getattr(settings, 'ADMIN_EMAIL', '')
    return bool(admin_email) and user.email.lower() == admin_email.lower()


def require_admin_user(request):
    """
    Raise Unauthorized unless the request comes from an admin.

    The exception records whether the requester was logged in at all, so
    callers can choose between sending them to login and refusing access.
    """
    user = request.user
    if not user.is_authenticated:
        raise Unauthorized('Login required', authenticated=False)
    if not is_admin_user(user):
        raise Unauthorized(f'{user} is not an admin', authenticated=True)
    return user


def admin_required(view_func):
    """
    Decorator for views that only admins may see.

    Anonymous users are redirected to login, other users get a 403.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            require_admin_user(request)
        except Unauthorized as exc:
            if not exc.authenticated:
                return redirect_to_login(request.get_full_path())
            raise PermissionDenied(str(exc)) from exc

        return view_func(request, *args, **kwargs)
    return wrapper
