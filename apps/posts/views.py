import logging

from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.http import HttpResponseBadRequest, HttpResponseForbidden
from django.shortcuts import render, redirect, get_object_or_404
from django.views.decorators.http import require_http_methods

from apps.accounts.decorators import admin_required, require_admin_user
from .actions import REQUIRED_FIELDS, PostAdmin, Redirect
from .exceptions import NotFound, Unauthorized, UnknownIntent
from .identifiers import Intent, NewPost, parse_identifier
from .models import Post
from .services import PostStore

logger = logging.getLogger(__name__)

SUCCESS_VERBS = {
    Intent.CREATE: 'created',
    Intent.UPDATE: 'updated',
    Intent.DELETE: 'deleted',
}


# =============================================================================
# Public Views
# =============================================================================

def post_list(request):
    """List all blog posts."""
    posts = PostStore().get_posts()

    return render(request, 'posts/post_list.html', {
        'posts': posts,
    })


def post_detail(request, slug):
    """View a single blog post."""
    post = get_object_or_404(Post, slug=slug)

    return render(request, 'posts/post_detail.html', {
        'post': post,
    })


# =============================================================================
# Admin Views
# =============================================================================

class PostAdminHandler:
    """
    Turns requests for the admin post page into responses.

    GET renders the edit form (empty on the "new" route), POST runs the
    submitted intent. Authorization and storage are injected.
    """

    form_template = 'posts/admin/post_form.html'
    not_found_template = 'posts/admin/post_not_found.html'

    def __init__(self, authorize=require_admin_user, store=None):
        self.admin = PostAdmin(authorize, store if store is not None else PostStore())

    def handle(self, request, slug):
        try:
            if request.method == 'POST':
                return self.submit(request, slug)
            return self.show(request, slug)
        except Unauthorized as exc:
            if not exc.authenticated:
                return redirect_to_login(request.get_full_path())
            return HttpResponseForbidden('Admin access required')
        except NotFound as exc:
            return render(request, self.not_found_template, {
                'slug': exc.slug,
                'title': 'Post not found',
            }, status=404)
        except UnknownIntent as exc:
            logger.warning(f"Unknown intent {exc.value!r} submitted for post {slug}")
            return HttpResponseBadRequest('Unknown intent')

    def show(self, request, slug):
        view = self.admin.load(slug, request)
        values = {}
        if not view.is_new:
            values = {name: getattr(view.post, name) for name in REQUIRED_FIELDS}
        return self.render_form(request, slug, is_new=view.is_new, values=values)

    def submit(self, request, slug):
        result = self.admin.dispatch(slug, request, request.POST)

        if isinstance(result, Redirect):
            verb = SUCCESS_VERBS[Intent(request.POST['intent'])]
            messages.success(request, f'Post {verb} successfully!')
            return redirect(result.location)

        # Validation failed: show the form again with what was submitted
        is_new = isinstance(parse_identifier(slug), NewPost)
        values = {name: request.POST.get(name, '') for name in REQUIRED_FIELDS}
        return self.render_form(request, slug, is_new=is_new, values=values, errors=result)

    def render_form(self, request, slug, is_new, values, errors=None):
        return render(request, self.form_template, {
            'slug': slug,
            'is_new': is_new,
            'values': values,
            'errors': errors or {},
            'title': 'New Post' if is_new else 'Edit Post',
        })


post_admin_handler = PostAdminHandler()


@require_http_methods(['GET', 'POST'])
def admin_post(request, slug):
    """Admin view to create, edit or delete a single post."""
    return post_admin_handler.handle(request, slug)


@admin_required
def admin_index(request):
    """Admin landing page listing posts and linking to the creation form."""
    posts = PostStore().get_posts()

    return render(request, 'posts/admin/index.html', {
        'posts': posts,
        'title': 'Blog Posts',
    })
