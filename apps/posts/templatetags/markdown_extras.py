"""
Template filters for rendering post Markdown as HTML.
"""
import markdown
from django import template
from django.utils.safestring import mark_safe
import bleach

register = template.Library()

# Allowed HTML tags after markdown rendering
ALLOWED_TAGS = [
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'p', 'br', 'hr',
    'strong', 'em', 'b', 'i', 'u', 's', 'strike',
    'ul', 'ol', 'li',
    'blockquote', 'code', 'pre',
    'a', 'img',
    'table', 'thead', 'tbody', 'tr', 'th', 'td',
    'div', 'span',
    'sup', 'sub',
]

ALLOWED_ATTRIBUTES = {
    'a': ['href', 'title', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'code': ['class'],
    'pre': ['class'],
    'div': ['class'],
    'span': ['class'],
    'h1': ['id'], 'h2': ['id'], 'h3': ['id'],
    'h4': ['id'], 'h5': ['id'], 'h6': ['id'],
    'th': ['align'],
    'td': ['align'],
}

EXTENSIONS = [
    'markdown.extensions.fenced_code',  # ```code blocks```
    'markdown.extensions.tables',
    'markdown.extensions.sane_lists',
    'markdown.extensions.toc',          # heading ids
]


def markdown_to_html(text):
    """Convert Markdown to sanitized HTML."""
    if not text:
        return ''

    html = markdown.markdown(text, extensions=EXTENSIONS)

    return bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=True
    )


@register.filter(name='render_markdown')
def render_markdown(value):
    """
    Render a post's Markdown body to HTML.

    Raw HTML in the source is stripped down to the allowed tags, so the
    result is safe to drop into a template.
    """
    return mark_safe(markdown_to_html(value))
