from apps.posts.templatetags.markdown_extras import markdown_to_html, render_markdown


def test_empty_body():
    assert markdown_to_html('') == ''
    assert markdown_to_html(None) == ''


def test_headings_get_ids():
    assert markdown_to_html('## Getting started') == '<h2 id="getting-started">Getting started</h2>'


def test_fenced_code():
    html = markdown_to_html('```\nprint("hi")\n```')
    assert html.startswith('<pre><code>')


def test_script_tags_are_stripped():
    html = markdown_to_html('Hello <script>alert(1)</script>')
    assert '<script>' not in html
    assert 'Hello' in html


def test_disallowed_attributes_are_dropped():
    html = markdown_to_html('<a href="/x" onclick="evil()">x</a>')
    assert 'onclick' not in html
    assert 'href="/x"' in html


def test_filter_output_is_safe():
    assert hasattr(render_markdown('*hi*'), '__html__')
