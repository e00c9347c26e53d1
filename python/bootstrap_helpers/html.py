"""HTML escaping, attribute rendering and tag builders.

These are the host primitives the Bootstrap helpers delegate to. Every
builder returns a ``markupsafe.Markup`` so fragments nest inside each other
without being escaped twice.
"""

import logging
import re
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from markupsafe import Markup, escape

__all__ = [
    'Markup',
    'safe',
    'escape_html',
    'render_attr',
    'render_class',
    'render_data',
    'spread_attrs',
    'tag',
    'content_tag',
    'link_to',
    'image_alt',
    'image_tag',
]

logger = logging.getLogger(__name__)

# Fingerprint appended by asset pipelines: "logo-0123456789abcdef0123456789abcdef"
_DIGEST_SUFFIX = re.compile(r'-[0-9a-fA-F]{32}$')

# "10x14" or "10"
_SIZE_PATTERN = re.compile(r'^(\d+)(?:x(\d+))?$')


def safe(value) -> Markup:
    """Mark a value as trusted HTML that will not be escaped.

    Args:
        value: A string, an object with an ``__html__`` method, or None.

    Returns:
        A Markup string.

    Example:
        >>> safe("<b>bold</b>")
        Markup('<b>bold</b>')
        >>> safe(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    if hasattr(value, '__html__'):
        return Markup(value.__html__())
    return Markup(str(value))


def escape_html(value) -> Markup:
    """Escape a value for HTML output.

    Objects with an ``__html__`` method (Markup, the output of every builder
    in this module) are returned unchanged. None renders as an empty string.

    Example:
        >>> escape_html("<script>")
        Markup('&lt;script&gt;')
        >>> escape_html(safe("<b>bold</b>"))
        Markup('<b>bold</b>')
    """
    if value is None:
        return Markup('')
    return escape(value)


def render_attr(name: str, value) -> str:
    """Render a single HTML attribute.

    - True: renders just the attribute name (e.g. "disabled")
    - False/None: renders nothing
    - Other values: renders name="escaped_value"

    Returns:
        Rendered attribute string with leading space, or empty string.

    Example:
        >>> render_attr("disabled", True)
        ' disabled'
        >>> render_attr("id", "main")
        ' id="main"'
    """
    if value is True:
        return f' {name}'
    if value is False or value is None:
        return ''
    return f' {name}="{escape_html(value)}"'


def render_class(*values) -> str:
    """Render a class attribute value from various inputs.

    Accepts strings (passed through), lists/tuples (flattened, nesting
    supported) and dicts (keys kept when their value is truthy). Empty
    values are skipped.

    Example:
        >>> render_class("alert", ["alert-error", ""], {"fade": False})
        'alert alert-error'
    """
    classes = []
    queue = list(values)

    while queue:
        value = queue.pop(0)
        if not value:
            continue
        if isinstance(value, str):
            classes.append(value)
        elif isinstance(value, dict):
            classes.extend(k for k, v in value.items() if v)
        elif isinstance(value, (list, tuple)):
            queue[0:0] = list(value)

    return ' '.join(classes)


def render_data(attrs: dict) -> str:
    """Render data attributes from a dictionary.

    Underscores in keys become dashes, so ``{"original_title": "x"}``
    renders as ``data-original-title="x"``.

    Example:
        >>> render_data({"user_id": 123, "role": "admin"})
        ' data-user-id="123" data-role="admin"'
    """
    if not attrs:
        return ''
    return ''.join(
        f' data-{k.replace("_", "-")}="{escape_html(v)}"'
        for k, v in attrs.items() if v is not None
    )


def _attr_name(key: str) -> str:
    # class_ -> class, for keywords that can't be used as Python identifiers
    return key[:-1] if key.endswith('_') and len(key) > 1 else key


def spread_attrs(attrs: dict) -> str:
    """Render a mapping as HTML attributes, in insertion order.

    ``class`` (string, list or dict) and ``data`` (dict) get their own
    renderers; everything else goes through render_attr().

    Example:
        >>> spread_attrs({"class_": ["btn", "large"], "id": "go", "disabled": True})
        ' class="btn large" id="go" disabled'
    """
    if not attrs:
        return ''
    parts = []
    for key, value in attrs.items():
        name = _attr_name(key)
        match name:
            case 'class':
                parts.append(render_attr(name, render_class(value) or None))
            case 'data' if isinstance(value, dict):
                parts.append(render_data(value))
            case _:
                parts.append(render_attr(name, value))
    return ''.join(parts)


def tag(name: str, /, **attrs) -> Markup:
    """Render a void element such as ``<img />`` or ``<br />``."""
    return Markup(f'<{name}{spread_attrs(attrs)} />')


def content_tag(name: str, content=None, /, **attrs) -> Markup:
    """Render an element with content.

    Content is escaped unless it is already Markup.

    Example:
        >>> content_tag("div", "<hi>", class_="label")
        Markup('<div class="label">&lt;hi&gt;</div>')
    """
    return Markup(f'<{name}{spread_attrs(attrs)}>{escape_html(content)}</{name}>')


def link_to(text, href: str = '#', /, **attrs) -> Markup:
    """Render an anchor element with ``href`` as its first attribute."""
    return content_tag('a', text, **{'href': href, **attrs})


def image_alt(source: str) -> str:
    """Derive default alt text from an image path.

    Example:
        >>> image_alt("/images/lock_icon-0123456789abcdef0123456789abcdef.png")
        'Lock_icon'
    """
    stem = PurePosixPath(urlsplit(str(source)).path).stem
    return _DIGEST_SUFFIX.sub('', stem).capitalize()


def image_tag(source: str, /, **attrs) -> Markup:
    """Render an ``<img />`` element.

    Args:
        source: Image location, used verbatim as ``src``.
        **attrs: HTML attributes. ``size`` ("WxH", or "N" for a square)
            expands to ``width`` and ``height``. ``alt`` defaults to the
            capitalised file name without extension.

    Example:
        >>> image_tag("lock.png", size="10x14", class_="lock")
        Markup('<img src="lock.png" alt="Lock" width="10" height="14" class="lock" />')
    """
    attrs = dict(attrs)
    size = attrs.pop('size', None)

    rendered = {'src': source, 'alt': attrs.pop('alt', image_alt(source))}

    if size is not None:
        match = _SIZE_PATTERN.match(str(size))
        if match:
            attrs.pop('width', None)
            attrs.pop('height', None)
            rendered['width'] = match.group(1)
            rendered['height'] = match.group(2) or match.group(1)
        else:
            logger.debug("image_tag: ignoring unparseable size %r for %s", size, source)

    rendered.update(attrs)
    return tag('img', **rendered)
