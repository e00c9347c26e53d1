"""View helpers that emit Twitter Bootstrap markup.

Icons, tooltips, alerts and labels. Each helper returns Markup and never
touches the arguments it was given.

See http://twitter.github.com/bootstrap/base-css.html#icons and
http://twitter.github.com/bootstrap/components.html for the markup these
mirror.
"""

import logging
from collections.abc import Iterable

from markupsafe import Markup

from bootstrap_helpers.html import content_tag, image_tag, link_to, render_class, safe
from bootstrap_helpers.options import (
    IconOptions,
    LabelOptions,
    normalize_keys,
    parse_options,
    reverse_merge,
)
from bootstrap_helpers.registry import helper

__all__ = [
    'icon_tag',
    'tooltip',
    'image_tag_with_tooltip',
    'alert',
    'label',
]

logger = logging.getLogger(__name__)

ICON_PREFIX = 'icon-'
ICON_WHITE = 'icon-white'

TOOLTIP_REL = 'tooltip'
DATA_ORIGINAL_TITLE = 'data-original-title'

ALERT_CLASS = 'alert'
ALERT_PREFIX = 'alert-'
CLOSE_LABEL = 'x'
CLOSE_HREF = '#'
CLOSE_CLASS = 'close'

LABEL_CLASS = 'label'


@helper
def icon_tag(name: str, **options) -> Markup:
    """Create a Bootstrap Glyphicons icon.

    Args:
        name: Icon name, e.g. "camera". Prefixed with "icon-" unless it
            already is.
        **options:
            white (bool, False): When false, "icon-white" is added to the
                class list; pass True to get the plain (black) icon.

    Returns:
        ``<i class="icon-... [icon-white]"></i>``

    Raises:
        OptionsError: If ``white`` isn't a boolean.

    Example:
        >>> icon_tag("camera")
        Markup('<i class="icon-camera icon-white"></i>')
    """
    opts = parse_options(IconOptions, options, helper='icon_tag')

    if not name.startswith(ICON_PREFIX):
        logger.debug("icon_tag: prefixing %r with %r", name, ICON_PREFIX)
        name = ICON_PREFIX + name

    classes = [name]
    if not opts.white:
        classes.append(ICON_WHITE)

    return content_tag('i', None, class_=' '.join(classes))


@helper
def tooltip(anchor, tip, link: str = '#') -> Markup:
    """Create a link that shows a Bootstrap tooltip on hover.

    Args:
        anchor: What people hover over. Plain text is escaped; Markup (such
            as the output of image_tag) is kept as is.
        tip: Tooltip text.
        link: Where clicking the anchor goes.

    Example:
        tooltip(image_tag('lock_icon.png', size='10x14', class_='lock'), 'Private folder')
    """
    return link_to(anchor, link, **{DATA_ORIGINAL_TITLE: tip, 'rel': TOOLTIP_REL})


@helper
def image_tag_with_tooltip(source: str, **options) -> Markup:
    """Like tooltip(), but the image itself carries the tooltip instead of a link.

    Args:
        source: Image location, same as image_tag().
        **options: ``tip`` (str, '') is the text shown on hover. Everything
            else goes to image_tag(). A ``rel`` or ``data-original-title``
            supplied here (directly or as ``data={"original_title": ...}``)
            wins over the tooltip defaults.
    """
    options = reverse_merge(normalize_keys(options), {'tip': ''})
    tip = options.pop('tip')

    defaults = {'rel': TOOLTIP_REL, DATA_ORIGINAL_TITLE: tip}
    data = options.get('data')
    if isinstance(data, dict):
        # data={"original_title": ...} renders the same attribute
        supplied = {f'data-{key.replace("_", "-")}' for key in data}
        defaults = {k: v for k, v in defaults.items() if k not in supplied}
    options = reverse_merge(options, defaults)

    return image_tag(source, **options)


def _class_tokens(classes) -> list:
    if classes is None:
        return []
    if isinstance(classes, bytes):
        return [classes.decode()]
    if isinstance(classes, str) or not isinstance(classes, Iterable):
        return [classes]
    return list(classes)


@helper
def alert(msg, classes=None) -> Markup:
    """Create a Bootstrap alert with a close button.

    Args:
        msg: Alert message. Inserted raw: it is trusted markup, not escaped.
        classes: Extra alert classes: None, a single class or a list of
            them. Each is prefixed with "alert-".

    Example:
        >>> alert("Saved.", "success")
        Markup('<div class="alert alert-success"><a href="#" class="close">x</a>Saved.</div>')
    """
    klass = render_class(ALERT_CLASS, [f'{ALERT_PREFIX}{c}' for c in _class_tokens(classes)])
    close = link_to(CLOSE_LABEL, CLOSE_HREF, class_=CLOSE_CLASS)

    return content_tag('div', close + safe(msg), class_=klass)


@helper
def label(text, **options) -> Markup:
    """Create a Bootstrap label.

    Args:
        text: Label text (escaped).
        **options:
            class (str): Extra space-separated classes, placed first.
            label_style (LabelStyle | str): success, warning, important,
                info or inverse. Not checked; anything else lands in the
                class list as is.
            Any other key is rendered as an HTML attribute.

    Example:
        >>> label("Pro", class_="extra", label_style="success")
        Markup('<div class="extra label success">Pro</div>')
    """
    opts = parse_options(LabelOptions, options, helper='label')

    klass = (opts.css_class or '').split()
    klass.append(LABEL_CLASS)
    if opts.label_style is not None:
        klass.append(str(opts.label_style))

    return content_tag(
        'div', text, class_=' '.join(k for k in klass if k), **opts.html_attrs
    )
