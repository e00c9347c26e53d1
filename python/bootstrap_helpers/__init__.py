"""Bootstrap helpers - server-side view helpers for Twitter Bootstrap markup.

Public API exports:
- View helpers (from bootstrap_helpers.helpers)
- Helper registry (from bootstrap_helpers.registry)
- HTML primitives (from bootstrap_helpers.html)
- Option utilities (from bootstrap_helpers.options)
"""

# View helpers
from bootstrap_helpers.helpers import (
    alert,
    icon_tag,
    image_tag_with_tooltip,
    label,
    tooltip,
)

# Registry
from bootstrap_helpers.registry import HELPERS, helper, install_helpers

# HTML primitives
from bootstrap_helpers.html import (
    Markup,
    safe,
    escape_html,
    render_attr,
    render_class,
    spread_attrs,
    tag,
    content_tag,
    link_to,
    image_tag,
)

# Options
from bootstrap_helpers.options import LabelStyle, reverse_merge

# Errors
from bootstrap_helpers.errors import HelperError, OptionsError, UnknownHelperError

# Alias matching the host-framework name for trusted markup
raw = safe

__all__ = [
    # View helpers
    'icon_tag',
    'tooltip',
    'image_tag_with_tooltip',
    'alert',
    'label',
    'LabelStyle',
    # Registry
    'HELPERS',
    'helper',
    'install_helpers',
    # HTML primitives
    'Markup',
    'safe',
    'raw',
    'escape_html',
    'render_attr',
    'render_class',
    'spread_attrs',
    'tag',
    'content_tag',
    'link_to',
    'image_tag',
    # Options
    'reverse_merge',
    # Errors
    'HelperError',
    'OptionsError',
    'UnknownHelperError',
]
