"""Helper registry.

The @helper decorator records a view helper under its function name so the
whole set can be dropped into a template engine's globals:

    from jinja2 import Environment
    from bootstrap_helpers import install_helpers

    env = Environment()
    install_helpers(env.globals)
    env.from_string('{{ icon_tag("camera") }}').render()

Any mutable mapping works, e.g. ``app.jinja_env.globals`` in Flask or the
context dict handed to a template.
"""

import functools
import logging
from collections.abc import Callable, Iterable, MutableMapping

from bootstrap_helpers.errors import UnknownHelperError

__all__ = ["HELPERS", "helper", "install_helpers"]

logger = logging.getLogger(__name__)

HELPERS: dict[str, Callable] = {}


def helper(fn):
    """Register a view helper under its function name.

    Args:
        fn: A function returning Markup.

    Returns:
        A wrapper that logs each call at DEBUG level and otherwise behaves
        exactly like ``fn`` (``__wrapped__`` points at the original).
    """

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        logger.debug("%s(args=%r, options=%r)", fn.__name__, args, kwargs)
        return fn(*args, **kwargs)

    HELPERS[fn.__name__] = wrapper
    logger.debug("Registered helper %s", fn.__name__)
    return wrapper


def install_helpers(
    namespace: MutableMapping,
    *,
    names: Iterable[str] | None = None,
    overwrite: bool = True,
) -> list[str]:
    """Copy registered helpers into a template namespace.

    Args:
        namespace: Mapping to install into (template globals, context dict).
        names: Only install these helpers. Defaults to all of them.
        overwrite: When False, names already present in ``namespace`` are
            left alone.

    Returns:
        Names that were installed, in registration order (or ``names`` order).

    Raises:
        UnknownHelperError: If ``names`` contains an unregistered helper.
    """
    if names is None:
        selected = dict(HELPERS)
    else:
        selected = {}
        for name in names:
            if name not in HELPERS:
                raise UnknownHelperError(
                    f"No helper named {name!r}. Registered: {', '.join(HELPERS)}",
                    helper=name,
                )
            selected[name] = HELPERS[name]

    installed = []
    for name, fn in selected.items():
        if not overwrite and name in namespace:
            logger.debug("Skipping %s, already defined in namespace", name)
            continue
        namespace[name] = fn
        installed.append(name)

    logger.debug("Installed helpers: %s", installed)
    return installed
