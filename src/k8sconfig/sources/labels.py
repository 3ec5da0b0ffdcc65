"""Label expression parsing.

A label expression is either ``key`` (select resources carrying the label) or
``key=value`` (select resources whose label equals the value). Expressions are
split once, at the first ``=``; anything after that is part of the value.
"""

import logging

logger = logging.getLogger(__name__)

LABEL_SEPARATOR = "="


def parse_label(expression: str | None) -> tuple[str | None, str | None]:
    """Split a label expression into its name and value.

    Args:
        expression: Raw expression such as ``"app"`` or ``"app=billing"``

    Returns:
        Tuple of (label_name, label_value). Either part is None when unset.

    Example:
        >>> parse_label("tier=web=v2")
        ('tier', 'web=v2')
        >>> parse_label("tier")
        ('tier', None)
        >>> parse_label("")
        (None, None)
    """
    if not expression:
        return None, None

    name, separator, value = expression.partition(LABEL_SEPARATOR)
    if not name:
        # A selector without a key matches nothing, keep neither part
        logger.warning(f"Label expression has no name: {expression!r}")
        return None, None

    if not separator or not value:
        return name, None
    return name, value


def format_label(name: str | None, value: str | None = None) -> str | None:
    """Render a label name and optional value back into an expression."""
    if not name:
        return None
    if value is None:
        return name
    return f"{name}{LABEL_SEPARATOR}{value}"
