"""Config map source resolution.

Turns the default identity and the declared sources into the ordered list of
lookups the retrieval layer performs. Resolution is pure: inputs are only read
and every call builds new ``NormalizedSource`` instances.
"""

import logging
from collections.abc import Sequence

from .models import NormalizedSource, SourceDeclaration, blank_to_none

logger = logging.getLogger(__name__)


def resolve_sources(
    default_name: str | None,
    default_namespace: str | None,
    declarations: Sequence[SourceDeclaration],
) -> list[NormalizedSource]:
    """Resolve declared sources against the default name and namespace.

    Each declaration is normalized on its own and the result keeps the
    declaration order, since retrieval may give earlier sources precedence.
    With no declarations a single source is built from the defaults.

    Args:
        default_name: Name used by declarations that set neither name nor label
        default_namespace: Namespace used by declarations that set no namespace
        declarations: Declared sources, possibly empty

    Returns:
        One NormalizedSource per declaration, never an empty list

    Example:
        >>> resolve_sources("app", "prod", [])
        [NormalizedSource(name='app', namespace='prod', label_name=None, label_value=None)]
    """
    if not declarations:
        logger.debug(
            f"No sources declared, using default source {default_name!r} in {default_namespace!r}"
        )
        return [
            NormalizedSource(
                name=blank_to_none(default_name), namespace=blank_to_none(default_namespace)
            )
        ]

    resolved = [decl.normalize(default_name, default_namespace) for decl in declarations]
    for source in resolved:
        logger.debug(f"Resolved source: {source!r}")
    return resolved
