"""Namespace search order resolution."""

import re
from typing import List, Optional, Sequence, Tuple

from uistrings.i18n.models import LookupOptions

NAMESPACE_PREFIX = re.compile(r"^(\w+):", re.ASCII)


def split_namespace_prefix(key: str) -> Tuple[Optional[str], str]:
    """Split a leading ``namespace:`` prefix off a string id.

    Example:
        >>> split_namespace_prefix("errors:not_found")
        ('errors', 'not_found')
        >>> split_namespace_prefix("not_found")
        (None, 'not_found')
    """
    match = NAMESPACE_PREFIX.match(key)
    if match is None:
        return None, key
    return match.group(1), key[match.end():]


class NamespaceResolver:
    """Computes the ordered namespaces searched by a lookup.

    Attributes:
        default_ns: Default namespace search order.
    """

    def __init__(self, default_ns: Optional[Sequence[str]] = None):
        self.default_ns = list(default_ns or [])

    def resolve(self, options: LookupOptions) -> List[str]:
        """Return the namespace search order for a lookup.

        ``set_namespaces`` replaces the defaults entirely. Otherwise
        ``add_namespaces`` are appended in order and each of the
        ``insert_namespaces`` is placed at the front in turn, so later
        insertions come before earlier ones.
        """
        if options.set_namespaces is not None:
            return list(options.set_namespaces)

        namespaces = list(self.default_ns)
        if options.add_namespaces:
            namespaces.extend(options.add_namespaces)
        for namespace in options.insert_namespaces or ():
            namespaces.insert(0, namespace)
        return namespaces
