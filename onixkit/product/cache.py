"""Lazy, per-Product cache of materialized subitems."""

import copy
import threading
from typing import Dict, Iterable, Optional, Tuple, Union

from lxml import etree

from .exceptions import NotFoundError
from .log import get_logger
from .models import Subitem
from .subitems import builder_for

CachedItem = Union[Subitem, etree._Element]


class SubitemCache:
    """Materializes the children matching a path once and keeps the result.

    Entries are keyed by (path, variant) and are only ever added. A
    registered variant is built into its frozen model; anything else is
    stored as a detached deep copy of the raw element, so later changes to
    the source tree never show through.
    """

    def __init__(self, root: etree._Element, log_level: str = "INFO"):
        self._root = root
        self._entries: Dict[Tuple[str, str], Tuple[CachedItem, ...]] = {}
        self._lock = threading.Lock()
        self._log_level = log_level

    def __contains__(self, path: str) -> bool:
        return any(key[0] == path for key in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, path: str, variant: Optional[str] = None) -> Tuple[CachedItem, ...]:
        """Return every child of the root matching `path`.

        Args:
            path: ElementPath relative to the <Product> root, e.g.
                "Contributor" or "DescriptiveDetail/Contributor"
            variant: Subitem variant to build; defaults to `path`

        Returns:
            The same tuple instance on every call for a given `path` and
            `variant`
        """
        variant = variant or path
        key = (path, variant)
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        with self._lock:
            # another thread may have filled it while we waited
            entry = self._entries.get(key)
            if entry is None:
                entry = self._materialize(path, variant)
                self._entries[key] = entry
        return entry

    def preload(self, paths: Iterable[Tuple[str, Optional[str]]]) -> None:
        """Fill entries eagerly, e.g. before sharing a Product across threads."""
        for path, variant in paths:
            self.get(path, variant)

    def _materialize(self, path: str, variant: str) -> Tuple[CachedItem, ...]:
        log = get_logger(self._log_level)
        elements = self._root.findall(path)
        builder = builder_for(variant)

        if builder is None:
            items = tuple(copy.deepcopy(element) for element in elements)
        else:
            built = []
            for index, element in enumerate(elements):
                try:
                    built.append(builder(element))
                except NotFoundError as e:
                    # a malformed item is dropped, its siblings are kept
                    log.warning("product.subitem.skipped", extra={"extra_data": {
                        "path": path, "variant": variant, "index": index, "reason": str(e),
                    }})
            items = tuple(built)

        log.debug("product.cache.filled", extra={"extra_data": {
            "path": path, "variant": variant if builder else None, "count": len(items),
        }})
        return items
