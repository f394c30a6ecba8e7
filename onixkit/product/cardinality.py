"""Cardinality validation for the direct children of a <Product>."""

from typing import Dict, Mapping

from lxml import etree

from .exceptions import StructuralError
from .log import get_logger
from .settings import CardinalityRule


def count_children(root: etree._Element, name: str) -> int:
    return len(root.findall(name))


def check_cardinality(root: etree._Element, rules: Mapping[str, CardinalityRule],
                      log_level: str = "INFO") -> Dict[str, int]:
    """Check every rule against `root`.

    Rules with neither bound set are skipped without touching the tree.

    Returns:
        Occurrence count per checked element name

    Raises:
        StructuralError: on the first violated bound
    """
    counts = {}
    for name, rule in rules.items():
        if not (rule.min or rule.max):
            continue
        count = count_children(root, name)
        counts[name] = count

        error = None
        if rule.min and count < rule.min:
            error = StructuralError.too_few(name, rule.min, count)
        elif rule.max and count > rule.max:
            error = StructuralError.too_many(name, rule.max, count)

        if error is not None:
            get_logger(log_level).error(
                "product.cardinality.violation",
                extra={"extra_data": {"element": name, "expected": error.expected, "found": count}},
            )
            raise error
    return counts
