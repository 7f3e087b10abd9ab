"""Three-way partition of two collections.

:class:`SetDifference` splits an *actual* collection and an *other*
collection into the elements they share, the elements only in *actual* and
the elements only in *other*. Equality follows an
:class:`~fluent_requirements.configuration.EqualityMethod`:

- when the method provides a key function and every element can be keyed,
  the partition is computed in linear time;
- otherwise elements are compared pairwise.

Each partition holds distinct elements in the iteration order of the
collection they came from. Inputs are never modified.

Example:
    ```python
    from fluent_requirements.difference import SetDifference

    diff = SetDifference.of([1, 2, 3], [2, 3, 4])
    diff.common           # (2, 3)
    diff.only_in_actual   # (1,)
    diff.only_in_other    # (4,)
    ```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Tuple

from fluent_requirements.configuration import EqualityMethod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetDifference:
    """Result of comparing two collections.

    Attributes:
        common: Elements present in both collections (taken from *actual*)
        only_in_actual: Elements of *actual* missing from *other*
        only_in_other: Elements of *other* missing from *actual*
    """

    common: Tuple[Any, ...]
    only_in_actual: Tuple[Any, ...]
    only_in_other: Tuple[Any, ...]

    @classmethod
    def of(
        cls,
        actual: Iterable[Any],
        other: Iterable[Any],
        equality: EqualityMethod = EqualityMethod.STRUCTURAL,
    ) -> SetDifference:
        """Compute the difference between ``actual`` and ``other``.

        Args:
            actual: The collection being validated
            other: The reference collection
            equality: How elements are compared

        Returns:
            A new SetDifference
        """
        actual_elements = list(actual)
        other_elements = list(other)
        if equality.key is not None:
            try:
                return cls._by_key(actual_elements, other_elements, equality)
            except TypeError:
                logger.debug("Elements cannot be keyed, comparing pairwise")
        return cls._pairwise(actual_elements, other_elements, equality)

    @classmethod
    def _by_key(
        cls, actual: List[Any], other: List[Any], equality: EqualityMethod
    ) -> SetDifference:
        key = equality.key
        assert key is not None
        actual_by_key: Dict[Hashable, Any] = {}
        for element in actual:
            actual_by_key.setdefault(key(element), element)
        other_by_key: Dict[Hashable, Any] = {}
        for element in other:
            other_by_key.setdefault(key(element), element)

        common = tuple(e for k, e in actual_by_key.items() if k in other_by_key)
        only_in_actual = tuple(e for k, e in actual_by_key.items() if k not in other_by_key)
        only_in_other = tuple(e for k, e in other_by_key.items() if k not in actual_by_key)
        return cls(common, only_in_actual, only_in_other)

    @classmethod
    def _pairwise(
        cls, actual: List[Any], other: List[Any], equality: EqualityMethod
    ) -> SetDifference:
        distinct_actual = _distinct(actual, equality)
        distinct_other = _distinct(other, equality)

        def contains(elements: List[Any], candidate: Any) -> bool:
            return any(equality.equals(candidate, element) for element in elements)

        common = tuple(e for e in distinct_actual if contains(distinct_other, e))
        only_in_actual = tuple(e for e in distinct_actual if not contains(distinct_other, e))
        only_in_other = tuple(e for e in distinct_other if not contains(distinct_actual, e))
        return cls(common, only_in_actual, only_in_other)

    @property
    def are_equal(self) -> bool:
        """True when neither collection has elements the other lacks."""
        return not self.only_in_actual and not self.only_in_other


def find_duplicates(
    elements: Iterable[Any], equality: EqualityMethod = EqualityMethod.STRUCTURAL
) -> List[Any]:
    """Return one instance of each element that occurs more than once, in order of first repeat."""
    elements = list(elements)
    if equality.key is not None:
        try:
            seen: Dict[Hashable, Any] = {}
            repeated: Dict[Hashable, Any] = {}
            for element in elements:
                element_key = equality.key(element)
                if element_key in seen:
                    repeated.setdefault(element_key, element)
                else:
                    seen[element_key] = element
            return list(repeated.values())
        except TypeError:
            logger.debug("Elements cannot be keyed, comparing pairwise")
    distinct: List[Any] = []
    duplicates: List[Any] = []
    for element in elements:
        if any(equality.equals(element, existing) for existing in distinct):
            if not any(equality.equals(element, existing) for existing in duplicates):
                duplicates.append(element)
        else:
            distinct.append(element)
    return duplicates


def _distinct(elements: List[Any], equality: EqualityMethod) -> List[Any]:
    result: List[Any] = []
    for element in elements:
        if not any(equality.equals(element, existing) for existing in result):
            result.append(element)
    return result


__all__ = ["SetDifference", "find_duplicates"]
