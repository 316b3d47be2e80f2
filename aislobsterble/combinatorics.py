"""Step functions over index combinations and permutations.

Each step function takes the current selection and returns the next one in
lexicographic order, or None once the sequence is exhausted. They are
stateless and restartable; the generators below wrap them as lazy sequences.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def next_combination(selection: Sequence[int], population_size: int) -> list[int] | None:
    """Next k-subset of ``range(population_size)`` after ``selection``.

    >>> next_combination([0, 1, 2, 3], 6)
    [0, 1, 2, 4]
    """
    k = len(selection)
    if population_size < k:
        raise ValueError(
            f"Cannot choose {k} items from a population of {population_size}"
        )
    if k == 0:
        return None

    result = list(selection)
    i = k - 1
    while result[i] == population_size - k + i:
        if i == 0:
            return None
        i -= 1
    result[i] += 1
    for j in range(i + 1, k):
        result[j] = result[i] + j - i
    return result


def next_permutation(permutation: Sequence[int]) -> list[int] | None:
    """Next permutation in lexicographic order.

    >>> next_permutation([0, 1, 2, 3])
    [0, 1, 3, 2]
    """
    result = list(permutation)
    pivot = len(result) - 2
    while pivot >= 0 and result[pivot] >= result[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return None

    swap = len(result) - 1
    while result[pivot] >= result[swap]:
        swap -= 1
    result[pivot], result[swap] = result[swap], result[pivot]
    result[pivot + 1:] = reversed(result[pivot + 1:])
    return result


def combinations(population_size: int, k: int) -> Iterator[list[int]]:
    """All k-subsets of ``range(population_size)``, smallest first."""
    selection: list[int] | None = list(range(k))
    if k > population_size:
        return
    if k == 0:
        yield []
        return
    while selection is not None:
        yield selection
        selection = next_combination(selection, population_size)


def permutations(items: Sequence[int]) -> Iterator[list[int]]:
    """All orderings of ``items``, starting from ``sorted(items)``."""
    permutation: list[int] | None = sorted(items)
    while permutation is not None:
        yield permutation
        permutation = next_permutation(permutation)
