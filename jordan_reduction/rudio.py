"""
Separating Elements (Rudio)
===========================

For a primitive group G, a subset s that is neither empty nor the whole
domain, and two distinct points a != b, some g in G has a in g.s and
b not in g.s.

The search is exhaustive and vectorized over the group:

    a in g.s   <=>   g^-1(a) in s
"""

import numpy as np

from jordan_reduction.core import ContractViolation, InvariantViolation


def _check_arguments(action, s, a, b):
    s = frozenset(int(x) for x in s)
    if not s <= action.domain:
        raise ContractViolation("{} is not a subset of the domain".format(sorted(s)))
    if not s:
        raise ContractViolation("cannot separate with an empty set")
    if s == action.domain:
        raise ContractViolation("cannot separate with the whole domain")
    if a == b:
        raise ContractViolation("points to separate must be distinct")
    if a not in action.domain or b not in action.domain:
        raise ContractViolation("points {} and {} must lie in the domain".format(a, b))
    return s


def separating_elements(action, s, a, b):
    """All g with a in g.s and b not in g.s, as rows of an array."""
    s = _check_arguments(action, s, a, b)
    members = np.array(sorted(s))
    inv = action.inverses
    hits_a = np.isin(inv[:, a], members)
    hits_b = np.isin(inv[:, b], members)
    return action.perms[hits_a & ~hits_b]


def separate(action, s, a, b):
    """Return one g in G with a in g.s and b not in g.s."""
    found = separating_elements(action, s, a, b)
    if len(found) == 0:
        raise InvariantViolation(
            "no element of {} separates {} from {} via {}; is it preprimitive?".format(
                action.name, a, b, sorted(s)))
    g = found[0]
    gs = action.image(g, s)
    if a not in gs or b in gs:
        raise InvariantViolation("separating element does not separate")
    return g
