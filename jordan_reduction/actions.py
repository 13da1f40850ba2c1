"""
Group-Action Primitives
=======================

Fixing subgroups, point stabilizers, restricted actions and the
transitivity / primitivity predicates consumed by the reduction engine.

Orbits and blocks are read off sparse graphs:

    orbit graph    -- edge x -> g(x) for every group element g
    orbital graph  -- edge g(a) -- g(b) for every g (Higman's criterion:
                      a transitive group is primitive iff every orbital
                      graph is connected)

Functions:
    fixing_subgroup, act_on_complement, of_fixing_subgroup
    stabilizer, of_stabilizer
    orbits, is_pretransitive, is_preprimitive
    is_multiply_pretransitive, is_multiply_preprimitive
"""

import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import connected_components
from itertools import combinations
from math import perm

from jordan_reduction.core import ContractViolation


# =====================================================================
# RESTRICTED ACTIONS
# =====================================================================

def _as_subset(action, s):
    s = frozenset(int(x) for x in s)
    if not s <= action.domain:
        raise ContractViolation("{} is not a subset of the domain of {}".format(
            sorted(s), action.name))
    return s


def fixing_subgroup(action, s):
    """Fix(G, s): elements acting as identity on every point of s.

    The result still acts on the whole domain of `action`.
    """
    s = _as_subset(action, s)
    if not s:
        return action
    pts = np.array(sorted(s))
    mask = (action.perms[:, pts] == pts).all(axis=1)
    return action.restrict(mask, action.domain,
                           "Fix({}, {})".format(action.name, sorted(s)))


def act_on_complement(fixing, s):
    """Restrict a subgroup fixing s pointwise to the domain minus s."""
    s = _as_subset(fixing, s)
    if s:
        pts = np.array(sorted(s))
        if not (fixing.perms[:, pts] == pts).all():
            raise ContractViolation("{} does not fix {} pointwise".format(
                fixing.name, sorted(s)))
    return type(fixing)(fixing.perms, domain=fixing.domain - s, name=fixing.name)


def of_fixing_subgroup(action, s):
    """Fix(G, s) acting on the domain minus s."""
    return act_on_complement(fixing_subgroup(action, s), s)


def stabilizer(action, a):
    if a not in action.domain:
        raise ContractViolation("{} is not a point of {}".format(a, action.name))
    mask = action.perms[:, a] == a
    return action.restrict(mask, action.domain,
                           "Stab({}, {})".format(action.name, a))


def of_stabilizer(action, a):
    """Stab(G, a) acting on the domain minus {a}."""
    stab = stabilizer(action, a)
    return type(stab)(stab.perms, domain=stab.domain - {a}, name=stab.name)


# =====================================================================
# ORBITS
# =====================================================================

def _positions(action):
    pos = np.full(action.degree, -1, dtype=np.int64)
    pos[list(action.points)] = np.arange(len(action.points))
    return pos


def _components(src, dst, m):
    graph = sparse.coo_matrix(
        (np.ones(len(src), dtype=np.int8), (src, dst)), shape=(m, m))
    n_comp, labels = connected_components(graph, directed=False)
    return n_comp, labels


def orbits(action):
    """Orbits of the group on its domain, as a list of frozensets."""
    pts = action.points
    m = len(pts)
    if m == 0:
        return []
    pos = _positions(action)
    src = np.tile(np.arange(m), action.order)
    dst = pos[action.perms[:, list(pts)]].ravel()
    n_comp, labels = _components(src, dst, m)
    result = [set() for _ in range(n_comp)]
    for i, label in enumerate(labels):
        result[label].add(pts[i])
    return sorted((frozenset(o) for o in result), key=min)


def is_pretransitive(action):
    """Every point of the domain maps to every other (vacuous if empty)."""
    return len(orbits(action)) <= 1


def is_preprimitive(action):
    """Pretransitive, and every block is trivial."""
    if not is_pretransitive(action):
        return False
    pts = action.points
    m = len(pts)
    if m <= 2:
        return True
    pos = _positions(action)
    a = pts[0]
    src = pos[action.perms[:, a]]
    for b in pts[1:]:
        dst = pos[action.perms[:, b]]
        n_comp, _ = _components(src, dst, m)
        if n_comp > 1:
            return False
    return True


# =====================================================================
# MULTIPLE TRANSITIVITY / PRIMITIVITY
# =====================================================================

def is_multiply_pretransitive(action, k):
    """Transitive on injective k-tuples of domain points.

    Vacuously true for k > |domain| (no such tuples).
    """
    pts = action.points
    if k <= 0 or k > len(pts):
        return True
    images = action.perms[:, list(pts[:k])]
    return len(np.unique(images, axis=0)) == perm(len(pts), k)


def is_multiply_preprimitive(action, k, exhaustive=False):
    """k-fold pretransitive, and Fix(G, s) is preprimitive on the rest
    for every s with |s| + 1 = k.

    Unless `exhaustive`, one representative s is checked: k-fold
    pretransitivity makes all (k-1)-subsets conjugate.
    """
    if k <= 0:
        return True
    if not is_multiply_pretransitive(action, k):
        return False
    pts = action.points
    if k - 1 > len(pts):
        return True
    if exhaustive:
        candidates = combinations(pts, k - 1)
    else:
        candidates = [pts[:k - 1]]
    return all(is_preprimitive(of_fixing_subgroup(action, s)) for s in candidates)
