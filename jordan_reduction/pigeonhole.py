"""
Finite-Set Pigeonhole Lemmas
============================

Cardinality facts guaranteeing nonempty intersections of subsets of a
finite carrier of size N. Each lemma checks its hypothesis and returns a
witness point; a missing witness under a valid hypothesis is an internal
error.

    ncard_pigeonhole                 N <  |s| + |t|              -> s & t
    ncard_pigeonhole_union_ne        N <= |s| + |t|, s | t != C  -> s & t
    ncard_pigeonhole_compl           |s| + |t| < N               -> C - (s | t)
    ncard_pigeonhole_compl_union_ne  |s| + |t| < N               -> s | t != C
"""

from jordan_reduction.core import ContractViolation, InvariantViolation


def _subsets(s, t, carrier):
    s, t, carrier = frozenset(s), frozenset(t), frozenset(carrier)
    if not (s <= carrier and t <= carrier):
        raise ContractViolation("both sets must lie in the carrier")
    return s, t, carrier


def _witness(points, lemma):
    if not points:
        raise InvariantViolation("{}: conclusion failed under its hypothesis".format(lemma))
    return min(points)


def intersection_lower_bound(s, t, carrier):
    """Inclusion-exclusion: |s & t| = |s| + |t| - |s | t| >= |s| + |t| - N."""
    s, t, carrier = _subsets(s, t, carrier)
    return len(s) + len(t) - len(carrier)


def ncard_pigeonhole(s, t, carrier):
    """If N < |s| + |t| then s & t is nonempty. Returns a point of s & t."""
    s, t, carrier = _subsets(s, t, carrier)
    if not len(carrier) < len(s) + len(t):
        raise ContractViolation("need N < |s| + |t|, got {} >= {} + {}".format(
            len(carrier), len(s), len(t)))
    return _witness(s & t, "ncard_pigeonhole")


def ncard_pigeonhole_union_ne(s, t, carrier):
    """If N <= |s| + |t| and s | t is not the whole carrier then s & t
    is nonempty. Returns a point of s & t."""
    s, t, carrier = _subsets(s, t, carrier)
    if not len(carrier) <= len(s) + len(t):
        raise ContractViolation("need N <= |s| + |t|, got {} > {} + {}".format(
            len(carrier), len(s), len(t)))
    if s | t == carrier:
        raise ContractViolation("s | t covers the carrier")
    # |s | t| <= N - 1, so |s & t| >= |s| + |t| - N + 1 >= 1
    return _witness(s & t, "ncard_pigeonhole_union_ne")


def ncard_pigeonhole_compl(s, t, carrier):
    """If |s| + |t| < N then the complements meet. Returns a point of
    neither s nor t."""
    s, t, carrier = _subsets(s, t, carrier)
    if not len(s) + len(t) < len(carrier):
        raise ContractViolation("need |s| + |t| < N, got {} + {} >= {}".format(
            len(s), len(t), len(carrier)))
    return _witness(carrier - (s | t), "ncard_pigeonhole_compl")


def ncard_pigeonhole_compl_union_ne(s, t, carrier):
    """If |s| + |t| < N then s | t is not the whole carrier. Returns a
    point outside s | t."""
    return ncard_pigeonhole_compl(s, t, carrier)
