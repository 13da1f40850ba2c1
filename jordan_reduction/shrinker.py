"""
Witness Shrinker
================

One reduction step: from a witness set s with |s| = n + 1 >= 2 and a
local fact F(s), produce t = s & g.s, a strictly smaller nonempty witness
carrying F(t).

Two cases on 2(n + 1) against N = |domain|:

    small  (2(n+1) <  N):  separate two points a, b of s using s itself;
                           a in t, b in s - t, and |s| + |g.s| < N
                           leaves a point outside s | g.s.
    large  (2(n+1) >= N):  separate two points a, b of the complement
                           using the complement; a lies outside s | g.s,
                           and s, g.s are each at least half the domain,
                           so they meet.
"""

from jordan_reduction.core import DEFAULT_CONFIG, ContractViolation, InvariantViolation
from jordan_reduction.certificates import check_witness, require_primitive
from jordan_reduction.pigeonhole import (
    ncard_pigeonhole_union_ne,
    ncard_pigeonhole_compl_union_ne,
)
from jordan_reduction.rudio import separate
from jordan_reduction.transport import conjugate_local_fact, compose_on_intersection


def _intersect_with_translate(fact, g, locate, config):
    """Build t = s & g.s and F(t).

    `locate(s, gs, domain)` returns (outside, inside): a point outside
    s | g.s and a point of s & g.s.
    """
    action = fact.action
    s = fact.witness
    gs = action.image(g, s)
    outside, inside = locate(s, gs, action.domain)
    if outside in s | gs:
        raise InvariantViolation("{} is not outside s | g.s".format(outside))
    t = s & gs
    if inside not in t:
        raise InvariantViolation("{} is not in s & g.s".format(inside))
    if not t < s:
        raise InvariantViolation("s & g.s = {} is not a proper subset of {}".format(
            sorted(t), sorted(s)))

    fact_gs = conjugate_local_fact(fact, g, config)
    return compose_on_intersection(fact, fact_gs, config)


def shrink_witness(primitive, fact, n, config=DEFAULT_CONFIG):
    """One step of the Jordan reduction.

    Parameters
    ----------
    primitive : Certificate
        Preprimitivity of fact.action (needed by the separating oracle).
    fact : LocalFact
        F(s) with |s| = n + 1.
    n : int
        Induction measure, n >= 1.

    Returns
    -------
    (LocalFact, int)
        F(t) and its measure m, with t a proper nonempty subset of s
        and m < n.
    """
    action = fact.action
    require_primitive(primitive, action)
    check_witness(fact, n)
    if n < 1:
        raise ContractViolation("a one-point witness cannot shrink (n = 0)")

    s = fact.witness
    domain = action.domain
    size = len(domain)

    if 2 * (n + 1) < size:
        case = "small"
        a, b = sorted(s)[:2]
        g = separate(action, s, a, b)

        def locate(s, gs, domain):
            return ncard_pigeonhole_compl_union_ne(s, gs, domain), a
    else:
        case = "large"
        a, b = sorted(domain - s)[:2]
        g = separate(action, domain - s, a, b)

        def locate(s, gs, domain):
            return a, ncard_pigeonhole_union_ne(s, gs, domain)

    fact_t = _intersect_with_translate(fact, g, locate, config)
    m = fact_t.size - 1
    if not 0 <= m < n:
        raise InvariantViolation("measure did not decrease: {} -> {}".format(n, m))

    if config.verbose:
        print("    shrink n={} ({} case): {} -> {}".format(
            n, case, sorted(s), sorted(fact_t.witness)))
    return fact_t, m
