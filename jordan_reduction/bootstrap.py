"""
Degree-2 Bootstrapper (Jordan, Wielandt 13.1 / 13.2)
====================================================

Let G be preprimitive on a domain of size N and s a witness set with
|s| = n + 1 and 1 + (n + 1) < N. If Fix(G, s) acting on the domain minus
s is pretransitive (resp. preprimitive), then G is 2-fold pretransitive
(resp. preprimitive).

Strong induction on n: shrink the witness until it is a single point
{a}; there Fix(G, {a}) = Stab(G, a), and a 1-fold fact for the point
stabilizer is a 2-fold fact for G.

Functions:
    is_two_pretransitive_weak_jordan -- certificate-level, pretransitive
    is_two_preprimitive_weak_jordan  -- certificate-level, preprimitive
    bootstrap_two                    -- checks hypotheses, then runs one of the above
"""

from jordan_reduction.core import DEFAULT_CONFIG, ContractViolation, InvariantViolation
from jordan_reduction.certificates import (
    assume_preprimitive, local_fact, check_kind, check_witness, require_primitive,
)
from jordan_reduction.shrinker import shrink_witness
from jordan_reduction.transport import singleton_stabilizer_certificate, degree_shift_up


def _two_fold(primitive, fact, n, config):
    check_witness(fact, n)
    if n == 0:
        (a,) = fact.witness
        stab = singleton_stabilizer_certificate(fact, config)
        cert = degree_shift_up(stab, primitive, a, config)
        if config.verbose:
            print("    base {{{}}}: {} is 2-fold {}".format(
                a, primitive.action.name, fact.kind))
        return cert

    fact_t, m = shrink_witness(primitive, fact, n, config)
    if not m < n:
        raise InvariantViolation("induction measure did not decrease")
    return _two_fold(primitive, fact_t, m, config)


def _run(primitive, fact, kind, config):
    if fact.kind != kind:
        raise ContractViolation("need a {} local fact, got {}".format(kind, fact.kind))
    require_primitive(primitive, fact.action)
    n = fact.size - 1
    check_witness(fact, n)
    cert = _two_fold(primitive, fact, n, config)
    if cert.degree != 2:
        raise InvariantViolation("bootstrap produced degree {}".format(cert.degree))
    return cert


def is_two_pretransitive_weak_jordan(primitive, fact, config=DEFAULT_CONFIG):
    """2-fold pretransitivity of G from a pretransitive fixing subgroup."""
    return _run(primitive, fact, "pretransitive", config)


def is_two_preprimitive_weak_jordan(primitive, fact, config=DEFAULT_CONFIG):
    """2-fold preprimitivity of G from a preprimitive fixing subgroup."""
    return _run(primitive, fact, "preprimitive", config)


def bootstrap_two(action, s, kind="preprimitive", config=DEFAULT_CONFIG):
    """Certificate that `action` is 2-fold `kind`.

    Hypotheses (checked): `action` is preprimitive, 1 + |s| < N, and
    Fix(action, s) is `kind` on the domain minus s.
    """
    check_kind(kind)
    s = frozenset(int(x) for x in s)
    if not s:
        raise ContractViolation("witness set must be nonempty")
    if not 1 + len(s) < len(action.domain):
        raise ContractViolation("size bound 1 + {} < {} violated".format(
            len(s), len(action.domain)))
    primitive = assume_preprimitive(action)
    fact = local_fact(action, s, kind)
    if config.verbose:
        print("  bootstrap {} with |s|={} ({})".format(action.name, len(s), kind))
    if kind == "pretransitive":
        return is_two_pretransitive_weak_jordan(primitive, fact, config)
    return is_two_preprimitive_weak_jordan(primitive, fact, config)
