"""
Degree Extender (Jordan, Wielandt 13.3)
=======================================

Let G be preprimitive on a domain of size N, and s a witness set with
|s| = n + 1, 1 + (n + 1) < N, and Fix(G, s) preprimitive on the domain
minus s. Then G is (1 + (n + 1))-fold preprimitive.

Strong induction on n, peeling one point a of s at a time:

    1. The bootstrapper on the current s makes G 2-fold preprimitive,
       hence Stab(G, a) is preprimitive on the domain minus {a}.
    2. Fix(G, s) = Fix(Stab(G, a), s - {a}), so the local fact moves to
       the stabilizer with measure n - 1.
    3. Recurse: Stab(G, a) is (1 + n)-fold preprimitive.
    4. Shift the degree back up: G is (1 + (n + 1))-fold preprimitive.
"""

from jordan_reduction.core import DEFAULT_CONFIG, ContractViolation, InvariantViolation
from jordan_reduction.certificates import (
    assume_preprimitive, local_fact, check_witness, require_primitive,
)
from jordan_reduction.bootstrap import is_two_preprimitive_weak_jordan
from jordan_reduction.transport import (
    transport_to_stabilizer, degree_shift_up, degree_shift_down,
)


def _extend(primitive, fact, n, config, depth=0):
    check_witness(fact, n)
    indent = "  " * depth
    if config.verbose:
        print("  {}extend {} with |s|={}".format(indent, fact.action.name, n + 1))

    two = is_two_preprimitive_weak_jordan(primitive, fact, config)
    if n == 0:
        return two

    a = min(fact.witness)
    stab_primitive = degree_shift_down(two, a, config)
    fact_t = transport_to_stabilizer(fact, a, config)
    sub = _extend(stab_primitive, fact_t, n - 1, config, depth + 1)
    if sub.degree != 1 + n:
        raise InvariantViolation("stabilizer certificate has degree {}, expected {}".format(
            sub.degree, 1 + n))

    cert = degree_shift_up(sub, primitive, a, config)
    if config.verbose:
        print("  {}{} is {}-fold preprimitive".format(indent, fact.action.name, cert.degree))
    return cert


def is_multiply_preprimitive_jordan(primitive, fact, config=DEFAULT_CONFIG):
    """(1 + |s|)-fold preprimitivity of G from a preprimitive Fix(G, s)."""
    if fact.kind != "preprimitive":
        raise ContractViolation("need a preprimitive local fact, got {}".format(fact.kind))
    require_primitive(primitive, fact.action)
    n = fact.size - 1
    cert = _extend(primitive, fact, n, config)
    if cert.degree != 1 + (n + 1):
        raise InvariantViolation("extender produced degree {}, expected {}".format(
            cert.degree, n + 2))
    return cert


def extend_degree(action, s, config=DEFAULT_CONFIG):
    """Certificate that `action` is (1 + |s|)-fold preprimitive.

    Hypotheses (checked): `action` is preprimitive, 1 + |s| < N, and
    Fix(action, s) is preprimitive on the domain minus s.
    """
    s = frozenset(int(x) for x in s)
    if not s:
        raise ContractViolation("witness set must be nonempty")
    if not 1 + len(s) < len(action.domain):
        raise ContractViolation("size bound 1 + {} < {} violated".format(
            len(s), len(action.domain)))
    primitive = assume_preprimitive(action)
    fact = local_fact(action, s, "preprimitive")
    return is_multiply_preprimitive_jordan(primitive, fact, config)
