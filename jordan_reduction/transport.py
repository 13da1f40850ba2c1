"""
Transport Lemmas
================

Move local facts and degree certificates between coordinate systems
without recomputing them:

    conjugate_local_fact           F(s)             -> F(g.s)
    compose_on_intersection        F(s), F(u)       -> F(s & u)   (s | u != domain)
    singleton_stabilizer_certificate  F({a})        -> Stab(G, a) is 1-fold
    transport_to_stabilizer        F(s) on G        -> F(s - {a}) on Stab(G, a)
    degree_shift_up                k-fold Stab(G, a) -> (k+1)-fold G
    degree_shift_down              (k+1)-fold G      -> k-fold Stab(G, a)

fixing_subgroup_isomorphism exhibits the row map between Fix(G, {a} | t)
and Fix(Stab(G, a), t) used when the induction moves to a stabilizer.
"""

import numpy as np

from jordan_reduction.core import (
    DEFAULT_CONFIG, ContractViolation, InvariantViolation, compose,
)
from jordan_reduction.actions import of_fixing_subgroup, of_stabilizer
from jordan_reduction.certificates import LocalFact, Certificate, confirm


def _same_action(x, y):
    return x is y or x == y


# =====================================================================
# LOCAL FACTS
# =====================================================================

def conjugate_local_fact(fact, g, config=DEFAULT_CONFIG):
    """g Fix(G, s) g^-1 = Fix(G, g.s), so F(s) carries over to g.s."""
    action = fact.action
    if not action.contains(g):
        raise ContractViolation("element is not in {}".format(action.name))
    gs = action.image(g, fact.witness)
    return confirm(LocalFact(fact.kind, gs, action,
                             fact.derivation + ("conjugated to {}".format(sorted(gs)),)),
                   config)


def compose_on_intersection(fact_s, fact_u, config=DEFAULT_CONFIG):
    """Fix(G, s & u) contains Fix(G, s) and Fix(G, u); their domains
    overlap as long as s | u leaves a point out."""
    if fact_s.kind != fact_u.kind:
        raise ContractViolation("cannot combine {} with {}".format(fact_s.kind, fact_u.kind))
    if not _same_action(fact_s.action, fact_u.action):
        raise ContractViolation("facts refer to different actions")
    s, u = fact_s.witness, fact_u.witness
    if s | u == fact_s.action.domain:
        raise ContractViolation("{} | {} covers the domain".format(sorted(s), sorted(u)))
    t = s & u
    return confirm(LocalFact(fact_s.kind, t, fact_s.action,
                             fact_s.derivation + ("intersected with {} to {}".format(
                                 sorted(u), sorted(t)),)),
                   config)


def singleton_stabilizer_certificate(fact, config=DEFAULT_CONFIG):
    """Fix(G, {a}) is Stab(G, a): F({a}) makes Stab(G, a) acting on the
    domain minus {a} 1-fold pretransitive / preprimitive."""
    if len(fact.witness) != 1:
        raise ContractViolation("need a one-point witness, got {}".format(sorted(fact.witness)))
    (a,) = fact.witness
    stab = of_stabilizer(fact.action, a)
    if config.verify_steps and not _same_action(stab, fact.restricted_action()):
        raise InvariantViolation("Fix(G, {{{}}}) differs from Stab(G, {})".format(a, a))
    return confirm(Certificate(fact.kind, 1, stab,
                               fact.derivation + ("Fix(G, {{{}}}) = Stab(G, {})".format(a, a),)),
                   config)


def is_homomorphism(outer, inner, mapping):
    """mapping[i] is the row of `inner` assigned to row i of `outer`;
    check that it respects composition."""
    outer_index = {tuple(row): i for i, row in enumerate(outer.perms.tolist())}
    inner_index = {tuple(row): i for i, row in enumerate(inner.perms.tolist())}
    for i, g in enumerate(outer.perms):
        for j, h in enumerate(outer.perms):
            k = outer_index[tuple(compose(g, h).tolist())]
            image = compose(inner.perms[mapping[i]], inner.perms[mapping[j]])
            if inner_index[tuple(image.tolist())] != mapping[k]:
                return False
    return True


def fixing_subgroup_isomorphism(action, a, t, config=DEFAULT_CONFIG):
    """Return (Fix(G, {a} | t), Fix(Stab(G, a), t), mapping) where row i
    of the first group corresponds to row mapping[i] of the second.

    With config.verify_steps the mapping is also checked to respect
    composition.
    """
    t = frozenset(t)
    if a in t:
        raise ContractViolation("{} must not lie in {}".format(a, sorted(t)))
    outer = of_fixing_subgroup(action, t | {a})
    inner = of_fixing_subgroup(of_stabilizer(action, a), t)
    if outer.domain != inner.domain:
        raise InvariantViolation("fixing subgroups act on different domains")
    index = {tuple(row): i for i, row in enumerate(inner.perms.tolist())}
    try:
        mapping = np.array([index[tuple(row)] for row in outer.perms.tolist()],
                           dtype=np.int64)
    except KeyError:
        raise InvariantViolation("Fix(G, {a} | t) is not inside Fix(Stab(G, a), t)")
    if len(mapping) != inner.order:
        raise InvariantViolation("fixing subgroups have different orders")
    if config.verify_steps and not is_homomorphism(outer, inner, mapping):
        raise InvariantViolation("row map between fixing subgroups is not a homomorphism")
    return outer, inner, mapping


def transport_to_stabilizer(fact, a, config=DEFAULT_CONFIG):
    """F(s) on G -> F(s - {a}) on Stab(G, a) acting on the domain minus {a}.

    Fixing all of s is the same as fixing a and then fixing the rest
    inside the stabilizer.
    """
    s = fact.witness
    if a not in s:
        raise ContractViolation("{} is not in the witness {}".format(a, sorted(s)))
    t = s - {a}
    if not t:
        raise ContractViolation("witness {} has nothing left after removing {}".format(
            sorted(s), a))
    if config.verify_steps:
        fixing_subgroup_isomorphism(fact.action, a, t, config)
    stab = of_stabilizer(fact.action, a)
    return confirm(LocalFact(fact.kind, t, stab,
                             fact.derivation + ("moved to Stab(G, {})".format(a),)),
                   config)


# =====================================================================
# DEGREE SHIFT
# =====================================================================

def degree_shift_up(cert, parent, a, config=DEFAULT_CONFIG):
    """k-fold for Stab(G, a) on the domain minus {a}, with G pretransitive,
    gives (k+1)-fold for G.

    `parent` is any degree >= 1 certificate for G.
    """
    if parent.degree < 1:
        raise ContractViolation("need G pretransitive, got {}".format(parent))
    if cert.degree < 1:
        raise ContractViolation("degree shift needs k >= 1, got {}".format(cert.degree))
    if not _same_action(cert.action, of_stabilizer(parent.action, a)):
        raise ContractViolation("certificate is not about Stab({}, {})".format(
            parent.action.name, a))
    return confirm(Certificate(cert.kind, cert.degree + 1, parent.action,
                               cert.derivation + ("lifted from Stab(G, {}) to degree {}".format(
                                   a, cert.degree + 1),)),
                   config)


def degree_shift_down(cert, a, config=DEFAULT_CONFIG):
    """(k+1)-fold for G gives k-fold for Stab(G, a) on the domain minus {a}."""
    if cert.degree < 1:
        raise ContractViolation("cannot shift degree {} down".format(cert.degree))
    stab = of_stabilizer(cert.action, a)
    return confirm(Certificate(cert.kind, cert.degree - 1, stab,
                               cert.derivation + ("restricted to Stab(G, {})".format(a),)),
                   config)

