"""
Certificates
============

Facts produced and consumed by the reduction engine, carried as values.

Classes:
    LocalFact              - Fix(G, s) acting on the domain minus s is
                             pretransitive / preprimitive
    Certificate            - G is k-fold pretransitive / preprimitive
    ContainmentCertificate - G is the full symmetric group, or contains
                             the alternating group

Certificates are built from other certificates by the transport lemmas
and never recomputed; verify() / holds() recompute the ground truth for
testing.
"""

import json
from dataclasses import dataclass, field
from math import factorial
from typing import Optional

from jordan_reduction.core import (
    PermutationAction, ContractViolation, InvariantViolation, from_cycles,
)
from jordan_reduction.actions import (
    of_fixing_subgroup, is_pretransitive, is_preprimitive,
    is_multiply_pretransitive, is_multiply_preprimitive,
)


KINDS = ("pretransitive", "preprimitive")


def check_kind(kind):
    if kind not in KINDS:
        raise ContractViolation("kind must be one of {}, got {!r}".format(KINDS, kind))
    return kind


def _describe(action):
    return {"name": action.name, "order": action.order,
            "domain": sorted(action.domain)}


# ---------------------------------------------------------------------------
# Local facts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LocalFact:
    """Fix(action, witness) acting on domain - witness is `kind`."""
    kind: str
    witness: frozenset
    action: PermutationAction = field(repr=False, compare=False)
    derivation: tuple = ()

    @property
    def size(self):
        return len(self.witness)

    def restricted_action(self):
        return of_fixing_subgroup(self.action, self.witness)

    def holds(self):
        restricted = self.restricted_action()
        if self.kind == "pretransitive":
            return is_pretransitive(restricted)
        return is_preprimitive(restricted)

    def to_dict(self):
        return {"kind": self.kind, "witness": sorted(self.witness),
                "action": _describe(self.action),
                "derivation": list(self.derivation)}


# ---------------------------------------------------------------------------
# Degree certificates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Certificate:
    """The action is `degree`-fold `kind`."""
    kind: str
    degree: int
    action: PermutationAction = field(repr=False, compare=False)
    derivation: tuple = ()

    def verify(self, exhaustive=False):
        if self.kind == "pretransitive":
            return is_multiply_pretransitive(self.action, self.degree)
        return is_multiply_preprimitive(self.action, self.degree,
                                        exhaustive=exhaustive)

    def weaken(self, j):
        """Certificate for a lower degree 1 <= j <= degree."""
        if not 1 <= j <= self.degree:
            raise ContractViolation("cannot weaken degree {} to {}".format(
                self.degree, j))
        if j == self.degree:
            return self
        return Certificate(self.kind, j, self.action,
                           self.derivation + ("weakened from degree {}".format(self.degree),))

    def to_dict(self):
        return {"kind": self.kind, "degree": self.degree,
                "action": _describe(self.action),
                "derivation": list(self.derivation)}

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ContainmentCertificate:
    """claim == "symmetric":   the induced group is Sym(domain)
    claim == "alternating": the induced group contains Alt(domain)"""
    claim: str
    action: PermutationAction = field(repr=False, compare=False)
    degree_certificate: Optional[Certificate] = None
    derivation: tuple = ()

    def verify(self):
        pts = self.action.points
        n = len(pts)
        if self.claim == "symmetric":
            return self.action.image_order() == factorial(n)
        # (p0 p1 x) for x in the rest generate Alt(domain)
        induced = {tuple(row) for row in self.action.perms[:, list(pts)].tolist()}
        for x in pts[2:]:
            g = from_cycles(self.action.degree, (pts[0], pts[1], x))
            if tuple(g[list(pts)].tolist()) not in induced:
                return False
        return True

    def to_dict(self):
        d = {"claim": self.claim, "action": _describe(self.action),
             "derivation": list(self.derivation)}
        if self.degree_certificate is not None:
            d["degree_certificate"] = self.degree_certificate.to_dict()
        return d

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)


# ---------------------------------------------------------------------------
# Entry points: hypotheses checked directly
# ---------------------------------------------------------------------------

def assume_preprimitive(action):
    """Degree-1 preprimitive certificate, after checking the hypothesis."""
    if not is_preprimitive(action):
        raise ContractViolation("{} is not preprimitive".format(action.name))
    return Certificate("preprimitive", 1, action,
                       ("{} is preprimitive (checked)".format(action.name),))


def local_fact(action, s, kind="preprimitive"):
    """LocalFact for Fix(action, s), after checking it holds."""
    check_kind(kind)
    s = frozenset(int(x) for x in s)
    if not s <= action.domain:
        raise ContractViolation("{} is not a subset of the domain".format(sorted(s)))
    fact = LocalFact(kind, s, action,
                     ("Fix({}, {}) is {} (checked)".format(action.name, sorted(s), kind),))
    if not fact.holds():
        raise ContractViolation("Fix({}, {}) is not {} on the complement".format(
            action.name, sorted(s), kind))
    return fact


def check_witness(fact, n):
    """|s| = n + 1, s neither empty nor universal, and 1 + (n + 1) < N."""
    s = fact.witness
    size = len(fact.action.domain)
    if n < 0 or len(s) != n + 1:
        raise ContractViolation("witness {} does not have size n + 1 = {}".format(
            sorted(s), n + 1))
    if not s <= fact.action.domain:
        raise ContractViolation("witness {} is not in the domain".format(sorted(s)))
    if not 1 + (n + 1) < size:
        raise ContractViolation("size bound 1 + {} < {} violated".format(n + 1, size))


def require_primitive(primitive, action):
    """`primitive` must certify that `action` is preprimitive."""
    if primitive.kind != "preprimitive" or primitive.degree < 1:
        raise ContractViolation("need a preprimitivity certificate, got {}".format(primitive))
    if primitive.action is not action and primitive.action != action:
        raise ContractViolation("certificate is about {}, not {}".format(
            primitive.action.name, action.name))


def confirm(fact, config):
    """Recompute a derived fact when config.verify_steps is on."""
    if config.verify_steps:
        ok = fact.holds() if isinstance(fact, LocalFact) else fact.verify(
            exhaustive=config.exhaustive_check)
        if not ok:
            raise InvariantViolation("derived fact fails on recomputation: {}".format(fact))
    return fact
