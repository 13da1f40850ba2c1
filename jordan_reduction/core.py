"""
Core definitions: PermutationAction, ReductionConfig, errors.

A PermutationAction is a finite group of permutations of range(degree)
together with an invariant domain. Restricted actions (a fixing subgroup
acting on a complement, a point stabilizer acting on the remaining points)
are PermutationActions over the same ambient range(degree) with a smaller
domain, so group elements never change coordinates.

Conventions:
    g . x        = g[x]
    (g * h)[x]   = g[h[x]]
"""

import numpy as np
from dataclasses import dataclass
from math import gcd


# =====================================================================
# ERRORS
# =====================================================================

class JordanError(Exception):
    """Base class for errors raised by the Jordan reduction engine."""


class ContractViolation(JordanError, ValueError):
    """A caller broke a precondition (bad witness set, size bound, hypothesis)."""


class InvariantViolation(JordanError, RuntimeError):
    """An internal invariant failed. Never recoverable."""


# =====================================================================
# CONFIGURATION
# =====================================================================

@dataclass
class ReductionConfig:
    """Parameters controlling the reduction engine."""
    verbose: bool = False
    verify_steps: bool = False
    max_group_order: int = 200_000
    exhaustive_check: bool = False


DEFAULT_CONFIG = ReductionConfig()


# =====================================================================
# PERMUTATION HELPERS
# =====================================================================

def identity(degree):
    return np.arange(degree, dtype=np.int64)


def compose(g, h):
    """Return g * h, i.e. x -> g[h[x]]."""
    return np.asarray(g, dtype=np.int64)[np.asarray(h, dtype=np.int64)]


def inverse(g):
    return np.argsort(np.asarray(g, dtype=np.int64))


def from_cycles(degree, *cycles):
    """Build a permutation of range(degree) from disjoint cycles."""
    g = identity(degree)
    for cycle in cycles:
        for i, x in enumerate(cycle):
            g[x] = cycle[(i + 1) % len(cycle)]
    if not (np.sort(g) == identity(degree)).all():
        raise ContractViolation("cycles {} are not disjoint".format(cycles))
    return g


def support(g):
    g = np.asarray(g)
    return frozenset(int(x) for x in np.nonzero(g != np.arange(len(g)))[0])


def cycles(g):
    """Nontrivial cycles of g, each starting at its smallest point."""
    g = np.asarray(g)
    seen = set()
    result = []
    for x in sorted(support(g)):
        if x in seen:
            continue
        cycle = [x]
        seen.add(x)
        y = int(g[x])
        while y != x:
            cycle.append(y)
            seen.add(y)
            y = int(g[y])
        result.append(tuple(cycle))
    return result


def is_cycle(g):
    return len(cycles(g)) == 1


def is_swap(g):
    return is_cycle(g) and len(support(g)) == 2


def is_three_cycle(g):
    return is_cycle(g) and len(support(g)) == 3


def element_order(g):
    order = 1
    for c in cycles(g):
        order = order * len(c) // gcd(order, len(c))
    return order


# =====================================================================
# PERMUTATION ACTION
# =====================================================================

class PermutationAction:
    """A finite permutation group acting on an invariant domain."""

    def __init__(self, perms, domain=None, name="G"):
        arr = np.asarray(perms, dtype=np.int64)
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        if arr.ndim != 2 or arr.shape[0] == 0:
            raise ContractViolation("need a nonempty list of permutations")
        degree = arr.shape[1]
        if not (np.sort(arr, axis=1) == np.arange(degree)).all():
            raise ContractViolation("rows must be permutations of range({})".format(degree))

        self.perms = np.unique(arr, axis=0)
        self.degree = degree
        self.name = name
        if domain is None:
            self.domain = frozenset(range(degree))
        else:
            self.domain = frozenset(int(x) for x in domain)
        if any(x < 0 or x >= degree for x in self.domain):
            raise ContractViolation("domain must lie in range({})".format(degree))
        self.points = tuple(sorted(self.domain))
        if self.points:
            pts = np.array(self.points)
            if not np.isin(self.perms[:, pts], pts).all():
                raise ContractViolation(
                    "domain of {} is not invariant under the group".format(name))
        self._inverses = None

    @property
    def order(self):
        return self.perms.shape[0]

    @property
    def inverses(self):
        if self._inverses is None:
            self._inverses = np.argsort(self.perms, axis=1)
        return self._inverses

    def contains(self, g):
        g = np.asarray(g, dtype=np.int64)
        if g.shape != (self.degree,):
            return False
        return bool((self.perms == g).all(axis=1).any())

    def image(self, g, s):
        """The set g . s."""
        return frozenset(int(g[x]) for x in s)

    def image_order(self):
        """Order of the permutation group induced on the domain."""
        if not self.points:
            return 1
        return len(np.unique(self.perms[:, list(self.points)], axis=0))

    def restrict(self, mask, domain, name):
        return PermutationAction(self.perms[mask], domain=domain, name=name)

    def __eq__(self, other):
        if not isinstance(other, PermutationAction):
            return NotImplemented
        return (self.degree == other.degree and self.domain == other.domain
                and self.perms.shape == other.perms.shape
                and bool((self.perms == other.perms).all()))

    def __hash__(self):
        return hash((self.degree, self.domain, self.perms.tobytes()))

    def __repr__(self):
        return "PermutationAction({}, order {}, {} points)".format(
            self.name, self.order, len(self.domain))


# =====================================================================
# BUILDERS
# =====================================================================

def generate(generators, degree, domain=None, name="G", max_order=None):
    """Close a list of permutations under composition."""
    if max_order is None:
        max_order = DEFAULT_CONFIG.max_group_order
    gens = [np.asarray(g, dtype=np.int64) for g in generators]
    for g in gens:
        if g.shape != (degree,):
            raise ContractViolation("generator {} has wrong length".format(g))
    ident = identity(degree)
    elements = {tuple(ident.tolist())}
    frontier = ident.reshape(1, -1)
    while len(frontier):
        fresh = []
        for g in gens:
            for row in g[frontier]:
                key = tuple(row.tolist())
                if key not in elements:
                    elements.add(key)
                    fresh.append(row)
            if len(elements) > max_order:
                raise ContractViolation(
                    "group {} exceeds max_order={}".format(name, max_order))
        frontier = np.array(fresh, dtype=np.int64).reshape(-1, degree)
    return PermutationAction(sorted(elements), domain=domain, name=name)


def symmetric_group(n):
    gens = []
    if n >= 2:
        gens = [from_cycles(n, (0, 1)), from_cycles(n, tuple(range(n)))]
    return generate(gens, n, name="S({})".format(n))


def alternating_group(n):
    gens = [from_cycles(n, (0, 1, i)) for i in range(2, n)]
    return generate(gens, n, name="A({})".format(n))


def cyclic_group(n):
    gens = [from_cycles(n, tuple(range(n)))] if n >= 2 else []
    return generate(gens, n, name="C({})".format(n))


def dihedral_group(n):
    rotation = np.array([(x + 1) % n for x in range(n)])
    reflection = np.array([(-x) % n for x in range(n)])
    return generate([rotation, reflection], n, name="D({})".format(n))


def _is_prime(p):
    if p < 2:
        return False
    return all(p % d for d in range(2, int(p ** 0.5) + 1))


def affine_group(p):
    """AGL(1, p) acting on the p points of GF(p)."""
    if not _is_prime(p):
        raise ContractViolation("AGL(1, p) needs a prime p, got {}".format(p))
    gens = [np.array([(x + 1) % p for x in range(p)])]
    gens += [np.array([(a * x) % p for x in range(p)]) for a in range(2, p)]
    return generate(gens, p, name="AGL(1,{})".format(p))


def projective_group(p):
    """PGL(2, p) acting on the projective line; point p stands for infinity."""
    if not _is_prime(p):
        raise ContractViolation("PGL(2, p) needs a prime p, got {}".format(p))
    inf = p

    def mobius(f):
        return np.array([f(x) for x in range(p + 1)])

    shift = mobius(lambda x: inf if x == inf else (x + 1) % p)
    scalings = [mobius(lambda x, a=a: inf if x == inf else (a * x) % p)
                for a in range(2, p)]
    # x -> -1/x swaps 0 and infinity
    flip = mobius(lambda x: 0 if x == inf else inf if x == 0
                  else (-pow(x, p - 2, p)) % p)
    return generate([shift, flip] + scalings, p + 1,
                    name="PGL(2,{})".format(p))


def relabel(action, pi, name=None):
    """Isomorphic copy of an action, relabelling point x as pi[x]."""
    pi = np.asarray(pi, dtype=np.int64)
    if pi.shape != (action.degree,) or not (np.sort(pi) == identity(action.degree)).all():
        raise ContractViolation("relabelling must be a permutation of range(degree)")
    perms = pi[action.perms][:, inverse(pi)]
    return PermutationAction(perms, domain=[int(pi[x]) for x in action.domain],
                             name=name or action.name + "'")
