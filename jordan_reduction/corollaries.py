"""
Structural Corollaries
======================

    jordan_swap         A preprimitive group containing a transposition is
                        the full symmetric group.
    jordan_three_cycle  A preprimitive group containing a 3-cycle contains
                        the alternating group.

Both feed the complement of the cycle's support to the degree extender:
the cycle lies in the fixing subgroup of that complement and moves its
support transitively, and a support of prime size admits no nontrivial
blocks.

Counting facts used to close the argument:

    (N-1)-fold pretransitive on N points  =>  |G| = N!
    (N-2)-fold pretransitive on N points  =>  [Sym : G] <= 2  =>  Alt <= G
"""

from math import factorial

from jordan_reduction.core import (
    DEFAULT_CONFIG, ContractViolation, InvariantViolation,
    support, is_swap, is_three_cycle, element_order, _is_prime,
)
from jordan_reduction.certificates import (
    LocalFact, ContainmentCertificate, assume_preprimitive, confirm,
)
from jordan_reduction.extender import is_multiply_preprimitive_jordan


# =====================================================================
# CYCLES
# =====================================================================

def is_pretransitive_of_cycle(g):
    """The powers of g move any point of its support onto every other
    point of the support exactly when g is a single cycle."""
    supp = support(g)
    if not supp:
        return True
    x = min(supp)
    orbit = {x}
    y = int(g[x])
    while y != x:
        orbit.add(y)
        y = int(g[y])
    return orbit == supp


def is_preprimitive_of_prime(num_points):
    """A pretransitive action on a set of prime size is preprimitive:
    block sizes divide the size of the set."""
    return _is_prime(num_points)


def local_fact_of_cycle(action, g, config=DEFAULT_CONFIG):
    """Fix(G, domain - supp(g)) is preprimitive on supp(g), for a cycle g
    in G whose support has prime size."""
    if not action.contains(g):
        raise ContractViolation("element is not in {}".format(action.name))
    supp = support(g)
    if not supp <= action.domain:
        raise ContractViolation("support {} leaves the domain".format(sorted(supp)))
    if not is_pretransitive_of_cycle(g):
        raise ContractViolation("element is not a cycle")
    if not is_preprimitive_of_prime(len(supp)):
        raise ContractViolation("support size {} is not prime".format(len(supp)))
    s = action.domain - supp
    fact = LocalFact("preprimitive", s, action,
                     ("cycle on {} lies in Fix(G, {})".format(sorted(supp), sorted(s)),
                      "support of prime size {}".format(len(supp))))
    return confirm(fact, config)


# =====================================================================
# COUNTING FACTS
# =====================================================================

def eq_s2_of_nontrivial(action):
    """A nontrivial group acting on two points is Sym(2)."""
    if len(action.domain) != 2:
        raise ContractViolation("need exactly 2 points, got {}".format(len(action.domain)))
    order = action.image_order()
    if order == 1:
        raise ContractViolation("{} acts trivially".format(action.name))
    if order != 2:
        raise InvariantViolation("group on 2 points has order {}".format(order))
    return ContainmentCertificate("symmetric", action, None,
                                  ("nontrivial subgroup of Sym(2)",))


def eq_symmetric_of_multiply_pretransitive(cert):
    """(N-1)-fold pretransitivity forces |G| >= N!/1!, so G = Sym."""
    size = len(cert.action.domain)
    if cert.degree < size - 1:
        raise ContractViolation("need degree >= {}, got {}".format(size - 1, cert.degree))
    order = cert.action.image_order()
    if order != factorial(size):
        raise InvariantViolation("{}-fold pretransitive group of order {} on {} points".format(
            cert.degree, order, size))
    return ContainmentCertificate("symmetric", cert.action, cert,
                                  ("{}-fold pretransitive on {} points".format(
                                      cert.degree, size),))


def alternating_le_of_multiply_pretransitive(cert):
    """(N-2)-fold pretransitivity forces |G| >= N!/2!, so G has index
    at most 2 in Sym and contains Alt."""
    size = len(cert.action.domain)
    if cert.degree < size - 2:
        raise ContractViolation("need degree >= {}, got {}".format(size - 2, cert.degree))
    order = cert.action.image_order()
    if factorial(size) % order or factorial(size) // order > 2:
        raise InvariantViolation("{}-fold pretransitive group of order {} on {} points".format(
            cert.degree, order, size))
    return ContainmentCertificate("alternating", cert.action, cert,
                                  ("{}-fold pretransitive on {} points".format(
                                      cert.degree, size),))


# =====================================================================
# JORDAN'S THEOREMS
# =====================================================================

def full_group_from_swap(action, g, config=DEFAULT_CONFIG):
    """A preprimitive group containing a transposition is Sym(domain)."""
    if not is_swap(g) or not support(g) <= action.domain:
        raise ContractViolation("element is not a transposition of the domain")
    if not action.contains(g):
        raise ContractViolation("transposition is not in {}".format(action.name))
    primitive = assume_preprimitive(action)
    size = len(action.domain)

    if size <= 2:
        # g has order 2, which divides |G| <= 2!
        if element_order(g) != 2:
            raise InvariantViolation("transposition of order {}".format(element_order(g)))
        return eq_s2_of_nontrivial(action)

    fact = local_fact_of_cycle(action, g, config)
    if config.verbose:
        print("  swap {}: witness of size {}".format(sorted(support(g)), fact.size))
    cert = is_multiply_preprimitive_jordan(primitive, fact, config)
    return eq_symmetric_of_multiply_pretransitive(cert)


def full_group_from_three_cycle(action, g, config=DEFAULT_CONFIG):
    """A preprimitive group containing a 3-cycle contains Alt(domain)."""
    if not is_three_cycle(g) or not support(g) <= action.domain:
        raise ContractViolation("element is not a 3-cycle of the domain")
    if not action.contains(g):
        raise ContractViolation("3-cycle is not in {}".format(action.name))
    primitive = assume_preprimitive(action)
    size = len(action.domain)

    if size <= 3:
        # Alt on 3 points is generated by the 3-cycle
        if element_order(g) != 3 or action.image_order() < factorial(3) // 2:
            raise InvariantViolation("3-cycle does not generate Alt(3)")
        return ContainmentCertificate("alternating", action, None,
                                      ("3-cycle generates Alt(3)",))

    fact = local_fact_of_cycle(action, g, config)
    if config.verbose:
        print("  3-cycle {}: witness of size {}".format(sorted(support(g)), fact.size))
    cert = is_multiply_preprimitive_jordan(primitive, fact, config)
    return alternating_le_of_multiply_pretransitive(cert)


jordan_swap = full_group_from_swap
jordan_three_cycle = full_group_from_three_cycle
