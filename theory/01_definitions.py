"""
JORDAN REDUCTION: Formal Definitions
====================================

Computational verification of the action predicates the reduction
engine composes. Every definition is checked on concrete groups whose
transitivity structure is classical.

Definition 1: k-fold pretransitive
    G is transitive on injective k-tuples of points.

Definition 2: preprimitive
    G is pretransitive and every block is trivial.

Definition 3: k-fold preprimitive
    G is k-fold pretransitive, and Fix(G, s) is preprimitive on the
    remaining points for every s with |s| + 1 = k.
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from jordan_reduction import (
    symmetric_group, alternating_group, cyclic_group, dihedral_group,
    affine_group, projective_group,
    is_preprimitive, is_multiply_pretransitive, is_multiply_preprimitive,
)


def max_degree(predicate, action):
    best = 0
    for k in range(1, len(action.domain) + 1):
        if not predicate(action, k):
            break
        best = k
    return best


# (group, order, preprimitive, pretransitive degree, preprimitive degree)
EXPECTED = [
    (symmetric_group(4),   24,  True,  4, 4),
    (symmetric_group(5),   120, True,  5, 5),
    (alternating_group(4), 12,  True,  2, 2),
    (alternating_group(5), 60,  True,  3, 3),
    (affine_group(5),      20,  True,  2, 1),
    (projective_group(5),  120, True,  3, 2),
    (dihedral_group(5),    10,  True,  1, 1),
    (cyclic_group(7),      7,   True,  1, 1),
    (dihedral_group(6),    12,  False, 1, 0),
]


if __name__ == "__main__":
    print("=" * 60)
    print("JORDAN REDUCTION: Verification of Definitions")
    print("=" * 60)
    print()

    print("{:>10} | {:>5} | {:>5} | {:>7} | {:>7}".format(
        "group", "order", "prim", "k-trans", "k-prim"))
    print("-" * 48)

    all_pass = True
    for action, order, prim, k_trans, k_prim in EXPECTED:
        got_prim = is_preprimitive(action)
        got_trans = max_degree(is_multiply_pretransitive, action)
        got_k_prim = max_degree(is_multiply_preprimitive, action)
        print("{:>10} | {:>5} | {:>5} | {:>7} | {:>7}".format(
            action.name, action.order, str(got_prim), got_trans, got_k_prim))
        ok = (action.order == order and got_prim == prim
              and got_trans == k_trans and got_k_prim == k_prim)
        if not ok:
            print("  FAILED: expected order {}, prim {}, k-trans {}, k-prim {}".format(
                order, prim, k_trans, k_prim))
            all_pass = False

    # Exhaustive and representative checks agree on k-fold primitivity
    for action, _, _, _, _ in EXPECTED[:6]:
        for k in range(1, len(action.domain) + 1):
            a = is_multiply_preprimitive(action, k)
            b = is_multiply_preprimitive(action, k, exhaustive=True)
            assert a == b, "{} k={}: representative {} vs exhaustive {}".format(
                action.name, k, a, b)
    print("\n  Representative and exhaustive k-fold checks agree.")

    print()
    print("=" * 60)
    if all_pass:
        print("All definition tests passed!")
    else:
        print("SOME VERIFICATIONS FAILED - CHECK ABOVE")
        sys.exit(1)
    print("=" * 60)
