import numpy as np
import pytest

from jordan_reduction import (
    ContractViolation, PermutationAction,
    symmetric_group, alternating_group, cyclic_group, dihedral_group,
    affine_group, projective_group, generate, relabel, from_cycles,
    fixing_subgroup, act_on_complement, of_fixing_subgroup,
    stabilizer, of_stabilizer, orbits,
    is_pretransitive, is_preprimitive,
    is_multiply_pretransitive, is_multiply_preprimitive,
)
from jordan_reduction.core import cycles, element_order, support


@pytest.mark.parametrize("action, order", [
    (symmetric_group(1), 1),
    (symmetric_group(4), 24),
    (alternating_group(5), 60),
    (cyclic_group(7), 7),
    (dihedral_group(5), 10),
    (affine_group(7), 42),
    (projective_group(5), 120),
    (projective_group(7), 336),
])
def test_group_orders(action, order):
    assert action.order == order


def test_permutation_helpers():
    g = from_cycles(6, (0, 2, 4), (1, 5))
    assert cycles(g) == [(0, 2, 4), (1, 5)]
    assert support(g) == {0, 1, 2, 4, 5}
    assert element_order(g) == 6


def test_rejects_non_permutations():
    with pytest.raises(ContractViolation):
        PermutationAction([[0, 0, 1]])


def test_rejects_non_invariant_domain():
    with pytest.raises(ContractViolation):
        PermutationAction(symmetric_group(3).perms, domain={0, 1})


def test_generate_respects_max_order():
    with pytest.raises(ContractViolation):
        generate([from_cycles(6, (0, 1)), from_cycles(6, tuple(range(6)))], 6, max_order=100)


def test_fixing_subgroup_and_complement():
    g = symmetric_group(5)
    fix = fixing_subgroup(g, {0, 1})
    assert fix.order == 6
    assert fix.domain == g.domain
    restricted = act_on_complement(fix, {0, 1})
    assert restricted.domain == {2, 3, 4}
    assert restricted == of_fixing_subgroup(g, {0, 1})


def test_act_on_complement_requires_pointwise_fixing():
    with pytest.raises(ContractViolation):
        act_on_complement(symmetric_group(4), {0})


def test_stabilizer_equals_singleton_fixing_subgroup():
    g = projective_group(5)
    assert stabilizer(g, 5).order == 20
    assert of_stabilizer(g, 5) == of_fixing_subgroup(g, {5})


def test_orbits():
    g = generate([from_cycles(6, (0, 1, 2)), from_cycles(6, (3, 4))], 6)
    assert orbits(g) == [frozenset({0, 1, 2}), frozenset({3, 4}), frozenset({5})]
    assert not is_pretransitive(g)


def test_empty_domain_is_vacuously_primitive():
    g = of_fixing_subgroup(symmetric_group(3), {0, 1, 2})
    assert g.domain == frozenset()
    assert is_pretransitive(g)
    assert is_preprimitive(g)


@pytest.mark.parametrize("action, primitive", [
    (symmetric_group(2), True),
    (symmetric_group(6), True),
    (alternating_group(4), True),
    (cyclic_group(5), True),
    (cyclic_group(4), False),
    (dihedral_group(6), False),
    (dihedral_group(7), True),
    (affine_group(5), True),
])
def test_is_preprimitive(action, primitive):
    assert is_preprimitive(action) == primitive


def test_stabilizer_of_affine_group_is_imprimitive_but_transitive():
    stab = of_stabilizer(affine_group(5), 0)
    assert is_pretransitive(stab)
    assert not is_preprimitive(stab)


@pytest.mark.parametrize("action, k, expected", [
    (symmetric_group(5), 5, True),
    (alternating_group(5), 3, True),
    (alternating_group(5), 4, False),
    (affine_group(5), 2, True),
    (affine_group(5), 3, False),
    (projective_group(5), 3, True),
    (projective_group(5), 4, False),
    (cyclic_group(5), 7, True),
])
def test_is_multiply_pretransitive(action, k, expected):
    assert is_multiply_pretransitive(action, k) == expected


@pytest.mark.parametrize("action, k, expected", [
    (symmetric_group(5), 5, True),
    (alternating_group(5), 3, True),
    (affine_group(5), 1, True),
    (affine_group(5), 2, False),
    (projective_group(5), 2, True),
    (projective_group(5), 3, False),
    (dihedral_group(6), 1, False),
    (symmetric_group(4), 0, True),
])
def test_is_multiply_preprimitive(action, k, expected):
    assert is_multiply_preprimitive(action, k) == expected
    assert is_multiply_preprimitive(action, k, exhaustive=True) == expected


def test_relabel_preserves_structure():
    pi = np.array([2, 0, 3, 1, 5, 4])
    g = projective_group(5)
    h = relabel(g, pi)
    assert h.order == g.order
    assert is_multiply_pretransitive(h, 3)
    assert of_fixing_subgroup(h, {pi[0], pi[1]}).order == 4


def test_image_order_on_restricted_domain():
    g = of_stabilizer(symmetric_group(4), 0)
    assert g.image_order() == 6
