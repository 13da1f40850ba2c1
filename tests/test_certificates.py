import json

import pytest

from jordan_reduction import (
    ContractViolation, InvariantViolation, ReductionConfig,
    Certificate, LocalFact, ContainmentCertificate,
    symmetric_group, alternating_group, dihedral_group, affine_group,
    projective_group, from_cycles, of_stabilizer,
    assume_preprimitive, local_fact,
    conjugate_local_fact, compose_on_intersection,
    fixing_subgroup_isomorphism, transport_to_stabilizer,
    degree_shift_up, degree_shift_down,
)
from jordan_reduction.certificates import check_witness
from jordan_reduction.transport import singleton_stabilizer_certificate, is_homomorphism


CHECKED = ReductionConfig(verify_steps=True)


# --- Entry points ---

def test_assume_preprimitive():
    cert = assume_preprimitive(symmetric_group(4))
    assert (cert.kind, cert.degree) == ("preprimitive", 1)
    with pytest.raises(ContractViolation):
        assume_preprimitive(dihedral_group(6))


def test_local_fact_is_checked():
    assert local_fact(affine_group(5), {0}, "pretransitive").holds()
    with pytest.raises(ContractViolation):
        local_fact(affine_group(5), {0}, "preprimitive")
    with pytest.raises(ContractViolation):
        local_fact(symmetric_group(4), {9})
    with pytest.raises(ContractViolation):
        local_fact(symmetric_group(4), {0}, "transitive")


def test_check_witness():
    fact = local_fact(symmetric_group(5), {0, 1, 2})
    check_witness(fact, 2)
    with pytest.raises(ContractViolation):
        check_witness(fact, 1)
    fact = local_fact(symmetric_group(5), {0, 1, 2, 3})
    with pytest.raises(ContractViolation):
        check_witness(fact, 3)


def test_serialization():
    cert = assume_preprimitive(projective_group(5))
    data = json.loads(cert.to_json())
    assert data["degree"] == 1
    assert data["action"]["order"] == 120
    assert data["action"]["domain"] == list(range(6))
    fact = local_fact(projective_group(5), {5})
    assert fact.to_dict()["witness"] == [5]


def test_weaken():
    cert = Certificate("preprimitive", 4, symmetric_group(5))
    assert cert.weaken(4) is cert
    assert cert.weaken(2).degree == 2
    assert cert.weaken(2).verify()
    for j in (0, 5):
        with pytest.raises(ContractViolation):
            cert.weaken(j)


def test_containment_verify():
    assert ContainmentCertificate("symmetric", symmetric_group(5)).verify()
    assert not ContainmentCertificate("symmetric", alternating_group(5)).verify()
    assert ContainmentCertificate("alternating", alternating_group(5)).verify()
    assert not ContainmentCertificate("alternating", dihedral_group(5)).verify()


# --- Transport lemmas ---

def test_conjugate_local_fact():
    action = symmetric_group(5)
    fact = local_fact(action, {0, 1})
    moved = conjugate_local_fact(fact, from_cycles(5, (0, 2), (1, 3)), CHECKED)
    assert moved.witness == {2, 3}
    assert moved.holds()
    with pytest.raises(ContractViolation):
        conjugate_local_fact(local_fact(alternating_group(5), {0, 1}), from_cycles(5, (0, 1)))


def test_recomputation_catches_false_facts():
    bogus = LocalFact("preprimitive", frozenset({0}), affine_group(5))
    identity = from_cycles(5)
    conjugate_local_fact(bogus, identity)
    with pytest.raises(InvariantViolation):
        conjugate_local_fact(bogus, identity, CHECKED)


def test_compose_on_intersection():
    action = symmetric_group(5)
    both = compose_on_intersection(local_fact(action, {0, 1}), local_fact(action, {1, 2}), CHECKED)
    assert both.witness == {1}
    with pytest.raises(ContractViolation):
        compose_on_intersection(local_fact(action, {0, 1, 2}), local_fact(action, {2, 3, 4}))
    with pytest.raises(ContractViolation):
        compose_on_intersection(local_fact(action, {0, 1}),
                                local_fact(action, {1, 2}, "pretransitive"))
    with pytest.raises(ContractViolation):
        compose_on_intersection(local_fact(action, {0}), local_fact(symmetric_group(6), {1}))


def test_singleton_stabilizer_certificate():
    action = projective_group(5)
    cert = singleton_stabilizer_certificate(local_fact(action, {5}), CHECKED)
    assert cert.degree == 1
    assert cert.action == of_stabilizer(action, 5)
    with pytest.raises(ContractViolation):
        singleton_stabilizer_certificate(local_fact(action, {4, 5}, "pretransitive"))


@pytest.mark.parametrize("action, a, t", [
    (symmetric_group(5), 0, {1, 2}),
    (alternating_group(6), 2, {0, 5}),
    (projective_group(5), 5, {0}),
])
def test_fixing_subgroup_isomorphism(action, a, t):
    outer, inner, mapping = fixing_subgroup_isomorphism(action, a, t, CHECKED)
    assert outer.order == inner.order
    assert sorted(mapping.tolist()) == list(range(inner.order))
    assert is_homomorphism(outer, inner, mapping)


def test_is_homomorphism_rejects_a_scrambled_row_map():
    outer, inner, mapping = fixing_subgroup_isomorphism(symmetric_group(5), 0, {1})
    # row 0 is the identity; sending it elsewhere breaks composition
    scrambled = mapping.copy()
    scrambled[[0, 1]] = scrambled[[1, 0]]
    assert not is_homomorphism(outer, inner, scrambled)


def test_fixing_subgroup_isomorphism_rejects_overlap():
    with pytest.raises(ContractViolation):
        fixing_subgroup_isomorphism(symmetric_group(4), 0, {0, 1})


def test_transport_to_stabilizer():
    action = symmetric_group(5)
    moved = transport_to_stabilizer(local_fact(action, {0, 1, 2}), 0, CHECKED)
    assert moved.witness == {1, 2}
    assert moved.action == of_stabilizer(action, 0)
    assert moved.holds()
    with pytest.raises(ContractViolation):
        transport_to_stabilizer(local_fact(action, {0, 1, 2}), 3)
    with pytest.raises(ContractViolation):
        transport_to_stabilizer(local_fact(action, {0}), 0)


def test_degree_shift_round_trip():
    action = symmetric_group(5)
    cert = Certificate("preprimitive", 4, action)
    down = degree_shift_down(cert, 0, CHECKED)
    assert down.degree == 3
    assert down.action == of_stabilizer(action, 0)
    up = degree_shift_up(down, assume_preprimitive(action), 0, CHECKED)
    assert up.degree == 4
    assert up.action == action


def test_degree_shift_checks():
    action = symmetric_group(5)
    down = degree_shift_down(Certificate("preprimitive", 2, action), 0)
    with pytest.raises(ContractViolation):
        degree_shift_up(down, assume_preprimitive(action), 1)
    with pytest.raises(ContractViolation):
        degree_shift_up(Certificate("preprimitive", 0, down.action),
                        assume_preprimitive(action), 0)
    with pytest.raises(ContractViolation):
        degree_shift_down(Certificate("preprimitive", 0, action), 0)
