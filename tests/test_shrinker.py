from hypothesis import given, settings, HealthCheck
import pytest

from jordan_reduction import (
    ContractViolation, InvariantViolation, ReductionConfig,
    symmetric_group, alternating_group, dihedral_group, projective_group,
    separate, separating_elements, assume_preprimitive, local_fact,
    shrink_witness,
)

from strategies import jordan_witnesses


# --- Separating oracle ---

@pytest.mark.parametrize("action, s, a, b", [
    (symmetric_group(5), {0, 1}, 0, 1),
    (alternating_group(5), {0, 1, 2}, 3, 0),
    (projective_group(5), {5}, 5, 2),
])
def test_separate(action, s, a, b):
    g = separate(action, s, a, b)
    gs = action.image(g, s)
    assert a in gs
    assert b not in gs
    assert action.contains(g)


def test_separating_elements_are_exactly_the_separators():
    action = symmetric_group(4)
    s = {0, 1}
    found = {tuple(g.tolist()) for g in separating_elements(action, s, 0, 1)}
    for g in action.perms:
        gs = action.image(g, s)
        assert (tuple(g.tolist()) in found) == (0 in gs and 1 not in gs)


def test_separate_fails_on_a_block():
    # {0, 2, 4} is a block of the hexagon
    with pytest.raises(InvariantViolation):
        separate(dihedral_group(6), {0, 2, 4}, 0, 2)


@pytest.mark.parametrize("s, a, b", [
    (set(), 0, 1),
    ({0, 1, 2, 3}, 0, 1),
    ({0, 1}, 2, 2),
    ({0, 7}, 0, 1),
])
def test_separate_rejects_bad_arguments(s, a, b):
    with pytest.raises(ContractViolation):
        separate(symmetric_group(4), s, a, b)


# --- Shrinker ---

@pytest.mark.parametrize("action, s, case", [
    (symmetric_group(6), {0, 1}, "small"),
    (projective_group(5), {0, 1}, "small"),
    (symmetric_group(5), {0, 1, 2}, "large"),
    (alternating_group(6), {0, 1, 2}, "large"),
])
def test_shrink_witness(action, s, case, capsys):
    primitive = assume_preprimitive(action)
    kind = "pretransitive" if action.name == "PGL(2,5)" else "preprimitive"
    fact = local_fact(action, s, kind)
    n = len(s) - 1
    fact_t, m = shrink_witness(primitive, fact, n, ReductionConfig(verbose=True))
    assert fact_t.witness < fact.witness
    assert fact_t.witness
    assert m == fact_t.size - 1 < n
    assert fact_t.kind == kind
    assert fact_t.holds()
    assert "{} case".format(case) in capsys.readouterr().out


def test_shrink_refuses_a_one_point_witness():
    action = symmetric_group(5)
    fact = local_fact(action, {0})
    with pytest.raises(ContractViolation):
        shrink_witness(assume_preprimitive(action), fact, 0)


def test_shrink_checks_measure():
    action = symmetric_group(5)
    fact = local_fact(action, {0, 1})
    with pytest.raises(ContractViolation):
        shrink_witness(assume_preprimitive(action), fact, 2)


def test_shrink_needs_certificate_for_the_same_group():
    fact = local_fact(symmetric_group(6), {0, 1})
    with pytest.raises(ContractViolation):
        shrink_witness(assume_preprimitive(symmetric_group(5)), fact, 1)


@settings(max_examples=20, deadline=None,
          suppress_health_check=[HealthCheck.filter_too_much, HealthCheck.too_slow])
@given(jordan_witnesses(kind="pretransitive", min_size=2))
def test_shrinking_terminates_with_sound_facts(case):
    action, s = case
    primitive = assume_preprimitive(action)
    fact = local_fact(action, s, "pretransitive")
    n = fact.size - 1
    steps = 0
    while n > 0:
        fact, m = shrink_witness(primitive, fact, n)
        assert m < n
        assert fact.holds()
        n = m
        steps += 1
    assert fact.size == 1
    assert steps <= len(s) - 1
