"""Hypothesis strategies for random small permutation groups."""

from hypothesis import assume, strategies as st

from jordan_reduction import (
    generate, of_fixing_subgroup, is_pretransitive, is_preprimitive,
)


@st.composite
def primitive_groups(draw, min_points=3, max_points=6):
    n = draw(st.integers(min_value=min_points, max_value=max_points))
    gens = draw(st.lists(st.permutations(range(n)), min_size=1, max_size=2))
    action = generate(gens, n, name="<random>")
    assume(is_preprimitive(action))
    return action


@st.composite
def jordan_witnesses(draw, kind="preprimitive", min_size=1):
    """(G, s) with G preprimitive, 1 + |s| < N and Fix(G, s) `kind` on the rest."""
    action = draw(primitive_groups(min_points=max(3, min_size + 2)))
    size = len(action.domain)
    k = draw(st.integers(min_value=min_size, max_value=size - 2))
    s = frozenset(draw(st.permutations(action.points))[:k])
    fixing = of_fixing_subgroup(action, s)
    if kind == "preprimitive":
        assume(is_preprimitive(fixing))
    else:
        assume(is_pretransitive(fixing))
    return action, s
