"""
Jordan Reduction
================

Certifies multiple transitivity / multiple primitivity of a finite
permutation group from a local hypothesis on a fixing subgroup, and uses
the certificate to decide containment of the symmetric and alternating
groups (Wielandt, Finite Permutation Groups, 13.1 - 13.3).

Layers:
  pigeonhole  - cardinality lemmas on a finite carrier
  shrinker    - one witness-shrinking step (separating element + intersection)
  bootstrap   - 2-fold pretransitivity / preprimitivity
  extender    - (1 + |s|)-fold preprimitivity
  corollaries - transposition => Sym, 3-cycle => Alt
"""

__version__ = "0.1.0"

from jordan_reduction.core import (
    PermutationAction, ReductionConfig, DEFAULT_CONFIG,
    JordanError, ContractViolation, InvariantViolation,
    generate, symmetric_group, alternating_group, cyclic_group,
    dihedral_group, affine_group, projective_group, relabel,
    from_cycles, support, is_swap, is_three_cycle,
)
from jordan_reduction.actions import (
    fixing_subgroup, act_on_complement, of_fixing_subgroup,
    stabilizer, of_stabilizer, orbits,
    is_pretransitive, is_preprimitive,
    is_multiply_pretransitive, is_multiply_preprimitive,
)
from jordan_reduction.pigeonhole import (
    ncard_pigeonhole, ncard_pigeonhole_union_ne,
    ncard_pigeonhole_compl, ncard_pigeonhole_compl_union_ne,
)
from jordan_reduction.rudio import separate, separating_elements
from jordan_reduction.certificates import (
    LocalFact, Certificate, ContainmentCertificate,
    assume_preprimitive, local_fact,
)
from jordan_reduction.transport import (
    conjugate_local_fact, compose_on_intersection,
    fixing_subgroup_isomorphism, transport_to_stabilizer,
    degree_shift_up, degree_shift_down,
)
from jordan_reduction.shrinker import shrink_witness
from jordan_reduction.bootstrap import (
    bootstrap_two,
    is_two_pretransitive_weak_jordan,
    is_two_preprimitive_weak_jordan,
)
from jordan_reduction.extender import extend_degree, is_multiply_preprimitive_jordan
from jordan_reduction.corollaries import (
    full_group_from_swap, full_group_from_three_cycle,
    jordan_swap, jordan_three_cycle,
    eq_s2_of_nontrivial, is_pretransitive_of_cycle, local_fact_of_cycle,
)
