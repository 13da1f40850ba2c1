"""
Survey configuration and job definitions.
=========================================

Default reduction parameters and the queue of permutation groups to
certify.

Groups are kept small enough for exhaustive element enumeration
(order <= 720).
"""

from jordan_reduction.core import ReductionConfig


# --- Default reduction parameters ---

DEFAULT_CONFIG = ReductionConfig(
    verbose=False,
    verify_steps=True,
    exhaustive_check=False,
)


# --- Job queue ---
# Each entry: (group_name, builder_name, parameter)
# Ordered by increasing degree within each family.

JOB_QUEUE = [
    # --- Symmetric groups: transposition => Sym ---
    ("S(3)",       "symmetric",   3),
    ("S(4)",       "symmetric",   4),
    ("S(5)",       "symmetric",   5),
    ("S(6)",       "symmetric",   6),

    # --- Alternating groups: 3-cycle => Alt ---
    ("A(4)",       "alternating", 4),
    ("A(5)",       "alternating", 5),
    ("A(6)",       "alternating", 6),

    # --- Sharply 2-transitive: Stab(G, a) transitive, not primitive ---
    ("AGL(1,5)",   "affine",      5),
    ("AGL(1,7)",   "affine",      7),

    # --- Sharply 3-transitive on the projective line ---
    ("PGL(2,5)",   "projective",  5),
    ("PGL(2,7)",   "projective",  7),

    # --- Primitive of prime degree, not 2-transitive ---
    ("D(5)",       "dihedral",    5),
    ("C(7)",       "cyclic",      7),

    # --- Imprimitive: rejected at the entry check ---
    ("D(6)",       "dihedral",    6),
]
