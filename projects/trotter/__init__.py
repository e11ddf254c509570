from .trotter import (
    Permutations, NOT_STARTED, RUNNING, EXHAUSTED,
    inverse_perm, is_permutation, adjacent_swap, parity,
    transpositions, benchmark, main,
)
