"""
The refutation loop.

Breadth-first saturation: each pass tries every clause pair of S that has
not been tried before, keeps the resolvents that are neither tautologies
nor duplicates, and appends them to S at the end of the pass. The loop
stops as soon as the empty clause is derived, or when a pass adds nothing.

A pair (i, j) is tried exactly once per run, even though S keeps growing.
That trades completeness for guaranteed termination.
"""

from typing import Optional

from .state import Clause, DerivationStep, ProofState
from ..inference.resolve import resolve, is_tautology, same_clause


REFUTED = "empty clause derived"
SATURATED = "saturated"
PASS_LIMIT = "pass limit reached"


def _is_duplicate(resolvent: Clause, known) -> bool:
    return any(same_clause(resolvent, c) for c in known)


def resolution_pass(state: ProofState, verbose: bool = True) -> ProofState:
    """
    Execute one pass of the refutation loop over the current S.

    Sets state.halted with REFUTED or SATURATED when the run is over;
    otherwise the accepted resolvents have been appended to S and another
    pass is worthwhile.
    """
    state.passes += 1
    clauses = state.clauses
    n = len(clauses)
    new_resolvents = []

    if verbose:
        print(f"\n--- Pass {state.passes}: {n} clauses ---")

    for i in range(n):
        for j in range(i + 1, n):
            if (i, j) in state.checked_pairs:
                continue
            state.checked_pairs.add((i, j))

            for resolvent, li, lj, sub in resolve(clauses[i], clauses[j]):
                if is_tautology(resolvent):
                    if verbose:
                        print(f"  [tautology] {resolvent.name}")
                    continue
                if _is_duplicate(resolvent, clauses + new_resolvents):
                    continue

                state.derivation.append(DerivationStep(
                    resolvent=resolvent,
                    parents=(i + 1, j + 1),
                    literals=(li, lj),
                    substitution=sub,
                ))
                if verbose:
                    print(f"  [new] {resolvent.name} (from {i + 1} + {j + 1})")

                if resolvent.is_empty:
                    clauses.extend(new_resolvents)
                    clauses.append(resolvent)
                    state.halted = True
                    state.halt_reason = REFUTED
                    return state
                new_resolvents.append(resolvent)

    if not new_resolvents:
        state.halted = True
        state.halt_reason = SATURATED
    clauses.extend(new_resolvents)

    if verbose:
        print(f"  Accepted: {len(new_resolvents)} | S: {len(clauses)}")

    return state


def run_resolution(
    state: ProofState,
    max_passes: Optional[int] = None,
    verbose: bool = False,
) -> ProofState:
    """
    Run passes until the empty clause is derived or S saturates.

    Args:
        state:      initial state, usually ProofState.from_clauses(...)
        max_passes: optional safety limit for callers embedding the engine;
                    None runs to saturation
        verbose:    print progress
    """
    while not state.halted:
        if max_passes is not None and state.passes >= max_passes:
            state.halted = True
            state.halt_reason = PASS_LIMIT
            break
        state = resolution_pass(state, verbose=verbose)
    return state
