"""
Proof extraction and display.

After the loop derives the empty clause, these utilities walk back
through the parent links to recover only the steps the refutation
actually used, renumber them densely, and render the textual report.
"""

from dataclasses import replace
from typing import Optional

from .state import ProofState
from .parser import parse_clause_set
from .engine import run_resolution, PASS_LIMIT
from .unification import format_substitution


CLAUSES_HEADER = "=== 1. Clause set (S0) ==="
DERIVATION_HEADER = "=== 2. Derivation ==="
SHORT_HEADER = "====== Short derivation ======"
RESULT_HEADER = "=== 3. Result ==="

PROVED = "Proved: the empty clause was derived."
NOT_PROVED = "Not proved: resolvents exhausted, the empty clause was not derived."
STOPPED = "Not proved: the search hit its pass limit before the resolvents were exhausted."


def found_empty_clause(state: ProofState) -> bool:
    """Did the run end in a genuine derivation of the empty clause?"""
    return bool(state.derivation) and state.derivation[-1].resolvent.is_empty


def empty_clause_index(state: ProofState) -> Optional[int]:
    """1-based index of the first empty clause in S, or None."""
    for i, clause in enumerate(state.clauses):
        if clause.is_empty:
            return i + 1
    return None


def needed_indices(derivation: list, num_input: int, empty_index: int) -> set:
    """
    Every clause index the refutation depends on. Input clauses are always
    included. Parents always have smaller indices than their child, so the
    walk cannot revisit an index through a cycle.
    """
    needed = set(range(1, num_input + 1))
    stack = [empty_index]
    while stack:
        idx = stack.pop()
        if idx in needed:
            continue
        needed.add(idx)
        rel = idx - (num_input + 1)
        if 0 <= rel < len(derivation):
            p1, p2 = derivation[rel].parents
            if p1 >= idx or p2 >= idx:
                raise ValueError(f"step {idx} cites a later clause")
            stack.extend((p1, p2))
    return needed


def minimize_derivation(derivation: list, num_input: int, empty_index: int) -> list:
    """
    Keep only the derivation steps the empty clause depends on, with parent
    indices renumbered densely (1..k) in original order. Step i of the
    result produces clause num_input + i + 1 of the renumbered proof.
    """
    needed = needed_indices(derivation, num_input, empty_index)
    mapping = {orig: new for new, orig in enumerate(sorted(needed), start=1)}

    minimized = []
    for i, step in enumerate(derivation):
        if num_input + i + 1 not in needed:
            continue
        p1, p2 = step.parents
        minimized.append(replace(step, parents=(mapping[p1], mapping[p2])))
    return minimized


def format_step(number: int, step) -> list:
    return [
        f"{number}. {step.resolvent.name}",
        f"   - Parents: {step.parents[0]} and {step.parents[1]}",
        f"   - Literals: {step.literals[0]} and {step.literals[1]}",
        f"   - Unifier σ: {format_substitution(step.substitution)}",
    ]


def format_report(state: ProofState, full_log: bool = False) -> str:
    """
    Render the three-section report: input clauses, derivation, verdict.

    The full derivation is shown when the run did not refute the input, or
    when full_log is set; a successful run otherwise shows only the
    minimized proof.
    """
    proved = found_empty_clause(state)
    if not proved:
        full_log = True
    n = state.num_input

    lines = [CLAUSES_HEADER]
    for i, clause in enumerate(state.input_clauses):
        lines.append(f"{i + 1}. {clause.name}")

    lines.append("")
    lines.append(DERIVATION_HEADER)

    if full_log:
        for i, step in enumerate(state.derivation):
            lines.extend(format_step(n + i + 1, step))
        if proved:
            lines.append("")
            lines.append(SHORT_HEADER)
            lines.append("")

    if proved:
        short = minimize_derivation(state.derivation, n, empty_clause_index(state))
        for i, step in enumerate(short):
            lines.extend(format_step(n + i + 1, step))

    lines.append("")
    lines.append(RESULT_HEADER)
    if proved:
        lines.append(PROVED)
    elif state.halt_reason == PASS_LIMIT:
        lines.append(STOPPED)
    else:
        lines.append(NOT_PROVED)
    return "\n".join(lines)


def print_proof(state: ProofState, full_log: bool = False):
    """Pretty-print the report."""
    print(f"\n{'='*60}")
    print(format_report(state, full_log=full_log))
    print(f"{'='*60}")


def prove(text: str, full_log: bool = False, max_passes=None, verbose=False) -> str:
    """
    Parse a clause-set string, run the refutation loop, and return the
    report. Raises ParseError on malformed input before any search.
    """
    state = ProofState.from_clauses(parse_clause_set(text))
    state = run_resolution(state, max_passes=max_passes, verbose=verbose)
    return format_report(state, full_log=full_log)
