"""
Tests for proof minimization and the textual report.

Core claims:
    - The minimized trace only keeps ancestors of the empty clause
    - Parent indices are renumbered densely, input clauses keep theirs
    - Replaying the minimized trace re-derives every step, ending in □
    - Minimizing a minimized trace changes nothing
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from refute.core.state import Variable, Constant, Literal, Clause, DerivationStep, ProofState
from refute.core.parser import ParseError, parse_clause_set
from refute.core.engine import run_resolution
from refute.core.proof import (
    found_empty_clause, empty_clause_index, needed_indices, minimize_derivation,
    format_report, prove,
    PROVED, NOT_PROVED, STOPPED, CLAUSES_HEADER, DERIVATION_HEADER, SHORT_HEADER, RESULT_HEADER,
)
from refute.inference.resolve import resolve, same_clause
from refute.domains.resolution import SOCRATES, CHAIN, UNRELATED, TAUTOLOGY


# ── Helpers ──────────────────────────────────────────────────────────────────

def run(text, **kwargs) -> ProofState:
    return run_resolution(ProofState.from_clauses(parse_clause_set(text)), **kwargs)


def minimized(state: ProofState) -> list:
    return minimize_derivation(state.derivation, state.num_input, empty_clause_index(state))


def replay(inputs, steps):
    """Re-derive each step from its cited parents; return the clause list."""
    clauses = list(inputs)
    for step in steps:
        p1, p2 = step.parents
        assert 1 <= p1 < p2 <= len(clauses)
        candidates = [r for r, li, lj, _ in resolve(clauses[p1 - 1], clauses[p2 - 1])
                      if (li, lj) == step.literals]
        assert any(same_clause(c, step.resolvent) for c in candidates)
        clauses.append(step.resolvent)
    return clauses


def step(name, parents):
    return DerivationStep(resolvent=Clause((Literal(name),)), parents=parents,
                          literals=(Literal("L"), Literal("L", negated=True)))


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestMinimize:
    def test_socrates_drops_unused_step(self):
        state = run(SOCRATES)
        # Full run: 4 = Смертен(Сократ) (unused), 5 = ¬Человек(Сократ), 6 = □
        assert len(state.derivation) == 3
        short = minimized(state)
        assert [s.resolvent.name for s in short] == ["¬Человек(Сократ)", "□"]
        assert [s.parents for s in short] == [(2, 3), (1, 4)]

    def test_input_indices_always_needed(self):
        derivation = [step("A", (1, 2)), step("B", (1, 2))]
        needed = needed_indices(derivation, 3, 5)
        assert needed == {1, 2, 3, 5}

    def test_parents_remapped_densely(self):
        # 4 and 6 unused; 5 <- (1,2), 7 <- (3,5)
        derivation = [
            step("A", (1, 2)), step("B", (1, 2)),
            step("C", (2, 3)), step("□", (3, 5)),
        ]
        short = minimize_derivation(derivation, 3, 7)
        assert [s.resolvent.name for s in short] == ["B", "□"]
        assert [s.parents for s in short] == [(1, 2), (3, 4)]

    def test_step_citing_later_clause_rejected(self):
        with pytest.raises(ValueError, match="cites a later clause"):
            needed_indices([step("□", (1, 4))], 2, 3)

    def test_chain_replays_to_empty_clause(self):
        state = run(CHAIN)
        short = minimized(state)
        clauses = replay(state.input_clauses, short)
        assert clauses[-1].is_empty
        assert len(short) <= len(state.derivation)

    def test_minimizing_twice_is_identity(self):
        state = run(CHAIN)
        short = minimized(state)
        again = minimize_derivation(short, state.num_input, state.num_input + len(short))
        assert again == short


class TestFoundEmptyClause:
    def test_true_after_refutation(self):
        state = run(SOCRATES)
        assert found_empty_clause(state)
        assert empty_clause_index(state) == len(state.clauses)

    def test_false_after_saturation(self):
        state = run(UNRELATED)
        assert not found_empty_clause(state)
        assert empty_clause_index(state) is None


class TestFormatReport:
    def test_sections_in_order(self):
        report = format_report(run(SOCRATES))
        positions = [report.index(h) for h in (CLAUSES_HEADER, DERIVATION_HEADER, RESULT_HEADER)]
        assert positions == sorted(positions)

    def test_proved_report_shows_short_proof_only(self):
        report = format_report(run(SOCRATES))
        assert report.splitlines()[-1] == PROVED
        assert "4. Смертен(Сократ)" not in report
        assert "4. ¬Человек(Сократ)" in report
        assert "5. □" in report
        assert "   - Parents: 1 and 4" in report
        assert "   - Unifier σ: {x/Сократ}" in report
        assert SHORT_HEADER not in report

    def test_input_clauses_numbered(self):
        report = format_report(run(SOCRATES))
        assert "1. Человек(Сократ)" in report
        assert "2. ¬Человек(x) V Смертен(x)" in report
        assert "3. ¬Смертен(Сократ)" in report

    def test_full_log_shows_both(self):
        report = format_report(run(SOCRATES), full_log=True)
        full, short = report.split(SHORT_HEADER)
        assert "4. Смертен(Сократ)" in full
        assert "6. □" in full
        assert "5. □" in short
        assert report.splitlines()[-1] == PROVED

    def test_unrelated_not_proved_with_empty_trace(self):
        report = format_report(run(UNRELATED))
        assert report.splitlines()[-1] == NOT_PROVED
        derivation = report.split(DERIVATION_HEADER)[1].split(RESULT_HEADER)[0]
        assert derivation.strip() == ""

    def test_failure_forces_full_log(self):
        state = run(SOCRATES, max_passes=1)
        report = format_report(state)
        assert "4. Смертен(Сократ)" in report
        assert "5. ¬Человек(Сократ)" in report
        assert report.splitlines()[-1] == STOPPED
        assert NOT_PROVED not in report

    def test_tautology_never_reported(self):
        report = format_report(run(TAUTOLOGY))
        assert "Q(a) V ¬Q(a)" not in report
        assert NOT_PROVED in report


class TestProve:
    def test_socrates(self):
        assert prove(SOCRATES).endswith(PROVED)

    def test_parse_error_before_search(self):
        with pytest.raises(ParseError):
            prove("Человек(Сократ")


# ── Property-based tests ─────────────────────────────────────────────────────

terms = st.sampled_from([Variable("x"), Constant("a"), Constant("b")])


@st.composite
def refutable_clause_sets(draw):
    """Random clauses plus one complementary pair of unit clauses."""
    unit = Literal(draw(st.sampled_from(["P", "Q"])), (Constant("a"),))
    result = [Clause((unit,)), Clause((unit.negate(),))]
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        lits = []
        for _ in range(draw(st.integers(min_value=1, max_value=2))):
            pred = draw(st.sampled_from(["P", "Q"]))
            lits.append(Literal(pred, (draw(terms),), draw(st.booleans())))
        result.append(Clause(tuple(lits)))
    draw(st.randoms()).shuffle(result)
    return result


class TestMinimizeProperties:

    @settings(max_examples=50, deadline=None)
    @given(refutable_clause_sets())
    def test_minimized_trace_replays(self, clauses):
        state = run_resolution(ProofState.from_clauses(clauses))
        assert found_empty_clause(state)
        short = minimized(state)
        replayed = replay(state.input_clauses, short)
        assert replayed[-1].is_empty
        assert sum(1 for c in replayed if c.is_empty) == 1

    @settings(max_examples=50, deadline=None)
    @given(refutable_clause_sets())
    def test_minimized_is_idempotent(self, clauses):
        state = run_resolution(ProofState.from_clauses(clauses))
        assert found_empty_clause(state)
        short = minimized(state)
        n = state.num_input
        assert minimize_derivation(short, n, n + len(short)) == short
