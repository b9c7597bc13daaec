"""
Refute: a small first-order resolution prover.

Takes a clause set in the form a formalizer produces, for example

    Человек(Сократ), ¬Человек(x) V Смертен(x), ¬Смертен(Сократ)

and searches for a derivation of the empty clause by exhaustive pairwise
resolution. The report lists the input clauses, the (minimized) proof,
and a verdict.

Usage:
    python -m refute --clauses "P(a), ¬P(x)"
    python -m refute --domain socrates
    python -m refute --problem "..."   (needs ANTHROPIC_API_KEY)
"""

from .core.state import Variable, Constant, Literal, Clause, DerivationStep, ProofState
from .core.parser import ParseError, parse_clause_set
from .core.engine import resolution_pass, run_resolution
from .core.proof import (
    found_empty_clause, minimize_derivation, format_report, print_proof, prove,
)
from .inference.resolve import resolve, is_tautology, same_clause

__all__ = [
    "Variable", "Constant", "Literal", "Clause", "DerivationStep", "ProofState",
    "ParseError", "parse_clause_set",
    "resolution_pass", "run_resolution",
    "found_empty_clause", "minimize_derivation", "format_report", "print_proof", "prove",
    "resolve", "is_tautology", "same_clause",
]
