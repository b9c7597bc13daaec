from .state import Variable, Constant, Literal, Clause, DerivationStep, ProofState, make_term
from .parser import ParseError, parse_clause_set, parse_clause, parse_literal
from .unification import (
    is_variable, resolve_binding,
    apply_substitution, apply_sub_to_literal, apply_sub_to_clause,
    unify_terms, unify_literals, complement, format_substitution,
)
from .engine import resolution_pass, run_resolution
from .proof import (
    found_empty_clause, empty_clause_index, minimize_derivation,
    format_report, print_proof, prove,
)

__all__ = [
    "Variable", "Constant", "Literal", "Clause", "DerivationStep", "ProofState", "make_term",
    "ParseError", "parse_clause_set", "parse_clause", "parse_literal",
    "is_variable", "resolve_binding",
    "apply_substitution", "apply_sub_to_literal", "apply_sub_to_clause",
    "unify_terms", "unify_literals", "complement", "format_substitution",
    "resolution_pass", "run_resolution",
    "found_empty_clause", "empty_clause_index", "minimize_derivation",
    "format_report", "print_proof", "prove",
]
