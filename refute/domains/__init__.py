"""
Domain registry.

Each domain is a dict describing a sample problem:
    make_state:   () -> ProofState
    clauses:      the clause-set string it parses
    provable:     whether the refutation is expected to succeed
    description:  str
"""

from .resolution import (
    SOCRATES, CHAIN, UNRELATED, DUPLICATE, TAUTOLOGY,
    make_socrates_state, make_chain_state, make_unrelated_state,
    make_duplicate_state, make_tautology_state,
)


DOMAINS = {
    "socrates": {
        "make_state":  make_socrates_state,
        "clauses":     SOCRATES,
        "provable":    True,
        "description": "Symbolic resolution: Сократ is mortal",
    },
    "chain": {
        "make_state":  make_chain_state,
        "clauses":     CHAIN,
        "provable":    True,
        "description": "Multi-step resolution: prove a chain of implications",
    },
    "unrelated": {
        "make_state":  make_unrelated_state,
        "clauses":     UNRELATED,
        "provable":    False,
        "description": "No complementary predicates: saturates immediately",
    },
    "duplicate": {
        "make_state":  make_duplicate_state,
        "clauses":     DUPLICATE,
        "provable":    False,
        "description": "Repeated input fact: duplicate resolvents are suppressed",
    },
    "tautology": {
        "make_state":  make_tautology_state,
        "clauses":     TAUTOLOGY,
        "provable":    False,
        "description": "Every resolvent is a tautology and gets discarded",
    },
}
