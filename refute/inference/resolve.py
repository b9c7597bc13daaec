"""
Binary resolution: the core inference rule of the refutation loop.

Given two clauses, find a pair of complementary literals (same predicate,
opposite sign), unify their arguments, and produce a resolvent that holds
all the remaining literals from both clauses with the unifying
substitution applied.

Variables are shared between clauses, not renamed apart: the x in one
clause and the x in another are the same x.

If the resolvent is empty, a contradiction has been found.
"""

from collections import Counter

from ..core.state import Clause
from ..core.unification import (
    unify_literals, complement,
    apply_sub_to_literal, apply_sub_to_clause,
)


def dedupe_literals(literals) -> tuple:
    """Drop repeated literals, keeping the first occurrence of each."""
    seen = set()
    result = []
    for lit in literals:
        if lit not in seen:
            seen.add(lit)
            result.append(lit)
    return tuple(result)


def is_tautology(clause: Clause) -> bool:
    """Does the clause hold some literal together with its negation?"""
    lits = set(clause.literals)
    return any(complement(lit) in lits for lit in lits)


def same_clause(c1: Clause, c2: Clause) -> bool:
    """Same literal multiset, order ignored."""
    return len(c1) == len(c2) and Counter(c1.literals) == Counter(c2.literals)


def resolve(c1: Clause, c2: Clause) -> list:
    """
    Binary resolution between two clauses.

    Returns a list of (resolvent, lit1, lit2, substitution) tuples, one per
    complementary literal pair that unifies, where lit1/lit2 are the
    literals as written in c1/c2. Resolvents are literal-deduplicated but
    not filtered for tautologies or duplicates; that is the loop's job.
    """
    results = []

    for lit1 in c1.literals:
        for lit2 in c2.literals:
            if lit1.name != lit2.name:
                continue  # different predicate
            if lit1.negated == lit2.negated:
                continue  # same sign, can't resolve

            sub = unify_literals(lit1, complement(lit2))
            if sub is None:
                continue

            resolved1 = apply_sub_to_literal(sub, lit1)
            resolved2 = apply_sub_to_literal(sub, lit2)
            remaining1 = [lit for lit in apply_sub_to_clause(sub, c1).literals
                          if lit != resolved1]
            remaining2 = [lit for lit in apply_sub_to_clause(sub, c2).literals
                          if lit != resolved2]

            resolvent = Clause(dedupe_literals(remaining1 + remaining2))
            results.append((resolvent, lit1, lit2, sub))

    return results
