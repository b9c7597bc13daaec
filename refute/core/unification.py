"""
Unification over flat argument lists.

Given two literals, find a substitution that makes their arguments
identical -- or report that no such substitution exists.

Terms are Variable or Constant (see state.py). There are no function
terms, so a variable can never be bound to a term containing itself and
no occurs check is needed.

Substitutions are plain dicts: {Variable("x"): Constant("Сократ")}.
Bindings may chain (x -> y -> Сократ); every lookup chases the chain to
its end.
"""

from .state import Variable, Literal, Clause


def is_variable(term) -> bool:
    return isinstance(term, Variable)


def resolve_binding(sub: dict, term, limit=None):
    """
    Follow term through sub until it reaches a constant or an unbound
    variable. Raises ValueError if the chain loops.
    """
    if limit is None:
        limit = len(sub) + 1
    seen = 0
    while is_variable(term) and term in sub:
        if seen >= limit:
            raise ValueError(f"cyclic substitution at {term}")
        term = sub[term]
        seen += 1
    return term


def apply_substitution(sub: dict, term):
    """Apply a substitution dict to a single term. Follows chains."""
    return resolve_binding(sub, term)


def apply_sub_to_literal(sub: dict, literal: Literal) -> Literal:
    args = tuple(apply_substitution(sub, arg) for arg in literal.args)
    return Literal(literal.name, args, literal.negated)


def apply_sub_to_clause(sub: dict, clause: Clause) -> Clause:
    """Apply substitution to every literal in a clause, keeping order."""
    return Clause(tuple(apply_sub_to_literal(sub, lit) for lit in clause.literals))


def unify_terms(t1, t2, sub=None):
    """
    Unify two terms under substitution sub.

    Returns the updated substitution dict, or None if unification fails.
    The input dict is never mutated.
    """
    if sub is None:
        sub = {}

    t1 = apply_substitution(sub, t1)
    t2 = apply_substitution(sub, t2)

    if t1 == t2:
        return sub

    if is_variable(t1):
        sub = dict(sub)
        sub[t1] = t2
        return sub

    if is_variable(t2):
        return unify_terms(t2, t1, sub)

    return None  # two different constants


def unify_literals(lit1: Literal, lit2: Literal, sub=None):
    """
    Unify two literals, ignoring sign. Same predicate and arity required.
    Arguments are unified left to right, each pair seeing the bindings
    made by the pairs before it. Returns substitution or None.
    """
    if lit1.name != lit2.name:
        return None
    if lit1.arity != lit2.arity:
        return None
    if sub is None:
        sub = {}
    for a1, a2 in zip(lit1.args, lit2.args):
        sub = unify_terms(a1, a2, sub)
        if sub is None:
            return None
    return sub


def complement(literal: Literal) -> Literal:
    """Flip the sign of a literal."""
    return literal.negate()


def format_substitution(sub: dict) -> str:
    """{x/Сократ, y/Платон}, chains chased, in binding order."""
    if not sub:
        return "{}"
    pairs = [f"{var}/{apply_substitution(sub, var)}" for var in sub]
    return "{" + ", ".join(pairs) + "}"
