"""
Domain: sample refutation problems.

Each problem is a clause-set string in the formalizer's output grammar,
with the goal already negated.

socrates   -- Socrates syllogism (Смертен(Сократ))
chain      -- multi-step implication chain (builds_with(alice, bob))
unrelated  -- two facts with nothing to resolve
duplicate  -- the same fact given twice
tautology  -- a rule whose only resolvent with a fact is a tautology
"""

from ..core.state import ProofState
from ..core.parser import parse_clause_set


SOCRATES = "Человек(Сократ), ¬Человек(x) V Смертен(x), ¬Смертен(Сократ)"

CHAIN = (
    "knows(alice, bob), "
    "¬knows(x, y) V trusts(x, y), "
    "¬trusts(x, y) V cooperates(x, y), "
    "¬cooperates(x, y) V builds_with(x, y), "
    "¬builds_with(alice, bob)"
)

UNRELATED = "Человек(Сократ), Смертен(Платон)"

DUPLICATE = "Человек(Сократ), Человек(Сократ), ¬Человек(x) V Смертен(x)"

# Both resolvents bind x to a and keep a literal next to its negation.
TAUTOLOGY = "¬P(x) V Q(x), P(a) V ¬Q(a)"


def make_state(text: str) -> ProofState:
    return ProofState.from_clauses(parse_clause_set(text))


def make_socrates_state() -> ProofState:
    """
    Classic syllogism as a resolution refutation problem.

    Axioms:
        Сократ is human:          Человек(Сократ)
        all humans are mortal:    ¬Человек(x) V Смертен(x)

    Negated goal (to refute):
        Сократ is NOT mortal:     ¬Смертен(Сократ)
    """
    return make_state(SOCRATES)


def make_chain_state() -> ProofState:
    """
    Multi-step implication chain.

    Axioms:
        knows(alice, bob).
        knows(x,y)      -> trusts(x,y)
        trusts(x,y)     -> cooperates(x,y)
        cooperates(x,y) -> builds_with(x,y)

    Negated goal: ¬builds_with(alice, bob)
    """
    return make_state(CHAIN)


def make_unrelated_state() -> ProofState:
    return make_state(UNRELATED)


def make_duplicate_state() -> ProofState:
    return make_state(DUPLICATE)


def make_tautology_state() -> ProofState:
    return make_state(TAUTOLOGY)
