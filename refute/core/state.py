"""
Core data structures: Variable, Constant, Literal, Clause, DerivationStep,
ProofState.

These are the atoms of the whole system. Nothing in here depends on
parsing, inference rules, or report formatting.

Terms:
    Variable("x")        -- one of a fixed alphabet of single letters
    Constant("Сократ")   -- any other token, compared by name

    The variable/constant decision is made once, at parse time.

Literals:
    Literal("Человек", (Constant("Сократ"),))          ->  Человек(Сократ)
    Literal("Смертен", (Variable("x"),), negated=True)  -> ¬Смертен(x)

A Clause is an ordered tuple of literals (a disjunction).
The empty clause () is a contradiction -> proof found.
"""

from dataclasses import dataclass, field
from typing import Union
import json


VARIABLE_SYMBOLS = frozenset({"x", "y", "z", "u", "v", "w", "p", "s"})


@dataclass(frozen=True)
class Variable:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Constant:
    name: str

    def __str__(self):
        return self.name


Term = Union[Variable, Constant]


def make_term(token: str) -> Term:
    """Classify a bare token against the variable alphabet."""
    if token in VARIABLE_SYMBOLS:
        return Variable(token)
    return Constant(token)


@dataclass(frozen=True)
class Literal:
    """An atomic predicate application, optionally negated."""
    name: str
    args: tuple = ()
    negated: bool = False

    @property
    def arity(self):
        return len(self.args)

    def negate(self) -> "Literal":
        return Literal(self.name, self.args, not self.negated)

    def __str__(self):
        prefix = "¬" if self.negated else ""
        if self.args:
            return f"{prefix}{self.name}({', '.join(str(a) for a in self.args)})"
        return f"{prefix}{self.name}"


@dataclass
class Clause:
    """
    A disjunction of literals. Order is kept for display only; two clauses
    are the same clause when they hold the same literal multiset.

    The empty clause (literals = ()) is contradiction / proof found.
    """
    literals: tuple = ()

    @property
    def name(self):
        if not self.literals:
            return "□"
        return " V ".join(str(lit) for lit in self.literals)

    @property
    def is_empty(self):
        return len(self.literals) == 0

    def __len__(self):
        return len(self.literals)

    def __iter__(self):
        return iter(self.literals)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Clause({self.name})"


@dataclass
class DerivationStep:
    """
    One accepted resolvent.

    parents:      1-based indices into the clause set S
    literals:     the two literals resolved away, as written in the parents
    substitution: the unifier, {Variable: Term}
    """
    resolvent: Clause
    parents: tuple
    literals: tuple
    substitution: dict = field(default_factory=dict)


@dataclass
class ProofState:
    """
    Full state of one proof attempt, serializable for inspection.

    clauses:       S -- input clauses first, then accepted resolvents.
                   Append-only; a clause's 1-based index never changes.
    derivation:    derivation[i] produced clause num_input + i + 1
    checked_pairs: 0-based (i, j) pairs already examined this run
    """
    clauses: list = field(default_factory=list)
    derivation: list = field(default_factory=list)
    checked_pairs: set = field(default_factory=set)
    num_input: int = 0
    passes: int = 0
    halted: bool = False
    halt_reason: str = ""

    @classmethod
    def from_clauses(cls, clauses) -> "ProofState":
        clauses = [c if isinstance(c, Clause) else Clause(tuple(c)) for c in clauses]
        return cls(clauses=list(clauses), num_input=len(clauses))

    @property
    def input_clauses(self):
        return self.clauses[:self.num_input]

    def to_dict(self):
        def serialize_term(t):
            kind = "var" if isinstance(t, Variable) else "const"
            return {kind: t.name}

        def serialize_literal(lit):
            return {"name": lit.name,
                    "args": [serialize_term(a) for a in lit.args],
                    "negated": lit.negated}

        def serialize_clause(clause):
            return [serialize_literal(lit) for lit in clause.literals]

        def serialize_step(step):
            return {
                "resolvent": serialize_clause(step.resolvent),
                "parents": list(step.parents),
                "literals": [serialize_literal(lit) for lit in step.literals],
                "substitution": [[var.name, serialize_term(t)]
                                 for var, t in step.substitution.items()],
            }

        return {
            "clauses": [serialize_clause(c) for c in self.clauses],
            "derivation": [serialize_step(s) for s in self.derivation],
            "checked_pairs": sorted(list(p) for p in self.checked_pairs),
            "num_input": self.num_input,
            "passes": self.passes,
            "halted": self.halted,
            "halt_reason": self.halt_reason,
        }

    @classmethod
    def from_dict(cls, d):
        def deserialize_term(t):
            if "var" in t:
                return Variable(t["var"])
            return Constant(t["const"])

        def deserialize_literal(data):
            return Literal(data["name"],
                           tuple(deserialize_term(a) for a in data["args"]),
                           data.get("negated", False))

        def deserialize_clause(data):
            return Clause(tuple(deserialize_literal(lit) for lit in data))

        def deserialize_step(data):
            return DerivationStep(
                resolvent=deserialize_clause(data["resolvent"]),
                parents=tuple(data["parents"]),
                literals=tuple(deserialize_literal(lit) for lit in data["literals"]),
                substitution={Variable(name): deserialize_term(t)
                              for name, t in data["substitution"]},
            )

        state = cls()
        state.clauses = [deserialize_clause(c) for c in d["clauses"]]
        state.derivation = [deserialize_step(s) for s in d["derivation"]]
        state.checked_pairs = {tuple(p) for p in d.get("checked_pairs", [])}
        state.num_input = d["num_input"]
        state.passes = d.get("passes", 0)
        state.halted = d.get("halted", False)
        state.halt_reason = d.get("halt_reason", "")
        return state

    def save(self, path="refute_state.json"):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path="refute_state.json"):
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

