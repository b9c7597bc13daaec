"""
Clause-set parser.

Input grammar (one string):

    clause-set := clause ("," clause)*
    clause     := literal ("V" literal)*
    literal    := ["¬"] Name ["(" arg ("," arg)* ")"]

    Человек(Сократ), ¬Человек(x) V Смертен(x), ¬Смертен(Сократ)

Commas and V's inside an argument list never split anything: the
splitter tracks parenthesis depth and only cuts at depth 0.
"""

import re

from .state import Clause, Literal, make_term


NEGATION_MARKS = ("¬", "~")
OR_MARK = "V"
OR_SYMBOL = "∨"

_LITERAL_RE = re.compile(r"^([^()\s,]+)\s*(?:\((.*)\))?$", re.DOTALL)


class ParseError(ValueError):
    """Malformed clause-set text. fragment is the offending substring."""

    def __init__(self, message, fragment=""):
        super().__init__(f"{message}: {fragment!r}" if fragment else message)
        self.fragment = fragment


def _check_depth(depth, text):
    if depth < 0:
        raise ParseError("unbalanced ')'", text.strip())


def split_clauses(text: str) -> list:
    """Split on top-level commas."""
    parts = []
    depth = 0
    current = ""
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            _check_depth(depth, current + ch)
        elif ch == "," and depth == 0:
            parts.append(current.strip())
            current = ""
            continue
        current += ch
    if depth != 0:
        raise ParseError("unbalanced '('", current.strip() or text.strip())
    parts.append(current.strip())
    return parts


def _is_or_mark(clause_text, i, current):
    """
    A V separates literals only when it stands alone: after whitespace or a
    closing parenthesis, before whitespace or a negation mark, and only once
    the current literal has text. Any other V belongs to a name, so
    P(a)Victory(b) stays one malformed literal instead of splitting.
    """
    if clause_text[i] == OR_SYMBOL:
        return True
    if clause_text[i] != OR_MARK or not current.strip():
        return False
    prev = clause_text[i - 1]
    nxt = clause_text[i + 1] if i + 1 < len(clause_text) else " "
    return (prev.isspace() or prev == ")") and (nxt.isspace() or nxt in NEGATION_MARKS)


def split_literals(clause_text: str) -> list:
    """Split a clause on top-level V (or ∨) separators."""
    parts = []
    depth = 0
    current = ""
    for i, ch in enumerate(clause_text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            _check_depth(depth, current + ch)
        elif depth == 0 and _is_or_mark(clause_text, i, current):
            parts.append(current.strip())
            current = ""
            continue
        current += ch
    if depth != 0:
        raise ParseError("unbalanced '('", current.strip() or clause_text.strip())
    parts.append(current.strip())
    return parts


def parse_literal(text: str) -> Literal:
    s = text.strip()
    negated = False
    while s and s[0] in NEGATION_MARKS:
        negated = not negated
        s = s[1:].strip()
    if not s:
        raise ParseError("empty literal", text.strip())

    match = _LITERAL_RE.match(s)
    if not match:
        raise ParseError("cannot parse literal", text.strip())
    name, args_text = match.group(1), match.group(2)

    args = ()
    if args_text is not None and args_text.strip():
        tokens = [a.strip() for a in args_text.split(",")]
        for token in tokens:
            if not token:
                raise ParseError("empty argument in literal", text.strip())
            if "(" in token or ")" in token:
                raise ParseError("nested terms are not supported", text.strip())
        args = tuple(make_term(t) for t in tokens)
    return Literal(name, args, negated)


def parse_clause(text: str) -> Clause:
    if not text.strip():
        raise ParseError("empty clause", text)
    return Clause(tuple(parse_literal(part) for part in split_literals(text)))


def parse_clause_set(text: str) -> list:
    """Parse a whole clause-set string into a list of Clause objects."""
    if not text or not text.strip():
        raise ParseError("no clauses given")
    return [parse_clause(part) for part in split_clauses(text)]
