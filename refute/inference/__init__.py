from .resolve import resolve, is_tautology, dedupe_literals, same_clause

__all__ = [
    "resolve", "is_tautology", "dedupe_literals", "same_clause",
]
