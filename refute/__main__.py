"""
CLI entry point. Run as: python -m refute --clauses "<clause set>"
"""

import argparse
import os
import sys

from .core.state import ProofState
from .core.parser import ParseError, parse_clause_set
from .core.engine import run_resolution
from .core.proof import format_report
from .visualization import print_state, export_dot
from .domains import DOMAINS
from .domains.llm import DEFAULT_MODEL, make_formalizer, make_explainer


def read_clauses(args):
    """Pick the clause-set string from whichever source was given."""
    if args.clauses:
        return args.clauses
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    if args.problem:
        api_key = os.environ.get("ANTHROPIC_API_KEY")
        formalize = make_formalizer(api_key, model=args.model)
        clauses = formalize(args.problem)
        print(f"Formalized: {clauses}")
        return clauses
    return DOMAINS[args.domain]["clauses"]


def main(argv=None):
    parser = argparse.ArgumentParser(description="First-order resolution prover")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--clauses", type=str, default=None,
                        help="Clause set, e.g. \"P(a), ¬P(x) V Q(x), ¬Q(a)\"")
    source.add_argument("--file", type=str, default=None,
                        help="Read the clause set from a file")
    source.add_argument("--problem", type=str, default=None,
                        help="Natural-language problem to formalize first (needs ANTHROPIC_API_KEY)")
    source.add_argument("--domain", choices=list(DOMAINS.keys()), default="socrates",
                        help="Sample problem to run when no clauses are given")
    parser.add_argument("--full-log", action="store_true",
                        help="Show the full derivation before the short one")
    parser.add_argument("--max-passes", type=int, default=100,
                        help="Safety limit on resolution passes (0 = unlimited)")
    parser.add_argument("--save",  type=str, default=None, help="Save the run as JSON")
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--explain", action="store_true",
                        help="Explain the report in natural language (needs ANTHROPIC_API_KEY)")
    parser.add_argument("--model", type=str, default=DEFAULT_MODEL,
                        help="Model used by --problem and --explain")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args(argv)

    if (args.problem or args.explain) and not os.environ.get("ANTHROPIC_API_KEY"):
        print("ANTHROPIC_API_KEY is not set", file=sys.stderr)
        return 1

    try:
        text = read_clauses(args)
    except ImportError:
        print("pip install anthropic", file=sys.stderr)
        return 1

    try:
        state = ProofState.from_clauses(parse_clause_set(text))
    except ParseError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 2

    max_passes = args.max_passes or None
    state = run_resolution(state, max_passes=max_passes, verbose=not args.quiet)

    if not args.quiet:
        print_state(state)

    report = format_report(state, full_log=args.full_log)
    print()
    print(report)

    if args.dot:
        export_dot(state, args.dot)

    if args.save:
        state.save(args.save)
        print(f"State saved to {args.save}")

    if args.explain:
        explain = make_explainer(os.environ.get("ANTHROPIC_API_KEY"), model=args.model)
        try:
            explanation = explain(report)
        except ImportError:
            print("pip install anthropic", file=sys.stderr)
            return 1
        print(f"\n{'='*60}")
        print(explanation)

    return 0


if __name__ == "__main__":
    sys.exit(main())
