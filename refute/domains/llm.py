"""
Domain: LLM collaborators.

Uses the Claude API on both sides of the prover:
    formalizer -- natural-language problem -> clause-set string
    explainer  -- proof report -> natural-language explanation

The prover itself never imports this module; the only contract is the
clause-set grammar going in and the report text coming out.

Requires: pip install anthropic
          ANTHROPIC_API_KEY environment variable
"""

DEFAULT_MODEL = "claude-sonnet-4-20250514"

FORMALIZER_PROMPT = """You are an expert assistant in formal logic.

Convert the following problem into a set of predicate-logic clauses ready
for the resolution method. Include the NEGATION of the statement to be
proved. Output ONLY the clauses, separated by commas. Write negation as ¬,
disjunction as " V ", and use only the letters x, y, z, u, v, w for
variables.

Example problem: "Socrates is a man. All men are mortal. Prove that
Socrates is mortal."
Example output: Человек(Сократ), ¬Человек(x) V Смертен(x), ¬Смертен(Сократ)

Problem:
{problem}"""

EXPLAINER_PROMPT = """You are a logic teacher.

Below is a resolution proof produced by an automatic prover: the numbered
input clauses, the derivation steps (parents, resolved literals, unifier),
and the verdict. Explain the proof to a student, step by step, clearly and
in the same natural language as the clauses.

{report}"""


def strip_fence(text: str) -> str:
    """Remove a surrounding ```lang ... ``` fence, language tag included."""
    text = text.strip()
    if not text.startswith("```"):
        return text
    body = text[3:]
    if body.endswith("```"):
        body = body[:-3]
    first, newline, rest = body.partition("\n")
    if newline and rest.strip() and (not first.strip() or first.strip().isidentifier()):
        body = rest
    return body.strip()


def _complete(client, model, prompt, max_tokens):
    response = client.messages.create(
        model=model,
        max_tokens=max_tokens,
        messages=[{"role": "user", "content": prompt}],
    )
    return response.content[0].text.strip()


def make_client(api_key=None):
    import anthropic
    return anthropic.Anthropic(api_key=api_key)


def make_formalizer(api_key=None, model=DEFAULT_MODEL, client=None):
    """
    Returns formalize(problem_text) -> clause-set string.

    client may be any object with an anthropic-style messages.create();
    by default one is built from api_key.
    """
    def formalize(problem_text: str) -> str:
        nonlocal client
        if client is None:
            client = make_client(api_key)
        text = _complete(client, model,
                         FORMALIZER_PROMPT.format(problem=problem_text), 500)
        return strip_fence(text)

    return formalize


def make_explainer(api_key=None, model=DEFAULT_MODEL, client=None):
    """Returns explain(report) -> natural-language explanation."""
    def explain(report: str) -> str:
        nonlocal client
        if client is None:
            client = make_client(api_key)
        return _complete(client, model, EXPLAINER_PROMPT.format(report=report), 1500)

    return explain
