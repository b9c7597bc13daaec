"""
Visualization and reporting utilities.
"""

from .core.state import ProofState


def print_state(state: ProofState):
    """Print a summary of the clause set S."""
    print(f"\n{'='*60}")
    print(f"Passes: {state.passes}")
    print(f"Clauses ({len(state.clauses)}, {state.num_input} input):")
    for i, clause in enumerate(state.clauses):
        rel = i - state.num_input
        src = ""
        if 0 <= rel < len(state.derivation):
            p1, p2 = state.derivation[rel].parents
            src = f" (from {p1} + {p2})"
        print(f"  {i + 1}. {clause.name}{src}")
    if state.halted:
        print(f"Halted: {state.halt_reason}")
    print(f"{'='*60}")


def export_dot(state: ProofState, path="refute_graph.dot"):
    """Export the derivation graph as a DOT file for Graphviz visualization."""
    with open(path, "w", encoding="utf-8") as f:
        f.write("digraph refute {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")

        for i, clause in enumerate(state.clauses):
            label = f"{i + 1}. {clause.name}".replace('"', '\\"')
            color = "lightgray" if i < state.num_input else "lightblue"
            if clause.is_empty:
                color = "salmon"
            f.write(f'  c{i + 1} [label="{label}", fillcolor={color}, style=filled];\n')

        for rel, step in enumerate(state.derivation):
            child = state.num_input + rel + 1
            for parent in step.parents:
                f.write(f"  c{parent} -> c{child};\n")
        f.write("}\n")
    print(f"Graph exported to {path}")
