"""
Emission order for struct definitions.

Structs are emitted dependencies first: a depth-first post-order walk from the
root struct, following field references to other structs. Structs the walk
never reaches keep a stable, sorted position after the reachable ones.
"""

from __future__ import annotations

from .ir_nodes import StructDef


def emission_order(structs: dict[str, StructDef], root_name: str) -> list[str]:
    """
    Order struct names so every struct follows the structs it references.

    Args:
        structs: Collected structs keyed by name
        root_name: Name of the root struct (may be absent from ``structs``)

    Returns:
        Every struct name exactly once
    """
    order: list[str] = []
    visited: set[str] = set()

    def visit(name: str) -> None:
        if name in visited or name not in structs:
            return
        visited.add(name)
        for field in structs[name].fields:
            if field.references is not None:
                visit(field.references)
        order.append(name)

    visit(root_name)
    for name in sorted(structs):
        visit(name)
    return order
