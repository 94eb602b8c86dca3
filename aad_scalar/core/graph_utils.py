"""
Graph utilities.
Walk, print and summarize the expression graph below a root node.
"""

from typing import Dict, Iterator, List
from collections import Counter

from .backward import Backward
from .var import Var


def _key(node: Backward) -> int:
    # Aliased leaf handles share a cell and count as one variable
    return id(node.cell) if isinstance(node, Var) else id(node)


def iter_nodes(root: Backward) -> Iterator[Backward]:
    """
    Yield every distinct node reachable from root, depth-first, root first.

    Iterative, so very deep expressions do not hit the recursion limit.
    """
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        k = _key(node)
        if k in seen:
            continue
        seen.add(k)
        yield node
        if not isinstance(node, Var):
            stack.append(node.right)
            stack.append(node.left)


def leaves(root: Backward) -> List[Var]:
    """Distinct leaf variables reachable from root, in first-visit order."""
    return [n for n in iter_nodes(root) if isinstance(n, Var)]


def graph_summary(root: Backward, detailed: bool = False) -> Dict:
    """
    Print a summary of the expression graph below root.

    Args:
        root: output node of the expression
        detailed: also print one line per node (graphs of up to 100 nodes)

    Returns:
        dict with 'nodes', 'edges', 'leaves' and 'ops' (op_tag -> count)
    """
    nodes = list(iter_nodes(root))
    n_nodes = len(nodes)
    composites = [n for n in nodes if not isinstance(n, Var)]
    n_leaves = n_nodes - len(composites)
    # Every composite has exactly two operand edges, aliased or not
    n_edges = 2 * len(composites)
    op_counter = Counter(n.op_tag for n in composites)

    print("\n" + "="*70)
    print("EXPRESSION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {n_edges:,}")
    print(f"Leaf variables:     {n_leaves:,}")
    print(f"Root value:         {float(root.value())!r}")
    print(f"Root grad:          {float(root.grad())!r}")
    print()
    print("Operation breakdown:")
    for op_type, count in op_counter.most_common():
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        index = {_key(n): i for i, n in enumerate(nodes)}
        for i, node in enumerate(nodes):
            if isinstance(node, Var):
                print(f"Node {i:3d}: {'leaf':12s} {node!r}")
            else:
                operands = f"Node{index[_key(node.left)]}, Node{index[_key(node.right)]}"
                print(f"Node {i:3d}: {node.op_tag:12s} <- [{operands}]")

    print("="*70 + "\n")

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': n_leaves,
        'ops': dict(op_counter),
    }
