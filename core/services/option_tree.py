"""
Option Tree

Product options are stored flat (one row per option with ``parent_id``)
and held in memory as an arena: nodes indexed by id, parent->children
links kept as id lists. Nested Option models are produced only at the
edges (API input and detail responses).
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from core.errors import InvalidOptionTreeError
from core.services.models import Option


@dataclass
class OptionNode:
    """Single option in the arena."""
    id: int
    name: str
    price: Optional[int] = None
    parent_id: Optional[int] = None
    position: int = 0
    children: list[int] = field(default_factory=list)


class OptionTree:
    """Acyclic forest of options indexed by id.

    Construct through from_rows() or from_options(); both reject trees
    that reference unknown parents, repeat ids or contain cycles.
    """

    def __init__(self, nodes: dict[int, OptionNode], roots: list[int]):
        self._nodes = nodes
        self._roots = roots

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def roots(self) -> list[int]:
        return list(self._roots)

    def children(self, option_id: int) -> list[OptionNode]:
        return [self._nodes[c] for c in self._nodes[option_id].children]

    @classmethod
    def from_rows(cls, rows: Iterable[dict[str, Any]]) -> "OptionTree":
        """Build from option rows (id, name, price, parent_id, position)."""
        nodes: dict[int, OptionNode] = {}
        for row in rows:
            node = OptionNode(
                id=row["id"],
                name=row["name"],
                price=row.get("price"),
                parent_id=row.get("parent_id"),
                position=row.get("position") or 0,
            )
            if node.id in nodes:
                raise InvalidOptionTreeError(f"duplicate option id {node.id}")
            nodes[node.id] = node

        roots: list[int] = []
        for node in sorted(nodes.values(), key=lambda n: (n.position, n.id)):
            if node.parent_id is None:
                roots.append(node.id)
            elif node.parent_id in nodes:
                nodes[node.parent_id].children.append(node.id)
            else:
                raise InvalidOptionTreeError(
                    f"option {node.id} references missing parent {node.parent_id}"
                )

        tree = cls(nodes, roots)
        tree._check_acyclic()
        return tree

    @classmethod
    def from_options(cls, options: Iterable[Option]) -> "OptionTree":
        """Build from nested Option models, assigning local ids in preorder.

        Ids already present on the models are ignored; the database assigns
        the real ones when the aggregate is saved.
        """
        nodes: dict[int, OptionNode] = {}
        roots: list[int] = []

        def visit(option: Option, parent_id: Optional[int], position: int) -> int:
            node_id = len(nodes) + 1
            nodes[node_id] = OptionNode(
                id=node_id,
                name=option.name,
                price=option.price,
                parent_id=parent_id,
                position=position,
            )
            for child_position, child in enumerate(option.children):
                nodes[node_id].children.append(visit(child, node_id, child_position))
            return node_id

        for position, option in enumerate(options):
            roots.append(visit(option, None, position))
        return cls(nodes, roots)

    def _check_acyclic(self) -> None:
        # Every node has at most one parent, so any node not reachable
        # from a root sits on a cycle.
        seen: set[int] = set()
        stack = list(self._roots)
        while stack:
            node_id = stack.pop()
            if node_id in seen:
                raise InvalidOptionTreeError(f"option {node_id} reached twice")
            seen.add(node_id)
            stack.extend(self._nodes[node_id].children)
        if len(seen) != len(self._nodes):
            cyclic = sorted(set(self._nodes) - seen)
            raise InvalidOptionTreeError(f"cycle through options {cyclic}")

    def to_options(self) -> list[Option]:
        """Nested Option models, children in position order."""

        def build(node_id: int) -> Option:
            node = self._nodes[node_id]
            return Option(
                id=node.id,
                name=node.name,
                price=node.price,
                children=[build(c) for c in node.children],
            )

        return [build(r) for r in self._roots]

    def to_rows(self) -> list[dict[str, Any]]:
        """Flat rows in preorder, parents always before their children.

        ``ref``/``parent_ref`` are local ids; create_product() in the
        database maps them to the generated primary keys.
        """
        rows: list[dict[str, Any]] = []
        stack = list(reversed(self._roots))
        while stack:
            node = self._nodes[stack.pop()]
            rows.append({
                "ref": node.id,
                "parent_ref": node.parent_id,
                "name": node.name,
                "price": node.price,
                "position": node.position,
            })
            stack.extend(reversed(node.children))
        return rows
