"""Immutable trie model walked by the simulation engine.

The model mirrors the shape of a Merkle Patricia Trie without computing any
hashes: branch and extension nodes carry children, leaf and hash nodes carry
a value. Trees are built once and only ever read afterwards.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from triewalk.exceptions import InvalidTrieError, NodeNotFoundError

logger = logging.getLogger(__name__)


class NodeKind(str, Enum):
    """Kinds of trie nodes."""

    BRANCH = "branch"
    EXTENSION = "extension"
    LEAF = "leaf"
    HASH = "hash"

    @property
    def is_terminal(self) -> bool:
        """Whether nodes of this kind carry a value instead of children."""
        return self in (NodeKind.LEAF, NodeKind.HASH)


class TrieNode(BaseModel):
    """A single node of the simulated trie.

    Attributes:
        id: Unique identifier within the tree
        kind: Node kind (accepts ``kind`` or ``type`` on input)
        path: Nibble prefix represented by the node
        value: Payload of leaf and hash nodes
        children: Ordered children of branch and extension nodes
        in_database: Whether storage already holds the node; nodes that are
            not stored yet are written instead of read when walked
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: NodeKind = Field(validation_alias=AliasChoices("kind", "type"))
    path: str = ""
    value: Optional[str] = None
    children: Optional[Tuple["TrieNode", ...]] = None
    in_database: bool = Field(
        default=True, validation_alias=AliasChoices("in_database", "inDatabase")
    )

    @model_validator(mode="after")
    def _check_payload(self) -> "TrieNode":
        if self.kind.is_terminal:
            if self.children is not None:
                raise ValueError(f"{self.kind.value} node '{self.id}' cannot have children")
            if self.value is None:
                raise ValueError(f"{self.kind.value} node '{self.id}' requires a value")
        else:
            if self.value is not None:
                raise ValueError(f"{self.kind.value} node '{self.id}' cannot have a value")
            if self.children is None:
                raise ValueError(f"{self.kind.value} node '{self.id}' requires children")
        return self

    def export(self) -> Dict[str, Any]:
        """Export the node and its subtree as a nested dictionary."""
        return self.model_dump(mode="json", exclude_none=True)


def find_node(root: TrieNode, node_id: str) -> Optional[TrieNode]:
    """Depth-first search for ``node_id`` below (and including) ``root``.

    Returns:
        The matching node, or None if no node carries that id
    """
    pending: List[TrieNode] = [root]
    while pending:
        node = pending.pop()
        if node.id == node_id:
            return node
        if node.children:
            pending.extend(reversed(node.children))
    return None


class TrieModel:
    """Read-only trie walked by :class:`triewalk.TrieWalker`.

    Node ids are validated for uniqueness once, at construction time.
    """

    def __init__(self, root: TrieNode) -> None:
        """Initialize the model.

        Args:
            root: Root node of a fully materialized tree

        Raises:
            InvalidTrieError: If two nodes share the same id
        """
        self._root = root
        seen: set = set()
        for node in self.iter_nodes():
            if node.id in seen:
                raise InvalidTrieError(
                    f"Duplicate node id '{node.id}'", {"node_id": node.id}
                )
            seen.add(node.id)
        self._size = len(seen)
        logger.debug(f"Built trie model with {self._size} nodes")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrieModel":
        """Build a model from a nested mapping.

        Each mapping needs ``id`` and ``type`` (or ``kind``); ``path``,
        ``value`` and ``children`` follow the :class:`TrieNode` fields.
        """
        return cls(TrieNode.model_validate(data))

    @property
    def root(self) -> TrieNode:
        """Root node of the tree."""
        return self._root

    def lookup(self, node_id: str) -> Optional[TrieNode]:
        """Find a node by id, returning None for unknown ids."""
        return find_node(self._root, node_id)

    def get(self, node_id: str) -> TrieNode:
        """Find a node by id.

        Raises:
            NodeNotFoundError: If the id is not part of this tree
        """
        node = self.lookup(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def iter_nodes(self) -> Iterator[TrieNode]:
        """Yield every node in pre-order, children left to right."""
        pending: List[TrieNode] = [self._root]
        while pending:
            node = pending.pop()
            yield node
            if node.children:
                pending.extend(reversed(node.children))

    def export(self) -> Dict[str, Any]:
        """Export the whole tree as a nested dictionary."""
        return self._root.export()

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and self.lookup(node_id) is not None

    def __len__(self) -> int:
        return self._size


def sample_trie() -> TrieModel:
    """Build the demonstration trie.

    Layout::

        root (branch)
        ├── n1 extension "a7"
        │   └── n11 branch "a7"
        │       ├── n111 leaf "a7f3"
        │       └── n112 leaf "a7b2"
        ├── n2 branch "b"
        │   ├── n21 hash "b5"
        │   └── n22 extension "b8"
        │       └── n221 leaf "b8c1"
        └── n3 hash "c"
    """
    return TrieModel.from_dict(
        {
            "id": "root",
            "type": "branch",
            "path": "",
            "children": [
                {
                    "id": "n1",
                    "type": "extension",
                    "path": "a7",
                    "children": [
                        {
                            "id": "n11",
                            "type": "branch",
                            "path": "a7",
                            "children": [
                                {
                                    "id": "n111",
                                    "type": "leaf",
                                    "path": "a7f3",
                                    "value": "account_data_1",
                                },
                                {
                                    "id": "n112",
                                    "type": "leaf",
                                    "path": "a7b2",
                                    "value": "account_data_2",
                                },
                            ],
                        }
                    ],
                },
                {
                    "id": "n2",
                    "type": "branch",
                    "path": "b",
                    "children": [
                        {
                            "id": "n21",
                            "type": "hash",
                            "path": "b5",
                            "value": "0x4444...dddd",
                        },
                        {
                            "id": "n22",
                            "type": "extension",
                            "path": "b8",
                            "children": [
                                {
                                    "id": "n221",
                                    "type": "leaf",
                                    "path": "b8c1",
                                    "value": "account_data_3",
                                }
                            ],
                        },
                    ],
                },
                {
                    "id": "n3",
                    "type": "hash",
                    "path": "c",
                    "value": "0x7777...gggg",
                },
            ],
        }
    )
