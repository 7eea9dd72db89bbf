"""
Parse tree nodes, linked both ways.  A node is labelled with the name of
the state that built it and may carry the content handed over by the
Accept or Closure that finished it.
"""

from __future__ import annotations
from typing import Iterator, List, Set, Tuple

from mypy_extensions import mypyc_attr


@mypyc_attr(allow_interpreted_subclasses=True)
class ParseTreeNode:
    def __init__(self, name: str, content: str | None = None) -> None:
        self.name = name
        self.content = content
        self.parent: ParseTreeNode | None = None
        self._children: List[ParseTreeNode] = []
        # Nodes do not define __eq__, so this is an identity set.
        self._members: Set[ParseTreeNode] = set()

    def __repr__(self) -> str:
        return "ParseTreeNode(%r, %r)" % (self.name, self.content)

    def __str__(self) -> str:
        if self.content is not None:
            return "%s : %s" % (self.name, self.content)
        return self.name

    def __iter__(self) -> Iterator[ParseTreeNode]:
        return iter(self._children)

    @property
    def children(self) -> Tuple[ParseTreeNode, ...]:
        return tuple(self._children)

    def child_at(self, index: int) -> ParseTreeNode:
        return self._children[index]

    def child_count(self) -> int:
        return len(self._children)

    def index(self, node: ParseTreeNode) -> int:
        """Position of node among our children, or -1."""
        if node not in self._members:
            return -1
        for i, child in enumerate(self._children):
            if child is node:
                return i
        return -1

    def is_leaf(self) -> bool:
        return len(self._children) == 0

    def add_child(self, node: ParseTreeNode) -> None:
        """Append node and make us its parent."""
        node.parent = self
        self._children.append(node)
        self._members.add(node)

    def has_child(self, node: ParseTreeNode) -> bool:
        return node in self._members

    def remove_child(self, node: ParseTreeNode) -> None:
        i = self.index(node)
        if i == -1:
            return
        del self._children[i]
        if all(child is not node for child in self._children):
            self._members.discard(node)

    def copy(self) -> ParseTreeNode:
        """
        Copy the subtree rooted at this node.  The children are copied
        and hooked up to the copy, but the copy keeps pointing at our
        parent, which does not list it as a child; whoever makes the copy
        decides where it belongs."""
        out = ParseTreeNode(self.name, self.content)
        out.parent = self.parent
        stack = [(self, out)]
        while len(stack) > 0:
            node, twin = stack.pop()
            for child in node._children:
                childTwin = ParseTreeNode(child.name, child.content)
                twin.add_child(childTwin)
                stack.append((child, childTwin))
        return out

    def debug_info(self) -> str:
        """The chain of names from the root down to this node."""
        names = [self.name]
        parent = self.parent
        while parent is not None:
            names.append(parent.name)
            parent = parent.parent
        return " -> ".join(reversed(names))


class ParseTree:
    """
    Read-only handle on a finished parse tree, as returned by
    Machine.parse().
    """

    def __init__(self, root: ParseTreeNode) -> None:
        self._root = root

    def __repr__(self) -> str:
        return "ParseTree(%r)" % self._root

    def __str__(self) -> str:
        return self.dump()

    @property
    def root(self) -> ParseTreeNode:
        return self._root

    def walk(self) -> Iterator[Tuple[int, ParseTreeNode]]:
        """Pre-order traversal yielding (depth, node) pairs."""
        stack = [(0, self._root)]
        while len(stack) > 0:
            depth, node = stack.pop()
            yield depth, node
            for child in reversed(node.children):
                stack.append((depth + 1, child))

    def dump(self, indent: str = "  ") -> str:
        lines = []
        for depth, node in self.walk():
            lines.append("%s%s" % (indent * depth, node))
        return "\n".join(lines)

    def copy(self) -> ParseTree:
        root = self._root.copy()
        root.parent = None
        return ParseTree(root)
