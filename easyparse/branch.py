"""
A Branch is one live hypothesis of the parse: the stack of states that
are currently entered, and the tree those states have built so far.

Branches created by a split share the nodes above their split point with
their siblings.  Every branch only ever mutates nodes it created itself;
when it finishes a node whose parent is shared, it continues in a private
copy of that parent in which its own node stands in for the original.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List

from easyparse.directives import (
    Directive,
    Consume,
    Accept,
    Closure,
    Goto,
    Guess,
    Split,
    Fail,
)
from easyparse.errors import StateError
from easyparse.interfaces import EOF, State
from easyparse.states import clone_state
from easyparse.tree import ParseTreeNode


class Branch:
    """
    Builds the parse tree for a single chain of states.  The Machine owns
    the state stack policy (which state is pushed or popped for which
    directive); the branch keeps the tree in step with it.
    """

    def __init__(
        self,
        ids: Iterator[int],
        name: str,
        anchor: ParseTreeNode | None = None,
    ) -> None:
        self._ids = ids
        self.id = next(ids)
        self._stack: List[State] = []

        # Nodes private to this branch that replace a node shared with
        # sibling branches, mapped to the node they replace.
        self._standsFor: Dict[ParseTreeNode, ParseTreeNode] = {}

        node = ParseTreeNode(name)
        if anchor is None:
            self._anchor = node
        else:
            self._anchor = anchor
            anchor.add_child(node)
        self._cursor: ParseTreeNode | None = node

    def __repr__(self) -> str:
        return "<Branch %d: %s>" % (self.id, self.cursor_info())

    # ------------------------------------------------------------------------
    # State stack.

    @property
    def state(self) -> State | None:
        """The state that receives the next character."""
        if len(self._stack) == 0:
            return None
        return self._stack[-1]

    def set_state(self, state: State) -> None:
        if len(self._stack) == 0:
            self._stack.append(state)
        else:
            self._stack[-1] = state

    @property
    def depth(self) -> int:
        return len(self._stack)

    def push(self, state: State) -> None:
        self._stack.append(state)

    def pop(self) -> State | None:
        """Leave the current state; returns the state re-entered."""
        if len(self._stack) > 0:
            self._stack.pop()
        return self.state

    def inherit(self, other: Branch) -> None:
        """Take over a copy of the state stack of the branch we split from."""
        self._stack = [clone_state(state) for state in other._stack]

    def drop(self) -> None:
        self._stack = []

    # ------------------------------------------------------------------------
    # Tree.

    @property
    def cursor(self) -> ParseTreeNode | None:
        return self._cursor

    def cursor_name(self) -> str | None:
        if self._cursor is None:
            return None
        return self._cursor.name

    def parent_name(self) -> str | None:
        if self._cursor is None or self._cursor.parent is None:
            return None
        return self._cursor.parent.name

    def cursor_info(self) -> str:
        if self._cursor is None:
            return "$EPM_NO_STATE"
        return self._cursor.debug_info()

    def subtree_root(self) -> ParseTreeNode:
        """The topmost node this branch owns."""
        return self._anchor

    def real_root(self) -> ParseTreeNode:
        """
        The root of the whole tree as this branch sees it.  Shared
        ancestors are replaced by private copies on the way up, so the
        tree returned contains this branch's work and nobody else's."""
        node = self._anchor
        while node.parent is not None:
            parent = node.parent
            if not parent.has_child(node):
                parent = self._graft(parent, node)
                self._anchor = parent
            node = parent
        return node

    def feed(self, c: int) -> Directive:
        """
        Hand c to the current state and update the tree according to the
        directive it answers with."""
        state = self.state
        if state is None:
            # The tree is complete; only the end of input may follow.
            if c == EOF:
                return Consume()
            return Fail()

        directive = state.feed(c)
        if isinstance(directive, (Accept, Closure)):
            self._finish(directive.content)
            state.reset()
        elif isinstance(directive, Goto):
            self._descend(directive.nextState)
        elif isinstance(directive, Fail):
            state.reset()
        elif not isinstance(directive, (Consume, Guess, Split)):
            raise StateError(
                "%s.feed() returned %r, which is not a directive"
                % (type(state).__name__, directive)
            )
        return directive

    def split(self, names: Iterable[str]) -> List[Branch]:
        """
        Create one branch per name.  Each gets a copy of the subtree under
        construction, with a new child labelled name as its cursor.  The
        state stacks are left empty."""
        cursor = self._cursor
        out: List[Branch] = []
        if cursor is None:
            return out
        for name in names:
            anchor = cursor.copy()
            branch = Branch(self._ids, name, anchor)
            branch._standsFor = dict(self._standsFor)
            branch._standsFor[anchor] = cursor
            out.append(branch)
        return out

    def _descend(self, name: str) -> None:
        assert self._cursor is not None
        child = ParseTreeNode(name)
        self._cursor.add_child(child)
        self._cursor = child

    def _finish(self, content: str | None) -> None:
        node = self._cursor
        assert node is not None
        node.content = content
        parent = node.parent
        if parent is not None and not parent.has_child(node):
            if node in self._standsFor:
                parent = self._graft(parent, node)
                self._anchor = parent
            else:
                parent.add_child(node)
        self._cursor = parent

    # Build a private copy of the shared node parent, in which node takes
    # the place of the original it was copied from.
    def _graft(
        self, parent: ParseTreeNode, node: ParseTreeNode
    ) -> ParseTreeNode:
        # The nodes passed on the way to the stale child have been
        # superseded by node and are never looked up again.
        stale: ParseTreeNode | None = node
        while stale is not None and not parent.has_child(stale):
            stale = self._standsFor.pop(stale, None)

        twin = ParseTreeNode(parent.name, parent.content)
        twin.parent = parent.parent
        for child in parent:
            if child is stale:
                twin.add_child(node)
            else:
                twin.add_child(child.copy())
        if stale is None:
            twin.add_child(node)
        self._standsFor[twin] = parent
        return twin
