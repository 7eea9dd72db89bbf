"""
State-change directives.  A State answers every character it is fed with
exactly one of these values, and the Machine acts on it:

  Consume : The character is used up; stay in the current state.

   Accept : Finish the current node (optionally with content), return to
            the parent state and feed it the same character again.

  Closure : Like Accept, but the character is used up.

     Goto : Descend into a new child node driven by the named state, which
            receives the same character.

    Guess : Split the branch, one new branch per named state; each of them
            receives the same character.

    Split : Like Guess, but the character is used up; the new branches
            start with the next character.

     Fail : This branch of the parse dies.

A Guess or Split without any names yields no successors and therefore
behaves like Fail.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Tuple


class Directive:
    """
    Abstract base class of all directives.  The set of subclasses below is
    closed: the Machine only knows how to act on these seven."""

    __slots__ = ()

    # Whether the character that produced this directive is used up.
    consumes = True
    label = "DIRECTIVE"

    def __init__(self) -> None:
        pass

    def __repr__(self) -> str:
        return "%s()" % self.label

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Directive):
            return NotImplemented
        return self.label == other.label and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.label, self._key()))

    def _key(self) -> Tuple[Any, ...]:
        return ()


class Consume(Directive):
    """
    Use up the character, remain in the current state."""

    __slots__ = ()

    label = "CONSUME"


class Fail(Directive):
    """
    Kill the branch that produced this directive."""

    __slots__ = ()

    label = "FAIL"


class _Finish(Directive):
    __slots__ = ("content",)

    def __init__(self, content: str | None = None) -> None:
        super().__init__()
        self.content = content

    def __repr__(self) -> str:
        if self.content is None:
            return "%s()" % self.label
        return "%s(%r)" % (self.label, self.content)

    def _key(self) -> Tuple[Any, ...]:
        return (self.content,)


class Accept(_Finish):
    """
    Finish the current node with optional content; the character is handed
    back to the parent state."""

    __slots__ = ()

    consumes = False
    label = "ACCEPT"


class Closure(_Finish):
    """
    Finish the current node with optional content; the character is used
    up."""

    __slots__ = ()

    label = "CLOSURE"


class Goto(Directive):
    """
    Enter the state registered under nextState; the character is handed to
    it."""

    __slots__ = ("nextState",)

    consumes = False
    label = "GOTO"

    def __init__(self, nextState: str) -> None:
        super().__init__()
        self.nextState = nextState

    def __repr__(self) -> str:
        return "%s %s" % (self.label, self.nextState)

    def _key(self) -> Tuple[Any, ...]:
        return (self.nextState,)


class _Branching(Directive):
    __slots__ = ("nextStates",)

    def __init__(self, *nextStates: str | Iterable[str]) -> None:
        super().__init__()
        names: List[str] = []
        for elm in nextStates:
            if isinstance(elm, str):
                names.append(elm)
            else:
                names.extend(elm)
        self.nextStates: Tuple[str, ...] = tuple(names)

    def __repr__(self) -> str:
        return "%s [%s]" % (self.label, ", ".join(self.nextStates))

    def _key(self) -> Tuple[Any, ...]:
        return self.nextStates


class Guess(_Branching):
    """
    Ambiguous change of state; every alternative receives the character."""

    __slots__ = ()

    consumes = False
    label = "GUESS"


class Split(_Branching):
    """
    Ambiguous change of state after using up the character; every
    alternative starts at the next character."""

    __slots__ = ()

    label = "SPLIT"
