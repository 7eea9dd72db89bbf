"""
StateAdapter can be subclassed to write small states with nothing but a
feed() method.  The helpers below classify the characters a state is fed;
all of them accept EOF and treat it as belonging to no class.

    class Digits(easyparse.StateAdapter):
        def __init__(self):
            self.result = ""

        def feed(self, c):
            if easyparse.is_digit(c):
                self.result += easyparse.char(c)
                return easyparse.Consume()
            return easyparse.Accept(self.result)

        def reset(self):
            self.result = ""
"""

from __future__ import annotations

import copy

from mypy_extensions import mypyc_attr

from easyparse.errors import StateError
from easyparse.interfaces import EOF, State


@mypyc_attr(allow_interpreted_subclasses=True)
class StateAdapter(State):
    """
    Convenience base class.  The default name is the class name, reset()
    does nothing, and clone() deep-copies the instance, which is right for
    any state whose fields are plain values or containers of them.  States
    that hold on to something that must not be duplicated override
    clone().
    """

    def name(self) -> str:
        return type(self).__name__

    def reset(self) -> None:
        pass

    def clone(self) -> State:
        try:
            return copy.deepcopy(self)
        except (TypeError, copy.Error) as e:
            raise StateError(
                "Could not copy %s; implement %s.clone()"
                % (self.name(), type(self).__name__)
            ) from e

    def __repr__(self) -> str:
        return "<%s>" % self.name()


def char(c: int) -> str:
    if c == EOF:
        return ""
    return chr(c)


def is_whitespace(c: int) -> bool:
    """
    ASCII whitespace, including the separators 0x1c-0x1f.  Bytes above
    0x7f are never whitespace; they may be part of a UTF-8 sequence."""
    return 0 <= c < 0x80 and chr(c).isspace()


def is_digit(c: int) -> bool:
    return c != EOF and 0x30 <= c <= 0x39


def is_letter(c: int) -> bool:
    return c != EOF and chr(c).isalpha()


def clone_state(state: State) -> State:
    """Clone state, making sure the copy honours the State contract."""
    out = state.clone()
    if not isinstance(out, State) or out is state:
        raise StateError(
            "%s.clone() must return a new State, got %r"
            % (type(state).__name__, out)
        )
    return out
