"""
This module declares the structural interface that user states implement
to be driven by the Machine.
"""

from __future__ import annotations

import abc

from easyparse.directives import Directive

# The character fed to every live state once the input is exhausted.
EOF = -1


class State(abc.ABC):
    """
    A State inspects one character at a time and answers with a Directive.
    The Machine never feeds a registered instance directly: each branch of
    the parse works on its own clone(), so anything a State accumulates
    while it is fed must be copied by clone() and cleared by reset().
    """

    @abc.abstractmethod
    def feed(self, c: int) -> Directive:
        """Receive a character (a byte value, or EOF)."""
        raise NotImplementedError

    @abc.abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def reset(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def clone(self) -> State:
        raise NotImplementedError
