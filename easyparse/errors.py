"""
The easyparse package implements the following exception classes:

  * AnyException
  * ParsingError
  * UnknownState
  * InputError
  * StateError
"""

from __future__ import annotations


# ============================================================================
# Begin exceptions.
#
class AnyException(Exception):
    """
    Top-level class for all exceptions thrown within the easyparse package.
    """


class ParsingError(AnyException):
    """
    Top level parsing exception class, from which we derive all exceptions
    that occur while the Machine is driving input through its states.
    """


class UnknownState(ParsingError):
    """
    UnknownState arises when the start symbol handed to Machine.parse(), or
    the target of a Goto, Guess or Split directive, was never registered.
    It aborts the parse; ordinary branch failures never raise.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class InputError(ParsingError):
    """
    The Machine has no input, or was handed a source it cannot read
    characters from.
    """


class StateError(AnyException):
    """
    A registered object does not honour the State contract, e.g. it is
    not a State at all, or its clone() returned something else.
    """


#
# End exceptions.
# ============================================================================
