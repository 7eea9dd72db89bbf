# ============================================================================
# Copyright (c) 2007 Jason Evans <jasone@canonware.com>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# ============================================================================
"""
The easyparse package implements a character-driven, nondeterministic
parse machine.  There is no grammar file and no parser generator: a parser
is a collection of hand-written states.  Every state is fed one character
at a time (a byte value, or EOF once the input is exhausted) and answers
with a directive telling the Machine what to do next:

      Consume : the character is used up, stay in this state.
       Accept : finish this node, hand the character back to the parent.
      Closure : finish this node, the character is used up.
         Goto : descend into a child node driven by another state.
        Guess : ambiguity; try every listed state on this character.
        Split : ambiguity; try every listed state from the next character.
         Fail : this interpretation of the input is wrong.

Whenever a state guesses or splits, the Machine forks the branch it belongs
to.  Each branch has a private stack of state clones and a private copy of
the tree under construction, so stateful states (accumulators, counters)
never see each other's progress.  Branches that fail simply disappear; the
parse fails once no branch is left.  The parse tree mirrors the Goto
structure: every entered state leaves a node labelled with the name it was
registered under, carrying the content of the Accept or Closure that
finished it.

Following are the classes most parsers need:

  * Machine       : registers states and drives the input through them.
  * StateAdapter  : convenience base class for states.
  * Consume, Accept, Closure, Goto, Guess, Split, Fail : the directives.
  * ParseTree, ParseTreeNode : the result of Machine.parse().
"""

from __future__ import annotations


__all__ = (
    "Accept",
    "AnyException",
    "Branch",
    "Closure",
    "Consume",
    "Directive",
    "EOF",
    "Fail",
    "Goto",
    "Guess",
    "InputError",
    "Machine",
    "ParseTree",
    "ParseTreeNode",
    "ParsingError",
    "Split",
    "State",
    "StateAdapter",
    "StateError",
    "UnknownState",
    "__version__",
    "char",
    "clone_state",
    "compress_whitespace",
    "is_digit",
    "is_letter",
    "is_whitespace",
)

from easyparse._version import __version__
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
from easyparse.errors import (
    AnyException,
    InputError,
    ParsingError,
    StateError,
    UnknownState,
)
from easyparse.interfaces import EOF, State
from easyparse.states import (
    StateAdapter,
    char,
    clone_state,
    is_digit,
    is_letter,
    is_whitespace,
)
from easyparse.tree import ParseTree, ParseTreeNode
from easyparse.branch import Branch
from easyparse.whitespace import compress_whitespace
from easyparse.machine import Machine
