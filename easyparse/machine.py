"""
The Machine drives registered states over a character stream.  It keeps
a set of live branches, feeds every character to each of them, and acts
on the directives they answer with until no branch has anything left to
do with that character, before reading the next one.
"""

from __future__ import annotations
from typing import IO, Any, Dict, Iterator, List, Union

import itertools

from mypy_extensions import mypyc_attr

from easyparse.branch import Branch
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
from easyparse.errors import InputError, StateError, UnknownState
from easyparse.interfaces import EOF, State
from easyparse.states import clone_state
from easyparse.tree import ParseTree
from easyparse.whitespace import compress_whitespace

Source = Union[str, bytes, bytearray, IO[Any]]
Readable = Union[bytes, IO[Any]]

_CHUNK = 4096

# The live branches, in insertion order.  Only the keys are used.
BranchSet = Dict[Branch, None]


@mypyc_attr(allow_interpreted_subclasses=True)
class Machine:
    """
    Nondeterministic parse driver.  States are registered under the names
    that directives refer to them by, then parse() is handed the name of
    the start state:

        machine = easyparse.Machine("[1, 2]")
        machine.register(Start(), "root")
        machine.register(JSONString())
        machine.register(JSONString(), "Key")
        tree = machine.parse("root")

    parse() returns None when every branch died; deletion_snapshot then
    names the nodes the last branches were building.
    """

    _templates: Dict[str, State]
    _source: Readable | None
    _branches: BranchSet
    _ambiguous: bool
    _snapshot: List[str]

    def __init__(self, source: Source | None = None) -> None:
        self._templates = {}
        self._source = None
        self._compress = False
        self._keepNewlines = False
        self.verbose: IO[str] | None = None
        if source is not None:
            self.set_input(source)
        self.reset()

    # ------------------------------------------------------------------------
    # Configuration.

    def set_input(self, source: Source) -> None:
        """
        Set the characters to parse: a str (parsed as its UTF-8 bytes),
        bytes, or a binary or text stream.  Seekable streams are rewound
        on every parse()."""
        data: Readable
        if isinstance(source, str):
            data = source.encode("utf-8")
        elif isinstance(source, (bytes, bytearray)):
            data = bytes(source)
        elif hasattr(source, "read"):
            data = source
        else:
            raise InputError(
                "Cannot read characters from %r" % type(source).__name__
            )
        self._source = data

    def set_compress_whitespace(
        self, compress: bool, keep_newlines: bool = False
    ) -> None:
        """
        Hand every run of whitespace to the states as a single space.  With
        keep_newlines, newlines are passed on and end the run."""
        self._compress = compress
        self._keepNewlines = keep_newlines

    def set_verbose(self, out: IO[str] | None = None) -> None:
        """Print a trace of every directive to out; None turns it off."""
        self.verbose = out

    # ------------------------------------------------------------------------
    # State registry.

    def register(self, state: State, name: str | None = None) -> None:
        """
        Register state under name, or under state.name() if no name is
        given.  The same state may be registered under several names."""
        if not isinstance(state, State):
            raise StateError("%r is not a State" % (state,))
        if name is None:
            name = state.name()
        self._templates[name] = state

    def unregister(self, name: str) -> None:
        self._templates.pop(name, None)

    def names(self) -> List[str]:
        return list(self._templates.keys())

    def states(self) -> List[State]:
        return list(self._templates.values())

    # ------------------------------------------------------------------------
    # Parsing.

    @property
    def ambiguous(self) -> bool:
        """Whether the last parse() ended with more than one branch."""
        return self._ambiguous

    def is_ambiguous(self) -> bool:
        return self._ambiguous

    @property
    def deletion_snapshot(self) -> List[str]:
        """
        The names of the nodes the branches removed in the last pass were
        building.  After a failed parse these are the constructs that could
        not be finished."""
        return list(self._snapshot)

    def reset(self) -> None:
        self._branches = {}
        self._ambiguous = False
        self._snapshot = []
        self._ids = itertools.count(1)

    def parse(self, start: str) -> ParseTree | None:
        """
        Parse the input, starting in the state registered as start.
        Returns the parse tree, or None if no branch survived."""
        if start not in self._templates:
            raise UnknownState("Unknown start state: %s" % start, start)

        self.reset()
        seed = Branch(self._ids, start)
        seed.push(self._instantiate(start))
        branches = self._branches
        branches[seed] = None

        for c in self._characters():
            self._debug("[EPM] FEED: %s" % _charRepr(c))

            additions: BranchSet = {}
            deletions: BranchSet = {}
            gotos: List[Branch] = []

            # Give everyone the new character.
            for branch in branches:
                self._act(branch, branch.feed(c), additions, deletions, gotos)

            self._debug("[EPM] SECONDARY FEED: %s" % _charRepr(c))

            while len(additions) + len(deletions) + len(gotos) > 0:
                branches.update(additions)
                additions.clear()

                # Hand the character on until nobody wants it again.
                while len(gotos) > 0:
                    branch = gotos.pop()
                    self._act(
                        branch, branch.feed(c), additions, deletions, gotos
                    )

                self._snapshot = []
                for branch in deletions:
                    name = branch.cursor_name()
                    if name is not None:
                        self._snapshot.append(name)
                    branches.pop(branch, None)
                    additions.pop(branch, None)
                    branch.drop()
                deletions.clear()

            if self.verbose is not None:
                self._printBranches()

            if len(branches) == 0:
                return None

        self._ambiguous = len(branches) > 1
        first = next(iter(branches))
        return ParseTree(first.real_root())

    def _act(
        self,
        branch: Branch,
        directive: Directive,
        additions: BranchSet,
        deletions: BranchSet,
        gotos: List[Branch],
    ) -> None:
        if self.verbose is not None:
            self._debug(
                "[EPM] [%d]: %s -> %r"
                % (branch.id, branch.cursor_info(), directive)
            )

        if isinstance(directive, (Accept, Closure)):
            branch.pop()
            if not directive.consumes:
                gotos.append(branch)
        elif isinstance(directive, Goto):
            branch.push(self._instantiate(directive.nextState))
            gotos.append(branch)
        elif isinstance(directive, (Guess, Split)):
            for name in directive.nextStates:
                self._template(name)
            for child in branch.split(directive.nextStates):
                child.inherit(branch)
                child.push(self._instantiate(child.cursor_name()))
                additions[child] = None
                if not directive.consumes:
                    gotos.append(child)
            deletions[branch] = None
        elif isinstance(directive, Fail):
            deletions[branch] = None
        else:
            assert isinstance(directive, Consume)

    def _template(self, name: str | None) -> State:
        if name is None or name not in self._templates:
            raise UnknownState("Unknown state: %s" % name, name)
        return self._templates[name]

    def _instantiate(self, name: str | None) -> State:
        return clone_state(self._template(name))

    def _characters(self) -> Iterator[int]:
        if self._source is None:
            raise InputError("No input has been set")
        chars = _read(self._source)
        if self._compress:
            return compress_whitespace(chars, self._keepNewlines)
        return chars

    def _debug(self, message: str, indent: str = "") -> None:
        if self.verbose is not None:
            print(indent + _escape(message), file=self.verbose)

    def _printBranches(self) -> None:
        self._debug(
            "[EPM] FEED DONE: # branches left: %d" % len(self._branches)
        )
        for branch in self._branches:
            if branch.cursor is not None:
                self._debug(
                    "[%d]: %s" % (branch.id, branch.cursor_info()), "\t"
                )
            else:
                self._debug("$EPM_END_OF_INPUT", "\t")
        self._debug("")


def _read(source: Readable) -> Iterator[int]:
    if isinstance(source, bytes):
        for c in source:
            yield c
    else:
        seekable = getattr(source, "seekable", None)
        if seekable is not None and seekable():
            source.seek(0)
        while True:
            chunk = source.read(_CHUNK)
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            for c in chunk:
                yield c
    yield EOF


def _charRepr(c: int) -> str:
    if c == EOF:
        return "EOF"
    return chr(c)


def _escape(message: str) -> str:
    return (
        message.replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )
