"""
Parenthesized groups of numbers, words, or words mixed with numbers,
e.g. "(12) (ab (c3))".  The first opening parenthesis of a group splits
into every kind of content it may hold.
"""

import easyparse
from easyparse import EOF, Accept, Closure, Consume, Fail, Goto, Split


class Start(easyparse.StateAdapter):
    def feed(self, c):
        if easyparse.is_whitespace(c):
            return Consume()
        if c == EOF:
            return Closure()
        if c == ord("("):
            return Goto("Parentheses")
        return Fail()


class Parentheses(easyparse.StateAdapter):
    def __init__(self):
        self.opened = False

    def feed(self, c):
        if easyparse.is_whitespace(c):
            return Consume()
        if c == ord(")") and self.opened:
            return Closure()
        if c == ord("(") and not self.opened:
            self.opened = True
            return Split(
                "Numbers", "Letters", "LettersAndNumbers", "Parentheses"
            )
        if c == ord("("):
            return Goto("Parentheses")
        return Fail()

    def reset(self):
        self.opened = False


class Numbers(easyparse.StateAdapter):
    def __init__(self):
        self.content = ""

    def feed(self, c):
        if easyparse.is_whitespace(c) and self.content == "":
            return Consume()
        if easyparse.is_digit(c):
            self.content += easyparse.char(c)
            return Consume()
        if self.content != "" and not easyparse.is_letter(c):
            return Accept(self.content)
        return Fail()

    def reset(self):
        self.content = ""


class Letters(easyparse.StateAdapter):
    def __init__(self):
        self.content = ""

    def feed(self, c):
        if easyparse.is_whitespace(c) and self.content == "":
            return Consume()
        if easyparse.is_letter(c):
            self.content += easyparse.char(c)
            return Consume()
        if self.content != "" and not easyparse.is_digit(c):
            return Accept(self.content)
        return Fail()

    def reset(self):
        self.content = ""


class LettersAndNumbers(easyparse.StateAdapter):
    def __init__(self):
        self.reset()

    def feed(self, c):
        if easyparse.is_whitespace(c) and self.content == "":
            return Consume()
        if easyparse.is_letter(c):
            self.content += easyparse.char(c)
            self.letters = True
            return Consume()
        if easyparse.is_digit(c):
            self.content += easyparse.char(c)
            self.numbers = True
            return Consume()
        if self.letters and self.numbers:
            return Accept(self.content)
        return Fail()

    def reset(self):
        self.content = ""
        self.letters = False
        self.numbers = False


def machine(source=None):
    m = easyparse.Machine(source)
    for state in (
        Start(),
        Parentheses(),
        Numbers(),
        Letters(),
        LettersAndNumbers(),
    ):
        m.register(state)
    m.set_compress_whitespace(True, False)
    return m
