import threading
import unittest

import easyparse
from easyparse import EOF, Consume, StateError, clone_state
from easyparse.tests.specs.responders import Recorder


class Selfish(easyparse.StateAdapter):
    def feed(self, c):
        return Consume()

    def clone(self):
        return self


class Locked(easyparse.StateAdapter):
    def __init__(self):
        self.lock = threading.Lock()

    def feed(self, c):
        return Consume()


class TestStateAdapter(unittest.TestCase):
    def test_name(self):
        self.assertEqual(Recorder().name(), "Recorder")
        self.assertEqual(repr(Recorder()), "<Recorder>")

    def test_clone_is_deep(self):
        recorder = Recorder()
        recorder.feed(ord("a"))
        twin = clone_state(recorder)
        self.assertIsInstance(twin, Recorder)
        self.assertIsNot(twin, recorder)
        twin.feed(ord("b"))
        self.assertEqual(recorder.seen, "a")
        self.assertEqual(twin.seen, "ab")

    def test_clone_must_be_new(self):
        with self.assertRaises(StateError):
            clone_state(Selfish())

    def test_clone_uncopyable(self):
        with self.assertRaises(StateError):
            Locked().clone()

    def test_machine_checks_clone(self):
        m = easyparse.Machine("1")
        m.register(Selfish(), "start")
        with self.assertRaises(StateError):
            m.parse("start")

    def test_abstract(self):
        with self.assertRaises(TypeError):
            easyparse.StateAdapter()


class TestCharacters(unittest.TestCase):
    def test_char(self):
        self.assertEqual(easyparse.char(ord("a")), "a")
        self.assertEqual(easyparse.char(EOF), "")

    def test_classes(self):
        self.assertTrue(easyparse.is_digit(ord("7")))
        self.assertFalse(easyparse.is_digit(ord("a")))
        self.assertTrue(easyparse.is_letter(ord("a")))
        self.assertFalse(easyparse.is_letter(ord("7")))
        for c in " \t\n\r\x0b\x0c\x1c\x1d\x1e\x1f":
            self.assertTrue(easyparse.is_whitespace(ord(c)), repr(c))
        self.assertFalse(easyparse.is_whitespace(ord("a")))
        self.assertFalse(easyparse.is_whitespace(0x85))
        self.assertFalse(easyparse.is_whitespace(0xA0))

    def test_eof_has_no_class(self):
        self.assertFalse(easyparse.is_digit(EOF))
        self.assertFalse(easyparse.is_letter(EOF))
        self.assertFalse(easyparse.is_whitespace(EOF))


class TestCompressWhitespace(unittest.TestCase):
    def compress(self, text, keep_newlines=False):
        chars = [ord(c) for c in text] + [EOF]
        out = list(easyparse.compress_whitespace(chars, keep_newlines))
        self.assertEqual(out[-1], EOF)
        return "".join(chr(c) for c in out[:-1])

    def test_runs(self):
        self.assertEqual(self.compress("a  b\t\tc"), "a b c")
        self.assertEqual(self.compress(" \n "), " ")
        self.assertEqual(self.compress(""), "")

    def test_separators(self):
        self.assertEqual(self.compress("a\x1c\x1fb"), "a b")
        self.assertEqual(self.compress("a\x1d \x1e\nb"), "a b")

    def test_utf8_bytes_are_kept(self):
        utf8 = "\u00e0  b".encode("utf-8").decode("latin-1")
        self.assertEqual(self.compress(utf8), "\u00c3\u00a0 b")

    def test_newlines(self):
        self.assertEqual(self.compress("a \n b", True), "a \n b")
        self.assertEqual(self.compress("\n\n", True), "\n\n")

    def test_is_lazy(self):
        def chars():
            yield ord("a")
            raise AssertionError("read too far")

        it = easyparse.compress_whitespace(chars())
        self.assertEqual(next(it), ord("a"))


if __name__ == "__main__":
    unittest.main()
