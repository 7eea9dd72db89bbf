import os.path
import unittest


def suite() -> unittest.TestSuite:
    here = os.path.dirname(os.path.abspath(__file__))
    root = os.path.dirname(os.path.dirname(here))
    return unittest.defaultTestLoader.discover(here, top_level_dir=root)
