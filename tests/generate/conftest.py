"""Shared helpers for generate tests."""

import os
import sys

# Ensure tests/generate/ is on sys.path so test files can import the fakes
# unambiguously.
sys.path.insert(0, os.path.dirname(__file__))


def read(path):
    with open(path) as f:
        return f.read()
