from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project root is importable so `main` and `diff_filters` work without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeFragment:
    def __init__(self, text="", attributes=(), tags=()):
        self.text = text
        self.attributes = set(attributes)
        self.tags = set(tags)
        self.calls = 0

    def is_attribute_value(self, name):
        self.calls += 1
        return name in self.attributes

    def is_tag_content(self, name):
        self.calls += 1
        return name in self.tags

    def __str__(self):
        return self.text


class FakeLine:
    def __init__(self, left="", right=""):
        self.left = left
        self.right = right

    def get_left(self):
        return self.left

    def get_right(self):
        return self.right


@pytest.fixture
def make_fragment():
    return FakeFragment


@pytest.fixture
def make_line():
    return FakeLine
