from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable

@dataclass(frozen=True)
class LinePair:
    left : str = ''  # line from the left (old) text
    right : str = ''  # line from the right (new) text

    def get_left(self) -> str: return self.left
    def get_right(self) -> str: return self.right

    @property
    def is_changed(self) -> bool: return self.left != self.right


def pair_lines(left_text: str, right_text: str, changed_only: bool = False) -> Iterable[LinePair]:
    '''pairs the two texts line by line, padding the shorter one with empty lines'''
    for left, right in zip_longest(_split_lines(left_text), _split_lines(right_text), fillvalue=''):
        pair = LinePair(left, right)
        if changed_only and not pair.is_changed: continue  # identical lines
        yield pair

def _split_lines(text: str) -> list[str]:
    '''splits on newlines only, so form feeds, \\x1c or \\u2028 stay inside their line'''
    lines = [ln.removesuffix('\r') for ln in text.split('\n')]
    if lines[-1] == '': lines.pop()  # trailing newline or empty text
    return lines
