from diff_filters.filters.filter_line import SKIP_LEFT_RIGHT_CONTAINS, SKIP_RIGHT_PREFIX
from diff_filters.capabilities import Line


def skip_lorem_ipsum(line: Line) -> bool:
    '''skips lines where placeholder copy on the left was replaced by placeholder copy on the right'''
    left, right = line.get_left(), line.get_right()
    return any(lft in left and rgt in right for lft, rgt in SKIP_LEFT_RIGHT_CONTAINS)  # both substrings present


def skip_analytics(line: Line) -> bool:
    '''skips lines whose right side is an analytics attribute'''
    return line.get_right().strip().startswith(tuple(SKIP_RIGHT_PREFIX))  # prefix match after trim
