from diff_filters.filters.filter_fragment import ACCEPT_ATTR, ACCEPT_CONTAINS, ACCEPT_TAG_CONTENT
from diff_filters.capabilities import Fragment


def accept(fragment: Fragment) -> bool:
    '''accepts (silences) fragments that are known to change between builds'''
    return (any(fragment.is_attribute_value(a) for a in ACCEPT_ATTR)  # value of an accepted attribute
            or any(fragment.is_tag_content(t) for t in ACCEPT_TAG_CONTENT)  # text inside an accepted tag
            or any(substr in str(fragment) for substr in ACCEPT_CONTAINS))  # substring match
