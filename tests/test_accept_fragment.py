import pytest

from diff_filters.accept_fragment import accept


def test_tag_attribute_value_wins_regardless_of_others(make_fragment):
    fragment = make_fragment(text="nothing relevant", attributes={"tag"})
    assert accept(fragment) is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "the ranking is high"},
        {"text": "Weekly report", "tags": {"title"}},
        {"text": "3", "tags": {"ranking"}},
        {"text": "data-ranking=12"},
    ],
)
def test_accepted_fragments(make_fragment, kwargs):
    assert accept(make_fragment(**kwargs)) is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "plain text"},
        {"text": "Ranking", "tags": {"p"}},  # case-sensitive substring
        {"text": "v2", "attributes": {"class", "id"}},
        {"text": "Report", "tags": {"h1"}},
    ],
)
def test_rejected_fragments(make_fragment, kwargs):
    assert accept(make_fragment(**kwargs)) is False


def test_accept_is_idempotent(make_fragment):
    fragment = make_fragment(text="the ranking is high")
    assert accept(fragment) == accept(fragment)


def test_capability_errors_propagate():
    class Broken:
        def is_attribute_value(self, name):
            raise RuntimeError("boom")

        def is_tag_content(self, name):
            return False

    with pytest.raises(RuntimeError):
        accept(Broken())
