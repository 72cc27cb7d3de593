import pytest

from xmlui.core import MAX_TAG_LENGTH, TagTooLongError
from xmlui.tagsequence import PrimitiveTagState, PrimitiveTagType, TagSequence


def _populated(text):
    sequence = TagSequence(text, "sample.xml")
    sequence.populate_string_tags()
    return sequence


def test_counts_runs_closed_by_reserved_chars():
    sequence = TagSequence("<div posx=10 posy=20>")
    assert sequence.string_tag_count == 5
    assert sequence.prim_tag_count == sequence.string_tag_count + 1


def test_trailing_run_is_not_counted():
    sequence = TagSequence("a<b")
    assert sequence.string_tag_count == 1


def test_tags_start_empty_until_populated():
    sequence = TagSequence("<div>")
    assert sequence.get_string_tag(0) == ""
    sequence.populate_string_tags()
    assert sequence.get_string_tag(0) == "div"


def test_populate_string_tags_in_order():
    sequence = _populated("<div posx=10 posy=20>")
    tags = [sequence.get_string_tag(i) for i in range(sequence.string_tag_count)]
    assert tags == ["div", "posx", "10", "posy", "20"]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_get_string_tag_out_of_range(index):
    sequence = _populated("<div>")
    with pytest.raises(IndexError):
        sequence.get_string_tag(index)


def test_set_string_tag_round_trip():
    sequence = _populated("<div>")
    sequence.set_string_tag(0, "span")
    assert sequence.get_string_tag(0) == "span"


def test_set_string_tag_truncates_long_tags():
    sequence = _populated("<div>")
    long_tag = "x" * (MAX_TAG_LENGTH + 6)
    with pytest.warns(UserWarning):
        sequence.set_string_tag(0, long_tag)
    assert sequence.get_string_tag(0) == long_tag[:MAX_TAG_LENGTH]


def test_set_string_tag_out_of_range():
    sequence = _populated("<div>")
    with pytest.raises(IndexError):
        sequence.set_string_tag(1, "a")


def test_swap_replaces_every_match():
    sequence = _populated("<_x>a<_x>")
    assert sequence.swap_string_tag("_x", "value") == 2
    tags = [sequence.get_string_tag(i) for i in range(sequence.string_tag_count)]
    assert tags == ["value", "a", "value"]


def test_swap_without_match_warns():
    sequence = _populated("<div>")
    with pytest.warns(UserWarning):
        assert sequence.swap_string_tag("missing", "x") == 0
    assert sequence.get_string_tag(0) == "div"


def test_swap_rejects_long_tags():
    sequence = _populated("<div>")
    with pytest.raises(TagTooLongError):
        sequence.swap_string_tag("y" * (MAX_TAG_LENGTH + 1), "x")
    with pytest.raises(TagTooLongError):
        sequence.swap_string_tag("div", "y" * (MAX_TAG_LENGTH + 1))


def test_primitive_tags_default_to_none():
    sequence = TagSequence("<a><b>")
    states = {
        sequence.get_primitive_tag(i, kind)
        for i in range(sequence.prim_tag_count)
        for kind in PrimitiveTagType
    }
    assert states == {PrimitiveTagState.NONE}


def test_primitive_tag_set_get_and_reset():
    sequence = TagSequence("<a>")
    sequence.set_primitive_tag(1, PrimitiveTagType.CHILDREN, PrimitiveTagState.OPEN)
    sequence.set_primitive_tag(1, PrimitiveTagType.ELEMENT, PrimitiveTagState.CLOSE_OPEN)
    assert sequence.get_primitive_tag(1, PrimitiveTagType.CHILDREN) is PrimitiveTagState.OPEN
    assert sequence.get_primitive_tag(1, PrimitiveTagType.ELEMENT) is PrimitiveTagState.CLOSE_OPEN
    assert sequence.get_primitive_tag(1, PrimitiveTagType.PARAMS) is PrimitiveTagState.NONE
    sequence.reset_primitive_tags(1)
    assert sequence.get_primitive_tag(1, PrimitiveTagType.CHILDREN) is PrimitiveTagState.NONE


@pytest.mark.parametrize("index", [-1, 2])
def test_primitive_tag_index_errors(index):
    sequence = TagSequence("<a>")
    with pytest.raises(IndexError):
        sequence.get_primitive_tag(index, PrimitiveTagType.ELEMENT)
    with pytest.raises(IndexError):
        sequence.set_primitive_tag(index, PrimitiveTagType.ELEMENT, PrimitiveTagState.OPEN)
    with pytest.raises(IndexError):
        sequence.reset_primitive_tags(index)


def test_copy_is_independent():
    original = _populated("<div posx=1>")
    original.set_primitive_tag(0, PrimitiveTagType.ELEMENT, PrimitiveTagState.OPEN)
    duplicate = original.copy()
    duplicate.set_string_tag(0, "span")
    duplicate.set_primitive_tag(0, PrimitiveTagType.ELEMENT, PrimitiveTagState.CLOSE)
    assert original.get_string_tag(0) == "div"
    assert original.get_primitive_tag(0, PrimitiveTagType.ELEMENT) is PrimitiveTagState.OPEN
    assert duplicate.get_string_tag(1) == original.get_string_tag(1)
    assert duplicate.text == original.text


def test_describe_lists_tags():
    sequence = _populated("<div>")
    sequence.set_primitive_tag(0, PrimitiveTagType.ELEMENT, PrimitiveTagState.OPEN)
    text = sequence.describe()
    assert "[ Prim Tag ]   -> Element = Open" in text
    assert "[ String Tag ] -> div" in text
    assert text.index("Element = Open") < text.index("String Tag ] -> div")


def test_describe_empty_sequence_header():
    sequence = TagSequence("")
    assert sequence.describe() == "Tag Sequence (Buffer Length = 3 Bytes):\r\n"