import pytest

from markbook.content_string import ContentString


def test_new_is_empty_and_untouched():
    content = ContentString()
    assert str(content) == ""
    assert len(content) == 0
    assert content.has_been_pushed_to() is False


def test_from_string_is_not_marked_as_pushed():
    content = ContentString("<url> somewhere")
    assert str(content) == "<url> somewhere"
    assert content.has_been_pushed_to() is False


def test_push_marks_and_locates_content():
    content = ContentString("base")
    field = content.push("addition")
    assert content.has_been_pushed_to() is True
    assert field.get(str(content)) == "addition"
    assert str(content) == "base" + "addition"


def test_push_appends_after_existing_text():
    content = ContentString("abc")
    field = content.push("de")
    assert field.start == len("abc")
    assert field.end == len(content)


def test_extend_returns_field_per_item():
    content = ContentString()
    items = ["one", "two", "three"]
    fields = content.extend(items)
    assert [f.get(str(content)) for f in fields] == items
    assert content.has_been_pushed_to()


def test_extend_with_nothing_does_not_mark():
    content = ContentString("x")
    assert content.extend([]) == []
    assert content.has_been_pushed_to() is False


def test_from_range_takes_slice():
    source = "hello there"
    content = ContentString.from_range(source, 6, 11)
    assert content == source[6:11]
    assert content.has_been_pushed_to() is False


@pytest.mark.parametrize("start,end", [(0, 100), (4, 2), (-1, 3)])
def test_from_range_out_of_bounds(start, end):
    with pytest.raises(IndexError):
        ContentString.from_range("hello", start, end)


def test_equality_and_slicing():
    content = ContentString("abcdef")
    assert content == ContentString("abcdef")
    assert content[1:3] == "abcdef"[1:3]