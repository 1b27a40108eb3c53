"""Unit tests for visual elements and the page/document containers."""

import pytest

from vitae.contexts.schema import (
    A4_HEIGHT,
    CircleElement,
    Document,
    ElementFormatError,
    RectElement,
    TextElement,
    clone_element,
    element_from_dict,
    flatten,
    paginate,
)


@pytest.mark.unit
def test_textbox_round_trips_through_dict():
    """Test that a wrapped text element persists as a textbox with camelCase keys."""
    element = TextElement(
        text="Hello",
        left=40,
        top=100,
        font_size=10,
        font_weight="bold",
        width=200,
        semantic_type="experience_title",
        semantic_group="experience_0",
    )
    data = element.to_dict()

    assert data["type"] == "textbox"
    assert data["fontSize"] == 10
    assert data["semanticType"] == "experience_title"
    assert data["semanticGroup"] == "experience_0"

    restored = element_from_dict(data)
    assert restored.text == "Hello"
    assert restored.width == 200
    assert restored.is_bold
    assert restored.id == element.id


@pytest.mark.unit
def test_text_without_width_persists_as_itext():
    """Test that unwrapped text persists as i-text and omits width."""
    data = TextElement(text="Solo").to_dict()

    assert data["type"] == "i-text"
    assert "width" not in data
    assert "semanticType" not in data


@pytest.mark.unit
@pytest.mark.parametrize("object_type", ["Textbox", "IText", "i_text", "text"])
def test_element_from_dict_accepts_type_aliases(object_type):
    """Test the editor's spellings of text object types."""
    element = element_from_dict({"type": object_type, "text": "x"})

    assert isinstance(element, TextElement)


@pytest.mark.unit
def test_itext_never_wraps_even_with_measured_width():
    """Test that an i-text's stored width is kept in extra but not used for wrapping."""
    element = element_from_dict({"type": "i-text", "text": "x", "width": 120})

    assert element.width is None
    assert element.extra["width"] == 120


@pytest.mark.unit
def test_unknown_keys_are_carried_in_extra():
    """Test that unmodelled persisted keys survive a round trip."""
    element = element_from_dict({"type": "rect", "width": 10, "height": 5, "rx": 4})

    assert isinstance(element, RectElement)
    assert element.to_dict()["rx"] == 4


@pytest.mark.unit
def test_weight_parsing():
    """Test bold detection from names and numeric weights."""
    assert TextElement(font_weight="bold").is_bold
    assert TextElement(font_weight=700).is_bold
    assert TextElement(font_weight="600").is_bold
    assert not TextElement(font_weight="normal").is_bold
    assert not TextElement(font_weight=400).is_bold


@pytest.mark.unit
def test_unsupported_type_raises():
    """Test that images and other shapes are rejected with the offending type."""
    with pytest.raises(ElementFormatError) as exc_info:
        element_from_dict({"type": "image", "src": "photo.png"})

    assert exc_info.value.object_type == "image"


@pytest.mark.unit
def test_non_mapping_raises():
    """Test that a non-dict canvas object is rejected."""
    with pytest.raises(ElementFormatError):
        element_from_dict(["not", "a", "dict"])


@pytest.mark.unit
def test_page_from_dict_skips_bad_objects():
    """Test that a page load keeps supported objects and skips the rest."""
    document = Document.from_dict(
        {
            "objects": [
                {"type": "textbox", "text": "kept", "width": 100},
                {"type": "image"},
                {"type": "circle", "radius": 30},
            ]
        }
    )

    assert len(document.pages) == 1
    kinds = [element.kind for element in document.pages[0].objects]
    assert kinds == ["text", "circle"]


@pytest.mark.unit
def test_clone_element_keeps_id_and_copies_extra():
    """Test that clones are independent copies with the same id."""
    original = CircleElement(radius=10, extra={"foo": 1})
    copy = clone_element(original, left=50)

    assert copy.id == original.id
    assert copy.left == 50
    assert original.left == 0
    copy.extra["foo"] = 2
    assert original.extra["foo"] == 1


@pytest.mark.unit
def test_paginate_assigns_elements_to_pages():
    """Test that elements land on the page their top falls on, in local coordinates."""
    first = TextElement(text="a", top=100)
    second = TextElement(text="b", top=A4_HEIGHT + 30)

    document = paginate([first, second])

    assert len(document.pages) == 2
    assert document.pages[0].objects[0].top == 100
    assert document.pages[1].objects[0].top == 30


@pytest.mark.unit
def test_paginate_splits_tall_rectangles():
    """Test that a two-page sidebar background is cut into one piece per page."""
    sidebar = RectElement(left=0, top=0, width=180, height=2 * A4_HEIGHT)

    document = paginate([sidebar])

    assert len(document.pages) == 2
    assert document.pages[0].objects[0].height == A4_HEIGHT
    assert document.pages[1].objects[0].height == A4_HEIGHT
    assert document.pages[1].objects[0].top == 0


@pytest.mark.unit
def test_flatten_restores_canvas_coordinates():
    """Test that flatten undoes paginate for positions and texts."""
    elements = [TextElement(text="a", top=10), TextElement(text="b", top=A4_HEIGHT + 5)]

    flat = flatten(paginate(elements))

    assert [(e.text, e.top) for e in flat] == [("a", 10), ("b", A4_HEIGHT + 5)]


@pytest.mark.unit
def test_empty_paginate_has_one_page():
    """Test that an empty canvas still yields one page."""
    assert len(paginate([]).pages) == 1


@pytest.mark.unit
def test_numeric_strings_are_read_as_numbers():
    """Test that numbers stored as strings come back as floats."""
    element = element_from_dict(
        {"type": "textbox", "text": "Jane", "left": "40", "top": "120.5", "fontSize": "14", "width": "300"}
    )

    assert (element.left, element.top, element.font_size, element.width) == (40.0, 120.5, 14.0, 300.0)

    circle = element_from_dict({"type": "circle", "radius": "8", "opacity": "0.5"})
    assert (circle.radius, circle.opacity) == (8.0, 0.5)


@pytest.mark.unit
@pytest.mark.parametrize("bad_value", ["large", "nan", "inf", [], {}, True])
def test_unusable_numbers_fall_back_to_defaults(bad_value):
    """Test that unreadable numeric values leave the attribute at its default."""
    element = element_from_dict({"type": "textbox", "text": "x", "top": bad_value, "fontSize": bad_value})
    default = TextElement()

    assert element.top == default.top
    assert element.font_size == default.font_size

    rect = element_from_dict({"type": "rect", "width": bad_value, "height": 12})
    assert rect.width == RectElement().width
    assert rect.height == 12.0
