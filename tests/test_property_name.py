import pytest
from hypothesis import given
from hypothesis import strategies as st

from propmap.errors import InvalidPropertyNameError
from propmap.names import ElementType, Form, PropertyName


_ELEMENTS = st.from_regex(r"[a-z][a-z0-9]{0,5}(-[a-z0-9]{1,5}){0,2}", fullmatch=True)
_INDEXES = st.integers(min_value=0, max_value=999).map(lambda index: f"[{index}]")


@st.composite
def _canonical_names(draw: st.DrawFn) -> str:
    parts = draw(st.lists(_ELEMENTS | _INDEXES, min_size=1, max_size=6))
    text = ""
    for part in parts:
        if part.startswith("[") or not text:
            text += part
        else:
            text += f".{part}"
    return text


def test_of_parses_named_and_indexed_elements() -> None:
    name = PropertyName.of("foo.bar-baz[0].qux")
    assert len(name) == 4
    assert name.elements(Form.ORIGINAL) == ("foo", "bar-baz", "0", "qux")
    assert name.elements(Form.UNIFORM) == ("foo", "barbaz", "0", "qux")
    assert name.elements(Form.DASHED) == ("foo", "bar-baz", "0", "qux")
    assert name.is_indexed(2)
    assert name.is_numeric_index(2)
    assert not name.is_indexed(1)
    assert str(name) == "foo.bar-baz[0].qux"


def test_of_keeps_non_numeric_index_verbatim() -> None:
    name = PropertyName.of("map[key.with.dots]")
    assert name.get_element(1) == "key.with.dots"
    assert name.is_indexed(1)
    assert not name.is_numeric_index(1)
    assert str(name) == "map[key.with.dots]"


def test_of_empty_returns_empty_name() -> None:
    assert PropertyName.of("") is PropertyName.EMPTY
    assert PropertyName.of(None).is_empty()
    assert len(PropertyName.EMPTY) == 0
    assert str(PropertyName.EMPTY) == ""
    assert PropertyName.EMPTY.last_element() == ""


@pytest.mark.parametrize(
    "text",
    ["Foo", "foo..bar", ".foo", "foo.", "-foo", "foo.-bar", "foo[0", "foo[]", "foo[0]bar", "foo.[0]", "foo bar"],
)
def test_of_rejects_invalid_names(text: str) -> None:
    with pytest.raises(InvalidPropertyNameError, match="invalid property name"):
        _ = PropertyName.of(text)
    assert PropertyName.of_if_valid(text) is None
    assert not PropertyName.is_valid(text)


def test_invalid_name_error_reports_characters() -> None:
    with pytest.raises(InvalidPropertyNameError) as exc_info:
        _ = PropertyName.of("Foo_bar")
    assert exc_info.value.name == "Foo_bar"
    assert exc_info.value.invalid_characters == ("F", "_")
    assert isinstance(exc_info.value, ValueError)


def test_equality_uses_uniform_form_for_named_elements() -> None:
    assert PropertyName.of("foo.bar-baz") == PropertyName.of("foo.barbaz")
    assert hash(PropertyName.of("foo.bar-baz")) == hash(PropertyName.of("foo.barbaz"))
    assert PropertyName.of("foo[0]") != PropertyName.of("foo.0")
    assert PropertyName.of("foo") != "foo"


def test_adapt_splits_on_separator_and_keeps_original_case() -> None:
    name = PropertyName.adapt("FOO_BAR", "_")
    assert name.elements(Form.ORIGINAL) == ("FOO", "BAR")
    assert name.elements(Form.UNIFORM) == ("foo", "bar")
    assert name == PropertyName.of("foo.bar")


def test_adapt_applies_processor_and_skips_empty_segments() -> None:
    name = PropertyName.adapt("a__b_1", "_", lambda value: f"[{value}]" if value.isdigit() else value)
    assert str(name) == "a.b[1]"
    assert name.is_numeric_index(2)


def test_adapt_reads_bracketed_segments_as_indexes() -> None:
    name = PropertyName.adapt("foo[bar]_baz", "_")
    assert name.elements() == ("foo", "bar", "baz")
    assert name.is_indexed(1)


def test_adapt_rejects_elements_that_resolve_to_several_elements() -> None:
    with pytest.raises(InvalidPropertyNameError, match="single element"):
        _ = PropertyName.adapt("a.b_c", "_")
    with pytest.raises(InvalidPropertyNameError, match="unclosed index bracket"):
        _ = PropertyName.adapt("foo_[0", "_")
    with pytest.raises(ValueError, match="separator must be a single character"):
        _ = PropertyName.adapt("foo", "")
    with pytest.raises(ValueError, match="separator must not be a bracket"):
        _ = PropertyName.adapt("foo", "[")


def test_adapt_empty_input_returns_empty_name() -> None:
    assert PropertyName.adapt("", "_") is PropertyName.EMPTY
    assert PropertyName.adapt("___", "_").is_empty()


def test_append_chop_and_parent() -> None:
    name = PropertyName.of("foo").append("bar[0]")
    assert name == PropertyName.of("foo.bar[0]")
    assert name.append(None) is name
    assert name.chop(1) == PropertyName.of("foo")
    assert name.chop(0) is PropertyName.EMPTY
    assert name.chop(10) is name
    assert name.parent == PropertyName.of("foo.bar")
    assert PropertyName.EMPTY.parent is PropertyName.EMPTY
    assert name.last_element(Form.ORIGINAL) == "0"
    assert name.get_element(-2) == "bar"
    with pytest.raises(ValueError, match="size must not be negative"):
        _ = name.chop(-1)
    with pytest.raises(IndexError):
        _ = name.get_element(3)


def test_parent_and_ancestor_relationships() -> None:
    foo = PropertyName.of("foo")
    foo_bar = PropertyName.of("foo.bar")
    foo_bar_baz = PropertyName.of("foo.bar[0]")

    assert foo.is_parent_of(foo_bar)
    assert not foo.is_parent_of(foo_bar_baz)
    assert foo.is_ancestor_of(foo_bar_baz)
    assert not foo_bar.is_ancestor_of(foo)
    assert not foo.is_ancestor_of(PropertyName.of("fooo.bar"))
    assert PropertyName.EMPTY.is_ancestor_of(foo)


def test_repr_shows_canonical_text() -> None:
    assert repr(PropertyName.of("servers[0].host")) == "PropertyName('servers[0].host')"


@given(_canonical_names())
def test_str_round_trips_canonical_names(text: str) -> None:
    assert str(PropertyName.of(text)) == text


@given(_canonical_names())
def test_name_is_never_its_own_ancestor(text: str) -> None:
    name = PropertyName.of(text)
    assert not name.is_ancestor_of(name)
    assert name.parent.is_parent_of(name)


def test_adapt_passes_bracketed_segments_through_processor() -> None:
    name = PropertyName.adapt("FOO[BAR]_[1]", "_", lambda value: f"[{value}]" if value.isdigit() else value.lower())
    assert str(name) == "foo.bar[1]"
    assert not name.is_indexed(1)
    assert name.is_numeric_index(2)


@pytest.mark.parametrize(
    "member",
    [
        ElementType,
        vars(ElementType)["indexed"],
        PropertyName.is_valid,
        PropertyName.is_empty,
        PropertyName.elements,
        PropertyName.is_indexed,
        PropertyName.is_numeric_index,
    ],
)
def test_public_members_are_documented(member: object) -> None:
    assert member.__doc__
