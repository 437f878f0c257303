"""Text form: reading and writing multisets."""

import io

import pytest

from nestbag.codec import dump, dumps, load, loads
from nestbag.objects.element import Label, Nested
from nestbag.objects.multiset import MultiSet
from nestbag.parser.parser import MalformedInputError, MultisetParsingError, parse


def test_parse_empty_multiset():
    ms = parse("{}")
    assert ms.size() == 0
    assert ms.is_empty()


def test_parse_empty_multiset_with_whitespace():
    assert parse("  { }\n").is_empty()


def test_parse_repeated_elements():
    ms = parse("{element1, element1}")
    assert ms.size() == 2
    assert ms.contains("element1")
    assert ms.multiplicity("element1") == 2


def test_parse_nested_multiset():
    ms = parse("{{nested_element1, nested_element2}, nested_element3}")
    assert ms.size() == 2
    assert ms.contains(parse("{nested_element1, nested_element2}"))
    assert ms.contains("nested_element3")


def test_parse_nested_multisets_in_different_order_collapse():
    ms = parse("{{x, y, z}, {z, x, y}}")
    assert ms.size() == 2
    assert len(ms.elements) == 1


def test_parse_skips_leading_whitespace_of_label():
    ms = parse("{   a,\n\tb}")
    assert ms.elements == {Label("a"): 1, Label("b"): 1}


def test_parse_keeps_whitespace_inside_and_after_label():
    ms = parse("{ a b , c}")
    assert ms.contains("a b ")
    assert ms.contains("c")


def test_parse_label_with_special_characters():
    ms = parse("{a{b, x-y*z, supp}")
    assert ms.contains("a{b")
    assert ms.contains("x-y*z")
    assert ms.contains("supp")


def test_parse_deeply_nested():
    ms = parse("{{{}}, {{}}}")
    inner = Nested(MultiSet())
    assert ms.elements == {Nested(MultiSet([inner])): 2}


def test_parse_distinguishes_label_and_nested():
    assert parse("{1}") != parse("{{1}}")


@pytest.mark.parametrize("text", [
    "",
    "a",
    "a}",
    "}",
    "{",
    "{a",
    "{a,",
    "{a, }",
    "{a,,b}",
    "{,}",
    "{{a} b}",
    "{a} b",
    "{a}}",
    "{a} {b}",
])
def test_parse_malformed_input(text):
    with pytest.raises(MalformedInputError):
        parse(text)


def test_malformed_input_is_parsing_error():
    with pytest.raises(MultisetParsingError):
        parse("no braces")


def test_malformed_input_reports_position():
    with pytest.raises(MalformedInputError) as e:
        parse("{{a} b}")
    assert e.value.line == 1
    assert e.value.column == 6
    assert e.value.text == "{{a} b}"


def test_write_repeats_elements():
    ms = MultiSet(["a", "a", "a"])
    assert dumps(ms) == "{a, a, a}"


def test_write_nested():
    ms = MultiSet(["a", MultiSet(["b", "b"])])
    assert dumps(ms) == "{a, {b, b}}"


@pytest.mark.parametrize("ms", [
    MultiSet(),
    MultiSet(["element1"]),
    MultiSet(["a", "a", "b", "c", "c", "c"]),
    MultiSet([MultiSet(["x", "y"]), MultiSet(["y", "x"]), "z"]),
    MultiSet([MultiSet([MultiSet(), MultiSet(["deep", "deep"])]), "top"]),
])
def test_round_trip(ms):
    assert loads(dumps(ms)) == ms


def test_load_and_dump_streams():
    ms = MultiSet(["a", MultiSet(["b"])])
    fp = io.StringIO()
    dump(ms, fp)
    assert fp.getvalue() == "{a, {b}}"
    fp.seek(0)
    assert load(fp) == ms


def test_load_malformed_stream():
    with pytest.raises(MalformedInputError):
        load(io.StringIO("{a; b"))


@pytest.mark.parametrize("text", ["{a,,b}", "{a, }", "{,a}"])
def test_empty_label_is_malformed(text):
    with pytest.raises(MalformedInputError):
        parse(text)


def test_parse_reuses_the_parser():
    assert parse("{a, a}") == parse("{a, a}")
    with pytest.raises(MalformedInputError):
        parse("{a")
    # a failed call leaves the parser usable
    assert parse("{b}").contains("b")
