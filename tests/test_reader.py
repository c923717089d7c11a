import pytest

from lispy.reader.parser import ParseNode
from lispy.reader.reader import read
from lispy.types.error import Error
from lispy.types.expr import QExpr, SExpr
from lispy.types.symbol import Symbol


def leaf(tag, contents):
    return ParseNode(tag, contents)


def test_reader_uses_tag_substrings_only():
    # A tree from some other parser: only the tag substrings and brackets matter
    tree = ParseNode(">", "", [
        leaf("regex", ""),
        ParseNode("my_sexpr", "", [
            leaf("char", "("),
            leaf("a_symbol_rule", "head"),
            ParseNode("qexpr_rule", "", [
                leaf("char", "{"),
                leaf("number_token", "1"),
                leaf("number_token", "2"),
                leaf("char", "}"),
            ]),
            leaf("char", ")"),
        ]),
        leaf("regex", ""),
    ])
    assert read(tree) == SExpr([SExpr([Symbol("head"), QExpr([1, 2])])])


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", 0),
        ("-7", -7),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", Error("Invalid number '9223372036854775808'.", "NumericParseError")),
        ("-9223372036854775809", Error("Invalid number '-9223372036854775809'.", "NumericParseError")),
        ("12x", Error("Invalid number '12x'.", "NumericParseError")),
        ("", Error("Invalid number ''.", "NumericParseError")),
    ],
)
def test_read_number(text, expected):
    assert read(leaf("expr|number|regex", text)) == expected


def test_out_of_range_literal_evaluates_to_error(interp):
    assert interp.eval("(+ 1 99999999999999999999)") == Error(
        "Invalid number '99999999999999999999'.", "NumericParseError"
    )


def test_unknown_tag_reads_as_error():
    assert read(leaf("string", "hi")) == Error("Unknown parse node 'string'.", "SyntaxError")


def test_unknown_child_becomes_error_element():
    tree = ParseNode("expr|qexpr|>", "", [leaf("char", "{"), leaf("comment", ";x"), leaf("char", "}")])
    assert read(tree) == QExpr([Error("Unknown parse node 'comment'.", "SyntaxError")])


@pytest.mark.parametrize("digits", ["1" * 5000, "-" + "9" * 5000, "0" * 5000 + "12345678901234567890"])
def test_huge_number_literal_is_error(digits):
    assert read(leaf("number", digits)) == Error(f"Invalid number '{digits}'.", "NumericParseError")


def test_leading_zeros_do_not_count_against_range():
    assert read(leaf("number", "0" * 5000 + "42")) == 42
    assert read(leaf("number", "-0009223372036854775808")) == -(2 ** 63)


def test_huge_literal_through_interpreter(interp):
    result = interp.eval("(+ 1 " + "7" * 5000 + ")")
    assert result.kind == "NumericParseError"
    assert interp.eval("(+ 1 2)") == 3
