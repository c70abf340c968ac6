import pickle

import pytest
from treeglob import (
    RECURSIVE_ANY,
    AnyRun,
    AnySingle,
    CharClass,
    ClassRange,
    Literal,
    Pattern,
    PatternSyntaxError,
    SyntaxRule,
    compile,
)


# ---------------------------------------------------------------------------
# compiled structure
# ---------------------------------------------------------------------------


def test_literal_segments():
    pat = compile("foo/bar.go")
    assert pat.segments == (
        (Literal("f"), Literal("o"), Literal("o")),
        tuple(Literal(c) for c in "bar.go"),
    )


def test_mixed_tokens():
    pat = compile("a/**/[^x-z]?b*")
    assert pat.segments == (
        (Literal("a"),),
        RECURSIVE_ANY,
        (
            CharClass(True, (ClassRange("x", "z"),)),
            AnySingle(),
            Literal("b"),
            AnyRun(),
        ),
    )


def test_escape_becomes_literal():
    pat = compile(r"a\*b")
    assert pat.segments == ((Literal("a"), Literal("*"), Literal("b")),)


def test_escaped_dash_is_class_member():
    pat = compile(r"[\-x]")
    assert pat.segments == (
        (CharClass(False, (ClassRange("-", "-"), ClassRange("x", "x"))),),
    )


def test_escaped_dash_as_range_bounds():
    assert compile(r"[+-\-]").segments[0][0].members == (ClassRange("+", "-"),)
    assert compile(r"[\--a]").segments[0][0].members == (ClassRange("-", "a"),)


def test_pattern_str_and_source():
    pat = compile("**/*.go")
    assert str(pat) == "**/*.go"
    assert pat.source == "**/*.go"
    assert isinstance(pat, Pattern)


def test_compile_is_deterministic():
    assert compile("src/**/[a-c]*.py") == compile("src/**/[a-c]*.py")
    assert hash(compile("a/**")) == hash(compile("a/**"))


def test_pattern_is_immutable():
    pat = compile("a")
    with pytest.raises(AttributeError):
        pat.source = "b"  # type: ignore[misc]


def test_pattern_pickles():
    pat = compile("a/**/[b-d]?")
    clone = pickle.loads(pickle.dumps(pat))
    assert clone == pat
    assert clone.segments[1] is RECURSIVE_ANY


# ---------------------------------------------------------------------------
# syntax errors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "pattern, rule",
    [
        ("", SyntaxRule.EMPTY_SEGMENT),
        ("//", SyntaxRule.EMPTY_SEGMENT),
        ("foo//", SyntaxRule.EMPTY_SEGMENT),
        ("foo/", SyntaxRule.EMPTY_SEGMENT),
        ("/foo", SyntaxRule.EMPTY_SEGMENT),
        ("a//b", SyntaxRule.EMPTY_SEGMENT),
        ("*?.go", SyntaxRule.ADJACENT_WILDCARDS),
        ("?*.go", SyntaxRule.ADJACENT_WILDCARDS),
        ("**?.go", SyntaxRule.RECURSIVE_MIXED),
        ("**f", SyntaxRule.RECURSIVE_MIXED),
        ("a**", SyntaxRule.RECURSIVE_MIXED),
        ("src/***/x", SyntaxRule.RECURSIVE_MIXED),
        ("[a-", SyntaxRule.UNTERMINATED_CLASS),
        ("[a-\\", SyntaxRule.DANGLING_ESCAPE),
        ("[\\", SyntaxRule.DANGLING_ESCAPE),
        ("\\", SyntaxRule.DANGLING_ESCAPE),
        ("a/b\\", SyntaxRule.DANGLING_ESCAPE),
        ("[]a]", SyntaxRule.EMPTY_CLASS),
        ("[^]", SyntaxRule.EMPTY_CLASS),
        ("[-]", SyntaxRule.MISPLACED_DASH),
        ("[x-]", SyntaxRule.MISPLACED_DASH),
        ("[-x]", SyntaxRule.MISPLACED_DASH),
        ("[a-b-c]", SyntaxRule.MISPLACED_DASH),
        ("[a--]", SyntaxRule.MISPLACED_DASH),
        ("[", SyntaxRule.UNTERMINATED_CLASS),
        ("[^", SyntaxRule.UNTERMINATED_CLASS),
        ("[^bc", SyntaxRule.UNTERMINATED_CLASS),
        ("a[", SyntaxRule.UNTERMINATED_CLASS),
        ("a/b[", SyntaxRule.UNTERMINATED_CLASS),
        ("[z-a]", SyntaxRule.BAD_RANGE),
    ],
)
def test_bad_pattern_rule(pattern, rule):
    with pytest.raises(PatternSyntaxError) as excinfo:
        compile(pattern)
    assert excinfo.value.rule is rule
    assert excinfo.value.pattern == pattern


def test_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        compile("a[")


@pytest.mark.parametrize(
    "pattern, position",
    [
        ("foo//", 4),
        ("a/b[", 3),
        ("[z-a]", 3),
        ("x/**y", 2),
        ("ab/c\\", 4),
    ],
)
def test_syntax_error_position(pattern, position):
    with pytest.raises(PatternSyntaxError) as excinfo:
        compile(pattern)
    assert excinfo.value.position == position


def test_syntax_error_message_names_rule():
    with pytest.raises(PatternSyntaxError, match="unterminated character class"):
        compile("a/[bc")
