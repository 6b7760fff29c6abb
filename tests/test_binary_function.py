import itertools
import operator

import pytest

from dfagames.binary_function import BinaryFunction


OPERATIONS = {
    "and": operator.and_,
    "or": operator.or_,
    "xor": operator.xor,
    "implies": lambda a, b: (not a) or b,
    "difference": lambda a, b: a and not b,
}

AND = BinaryFunction(OPERATIONS["and"])
OR = BinaryFunction(OPERATIONS["or"])
XOR = BinaryFunction(OPERATIONS["xor"])
IMPLIES = BinaryFunction(OPERATIONS["implies"])
DIFFERENCE = BinaryFunction(OPERATIONS["difference"])

ALL = [AND, OR, XOR, IMPLIES, DIFFERENCE]


def test_call_evaluates_function():
    table = [(a, b, AND(a, b)) for a, b in itertools.product([False, True], repeat=2)]
    assert table == [
        (False, False, False),
        (False, True, False),
        (True, False, False),
        (True, True, True),
    ]


def test_call_accepts_integers():
    assert OR(0, 1) is True
    assert XOR(1, 1) is False


@pytest.mark.parametrize(
    "function, left, right",
    [
        (AND, 0, 0),
        (OR, 1, 1),
        (XOR, None, None),
        (IMPLIES, None, 1),
        (DIFFERENCE, 0, None),
    ],
)
def test_sinks(function, left, right):
    assert function.left_sink() == left
    assert function.right_sink() == right


@pytest.mark.parametrize(
    "function, commutative",
    [(AND, True), (OR, True), (XOR, True), (IMPLIES, False), (DIFFERENCE, False)],
)
def test_commutativity(function, commutative):
    assert function.is_commutative() == commutative


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_left_sink_fixes_result(name):
    function = BinaryFunction(OPERATIONS[name])
    sink = function.left_sink()
    if sink is None:
        assert [function.has_left_sink(False), function.has_left_sink(True)] == [False, False]
    else:
        assert [function(sink, other) for other in (False, True)] == [bool(sink)] * 2


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_right_sink_fixes_result(name):
    function = BinaryFunction(OPERATIONS[name])
    sink = function.right_sink()
    if sink is None:
        assert [function.has_right_sink(False), function.has_right_sink(True)] == [False, False]
    else:
        assert [function(other, sink) for other in (False, True)] == [bool(sink)] * 2


def test_zero_sink_preferred_when_both_exist():
    first = BinaryFunction(lambda a, b: a)
    assert first.has_left_sink(False) and first.has_left_sink(True)
    assert first.left_sink() == 0
    assert first.right_sink() is None


@pytest.mark.parametrize("function", ALL)
def test_commutative_matches_swapped_arguments(function):
    swapped = BinaryFunction(lambda a, b, f=function: f(b, a))
    assert function.is_commutative() == all(
        function(a, b) == swapped(a, b) for a, b in itertools.product([False, True], repeat=2)
    )
    assert swapped.left_sink() == function.right_sink()
    assert swapped.right_sink() == function.left_sink()