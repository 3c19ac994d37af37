from hypothesis import given
from hypothesis.strategies import integers, none, one_of

from bindguard import if_matches
from bindguard.shape import ANY, Capture, Present


class Counter:
    def __init__(self):
        self.count = 0

    def __call__(self, result):
        def mapping(**captures):
            self.count += 1
            return result(**captures)

        return mapping


both_present = (Present(Capture("x")), Present(Capture("y")))


def test_average_of_present_values():
    average = if_matches((41, 43), both_present, lambda x, y: (x + y) // 2)

    assert average == 42


def test_missing_value_does_not_match():
    counter = Counter()

    result = if_matches((41, None), (Present(Capture("x")), Present(ANY)), counter(
        lambda x: x
    ))

    assert result is None
    assert counter.count == 0


def test_false_guard_skips_mapping():
    counter = Counter()

    per_bin = if_matches(
        (100, 0),
        (Present(Capture("v")), Present(Capture("b"))),
        counter(lambda v, b: v / b),
        when=lambda v, b: b != 0,
    )

    assert per_bin is None
    assert counter.count == 0


def test_true_guard_evaluates_mapping_once():
    counter = Counter()
    guard_calls = []

    def guard(v, b):
        guard_calls.append((v, b))
        return b != 0

    per_bin = if_matches(
        (100, 25),
        (Present(Capture("v")), Present(Capture("b"))),
        counter(lambda v, b: v / b),
        when=guard,
    )

    assert per_bin == 4
    assert counter.count == 1
    assert guard_calls == [(100, 25)]


def test_guard_not_evaluated_without_match():
    guard_calls = []

    result = if_matches(
        "not a pair",
        both_present,
        lambda x, y: x,
        when=lambda x, y: guard_calls.append(1) or True,
    )

    assert result is None
    assert not guard_calls


@given(one_of(integers(), none()), one_of(integers(), none()))
def test_mapping_called_once_on_match(a, b):
    counter = Counter()

    result = if_matches((a, b), both_present, counter(lambda x, y: x + y))

    if a is None or b is None:
        assert result is None
        assert counter.count == 0
    else:
        assert result == a + b
        assert counter.count == 1


def test_shape_without_captures():
    assert if_matches(3, ANY, lambda: "matched") == "matched"


def test_literal_shape():
    assert if_matches(3, 3, lambda: "three") == "three"
    assert if_matches(4, 3, lambda: "three") is None
