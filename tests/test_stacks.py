import pytest

from pushswap.stacks import Stack, StackError, Stacks, parse_operation


VALUES = [5, 1, 4, 2, 3]


def test_stack_iterates_from_top():
    stack = Stack(VALUES)
    assert list(stack) == VALUES
    assert len(stack) == len(VALUES)
    assert stack.top() == VALUES[0]


def test_stack_rotate_moves_top_to_bottom():
    stack = Stack(VALUES)
    stack.rotate()
    assert list(stack) == VALUES[1:] + VALUES[:1]


def test_stack_reverse_rotate_moves_bottom_to_top():
    stack = Stack(VALUES)
    stack.rotate(reverse=True)
    assert list(stack) == VALUES[-1:] + VALUES[:-1]


def test_stack_rotation_round_trip():
    stack = Stack(VALUES)
    stack.rotate()
    stack.rotate(reverse=True)
    assert list(stack) == VALUES
    for _ in VALUES:
        stack.rotate()
    assert list(stack) == VALUES


def test_stack_swap_twice_is_identity():
    stack = Stack(VALUES)
    stack.swap()
    assert list(stack)[:2] == [VALUES[1], VALUES[0]]
    assert list(stack)[2:] == VALUES[2:]
    stack.swap()
    assert list(stack) == VALUES


def test_stack_push_pop_round_trip():
    stack = Stack(VALUES)
    stack.push(99)
    assert stack.top() == 99
    assert stack.pop() == 99
    assert list(stack) == VALUES


@pytest.mark.parametrize("action", ["top", "pop", "rotate", "swap"])
def test_stack_empty_errors(action):
    with pytest.raises(StackError):
        getattr(Stack(), action)()


def test_stack_swap_single_element_errors():
    with pytest.raises(StackError):
        Stack([7]).swap()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("sa", ("s", "a", False)),
        ("ss", ("s", "s", False)),
        ("pb", ("p", "b", False)),
        ("rr", ("r", "r", False)),
        ("rra", ("r", "a", True)),
        ("rrr", ("r", "r", True)),
    ],
)
def test_parse_operation(text, expected):
    assert parse_operation(text) == expected


@pytest.mark.parametrize("text", ["", "s", "sa\n", "rrrr", "px", "SA", "ra "])
def test_parse_operation_rejects_unknown(text):
    with pytest.raises(StackError):
        parse_operation(text)


def test_push_moves_values_between_stacks():
    stacks = Stacks(VALUES)
    stacks.push("b")
    stacks.push("b")
    assert list(stacks.b) == [VALUES[1], VALUES[0]]
    assert list(stacks.a) == VALUES[2:]
    stacks.push("a")
    assert list(stacks.a) == [VALUES[1]] + VALUES[2:]
    assert stacks.operations == ["pb", "pb", "pa"]


def test_push_preserves_total_size():
    stacks = Stacks(VALUES)
    for op in ["pb", "pb", "pb", "pa", "pb"]:
        stacks.apply(op)
        assert len(stacks.a) + len(stacks.b) == len(VALUES)
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(VALUES)


def test_rotate_both_and_record():
    stacks = Stacks(VALUES)
    stacks.push("b")
    stacks.push("b")
    stacks.rotate("r")
    stacks.rotate("r", reverse=True)
    assert list(stacks.a) == VALUES[2:]
    assert list(stacks.b) == [VALUES[1], VALUES[0]]
    assert stacks.operations == ["pb", "pb", "rr", "rrr"]


def test_swap_both():
    stacks = Stacks(VALUES)
    stacks.push("b")
    stacks.push("b")
    stacks.swap("s")
    assert list(stacks.a)[:2] == [VALUES[3], VALUES[2]]
    assert list(stacks.b) == [VALUES[0], VALUES[1]]
    assert stacks.operations[-1] == "ss"


def test_lenient_mode_records_no_op():
    stacks = Stacks([3])
    stacks.push("a")
    stacks.swap("a")
    stacks.rotate("b")
    assert list(stacks.a) == [3]
    assert len(stacks.b) == 0
    assert stacks.operations == ["pa", "sa", "rb"]


@pytest.mark.parametrize("operation", ["pa", "sa", "sb", "ss", "rb", "rr", "rrb", "rrr"])
def test_strict_mode_rejects_impossible(operation):
    stacks = Stacks([3], strict=True)
    with pytest.raises(StackError):
        stacks.apply(operation)
    assert list(stacks.a) == [3]
    assert stacks.operations == []


def test_invalid_modes_raise():
    stacks = Stacks(VALUES)
    with pytest.raises(StackError):
        stacks.swap("r")
    with pytest.raises(StackError):
        stacks.push("s")
    with pytest.raises(StackError):
        stacks.rotate("s")


def test_is_sorted():
    assert Stacks(sorted(VALUES)).is_sorted() is True
    assert Stacks(VALUES).is_sorted() is False
    stacks = Stacks(sorted(VALUES))
    stacks.push("b")
    assert stacks.is_sorted() is False
    stacks.push("a")
    assert stacks.is_sorted() is True


def test_apply_sequence_sorts():
    stacks = Stacks([2, 1, 3], strict=True)
    stacks.apply("sa")
    assert stacks.is_sorted() is True
    assert list(stacks.a) == sorted([2, 1, 3])