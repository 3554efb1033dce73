import pytest

from pushswap.stack import Node, Stack


def _indexed(values):
    stack = Stack(values)
    stack.assign_indexes()
    return stack


def test_construction_keeps_order_from_top():
    stack = Stack([5, 3, 9])
    assert stack.values() == [5, 3, 9]
    assert len(stack) == 3
    assert [node.value for node in stack] == [5, 3, 9]


def test_new_nodes_start_with_index_zero():
    stack = Stack([7, 8])
    assert stack.indexes() == [0, 0]


def test_push_and_pop_round_trip():
    stack = Stack([1, 2])
    node = Node(42)
    stack.push(node)
    assert stack.values() == [42, 1, 2]
    assert stack.pop() is node
    assert stack.values() == [1, 2]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_append_puts_node_at_bottom():
    stack = Stack([1])
    stack.append(Node(2))
    assert stack.values() == [1, 2]
    assert stack[-1].value == 2


def test_swap_exchanges_values_and_indexes():
    stack = _indexed([10, 20, 30])
    stack.swap()
    assert stack.values() == [20, 10, 30]
    assert stack.indexes() == [1, 0, 2]


@pytest.mark.parametrize("values", [[], [4]])
def test_moves_are_noops_on_short_stacks(values):
    stack = Stack(values)
    stack.swap()
    stack.rotate()
    stack.reverse_rotate()
    assert stack.values() == values


def test_rotate_moves_top_to_bottom():
    stack = Stack([1, 2, 3])
    stack.rotate()
    assert stack.values() == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stack = Stack([1, 2, 3])
    stack.reverse_rotate()
    assert stack.values() == [3, 1, 2]


def test_rotate_then_reverse_rotate_is_identity():
    stack = Stack([4, 8, 15, 16, 23, 42])
    stack.rotate()
    stack.reverse_rotate()
    assert stack.values() == [4, 8, 15, 16, 23, 42]


def test_assign_indexes_ranks_values():
    stack = _indexed([-5, 100, 0, 7])
    assert stack.indexes() == [0, 3, 1, 2]


def test_assign_indexes_is_permutation():
    values = [9, -3, 14, 2, 0, 77, -40]
    stack = _indexed(values)
    assert sorted(stack.indexes()) == list(range(len(values)))


def test_is_sorted():
    assert _indexed([1, 2, 3]).is_sorted()
    assert not _indexed([2, 1, 3]).is_sorted()
    assert Stack().is_sorted()
    assert Stack([9]).is_sorted()


def test_min_max_values_and_indexes():
    stack = _indexed([3, -1, 8, 0])
    assert stack.min_value() == -1
    assert stack.max_value() == 8
    assert stack.min_index() == 0
    assert stack.max_index() == 3


def test_min_max_of_empty_stack_are_zero():
    stack = Stack()
    assert stack.min_value() == 0
    assert stack.max_value() == 0
    assert stack.min_index() == 0
    assert stack.max_index() == 0


def test_position_finds_index():
    stack = _indexed([30, 10, 20])
    assert stack.position(0) == 1
    assert stack.position(stack.max_index()) == 0


def test_position_missing_raises():
    with pytest.raises(ValueError):
        _indexed([1, 2]).position(5)


def test_disorder_of_sorted_and_reversed():
    assert _indexed([1, 2, 3, 4]).disorder() == 0.0
    assert _indexed([4, 3, 2, 1]).disorder() == 1.0


def test_disorder_of_short_stacks_is_zero():
    assert Stack().disorder() == 0.0
    assert _indexed([5]).disorder() == 0.0


def test_disorder_single_inversion_of_three():
    assert _indexed([2, 1, 3]).disorder() == pytest.approx(1 / 3)


def test_has_duplicate():
    assert Stack([1, 2, 1]).has_duplicate()
    assert not Stack([1, 2, 3]).has_duplicate()
    assert not Stack().has_duplicate()