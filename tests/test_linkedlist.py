from dsakit.linkedlist import (
    Node,
    format_list,
    from_iterable,
    length,
    middle,
    push_front,
    remove_self_linked,
    reverse,
    sort_list,
    to_list,
)


def test_round_trip():
    values = [4, 5, 3, 2, 1]
    assert to_list(from_iterable(values)) == values
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_node_iterates_values():
    values = [10, 20, 30]
    assert list(from_iterable(values)) == values


def test_push_front_from_source():
    head = Node(10)
    head = push_front(head, 12)
    assert to_list(head) == [12, 10]


def test_format_list():
    assert format_list(from_iterable([10, 20, 30])) == "10 20 30"
    assert format_list(None) == ""


def test_length():
    values = [1, 2, 3, 4]
    assert length(from_iterable(values)) == len(values)
    assert length(None) == 0


def test_middle_from_source():
    head = from_iterable([10, 20, 30, 40, 50, 60])
    assert middle(head).data == 40


def test_middle_odd_and_empty():
    values = [1, 2, 3, 4, 5]
    assert middle(from_iterable(values)).data == values[len(values) // 2]
    assert middle(None) is None


def test_reverse():
    values = [1, 2, 3, 4, 5]
    assert to_list(reverse(from_iterable(values))) == values[::-1]
    assert reverse(None) is None
    single = Node(7)
    assert reverse(single) is single


def test_sort_list():
    values = [5, 1, 4, 2, 3, 1]
    head = from_iterable(values)
    assert to_list(sort_list(head)) == sorted(values)
    assert to_list(head) == values
    assert sort_list(None) is None


def test_remove_self_linked_without_loop_keeps_list():
    head = from_iterable([10, 20, 30])
    assert to_list(remove_self_linked(head)) == [10, 20, 30]
    assert remove_self_linked(None) is None


def test_remove_self_linked_cuts_loop():
    head = from_iterable([10, 20])
    looped = Node(30)
    looped.next = looped
    head.next.next = looped
    result = remove_self_linked(head)
    assert result is head
    assert to_list(result) == [10, 20]


def test_remove_self_linked_head_loop():
    head = Node(1)
    head.next = head
    assert remove_self_linked(head) is None