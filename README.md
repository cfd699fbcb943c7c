# dsakit

A collection of classic data-structure and algorithm exercises, written as small,
plain functions and classes. It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.recursion` | `bubble_sort`, `factorial`, `count_up`, `contains`, `power`, `recursive_sum`, `reverse_string`, `is_palindrome`, `ends_match` |
| `dsakit.searching` | `binary_search`, `first_occurrence`, `last_occurrence`, `peak_index`, `pivot_index`, `min_eating_speed`, `hours_needed`, `split_array_min_largest`, `can_split` |
| `dsakit.matrix` | `row_sums`, `largest_sum_row`, `spiral_order`, `minimum_effort_path`, `pascal_row`, `pascal_triangle` |
| `dsakit.arrays` | `two_sum`, `three_sum`, `max_area`, `product_except_self`, `reverse_integer`, `merge_sorted`, `swap_pairs`, `check_possibility`, `chalk_replacer`, `longest_balanced_subarray`, `longest_common_prefix`, `max_k_sum_pairs`, `content_children`, `total_fruit`, `count_at_most_k_distinct`, `count_exactly_k_distinct`, `divide_players` |
| `dsakit.dynamic` | `rob`, `mincost_tickets`, `num_squares`, `min_sum_of_squares` |
| `dsakit.strings` | `CharacterCounts`, `count_characters`, `reverse_with_stack`, `reverse_vowels`, `digit_sum_after_transforms`, `count_substrings_with_abc`, `longest_palindrome`, `check_inclusion`, `prefix_function`, `repeated_substring_pattern`, `shortest_palindrome` |
| `dsakit.linkedlist` | `Node`, `from_iterable`, `to_list`, `format_list`, `push_front`, `length`, `middle`, `reverse`, `sort_list`, `remove_self_linked` |
| `dsakit.trees` | `TreeNode`, `build_tree`, `build_level_order`, `inorder`, `preorder`, `postorder`, `level_order` |
| `dsakit.graph` | `Graph` with `add_edge`, `neighbours`, `format` |
| `dsakit.stack` | `BoundedStack` with `push`, `pop`, `peek`, `is_empty`; `StackOverflowError`, `StackUnderflowError` |

Functions take their data as arguments and return a result; those that sort or
rearrange return a new list rather than changing the one passed in. Inputs that
make no sense (a negative `factorial`, an empty grid for `minimum_effort_path`,
fewer hours than piles for `min_eating_speed`, and the like) raise `ValueError`.

## Examples

```python
from dsakit.searching import first_occurrence, last_occurrence
from dsakit.dynamic import rob, num_squares
from dsakit.strings import shortest_palindrome
from dsakit.trees import build_tree, inorder

values = [1, 2, 3, 3, 3, 3, 4, 5, 6, 7]
first_occurrence(values, 3)   # 2
last_occurrence(values, 3)    # 5

rob([2, 7, 9, 3, 1])          # 12
num_squares(12)               # 3

shortest_palindrome("abcd")   # "dcbabcd"

# Pre-order values, with -1 marking an empty child.
root = build_tree([3, 7, 1, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
inorder(root)                 # [1, 7, 11, 3, 17, 5]
```

Linked lists and graphs:

```python
from dsakit.linkedlist import from_iterable, middle, reverse, format_list
from dsakit.graph import Graph

head = from_iterable([10, 20, 30, 40, 50, 60])
middle(head).data             # 40
format_list(reverse(head))    # "60 50 40 30 20 10"

g = Graph()
g.add_edge(1, 2, directed=False)
g.add_edge(1, 3, directed=False)
print(g.format())
# 1 -> 2, 3
# 2 -> 1
# 3 -> 1
```

The fixed-capacity stack raises an error instead of overflowing quietly:

```python
from dsakit.stack import BoundedStack, StackOverflowError

stack = BoundedStack(2)
stack.push(22)
stack.push(43)
stack.peek()                  # 43
try:
    stack.push(45)
except StackOverflowError:
    pass
```

## What it does not do

dsakit is a library only. It has no command-line program, does not read values
from standard input and prints nothing; to build a tree or a graph from typed-in
numbers, read them yourself and pass them to `build_tree`, `build_level_order`
or `Graph.add_edge`.