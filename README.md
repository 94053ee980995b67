# algonotes

A compact, dependency-free library of classic algorithms, each written as a
plain function over Python lists, strings and small node classes.

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.nodes` | `TreeNode`, `ListNode`, `DoublyListNode`, and helpers to build and read trees and lists |
| `algonotes.binary_search` | lower/upper bounds, rotated-array search, peak finding, searching over the answer |
| `algonotes.tree_traversal` | pre/in/post/level order, zigzag order, right side view |
| `algonotes.tree_paths` | path sums, root-to-leaf paths, diameter, maximum path sum, tree robbery |
| `algonotes.tree_validate` | same tree, symmetric, balanced, BST, complete and perfect checks |
| `algonotes.tree_props` | node counts, maximum and minimum depth |
| `algonotes.tree_ancestor` | lowest common ancestor for binary trees and BSTs |
| `algonotes.tree_build` | rebuilding a tree from two traversals |
| `algonotes.tree_transform` | inverting and merging trees, in place or as copies |
| `algonotes.tree_serialize` | string encodings in preorder and in level order |
| `algonotes.bst` | search, insert, delete, balanced build, k-th smallest, conversion to a sorted doubly linked list |
| `algonotes.linked_list` | adding numbers, copying lists with random pointers, deleting, merging, sorting, partitioning |
| `algonotes.linked_list_pointers` | reversing, rotating, reordering, middle node, cycle detection, intersections, palindromes |
| `algonotes.sorting` | list merge sort, inversion counting, k smallest values, k-th largest value |
| `algonotes.dp_sequences` | edit distance, common subsequences and substrings, LIS, palindromes, pattern matching, digit translations |
| `algonotes.dp_grid` | knapsack, coin change, grid paths, circular house robbery, stairs |
| `algonotes.monotonic_stack` | next/previous greater and smaller, daily temperatures, stock span, trapping rain water, removing digits |
| `algonotes.monotonic_queue` | sliding window extremes, shortest subarray with a sum bound, length-bounded subarray sums |
| `algonotes.prefix_sums` | range additions with a difference array, largest sum of a subarray of at least k values |
| `algonotes.hashing` | two sum, majority element, first missing positive, numbers appearing once |
| `algonotes.parentheses` | validity checks, nesting depth, longest valid substring, minimum fixes, matching positions |
| `algonotes.calculator` | infix evaluation, infix to postfix, RPN evaluation |
| `algonotes.two_pointers` | version comparison, longest distinct-value runs, 3-sum, 4-sum and n-sum |

## Examples

```python
from algonotes.binary_search import lower_bound
from algonotes.calculator import calculate
from algonotes.dp_sequences import edit_distance

lower_bound([1, 2, 4, 4, 7], 4)     # 2
calculate("2*(3+4)")                # 14
edit_distance("horse", "ros")       # 3
```

Trees and linked lists are built from plain lists:

```python
from algonotes.nodes import tree_from_level_order, linked_list_from, linked_list_values
from algonotes.tree_traversal import inorder
from algonotes.linked_list_pointers import reverse_list

root = tree_from_level_order([2, 1, 3])
inorder(root)                                        # [1, 2, 3]

linked_list_values(reverse_list(linked_list_from([1, 2, 3])))   # [3, 2, 1]
```

Invalid input, such as an out-of-range position or a malformed expression,
raises `ValueError` rather than returning a sentinel value.

## What it does not do

The package holds functions only. It has no container classes such as a
minimum-tracking stack, a queue built from stacks or a running-median finder,
and it has no command-line program.

## Requirements

Python 3.10 or later. The package has no runtime dependencies; the test suite
uses pytest and hypothesis, available through the `test` extra.