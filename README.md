# algokit

A small collection of classic algorithms, written as plain Python functions.
It needs nothing outside the standard library and runs on Python 3.10 or later.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is included

### Sequences (`algokit.sequences`)

- `candies(ratings)`: the fewest candies for children standing in a row.
  Every child gets at least one candy. A child rated higher than a neighbour
  gets more candies than that neighbour. An empty row needs 0.
- `count_divisible_subarrays(values, k)`: the number of contiguous, non-empty
  subarrays whose sum is divisible by `k`. It raises `ValueError` unless `k`
  is positive.
- `substring_sum(digits)`: the sum of every substring of a decimal digit
  string, each read as a number, modulo 1 000 000 007. It raises `ValueError`
  for a character that is not a digit.
- `sansa_xor(values)`: the XOR of the XORs of all contiguous subarrays.

### Running median (`algokit.median`)

- `running_median(values)`: the median after each value is added, returned as
  a list of floats.

### Waiter (`algokit.waiter`)

- `generate_primes(count)`: the first `count` primes, in increasing order.
- `waiter(numbers, q)`: the order in which the waiter hands out the plates.
  `numbers` lists the plates from the bottom of the stack to the top. In each
  of `q` rounds, the plates divisible by the next prime are handed out top
  first. The plates that remain form the new stack. After the last round, the
  plates still on the stack are handed out from the top.

### Heaps (`algokit.heaps`)

- `kth_largest(nums, k)`: the `k`-th largest value. If `k` is larger than the
  number of values, it returns the smallest value. It raises `ValueError` if
  `k < 1` or if `nums` is empty.
- `top_k_frequent(nums, k)`: up to `k` values, most frequent first.
- `k_smallest_pairs(nums1, nums2, k)`: the `k` pairs `(a, b)` with the
  smallest sums, in increasing order of sum. Both inputs must be sorted in
  ascending order.
- `least_interval(tasks, n)`: the fewest time units needed to run all tasks
  when two equal tasks must be at least `n` units apart. Idle units count.

### Linked lists (`algokit.linked_list`)

- `ListNode(val, next)`: a singly linked node. Iterating over a node yields
  the values from that node to the end of the list.
- `from_values(values)`: builds a list from an iterable of values. It returns
  `None` when the iterable is empty.
- `to_list(head)`: returns the values of a list. It accepts `None`.
- `merge_k_lists(lists)`: merges sorted linked lists into one sorted list by
  relinking their nodes. `None` entries are skipped.

### Binary trees (`algokit.tree`)

- `TreeNode(val, left, right)`: a binary tree node.
- `prune_tree(root)`: removes every subtree whose values are all 0 and returns
  the new root. The result is `None` if nothing is left.
- `inorder(root)`: the values of the tree in in-order sequence.

### Windows (`algokit.windows`)

- `sliding_window_max(nums, k)`: the maximum of each window of `k` consecutive
  values. It raises `ValueError` if `k < 1`.
- `shortest_subarray(nums, k)`: the length of the shortest non-empty
  subarray whose sum is at least `k`, or `-1` if no such subarray exists.

## Example

```python
from algokit.heaps import kth_largest
from algokit.linked_list import from_values, merge_k_lists, to_list
from algokit.windows import sliding_window_max

kth_largest([3, 2, 1, 5, 6, 4], 2)          # 5
sliding_window_max([1, 3, -1, -3, 5, 3, 6, 7], 3)
# [3, 3, 5, 5, 6, 7]
to_list(merge_k_lists([from_values([1, 4, 5]), from_values([1, 3, 4])]))
# [1, 1, 3, 4, 4, 5]
```

## What it does not do

algokit is a library of functions only. It installs no commands, and it has
no programs that read problem input from standard input or write answers to
files. To use it, call the functions from your own code.