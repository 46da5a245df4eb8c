# algosuite

A library of small, self-contained algorithms over lists, strings, grids,
linked structures and query streams. Functions take ordinary Python values
(lists, strings, integers) and return new values. The one exception is
`algosuite.grids.rotate_image`, which rotates the square matrix it is given
in place and returns `None`.

The package has no dependencies beyond the standard library. Its `test`
extra installs pytest and hypothesis for running the test suite in `tests/`.

## Modules

- `algosuite.arrays`: `two_sum`, `search_rotated`, `find_min_rotated`,
  `find_min_rotated_with_duplicates`, `max_rotate_function`, `sort_array`,
  `is_sorted_and_rotated`, `min_distance_to_target`,
  `max_distance_non_increasing`, `max_distance_different_colors`,
  `minimum_candy_cost`, `is_good_array`, `separate_digits`,
  `min_digit_sum_element`, `min_moves_complementary`,
  `minimum_initial_energy`, `asteroids_destroyed`, `closest_target`.
- `algosuite.strings`: `is_anagram`, `is_rotation`,
  `min_alternating_changes`, `decode_ciphertext`, `two_edit_words`,
  `can_be_equal`, `check_strings`, `count_special_chars`,
  `count_strictly_special_chars`, `find_string_from_lcp`, `generate_string`,
  `furthest_distance_from_origin`, `minimum_typing_distance`.
- `algosuite.grids`: `rotate_image` (in place), `rotate_the_box`,
  `rotate_grid`, `min_operations_uni_value`, `maximum_amount`,
  `max_path_score`, `maximum_grid_score`.
- `algosuite.distances`: `rotated_digits`, `earliest_finish_time`,
  `minimum_distance_three_equal`, `reverse_digits`,
  `min_mirror_pair_distance`, `mirror_distance`, `max_distance_on_square`.
- `algosuite.robots`: `judge_circle`, `robot_sim`, the `Robot` perimeter
  walker (`step`, `position`, `direction`), `survived_robots_healths`,
  `minimum_total_distance`, `max_walls`.
- `algosuite.jumps`: `can_reach_zero`, `can_reach_end`, `max_jumps`,
  `maximum_jumps`, `min_prime_jumps`, `max_reachable_values`.
- `algosuite.queries`: `MaxSegmentTree` (`update`, `query`),
  `block_placement_results`, `xor_after_queries`,
  `xor_after_queries_batched`, `closest_equal_queries`, `string_indices`,
  `longest_common_prefix`, `sum_of_distances`, `prefix_common_array`.
- `algosuite.connectivity`: `UnionFind` (`find`, `union`),
  `minimum_hamming_distance`, `contains_cycle`, `has_valid_path`.
- `algosuite.structures`: `ListNode` (`from_values`, iteration over values),
  `TreeNode`, `rotate_right`, `preorder_traversal`, `binary_tree_paths`.

## Examples

```python
from algosuite.arrays import two_sum, search_rotated
from algosuite.strings import is_anagram, decode_ciphertext
from algosuite.grids import rotate_image
from algosuite.structures import ListNode, rotate_right
from algosuite.robots import Robot
from algosuite.queries import MaxSegmentTree

sorted(two_sum([2, 7, 11, 15], 9))           # [0, 1]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)     # 4
is_anagram("anagram", "nagaram")             # True
decode_ciphertext("ch   ie   pr", 3)         # "cipher"

matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
rotate_image(matrix)                         # returns None
# matrix is now [[7, 4, 1], [8, 5, 2], [9, 6, 3]]

head = ListNode.from_values([1, 2, 3, 4, 5])
list(rotate_right(head, 2))                  # [4, 5, 1, 2, 3]

robot = Robot(6, 3)
robot.step(2)
robot.position()                             # (2, 0)
robot.direction()                            # "East"

tree = MaxSegmentTree(10)
tree.update(3, 7)
tree.query(0, 5)                             # 7
```

## Results and errors

Where a function looks for something that may not exist, it says so with a
value rather than an exception: `-1` for an index, distance or count
(for example `search_rotated`, `closest_target`, `maximum_jumps`,
`min_operations_uni_value`), an empty string (`find_string_from_lcp`,
`generate_string`) or an empty list (`two_sum`).

Inputs that the algorithms cannot work on raise `ValueError`: among others,
empty arrays passed to `find_min_rotated` or `max_jumps`, a non-square
matrix passed to `rotate_image`, a word containing characters other than
`A`–`Z` passed to `minimum_typing_distance`, factories that cannot repair
every robot in `minimum_total_distance`, or a non-positive step in the
range-multiplication queries. `MaxSegmentTree` raises `IndexError` for an
index outside `0..size`.

## What the package does not do

It is a library only: there is no command-line program, no input parsing
and no file or network input or output. Callers supply the data as Python
values and read the results from the return values.