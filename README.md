# algokit

Classic algorithms with plain Python interfaces, a small integer
calculator that runs from the command line, and an interactive car rental
counter that prints an invoice.

It needs only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module                 | Contents                                                                   |
|------------------------|----------------------------------------------------------------------------|
| `algokit.sorting`      | `bubble_sort`, `insertion_sort`, `heap_sort`, `merge_sort`                 |
| `algokit.searching`    | `binary_search`                                                            |
| `algokit.trees`        | `BinarySearchTree`                                                         |
| `algokit.greedy`       | `select_activities`, `fractional_knapsack`, `Placement`, `FractionalResult` |
| `algokit.dynamic`      | `knapsack_01`, `longest_common_subsequence`                                |
| `algokit.palindromes`  | `is_palindrome_number`, `palindrome_report`                                |
| `algokit.graphs`       | `bellman_ford`, `dijkstra`, `floyd_warshall`, `kruskal`, `format_matrix`, `Edge`, `NegativeCycleError`, `INF` |
| `algokit.huffman`      | `build_huffman_tree`, `huffman_codes`, `HuffmanNode`                       |
| `algokit.nqueens`      | `solve_n_queens`, `format_board`                                           |
| `algokit.fixed_array`  | `FixedArray`                                                               |
| `algokit.calculator`   | `calculate`, `Operation`, `Rectangle`, `main`                              |
| `algokit.rental`       | `CarModel`, `Customer`, `Booking`, `check_pin`, `render_invoice`, `main`   |

## Examples

### Sorting and searching

Each sort takes any iterable and returns a new list. The input is left as it was.

```python
from algokit.sorting import merge_sort
from algokit.searching import binary_search

merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
binary_search([1, 3, 5, 7, 9], 7)     # 3
binary_search([1, 3, 5, 7, 9], 4)     # None
```

### Binary search tree

```python
from algokit.trees import BinarySearchTree

tree = BinarySearchTree(allow_duplicates=False)
for value in (8, 3, 10, 1, 6):
    tree.insert(value)

list(tree.inorder())    # [1, 3, 6, 8, 10]
list(tree.preorder())   # [8, 3, 1, 6, 10]
6 in tree               # True
len(tree)               # 5
```

With `allow_duplicates=True` (the default), an equal value goes into the
right subtree. With `False`, an equal value is ignored and `insert` returns `False`.

### Greedy and dynamic programming

```python
from algokit.greedy import fractional_knapsack, select_activities
from algokit.dynamic import knapsack_01, longest_common_subsequence

select_activities([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9])   # chosen indices
result = fractional_knapsack(50, [10, 20, 30], [60, 100, 120])
result.total_profit
for placement in result.placements:
    print(placement.item, placement.percent, placement.space_left)

knapsack_01(50, [10, 20, 30], [60, 100, 120])   # 220
longest_common_subsequence("ACADB", "CBDA")
```

`select_activities` expects the activities already sorted by finishing time.
It always takes the first activity.

`fractional_knapsack` fills the bag by the best value per weight. When the
bag runs out of room, it takes part of the last item.

### Graphs

The adjacency matrices for `dijkstra` and `kruskal` use `0` to mean "no
edge". `kruskal` reads only the lower triangle of its matrix.
`floyd_warshall` expects `INF` for a missing edge.

```python
from algokit.graphs import INF, Edge, bellman_ford, floyd_warshall, format_matrix

edges = [Edge(0, 1, 5), Edge(0, 2, 4), Edge(1, 3, 3), Edge(2, 1, 6), Edge(3, 2, 2)]
bellman_ford(4, edges, 0)   # ([0, 5, 4, 8], [None, 0, 0, 1])

print(format_matrix(floyd_warshall([
    [0, 3, INF, 5],
    [2, 0, INF, 4],
    [INF, 1, 0, INF],
    [INF, INF, 2, 0],
])))
```

- `bellman_ford` raises `NegativeCycleError` if a negative-weight cycle can be reached from the source.
- `dijkstra` returns `INF` for vertices it cannot reach.
- `kruskal` returns the chosen `Edge` objects in the order it accepted them.

### Huffman codes and N-Queens

```python
from algokit.huffman import huffman_codes
from algokit.nqueens import format_board, solve_n_queens

huffman_codes("ABCD", [5, 1, 6, 3])   # {symbol: bit string}

board = solve_n_queens(4)
print(format_board(board))
```

`solve_n_queens` returns the first board it finds, with `1` marking a queen.
It returns `None` when no solution exists.

### Fixed-capacity array

`FixedArray` holds at most `FixedArray.CAPACITY` (10) items.

- `insert(position, value)` shifts the later items right. When the array is full, the last item falls off the end and `insert` returns it.
- `delete(position)` removes the item at that position and returns it.

## Command-line programs

### `algokit-calc`

An integer calculator. Give it the operation number and two integers:

- `1` add
- `2` subtract
- `3` multiply
- `4` divide (truncates toward zero)

```
algokit-calc 1 2 3
```

This prints `the total sum = 5`. An unknown operation number, or a division
by zero, prints an error to standard error and exits with status 1.

### `algokit-rental`

An interactive car rental counter. It works through these steps:

1. Asks for an access PIN.
2. Collects the customer's details.
3. Offers five car models, `A` to `E`, each with its own daily rate.
4. Asks for the number of cars, the number of days, the date and the advance paid.
5. Prints an invoice with the rental fee and the amount still due.

```
algokit-rental --data-dir path/to/texts --no-pause
```

Options:

- `--data-dir` names a directory that may hold `A.txt` to `E.txt` and `thank_you.txt`.
  - When a model is chosen, the program prints the matching car description file if it exists.
  - At the end, it prints `thank_you.txt` if it exists.
- `--no-pause` skips the delays and the final "Press Enter" prompt.

The fare arithmetic and the invoice are also available without the prompts:

```python
from algokit.rental import Booking, CarModel, Customer, render_invoice

booking = Booking(Customer("Ada", "Example"), CarModel.from_code("B"), cars=1, days=3, advance=1000)
booking.rental_fee   # 5100
booking.due          # 4100
print(render_invoice(booking))
```

## What it does not do

The rental counter handles one booking per run. It does not store bookings,
customers or invoices anywhere. Once the invoice is printed, the session
ends.

The counter states a minimum advance (`MINIMUM_ADVANCE`) in its prompt but
does not enforce it.