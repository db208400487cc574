# dsdemos

Three small data-structure demonstrations. Each one works as a library and as a
command-line tool.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Airport runway simulation

`dsdemos.airport` simulates an airport with these parts:

- four runways
- six landing queues, grouped in three pairs
- four takeoff queues
- one emergency queue

### What happens in each time step

1. Between 0 and 4 planes arrive to land, each with 1 to 10 units of fuel.
   Each one joins the least loaded pair of landing queues.
2. Between 0 and 3 planes arrive to take off. Each one joins the shortest
   takeoff queue.
3. The simulation looks for a landing queue whose front plane has exactly zero
   fuel. The first one found moves that plane to the emergency queue. At most
   one plane moves per step.
4. Each runway serves at most one plane:
   - Emergencies go first, on any runway.
   - Runway 1 otherwise serves only takeoff queue 1.
   - Runways 2 to 4 each serve the longer queue of their landing pair first,
     and their own takeoff queue after that.
5. Every waiting plane's waiting time goes up by one.
6. Every waiting landing plane burns one unit of fuel. A plane that is already
   below zero fuel when this happens is counted as a crash.

The first five steps are printed in detail.

### The summary

At the end the command prints:

- the average landing waiting time per step
- the average takeoff waiting time per step
- the average fuel left in planes that landed
- the number of emergency planes
- the number of crashes

### Running it

```
dsdemos-airport 100 --seed 1
```

If you leave out the step count, the command asks for it on standard input.
`--seed` makes a run repeatable. The step count must be positive.

### Using it from Python

Call `simulate(steps, rng, out)`. It returns a `SimulationResult`, which
`format_result(result)` turns into the summary text.

For finer control, drive an `Airport` yourself with these methods:
`add_landing`, `add_takeoff`, `handle_emergency`, `serve_runways`, `tick`,
`step` and `result`.

The queue classes are `LandingQueue`, `TakeoffQueue` and `EmergencyQueue`. They
can also be used on their own.

## Huffman coding

`dsdemos.huffman` builds a Huffman tree from symbols and their frequencies. It
lists each symbol's code in sorted order and reports the weighted external path
length (WELP).

```
dsdemos-huffman
```

With no argument, the command uses a fixed frequency table for the letters A
to Z.

```
dsdemos-huffman input.txt
```

With a file, the command does four things:

1. It counts the ASCII letters in the file.
2. It builds the tree from those counts.
3. It collects every `0` and `1` in the file into a bit string.
4. It decodes that bit string with the tree.

If the file cannot be read, or the bits do not follow the tree, the command
prints an error and exits with status 1.

In code:

```python
from dsdemos.huffman import build_tree

tree = build_tree("ABC", [5, 2, 1])
print(tree.codes())                 # {'C': '00', 'B': '01', 'A': '1'}
print(tree.sorted_codes())          # ['A : 1', 'B : 01', 'C : 00']
print(tree.weighted_path_length())  # 11
print(tree.decode("0101"))          # BB
```

`HuffmanTree.decode` works as follows:

- It stops at the first character that is not a bit.
- It drops a trailing incomplete code.
- It raises `ValueError` when a bit leads off the tree.

`count_letters(text)` and `extract_bits(text)` are the helpers the command uses
on a file's text.

## Sorting

`dsdemos.sorting` provides `insertion_sort`, `quick_sort` and `radix_sort`.
Each one takes an iterable of integers and returns a new sorted list. Pass a
text stream as `out` to have the intermediate steps written to it:

- `insertion_sort` writes the list after each insertion.
- `quick_sort` writes the list after each partition.
- `radix_sort` writes the buckets and the resulting chain for each pass.

`radix_sort` makes three passes over the decimal digits, so it orders values
from 0 to 999. It raises `ValueError` for negative values.

```
dsdemos-sort 20 --seed 1
```

What the command sorts depends on the count:

- A count of zero or less sorts a fixed sample of eleven numbers.
- Any other count sorts that many random numbers from 1 to 999.

If you leave out the count, the command reads it from standard input.

When the count is 100 or less, every step is printed. Each sort is timed, and
the quick and radix results are checked against insertion sort.

In code, `run_demo(count, rng, out)` runs the same comparison and returns the
three sorted lists. `sample_values(count, rng)` gives the input it would use.