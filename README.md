# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. The program prints the operations it uses, one per line.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up, so the top element becomes the bottom one |
| `rra`, `rrb`, `rrr` | rotate down, so the bottom element becomes the top one |

An operation that has nothing to act on (for example `pa` with `b` empty, or
`sa` with fewer than two elements on `a`) does nothing and is not recorded.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, in one quoted argument, or both:

```
push-swap 3 2 1
push-swap "5 1 4" 2 3
```

Numbers inside one argument are separated by spaces. The first number is the
top of stack `a`.

- Input that is already sorted prints nothing and exits with status 0.
- With no arguments the program prints nothing and exits with status 1.
- If an argument is empty or blank, if a token is not an integer (an optional
  `+` or `-` followed by digits), if a value lies outside the 32-bit signed
  range, or if a value appears twice, the program writes `Error` to standard
  error and exits with status 1.
- After printing the moves for an unsorted list of five numbers or fewer, the
  program exits with status 1; for longer lists it exits with status 0.

## How it sorts

Lists of two or three numbers are sorted with at most two moves on `a`. For
four or five numbers, the one or two smallest are parked on `b`, the rest are
sorted as three, and the parked numbers are pushed back.

Longer lists are first ranked, then moved to stack `b` in chunks of ranks:
three chunks, or five when there are more than 200 numbers. The lower half of
each chunk is rotated to the bottom of `b`. Then values go back to `a` largest
first, bringing each to the top of `b` by whichever rotation direction is
shorter and sometimes taking the next-largest first and swapping it into
place on `a`.

## Library use

```python
from pushswap.cli import solve
from pushswap.stacks import Stacks

moves = solve([3, 2, 1])          # ['ra', 'sa']

stacks = Stacks([2, 1, 3])
stacks.sa()                       # True: the move was made
print(stacks.values_a())          # [1, 2, 3]
print(stacks.operations)          # ['sa']
```

- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, deques of
  `Node` objects with `value` and `index`) and an `operations` list. Each move
  method returns whether it acted.
- `pushswap.parsing.parse_arguments` checks command-line arguments and returns
  the numbers, raising `ParseError` (a `ValueError`) for input it rejects.
- `pushswap.small` sorts stacks of up to five numbers; `pushswap.chunks`
  holds `push_chunks` and `pull_back` for longer ones.
- `pushswap.cli.solve` returns the list of moves; `pushswap.cli.main` is the
  command.

## What it does not do

There is no checker: the package does not read a list of operations and
verify that they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```