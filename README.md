# algolab

A handful of classic data-structure and algorithm exercises, each usable as a
library module and as a command. The package has no dependencies beyond the
standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

### `algolab-compare` (`algolab.comparison`)

Fills a `LinkedList` and a `BinarySearchTree` with the same random numbers
(0 to 499) and records how many comparisons each needs to find a random
target. The structures keep growing from one run to the next. One CSV row is
written per run, under the header `Procurado,Comparacoes_ABB,Comparacoes_Lista`.

    algolab-compare [-o FILE] [--runs N] [--size N] [--seed N]

- `-o`, `--output`: CSV file to write (default `dados_comparacao.csv`)
- `--runs`: number of runs (default 200)
- `--size`: values inserted per run (default 500)
- `--seed`: seed for the random generator

### `algolab-sat` (`algolab.sat`)

Reads a CNF formula in DIMACS form and decides whether it is satisfiable by
backtracking over the variables in order, trying true before false. Prints
`SAT!` with a table of variable values (unassigned variables shown as 0) or
`UNSAT!`.

    algolab-sat [PATH]

`PATH` defaults to `entrada.txt`. Lines starting with `c` are comments; the
`p cnf` line sets the number of variables; every other line is a clause,
read up to its terminating `0`.

### `algolab-states` (`algolab.game_states`)

An interactive game-state stack: `1` pushes a named state, `2` pops the
current one, `0` quits. While the stack is empty the game is simply
"Jogando". The stack holds at most 100 states.

    algolab-states

### `algolab-huffman` (`algolab.huffman`)

An interactive Huffman compressor. After a short information screen
(`--delay` seconds, default 3) it shows a menu; option `1` asks for a file
name inside the working directory (`-d`, `--directory`, default `.`),
compresses it into `compactado.huff` in the same directory and prints the
code size, padding bits and tree size.

    algolab-huffman [-d DIRECTORY] [--delay SECONDS]

A compressed file starts with a two-byte big-endian header (3 bits of
padding count, 13 bits of serialized tree size), followed by the tree in
pre-order (`*` for internal nodes, a backslash escaping `*` and `\` leaves)
and then the packed bit stream, most significant bit first.

## Library use

```python
from algolab.comparison import LinkedList, BinarySearchTree, run_comparison
from algolab.sat import parse_dimacs, solve, evaluate, Status
from algolab.game_states import StateStack, StackEmptyError
from algolab.huffman import compress, build_tree, build_codes, frequency_table

tree = BinarySearchTree()
for n in (5, 3, 8):
    tree.insert(n)
found, comparisons = tree.search(8)     # (True, 2)

cnf = parse_dimacs("p cnf 2 2\n1 2 0\n-1 0\n")
solution = solve(cnf)                   # {1: False, 2: True}, or None if unsatisfiable

stack = StateStack()
stack.push("Paused")
print(stack.current())                  # "Paused"
stack.pop()                             # raises StackEmptyError when empty

packed = compress(b"abracadabra")
codes = build_codes(build_tree(frequency_table(b"abracadabra")))
```

`StateStack.push` raises `StackFullError` once the capacity is reached.

## What it does not do

`algolab.huffman` only compresses. There is no decompression: the menu's
"Descompactar arquivo" option just reports that it is not available, and no
function reads a `.huff` file back into its original bytes.