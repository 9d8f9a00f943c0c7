# mikroc

`mikroc` tokenizes and runs programs written in a small C-like language.
The language has integer variables, decimal, hexadecimal (`0x`) and binary
(`0b`) numbers, `true`/`false`, character and string literals, the usual C
arithmetic, bitwise, comparison and logical operators, every compound
assignment (`+=`, `<<=`, `|=` and the rest), `++`/`--` in prefix and
postfix form, and the statements `if`/`else`, `for`, `while`, `do`/`while`,
`print` and `scan`. `and`, `or` and `not` are accepted as spelled-out
operators. Arithmetic wraps around like 32-bit signed integers.

## Modules

- `mikroc.tokens`: `TokenType` (the kinds of tokens and of tree nodes),
  `Position` and the frozen `Token` record (`type`, `value`, `line`,
  `column`, and `is_literal()`).
- `mikroc.source`: `SourceReader`, which walks program text and keeps line
  and column counts, and `Location` and `Diagnostic` for the errors it
  records.
- `mikroc.literals`: `parse_decimal`, `parse_hex`, `parse_binary`,
  `parse_char`, `read_string`, `skip_block_comment` and
  `skip_line_comment`.
- `mikroc.lexer`: `Lexer` and `tokenize`.
- `mikroc.nodes`: `Node`, `Variable` and `NodeFactory`.
- `mikroc.interpreter`: `Interpreter`, `interpret`, `format_printf` and
  `InterpreterError`.

## Tokenizing

```python
from mikroc.lexer import Lexer, tokenize

for token in tokenize('x = 0x1F; print("%d\\n", x);'):
    print(token.type.name, token.value, token.line, token.column)

lexer = Lexer("a = 1 $ 2;")
tokens = list(lexer.tokens())
for diagnostic in lexer.diagnostics:
    print(diagnostic)          # "1.7 Neznamy znak"
```

Problems found while scanning — an unknown character, an unterminated
string or comment, a newline inside a string, a string longer than 256
characters — are collected in `Lexer.diagnostics`. Each `Diagnostic`
prints with its line, or its line and column, as the error calls for.
An unterminated string or block comment ends the token stream.

## Building and running a tree

Trees are built with a `NodeFactory`. Every `variable(name)` call for the
same name is bound to the same `Variable` cell, and equal strings share one
stored copy. Inner nodes are made with `node(kind, first, second, third,
fourth)`, using `TokenType` members as kinds:

| kind | children |
| --- | --- |
| `SEQUENCE` | two statements, run in order |
| `IF` | condition, then-branch, else-branch (may be `None`) |
| `FOR` | initialiser, condition, step, body |
| `WHILE` | condition, body |
| `DO` | body, condition |
| `PRINT` | a value, or a string template and an optional value |
| `SCAN` | the variable to read into |
| `INCREMENT`, `DECREMENT` | target as `first` for prefix, as `second` for postfix |
| `PLUS`, `MINUS` | two operands, or one for the unary form |
| `ASSIGN` and compound assignments | variable, value |

```python
import io

from mikroc.interpreter import interpret
from mikroc.nodes import NodeFactory
from mikroc.tokens import TokenType as T

f = NodeFactory()
program = f.node(
    T.SEQUENCE,
    f.node(
        T.FOR,
        f.node(T.ASSIGN, f.variable("i"), f.number(1)),
        f.node(T.LESS_EQUAL, f.variable("i"), f.number(10)),
        f.node(T.INCREMENT, f.variable("i")),
        f.node(T.ADD_ASSIGN, f.variable("total"), f.variable("i")),
    ),
    f.node(T.PRINT, f.string("total = %d\n"), f.variable("total")),
)

output = io.StringIO()
interpret(program, io.StringIO(), output)
print(output.getvalue())       # "total = 55"
```

`interpret(node, stdin, stdout)` (or `Interpreter(stdin, stdout).run(node)`)
reads the integers for `scan` from `stdin` and writes what `print`
produces to `stdout`; both default to the process's standard streams.
Division or remainder by zero, assignment to something that is not a
variable, and a node kind the interpreter does not know raise
`InterpreterError`.

`print` with a string template formats it like C `printf` through
`format_printf`, which handles the `d i u o x X c` conversions with flags,
width and precision (including `*`) and `%%`:

```python
from mikroc.interpreter import format_printf

format_printf("%5d|%-3x|", 42, 255)   # "   42|ff |"
```

A missing argument, or a conversion that needs a non-integer value, raises
`InterpreterError`.

## What the package does not do

There is no parser: nothing here turns a token stream into a syntax tree,
so program text cannot be run directly. Trees have to be built with
`NodeFactory`. There is also no command-line program.

## Requirements

Python 3.10 or later. The package has no dependencies outside the standard
library; the tests use pytest (`pip install .[test]`).