# loxlex

`loxlex` reads Lox source files and turns them into tokens.

## Installation

```
pip install .
```

## Command line

To tokenize a file, run the command below. It prints one token per line: the
token's type, its text and its literal value, or `null` if it has none.

```
loxlex tokenize program.lox
```

For a file holding `var x = 1.50;`, it prints:

```
VAR var null
IDENTIFIER x null
EQUAL = null
NUMBER 1.50 1.5
SEMICOLON ; null
EOF  null
```

The command also runs as `python -m loxlex.cli tokenize program.lox`.

Lexical errors go to standard error as `[line N] Error: ...`. There are two
kinds: an unexpected character and a string that is never closed. The tokens
that were read are still printed, and the command exits with status 65. If the
file cannot be read, or is not valid UTF-8, the command exits with status 255.

If arguments are missing, the command prints a usage line to standard error.
For any command other than `tokenize`, it prints `Unknown command: ...`.

## Library use

```python
from loxlex.scanner import scan, tokenize

result = scan('print "hi";')
for token in result.tokens:
    print(token)
if result.had_error:
    print(result.errors)
```

- `loxlex.scanner.scan(source)` scans a string. It returns a `ScanResult`
  whose `tokens` list always ends with an `EOF` token. Its `errors` list holds
  the error messages, and `had_error` tells whether there were any.
- `loxlex.scanner.tokenize(filename)` reads a file and returns its tokens. If
  it fails, it raises `loxlex.errors.TokenizeError`. The error has an
  `exit_code`: 255 if the file cannot be read, 65 if the source has lexical
  errors. For lexical errors it also carries the `tokens` and `messages`.
- `loxlex.token.Token` is a frozen dataclass with the fields `kind` (a
  `TokenType`), `lexeme` and `literal`.
- `loxlex.lexemes` provides `is_digit`, `is_alpha_numeric`, `format_decimal`,
  `keyword_type` and the `KEYWORDS` mapping.
- `loxlex.expr.Expr` holds a literal value: a boolean, number, string or nil,
  with `ExprKind` giving the kind. `print_token_value()` returns its printed
  form, and nil prints as `nil`.

Number literals are normalised with `format_decimal`, so `42` has the value
`42.0` and `1.50` has the value `1.5`.

## What it does not do

`loxlex` only tokenizes. It has no expression parser, no `parse` command and
no evaluator: Lox programs cannot be parsed or run with it.

## Running the tests

```
pip install .[test]
pytest
```