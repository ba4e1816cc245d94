# yamlot

yamlot is a small tokenizer for a subset of YAML block syntax. It turns the
input into a flat stream of tokens. The tokens are block sequence dashes,
plain scalars, newlines, and document start (`---`) and end (`...`) markers.
Indentation gives `INDENT` and `DEDENT` tokens. Each token records a line and
a column.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

`yamlot-tokenizer` reads YAML from standard input. It prints one token per
line in the form `line=LLL column=CC: TOKEN`:

```
$ printf -- '- apple\n- banana\n' | yamlot-tokenizer
line=001 column=02: DASH
line=001 column=02: PLAIN-SCALAR(apple)
line=001 column=08: NEWLINE
line=002 column=02: DASH
line=002 column=02: PLAIN-SCALAR(banana)
line=002 column=09: NEWLINE
```

The command takes these options:

- `--debug` traces every character read and every token queued.

If reading standard input fails, the command prints `error: <message>` and
stops.

## Library use

```python
import io

from yamlot.tokens import Tokenizer, TokenType, tokenize

for token in tokenize(io.StringIO("--- hello\n")):
    print(token.type, token.value, token.line, token.column)

tokenizer = Tokenizer("- a\n", debug=False)
first = tokenizer.next_token()
assert first.type is TokenType.DASH
```

`Tokenizer` accepts a text stream, a binary stream or a plain string. A
binary stream is decoded as UTF-8.

- `next_token()` returns one `Token` per call. At the end of input it returns
  a token of type `TokenType.EOF`. It keeps returning `EOF` tokens if you call
  it again.
- Iterating a `Tokenizer`, or calling `tokenize(stream, debug)`, yields every
  token up to the `EOF` token. The `EOF` token itself is not yielded.
- If reading the stream fails, the stream's exception is raised unchanged.

A `Token` is a frozen dataclass with `type`, `value`, `line` and `column`.
`str(token)` gives the token type name. For a plain scalar it also gives the
value, as in `PLAIN-SCALAR(apple)`. `format_token(token)` in `yamlot.cli`
gives the line the command prints.

`tokens_equal(first, second)` and `Token.matches(other)` compare two tokens by
type. Plain scalars must also have the same value. Position is ignored.

Some indentation drops back to a level that was never opened. That gives an
`ERROR` token, and its value describes the inconsistent dedent.

## What it does not do

yamlot only tokenizes. It does not parse tokens into mappings, sequences or
other values. It does not load or dump YAML documents. Flow collections,
quoted scalars and comments are not recognised as tokens of their own. A
comment marker `#` only ends a plain scalar.