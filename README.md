# cdlcompiler

A small compiler for CDL, a toy language, that emits JavaScript. It runs
the classic compiler stages one after another: reading the source,
lexical analysis, parsing into statements, semantic checks, and code
generation.

## The language

A program is wrapped in `BEGIN` and `END` and holds two kinds of
statement, each ending with a semicolon:

```
BEGIN
  x = 10;
  y = x + 5;
  PRINT y;
END
```

- Assignment: `name = expression;`
- Output: `PRINT expression;`

An expression is a name or a number, optionally followed by one of
`+`, `-`, `*`, `/` and a second name or number.

The lexer also recognises the keywords `IF`, `THEN`, `ELSE`, `WHILE`
and `DO` and the symbols `==`, `<`, `>`, `(` and `)`, but the parser
accepts none of them inside a program. Any other character becomes an
`ILLEGAL` token.

## Installing

```
pip install .
```

## Command line

```
cdlc [source] [-o OUTPUT]
```

`source` defaults to `example/source.cdl` and `-o/--output` to
`index.js`. The command prints the source, the token table, the parsed
statements and then the generated JavaScript, which it also writes to
the output file. It exits with status 1, without writing anything, when
the source cannot be read or does not parse.

The command runs the semantic pass but does not print its findings; use
`SemanticAnalyzer` from Python to see them.

For the program above the generated code is:

```javascript
let x = 10;
let y = x + 5;
console.log(y);
```

## Library use

```python
from cdlcompiler.lexer import tokenize
from cdlcompiler.parser import parse, ParseError
from cdlcompiler.semantic import SemanticAnalyzer
from cdlcompiler.generator import generate_js

source = "BEGIN a = 1; b = a + 2; END"

tokens = tokenize(source)          # list of Token, ending with an EOF token
try:
    statements = parse(tokens)     # AssignStatement / PrintStatement objects
except ParseError as exc:
    raise SystemExit(f"syntax error: {exc}")

analyzer = SemanticAnalyzer(statements)
analyzer.analyze()                 # returns the list of error messages
if analyzer.has_errors():
    analyzer.report_errors()       # one "Semantic Error: ..." line each

print(generate_js(statements))
```

Modules:

- `cdlcompiler.tokens`: `TokenType` and the `Token` dataclass.
- `cdlcompiler.lexer`: `Lexer(source).tokenize()` and `tokenize(source)`.
- `cdlcompiler.parser`: `Parser(tokens).parse_program()`, `parse(tokens)`,
  `AssignStatement`, `PrintStatement` and `ParseError` (which carries
  the offending `token`).
- `cdlcompiler.semantic`: `SemanticAnalyzer` and `Variable`.
- `cdlcompiler.generator`: `generate_js(statements)`.
- `cdlcompiler.reader`: `read_file(path)`, which returns the file's lines
  each ending in a newline and raises `SourceReadError` when the file
  cannot be opened or read.

## What the semantic pass checks

It reports variables used in an assignment's expression before they are
assigned, and variables that are assigned but never used. A `PRINT`
statement is checked under its `var_name`, which is always empty, so the
names in a printed expression do not count as uses and every program
containing `PRINT` gets a `Variable '' used before declaration` error.

## Running the tests

```
pip install ".[test]"
pytest
```