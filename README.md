# ftlib

A small, dependency-free utility library:

- `ftlib.chartype`: ASCII character classification (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `is_upper`, `is_lower`). Each accepts a one-character string or an integer code.
- `ftlib.convert`: integer parsing and rendering with 32-bit and 64-bit wrap-around (`atoi`, `atol`, `atoi_base`, `itoa`, `ltoa`, `itoa_base`), multibyte wide-character encoding (`encode_wide_char`) and `factorial` for 0 to 12.
- `ftlib.memory`: byte-buffer helpers working on `bytearray` in place (`memalloc`, `bzero`, `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp`).
- `ftlib.chain`: `LinkedList`, a singly linked list with `push_front`, `append`, `pop_front`, `clear`, `for_each`, `map`, `tail`, iteration and `len()`.
- `ftlib.fmtspec`: parsing of `%[flags][width][.precision][length]type` specifications (`parse_spec`, `FormatSpec`, `Flag`) and reading of integer arguments at the width their length names (`read_signed`, `read_unsigned`, `read_long`, `read_ulong`).
- `ftlib.numeric` and `ftlib.textual`: the converters for each conversion type.
- `ftlib.printf`: `sprintf` and `printf`, supporting the `sSpdDioOuUxXcC%` conversions, the flags ` 0#+-`, width, precision and the `hh h l ll j z` length modifiers; `converter_for` looks up the converter of a type character.
- `ftlib.linereader`: `LineReader` and `get_next_line`, which read lines from file descriptors through a fixed-size buffer (8 bytes by default), keeping unread data per descriptor.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftlib.printf import sprintf, printf

sprintf("%05d|%-4x|%#o", -42, 255, 8)   # '-0042|ff  |010'
sprintf("%.3s and %c", "abcdef", "z")   # 'abc and z'
count = printf("%+d\n", 7)               # writes '+7\n' to stdout, returns 3
```

`printf` writes to `sys.stdout` unless a `stream=` is given, and returns the
number of bytes the output takes in UTF-8.

```python
from ftlib.convert import atoi, itoa_base

atoi("  -123abc")                        # -123
itoa_base(255, "0123456789abcdef")       # 'ff'
```

```python
from ftlib.chain import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.append(4)
list(items.map(lambda x: x * 10))        # [0, 10, 20, 30, 40]
```

```python
import os
from ftlib.linereader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader().lines(fd):
        print(line)
finally:
    os.close(fd)
```

## Errors

- A specification that does not end in a known type is not an error for
  `sprintf` and `printf`: a letter in the type position is written padded to
  the width, anything else leaves only the padding. `parse_spec` itself raises
  `ftlib.fmtspec.FormatSyntaxError` in that case.
- A missing or unsuitable argument raises `ftlib.fmtspec.ConversionError`.

## What it does not do

- There are no floating-point conversions (`f`, `e`, `g`) and no `n` conversion.
- There is no command-line tool; everything is used from Python.