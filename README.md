# libft

A small library of low-level helpers that behave like a classic C utility
library. It covers ASCII character classes, byte-buffer operations, numeric
conversion, bounded string routines, string building, formatted output,
buffered line reading from file descriptors and a singly linked list.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

### `libft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each accepts a code point (`int`) or a one-character `str`.
Only ASCII ranges count. `to_upper` and `to_lower` return the same kind
they were given, and leave anything other than an ASCII letter unchanged.

### `libft.memory`

These functions work on `bytearray`, or on `bytes` where nothing is written.

- `memset(buf, value, n)` fills the first `n` bytes with `value & 0xFF` and returns `buf`.
- `bzero(buf, n)` sets the first `n` bytes to zero.
- `memcpy(dest, src, n)` copies `n` bytes to the start of `dest`.
- `memmove(buf, dest_offset, src_offset, n)` copies within one buffer. The regions may overlap.
- `memchr(data, value, n)` returns the index of the first match within `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the byte difference at the first mismatch, or 0.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`. It raises `OverflowError` when the size would overflow a 64-bit `size_t`.

Negative counts raise `ValueError`. So do counts or regions that run past a buffer's end.

### `libft.convert`

- `atoi(text)` skips leading whitespace and reads a run of signs. More than one sign gives 0. It then reads digits up to the first non-digit, and the result wraps to a 32-bit signed int.
- `itoa(n)` returns the decimal text of a 32-bit signed int. It raises `OverflowError` outside that range.

### `libft.cstring`

These functions work on `str`. An embedded `"\0"` ends the string. Positions are indexes, and a missing match is `None`.

- `strlen(data)` returns the length up to the first NUL.
- `strlcpy(dst, src, size)` returns `(new_dst, len(src))`.
- `strlcat(dst, src, size)` returns `(new_dst, total_length)`. When `size` does not exceed `len(dst)`, nothing is appended and the length is `len(src) + size`.
- `strchr(s, c)` and `strrchr(s, c)` find the first or last `c`. Searching for NUL finds the end of the string.
- `strncmp(s1, s2, n)` compares at most `n` characters.
- `strnstr(big, little, length)` searches the first `length` characters of `big`. An empty `little` matches at 0.

### `libft.text`

- `strdup(s)` returns a copy of `s`.
- `substr(s, start, length)` returns at most `length` characters from `start`.
- `strjoin(s1, s2)` returns the two strings joined.
- `strtrim(s, charset)` strips characters in `charset` from both ends.
- `split(s, sep)` splits on a single character and drops empty pieces.
- `strmapi(s, func)` builds a new string from `func(index, char)`.
- `striteri(chars, func)` replaces each element of a mutable sequence in place with `func(index, char)`.

### `libft.output`

- `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to a raw file descriptor.
- `sprintf(fmt, *args)` returns the formatted text. It understands `%c %s %p %d %i %u %x %X`. `%s` with `None` prints `(null)` and `%p` of 0 or `None` prints `(nil)`. Any other character after `%`, `%` included, prints a single `%` and that character is dropped. Too few arguments raise `TypeError`.
- `printf(fmt, *args)` writes to standard output and returns the number of characters written.

### `libft.lines`

- `LineReader(buffer_size=30)` reads descriptors in chunks of `buffer_size` bytes. It keeps unread data separately for each descriptor.
- `next_line(fd)` returns the next line with its newline, or a final unterminated line, or `None` at end of input. Descriptors must be in `0..1023`. Read errors propagate as `OSError`.
- `get_next_line(fd)` uses one shared reader.

### `libft.linked`

`Node(content, next=None)` is a single list node. `LinkedList(head=None)` supports:

- `add_front`, `add_back`, `last`, `len()` and iteration over contents;
- `clear(delete)`, which passes each content to `delete` and empties the list, and does nothing if `delete` is `None`;
- `apply(func)`;
- `map(func, delete)`, which returns a new list. If `func` raises, the contents built so far are passed to `delete` and the exception propagates.

`delete_node(node, delete)` passes one node's content to `delete` and detaches the node.

## Examples

```python
from libft.convert import atoi, itoa
from libft.text import split, strtrim
from libft.output import sprintf

atoi("  -42abc")               # -42
itoa(-2147483648)              # "-2147483648"
split("a,,b,c", ",")           # ["a", "b", "c"]
strtrim("  hi  ", " ")         # "hi"
sprintf("%d is %x", 255, 255)  # "255 is ff"
```

Reading lines from a file descriptor:

```python
import os
from libft.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(30)
while (line := reader.next_line(fd)) is not None:
    print(line, end="")
os.close(fd)
```

Building a linked list:

```python
from libft.linked import LinkedList, Node

items = LinkedList()
items.add_back(Node(1))
items.add_back(Node(2))
items.add_front(Node(0))
list(items)        # [0, 1, 2]
len(items)         # 3
```

## What it does not do

This is a library only. It installs no command-line program. The formatter
supports no flags, widths or precisions.