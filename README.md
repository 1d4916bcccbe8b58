# espcore

Building blocks for microcontroller-style code, written as plain Python with no
third-party dependencies.

## What is in it

- `espcore.wstring.ArduinoString`: a mutable string that never raises on bad
  indexes. It can be *invalid* (built from `None`), in which case it is falsy and
  has length zero. It offers `concat`, `compare_to`, `equals`,
  `equals_ignore_case`, `equals_constant_time`, `starts_with`, `ends_with`,
  `char_at`, `set_char_at`, `get_bytes`, `index_of`, `last_index_of`,
  `substring`, `replace`, `remove`, `to_lower_case`, `to_upper_case`, `trim`,
  `to_int`, `to_float` and `to_double`, as well as `+`, `+=`, comparisons and
  `len()`. Text longer than `espcore.wstring.MAX_LENGTH` (65519) is refused.
- `espcore.numfmt`: `int_to_str(value, base)`, `float_to_str(value, width, precision)`,
  and the lenient parsers `parse_long` and `parse_double`, which read a leading
  number and give zero when there is none.
- `espcore.printer.Print` and `Printable`: abstract bases. A `Print` subclass
  supplies `write_byte`; `write`, `print`, `println`, `printf`, `print_time` and
  `println_time` are built on it and return the number of bytes written.
  Integers print in a chosen base (`DEC`, `HEX`, `OCT`, `BIN`; base 0 writes the
  raw byte), floats with a chosen number of decimals, printing `nan`, `inf` or
  `ovf` where they apply. `println` ends lines with CR LF.
- `espcore.stream.Stream`: an abstract readable stream (subclasses supply
  `available`, `read`, `peek`, `flush` and `write_byte`) with `find`,
  `find_until`, `parse_int`, `parse_float`, `read_bytes`, `read_bytes_until`,
  `read_string` and `read_string_until`. Reads wait up to `timeout`
  milliseconds (default 1000) for data.
- `espcore.streamstring.StreamString`: an `ArduinoString` that is also a
  `Stream`; writes append, reads consume from the front.
- `espcore.ringbuffer.RingBuffer`: a FIFO byte buffer of fixed capacity with
  `read`, `peek`, `write`, `remove`, `flush`, `available`, `room` and `resize`.
- `espcore.ipv6.IPv6Address`: a 16-byte address. `from_string` accepts only the
  full 39-character form (`0011:2233:...:eeff`) and raises `ValueError`
  otherwise; `str()` gives the same form back. It is `Printable`.
- `espcore.md5builder.MD5Builder`: incremental MD5 over bytes, text, hex
  strings (`add_hex_string`) and streams (`add_stream`), read back with
  `digest` or `hexdigest` after `calculate`.
- `espcore.b64text.encode`: padded base64 of bytes or text, as an `ArduinoString`.
- `espcore.wmath`: `random_seed`, `random_below`, `random_between`,
  `map_range` (integer re-mapping; -1 for an empty input range) and `make_word`.

## Installation

```
pip install .
```

## Example

```python
from espcore.wstring import ArduinoString
from espcore.ringbuffer import RingBuffer
from espcore.md5builder import MD5Builder
from espcore.wmath import map_range

s = ArduinoString("  Hello World  ")
s.trim()
s.replace("World", "there")
print(s.index_of("there"))          # 6

buf = RingBuffer(8)
buf.write(b"abc")
print(buf.read(2))                  # b'ab'

md5 = MD5Builder()
md5.begin()
md5.add("hello")
md5.calculate()
print(md5.hexdigest())              # 5d41402abc4b2a76b9719d911017c592

print(map_range(512, 0, 1023, 0, 255))  # 127
```

## What it does not do

The package is a library of data types and helpers only. It does not drive any
hardware: there is nothing here for pins, analog input or output, interrupts,
Bluetooth or clock settings, and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```