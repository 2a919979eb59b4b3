# huffpack

A small Huffman coding compressor. It counts byte frequencies in a file,
builds a Huffman tree, and writes a `.huf` file that holds the code table
followed by the packed bit stream. The same tool turns a `.huf` file back
into the original bytes.

## Installation

```
pip install .
```

## Command line

Compress a file. The output name is the input name up to its first dot,
with the extension `huf`:

```
huffpack -c notes.txt
```

This writes `notes.huf`.

Decompress. The tool opens the `.huf` file that belongs to the given input
name and writes the restored bytes to the output path:

```
huffpack -d notes.txt restored.txt
```

With `-d`, if no output path is given, the restored bytes are written to the
input path itself. In both modes the input file must exist and be non-empty,
because it is read before anything else happens.

Show help (`-h` or `-help`):

```
huffpack -h
```

The command exits with status 0 on success and 1 on invalid arguments or on
any read, write or format error; error messages go to standard error.

## Library use

```python
from huffpack.codec import encode_bytes, decode_bytes

packed = encode_bytes(b"abracadabra")
assert decode_bytes(packed) == b"abracadabra"
```

The building blocks are also available on their own:

- `huffpack.frequencies.FrequencyTable` counts bytes (`add_byte`,
  `add_bytes`, `leaves`, `total`, indexing by byte value, `len`).
- `huffpack.tree.Node`, `huffpack.tree.NodeList` (`insert_sorted`,
  `pop_first`), `huffpack.tree.build_node_list` and
  `huffpack.tree.build_tree` build the Huffman tree from a table.
- `huffpack.dictionary.build_dictionary` maps every leaf byte to its
  `huffpack.code.BitCode` (left is 0, right is 1).
- `huffpack.code.BitCode` holds up to 255 bits (`append_bit`, `drop_bit`,
  `copy`, `to_bytes`, `from_bytes`).
- `huffpack.codec.encode` returns the number of payload bits written and
  raises `ValueError` for a byte with no code; `huffpack.codec.decode`
  returns the number of bytes written; `huffpack.codec.read_header` returns
  the code table and the payload bit count. A damaged or truncated header
  raises `huffpack.codec.FormatError`.
- `huffpack.files.read_file` reads a whole file and raises
  `huffpack.files.FileTooLargeError` above 200 MiB; `file_extension` and
  `with_extension` handle file names.

## Limitations

- Input made of a single distinct byte value gets an empty code, so encoding
  it raises `ValueError`. Empty input cannot be encoded either.
- Files are read whole; the command refuses files over 200 MiB.

## File format

For each byte value 0 to 255, in order: the byte value (1 byte), the code
length in bits (2 bytes, little-endian), and, when the length is non-zero,
the code bits packed most significant bit first into `ceil(length / 8)`
bytes. Then an end marker: `0xFF` followed by `0xFFFF`. Then the total
number of payload bits (4 bytes, little-endian), then the packed data,
padded with zero bits to a whole byte.