# assetbundle

Read the structure of Unity asset bundle files: the header, the block table,
the directory of entries and the entry data itself.

Supported containers:

- **UnityFS**: the header, metadata stored plain or compressed with LZMA
  (xz streams) or LZ4/LZ4HC, the storage blocks and directory nodes, and the
  data of every entry. Blocks may be stored plain or compressed with LZMA or
  LZ4/LZ4HC.
- **UnityRaw / UnityWeb**: the header only.

## Installing

```
pip install .
```

## Command line

```
assetbundle path/to/file.bundle
```

With no argument it reads `avatar.vrca` from the current directory. Nothing
is printed when the file reads cleanly; an error while reading is printed as
`Exception:` followed by the message. The command always exits with status 0.

## Library use

```python
from assetbundle.scheme import BundleFileScheme

scheme = BundleFileScheme.read_scheme("avatar.vrca")
print(scheme.header.signature, scheme.header.version)
for block in scheme.metadata.blocks_info.storage_blocks:
    print(block.uncompressed_size, block.compressed_size, block.flags.compression())
for path, reader in scheme.entries.items():
    print(path, len(reader.read_bytes(...)) if False else path)
```

`BundleFileScheme.read_scheme` raises `BundleError` for a file that cannot be
opened or whose header or metadata sizes do not add up; other malformed data
raises `ValueError`, `EOFError` or `NotImplementedError` (for block compression
kinds other than LZMA and LZ4). `scheme.entries` maps each node's normalised
path to a `BinaryReader` over that entry's decompressed bytes.
`BundleFileScheme.read_from(reader)` reads a bundle from any `BinaryReader`
starting at its current position.

Lower-level pieces can be used on their own:

```python
from assetbundle.binaryreader import BinaryReader, EndianReader
from assetbundle.types import EndianType

reader = EndianReader(BinaryReader.from_bytes(b"\x00\x00\x00\x2a"), EndianType.BIG_ENDIAN)
assert reader.read_int32() == 42
```

- `assetbundle.binaryreader`: `BinaryReader` (native byte order, built with
  `from_path` or `from_bytes`) and `EndianReader` (explicit byte order), with
  readers for 8 to 64-bit integers, floats, NUL-terminated strings,
  length-prefixed vectors, raw bytes and 4-byte alignment.
- `assetbundle.sources`: `FileReadSource` and `MemoryReadSource`, the byte
  sources behind the readers.
- `assetbundle.bundlereader`: `BundleReader`, which also carries the bundle's
  signature, generation and flags, and reads `BundleReadable` structures.
- `assetbundle.header` and `assetbundle.structures`: the dataclasses for
  headers, hashes, scenes, storage blocks, nodes and metadata.
- `assetbundle.version.Version.parse("2019.4.31f1")` parses engine version
  strings into comparable `Version` values.
- `assetbundle.filenameutils` normalises dependency and resource names,
  for example `fix_file_identifier("Library/unity_default_resources")`
  gives `"unity default resources"`.
- `assetbundle.compression` provides `decompress_lzma`, `decompress_lzma_stream`
  and `decompress_lz4`, raising `DecompressionError` on failure.

## What it does not do

- It does not interpret the entries it extracts: serialized files, resources
  and other assets inside a bundle are handed back as raw bytes.
- For UnityRaw and UnityWeb bundles only the header is read; their metadata
  and entry data are not.
- LZHAM-compressed data is not supported.
- Nothing is written: there is no way to create or modify bundles.

## Running the tests

```
pip install .[test]
pytest
```