# submarine

A library for reading data from Substrate-style blockchains:

- `submarine.scale`: a SCALE decoder. Decode primitive values from a
  `Reader`, or decode whole structures described by a schema.
- `submarine.rust_types`: a model of Rust type names as they appear in chain
  metadata, a parser for them, a sanitiser that reduces them to names the
  decoder understands, and a converter from those types to SCALE schemas.
- `submarine.rpc`: a JSON-RPC client over websockets, JSON models for blocks
  and runtime versions, and helpers to fetch runtime metadata and system
  events.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Decoding SCALE data

`submarine.scale.reader.Reader` is a cursor over a byte string. The
functions in `submarine.scale.base` each read one value from it:
`decode_compact`, `decode_u8` … `decode_u256`, `decode_i8` … `decode_i256`,
`decode_bool`, `decode_text`, `decode_bytes`, and the generic
`decode_vec(reader, decoder)` and `decode_option(reader, decoder)`
(the latter returns `None` when the value is absent). Every integer comes
back as a Python `int`. Running out of data, or a bool byte other than
`0x00`/`0x01`, raises `ValueError`.

```python
from submarine.scale.reader import Reader
from submarine.scale.base import decode_compact, decode_text

print(decode_text(Reader(bytes([0x14, 0x68, 0x65, 0x6C, 0x6C, 0x6F]))))  # hello
print(decode_compact(Reader(bytes([0x01, 0x01]))))                       # 64
```

### With a schema

`submarine.scale.schema` describes layouts with the dataclasses `Struct`,
`Tuple`, `EnumSimple`, `EnumComplex`, `Vec`, `Option`, `Array`, `Ref`,
`BitFlags` and `Import`. `submarine.scale.decode.decode_with_schema` follows
a schema and returns plain Python values:

| schema | result |
|---|---|
| `Ref("u8")` … `Ref("i256")`, `Ref("compact")` | `int` |
| `Ref("bool")` | `bool` |
| `Ref("text")` | `str` |
| `Ref("bytes")`, `Vec(Ref("u8"))`, `Array(Ref("u8"), n)` | `bytes` |
| `Ref("empty")` | `None` |
| `Struct` | `dict` of field name to value |
| `Tuple`, other `Vec` and `Array` | `list` |
| `EnumSimple` | the variant name as `str` |
| `EnumComplex` | `{variant_name: value}` |
| `Option` | the inner value, or `{}` when absent |
| `BitFlags` | `dict` of flag name to `bool` |

```python
from submarine.scale.reader import Reader
from submarine.scale.schema import Struct, NamedMember, Ref
from submarine.scale.decode import decode_with_schema

schema = Struct([NamedMember("a", Ref("u8")), NamedMember("b", Ref("u8"))])
print(decode_with_schema(Reader(bytes([0x08, 0x10])), schema))
# {'a': 8, 'b': 16}
```

Failures raise `submarine.errors.SpanError`. Its `path` lists the fields,
indices and markers leading to the failure, and `path_text()` joins them
with dots. `Import` schemas and unknown `Ref` names always fail.

## Rust type names

- `submarine.rust_types.types`: `Base` (a path with generic parameters),
  `Tuple` and `Array`; `str()` renders them back as Rust syntax.
- `submarine.rust_types.parser.RustTypesParser(text).parse()` parses paths,
  generics, tuples and arrays such as `Option<[Vec<(u32, String)>; 5]>`,
  raising `ValueError` on bad input.
- `submarine.rust_types.sanitizer`: `normalize_spaces`, `remove_as_trait`
  (`<Foo as Trait>::Bar` → `Foo::Bar`), `parse_rust_type`,
  `sanitize_rust_type` and `parse_and_sanitize`, which does all of them in
  turn. Sanitising unwraps `Box<T>`, turns `Compact<…>` into `compact`,
  `String` into `text`, `FooOf<T>` into `Foo`, strips a leading `T::`,
  maps `PhantomData` to `empty`, and drops generic parameters from
  everything but `Vec` and `Option`.
- `submarine.rust_types.to_scale_schema.to_scale_schema` turns a type into
  a schema for `decode_with_schema`, raising `SpanError` for generic types
  other than `Vec` and `Option`.

```python
from submarine.rust_types.sanitizer import parse_and_sanitize
from submarine.rust_types.to_scale_schema import to_scale_schema

rust_type = parse_and_sanitize("Vec<<T::Lookup as StaticLookup>::Source>")
print(rust_type)                  # Vec<Lookup::Source>
print(to_scale_schema(rust_type))  # Vec(type=Ref(name='Lookup::Source'))
```

## Talking to a node

```python
from submarine.rpc.client import RpcClient
from submarine.rpc.queries import get_metadata, get_events

block_hash = "0x" + "00" * 32

with RpcClient.connect("ws://localhost:9944") as client:
    metadata = get_metadata(client, block_hash)
    print(metadata.version, len(metadata.data))
    events = get_events(client, block_hash)
```

`RpcClient.send(method, params)` returns a `PendingRequest` at once; call
`result()`, `as_string()` or `raw_message()` on it (each takes an optional
timeout) to wait for the reply. An error object from the node is raised as
`RpcError`; a closed or failed connection as `ConnectionError`.
`send_many(method, params_list, fun)` sends every request before waiting
for any, then applies `fun` to each `PendingRequest`; a failure is raised
as `RuntimeError` naming its index. `close()` fails every request still
waiting.

`submarine.rpc.models` has `BlockHeader`, `Block`, `SignedBlock` and
`RuntimeVersion`, each built from a decoded JSON object with `from_json`.

## What it does not do

- There is no command-line tool; everything is used as a library.
- `get_metadata` returns only the metadata version byte and the raw bytes
  after it (`ChainMetadata`); it does not decode the metadata itself.
- `get_events` returns the raw SCALE-encoded event bytes; turning them into
  events needs a schema that you supply.