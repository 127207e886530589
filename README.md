# perfkit

perfkit provides building blocks for network measurement tools. It uses only the standard library.

- `perfkit.jsonnode`: an in-memory JSON document tree. It defines `Node` and the `JsonType` flags. Children keep their insertion order. Object members can be looked up with or without ASCII case sensitivity. Numbers keep both a float view and a saturated 64-bit integer view.
- `perfkit.jsonbuild`: constructors for nodes of every kind, and for arrays of numbers or strings.
- `perfkit.dscp`: IP type-of-service and DiffServ codepoint names and values.
- `perfkit.constants`: defaults and limits used by throughput tests, the `IperfMode` enum, and IPv6 flow-label constants.

## Installation

```
pip install perfkit
```

## Building a document

```python
from perfkit.jsonbuild import (
    create_object, create_number, create_string, create_int_array, create_true,
)

doc = create_object()
doc.add("title", create_string("run 1"))
doc.add("Duration", create_number(10))
doc.add("ports", create_int_array([5201, 5202]))
doc.add("verbose", create_true())

duration = doc.get_item("duration")            # case-insensitive by default
duration.value_double                           # 10.0
duration.value_int                              # 10
doc.get_item("duration", True)                  # None: case-sensitive lookup

ports = doc.get_item("ports")
len(ports)                                      # 2
[p.value_int for p in ports]                    # [5201, 5202]
ports[0].value_int                              # 5201
```

`create_float_array` rounds each value to single precision before storing it. `create_double_array` keeps full double precision. `create_raw` makes a node that holds raw JSON text.

## Editing a tree

`Node` edits its children in place:

- `append(item)` adds an item to the end. `add(name, item)` adds an item as an object member.
- `insert(index, item)` inserts before `index`. An index past the end appends. A negative index raises `IndexError`.
- `detach(item)`, `detach_index(index)` and `detach_name(name, case_sensitive)` remove a child and return it. `remove_index` and `remove_name` remove a child and discard it.
- `replace(item, replacement)`, `replace_index(index, replacement)` and `replace_name(name, replacement, case_sensitive)` put a new node where an old one was.
- `append_reference(item)` and `add_reference(name, item)` add a reference node. It shares the string and the children list of `item`, and the methods return it.
- `set_number(number)` stores the float value and an integer value. The integer is truncated and clamps at the signed 64-bit limits; NaN gives 0. The method returns the float.

Errors:

- An index that is out of range raises `IndexError`.
- A missing member name raises `KeyError`.
- A node that is not a child raises `ValueError`.

The type checks `is_null`, `is_true`, `is_false`, `is_bool`, `is_number`, `is_string`, `is_array`, `is_object`, `is_raw` and `is_invalid` test the node's `type`.

## Type-of-service values

```python
from perfkit.dscp import parse_qos, iptos_to_str

parse_qos("AF11")     # 40
parse_qos("0x10")     # 16
parse_qos("010")      # 8 (a leading 0 means octal)
iptos_to_str(0x28)    # 'af11'
iptos_to_str(0x3f)    # '0x3f'
iptos_to_str(200)     # 'cs0': values outside 0..64 are treated as 0
```

`parse_qos` accepts two kinds of input:

- a codepoint name, matched without regard to ASCII case;
- an integer from 0 to 255, written in decimal, octal or hexadecimal.

Any other string raises `ValueError`. A value that is not a `str` raises `TypeError`.

## What perfkit does not do

perfkit holds and edits JSON trees in memory only. It has no parser to turn JSON text into a tree. It has no printer to turn a tree back into text. It has no helpers to minify, compare or deep-copy documents.

It does not run network tests either. It has no client, no server and no command-line program. It supplies only the codepoint helpers and the constants.

## Running the tests

```
pip install perfkit[test]
pytest
```