# dkits

Small helpers for everyday Python work: string checks and conversions,
byte helpers, a few container types (an array list, a double-ended list,
a linked list, a counting map and a multi-value map), `key=value`
property files, hex digests, AES-CBC encryption, text encodings and
operating-system helpers.

## Installation

```
pip install dkits
```

Python 3.10 or newer is required. AES support depends on `cryptography`.

## Modules

| Module | What it offers |
| --- | --- |
| `dkits.arrays` | `empty(*args)`, `not_empty(*args)` |
| `dkits.stringsx` | blank checks (`empty`, `not_empty`, `any_empty`, `none_empty`, `default_if_empty`), conversions (`to_int`, `to_float`, `to_bool`, `to_complex`, `to_uint`, `to_bytes`), `trim`, `replace_all`, `strip`, `strip_start`, `strip_end`, `strip_blank` |
| `dkits.builder` | `Builder` with `write_string`, `write_byte`, `join_string`, `join_byte` |
| `dkits.bytesx` | `set_all`, `zero_all`, `from_uint16_le`, `to_uint16_le`, `from_uint16_be`, `to_uint16_be` |
| `dkits.defaults` | `default_if_error` and friends: return a fallback when an error is present |
| `dkits.errorsx` | `err(message)`, `log_error(err)` |
| `dkits.arraylist` | `ArrayList` and its alias `List` |
| `dkits.listx` | `Listx` double-ended list with `for_each`; `empty(lst)`, `not_empty(lst)` |
| `dkits.simple_list` | `SimpleList` with `foreach` and `find` |
| `dkits.mapx` | `Map` and `MultiValueMap` |
| `dkits.aesx` | AES-CBC `encrypt`, `encrypt_string`, `decrypt` |
| `dkits.digests` | `md5_hex`, `sha1_hex`, `sha256_hex`, `sha512_hex` |
| `dkits.textcodec` | Ascii85, base32, base32hex and base64 (standard, URL-safe, unpadded) |
| `dkits.properties` | `Properties` loader and `DuplicateKeyError` |
| `dkits.system` | OS detection, environment variables, `exec_command` |

## Examples

### Strings

```python
from dkits import stringsx

stringsx.empty("   ")                 # True
stringsx.to_int("123")                # 123
stringsx.to_int("abc")                # 0 (invalid input gives 0)
stringsx.to_bool("t")                 # True
stringsx.to_uint("0x1f", 0)           # 31
stringsx.strip_end("120.00", ".0")    # "12"
stringsx.strip("[{a1}]", "[]")        # "{a1}"
stringsx.strip_blank("  ab c \t")     # "ab c"
```

Conversion failures are logged and answered with a zero value rather than
raised.

### Builder

```python
from dkits.builder import Builder

builder = Builder()
builder.join_string("hello")          # 5
builder.join_byte(ord(" "))           # 1
builder.join_string("world")          # 5
str(builder)                          # "hello world"
len(builder)                          # 11 (bytes)
```

### Containers

```python
from dkits.arraylist import ArrayList
from dkits.mapx import MultiValueMap
from dkits.simple_list import SimpleList

items = ArrayList("hello", "world")
items.contains("hello")               # (True, 0)
items.get(10)                         # None (out of range)
items.remove("hello")                 # True

values = MultiValueMap()
values.put("k", "a", "b")
values.put("k", "c")
list(values.get("k"))                 # ["a", "b", "c"]

linked = SimpleList()
linked.push_back(1)
linked.push_front(0)
linked.pop_back()                     # 1
linked.pop_back()                     # 0
linked.pop_back()                     # None
```

`Map` treats a key mapped to `None` as absent, and `remove` on either map
decrements the entry count whether or not the key was present.

### Hashing and encoding

```python
import os

from dkits import aesx, digests, textcodec

digests.md5_hex("hello")                    # "5d41402abc4b2a76b9719d911017c592"
textcodec.base64_encode(b"i am moremind")   # "aSBhbSBtb3JlbWluZA=="
textcodec.ascii85_encode(b"\0\0\0\0")       # b"z"

key = os.urandom(16)
ciphertext = aesx.encrypt(b"data", key)
aesx.decrypt(ciphertext, key)               # b"data"
```

AES keys must be 16, 24 or 32 bytes (text keys are UTF-8 encoded); other
sizes raise `ValueError`. The first block of the key is used as the IV.

### Properties files

```python
from dkits.properties import Properties

props = Properties()
props.load("app.properties")
props.get("name")                     # the value, or None when absent
"name" in props                       # True or False
```

Lines without `=`, or with a blank key or value, are skipped. A key that
appears twice raises `DuplicateKeyError`.

### System

```python
from dkits import system

system.is_linux()
system.set_os_env("FOO", "bar")
system.compare_os_env("FOO", "bar")   # True
stdout, stderr = system.exec_command("echo hi")
```

`exec_command` runs the command with `/bin/bash -c` (a bare `cmd` on
Windows). A non-zero exit raises `subprocess.CalledProcessError` carrying
the captured output and error text.

## What this package does not do

It has no caches (no LRU), no insertion-ordered or linked map types, no
unique-ID generation (UUIDs, object IDs or snowflake IDs), no JSON or XML
conversion of objects and no test assertion helpers.

## Running the tests

```
pip install -e ".[test]"
pytest
```