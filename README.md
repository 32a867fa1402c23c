# purehash

SHA-1 and SHA-256 message digests written in plain Python, with no
dependencies outside the standard library.

The hash objects follow the familiar streaming shape: create one, feed it
bytes with `update`, and read the result with `digest`, `hexdigest` or
`words`. Reading a digest does not consume the object, so you can keep
feeding it data afterwards.

## Installation

```
pip install purehash
```

## Usage

One-shot hashing:

```python
from purehash.sha1 import sha1
from purehash.sha256 import sha256

sha1(b"abc").hexdigest()
# 'a9993e364706816aba3e25717850c26c9cd0d89d'

sha256(b"abc").hexdigest()
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
```

Streaming input:

```python
from purehash.sha256 import Sha256

h = Sha256()
for chunk in (b"0123456701234567", b"0123456701234567"):
    h.update(chunk)

h.digest()      # 32 raw bytes
h.hexdigest()   # 64 lower-case hex characters
h.words()       # the digest as eight 32-bit integers
```

`Sha1` works the same way, with a 20-byte digest, 40 hex characters and
five words. Both constructors also accept initial data: `Sha1(b"abc")`.

`copy()` returns an independent hash object with the same state. Use it to
get the digests of several messages that start with the same prefix.

Input of 2**64 bits or more is too long for either algorithm; `update`
raises `OverflowError` for it.

### Word arithmetic

`purehash.words` holds the 32-bit helpers the algorithms are built on:

```python
from purehash.words import sum32, rotl, rotr

sum32(0xFFFFFFFF, 2)   # 1, addition modulo 2**32
rotl(0x80000000, 1)    # 1
rotr(1, 1)             # 0x80000000
```

`rotl` and `rotr` raise `ValueError` when the shift is not in
`0 <= n < 32`.

The round functions are public as well: `sha1_f(t, b, c, d)` and `sha1_k(t)`
in `purehash.sha1` (both raise `ValueError` for a step outside 0..79), and
`ch`, `maj`, `bsig0`, `bsig1`, `ssig0` and `ssig1` in `purehash.sha256`.

## What it does not do

purehash is a library only: it has no command-line tool, does not hash
files for you, and offers no other algorithms than SHA-1 and SHA-256.

## Running the tests

```
pip install purehash[test]
pytest
```