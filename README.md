# trantorkit

A few small helpers with no dependencies.

## Installation

```
pip install trantorkit
```

## Byte order

`trantorkit.funcs.hton64(n)` converts an unsigned 64-bit integer from host
byte order to network (big-endian) byte order. `ntoh64(n)` converts it back.
On a big-endian host both return the value unchanged. On a little-endian host
they reverse its eight bytes. A value that does not fit in an unsigned 64-bit
integer raises `OverflowError`.

```python
from trantorkit.funcs import hton64, ntoh64

value = 0x0102030405060708
assert ntoh64(hton64(value)) == value
```

## Splitting strings

`split_string(s, delimiter, accept_empty_string=False)` splits `s` on every
occurrence of `delimiter` and returns a list. By default it drops empty pieces.
An empty delimiter always returns an empty list.

```python
from trantorkit.funcs import split_string

split_string(",1,2,3,", ",")                        # ['1', '2', '3']
split_string(",1,2,3,", ",", True)                  # ['', '1', '2', '3', '']
split_string("trantor::::splitString", "::", True)  # ['trantor', '', 'splitString']
split_string("", ",", True)                         # ['']
split_string("", ",")                               # []
```

## Multi-producer, single-consumer queue

`trantorkit.mpsc_queue.MpscQueue` is a FIFO queue. Any number of threads may
call `enqueue(item)` at the same time. `dequeue()`, `drain()` and `empty()`
are for one consumer thread.

```python
from trantorkit.mpsc_queue import MpscQueue

queue = MpscQueue()
queue.enqueue("a")
queue.enqueue("b")

queue.dequeue()        # 'a'
queue.empty()          # False
len(queue)             # 1
list(queue.drain())    # ['b']
bool(queue)            # False
```

- `dequeue()` raises `IndexError` when the queue is empty.
- `drain()` is a generator. It yields items from the front until the queue is empty.

### What the queue does not do

The queue never blocks. It has no method that waits for an item to arrive and
no size limit. A consumer that wants to wait must poll `empty()`, or call
`dequeue()` and catch `IndexError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```