# trantorkit

A handful of small helpers for network code. The package has no
dependencies outside the standard library.

## Installation

```
pip install trantorkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "trantorkit[test]"
pytest
```

## What is inside

### `trantorkit.funcs`

- `hton64(n)` and `ntoh64(n)` convert a 64-bit unsigned integer between host
  byte order and network (big-endian) byte order. On a big-endian host both
  return their input unchanged. A value outside `0 .. 2**64 - 1` raises
  `ValueError`.
- `split_string(s, delimiter, accept_empty_string=False)` splits `s` on a
  delimiter that may be several characters long. Empty pieces are dropped
  unless you pass `accept_empty_string=True`. An empty delimiter returns an
  empty list.

```python
from trantorkit.funcs import split_string

split_string(",1,2,3,", ",")                             # ['1', '2', '3']
split_string(",1,2,3,", ",", accept_empty_string=True)   # ['', '1', '2', '3', '']
split_string("trantor:::splitString", "::")              # ['trantor', ':splitString']
split_string("", ",", accept_empty_string=True)          # ['']
split_string("trantor", "")                              # []
```

### `trantorkit.mpsc_queue`

`MpscQueue` is a FIFO queue that any number of threads may feed with
`enqueue()` while a single consumer thread takes items out.

- `enqueue(item)` puts an item at the back.
- `dequeue()` takes the item at the front. On an empty queue it raises
  `QueueEmpty`, a subclass of `IndexError`.
- `empty()` returns `True` when the queue holds nothing.
- `drain()` yields items from the front until the queue is empty.
- `len(queue)` gives the number of items waiting.

```python
from trantorkit.mpsc_queue import MpscQueue, QueueEmpty

queue = MpscQueue()
queue.enqueue("first")
queue.enqueue("second")

print(queue.dequeue())        # first
print(list(queue.drain()))    # ['second']

try:
    queue.dequeue()
except QueueEmpty:
    print("nothing left")
```

### `trantorkit.scatter_read`

`readv(sock, buffers)` receives data from a connected socket into a series of
writable buffers, such as `bytearray` or `memoryview`. It works through the
buffers in order and makes one receive per buffer:

- a buffer of zero length is skipped;
- reading stops at the first buffer that the receive does not fill
  completely;
- it returns the total number of bytes received;
- if the very first receive fails, the `OSError` is raised; if a receive
  fails after some bytes have already arrived, reading stops and the count so
  far is returned.

```python
import socket
from trantorkit.scatter_read import readv

left, right = socket.socketpair()
left.sendall(b"headerbody")

header = bytearray(6)
body = bytearray(4)
print(readv(right, [header, body]))   # 10
print(bytes(header), bytes(body))     # b'header' b'body'
```

## What this package does not do

trantorkit is a set of building blocks only. It has no event loop, no TCP
server or client, no timers, no logging and no TLS support. It also has no
command-line program. You write the networking around these helpers yourself.