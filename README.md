# drillbox

A collection of small, self-contained exercises: list and mapping drills,
classic design patterns, a tiny TCP chat client and echo server, and a few
thread-coordination demos. Each module can be imported and used on its own,
and each also runs as a command. The package needs nothing beyond the
standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `drillbox.expand_vector` | `ExpandVector`: an integer list addressed by 1-based positions; `insert_at`, `erase_at`, `change` and `get_at` raise `IndexError` for a position outside 1..length, and `erase_value` removes every equal element and returns how many went |
| `drillbox.bounded_list` | `BoundedList`: a fixed-capacity list (1000 by default); `add` raises `OverflowError` when full, `delete` pops the last element, `get_value_at` reads by 1-based position and returns the last element for a position past the end |
| `drillbox.flyweight` | `FlyWeight`, `ConcreteFlyWeight` and a `FlyWeightFactory` whose `get_flyweight(key)` hands out the shared instance stored under that key |
| `drillbox.observer` | `ConcreteSubject` with `attach`, `detach` and `notify`, calling `update` on attached `ConcreteObserver` objects in order |
| `drillbox.visitor` | A `City` of places (`BellTower`, `WhiteTower`) that a `Tourist` or a `Cleaner` visits in turn |
| `drillbox.box` | `Box` (frozen, non-negative integer dimensions) ordered by volume, and `parse_boxes` to read boxes from whitespace-separated triples |
| `drillbox.sequences` | `sort_initial_then_length`, `format_elements`, `unique_consecutive`, `merge_sorted`, `resize`, `insert_repeated`, `erase_value` and `process_boxes` |
| `drillbox.mappings` | `word_counts`, `format_word_counts`, `insert_if_absent`, `erase_key`, `erase_inner`, and a `Name` type ordered by second name, then first |
| `drillbox.diagonal` | `rectangle_points` lists every integer point of the rectangle spanned by two corners; `render` draws it on a text grid |
| `drillbox.client` | `ChatClient`, a TCP client sending NUL-padded 200-byte frames, `encode_message`/`decode_message`, and `run_chat` to drive a client from lines of input |
| `drillbox.server` | `EchoServer`, a selector-based echo server with `serve_once` and `serve_forever`, and `serve_greeting` for a one-shot greet-and-read exchange |
| `drillbox.workers` | `CountingWorker`, `AddHundredPipeline`, and `run_queue_demo`, two producers and two consumers sharing a queue |
| `drillbox.hello` | `greet()` |

## Examples

```python
from drillbox.expand_vector import ExpandVector

vec = ExpandVector([1, 2, 3, 4, 5, 6])
vec.erase_at(5)         # returns 5
vec.insert_at(5, 666)
vec.change(4, 888)
print(list(vec))        # [1, 2, 3, 888, 666, 6]
vec.get_at(7)           # raises IndexError
```

```python
from drillbox.observer import ConcreteObserver, ConcreteSubject

subject = ConcreteSubject()
subject.attach(ConcreteObserver("hello"))
subject.attach(ConcreteObserver("OK"))
subject.notify()        # prints "hello has Updated." then "OK has Updated."
```

```python
from drillbox.diagonal import rectangle_points

print(rectangle_points((0, 0), (2, 1)))
# [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]
```

```python
from drillbox.mappings import insert_if_absent

people = {"Ann": 25, "Bill": 46}
print(insert_if_absent(people, "Bill", 48))   # (46, False)
print(insert_if_absent(people, "Fred", 22))   # (22, True)
```

## Commands

Each demo is also available as a command:

```
drillbox-expand-vector [N ...]
drillbox-bounded-list
drillbox-flyweight
drillbox-observer
drillbox-visitor
drillbox-sequences [L W H ...]
drillbox-mappings [TEXT ...]
drillbox-diagonal [X1 Y1 X2 Y2 ...]
drillbox-client [--host HOST] [--port PORT] [--retries N]
drillbox-server [--host HOST] [--port PORT] [--greeting]
drillbox-workers {count,add-hundred,queue}
drillbox-hello
```

Commands that take values read them from standard input when none are given
on the command line.

`drillbox-server` listens on port 60000 and echoes back what each client
sends; with `--greeting` it instead listens on port 4999, sends `hello_OK` to
one client, prints its reply and exits. `drillbox-client` connects to port
60000 on 127.0.0.1 by default, sends each line you type as one frame, prints
what arrives as `Server says:...`, and stops after you type `quit`.

`drillbox-workers count` counts in the background (`--seconds`,
`--interval`), `drillbox-workers queue` runs the shared-queue demo
(`--delay` scales its sleeps), and `drillbox-workers add-hundred` reads
integers and prints each plus 100 until it reads `-123456`.

## Limits

The echo server only returns each client's data to that same client; it does
not relay messages between clients, so the chat client and server together
are not a chat room. Messages are plain text with no authentication or
encryption, and a single message must fit in 199 bytes of UTF-8.