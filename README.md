# forgecore

Core building blocks for a small game engine. It is written in pure Python and
has no third-party dependencies.

## Modules

- `forgecore.platform`: `console_write` and `console_write_error` write
  ANSI-coloured text to stdout and stderr. `get_absolute_time` returns a
  monotonic time in seconds. `sleep(ms)` blocks for a number of milliseconds.
- `forgecore.logger`: levelled, coloured console logging at the levels of
  `LogLevel`, through `fatal`, `error`, `warn`, `info`, `debug` and `trace`.
  `FATAL` and `ERROR` go to stderr and the other levels go to stdout. Each
  call returns the line it wrote. `report_assertion_failure` logs a failed
  check at fatal level.
- `forgecore.kmemory`: `MemoryTracker` keeps count of allocated bytes, in
  total and per `MemoryTag`. Its `usage_report()` method returns a table of
  usage per tag. The module also has `zero_memory`, `copy_memory` and
  `set_memory` for `bytearray` and `memoryview` buffers.
- `forgecore.kstring`: `string_length`, `string_duplicate` (which can record
  the copy in a tracker) and `strings_equal`.
- `forgecore.darray`: `DynamicArray`, a growable array that doubles its
  capacity when it is full. It has `push`, `pop`, `pop_at`, `insert_at` and
  `clear`, and supports `len()`, indexing and iteration. A tracker can be
  given to account for its storage.
- `forgecore.linear_allocator`: `LinearAllocator`, a bump allocator over one
  fixed buffer.
  - `allocate(size)` returns a `memoryview` of the next bytes. It raises
    `AllocationError` when the buffer is used up or has been destroyed.
  - `free_all()` resets the allocator and zeroes the buffer.
  - `remaining()` returns the number of free bytes.
- `forgecore.clock`: `Clock`, a stopwatch with `start`, `update` and `stop`.
  It reads any time source and uses the platform's monotonic clock by default.
- `forgecore.event`: `EventSystem` dispatches events by numeric code. The
  built-in codes are in `EventCode`.
  - Each event carries a 16-byte `EventContext` payload. `EventContext.pack`
    and `unpack` read and write it with `struct` formats, little-endian by
    default.
  - A listener can be registered only once per code.
  - The first callback that returns `True` stops the event from reaching
    later listeners.
- `forgecore.input`: `InputSystem` tracks the current and previous-frame state
  of each key (`Keys`), each mouse button (`Buttons`) and the cursor position.
  When one of them changes, it fires the matching event through an
  `EventSystem`.
- `forgecore.mathutil`: math constants, `is_power_of_2`, `deg_to_rad`,
  `rad_to_deg` and pseudo-random helpers (`random_int`,
  `random_int_in_range`, `random_float`, `random_float_in_range`).
- `forgecore.vector`: immutable `Vec2`, `Vec3` and `Vec4` with component-wise
  arithmetic. They also provide length, normalization, dot product, cross
  product (for `Vec3`), comparison within a tolerance, and distance.
- `forgecore.matrix`: immutable `Mat4` with 16 values in column-major order.
  It provides:
  - multiplication, transpose and inverse;
  - orthographic and perspective projections and `look_at`;
  - translation, scale and Euler rotation matrices;
  - direction vectors (`forward`, `up`, `right` and the rest).
- `forgecore.quaternion`: immutable `Quat` with multiplication, conjugate,
  inverse, normalization, `from_axis_angle`, `slerp`, `to_mat4` and
  `to_rotation_matrix`.

## Installation

From a checkout of the project:

```
pip install .
```

## Examples

### Events and input

```python
from forgecore.event import EventCode, EventSystem
from forgecore.input import InputSystem, Keys

events = EventSystem()
pressed = []

def on_key(code, sender, listener, context):
    (key,) = context.unpack("<H")
    pressed.append(Keys(key))
    return False

events.register(EventCode.KEY_PRESSED, None, on_key)

inputs = InputSystem(events)
inputs.process_key(Keys.A, True)
assert inputs.is_key_down(Keys.A)
assert pressed == [Keys.A]
inputs.update(1 / 60)
assert inputs.was_key_down(Keys.A)
```

### Memory tracking and containers

```python
from forgecore.kmemory import MemoryTracker
from forgecore.darray import DynamicArray
from forgecore.linear_allocator import LinearAllocator

tracker = MemoryTracker()
items = DynamicArray(1, 8, tracker)
for value in (1, 2, 3):
    items.push(value)
print(len(items), items.capacity())  # 3 4

arena = LinearAllocator(64, None, tracker)
block = arena.allocate(16)
print(arena.remaining())  # 48

print(tracker.usage_report())
```

### Math

```python
from forgecore.vector import Vec3
from forgecore.matrix import Mat4
from forgecore.quaternion import Quat

view = Mat4.look_at(Vec3(0, 0, 5), Vec3.zero(), Vec3.up())
rotation = Quat.from_axis_angle(Vec3.up(), 1.0, True).to_mat4()
model = Mat4.translation(Vec3(1, 2, 3)) * rotation
```

## What it does not do

forgecore has only the engine's core services. It has no parts for:

- windows;
- an application or game loop;
- rendering.

Nothing in forgecore reads keyboard or mouse events from the operating system.
Your code has to feed them to `InputSystem` with `process_key`,
`process_button`, `process_mouse_move` and `process_mouse_wheel`.

There is also no assertion helper that stops execution. You can log a failed
check with `logger.report_assertion_failure`, and raise whatever exception
suits your code.

## Running the tests

```
pip install .[test]
pytest
```