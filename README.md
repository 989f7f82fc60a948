# debouncefsm

A small library for debouncing a push button. It has three modules.

- `debouncefsm.delay` provides `Delay`, a non-blocking timer. You construct it
  with a duration in milliseconds and a clock, which is any callable that
  returns the current tick count in milliseconds. `check_duration` clamps the
  duration to the range 50–2000 ms (`DELAY_MIN` and `DELAY_MAX`).
  - `read()` starts a stopped delay and returns `False`.
  - While the delay is running, `read()` returns `True` once the duration has
    elapsed, and the delay stops.
  - `write()` changes the duration and clamps it in the same way.
  - Tick counts are treated as unsigned 32-bit values, so elapsed time stays
    correct when the counter wraps around.
- `debouncefsm.gpio` provides `GpioBoard`, which maps the logical devices in
  `Device` onto port/pin pairs of a pin backend:
  - `Device.BUTTON_USER` is `GPIOB` pin 3.
  - `Device.LED_DEBUG` is `GPIOC` pin 13.

  `GpioBoard` has `read`, `write`, `toggle` and `init`. `init` turns the debug
  LED off. A device that does not exist raises `InvalidDeviceError`, which is a
  subclass of `ValueError`. `MemoryPins` is an in-memory backend in which every
  pin starts low.
- `debouncefsm.debounce` provides `DebounceFSM`, a four-state machine whose
  states are listed in `DebounceState`: up, falling, down and rising.
  - It turns the debug LED on when a press is confirmed and off when a release
    is confirmed.
  - It latches press and release events.
  - Its `state` property gives the current state.
  - `reset()` does the following: it returns the machine to the up state, sets
    the delay to the debounce time of 40 ms (which the delay clamps to 50 ms),
    stops the delay, and turns the LED off.

## Install

```
pip install debouncefsm
```

## Usage

```python
from debouncefsm.delay import Delay
from debouncefsm.gpio import Device, GpioBoard, MemoryPins
from debouncefsm.debounce import DebounceFSM

now = 0
def clock():
    return now

board = GpioBoard(MemoryPins())
board.init()                      # debug LED off
fsm = DebounceFSM(board, Delay(40, clock))

board.write(Device.BUTTON_USER, True)   # simulate a press
fsm.update()                            # UP -> FALLING, timer starts
now += 50
fsm.update()                            # stable: FALLING -> DOWN, LED on

if fsm.read_key_desc():                 # True once, then cleared
    print("pressed")
```

Call `update()` periodically from your main loop. `read_key_desc()` reports a
debounced press and `read_key_asc()` reports a debounced release. Each flag is
cleared when it is read. If the button level changes back before the delay
expires, the change is discarded as a bounce.

## What it does not do

The package has no backend that drives real pins. `MemoryPins` is the only
backend it provides. To use real hardware, pass `GpioBoard` your own object
with `read_pin(port, pin)`, `write_pin(port, pin, level)` and
`toggle_pin(port, pin)` methods. The package also has no command-line program
and no main loop of its own. You call `update()` yourself.

## Tests

```
pip install debouncefsm[test]
pytest
```