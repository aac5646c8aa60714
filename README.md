# radarhub

Host-side pieces for a sweeping ultrasonic radar unit. The unit reports
detections over UDP, and a serial-attached control unit sends commands
that are passed on to the radar unit.

## Install

    pip install radarhub

## What is in it

- `radarhub.radar.RadarModel(angular=30, radial=4)` is a thread-safe polar
  grid with `angular` sectors around the full circle and `radial` rings from
  the centre to the edge.
  - `add_detection(deg, dist)` marks the cell a detection falls in as hit
    now. The distance is clamped to `[0, 1]`, where `1.0` is the edge of the
    radar, and angles wrap every 360 degrees.
  - `cell_hit_times()` returns, for each cell, the seconds since its last
    hit, in millisecond steps. A cell that has never been hit reports about
    an hour.
  - `clear_hits()` resets every cell to that "long ago" state.
  - `sweep_angle` is a read/write property that holds the current sweep
    angle in degrees.
  - `angular_res` and `radial_res` give the grid size.
  - `change_resolution(angular, radial)` only prints the request. The grid
    keeps its size.
- `radarhub.udp_client.UdpClient(handler)` binds a UDP port on all
  interfaces with `start_listening(port)`. It passes each datagram, as
  bytes, to `handler` on a background thread. `send(address, port, message)`
  sends from the same socket. `stop_listening()` stops the listener thread
  and `close()` also releases the socket. It can be used as a context
  manager, and `port` holds the bound port.
- `radarhub.serial_port.SerialPort(path, handler)` opens a serial device, or
  any URL pyserial accepts, at 115200 8N1 with no flow control. A background
  thread passes each complete, non-empty line to `handler` as a string.
  `close()` stops it, and it can also be used as a context manager.
  `LineBuffer().feed(data)` does the line splitting on its own: it returns
  the finished lines, without a trailing carriage return.
- `radarhub.controller` ties these together.
  - `parse_detection(packet)` reads a `"<degrees>,<distance>"` packet into a
    pair of floats, or returns `None`.
  - `Controller(model, listen_port=8888, command_port=8889)` listens for
    detection packets and records them on the model.
  - `handle_serial_line(line)` forwards lines that start with `IR:` to the
    radar unit's command port, once `set_radar_unit_ip(ip)` has been called.
  - `handle_udp_packet(packet)` records the detection a single packet
    carries.
  - `send_command_to_radar(command)` sends a command directly.
  - `close()` stops listening and releases the socket.

## Example

```python
from radarhub.radar import RadarModel
from radarhub.controller import Controller
from radarhub.serial_port import SerialPort

model = RadarModel(30, 4)
with Controller(model, 8888, 8889) as controller:
    controller.set_radar_unit_ip("192.0.2.10")
    controller.handle_udp_packet(b"45.0,0.5")
    print(model.cell_hit_times())

    # Relay commands from a control unit on a serial line:
    # with SerialPort("/dev/ttyUSB0", controller.handle_serial_line):
    #     ...
```

## What it does not do

- It has no display. `RadarModel` holds the data that a radar view would
  draw, but nothing here renders it.
- It installs no command-line program. The pieces are meant to be used from
  your own code.
- `Controller` does not open a serial port by itself. Create a `SerialPort`
  with `controller.handle_serial_line` as its handler if you need one.
- `Controller.tick()` does no work.
- Nothing sets `RadarModel.sweep_angle` from incoming packets.
- The radar unit's own software is not part of this package.

## Tests

    pip install radarhub[test]
    pytest