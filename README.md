# amazed

`amazed` reads the description of a maze (rooms, tunnels, a start room, an end
room and a number of robots) from standard input. It echoes the validated
description and then prints, turn by turn, how the robots walk from the start
room to the end room without two robots sharing an intermediate room.

## Installation

```
pip install .
```

## Usage

```
amazed < maze.txt
```

The command takes no arguments. If it is given any, it exits with status 84;
given exactly `-h`, it prints a usage line first.

### Input format

```
3
##start
0 1 0
##end
1 13 0
2 5 0
0-2
2-1
```

* The first line is the number of robots.
* A room is a line `name x y`. The line after `##start` or `##end` is the
  start or end room.
* A tunnel is a line `a-b` joining two rooms already declared.
* Other lines beginning with `#` are comments and are skipped.

### Output

The accepted lines are echoed under the headers `#number_of_robots`, `#rooms`
and `#tunnels`. The moves follow under `#moves`: one line per turn, made of
`P<robot>-<room> ` entries.

### Errors and exit status

* A line that cannot be parsed: `an error occured on line : <n>` is written to
  standard error and the exit status is 84.
* No start or no end room: nothing is written to standard error and the exit
  status is 84.
* No path from the start room to the end room:
  `There is no path from beginning to end.` is written to standard error, no
  `#moves` section is printed, and the exit status is 0.

## Library use

```python
import io
import sys

from amazed.graph import parse_graph
from amazed.solver import solve
from amazed.text import read_input

lines = read_input(io.StringIO("1\n##start\n0 0 0\n##end\n1 1 0\n0-1\n"))
graph = parse_graph(lines, sys.stdout)
solve(graph, sys.stdout)
```

* `amazed.text` — `split_words`, `parse_int` and `read_input`.
* `amazed.graph` — `Graph` (`index_of`, `neighbours`), `parse_graph` and
  `ParseError` (its `line` is the offending line index, or `None` when the
  start or end room is missing).
* `amazed.solver` — `compute_costs` returns a `Room` per room with its distance
  to the end; `plan_moves` yields each turn as a list of `(robot id, room name)`
  pairs; `solve` writes the `#moves` section or raises `NoPathError`.
* `amazed.replay` — `split_sections` sorts the output of `amazed` back into a
  `Sections` object; `parse_robot_count`, `parse_rooms` (giving `RoomSpec`
  values), `parse_tunnels` and `parse_moves` read each section;
  `check_sections` raises `ReplayError` if a section is empty or starts with
  `error`.
* `amazed.motion` — `layout_rooms` scales room positions into an area of a
  given size; `Animator` moves `Bot` objects frame by frame through the
  recorded turns, with `update(elapsed)`, `toggle_pause()` and `finished`.

## What the package does not do

There is no graphical viewer. `amazed.replay` and `amazed.motion` compute
room layouts and robot positions from a recorded run, but nothing opens a
window or draws them, and no command replays a run.

## Running the tests

```
pip install .[test]
pytest
```