# theboys

A discrete-event simulation of a world with heroes, bases and missions.

Heroes arrive at random bases during the first three days. Each base has a
limited capacity and a waiting line; a hero's patience decides whether they
wait or give up and travel to another base. Once inside, a hero stays a while,
then leaves and travels on. Missions appear at random times during one
simulated year; the nearest base whose heroes together have every skill a
mission needs completes it, and heroes may die in the attempt. Missions that no
base can complete are retried one day later.

Every event is printed as it is handled, with the simulated time in minutes
first. When the world ends, a summary shows each hero, each base, the share of
missions completed, attempts per mission and the death rate.

## Installation

```
pip install .
```

## Running

```
theboys
```

The simulation is driven by a seeded pseudo-random generator. Without
`--seed` the seed is 1, so every plain run prints the same story; give another
seed for a different one:

```
theboys --seed 42
```

## Using it from Python

```python
import io
from theboys.simulation import run

buffer = io.StringIO()
world = run(seed=42, out=buffer)
print(world.missions_accomplished, "missions completed")
print(world.events_handled, "events handled")
```

`run(seed, out)` writes the event log to `out` (standard output when not
given) and returns the final `World`. With `seed=None` the run is not
repeatable.

`theboys.simulation.build_world(rng, out)` builds a world and its starting
event queue without running it. The building blocks are:

- `theboys.conjunto.BoundedSet`: a set of integers below a fixed capacity;
  out-of-range values are ignored.
- `theboys.lista.IntList`: a list of integers addressed by position, where
  `-1` means the end.
- `theboys.fprio.PriorityQueue`: a queue ordered by ascending priority, first
  in first out among equal priorities.
- `theboys.mundo`: `World`, `Hero`, `Base`, `Mission` and `Distance`.
- `theboys.evento`: `EventType`, `Event`, one `handle_*` function per event
  kind and `dispatch`, which runs the handler for an event.

## Tests

```
pip install .[test]
pytest
```