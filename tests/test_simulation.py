import collections
import io
import random

import pytest

from theboys.evento import EventType
from theboys.mundo import N_BASES, N_HEROIS, N_MISSOES
from theboys.simulation import build_world, main, run


class _TailSink:
    def __init__(self):
        self.chunks = collections.deque(maxlen=20)

    def write(self, text):
        self.chunks.append(text)
        return len(text)

    def text(self):
        return "".join(self.chunks)


@pytest.fixture(scope="module")
def finished():
    sink = _TailSink()
    world = run(1, sink)
    return world, sink


def test_build_world_fills_everything():
    world, queue = build_world(random.Random(3), io.StringIO())
    assert all(h is not None for h in world.heroes)
    assert all(b is not None for b in world.bases)
    assert all(m is not None for m in world.missions)
    assert len(queue) == N_HEROIS + N_MISSOES + 1


def test_build_world_initial_events():
    world, queue = build_world(random.Random(4), io.StringIO())
    kinds = collections.Counter()
    last = None
    previous_prio = -1
    while len(queue):
        event, kind, prio = queue.pop()
        assert prio >= previous_prio
        previous_prio = prio
        kinds[kind] += 1
        last = event
        if kind == EventType.ARRIVE:
            assert 0 <= event.target < N_BASES
    assert kinds[EventType.ARRIVE] == N_HEROIS
    assert kinds[EventType.MISSION] == N_MISSOES
    assert kinds[EventType.END] == 1
    assert last.kind == EventType.END
    assert last.time == world.end_time


def test_build_world_is_reproducible():
    first, _ = build_world(random.Random(9), io.StringIO())
    second, _ = build_world(random.Random(9), io.StringIO())
    assert [h.patience for h in first.heroes] == [h.patience for h in second.heroes]
    assert [b.location for b in first.bases] == [b.location for b in second.bases]


def test_run_reaches_end_of_world(finished):
    world, sink = finished
    assert world.clock == world.end_time
    assert world.events_handled > N_HEROIS + N_MISSOES
    assert f"{world.end_time}: FIM" in sink.text()


def test_run_statistics_are_consistent(finished):
    world, sink = finished
    assert 0 <= world.missions_accomplished <= world.n_missions
    accomplished = sum(1 for m in world.missions if m.accomplished)
    assert accomplished == world.missions_accomplished
    assert all(m.attempts >= 1 for m in world.missions)
    assert f"EVENTOS TRATADOS: {world.events_handled}" in sink.text()


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "abc"])
    assert info.value.code == 2