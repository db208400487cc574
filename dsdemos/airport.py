"""Airport runway scheduling simulation with landing, takeoff and emergency queues."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

RULE = "-" * 63
VERBOSE_STEPS = 5
MAX_NEW_LANDINGS = 5
MAX_NEW_TAKEOFFS = 4
MAX_FUEL = 10


@dataclass
class Plane:
    """A plane waiting in a queue; ``time`` counts the steps it has waited."""

    id: int
    fuel: int = 0
    time: int = 0


class LandingQueue:
    """FIFO of planes waiting to land, tracking waiting time, saved fuel and crashes."""

    def __init__(self) -> None:
        self._planes: deque[Plane] = deque()
        self.landing_total_time = 0
        self.saving_fuel = 0
        self.crashes = 0

    def __len__(self) -> int:
        return len(self._planes)

    def __iter__(self) -> Iterator[Plane]:
        return iter(self._planes)

    @property
    def front(self) -> Plane:
        if not self._planes:
            raise IndexError("landing queue is empty")
        return self._planes[0]

    def push(self, plane_id: int, fuel: int) -> None:
        self._planes.append(Plane(plane_id, fuel))

    def pop(self) -> Plane:
        """Remove the front plane, adding its waiting time and remaining fuel to the totals."""
        if not self._planes:
            raise IndexError("pop from an empty landing queue")
        plane = self._planes.popleft()
        self.landing_total_time += plane.time
        self.saving_fuel += plane.fuel
        return plane

    def emergency_id(self) -> Optional[int]:
        """Id of the front plane if it has run out of fuel, else None."""
        if self._planes and self._planes[0].fuel == 0:
            return self._planes[0].id
        return None

    def tick(self) -> None:
        """Advance one step: count planes already below zero fuel, burn fuel, add waiting time."""
        for plane in self._planes:
            if plane.fuel < 0:
                self.crashes += 1
            plane.fuel -= 1
            plane.time += 1

    def format(self) -> str:
        if not self._planes:
            return "(-1 , -1)"
        return "".join(f"({plane.id},{plane.fuel}) " for plane in self._planes)


class TakeoffQueue:
    """FIFO of planes waiting to take off, tracking their total waiting time."""

    def __init__(self) -> None:
        self._planes: deque[Plane] = deque()
        self.takeoff_total_time = 0

    def __len__(self) -> int:
        return len(self._planes)

    def __iter__(self) -> Iterator[Plane]:
        return iter(self._planes)

    def push(self, plane_id: int) -> None:
        self._planes.append(Plane(plane_id))

    def pop(self) -> Plane:
        if not self._planes:
            raise IndexError("pop from an empty takeoff queue")
        plane = self._planes.popleft()
        self.takeoff_total_time += plane.time
        return plane

    def tick(self) -> None:
        for plane in self._planes:
            plane.time += 1

    def format(self) -> str:
        if not self._planes:
            return "-1"
        return "".join(f"{plane.id} , " for plane in self._planes)


class EmergencyQueue:
    """FIFO of plane ids that must land at once; counts every plane ever queued."""

    def __init__(self) -> None:
        self._ids: deque[int] = deque()
        self.emergency_count = 0

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def push(self, plane_id: int) -> None:
        self._ids.append(plane_id)
        self.emergency_count += 1

    def pop(self) -> int:
        if not self._ids:
            raise IndexError("pop from an empty emergency queue")
        return self._ids.popleft()

    def format(self) -> str:
        if not self._ids:
            return "-1"
        return "".join(f"{plane_id} , " for plane_id in self._ids)


@dataclass(frozen=True)
class SimulationResult:
    average_landing_time: float
    average_takeoff_time: float
    average_saved_fuel: float
    emergencies: int
    crashes: int


class Airport:
    """Four runways fed by six landing queues, four takeoff queues and one emergency queue.

    Runway 1 serves only takeoffs (from takeoff queue 1); runways 2-4 each serve a
    pair of landing queues before their own takeoff queue. Emergencies take any runway first.
    """

    def __init__(self) -> None:
        self.landing = [LandingQueue() for _ in range(6)]
        self.takeoff = [TakeoffQueue() for _ in range(4)]
        self.emergency = EmergencyQueue()
        self.next_landing_id = 1
        self.next_takeoff_id = 0
        self.steps_run = 0

    def add_landing(self, fuel: int) -> int:
        """Queue a new arriving plane in the least loaded pair of landing queues."""
        pair = min(
            range(3),
            key=lambda k: len(self.landing[2 * k]) + len(self.landing[2 * k + 1]),
        )
        first, second = self.landing[2 * pair], self.landing[2 * pair + 1]
        target = first if len(first) <= len(second) else second
        plane_id = self.next_landing_id
        target.push(plane_id, fuel)
        self.next_landing_id += 2
        return plane_id

    def add_takeoff(self) -> int:
        """Queue a new departing plane in the shortest takeoff queue, ties going to 1, 4, 3, 2."""
        index = min((0, 3, 2, 1), key=lambda k: len(self.takeoff[k]))
        plane_id = self.next_takeoff_id
        self.takeoff[index].push(plane_id)
        self.next_takeoff_id += 2
        return plane_id

    def handle_emergency(self) -> Optional[int]:
        """Move the first out-of-fuel front plane found into the emergency queue."""
        for queue in self.landing:
            plane_id = queue.emergency_id()
            if plane_id is not None:
                self.emergency.push(plane_id)
                queue.pop()
                return plane_id
        return None

    def _serve(
        self,
        pair: Optional[tuple[LandingQueue, LandingQueue]],
        takeoff: TakeoffQueue,
    ) -> Optional[int]:
        if len(self.emergency):
            return self.emergency.pop()
        if pair is not None:
            first, second = pair
            if len(first) or len(second):
                chosen = first if len(first) >= len(second) else second
                return chosen.pop().id
        if len(takeoff):
            return takeoff.pop().id
        return None

    def serve_runways(self, out: Optional[TextIO] = None) -> list[Optional[int]]:
        """Let each runway serve one plane; return the ids served (None for an idle runway)."""
        served: list[Optional[int]] = []
        for runway in range(4):
            pair = None
            if runway > 0:
                pair = (self.landing[2 * runway - 2], self.landing[2 * runway - 1])
            takeoff = self.takeoff[runway]
            plane_id = self._serve(pair, takeoff)
            served.append(plane_id)
            if out is not None:
                shown = -1 if plane_id is None else plane_id
                out.write(f"Runway{runway + 1} ({shown})\n")
                if pair is not None:
                    out.write(f"L1 : {pair[0].format()}\n")
                    out.write(f"L2 : {pair[1].format()}\n")
                out.write(f" T : {takeoff.format()}\n\n")
        if out is not None:
            out.write(f"{RULE}\n\n")
        return served

    def tick(self) -> None:
        for queue in self.landing:
            queue.tick()
        for queue in self.takeoff:
            queue.tick()
        self.steps_run += 1

    def step(self, rng: random.Random, out: Optional[TextIO] = None) -> None:
        """Run one time unit: arrivals, emergency check, runway service, clock tick."""
        if out is not None:
            out.write(f"T = {self.steps_run + 1}\n")

        arrivals = []
        for _ in range(rng.randrange(MAX_NEW_LANDINGS)):
            fuel = rng.randrange(MAX_FUEL) + 1
            arrivals.append((self.add_landing(fuel), fuel))
        departures = [self.add_takeoff() for _ in range(rng.randrange(MAX_NEW_TAKEOFFS))]

        if out is not None:
            landed = "".join(f"({pid},{fuel}) , " for pid, fuel in arrivals)
            out.write(f"landing plane : {landed}\n")
            leaving = "".join(f"{pid} , " for pid in departures)
            out.write(f"takeoff plane : {leaving}\n")

        self.handle_emergency()

        if out is not None:
            out.write(f"emergency : {self.emergency.format()}\n")
            out.write(f"\n{RULE}\n")

        self.serve_runways(out)
        self.tick()

    def result(self, steps: int) -> SimulationResult:
        """Averages per simulated step plus emergency and crash totals."""
        if steps <= 0:
            raise ValueError("steps must be positive")
        landing_time = sum(q.landing_total_time for q in self.landing)
        takeoff_time = sum(q.takeoff_total_time for q in self.takeoff)
        saved_fuel = sum(q.saving_fuel for q in self.landing)
        return SimulationResult(
            average_landing_time=landing_time / steps,
            average_takeoff_time=takeoff_time / steps,
            average_saved_fuel=saved_fuel / steps,
            emergencies=self.emergency.emergency_count,
            crashes=sum(q.crashes for q in self.landing),
        )


def simulate(
    steps: int,
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> SimulationResult:
    """Run the simulation for ``steps`` steps, reporting the first few to ``out``."""
    rng = rng if rng is not None else random.Random()
    airport = Airport()
    for index in range(steps):
        airport.step(rng, out if index < VERBOSE_STEPS else None)
    return airport.result(steps)


def format_result(result: SimulationResult) -> str:
    lines = [
        "                       | Total result |",
        RULE,
        f"AVG landing time : {result.average_landing_time:g}(s)",
        f"AVG takeoff time : {result.average_takeoff_time:g}(s)",
        f"AVG saving fuel : {result.average_saved_fuel:g}(s)",
        f"Total emergency plane : {result.emergencies}",
        f"Total crush : {result.crashes}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate airport runway scheduling.")
    parser.add_argument("steps", nargs="?", type=int, help="number of steps to simulate")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    steps = args.steps
    if steps is None:
        sys.stdout.write("stimulate times : ")
        sys.stdout.flush()
        try:
            steps = int(sys.stdin.readline().strip())
        except ValueError:
            parser.error("number of steps must be an integer")
    sys.stdout.write("\n")
    if steps <= 0:
        parser.error("number of steps must be positive")

    sys.stdout.write(f"\n{RULE}\n\n")
    result = simulate(steps, random.Random(args.seed), sys.stdout)
    sys.stdout.write(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())