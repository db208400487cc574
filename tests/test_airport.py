import io
import random

import pytest

from dsdemos.airport import (
    Airport,
    EmergencyQueue,
    LandingQueue,
    SimulationResult,
    TakeoffQueue,
    format_result,
    main,
    simulate,
)


def test_landing_queue_fifo_and_totals():
    queue = LandingQueue()
    queue.push(1, 5)
    queue.push(3, 4)
    queue.tick()
    first = queue.pop()
    assert first.id == 1
    assert queue.landing_total_time == 1
    assert queue.saving_fuel == 4
    assert len(queue) == 1


def test_landing_queue_pop_empty_raises():
    with pytest.raises(IndexError):
        LandingQueue().pop()


def test_landing_queue_format():
    queue = LandingQueue()
    assert queue.format() == "(-1 , -1)"
    queue.push(1, 5)
    queue.push(3, 4)
    assert queue.format() == "(1,5) (3,4) "


def test_landing_queue_crash_counted_only_below_zero():
    queue = LandingQueue()
    queue.push(1, 0)
    queue.tick()
    assert queue.crashes == 0
    queue.tick()
    assert queue.crashes == 1
    plane = queue.front
    assert plane.fuel == -2
    assert plane.time == 2


def test_emergency_id_only_for_empty_front():
    queue = LandingQueue()
    assert queue.emergency_id() is None
    queue.push(7, 1)
    queue.push(9, 0)
    assert queue.emergency_id() is None
    queue.tick()
    assert queue.emergency_id() == 7


def test_takeoff_queue_behaviour():
    queue = TakeoffQueue()
    assert queue.format() == "-1"
    queue.push(0)
    queue.push(2)
    assert queue.format() == "0 , 2 , "
    queue.tick()
    queue.tick()
    assert queue.pop().id == 0
    assert queue.takeoff_total_time == 2
    with pytest.raises(IndexError):
        queue.pop()
        queue.pop()


def test_emergency_queue_counts_every_push():
    queue = EmergencyQueue()
    queue.push(5)
    queue.push(7)
    assert queue.format() == "5 , 7 , "
    assert queue.pop() == 5
    assert queue.emergency_count == 2
    assert len(queue) == 1


def test_add_landing_balances_pairs():
    airport = Airport()
    ids = [airport.add_landing(5) for _ in range(4)]
    assert ids == [1, 3, 5, 7]
    assert [len(q) for q in airport.landing] == [1, 1, 1, 0, 1, 0]
    assert [p.id for p in airport.landing[1]] == [7]


def test_add_takeoff_tie_order():
    airport = Airport()
    ids = [airport.add_takeoff() for _ in range(4)]
    assert ids == [0, 2, 4, 6]
    assert [[p.id for p in q] for q in airport.takeoff] == [[0], [6], [4], [2]]


def test_handle_emergency_moves_plane():
    airport = Airport()
    assert airport.handle_emergency() is None
    airport.landing[2].push(9, 0)
    assert airport.handle_emergency() == 9
    assert len(airport.landing[2]) == 0
    assert list(airport.emergency) == [9]
    assert airport.emergency.emergency_count == 1


def test_serve_runways_priorities():
    airport = Airport()
    airport.emergency.push(9)
    airport.takeoff[0].push(0)
    airport.landing[0].push(1, 5)
    airport.takeoff[1].push(2)
    out = io.StringIO()
    served = airport.serve_runways(out)
    assert served == [9, 1, None, None]
    assert len(airport.takeoff[0]) == 1
    assert len(airport.takeoff[1]) == 1
    text = out.getvalue()
    assert "Runway1 (9)" in text
    assert "Runway3 (-1)" in text


def test_serve_runways_prefers_longer_landing_queue():
    airport = Airport()
    airport.landing[2].push(1, 5)
    airport.landing[3].push(3, 5)
    airport.landing[3].push(5, 5)
    served = airport.serve_runways()
    assert served[2] == 3


def test_result_requires_positive_steps():
    with pytest.raises(ValueError):
        Airport().result(0)


def test_result_averages():
    airport = Airport()
    airport.landing[0].push(1, 6)
    airport.takeoff[0].push(0)
    airport.tick()
    airport.serve_runways()
    result = airport.result(2)
    assert result.average_landing_time == 0.5
    assert result.average_takeoff_time == 0.5
    assert result.average_saved_fuel == 2.5


def test_simulate_is_deterministic_for_seed():
    first = simulate(50, random.Random(42))
    second = simulate(50, random.Random(42))
    assert first == second
    assert first.crashes >= 0
    assert first.emergencies >= 0


def test_simulate_reports_only_first_steps():
    out = io.StringIO()
    simulate(10, random.Random(1), out)
    text = out.getvalue()
    assert "T = 5\n" in text
    assert "T = 6\n" not in text


def test_format_result_lines():
    text = format_result(SimulationResult(1.5, 2.0, 3.25, 4, 5))
    lines = text.splitlines()
    assert "AVG landing time : 1.5(s)" in lines
    assert "AVG takeoff time : 2(s)" in lines
    assert "AVG saving fuel : 3.25(s)" in lines
    assert lines[-1] == "Total crush : 5"


def test_main_with_argument(capsys):
    assert main(["3", "--seed", "7"]) == 0
    output = capsys.readouterr().out
    assert "Total crush : " in output
    assert "T = 3" in output


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main(["--seed", "3"]) == 0
    assert "stimulate times : " in capsys.readouterr().out


def test_main_rejects_bad_steps():
    with pytest.raises(SystemExit):
        main(["0"])