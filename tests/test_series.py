from datetime import date, datetime

import pytest

from pokerstats.models import Session
from pokerstats.stats import build_performance, chart_rows, date_domain, day_key, derive_series


def _session(day, player: str, profit: float) -> Session:
    return Session(date=day, player=player, buy_in=20.0, profit=profit)


def test_cumulative_is_running_sum_in_date_order():
    sessions = [
        _session(date(2025, 1, 15), "Alice", 7.0),
        _session(date(2025, 1, 1), "Alice", 10.0),
        _session(date(2025, 1, 8), "Alice", -4.0),
    ]

    points = derive_series(sessions)["Alice"]

    assert [p.date for p in points] == [date(2025, 1, 1), date(2025, 1, 8), date(2025, 1, 15)]
    assert [p.cumulative for p in points] == pytest.approx([10.0, 6.0, 13.0])
    assert [p.day_profit for p in points] == pytest.approx([10.0, -4.0, 7.0])


def test_nth_cumulative_equals_sum_of_first_n_profits():
    profits = [3.5, -1.25, 10.0, -7.0, 0.0, 2.75]
    sessions = [_session(date(2025, 1, d + 1), "Bob", p) for d, p in enumerate(profits)]

    points = derive_series(sessions)["Bob"]

    for n, point in enumerate(points, start=1):
        assert point.cumulative == pytest.approx(sum(profits[:n]))


def test_same_day_sessions_keep_input_order():
    sessions = [
        _session(date(2025, 1, 2), "Cara", 1.0),
        _session(date(2025, 1, 1), "Cara", 5.0),
        _session(date(2025, 1, 1), "Cara", -2.0),
    ]

    points = derive_series(sessions)["Cara"]

    assert [p.day_profit for p in points] == [5.0, -2.0, 1.0]
    assert [p.cumulative for p in points] == [5.0, 3.0, 4.0]


def test_disjoint_players_share_union_domain():
    sessions = [
        _session(date(2025, 1, 3), "Alice", 1.0),
        _session(date(2025, 1, 1), "Alice", 1.0),
        _session(date(2025, 1, 2), "Bob", 1.0),
        _session(date(2025, 1, 4), "Bob", 1.0),
    ]

    performance = build_performance(sessions)

    assert performance.domain == [date(2025, 1, d) for d in (1, 2, 3, 4)]
    assert [p.date for p in performance.series["Alice"]] == [date(2025, 1, 1), date(2025, 1, 3)]
    assert [p.date for p in performance.series["Bob"]] == [date(2025, 1, 2), date(2025, 1, 4)]


def test_domain_collapses_times_on_the_same_day():
    sessions = [
        _session(datetime(2025, 1, 1, 8, 0), "Alice", 1.0),
        _session(datetime(2025, 1, 1, 22, 30), "Bob", 1.0),
    ]

    assert date_domain(sessions) == [date(2025, 1, 1)]
    assert day_key(datetime(2025, 1, 1, 8, 0)) == day_key(date(2025, 1, 1))


def test_derive_series_is_idempotent():
    sessions = [_session(date(2025, 1, 2), "Alice", 2.0), _session(date(2025, 1, 1), "Bob", -1.0)]

    assert derive_series(sessions) == derive_series(sessions)
    assert build_performance(sessions) == build_performance(sessions)


def test_empty_sessions():
    performance = build_performance([])

    assert performance.series == {}
    assert performance.domain == []
    assert chart_rows(performance) == []


def test_chart_rows_are_sparse_by_default():
    sessions = [
        _session(date(2025, 1, 1), "Alice", 10.0),
        _session(date(2025, 1, 2), "Bob", -5.0),
        _session(date(2025, 1, 3), "Alice", 4.0),
    ]

    rows = chart_rows(build_performance(sessions))

    assert [row.date for row in rows] == [date(2025, 1, 1), date(2025, 1, 2), date(2025, 1, 3)]
    assert rows[0].cumulative == {"Alice": 10.0}
    assert rows[1].cumulative == {"Bob": -5.0}
    assert rows[2].cumulative == {"Alice": 14.0}
    assert rows[2].day_profit == {"Alice": 4.0}


def test_chart_rows_hold_last_value_across_gaps():
    sessions = [
        _session(date(2025, 1, 1), "Alice", 10.0),
        _session(date(2025, 1, 2), "Bob", -5.0),
        _session(date(2025, 1, 3), "Alice", 4.0),
    ]

    rows = chart_rows(build_performance(sessions), hold=True)

    assert rows[0].cumulative == {"Alice": 10.0}
    assert rows[1].cumulative == {"Alice": 10.0, "Bob": -5.0}
    assert rows[1].day_profit == {"Bob": -5.0}
    assert rows[2].cumulative == {"Alice": 14.0, "Bob": -5.0}


def test_chart_rows_combine_same_day_sessions():
    sessions = [
        _session(date(2025, 1, 1), "Alice", 10.0),
        _session(date(2025, 1, 1), "Alice", -3.0),
    ]

    [row] = chart_rows(build_performance(sessions))

    assert row.cumulative == {"Alice": 7.0}
    assert row.day_profit == {"Alice": 7.0}
