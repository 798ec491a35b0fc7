# tests/unit/test_savings.py
import pytest

from calcsuite.core.finance.savings import project_savings


def _closed_form(initial: float, monthly: float, rate_pct: float, years: int) -> float:
    r = rate_pct / 100 / 12
    n = years * 12
    if r == 0:
        return initial + monthly * n
    growth = (1 + r) ** n
    return initial * growth + monthly * (growth - 1) / r


def test_future_value_matches_annuity_formula():
    res = project_savings(1_000, 200, 5.0, 10)
    assert res.future_value == pytest.approx(_closed_form(1_000, 200, 5.0, 10), rel=1e-9)
    assert 32_600 < res.future_value < 32_800  # ~32,703


def test_points_cover_year_zero_to_n():
    res = project_savings(1_000, 200, 5.0, 10)
    assert [p.year for p in res.points] == list(range(0, 11))
    assert res.points[0].value == 1_000
    assert res.points[-1].value == res.future_value


def test_growth_curve_is_increasing():
    res = project_savings(500, 50, 3.0, 5)
    values = [p.value for p in res.points]
    assert values == sorted(values)


def test_zero_rate_is_plain_sum():
    res = project_savings(1_000, 100, 0.0, 2)
    assert res.future_value == pytest.approx(3_400.0)
    assert res.total_growth == pytest.approx(0.0)


def test_contributions_and_growth_split():
    res = project_savings(1_000, 200, 5.0, 10)
    assert res.total_contributions == pytest.approx(1_000 + 200 * 120)
    assert res.total_growth == pytest.approx(res.future_value - res.total_contributions)


@pytest.mark.parametrize(
    "initial,monthly,rate,years",
    [
        (1_000, 100, 5.0, 0),
        (1_000, 100, -1.0, 5),
        (1_000, -100, 5.0, 5),
        (-1_000, 100, 5.0, 5),
    ],
)
def test_degenerate_inputs_single_point(initial, monthly, rate, years):
    res = project_savings(initial, monthly, rate, years)
    assert len(res.points) == 1
    assert res.points[0].year == 0
    assert res.future_value == max(initial, 0)
