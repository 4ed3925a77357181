import pytest

from screwkin.numeric import ParkMillerRandom
from screwkin.truncated_ab import (
    truncated_normal_ab_cdf,
    truncated_normal_ab_cdf_inv,
    truncated_normal_ab_cdf_values,
    truncated_normal_ab_mean,
    truncated_normal_ab_moment,
    truncated_normal_ab_pdf,
    truncated_normal_ab_pdf_values,
    truncated_normal_ab_sample,
    truncated_normal_ab_variance,
)


@pytest.mark.parametrize("row", truncated_normal_ab_cdf_values())
def test_cdf_matches_reference_table(row):
    mu, sigma, a, b, x, fx = row
    assert truncated_normal_ab_cdf(x, mu, sigma, a, b) == pytest.approx(fx, abs=1e-7)


@pytest.mark.parametrize("row", truncated_normal_ab_pdf_values())
def test_pdf_matches_reference_table(row):
    mu, sigma, a, b, x, fx = row
    assert truncated_normal_ab_pdf(x, mu, sigma, a, b) == pytest.approx(fx, rel=1e-7)


def test_reference_tables_have_eleven_rows():
    assert len(truncated_normal_ab_cdf_values()) == 11
    assert len(truncated_normal_ab_pdf_values()) == 11
    assert truncated_normal_ab_cdf_values()[5][-1] == 0.5


def test_cdf_outside_interval():
    assert truncated_normal_ab_cdf(40.0, 100.0, 25.0, 50.0, 150.0) == 0.0
    assert truncated_normal_ab_cdf(160.0, 100.0, 25.0, 50.0, 150.0) == 1.0
    assert truncated_normal_ab_cdf(150.0, 100.0, 25.0, 50.0, 150.0) == pytest.approx(1.0)
    assert truncated_normal_ab_cdf(50.0, 100.0, 25.0, 50.0, 150.0) == pytest.approx(0.0)


def test_pdf_outside_interval_is_zero():
    assert truncated_normal_ab_pdf(49.0, 100.0, 25.0, 50.0, 150.0) == 0.0
    assert truncated_normal_ab_pdf(151.0, 100.0, 25.0, 50.0, 150.0) == 0.0


@pytest.mark.parametrize("x", [55.0, 80.0, 100.0, 123.0, 145.0])
def test_cdf_inv_round_trip(x):
    cdf = truncated_normal_ab_cdf(x, 100.0, 25.0, 50.0, 150.0)
    assert truncated_normal_ab_cdf_inv(cdf, 100.0, 25.0, 50.0, 150.0) == pytest.approx(
        x, abs=1e-5
    )


@pytest.mark.parametrize("cdf", [-0.1, 1.5])
def test_cdf_inv_rejects_out_of_range(cdf):
    with pytest.raises(ValueError):
        truncated_normal_ab_cdf_inv(cdf, 100.0, 25.0, 50.0, 150.0)


def test_mean_of_symmetric_interval_is_mu():
    assert truncated_normal_ab_mean(100.0, 25.0, 50.0, 150.0) == pytest.approx(100.0)


def test_mean_shifts_towards_interval():
    assert truncated_normal_ab_mean(0.0, 1.0, 0.5, 3.0) > 0.5


def test_moment_zero_is_one():
    assert truncated_normal_ab_moment(0, 100.0, 25.0, 50.0, 150.0) == pytest.approx(1.0)


def test_first_moment_equals_mean():
    args = (3.0, 2.0, 1.0, 8.0)
    assert truncated_normal_ab_moment(1, *args) == pytest.approx(
        truncated_normal_ab_mean(*args)
    )


def test_second_moment_consistent_with_variance():
    args = (3.0, 2.0, 1.0, 8.0)
    mean = truncated_normal_ab_mean(*args)
    second = truncated_normal_ab_moment(2, *args)
    assert second - mean * mean == pytest.approx(truncated_normal_ab_variance(*args))


def test_variance_smaller_than_parent():
    variance = truncated_normal_ab_variance(100.0, 25.0, 50.0, 150.0)
    assert 0.0 < variance < 25.0 * 25.0


@pytest.mark.parametrize(
    "args",
    [
        (-1, 100.0, 25.0, 50.0, 150.0),
        (2, 100.0, 0.0, 50.0, 150.0),
        (2, 100.0, 25.0, 150.0, 50.0),
        (2, 0.0, 1.0, -100.0, -50.0),
    ],
)
def test_moment_errors(args):
    with pytest.raises(ValueError):
        truncated_normal_ab_moment(*args)


def test_samples_lie_in_interval_and_advance_seed():
    rng = ParkMillerRandom(123456789)
    samples = [truncated_normal_ab_sample(100.0, 25.0, 50.0, 150.0, rng) for _ in range(200)]
    assert all(50.0 <= s <= 150.0 for s in samples)
    assert len(set(samples)) > 150


def test_sample_reproducible_from_seed():
    first = truncated_normal_ab_sample(0.0, 1.0, -1.0, 2.0, ParkMillerRandom(42))
    second = truncated_normal_ab_sample(0.0, 1.0, -1.0, 2.0, ParkMillerRandom(42))
    assert first == second
    assert -1.0 <= first <= 2.0