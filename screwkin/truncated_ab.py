"""The Normal distribution truncated to a finite interval ``[a, b]``."""

from __future__ import annotations

import math

from screwkin.normal import normal_01_cdf, normal_01_cdf_inv, normal_01_pdf
from screwkin.numeric import ParkMillerRandom, r8_choose

__all__ = [
    "truncated_normal_ab_cdf",
    "truncated_normal_ab_cdf_values",
    "truncated_normal_ab_cdf_inv",
    "truncated_normal_ab_mean",
    "truncated_normal_ab_moment",
    "truncated_normal_ab_pdf",
    "truncated_normal_ab_pdf_values",
    "truncated_normal_ab_sample",
    "truncated_normal_ab_variance",
]

_X_VALUES = (90.0, 92.0, 94.0, 96.0, 98.0, 100.0, 102.0, 104.0, 106.0, 108.0, 110.0)

_CDF_FX = (
    0.3371694242213513,
    0.3685009225506048,
    0.4006444233448185,
    0.4334107066903040,
    0.4665988676496338,
    0.5000000000000000,
    0.5334011323503662,
    0.5665892933096960,
    0.5993555766551815,
    0.6314990774493952,
    0.6628305757786487,
)

_PDF_FX = (
    0.01543301171801836,
    0.01588394472270638,
    0.01624375997031919,
    0.01650575046469259,
    0.01666496869385951,
    0.01671838200940538,
    0.01666496869385951,
    0.01650575046469259,
    0.01624375997031919,
    0.01588394472270638,
    0.01543301171801836,
)

_MU, _SIGMA, _A, _B = 100.0, 25.0, 50.0, 150.0


def _table(fx_values: tuple[float, ...]) -> tuple[tuple[float, float, float, float, float, float], ...]:
    return tuple((_MU, _SIGMA, _A, _B, x, fx) for x, fx in zip(_X_VALUES, fx_values))


_CDF_TABLE = _table(_CDF_FX)
_PDF_TABLE = _table(_PDF_FX)


def _check_cdf(cdf: float) -> None:
    if cdf < 0.0 or cdf > 1.0:
        raise ValueError("cdf must lie in [0, 1]")


def truncated_normal_ab_cdf(x: float, mu: float, sigma: float, a: float, b: float) -> float:
    """CDF of the Normal(``mu``, ``sigma``) distribution truncated to ``[a, b]``."""
    if x < a:
        return 0.0
    if x > b:
        return 1.0
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    xi_cdf = normal_01_cdf((x - mu) / sigma)
    return (xi_cdf - alpha_cdf) / (beta_cdf - alpha_cdf)


def truncated_normal_ab_cdf_values() -> tuple[tuple[float, float, float, float, float, float], ...]:
    """Reference tuples ``(mu, sigma, a, b, x, cdf)``."""
    return _CDF_TABLE


def truncated_normal_ab_cdf_inv(cdf: float, mu: float, sigma: float, a: float, b: float) -> float:
    """Inverse of the truncated CDF; ``cdf`` must lie in ``[0, 1]``."""
    _check_cdf(cdf)
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    xi_cdf = (beta_cdf - alpha_cdf) * cdf + alpha_cdf
    return mu + sigma * normal_01_cdf_inv(xi_cdf)


def truncated_normal_ab_mean(mu: float, sigma: float, a: float, b: float) -> float:
    """Mean of the truncated distribution."""
    alpha = (a - mu) / sigma
    beta = (b - mu) / sigma
    alpha_cdf = normal_01_cdf(alpha)
    beta_cdf = normal_01_cdf(beta)
    alpha_pdf = normal_01_pdf(alpha)
    beta_pdf = normal_01_pdf(beta)
    return mu + sigma * (alpha_pdf - beta_pdf) / (beta_cdf - alpha_cdf)


def truncated_normal_ab_moment(order: int, mu: float, sigma: float, a: float, b: float) -> float:
    """Raw moment of the given order of the truncated distribution."""
    if order < 0:
        raise ValueError("order must not be negative")
    if sigma <= 0.0:
        raise ValueError("sigma must be positive")
    if b <= a:
        raise ValueError("b must be greater than a")

    a_h = (a - mu) / sigma
    a_pdf = normal_01_pdf(a_h)
    a_cdf = normal_01_cdf(a_h)
    if a_cdf == 0.0:
        raise ValueError(
            f"PDF/CDF ratio fails because the CDF at a is too small "
            f"(pdf={a_pdf}, cdf={a_cdf})"
        )

    b_h = (b - mu) / sigma
    b_pdf = normal_01_pdf(b_h)
    b_cdf = normal_01_cdf(b_h)
    if b_cdf == 0.0:
        raise ValueError(
            f"PDF/CDF ratio fails because the CDF at b is too small "
            f"(pdf={b_pdf}, cdf={b_cdf})"
        )

    moment = 0.0
    irm2 = 0.0
    irm1 = 0.0
    for r in range(order + 1):
        if r == 0:
            ir = 1.0
        elif r == 1:
            ir = -(b_pdf - a_pdf) / (b_cdf - a_cdf)
        else:
            ir = float(r - 1) * irm2 - (
                math.pow(b_h, r - 1) * b_pdf - math.pow(a_h, r - 1) * a_pdf
            ) / (b_cdf - a_cdf)
        moment += r8_choose(order, r) * math.pow(mu, order - r) * math.pow(sigma, r) * ir
        irm2, irm1 = irm1, ir
    return moment


def truncated_normal_ab_pdf(x: float, mu: float, sigma: float, a: float, b: float) -> float:
    """Density of the truncated distribution; zero outside ``[a, b]``."""
    if x < a or x > b:
        return 0.0
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    xi_pdf = normal_01_pdf((x - mu) / sigma)
    return xi_pdf / (beta_cdf - alpha_cdf) / sigma


def truncated_normal_ab_pdf_values() -> tuple[tuple[float, float, float, float, float, float], ...]:
    """Reference tuples ``(mu, sigma, a, b, x, pdf)``."""
    return _PDF_TABLE


def truncated_normal_ab_sample(
    mu: float, sigma: float, a: float, b: float, rng: ParkMillerRandom
) -> float:
    """One sample of the truncated distribution by CDF inversion."""
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    u = rng.uniform_01()
    xi_cdf = alpha_cdf + u * (beta_cdf - alpha_cdf)
    return mu + sigma * normal_01_cdf_inv(xi_cdf)


def truncated_normal_ab_variance(mu: float, sigma: float, a: float, b: float) -> float:
    """Variance of the truncated distribution."""
    alpha = (a - mu) / sigma
    beta = (b - mu) / sigma
    alpha_pdf = normal_01_pdf(alpha)
    beta_pdf = normal_01_pdf(beta)
    alpha_cdf = normal_01_cdf(alpha)
    beta_cdf = normal_01_cdf(beta)
    span = beta_cdf - alpha_cdf
    return sigma * sigma * (
        1.0
        + (alpha * alpha_pdf - beta * beta_pdf) / span
        - math.pow((alpha_pdf - beta_pdf) / span, 2)
    )