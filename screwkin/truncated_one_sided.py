"""The Normal distribution truncated on one side.

``a`` functions cover the lower-truncated case ``[a, +inf)``; ``b`` functions
cover the upper-truncated case ``(-inf, b]``.
"""

from __future__ import annotations

import math

from screwkin.normal import normal_01_cdf, normal_01_cdf_inv, normal_01_pdf
from screwkin.numeric import ParkMillerRandom, r8_choose, r8_mop

__all__ = [
    "truncated_normal_a_cdf",
    "truncated_normal_a_cdf_values",
    "truncated_normal_a_cdf_inv",
    "truncated_normal_a_mean",
    "truncated_normal_a_moment",
    "truncated_normal_a_pdf",
    "truncated_normal_a_pdf_values",
    "truncated_normal_a_sample",
    "truncated_normal_a_variance",
    "truncated_normal_b_cdf",
    "truncated_normal_b_cdf_values",
    "truncated_normal_b_cdf_inv",
    "truncated_normal_b_mean",
    "truncated_normal_b_moment",
    "truncated_normal_b_pdf",
    "truncated_normal_b_pdf_values",
    "truncated_normal_b_sample",
    "truncated_normal_b_variance",
]

_X_VALUES = (90.0, 92.0, 94.0, 96.0, 98.0, 100.0, 102.0, 104.0, 106.0, 108.0, 110.0)
_MU, _SIGMA, _A, _B = 100.0, 25.0, 50.0, 150.0

_A_CDF_FX = (
    0.3293202045481688,
    0.3599223134505957,
    0.3913175216041539,
    0.4233210140873113,
    0.4557365629792204,
    0.4883601253415709,
    0.5209836877039214,
    0.5533992365958304,
    0.5854027290789878,
    0.6167979372325460,
    0.6474000461349729,
)

_B_CDF_FX = (
    0.3525999538650271,
    0.3832020627674540,
    0.4145972709210122,
    0.4466007634041696,
    0.4790163122960786,
    0.5116398746584291,
    0.5442634370207796,
    0.5766789859126887,
    0.6086824783958461,
    0.6400776865494043,
    0.6706797954518312,
)

_ONE_SIDED_PDF_FX = (
    0.01507373507401876,
    0.01551417047139894,
    0.01586560931024694,
    0.01612150073158793,
    0.01627701240029317,
    0.01632918226724295,
    0.01627701240029317,
    0.01612150073158793,
    0.01586560931024694,
    0.01551417047139894,
    0.01507373507401876,
)

Row = tuple[float, float, float, float, float]


def _table(limit: float, fx_values: tuple[float, ...]) -> tuple[Row, ...]:
    return tuple((_MU, _SIGMA, limit, x, fx) for x, fx in zip(_X_VALUES, fx_values))


_A_CDF_TABLE = _table(_A, _A_CDF_FX)
_A_PDF_TABLE = _table(_A, _ONE_SIDED_PDF_FX)
_B_CDF_TABLE = _table(_B, _B_CDF_FX)
_B_PDF_TABLE = _table(_B, _ONE_SIDED_PDF_FX)


def _check_cdf(cdf: float) -> None:
    if cdf < 0.0 or cdf > 1.0:
        raise ValueError("cdf must lie in [0, 1]")


# Lower truncation: [a, +inf)


def truncated_normal_a_cdf(x: float, mu: float, sigma: float, a: float) -> float:
    """CDF of the Normal(``mu``, ``sigma``) distribution truncated below at ``a``."""
    if x < a:
        return 0.0
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    xi_cdf = normal_01_cdf((x - mu) / sigma)
    return (xi_cdf - alpha_cdf) / (1.0 - alpha_cdf)


def truncated_normal_a_cdf_values() -> tuple[Row, ...]:
    """Reference tuples ``(mu, sigma, a, x, cdf)``."""
    return _A_CDF_TABLE


def truncated_normal_a_cdf_inv(cdf: float, mu: float, sigma: float, a: float) -> float:
    """Inverse of the lower-truncated CDF; ``cdf`` must lie in ``[0, 1]``."""
    _check_cdf(cdf)
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    xi_cdf = (1.0 - alpha_cdf) * cdf + alpha_cdf
    return mu + sigma * normal_01_cdf_inv(xi_cdf)


def truncated_normal_a_mean(mu: float, sigma: float, a: float) -> float:
    """Mean of the lower-truncated distribution."""
    alpha = (a - mu) / sigma
    alpha_cdf = normal_01_cdf(alpha)
    alpha_pdf = normal_01_pdf(alpha)
    return mu + sigma * alpha_pdf / (1.0 - alpha_cdf)


def truncated_normal_a_moment(order: int, mu: float, sigma: float, a: float) -> float:
    """Raw moment of the lower-truncated distribution, by reflection of the upper case."""
    return r8_mop(order) * truncated_normal_b_moment(order, -mu, sigma, -a)


def truncated_normal_a_pdf(x: float, mu: float, sigma: float, a: float) -> float:
    """Density of the lower-truncated distribution; zero below ``a``."""
    if x < a:
        return 0.0
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    xi_pdf = normal_01_pdf((x - mu) / sigma)
    return xi_pdf / (1.0 - alpha_cdf) / sigma


def truncated_normal_a_pdf_values() -> tuple[Row, ...]:
    """Reference tuples ``(mu, sigma, a, x, pdf)``."""
    return _A_PDF_TABLE


def truncated_normal_a_sample(mu: float, sigma: float, a: float, rng: ParkMillerRandom) -> float:
    """One sample of the lower-truncated distribution by CDF inversion."""
    alpha_cdf = normal_01_cdf((a - mu) / sigma)
    u = rng.uniform_01()
    xi_cdf = alpha_cdf + u * (1.0 - alpha_cdf)
    return mu + sigma * normal_01_cdf_inv(xi_cdf)


def truncated_normal_a_variance(mu: float, sigma: float, a: float) -> float:
    """Variance of the lower-truncated distribution."""
    alpha = (a - mu) / sigma
    alpha_pdf = normal_01_pdf(alpha)
    alpha_cdf = normal_01_cdf(alpha)
    ratio = alpha_pdf / (1.0 - alpha_cdf)
    return sigma * sigma * (1.0 + alpha * ratio - ratio * ratio)


# Upper truncation: (-inf, b]


def truncated_normal_b_cdf(x: float, mu: float, sigma: float, b: float) -> float:
    """CDF of the Normal(``mu``, ``sigma``) distribution truncated above at ``b``."""
    if x > b:
        return 1.0
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    xi_cdf = normal_01_cdf((x - mu) / sigma)
    return xi_cdf / beta_cdf


def truncated_normal_b_cdf_values() -> tuple[Row, ...]:
    """Reference tuples ``(mu, sigma, b, x, cdf)``."""
    return _B_CDF_TABLE


def truncated_normal_b_cdf_inv(cdf: float, mu: float, sigma: float, b: float) -> float:
    """Inverse of the upper-truncated CDF; ``cdf`` must lie in ``[0, 1]``."""
    _check_cdf(cdf)
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    return mu + sigma * normal_01_cdf_inv(beta_cdf * cdf)


def truncated_normal_b_mean(mu: float, sigma: float, b: float) -> float:
    """Mean of the upper-truncated distribution."""
    beta = (b - mu) / sigma
    beta_cdf = normal_01_cdf(beta)
    beta_pdf = normal_01_pdf(beta)
    return mu - sigma * beta_pdf / beta_cdf


def truncated_normal_b_moment(order: int, mu: float, sigma: float, b: float) -> float:
    """Raw moment of the given order of the upper-truncated distribution."""
    if order < 0:
        raise ValueError("order must not be negative")
    h = (b - mu) / sigma
    h_pdf = normal_01_pdf(h)
    h_cdf = normal_01_cdf(h)
    if h_cdf == 0.0:
        raise ValueError("CDF((b - mu) / sigma) is 0")
    f = h_pdf / h_cdf

    moment = 0.0
    irm2 = 0.0
    irm1 = 0.0
    for r in range(order + 1):
        if r == 0:
            ir = 1.0
        elif r == 1:
            ir = -f
        else:
            ir = -math.pow(h, r - 1) * f + float(r - 1) * irm2
        moment += r8_choose(order, r) * math.pow(mu, order - r) * math.pow(sigma, r) * ir
        irm2, irm1 = irm1, ir
    return moment


def truncated_normal_b_pdf(x: float, mu: float, sigma: float, b: float) -> float:
    """Density of the upper-truncated distribution; zero above ``b``."""
    if x > b:
        return 0.0
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    xi_pdf = normal_01_pdf((x - mu) / sigma)
    return xi_pdf / beta_cdf / sigma


def truncated_normal_b_pdf_values() -> tuple[Row, ...]:
    """Reference tuples ``(mu, sigma, b, x, pdf)``."""
    return _B_PDF_TABLE


def truncated_normal_b_sample(mu: float, sigma: float, b: float, rng: ParkMillerRandom) -> float:
    """One sample of the upper-truncated distribution by CDF inversion."""
    beta_cdf = normal_01_cdf((b - mu) / sigma)
    u = rng.uniform_01()
    return mu + sigma * normal_01_cdf_inv(u * beta_cdf)


def truncated_normal_b_variance(mu: float, sigma: float, b: float) -> float:
    """Variance of the upper-truncated distribution."""
    beta = (b - mu) / sigma
    beta_pdf = normal_01_pdf(beta)
    beta_cdf = normal_01_cdf(beta)
    ratio = beta_pdf / beta_cdf
    return sigma * sigma * (1.0 - beta * ratio - ratio * ratio)