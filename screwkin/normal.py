"""The standard and general Normal distributions: CDF, inverse CDF, PDF, moments, sampling."""

from __future__ import annotations

import math

from screwkin.numeric import ParkMillerRandom, poly_value_horner, r8_choose, r8_factorial2

__all__ = [
    "normal_01_cdf",
    "normal_01_cdf_inv",
    "normal_01_cdf_values",
    "normal_01_mean",
    "normal_01_moment",
    "normal_01_pdf",
    "normal_01_sample",
    "normal_01_variance",
    "normal_ms_cdf",
    "normal_ms_cdf_inv",
    "normal_ms_mean",
    "normal_ms_moment",
    "normal_ms_moment_central",
    "normal_ms_moment_central_values",
    "normal_ms_moment_values",
    "normal_ms_pdf",
    "normal_ms_sample",
    "normal_ms_variance",
]

_PI = 3.14159265358979323

_CDF_TABLE = (
    (0.0, 0.5000000000000000e00),
    (0.1, 0.5398278372770290e00),
    (0.2, 0.5792597094391030e00),
    (0.3, 0.6179114221889526e00),
    (0.4, 0.6554217416103242e00),
    (0.5, 0.6914624612740131e00),
    (0.6, 0.7257468822499270e00),
    (0.7, 0.7580363477769270e00),
    (0.8, 0.7881446014166033e00),
    (0.9, 0.8159398746532405e00),
    (1.0, 0.8413447460685429e00),
    (1.5, 0.9331927987311419e00),
    (2.0, 0.9772498680518208e00),
    (2.5, 0.9937903346742239e00),
    (3.0, 0.9986501019683699e00),
    (3.5, 0.9997673709209645e00),
    (4.0, 0.9999683287581669e00),
)

# Coefficients of the rational approximations of algorithm AS 241.
_A = (
    3.3871328727963666080, 1.3314166789178437745e2,
    1.9715909503065514427e3, 1.3731693765509461125e4,
    4.5921953931549871457e4, 6.7265770927008700853e4,
    3.3430575583588128105e4, 2.5090809287301226727e3,
)
_B = (
    1.0, 4.2313330701600911252e1,
    6.8718700749205790830e2, 5.3941960214247511077e3,
    2.1213794301586595867e4, 3.9307895800092710610e4,
    2.8729085735721942674e4, 5.2264952788528545610e3,
)
_C = (
    1.42343711074968357734, 4.63033784615654529590,
    5.76949722146069140550, 3.64784832476320460504,
    1.27045825245236838258, 2.41780725177450611770e-1,
    2.27238449892691845833e-2, 7.74545014278341407640e-4,
)
_D = (
    1.0, 2.05319162663775882187,
    1.67638483018380384940, 6.89767334985100004550e-1,
    1.48103976427480074590e-1, 1.51986665636164571966e-2,
    5.47593808499534494600e-4, 1.05075007164441684324e-9,
)
_E = (
    6.65790464350110377720, 5.46378491116411436990,
    1.78482653991729133580, 2.96560571828504891230e-1,
    2.65321895265761230930e-2, 1.24266094738807843860e-3,
    2.71155556874348757815e-5, 2.01033439929228813265e-7,
)
_F = (
    1.0, 5.99832206555887937690e-1,
    1.36929880922735805310e-1, 1.48753612908506148525e-2,
    7.86869131145613259100e-4, 1.84631831751005468180e-5,
    1.42151175831644588870e-7, 2.04426310338993978564e-15,
)
_CONST1 = 0.180625
_CONST2 = 1.6
_SPLIT1 = 0.425
_SPLIT2 = 5.0


def normal_01_cdf(x: float) -> float:
    """Standard Normal CDF (Adams' algorithm 39)."""
    a1, a2, a3, a4 = 0.398942280444, 0.399903438504, 5.75885480458, 29.8213557808
    a5, a6, a7 = 2.62433121679, 48.6959930692, 5.92885724438
    b0, b1, b2, b3 = 0.398942280385, 3.8052e-08, 1.00000615302, 3.98064794e-04
    b4, b5, b6, b7 = 1.98615381364, 0.151679116635, 5.29330324926, 4.8385912808
    b8, b9, b10, b11 = 15.1508972451, 0.742380924027, 30.789933034, 3.99019417011

    ax = abs(x)
    if ax <= 1.28:
        y = 0.5 * x * x
        q = 0.5 - ax * (a1 - a2 * y / (y + a3 - a4 / (y + a5 + a6 / (y + a7))))
    elif ax <= 12.7:
        y = 0.5 * x * x
        q = math.exp(-y) * b0 / (
            ax - b1
            + b2 / (ax + b3
                    + b4 / (ax - b5
                            + b6 / (ax + b7
                                    - b8 / (ax + b9
                                            + b10 / (ax + b11)))))
        )
    else:
        q = 0.0
    return q if x < 0.0 else 1.0 - q


def normal_01_cdf_inv(p: float) -> float:
    """Inverse of the standard Normal CDF (AS 241); ``-inf``/``inf`` outside ``(0, 1)``."""
    if p <= 0.0:
        return -math.inf
    if p >= 1.0:
        return math.inf
    q = p - 0.5
    if abs(q) <= _SPLIT1:
        r = _CONST1 - q * q
        return q * poly_value_horner(_A, r) / poly_value_horner(_B, r)
    r = p if q < 0.0 else 1.0 - p
    if r <= 0.0:
        value = math.inf
    else:
        r = math.sqrt(-math.log(r))
        if r <= _SPLIT2:
            r -= _CONST2
            value = poly_value_horner(_C, r) / poly_value_horner(_D, r)
        else:
            r -= _SPLIT2
            value = poly_value_horner(_E, r) / poly_value_horner(_F, r)
    return -value if q < 0.0 else value


def normal_01_cdf_values() -> tuple[tuple[float, float], ...]:
    """Reference pairs ``(x, cdf(x))`` of the standard Normal distribution."""
    return _CDF_TABLE


def normal_01_mean() -> float:
    """Mean of the standard Normal distribution."""
    return 0.0


def normal_01_moment(order: int) -> float:
    """Moment of the given order of the standard Normal distribution."""
    if order % 2 == 0:
        return r8_factorial2(order - 1)
    return 0.0


def normal_01_pdf(x: float) -> float:
    """Standard Normal density."""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * _PI)


def normal_01_sample(rng: ParkMillerRandom) -> float:
    """One standard Normal sample by the Box-Muller method."""
    r1 = rng.uniform_01()
    r2 = rng.uniform_01()
    return math.sqrt(-2.0 * math.log(r1)) * math.cos(2.0 * _PI * r2)


def normal_01_variance() -> float:
    """Variance of the standard Normal distribution."""
    return 1.0


def normal_ms_cdf(x: float, mu: float, sigma: float) -> float:
    """Normal CDF with mean ``mu`` and standard deviation ``sigma``."""
    return normal_01_cdf((x - mu) / sigma)


def normal_ms_cdf_inv(cdf: float, mu: float, sigma: float) -> float:
    """Inverse of the Normal CDF; ``cdf`` must lie in ``[0, 1]``."""
    if cdf < 0.0 or cdf > 1.0:
        raise ValueError("cdf must lie in [0, 1]")
    return mu + sigma * normal_01_cdf_inv(cdf)


def normal_ms_mean(mu: float, sigma: float) -> float:
    """Mean of the Normal distribution."""
    return mu


def normal_ms_moment(order: int, mu: float, sigma: float) -> float:
    """Raw moment of the given order of the Normal distribution."""
    j_hi = int(order / 2)
    return sum(
        r8_choose(order, 2 * j)
        * r8_factorial2(2 * j - 1)
        * math.pow(mu, order - 2 * j)
        * math.pow(sigma, 2 * j)
        for j in range(j_hi + 1)
    )


def normal_ms_moment_central(order: int, mu: float, sigma: float) -> float:
    """Central moment of the given order of the Normal distribution."""
    if order % 2 == 0:
        return r8_factorial2(order - 1) * math.pow(sigma, order)
    return 0.0


def normal_ms_moment_central_values(order: int, mu: float, sigma: float) -> float:
    """Central moments of orders 0 through 10 from their closed forms."""
    if not 0 <= order <= 10:
        raise ValueError("only orders 0 through 10 are available")
    if order % 2 == 1:
        return 0.0
    factors = {0: 1.0, 2: 1.0, 4: 3.0, 6: 15.0, 8: 105.0, 10: 945.0}
    if order == 0:
        return 1.0
    return factors[order] * math.pow(sigma, order)


def normal_ms_moment_values(order: int, mu: float, sigma: float) -> float:
    """Raw moments of orders 0 through 8 from their closed forms."""
    if not 0 <= order <= 8:
        raise ValueError("only orders 0 through 8 are available")
    p = math.pow
    forms = {
        0: lambda: 1.0,
        1: lambda: mu,
        2: lambda: p(mu, 2) + p(sigma, 2),
        3: lambda: p(mu, 3) + 3.0 * mu * p(sigma, 2),
        4: lambda: p(mu, 4) + 6.0 * p(mu, 2) * p(sigma, 2) + 3.0 * p(sigma, 4),
        5: lambda: p(mu, 5) + 10.0 * p(mu, 3) * p(sigma, 2) + 15.0 * mu * p(sigma, 4),
        6: lambda: p(mu, 6) + 15.0 * p(mu, 4) * p(sigma, 2)
        + 45.0 * p(mu, 2) * p(sigma, 4) + 15.0 * p(sigma, 6),
        7: lambda: p(mu, 7) + 21.0 * p(mu, 5) * p(sigma, 2)
        + 105.0 * p(mu, 3) * p(sigma, 4) + 105.0 * mu * p(sigma, 6),
        8: lambda: p(mu, 8) + 28.0 * p(mu, 6) * p(sigma, 2)
        + 210.0 * p(mu, 4) * p(sigma, 4) + 420.0 * p(mu, 2) * p(sigma, 6)
        + 105.0 * p(sigma, 8),
    }
    return float(forms[order]())


def normal_ms_pdf(x: float, mu: float, sigma: float) -> float:
    """Normal density with mean ``mu`` and standard deviation ``sigma``."""
    y = (x - mu) / sigma
    return math.exp(-0.5 * y * y) / (sigma * math.sqrt(2.0 * _PI))


def normal_ms_sample(mu: float, sigma: float, rng: ParkMillerRandom) -> float:
    """One sample of the Normal distribution."""
    return mu + sigma * normal_01_sample(rng)


def normal_ms_variance(mu: float, sigma: float) -> float:
    """Variance of the Normal distribution."""
    return sigma * sigma