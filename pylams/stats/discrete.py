"""
Discrete distributions.

Point probabilities are evaluated in log space (gammaln, xlogy,
xlog1py) so large counts and the boundary probabilities p = 0 and
p = 1 stay finite. Where scipy.special has an exact CDF (bdtr, nbdtr,
pdtr) it replaces the summed PMF.

References:
    Johnson, N. L., Kemp, A. W., & Kotz, S. (2005).
    Univariate Discrete Distributions (3rd ed.)
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import numpy as np
from numpy.typing import NDArray
from scipy.special import bdtr, gammaln, nbdtr, pdtr, xlog1py, xlogy

from pylams.core.exceptions import ValidationError
from pylams.core.validation import (
    check_integer,
    check_positive,
    check_probability,
)
from pylams.stats._common import DiscreteDistribution


def _log_binom(n, k):
    """log C(n, k) for 0 <= k <= n."""
    return gammaln(n + 1) - gammaln(k + 1) - gammaln(n - k + 1)


@dataclass(frozen=True)
class Binomial(DiscreteDistribution):
    """Number of successes in n independent trials with success probability p."""
    n: int
    p: float

    def __post_init__(self):
        object.__setattr__(self, "n", check_integer(self.n, "n", minimum=0))
        object.__setattr__(self, "p", check_probability(self.p, "p"))

    def mean(self) -> float:
        return self.n * self.p

    def variance(self) -> float:
        return self.n * self.p * (1 - self.p)

    def _skewness(self) -> float:
        return (1 - 2 * self.p) / self.stddev()

    def _support(self):
        return 0, self.n

    def _logpmf(self, k):
        return _log_binom(self.n, k) + xlogy(k, self.p) + xlog1py(self.n - k, -self.p)

    def cdf(self, k: int) -> float:
        k = check_integer(k, "k")
        if k < 0:
            return 0.0
        if k >= self.n:
            return 1.0
        return float(bdtr(k, self.n, self.p))


@dataclass(frozen=True)
class Bernoulli(DiscreteDistribution):
    """Single trial: 1 with probability p, 0 otherwise."""
    p: float

    def __post_init__(self):
        object.__setattr__(self, "p", check_probability(self.p, "p"))

    def mean(self) -> float:
        return self.p

    def variance(self) -> float:
        return self.p * (1 - self.p)

    def _skewness(self) -> float:
        return (1 - 2 * self.p) / self.stddev()

    def _support(self):
        return 0, 1

    def _logpmf(self, k):
        return xlogy(k, self.p) + xlog1py(1 - k, -self.p)

    def cdf(self, k: int) -> float:
        k = check_integer(k, "k")
        if k < 0:
            return 0.0
        if k == 0:
            return 1 - self.p
        return 1.0


@dataclass(frozen=True)
class DiscreteUniform(DiscreteDistribution):
    """Equally likely integers a, a+1, ..., b."""
    a: int
    b: int

    def __post_init__(self):
        a = check_integer(self.a, "a")
        b = check_integer(self.b, "b")
        if a > b:
            raise ValidationError(f"a must be <= b, got a={a}, b={b}")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    @property
    def _count(self) -> int:
        return self.b - self.a + 1

    def mean(self) -> float:
        return (self.a + self.b) / 2

    def variance(self) -> float:
        return (self._count ** 2 - 1) / 12

    def _skewness(self) -> float:
        return 0.0

    def _support(self):
        return self.a, self.b

    def _logpmf(self, k):
        return np.full(np.shape(k), -math.log(self._count))

    def cdf(self, k: int) -> float:
        k = check_integer(k, "k")
        if k < self.a:
            return 0.0
        if k >= self.b:
            return 1.0
        return (k - self.a + 1) / self._count

    def median(self) -> float:
        # lower middle value when the count is even
        return float(self.a + (self._count + 1) // 2 - 1)


@dataclass(frozen=True)
class Geometric(DiscreteDistribution):
    """
    Number of failures before the first success, k = 0, 1, 2, ...

    P(X = k) = (1 - p)^k p
    """
    p: float

    def __post_init__(self):
        object.__setattr__(
            self, "p", check_probability(self.p, "p", allow_zero=False)
        )

    def mean(self) -> float:
        return (1 - self.p) / self.p

    def variance(self) -> float:
        return (1 - self.p) / self.p ** 2

    def _skewness(self) -> float:
        return (2 - self.p) / math.sqrt(1 - self.p)

    def _support(self):
        return 0, None

    def _logpmf(self, k):
        return math.log(self.p) + xlog1py(k, -self.p)

    def cdf(self, k: int) -> float:
        k = check_integer(k, "k")
        if k < 0:
            return 0.0
        if self.p == 1:
            return 1.0
        return -math.expm1((k + 1) * math.log1p(-self.p))

    def median(self) -> float:
        if self.p == 1:
            return 0.0
        # smallest k with 1 - (1 - p)^(k + 1) >= 1/2
        k = math.ceil(math.log(0.5) / math.log1p(-self.p)) - 1
        return float(max(k, 0))


@dataclass(frozen=True)
class Hypergeometric(DiscreteDistribution):
    """
    Successes among n draws without replacement from a population of N
    containing K successes.
    """
    N: int
    K: int
    n: int

    def __post_init__(self):
        N = check_integer(self.N, "N", minimum=1)
        K = check_integer(self.K, "K", minimum=0)
        n = check_integer(self.n, "n", minimum=0)
        if K > N:
            raise ValidationError(f"K must be <= N, got K={K}, N={N}")
        if n > N:
            raise ValidationError(f"n must be <= N, got n={n}, N={N}")
        object.__setattr__(self, "N", N)
        object.__setattr__(self, "K", K)
        object.__setattr__(self, "n", n)

    def mean(self) -> float:
        return self.n * self.K / self.N

    def variance(self) -> float:
        if self.N == 1:
            return 0.0
        N, K, n = self.N, self.K, self.n
        return n * (K / N) * ((N - K) / N) * ((N - n) / (N - 1))

    def _skewness(self) -> float:
        N, K, n = self.N, self.K, self.n
        if N == 2:
            # only K = n = 1 has positive variance here, and it is symmetric
            return 0.0
        return (
            (N - 2 * K) * math.sqrt(N - 1) * (N - 2 * n)
            / (math.sqrt(n * K * (N - K) * (N - n)) * (N - 2))
        )

    def _support(self):
        return max(0, self.n - (self.N - self.K)), min(self.n, self.K)

    def _logpmf(self, k):
        return (
            _log_binom(self.K, k)
            + _log_binom(self.N - self.K, self.n - k)
            - _log_binom(self.N, self.n)
        )

    def cdf(self, k: int) -> float:
        # exact integer counts, so symmetric cases land on 0.5 exactly
        k = check_integer(k, "k")
        low, high = self._support()
        if k < low:
            return 0.0
        if k >= high:
            return 1.0
        favourable = sum(
            math.comb(self.K, i) * math.comb(self.N - self.K, self.n - i)
            for i in range(low, k + 1)
        )
        return favourable / math.comb(self.N, self.n)


@dataclass(frozen=True)
class NegativeBinomial(DiscreteDistribution):
    """
    Number of failures before the r-th success, k = 0, 1, 2, ...

    P(X = k) = C(k + r - 1, k) p^r (1 - p)^k
    """
    r: int
    p: float

    def __post_init__(self):
        object.__setattr__(self, "r", check_integer(self.r, "r", minimum=1))
        object.__setattr__(
            self, "p", check_probability(self.p, "p", allow_zero=False)
        )

    def mean(self) -> float:
        return self.r * (1 - self.p) / self.p

    def variance(self) -> float:
        return self.r * (1 - self.p) / self.p ** 2

    def _skewness(self) -> float:
        return (2 - self.p) / math.sqrt(self.r * (1 - self.p))

    def _support(self):
        return 0, None

    def _logpmf(self, k):
        return (
            _log_binom(k + self.r - 1, k)
            + self.r * math.log(self.p)
            + xlog1py(k, -self.p)
        )

    def cdf(self, k: int) -> float:
        k = check_integer(k, "k")
        if k < 0:
            return 0.0
        return float(nbdtr(k, self.r, self.p))


@dataclass(frozen=True)
class Poisson(DiscreteDistribution):
    """Count of events at average rate lam, k = 0, 1, 2, ..."""
    lam: float

    def __post_init__(self):
        object.__setattr__(self, "lam", check_positive(self.lam, "lam"))

    def mean(self) -> float:
        return self.lam

    def variance(self) -> float:
        return self.lam

    def _skewness(self) -> float:
        return 1 / math.sqrt(self.lam)

    def _support(self):
        return 0, None

    def _logpmf(self, k: NDArray[np.int64]) -> NDArray[np.float64]:
        return k * math.log(self.lam) - self.lam - gammaln(k + 1)

    def cdf(self, k: int) -> float:
        k = check_integer(k, "k")
        if k < 0:
            return 0.0
        return float(pdtr(k, self.lam))
