"""
Base classes shared by every distribution.

Each Distribution defines:
- mean, variance and skewness in closed form
- a median (closed form for continuous distributions, a CDF search
  for discrete ones)
- a point probability (pmf) or density (pdf), and a CDF

The standard deviation and the zero-variance guard on skewness are
implemented once here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
import warnings
import numpy as np
from numpy.typing import NDArray

from pylams.core.validation import check_integer, check_real


# Number of support points evaluated per step of a discrete CDF search
_SEARCH_CHUNK = 1024


@dataclass(frozen=True)
class DistributionSummary:
    """Moments and median of a distribution, as returned by describe()."""
    mean: float
    variance: float
    stddev: float
    skewness: float
    median: float


class Distribution(ABC):
    """Abstract probability distribution with closed-form moments."""

    kind: str = ""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def mean(self) -> float:
        ...

    @abstractmethod
    def variance(self) -> float:
        ...

    @abstractmethod
    def _skewness(self) -> float:
        """Skewness formula, only called when the variance is positive."""
        ...

    @abstractmethod
    def median(self) -> float:
        ...

    @abstractmethod
    def cdf(self, x) -> float:
        ...

    def stddev(self) -> float:
        return math.sqrt(self.variance())

    def skewness(self) -> float:
        """
        Third standardized moment.

        Undefined for a degenerate (zero-variance) distribution; returns
        nan with a RuntimeWarning in that case.
        """
        if self.variance() == 0:
            warnings.warn(
                f"{self.name}: skewness is undefined at zero variance",
                RuntimeWarning,
                stacklevel=2,
            )
            return math.nan
        return float(self._skewness())


class DiscreteDistribution(Distribution):
    """
    Distribution over the integers.

    Subclasses provide `_support()` and a vectorized `_logpmf()` valid
    on the support; pmf, cdf and median are derived from those.
    """

    kind = "discrete"

    @abstractmethod
    def _support(self) -> tuple[int, int | None]:
        """Inclusive (low, high) support bounds; high is None if unbounded."""
        ...

    @abstractmethod
    def _logpmf(self, k: NDArray[np.int64]) -> NDArray[np.float64]:
        """Log point probabilities for support points k."""
        ...

    def _in_support(self, k: int) -> bool:
        low, high = self._support()
        return k >= low and (high is None or k <= high)

    def pmf(self, k: int) -> float:
        """P(X = k). Zero outside the support."""
        k = check_integer(k, "k")
        if not self._in_support(k):
            return 0.0
        return float(np.exp(self._logpmf(np.array([k], dtype=np.int64)))[0])

    def cdf(self, k: int) -> float:
        """P(X <= k), summed over the support."""
        k = check_integer(k, "k")
        low, high = self._support()
        if k < low:
            return 0.0
        if high is not None and k >= high:
            return 1.0
        ks = np.arange(low, k + 1, dtype=np.int64)
        return min(1.0, float(np.sum(np.exp(self._logpmf(ks)))))

    def median(self) -> float:
        """
        Smallest k in the support with cdf(k) >= 0.5.

        A running PMF sum locates the median approximately; the result is
        then settled against cdf(), so a CDF value of exactly 0.5 (a
        symmetric binomial with odd n, say) gives the lower candidate.
        """
        low, high = self._support()
        k = self._median_estimate(low, high)
        while k > low and self.cdf(k - 1) >= 0.5:
            k -= 1
        while self.cdf(k) < 0.5 and (high is None or k < high):
            k += 1
        return float(k)

    def _median_estimate(self, low: int, high: int | None) -> int:
        start = low
        carry = 0.0
        while True:
            stop = start + _SEARCH_CHUNK
            if high is not None:
                stop = min(stop, high + 1)
            ks = np.arange(start, stop, dtype=np.int64)
            cumulative = carry + np.cumsum(np.exp(self._logpmf(ks)))
            idx = int(np.searchsorted(cumulative, 0.5, side="left"))
            if idx < ks.shape[0]:
                return int(ks[idx])
            if high is not None and stop > high:
                return high
            carry = float(cumulative[-1])
            start = stop


class ContinuousDistribution(Distribution):
    """Distribution over the real line with a density."""

    kind = "continuous"

    @abstractmethod
    def _pdf(self, x: float) -> float:
        ...

    @abstractmethod
    def _cdf(self, x: float) -> float:
        ...

    def pdf(self, x: float) -> float:
        """Probability density at x."""
        return float(self._pdf(check_real(x, "x")))

    def cdf(self, x: float) -> float:
        """P(X <= x)."""
        return float(self._cdf(check_real(x, "x")))
