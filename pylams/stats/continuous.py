"""
Continuous distributions.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from scipy.special import ndtr

from pylams.core.exceptions import ValidationError
from pylams.core.validation import check_positive, check_real
from pylams.stats._common import ContinuousDistribution


@dataclass(frozen=True)
class ContinuousUniform(ContinuousDistribution):
    """Uniform density on the closed interval [a, b]."""
    a: float
    b: float

    def __post_init__(self):
        a = check_real(self.a, "a")
        b = check_real(self.b, "b")
        if a >= b:
            raise ValidationError(f"a must be < b, got a={a}, b={b}")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    def mean(self) -> float:
        return (self.a + self.b) / 2

    def variance(self) -> float:
        return (self.b - self.a) ** 2 / 12

    def _skewness(self) -> float:
        return 0.0

    def median(self) -> float:
        return (self.a + self.b) / 2

    def _pdf(self, x: float) -> float:
        if self.a <= x <= self.b:
            return 1 / (self.b - self.a)
        return 0.0

    def _cdf(self, x: float) -> float:
        if x >= self.b:
            return 1.0
        if x >= self.a:
            return (x - self.a) / (self.b - self.a)
        return 0.0


@dataclass(frozen=True)
class Normal(ContinuousDistribution):
    """Gaussian with mean mu and standard deviation sigma."""
    mu: float
    sigma: float

    def __post_init__(self):
        object.__setattr__(self, "mu", check_real(self.mu, "mu"))
        object.__setattr__(self, "sigma", check_positive(self.sigma, "sigma"))

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma ** 2

    def stddev(self) -> float:
        return self.sigma

    def _skewness(self) -> float:
        return 0.0

    def median(self) -> float:
        return self.mu

    def _pdf(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return math.exp(-0.5 * z * z) / (math.sqrt(2 * math.pi) * self.sigma)

    def _cdf(self, x: float) -> float:
        # ndtr(z) = (1 + erf(z / sqrt(2))) / 2, accurate in the lower tail
        return float(ndtr((x - self.mu) / self.sigma))
