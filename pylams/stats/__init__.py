"""
Probability distributions.

Closed-form summaries for nine common distributions. Independent of
pylams.linalg.

Public API:
    describe(dist)              - mean, variance, sd, skewness, median
    resolve_distribution(name)  - build a distribution from its name

Discrete (pmf, cdf):
    Binomial, Bernoulli, DiscreteUniform, Geometric, Hypergeometric,
    NegativeBinomial, Poisson

Continuous (pdf, cdf):
    ContinuousUniform, Normal
"""

from pylams.stats._common import (
    Distribution,
    DiscreteDistribution,
    ContinuousDistribution,
    DistributionSummary,
)
from pylams.stats.discrete import (
    Binomial,
    Bernoulli,
    DiscreteUniform,
    Geometric,
    Hypergeometric,
    NegativeBinomial,
    Poisson,
)
from pylams.stats.continuous import ContinuousUniform, Normal
from pylams.stats.solvers import describe, resolve_distribution

__all__ = [
    "describe",
    "resolve_distribution",
    "Distribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
    "DistributionSummary",
    "Binomial",
    "Bernoulli",
    "DiscreteUniform",
    "Geometric",
    "Hypergeometric",
    "NegativeBinomial",
    "Poisson",
    "ContinuousUniform",
    "Normal",
]
