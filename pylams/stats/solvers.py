"""
Entry points for the distribution toolkit.

describe() evaluates every summary statistic of a distribution and
returns them in a Result envelope; resolve_distribution() builds a
distribution from its name and parameters.
"""

from __future__ import annotations

from dataclasses import asdict
import math
from typing import Any

from pylams.core.exceptions import ValidationError
from pylams.core.result import Result
from pylams.core.timing import Timer
from pylams.stats._common import Distribution, DistributionSummary
from pylams.stats.continuous import ContinuousUniform, Normal
from pylams.stats.discrete import (
    Bernoulli,
    Binomial,
    DiscreteUniform,
    Geometric,
    Hypergeometric,
    NegativeBinomial,
    Poisson,
)


_DISTRIBUTION_CLASSES: dict[str, type[Distribution]] = {
    'binomial': Binomial,
    'bernoulli': Bernoulli,
    'discrete_uniform': DiscreteUniform,
    'geometric': Geometric,
    'hypergeometric': Hypergeometric,
    'negative_binomial': NegativeBinomial,
    'poisson': Poisson,
    'continuous_uniform': ContinuousUniform,
    'uniform': ContinuousUniform,
    'normal': Normal,
    'gaussian': Normal,
}


def resolve_distribution(dist: str | Distribution, **params: Any) -> Distribution:
    """
    Resolve a distribution argument to a Distribution instance.

    Args:
        dist: Either a name ('binomial', 'poisson', 'normal', ...) with
              its parameters as keyword arguments, or a Distribution
              instance (passed through; params must then be empty).

    Raises:
        ValidationError: If the name is unknown, the parameters do not
            match the distribution, or params accompany an instance.
    """
    if isinstance(dist, Distribution):
        if params:
            raise ValidationError(
                f"parameters {sorted(params)} given with a {dist.name} instance"
            )
        return dist
    if isinstance(dist, str):
        cls = _DISTRIBUTION_CLASSES.get(dist.lower())
        if cls is None:
            valid = ', '.join(sorted(_DISTRIBUTION_CLASSES))
            raise ValidationError(
                f"Unknown distribution: {dist!r}. Valid distributions: {valid}"
            )
        try:
            return cls(**params)
        except TypeError as e:
            raise ValidationError(f"{cls.__name__}: {e}") from e
    raise ValidationError(
        f"dist must be str or Distribution, got {type(dist).__name__}"
    )


def describe(dist: str | Distribution, **params: Any) -> Result[DistributionSummary]:
    """
    Compute mean, variance, standard deviation, skewness and median.

    Parameters
    ----------
    dist : str or Distribution
        A distribution instance, or a name plus keyword parameters,
        e.g. describe('binomial', n=10, p=0.3).

    Returns
    -------
    Result[DistributionSummary]
        info holds the distribution name, kind and parameters. A
        zero-variance distribution reports nan skewness and a warning.
    """
    dist = resolve_distribution(dist, **params)

    warnings_list: list[str] = []

    with Timer() as timer:
        with timer.section('moments'):
            mean = float(dist.mean())
            variance = float(dist.variance())
            stddev = float(dist.stddev())
            if variance == 0:
                skewness = math.nan
                warnings_list.append("skewness is undefined at zero variance")
            else:
                skewness = dist.skewness()

        with timer.section('median'):
            median = float(dist.median())

    return Result(
        params=DistributionSummary(
            mean=mean,
            variance=variance,
            stddev=stddev,
            skewness=skewness,
            median=median,
        ),
        info={
            'distribution': dist.name,
            'kind': dist.kind,
            'parameters': asdict(dist),
        },
        timing=timer.result(),
        backend_name='closed_form',
        warnings=tuple(warnings_list),
    )
