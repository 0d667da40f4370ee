"""
Tests for describe() and resolve_distribution().
"""

import math

import pytest

from pylams.core.exceptions import ValidationError
from pylams.core.result import Result
from pylams.stats import (
    Binomial,
    DistributionSummary,
    Normal,
    Poisson,
    describe,
    resolve_distribution,
)


class TestDescribe:

    def test_returns_result_envelope(self):
        result = describe(Binomial(n=10, p=0.3))
        assert isinstance(result, Result)
        assert isinstance(result.params, DistributionSummary)
        assert result.backend_name == "closed_form"

    def test_summary_values(self):
        summary = describe(Binomial(n=10, p=0.3)).params
        assert summary.mean == pytest.approx(3.0)
        assert summary.variance == pytest.approx(2.1)
        assert summary.stddev == pytest.approx(math.sqrt(2.1))
        assert summary.skewness == pytest.approx(0.4 / math.sqrt(2.1))
        assert summary.median == 3.0

    def test_info(self):
        result = describe(Poisson(lam=4.0))
        assert result.info["distribution"] == "Poisson"
        assert result.info["kind"] == "discrete"
        assert result.info["parameters"] == {"lam": 4.0}

    def test_continuous_kind(self):
        assert describe(Normal(mu=0.0, sigma=1.0)).info["kind"] == "continuous"

    def test_timing_sections(self):
        timing = describe(Poisson(lam=4.0)).timing
        assert set(timing) == {"total_seconds", "moments", "median"}

    def test_by_name(self):
        result = describe("binomial", n=10, p=0.3)
        assert result.info["distribution"] == "Binomial"
        assert result.params.mean == pytest.approx(3.0)

    def test_zero_variance_recorded_as_warning(self):
        result = describe("bernoulli", p=1.0)
        assert math.isnan(result.params.skewness)
        assert result.has_warning("zero variance")
        assert result.params.median == 1.0

    def test_no_warnings_for_regular_distribution(self):
        assert describe(Poisson(lam=1.0)).warnings == ()

    def test_label_and_summary(self):
        result = describe("binomial", n=10, p=0.3)
        assert result.label == "Binomial(n=10, p=0.3)"
        lines = result.summary().splitlines()
        assert lines[0] == "Binomial(n=10, p=0.3)  [discrete]"
        assert lines[1] == "mean      3.000000"
        assert lines[-1] == "median    3.000000"

    def test_summary_reports_zero_variance(self):
        summary = describe("bernoulli", p=0.0).summary()
        assert "skewness  nan" in summary
        assert summary.endswith("Warning: skewness is undefined at zero variance")


class TestResolveDistribution:

    def test_instance_passthrough(self):
        d = Poisson(lam=2.0)
        assert resolve_distribution(d) is d

    def test_name_case_insensitive(self):
        assert resolve_distribution("Normal", mu=0.0, sigma=2.0) == Normal(0.0, 2.0)

    def test_aliases(self):
        assert isinstance(resolve_distribution("gaussian", mu=0.0, sigma=1.0), Normal)

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="Unknown distribution"):
            resolve_distribution("cauchy", loc=0.0)

    def test_missing_parameter(self):
        with pytest.raises(ValidationError, match="Binomial"):
            resolve_distribution("binomial", n=3)

    def test_params_with_instance_rejected(self):
        with pytest.raises(ValidationError):
            resolve_distribution(Poisson(lam=2.0), lam=3.0)

    def test_rejects_other_types(self):
        with pytest.raises(ValidationError, match="str or Distribution"):
            resolve_distribution(42)
