"""
Result envelope for distribution summaries.

stats.describe() returns a Result whose payload is a DistributionSummary
and whose info names the distribution it was computed for. Container
arithmetic returns containers directly and raises on failure; it does
not use this envelope.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Payload type, e.g. DistributionSummary


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Computed payload (a DistributionSummary for describe())
        info: 'distribution' (class name), 'kind' ('discrete' or
            'continuous') and 'parameters' (constructor arguments)
        timing: Seconds per section plus 'total_seconds', or None
        backend_name: 'closed_form' for every current distribution
        warnings: Non-fatal issues, e.g. undefined skewness

    Examples:
        >>> result = describe('binomial', n=10, p=0.3)
        >>> result.label
        'Binomial(n=10, p=0.3)'
        >>> print(result.summary())
        Binomial(n=10, p=0.3)  [discrete]
        mean      3.000000
        ...
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        """Distribution with its parameters, e.g. 'Poisson(lam=4.0)'."""
        name = self.info.get('distribution', type(self.params).__name__)
        parameters = self.info.get('parameters') or {}
        args = ", ".join(f"{k}={v!r}" for k, v in parameters.items())
        return f"{name}({args})"

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    def summary(self) -> str:
        """Aligned table of the payload fields, followed by any warnings."""
        header = self.label
        if 'kind' in self.info:
            header += f"  [{self.info['kind']}]"
        lines = [header]

        if is_dataclass(self.params):
            rows = [(f.name, getattr(self.params, f.name)) for f in fields(self.params)]
            width = max((len(name) for name, _ in rows), default=0)
            for name, value in rows:
                text = f"{value:.6f}" if isinstance(value, (int, float)) else repr(value)
                lines.append(f"{name.ljust(width)}  {text}")
        else:
            lines.append(repr(self.params))

        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)
