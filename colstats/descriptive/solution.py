"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

from colstats.core.result import Result

if TYPE_CHECKING:
    from colstats.descriptive.design import SeriesDesign


# Keys of full_analysis(), in report order
FULL_ANALYSIS_KEYS = (
    "Count",
    "Sum",
    "Minimum",
    "Maximum",
    "Range",
    "Mean",
    "Median",
    "Mode",
    "Mode Frequency",
    "Geometric Mean",
    "Harmonic Mean",
    "Variance (Sample)",
    "Variance (Population)",
    "Std Dev (Sample)",
    "Std Dev (Population)",
    "Standard Error",
    "Coeff of Variation %",
    "Mean Abs Deviation",
    "Quartile 1 (25%)",
    "Quartile 2 (50%)",
    "Quartile 3 (75%)",
    "Interquartile Range",
    "10th Percentile",
    "90th Percentile",
    "Skewness",
    "Kurtosis",
    "Root Mean Square",
    "Sum of Squares",
    "Outliers (IQR method)",
    "Outliers (Z > 2)",
)


def interpret_skewness(skew: float) -> str:
    if skew < -1:
        return "highly left-skewed"
    if skew < -0.5:
        return "moderately left-skewed"
    if skew < 0.5:
        return "approximately symmetric"
    if skew < 1:
        return "moderately right-skewed"
    return "highly right-skewed"


def interpret_kurtosis(kurt: float) -> str:
    if kurt < -1:
        return "very flat / platykurtic"
    if kurt < 0:
        return "flat / platykurtic"
    if kurt < 1:
        return "normal / mesokurtic"
    if kurt < 3:
        return "peaked / leptokurtic"
    return "very peaked / leptokurtic"


def _ordinal(p: float) -> str:
    k = int(p) if float(p).is_integer() else p
    if isinstance(k, int) and k % 100 not in (11, 12, 13):
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(k % 10, 'th')
    else:
        suffix = 'th'
    return f"{k}{suffix} Percentile"


@dataclass(frozen=True)
class StatisticsParams:
    """
    Parameter payload for descriptive statistics.

    All fields are optional (None if not computed). describe() populates
    all; the backend can be asked for subsets through its compute groups.
    """
    # basic
    count: int | None = None
    total: float | None = None
    minimum: float | None = None
    maximum: float | None = None
    value_range: float | None = None

    # central
    mean: float | None = None
    median: float | None = None
    mode: float | None = None
    mode_frequency: int | None = None
    geometric_mean: float | None = None
    harmonic_mean: float | None = None

    # dispersion
    variance: float | None = None
    population_variance: float | None = None
    sd: float | None = None
    population_sd: float | None = None
    standard_error: float | None = None
    coefficient_of_variation: float | None = None
    mean_absolute_deviation: float | None = None

    # quartiles / percentiles
    q1: float | None = None
    q2: float | None = None
    q3: float | None = None
    iqr: float | None = None
    percentiles: dict[float, float] = field(default_factory=dict)

    # shape
    skewness: float | None = None
    kurtosis: float | None = None

    # additional
    root_mean_square: float | None = None
    sum_of_squares: float | None = None
    sum_abs_deviations: float | None = None
    outliers_iqr: int | None = None
    outliers_z: int | None = None
    z_threshold: float | None = None


@dataclass
class StatisticsSolution:
    """
    User-facing descriptive statistics results for one column.

    Wraps Result[StatisticsParams] and provides convenient accessors, the
    ordered full-analysis mapping used by reports, and plain-language
    interpretation.
    """
    _result: Result[StatisticsParams]
    _design: 'SeriesDesign'

    # --- Basic ---

    @property
    def count(self) -> int | None:
        return self._result.params.count

    @property
    def sum(self) -> float | None:
        return self._result.params.total

    @property
    def minimum(self) -> float | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> float | None:
        return self._result.params.maximum

    @property
    def range(self) -> float | None:
        return self._result.params.value_range

    # --- Central tendency ---

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def mode(self) -> float | None:
        """Most frequent value; the smallest one on ties."""
        return self._result.params.mode

    @property
    def mode_frequency(self) -> int | None:
        return self._result.params.mode_frequency

    @property
    def geometric_mean(self) -> float | None:
        """Over strictly positive values only."""
        return self._result.params.geometric_mean

    @property
    def harmonic_mean(self) -> float | None:
        """Over nonzero values only."""
        return self._result.params.harmonic_mean

    # --- Dispersion ---

    @property
    def variance(self) -> float | None:
        """Sample variance (n-1)."""
        return self._result.params.variance

    @property
    def population_variance(self) -> float | None:
        return self._result.params.population_variance

    @property
    def sd(self) -> float | None:
        """Sample standard deviation."""
        return self._result.params.sd

    @property
    def population_sd(self) -> float | None:
        return self._result.params.population_sd

    @property
    def standard_error(self) -> float | None:
        return self._result.params.standard_error

    @property
    def coefficient_of_variation(self) -> float | None:
        """Percent: 100 * sd / |mean|."""
        return self._result.params.coefficient_of_variation

    @property
    def mean_absolute_deviation(self) -> float | None:
        return self._result.params.mean_absolute_deviation

    # --- Quartiles ---

    @property
    def q1(self) -> float | None:
        return self._result.params.q1

    @property
    def q2(self) -> float | None:
        return self._result.params.q2

    @property
    def q3(self) -> float | None:
        return self._result.params.q3

    @property
    def iqr(self) -> float | None:
        return self._result.params.iqr

    @property
    def percentiles(self) -> dict[float, float]:
        """Extra percentiles computed, keyed on the 0-100 scale."""
        return dict(self._result.params.percentiles)

    # --- Shape ---

    @property
    def skewness(self) -> float | None:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float | None:
        """Excess kurtosis."""
        return self._result.params.kurtosis

    @property
    def skewness_interpretation(self) -> str:
        return interpret_skewness(self.skewness or 0.0)

    @property
    def kurtosis_interpretation(self) -> str:
        return interpret_kurtosis(self.kurtosis or 0.0)

    # --- Additional ---

    @property
    def root_mean_square(self) -> float | None:
        return self._result.params.root_mean_square

    @property
    def sum_of_squares(self) -> float | None:
        return self._result.params.sum_of_squares

    @property
    def sum_abs_deviations(self) -> float | None:
        return self._result.params.sum_abs_deviations

    @property
    def outliers_iqr(self) -> int | None:
        return self._result.params.outliers_iqr

    @property
    def outliers_z(self) -> int | None:
        return self._result.params.outliers_z

    # --- Metadata ---

    @property
    def design(self) -> 'SeriesDesign':
        return self._design

    @property
    def name(self) -> str | None:
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Reports ---

    def full_analysis(self) -> dict[str, float]:
        """
        Every statistic keyed by its report label, in FULL_ANALYSIS_KEYS
        order. Counts are reported as floats. Statistics that were not
        computed are omitted.

        The sum of absolute deviations is left out, as in the exported
        report; read it from the sum_abs_deviations property. It is the
        mean absolute deviation times the count.
        """
        p = self._result.params
        pct = p.percentiles
        threshold = p.z_threshold
        z_label = "Outliers (Z > 2)"
        if threshold is not None and threshold != 2.0:
            z_label = f"Outliers (Z > {threshold:g})"

        entries = [
            ("Count", p.count),
            ("Sum", p.total),
            ("Minimum", p.minimum),
            ("Maximum", p.maximum),
            ("Range", p.value_range),
            ("Mean", p.mean),
            ("Median", p.median),
            ("Mode", p.mode),
            ("Mode Frequency", p.mode_frequency),
            ("Geometric Mean", p.geometric_mean),
            ("Harmonic Mean", p.harmonic_mean),
            ("Variance (Sample)", p.variance),
            ("Variance (Population)", p.population_variance),
            ("Std Dev (Sample)", p.sd),
            ("Std Dev (Population)", p.population_sd),
            ("Standard Error", p.standard_error),
            ("Coeff of Variation %", p.coefficient_of_variation),
            ("Mean Abs Deviation", p.mean_absolute_deviation),
            ("Quartile 1 (25%)", p.q1),
            ("Quartile 2 (50%)", p.q2),
            ("Quartile 3 (75%)", p.q3),
            ("Interquartile Range", p.iqr),
        ]
        entries.extend((_ordinal(q), v) for q, v in pct.items())
        entries.extend([
            ("Skewness", p.skewness),
            ("Kurtosis", p.kurtosis),
            ("Root Mean Square", p.root_mean_square),
            ("Sum of Squares", p.sum_of_squares),
            ("Outliers (IQR method)", p.outliers_iqr),
            (z_label, p.outliers_z),
        ])

        return {k: float(v) for k, v in entries if v is not None}

    def interpretation(self, column: str | None = None) -> str:
        """
        Plain-language reading of the statistics.

        Mentions the central value, a mean/median divergence above 10% of
        the mean, the spread (with CV when positive), the distribution
        shape, and IQR outliers when any exist.
        """
        from colstats.report.formatting import format_fixed

        column = column or self.name or "values"
        mean = self.mean or 0.0
        median = self.median or 0.0
        sd = self.sd or 0.0
        cv = self.coefficient_of_variation or 0.0

        lines = [f"Column '{column}' Analysis:", ""]
        lines.append(
            f"- Central Value: The data centers around {format_fixed(mean)} "
            f"(mean) with a median of {format_fixed(median)}."
        )
        if mean != 0 and abs(mean - median) / abs(mean) > 0.1:
            lines.append(
                "- Note: Mean and median differ significantly, suggesting "
                "potential outliers or skewness."
            )

        spread = f"- Spread: Standard deviation is {format_fixed(sd)}"
        if cv > 0:
            spread += f" (CV: {format_fixed(cv)}%)"
        lines.append(spread + ".")

        lines.append(
            f"- Distribution: {self.skewness_interpretation}, "
            f"{self.kurtosis_interpretation}."
        )

        outliers = self.outliers_iqr or 0
        if outliers > 0:
            lines.append(
                f"- Outliers: {outliers} potential outlier(s) detected using IQR method."
            )

        return "\n".join(lines)

    def summary(self) -> str:
        """Two-column table of full_analysis() with display formatting."""
        from colstats.report.formatting import format_value

        analysis = self.full_analysis()
        if not analysis:
            return "Descriptive Statistics: none computed"

        width = max(len(k) for k in analysis)
        title = "Descriptive Statistics"
        if self.name:
            title += f": {self.name}"
        lines = [title]
        for key, value in analysis.items():
            lines.append(f"  {key.ljust(width)}  {format_value(value)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = self._result.info.get('compute', ())
        stats_str = ", ".join(sorted(computed)) if computed else "none"
        return f"StatisticsSolution(n={self._design.n}, computed=[{stats_str}])"
