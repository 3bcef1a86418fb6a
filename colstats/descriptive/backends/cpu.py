"""
CPU reference backend for descriptive statistics.

Cross-checked against scipy.stats in the test suite.
"""

from __future__ import annotations

from typing import Iterable

from colstats.core.compute.timing import Timer
from colstats.core.defaults import DEFAULT_Z_THRESHOLD, REPORT_PERCENTILES
from colstats.core.exceptions import ValidationError
from colstats.core.result import Result
from colstats.descriptive import _moments, _order
from colstats.descriptive.design import SeriesDesign
from colstats.descriptive.solution import StatisticsParams


COMPUTE_GROUPS = frozenset({
    'basic',        # count, sum, min, max, range
    'central',      # mean, median, mode, geometric/harmonic mean
    'dispersion',   # variances, std devs, standard error, CV, MAD
    'quartiles',    # Q1, Q2, Q3, IQR
    'percentiles',  # requested extra percentiles
    'shape',        # skewness, kurtosis
    'additional',   # RMS, sum of squares, sum of abs deviations
    'outliers',     # IQR-fence and z-score outlier counts
})


class CPUStatisticsBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: SeriesDesign,
        *,
        compute: Iterable[str] | None = None,
        percentiles: Iterable[float] = REPORT_PERCENTILES,
        z_threshold: float = DEFAULT_Z_THRESHOLD,
    ) -> Result[StatisticsParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : SeriesDesign
        compute : iterable of str, optional
            Which groups to compute (see COMPUTE_GROUPS). All when None.
        percentiles : iterable of float
            Extra percentiles (0-100 scale) for the 'percentiles' group.
        z_threshold : float
            |z| cut-off for the z-score outlier count.
        """
        groups = set(COMPUTE_GROUPS) if compute is None else set(compute)
        unknown = groups - COMPUTE_GROUPS
        if unknown:
            raise ValidationError(
                f"Unknown compute group(s): {sorted(unknown)}. "
                f"Valid: {sorted(COMPUTE_GROUPS)}"
            )

        timer = Timer()
        timer.start()

        x = design.data
        s = design.sorted_data
        fields: dict = {}
        warnings_list: list[str] = []

        if design.n == 0:
            warnings_list.append("No values loaded; all statistics are 0")

        if 'basic' in groups:
            with timer.section('basic'):
                fields.update(
                    count=design.n,
                    total=_moments.total(x),
                    minimum=_order.minimum(s),
                    maximum=_order.maximum(s),
                    value_range=_order.value_range(s),
                )

        if 'central' in groups:
            with timer.section('central'):
                mode_value, mode_freq = _order.mode(s)
                fields.update(
                    mean=_moments.mean(x),
                    median=_order.median(s),
                    mode=mode_value,
                    mode_frequency=mode_freq,
                    geometric_mean=_moments.geometric_mean(x),
                    harmonic_mean=_moments.harmonic_mean(x),
                )

        if 'dispersion' in groups:
            with timer.section('dispersion'):
                fields.update(
                    variance=_moments.sample_variance(x),
                    population_variance=_moments.population_variance(x),
                    sd=_moments.sample_sd(x),
                    population_sd=_moments.population_sd(x),
                    standard_error=_moments.standard_error(x),
                    coefficient_of_variation=_moments.coefficient_of_variation(x),
                    mean_absolute_deviation=_moments.mean_absolute_deviation(x),
                )
                if 0 < design.n < 2:
                    warnings_list.append(
                        "Fewer than 2 values; sample variance reported as 0"
                    )

        if 'quartiles' in groups:
            with timer.section('quartiles'):
                q1, q2, q3 = _order.quartiles(s)
                fields.update(q1=q1, q2=q2, q3=q3, iqr=q3 - q1)

        if 'percentiles' in groups:
            with timer.section('percentiles'):
                fields['percentiles'] = {
                    float(p): _order.percentile(s, float(p)) for p in percentiles
                }

        if 'shape' in groups:
            with timer.section('shape'):
                fields.update(
                    skewness=_moments.skewness(x),
                    kurtosis=_moments.kurtosis(x),
                )

        if 'additional' in groups:
            with timer.section('additional'):
                fields.update(
                    root_mean_square=_moments.root_mean_square(x),
                    sum_of_squares=_moments.sum_of_squares(x),
                    sum_abs_deviations=_moments.sum_abs_deviations(x),
                )

        if 'outliers' in groups:
            with timer.section('outliers'):
                fields.update(
                    outliers_iqr=_order.count_outliers_iqr(s),
                    outliers_z=_moments.count_outliers_z(x, z_threshold),
                    z_threshold=float(z_threshold),
                )

        timer.stop()

        return Result(
            params=StatisticsParams(**fields),
            info={
                'method': 'linear_interpolation',
                'compute': tuple(sorted(groups)),
                'n': design.n,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
