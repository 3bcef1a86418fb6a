"""
Command-line entry point.

    colstats data.csv --column price --window 5 --output report.txt

Loads the file, prints the ingestion summary, analyzes one column and
optionally writes the text report.
"""

from __future__ import annotations

import argparse
import sys
import warnings

from colstats.core.compute.timing import timed
from colstats.core.defaults import DEFAULT_EMA_ALPHA
from colstats.core.exceptions import ColStatsError, IngestionWarning
from colstats.descriptive import SeriesDesign, describe
from colstats.ingest import read_file
from colstats.report import render_report, write_report
from colstats.smoothing import (
    exponential_moving_average,
    four_point_moving_average,
    moving_average,
    weighted_moving_average,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='colstats',
        description='Descriptive statistics and moving averages for one column '
                    'of a delimited text file',
    )
    parser.add_argument('path', help='Delimited text file (UTF-8)')
    parser.add_argument(
        '--column', '-c',
        help='Column to analyze (default: first column with numeric values)',
    )
    parser.add_argument(
        '--no-header',
        action='store_true',
        help='First line is data; columns are named Column_1, Column_2, ...',
    )
    parser.add_argument(
        '--delimiter', '-d',
        help='Field delimiter (default: detected from the first line)',
    )
    parser.add_argument(
        '--window', '-w',
        type=int,
        help='Also compute simple and weighted moving averages with this window',
    )
    parser.add_argument(
        '--alpha', '-a',
        type=float,
        default=DEFAULT_EMA_ALPHA,
        help=f'EMA smoothing factor (default: {DEFAULT_EMA_ALPHA})',
    )
    parser.add_argument(
        '--output', '-o',
        help='Write the text report to this path',
    )
    return parser


def _pick_column(dataset, requested: str | None) -> str | None:
    if requested is not None:
        return requested if requested in dataset else None
    for name in dataset.column_names:
        if dataset.record_count(name) > 0:
            return name
    return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    delimiter = args.delimiter
    if delimiter in ('\\t', 'tab'):
        delimiter = '\t'

    try:
        with timed() as timer:
            with warnings.catch_warnings():
                # The failure is reported below from solution.error
                warnings.simplefilter('ignore', IngestionWarning)
                loaded = read_file(
                    args.path,
                    has_header=not args.no_header,
                    delimiter=delimiter,
                )

            if loaded.has_error:
                print(f"colstats: {loaded.error}", file=sys.stderr)
                return 1

            dataset = loaded.dataset
            print(loaded.summary())
            print()

            column = _pick_column(dataset, args.column)
            if column is None:
                if args.column is not None:
                    print(f"colstats: unknown column {args.column!r}", file=sys.stderr)
                else:
                    print("colstats: no column holds numeric values", file=sys.stderr)
                return 1

            design = SeriesDesign.from_dataset(dataset, column)
            if not design.has_data():
                print(f"colstats: column {column!r} has no numeric values",
                      file=sys.stderr)
                return 1

            stats = describe(design)
            print(stats.summary())
            print()
            print(stats.interpretation(column))
            print()

            averages = [four_point_moving_average(design)]
            if args.window is not None:
                averages.append(moving_average(design, args.window))
                averages.append(weighted_moving_average(design, args.window))
            averages.append(exponential_moving_average(design, args.alpha))
            for ma in averages:
                print(ma.summary())
                for w in ma.warnings:
                    print(f"  note: {w}")

            if args.output:
                text = render_report(stats, source=dataset.source, column=column)
                written = write_report(args.output, text)
                print()
                print(f"Report written to {written}")
    except ColStatsError as e:
        print(f"colstats: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"colstats: cannot write report: {e}", file=sys.stderr)
        return 1

    print(f"({timer.result()['total_seconds']:.3f}s)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
