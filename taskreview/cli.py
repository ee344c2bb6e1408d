"""Command-line interface."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .engine.analyzer import analyze
from .engine.filtering import list_projects
from .engine.grouping import AXES, AXIS_HOLIDAY
from .exceptions import ConfigError, TaskReviewError
from .loaders.holiday_calendar import build_holiday_calendar
from .loaders.taskchute import load_tasks
from .reports import FORMATS, render_json, render_markdown
from .utils.config import resolve_config
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = 'config.yaml'


def run_projects(file: str, config: dict) -> str:
    """List the projects referenced by an export."""
    tasks = load_tasks(file, config)
    return "".join(f"{p.id} - {p.name}\n" for p in list_projects(tasks))


def run_analysis(
    file: str,
    project: str,
    config: dict,
    output_format: Optional[str] = None,
    value: Optional[int] = None,
    group_by: Optional[List[str]] = None,
) -> str:
    """Analyze one project and render the report."""
    report_config = config.get('report', {})
    output_format = output_format or report_config.get('format', 'markdown')
    if output_format not in FORMATS:
        raise ConfigError(f"Unknown format: {output_format}")

    axes = group_by if group_by is not None else config.get('analysis', {}).get('group_by', AXES)
    holidays = build_holiday_calendar(config) if AXIS_HOLIDAY in axes else None

    tasks = load_tasks(file, config)
    result = analyze(tasks, project, external_value=value, group_by=axes, holidays=holidays)

    if FORMATS[output_format] == 'json':
        return render_json(result) + "\n"
    return render_markdown(result, value_unit=report_config.get('value_unit', 'page'))


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='taskreview',
        description="Review time spent on a project from a task export"
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help=f'Path to configuration file (default: {DEFAULT_CONFIG} if present)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug output to stderr'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    project_parser = subparsers.add_parser('project', help='Show project names and IDs')
    project_parser.add_argument('file', help='Task export (TSV)')

    analyze_parser = subparsers.add_parser(
        'analyze',
        help='Extract tasks of a project and calculate used time'
    )
    analyze_parser.add_argument('file', help='Task export (TSV)')
    analyze_parser.add_argument('-p', '--project', required=True, help='Target project ID')
    analyze_parser.add_argument(
        '-f', '--format',
        choices=sorted(FORMATS),
        default=None,
        help='Output format (default: markdown)'
    )
    analyze_parser.add_argument(
        '--value',
        type=_positive_int,
        default=None,
        help='External unit count, e.g. pages written, for a per-unit rate'
    )
    analyze_parser.add_argument(
        '-g', '--group-by',
        action='append',
        choices=AXES,
        default=None,
        help='Grouping axis; repeat for several (default: all)'
    )
    analyze_parser.add_argument('-o', '--output', default=None, help='Write the report to a file')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            config = resolve_config(args.config)
        else:
            config = resolve_config(DEFAULT_CONFIG, explicit=False)
    except (ConfigError, FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    level = 'DEBUG' if args.verbose else config.get('logging', {}).get('level', 'WARNING')
    setup_logging(level)

    try:
        if args.command == 'project':
            output = run_projects(args.file, config)
        else:
            output = run_analysis(
                args.file,
                args.project,
                config,
                output_format=args.format,
                value=args.value,
                group_by=args.group_by,
            )
    except (TaskReviewError, FileNotFoundError) as e:
        logger.debug("Analysis aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if getattr(args, 'output', None):
        Path(args.output).write_text(output, encoding='utf-8')
        print(f"Report saved to: {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)

    return 0
