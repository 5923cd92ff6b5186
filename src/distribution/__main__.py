#!/usr/bin/env python3
"""
Distribution — точка входа командной строки
===========================================

Запуск:
  1. Все алгоритмы для среднего 4.3 в диапазоне [1, 5]:
     python -m src.distribution 4.3 1 5

  2. Воспроизводимый Random Adjustment и JSON отчёт:
     python -m src.distribution 4.3 1 5 --seed 42 --json

  3. Минимальный count и без Backtracking Search:
     python -m src.distribution 4.5 1 5 --minimal-count --no-backtracking
"""

import argparse
import json
import logging
import sys
from dataclasses import replace

from jsonschema import ValidationError

from src.core.contracts import validate_distribution_report, validate_distribution_request
from src.core.domain.errors import InvalidAverage
from src.distribution.runner import DistributionRunner, RunnerConfig

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.distribution",
        description="Целочисленные последовательности с точным заданным средним",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python -m src.distribution 4.3 1 5
  python -m src.distribution 3.142 1 5 --seed 7 --json
        """,
    )

    parser.add_argument("average", type=str, help="целевое среднее (десятичная строка)")
    parser.add_argument("minimum", type=int, help="нижняя граница (включительно)")
    parser.add_argument("maximum", type=int, help="верхняя граница (включительно)")

    g = parser.add_argument_group("параметры запуска (все опциональны)")
    g.add_argument("--seed", type=int, default=None,
                   help="seed для Random Adjustment")
    g.add_argument("--minimal-count", action="store_true",
                   help="count = несократимый знаменатель среднего")
    g.add_argument("--no-backtracking", action="store_true",
                   help="не запускать Backtracking Search")
    g.add_argument("--max-iterations", type=int, default=None,
                   help="бюджет итераций для всех алгоритмов")
    g.add_argument("--json", action="store_true",
                   help="вывести отчёт в JSON")
    g.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="уровень логирования (по умолчанию: INFO)")

    return parser


def build_config(args: argparse.Namespace) -> RunnerConfig:
    """
    Конфигурация запуска из аргументов CLI.
    """
    cfg = RunnerConfig(
        minimal_count=args.minimal_count,
        include_backtracking=not args.no_backtracking,
        seed=args.seed,
    )

    if args.max_iterations is not None:
        budget = args.max_iterations
        cfg = replace(
            cfg,
            maximal=replace(cfg.maximal, max_iterations=budget),
            subtraction=replace(cfg.subtraction, max_iterations=budget),
            moving_average=replace(cfg.moving_average, max_iterations=budget),
            random_adjustment=replace(cfg.random_adjustment, max_iterations=budget),
            backtracking=replace(cfg.backtracking, max_steps=budget),
        )

    return cfg


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr if args.json else sys.stdout,
    )

    request = {
        "average": args.average,
        "minimum": args.minimum,
        "maximum": args.maximum,
        "minimal_count": args.minimal_count,
        "include_backtracking": not args.no_backtracking,
        "seed": args.seed,
    }
    try:
        validate_distribution_request(request)
    except ValidationError as e:
        print(f"✗ Invalid request: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    runner = DistributionRunner(build_config(args))
    try:
        report = runner.run(args.average, args.minimum, args.maximum)
    except InvalidAverage as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        payload = report.model_dump(mode="json")
        validate_distribution_report(payload)
        print(json.dumps(payload, indent=2))
    else:
        print(f"\n  ✓ {len(report.results)} converged, {len(report.failures)} failed")

    return 0


if __name__ == "__main__":
    sys.exit(main())
