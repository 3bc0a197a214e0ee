#!/usr/bin/env python3
"""
knapga - command-line entry point

Generates a random item catalog, evolves a population of packings and prints the best one.
"""

import argparse
import logging
import sys

from knapga.core.config import STRATEGIES, GAConfig, InvalidConfigurationError
from knapga.engine import GAEngine
from knapga.report import format_catalog, format_population, format_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knapga",
        description="Approximate a random 0/1 knapsack instance with a genetic algorithm.",
    )
    parser.add_argument("genome_size", type=int, help="Number of catalog items (bits per genome)")
    parser.add_argument("pool_size", type=int, help="Individuals per generation")
    parser.add_argument("generations", type=int, help="Number of generations to run")
    parser.add_argument("carry_fit", type=float, help="Fraction of the fittest carried over unchanged (roulette)")
    parser.add_argument("carry_weak", type=float, help="Wheel share kept for zero-fitness individuals")
    parser.add_argument("n_mutations", type=int, help="Bit-flip trials per child")
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default="roulette",
        help="Selection strategy (default: roulette)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--capacity", type=float, default=2.0, help="Knapsack capacity (default: 2.0)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-generation statistics")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = GAConfig(
            genome_size=args.genome_size,
            pool_size=args.pool_size,
            generations=args.generations,
            carry_fit=args.carry_fit,
            carry_weak=args.carry_weak,
            n_mutations=args.n_mutations,
            strategy=args.strategy,
            seed=args.seed,
            capacity=args.capacity,
        )
    except InvalidConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    engine = GAEngine(config)
    print(format_catalog(engine.catalog))
    print()

    population = engine.initialize()
    print(format_population(population))
    print()

    result = engine.run(population)
    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
