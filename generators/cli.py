"""CLI entry point for the synthetic transaction source.

Usage:
    python -m generators --count 1000 --seed 42
    python -m generators --config configs/fraud_mix.yaml --count 500 --score
    python -m generators --count 200 --output file --output-file output/txns.jsonl
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from src.shared.logging import setup_logging


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="chargewatch synthetic transaction generator")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=100, help="Number of transactions")
    parser.add_argument(
        "--output",
        type=str,
        default="stdout",
        choices=["stdout", "file"],
        help="Output destination",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Output file path")
    parser.add_argument(
        "--score",
        action="store_true",
        help="Run each transaction through the fraud scorer and include its alerts",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")

    args = parser.parse_args(argv)
    setup_logging(args.log_level, json_output=False)

    config = {}
    if args.config:
        with open(args.config) as f:
            config = yaml.safe_load(f) or {}

    from .transaction_generator import TransactionGenerator

    gen = TransactionGenerator(config=config, seed=args.seed)
    records = gen.generate(num_transactions=args.count)

    if args.score:
        from src.domains.fraud.scorer import FraudScorer

        scorer = FraudScorer()
        records = [
            {
                "transaction": txn,
                "alerts": [
                    a.model_dump(mode="json")
                    for a in scorer.score_transaction(txn).alerts
                ],
            }
            for txn in records
        ]

    if args.output == "stdout":
        for record in records:
            print(json.dumps(record, default=str))
    else:
        output_path = args.output_file or "output/transactions.jsonl"
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            for record in records:
                f.write(json.dumps(record, default=str) + "\n")
        print(f"Wrote {len(records)} records to {output_path}", file=sys.stderr)

    print(f"Generated {len(records)} transactions", file=sys.stderr)
