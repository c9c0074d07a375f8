import argparse
import json
import sys
from typing import List, Optional

from services.points_calculator import calculate_points, points_breakdown
from utils.receipt_validator import ReceiptValidator


def score_file(path: str, validator: ReceiptValidator, show_breakdown: bool = False) -> bool:
    """Score one receipt JSON file and print the result. Returns False if it is invalid."""
    try:
        with open(path, "r") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"{path}: could not read receipt: {e}")
        return False

    receipt, result = validator.check(payload)
    if receipt is None:
        print(f"{path}: invalid receipt: {result.reason}")
        return False

    print(f"{path}: {calculate_points(receipt)} points")
    if show_breakdown:
        for rule, points in points_breakdown(receipt).items():
            print(f"  {rule:<20} {points:>6}")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Receipt points command line tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score_parser = subparsers.add_parser("score", help="Score receipt JSON files")
    score_parser.add_argument("files", nargs="+", help="Receipt JSON files")
    score_parser.add_argument("--breakdown", action="store_true",
                              help="Show the points awarded by each rule")

    args = parser.parse_args(argv)

    validator = ReceiptValidator()
    ok = True
    for path in args.files:
        ok = score_file(path, validator, args.breakdown) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
