#!/usr/bin/env python3
# =============================================================================
# MM PERFORMANCE SCORING - TEST RUNNER
# =============================================================================
#
# USAGE:
#   python run_tests.py                  # Run all tests
#   python run_tests.py -v               # Verbose mode
#   python run_tests.py --unit           # Unit tests only
#   python run_tests.py --integration    # Integration tests only
#
# =============================================================================

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))


def main():
    import argparse

    import pytest

    parser = argparse.ArgumentParser(
        description="MM Performance Scoring Test Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                Run all tests
  python run_tests.py -v             Verbose output
  python run_tests.py --unit         Unit tests only
"""
    )

    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose output")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--unit", action="store_true",
                       help="Unit tests only")
    group.add_argument("--integration", action="store_true",
                       help="Integration tests only")

    args = parser.parse_args()

    tests_dir = PROJECT_ROOT / "tests"
    if args.unit:
        targets = [str(tests_dir / "unit")]
    elif args.integration:
        targets = [str(tests_dir / "integration")]
    else:
        targets = [str(tests_dir)]

    pytest_args = targets + (["-v"] if args.verbose else ["-q"])
    sys.exit(pytest.main(pytest_args))


if __name__ == "__main__":
    main()
