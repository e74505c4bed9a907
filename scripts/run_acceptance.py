"""
Run the ad server acceptance scenarios.

Usage:
  pip install -e .
  API_KEY=... python scripts/run_acceptance.py --config config/scenarios.sample.json
"""

from adserver_acceptance.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
