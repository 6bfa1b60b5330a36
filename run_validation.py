"""
Validate a record described by a JSON request file.

Usage:
    python run_validation.py request.json [--output result.json]

Exit codes: 0 valid, 1 rule violations, 2 unusable request.
"""
import argparse
import json
import logging
import sys

from src.config.constants import EXIT_INVALID, EXIT_USAGE_ERROR, EXIT_VALID
from src.config.settings import LOG_LEVEL
from src.record_validation.errors import RecordValidationError
from src.record_validation.runner import run_request_file

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("run_validation")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate a record from a JSON request file.")
    parser.add_argument("request", help="Path to the request JSON file")
    parser.add_argument("--output", help="Write the JSON result here instead of stdout")
    args = parser.parse_args(argv)

    try:
        result = run_request_file(args.request)
    except (OSError, RecordValidationError) as e:
        logger.error("%s", e)
        return EXIT_USAGE_ERROR

    rendered = json.dumps(result, ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(rendered)
        logger.info("Result written to %s", args.output)
    else:
        print(rendered)

    return EXIT_VALID if result["valid"] else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
