import argparse
import sys

from config import PATTERNS, BATCH_SIZE, SOURCE_ENCODING, SOURCE_ENCODING_ERRORS, OUTPUT_FORMAT, LOG_DIR
from scanner.errors import ScanError, ConfigurationError, PatternError
from scanner.models import ScanConfiguration
from scanner.scanner_engine import ScannerEngine
from utils.logger import setup_logger
from utils.result_writer import ResultWriter, FORMATS

EXIT_OK = 0
EXIT_SOURCE_ERRORS = 1
EXIT_USAGE = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Scan text files line by line for regular expression matches")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("-e", "--regexp", help="Regular expression (Python re syntax)")
    target.add_argument("-p", "--preset", choices=sorted(PATTERNS), help="Use a built-in pattern")
    parser.add_argument("sources", nargs="+", help="Text files to scan, in order")
    parser.add_argument("-g", "--group", type=int, default=None,
                        help="Keep only the first match for each distinct value of this capture group")
    parser.add_argument("--batch-size", type=int, default=BATCH_SIZE, help="Lines read per batch")
    parser.add_argument("--encoding", default=SOURCE_ENCODING, help="Source text encoding")
    parser.add_argument("--encoding-errors", default=SOURCE_ENCODING_ERRORS,
                        choices=["strict", "ignore", "replace", "backslashreplace", "surrogateescape"],
                        help="How undecodable bytes are handled")
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first source that cannot be read")
    parser.add_argument("-o", "--output", help="Write results to this file instead of stdout")
    parser.add_argument("--format", choices=FORMATS, default=OUTPUT_FORMAT if OUTPUT_FORMAT in FORMATS else "csv",
                        help="Output file format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-batch diagnostics")
    parser.add_argument("--log-dir", default=LOG_DIR, help="Directory for log files (empty string disables them)")
    return parser.parse_args(argv)


def format_result(result, group=None):
    value = result.full_value if group is None else result.groups[group]
    if value is None:
        value = "<no match>"
    return f"{result.source}:{result.line_number}:{value}"


def main(argv=None):
    args = parse_args(argv)
    logger = setup_logger(log_dir=args.log_dir, verbose=args.verbose)

    pattern = args.regexp if args.regexp is not None else PATTERNS[args.preset]
    config = ScanConfiguration(
        pattern=pattern,
        sources=args.sources,
        unique_group=args.group,
        fail_fast=args.fail_fast,
    )

    try:
        engine = ScannerEngine(batch_size=args.batch_size, encoding=args.encoding,
                               encoding_errors=args.encoding_errors)
        report = engine.scan(config)
    except (ConfigurationError, PatternError) as e:
        logger.error(f"Error: {e}")
        return EXIT_USAGE
    except ScanError as e:
        logger.error(f"Scan aborted: {e}")
        return EXIT_SOURCE_ERRORS

    if args.output:
        try:
            ResultWriter(args.format).save(report.results, args.output)
        except OSError as e:
            logger.error(f"Could not write results to {args.output}: {e}")
            return EXIT_SOURCE_ERRORS
    else:
        for result in report.results:
            print(format_result(result, args.group))

    for error in report.errors:
        logger.warning(f"Failed source: {error}")

    return EXIT_OK if report.ok else EXIT_SOURCE_ERRORS


if __name__ == "__main__":
    sys.exit(main())
