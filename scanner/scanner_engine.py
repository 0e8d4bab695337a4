import logging
import os
import time
from contextlib import nullcontext
from itertools import islice

from config import BATCH_SIZE, SOURCE_ENCODING, SOURCE_ENCODING_ERRORS
from scanner.accumulator import MatchAccumulator
from scanner.errors import ConfigurationError, SourceError
from scanner.models import ScanReport
from scanner.pattern_matcher import PatternMatcher


def source_name(source):
    """Identifier used for a source in results, errors and logs."""
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return str(getattr(source, "name", repr(source)))


class ScannerEngine:
    def __init__(self, batch_size=BATCH_SIZE, encoding=SOURCE_ENCODING, encoding_errors=SOURCE_ENCODING_ERRORS):
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be at least 1, got {batch_size}")
        self.logger = logging.getLogger(__name__)
        self.batch_size = batch_size
        self.encoding = encoding
        self.encoding_errors = encoding_errors

    def scan(self, config):
        """
        Scans every source of the configuration in order and returns a ScanReport.

        Raises ConfigurationError or PatternError before any source is opened.
        A source that fails is recorded in report.errors and the scan moves on
        to the next one, unless config.fail_fast is set.
        """
        started = time.perf_counter()

        accumulator = MatchAccumulator(config.unique_group)
        matcher = PatternMatcher(config.pattern)
        if config.unique_group is not None and config.unique_group > matcher.group_count:
            raise ConfigurationError(
                f"Unique group {config.unique_group} out of range, pattern has {matcher.group_count} capture group(s)"
            )

        report = ScanReport()
        self.logger.info(f"Scanning {len(config.sources)} source(s) for {config.pattern!r}"
                         + (f" (unique on group {config.unique_group})" if accumulator.unique else ""))

        for i, source in enumerate(config.sources):
            name = source_name(source)
            self.logger.info(f"[{i+1}/{len(config.sources)}] Processing: {name}")
            source_started = time.perf_counter()
            try:
                lines = self._scan_source(source, name, matcher, accumulator)
            except SourceError as e:
                report.lines_processed += e.lines_read
                if config.fail_fast:
                    raise
                self.logger.error(f"Skipping rest of {name} after {e.lines_read} line(s): {e.reason}")
                report.errors.append(e)
                continue

            report.lines_processed += lines
            report.sources_scanned += 1
            self.logger.info(f"Finished {name}: {lines} line(s) in {time.perf_counter() - source_started:.3f}s")

        report.results = accumulator.results()
        report.elapsed = time.perf_counter() - started
        self.logger.info(f"Scan complete. {len(report.results)} match(es), {report.lines_processed} line(s), "
                         f"{len(report.errors)} failed source(s) in {report.elapsed:.3f}s")
        return report

    def _scan_source(self, source, name, matcher, accumulator):
        """Reads one source batch by batch and returns the number of lines read."""
        lines_read = 0
        if getattr(source, "closed", False):
            raise SourceError(name, "stream is closed")
        try:
            with self._open(source) as f:
                while True:
                    batch = list(islice(f, self.batch_size))
                    if not batch:
                        break
                    if not isinstance(batch[0], str):
                        raise SourceError(name, "not a text stream", lines_read=lines_read)
                    matches = matcher.scan_batch(batch, source=name, first_line_number=lines_read + 1)
                    accumulator.add(matches)
                    lines_read += len(batch)
                    self.logger.debug(f"{name}: batch of {len(batch)} line(s), {len(matches)} match(es)")
        except (OSError, ValueError) as e:  # ValueError: decode errors, stream closed mid-read
            raise SourceError(name, str(e), lines_read=lines_read) from e
        return lines_read

    def _open(self, source):
        if isinstance(source, (str, os.PathLike)):
            return open(source, "r", encoding=self.encoding, errors=self.encoding_errors)
        # Caller-owned stream: read it but leave closing to the caller
        return nullcontext(source)
