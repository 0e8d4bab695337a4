class ScanError(Exception):
    """Base class for every error raised by the scanner."""


class ConfigurationError(ScanError):
    pass


class PatternError(ScanError):
    def __init__(self, pattern, reason):
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class SourceError(ScanError):
    """
    A source could not be opened or read.
    The original exception is kept as __cause__, lines_read counts the lines
    scanned from the source before it failed.
    """

    def __init__(self, source, reason, lines_read=0):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
        self.lines_read = lines_read
