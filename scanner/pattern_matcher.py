import re

from scanner.errors import PatternError
from scanner.models import MatchResult


class PatternMatcher:
    def __init__(self, pattern):
        self.pattern = pattern
        try:
            self.compiled_pattern = re.compile(pattern)
        except re.error as e:
            raise PatternError(pattern, str(e)) from e

    @property
    def group_count(self):
        """Number of capture groups, not counting group 0."""
        return self.compiled_pattern.groups

    def scan_line(self, line, source="", line_number=0):
        matches = []
        for match in self.compiled_pattern.finditer(line):
            matches.append(MatchResult(
                full_value=match.group(0),
                groups=(match.group(0),) + match.groups(),
                source=source,
                line_number=line_number,
                start=match.start(),
                end=match.end(),
            ))
        return matches

    def scan_batch(self, lines, source="", first_line_number=1):
        """
        Applies the pattern to each line of a batch independently.
        Line terminators are dropped first so a match never spans two lines.
        """
        matches = []
        for offset, line in enumerate(lines):
            text = line[:-1] if line.endswith("\n") else line
            if text.endswith("\r"):
                text = text[:-1]
            matches.extend(self.scan_line(text, source=source, line_number=first_line_number + offset))
        return matches
