from scanner.errors import ConfigurationError


class MatchAccumulator:
    """
    Collects match results for a single scan.

    Append mode (unique_group is None) keeps every match in encounter order.
    Uniqueness mode keeps only the first match seen for each distinct value of
    groups[unique_group]. A group that did not take part in the match has the
    key None, which is a key of its own and never equal to "".
    """

    def __init__(self, unique_group=None):
        if unique_group is not None:
            if isinstance(unique_group, bool) or not isinstance(unique_group, int):
                raise ConfigurationError(f"Unique group index must be an integer, got {unique_group!r}")
            if unique_group < 0:
                raise ConfigurationError(f"Unique group index must not be negative, got {unique_group}")
        self.unique_group = unique_group
        self._matches = []
        self._by_key = {}

    @property
    def unique(self):
        return self.unique_group is not None

    def add(self, matches):
        if not self.unique:
            self._matches.extend(matches)
            return

        for match in matches:
            try:
                key = match.groups[self.unique_group]
            except IndexError:
                raise ConfigurationError(
                    f"Unique group {self.unique_group} does not exist in a match with {len(match.groups) - 1} groups"
                ) from None
            # dict keeps insertion order, so the first match per key also fixes output order
            if key not in self._by_key:
                self._by_key[key] = match

    def results(self):
        if self.unique:
            return list(self._by_key.values())
        return list(self._matches)

    def __len__(self):
        return len(self._by_key) if self.unique else len(self._matches)
