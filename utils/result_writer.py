import csv
import json
import os
import logging
from config import OUTPUT_FORMAT
from scanner.errors import ConfigurationError

FORMATS = ("csv", "json")


class ResultWriter:
    def __init__(self, output_format=OUTPUT_FORMAT):
        self.output_format = output_format.lower()
        if self.output_format not in FORMATS:
            raise ConfigurationError(f"Unknown output format {output_format!r}, expected one of {', '.join(FORMATS)}")
        self.logger = logging.getLogger(__name__)

    def save(self, results, filename):
        """
        Saves results to the specified filename, replacing any previous content.
        Delegates to specific format handlers based on self.output_format.
        """
        # Ensure directory exists
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)

        try:
            if self.output_format == 'json':
                self._save_json(results, filename)
            else:
                self._save_csv(results, filename)
        except OSError as e:
            self.logger.error(f"Failed to save {self.output_format.upper()} results to {filename}: {e}")
            raise
        self.logger.info(f"Saved {len(results)} result(s) to {filename}")

    def _save_csv(self, results, filename):
        with open(filename, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=["source", "line", "value", "groups"])
            writer.writeheader()
            for r in results:
                writer.writerow({
                    "source": r.source,
                    "line": r.line_number,
                    "value": r.full_value,
                    # Groups after 0 as JSON so a missing group (null) stays distinct from ""
                    "groups": json.dumps(list(r.groups[1:]), ensure_ascii=False),
                })

    def _save_json(self, results, filename):
        data = [{
            "source": r.source,
            "line": r.line_number,
            "start": r.start,
            "end": r.end,
            "value": r.full_value,
            "groups": list(r.groups),
        } for r in results]

        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4, ensure_ascii=False)
