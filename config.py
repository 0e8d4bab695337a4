import os
from dotenv import load_dotenv

load_dotenv()

# Lines read per batch. Tuning only, results don't depend on it.
BATCH_SIZE = int(os.getenv("SCAN_BATCH_SIZE", "1000"))

SOURCE_ENCODING = os.getenv("SCAN_ENCODING", "utf-8")
# "strict" reports undecodable sources as errors, "ignore"/"replace" scan them anyway
SOURCE_ENCODING_ERRORS = os.getenv("SCAN_ENCODING_ERRORS", "strict")

OUTPUT_FORMAT = os.getenv("OUTPUT_FORMAT", "csv").lower()
LOG_DIR = os.getenv("LOG_DIR", "logs")

# Example patterns for common forensics lookups (usable with --preset)
PATTERNS = {
    "IPV4": r"\b((?:\d{1,3}\.){3}\d{1,3})\b",
    "EMAIL": r"([A-Za-z0-9._%+-]+)@([A-Za-z0-9.-]+\.[A-Za-z]{2,})",
    "URL": r"(https?)://([^\s/:\"'<>]+)[^\s\"'<>]*",
    "AWS_ACCESS_KEY": r"AKIA[0-9A-Z]{16}",
}
