from dupwalk.core.fingerprint import FINGERPRINTS

HASH_CHOICES = list(FINGERPRINTS.keys())

HASH_HELP_TEXT = (
    "How files are identified (default: %(default)s):\n"
    "  name   : basename + size, metadata only (fastest, ignores content)\n"
    "  sha256 : full content digest\n"
    "  md5    : full content digest\n"
    "  xxhash : full content xxHash64 (fast, non-cryptographic)\n"
)

EPILOG_TEXT = """
Examples:
  Find files sharing name and size under Downloads
  %(prog)s -i ~/Downloads

  Compare by content with 16 workers, only images of 500KB-10MB
  %(prog)s -i ~/Pictures --hash sha256 -w 16 -m 500KB -M 10MB -x .jpg .png

  Also walk node_modules/venv/... and skip "build" directories
  %(prog)s -i ~/src --no-default-skip -s build

  List every file instead of duplicate groups, report to a file
  %(prog)s -i ~/Documents --all -o ~/Documents/report.txt
"""
