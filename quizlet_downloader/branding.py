"""
Branding for the Quizlet Downloader CLI.
"""

BANNER = r"""
----------------------------------------
  QUIZLET DOWNLOADER
  Export study sets to JSON, CSV, DOCX
----------------------------------------
"""


def print_banner():
    """Print the CLI banner."""
    print(BANNER)


# Cross-platform symbol
CHECK = "[OK]"

try:
    # Try to use Unicode symbols on systems that support them
    import sys
    if sys.stdout.encoding and sys.stdout.encoding.lower() not in ('cp1252', 'ascii'):
        CHECK = "✓"
except Exception:
    pass
