"""Allow running as: python -m laundromat_quotes"""

from laundromat_quotes.main import run
import sys

if __name__ == "__main__":
    file_arg = sys.argv[1] if len(sys.argv) > 1 else ""
    run(file_arg)
