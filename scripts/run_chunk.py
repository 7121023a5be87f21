"""
Chunk one file into numbered chunk files without installing the package.
Usage (from project root):
  python scripts/run_chunk.py data/large_file.js --type lines --size 500 --overlap 25
  python scripts/run_chunk.py data/document.txt --type chars --size 4000
  python scripts/run_chunk.py data/document.txt --config configs/chunking.yaml
"""

import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from filechunker.cli import main

if __name__ == "__main__":
    sys.exit(main())
