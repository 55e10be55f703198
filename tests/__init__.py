"""Test package initialisation.

The ``shacl_form`` package lives one directory above this package.  Append the
repository root to ``sys.path`` so the tests import it without an editable
install.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
