"""
Root conftest.py for repokit.

Makes the package importable from a source checkout and loads the repokit
pytest plugin for every test.
"""

import sys
from pathlib import Path

root_dir = Path(__file__).parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

pytest_plugins = ["repokit.pytest_plugin"]
