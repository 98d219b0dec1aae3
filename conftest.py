# Ensure project root is on sys.path so 'ircsupport' is importable when running
# pytest from environments that don't automatically include it.
import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo LoggerConfigurator changes so handlers never outlive a test's streams."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
