import os
import sys

import pytest

# Allow running the suite from a plain checkout without installing the package
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from huffman_core import HuffmanLogic  # noqa: E402
from huffman_service import HuffmanService  # noqa: E402


@pytest.fixture
def logic():
	return HuffmanLogic()


@pytest.fixture
def service():
	return HuffmanService()

