import os
import sys
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

# Add src/ to path so the tests run without an install
repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(repo_root, "src"))


@pytest.fixture
def decline() -> MagicMock:
    """A confirm callback that always answers 'no'."""
    return MagicMock(return_value=False)


@pytest.fixture
def accept() -> MagicMock:
    """A confirm callback that always answers 'yes'."""
    return MagicMock(return_value=True)


@pytest.fixture
def no_terminal_prompt() -> Generator[MagicMock, None, None]:
    """Fails the test if the real terminal prompt is reached."""
    with patch(
        "keysmith.guard.Confirm.ask",
        side_effect=AssertionError("unexpected prompt"),
    ) as ask:
        yield ask
