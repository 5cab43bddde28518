# Copyright 2026 BadCompany
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Overwrite protection for key files."""

import logging
import os
from typing import Callable, Union

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from .exceptions import AbortedError

_logger = logging.getLogger("keysmith.guard")

# Prompts go to stderr so stdout stays machine readable
_console = Console(stderr=True, highlight=False)

ConfirmFn = Callable[[str], bool]


def prompt_yes(question: str) -> bool:
    """Ask a yes/no question on the terminal. EOF counts as 'no'.

    ``question`` is plain text; brackets in file paths are not rich markup.
    """
    try:
        return Confirm.ask(escape(question), console=_console, default=False)
    except EOFError:
        return False


def ensure_writable(
    path: Union[str, os.PathLike],
    force: bool,
    confirm: ConfirmFn = prompt_yes,
) -> None:
    """
    Make sure ``path`` may be written.

    Args:
        path: Target file.
        force: Overwrite without asking (``--assume-yes``).
        confirm: Yes/no prompt, only consulted when the file exists and
            ``force`` is False.

    Raises:
        AbortedError: If the user declines to overwrite the existing file.
    """
    if not os.path.exists(path):
        return
    if force:
        _logger.debug(f"Overwriting {path} (assume yes)")
        return
    question = f"{os.fspath(path)!r} already exists, are you sure you want to overwrite it?"
    if not confirm(question):
        _logger.info(f"User declined to overwrite {path}")
        raise AbortedError()
