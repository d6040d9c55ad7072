"""Overwrite confirmation and output directory preparation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.key_binding import KeyBindings

from .constants import ABORTED_MESSAGE, OVERWRITE_ACCEPT_KEYS
from .errors import ArchiveError, OverwriteDeclinedError
from .models import InvocationOptions

logger = logging.getLogger(__name__)

KeyReader = Callable[[str], str]


def ensure_output_writable(
    options: InvocationOptions,
    *,
    read_key: KeyReader | None = None,
) -> None:
    """Confirm replacing an existing archive and create the output's parent.

    Raises OverwriteDeclinedError unless --force was given or the user
    answered y/Y.
    """
    output_path_abs = options.output_path_abs
    if output_path_abs.is_dir():
        raise ArchiveError(f"Output path is a directory: {output_path_abs}")

    if output_path_abs.exists():
        if options.force:
            logger.debug("Replacing existing archive (--force): %s", output_path_abs)
        else:
            reader = read_key if read_key is not None else read_single_key
            key = reader(f"File {output_path_abs} already exists. Overwrite? (y/N): ")
            if key not in OVERWRITE_ACCEPT_KEYS:
                print(ABORTED_MESSAGE)
                raise OverwriteDeclinedError(ABORTED_MESSAGE)

    try:
        output_path_abs.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ArchiveError(
            f"Failed to create output directory: {output_path_abs.parent}"
        ) from exc


def build_single_key_bindings() -> KeyBindings:
    """Key bindings that finish the prompt on the first key pressed."""
    key_bindings = KeyBindings()

    @key_bindings.add("<any>", eager=True)
    def _accept_any_key(event) -> None:
        event.app.exit(result=event.data)

    return key_bindings


def read_single_key(message: str) -> str:
    """Show ``message`` and return the first key typed, or "" on no input."""
    session: PromptSession[str] = PromptSession(key_bindings=build_single_key_bindings())
    try:
        key = session.prompt(message)
    except (EOFError, KeyboardInterrupt):
        return ""
    return key or ""
