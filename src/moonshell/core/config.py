"""Session configuration.

Values resolve with priority: argument > environment > default.

Environment Variables:
    MOONSHELL_PROMPT: Primary prompt (default "> ")
    MOONSHELL_PROMPT2: Continuation prompt (default ">> ")
    MOONSHELL_HISTORY_FILE: History file path; empty disables persistence
    MOONSHELL_NO_BANNER: Set to 1 to skip the version banner
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PRIMARY_PROMPT = "> "
CONTINUATION_PROMPT = ">> "
DEFAULT_HISTORY_FILE = str(Path.home() / ".moonshell_history")
MAX_HISTORY_FILE_BYTES = 1_000_000


@dataclass(frozen=True)
class ReplConfig:
    """Interactive session configuration.

    Attributes:
        primary_prompt: Prompt shown when the buffer is empty.
        continuation_prompt: Prompt shown while a statement is incomplete.
        history_file: Persistent history path. None keeps history in memory.
        max_history_file_bytes: History files larger than this are not loaded.
        show_banner: Print the runtime version when a session starts.
    """

    primary_prompt: str = PRIMARY_PROMPT
    continuation_prompt: str = CONTINUATION_PROMPT
    history_file: str | None = None
    max_history_file_bytes: int = MAX_HISTORY_FILE_BYTES
    show_banner: bool = True

    def prompt_for(self, continuing: bool) -> str:
        """Continuation prompt while a statement is open, primary otherwise."""
        return self.continuation_prompt if continuing else self.primary_prompt

    @classmethod
    def from_env(
        cls,
        primary_prompt: str | None = None,
        continuation_prompt: str | None = None,
        history_file: str | None = None,
    ) -> ReplConfig:
        """Build a config from arguments, then environment, then defaults."""
        if history_file is None:
            history_file = os.environ.get("MOONSHELL_HISTORY_FILE", DEFAULT_HISTORY_FILE)

        return cls(
            primary_prompt=_resolve(primary_prompt, "MOONSHELL_PROMPT", PRIMARY_PROMPT),
            continuation_prompt=_resolve(
                continuation_prompt, "MOONSHELL_PROMPT2", CONTINUATION_PROMPT
            ),
            history_file=os.path.expanduser(history_file) if history_file else None,
            show_banner=os.environ.get("MOONSHELL_NO_BANNER", "").strip() != "1",
        )


def _resolve(arg: str | None, env_key: str, default: str) -> str:
    if arg is not None:
        return arg
    env_val = os.environ.get(env_key)
    if env_val:
        return env_val
    return default
