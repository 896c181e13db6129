"""User-facing frontends for moonshell."""
