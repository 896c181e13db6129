"""Command line frontend for moonshell."""
