"""CLI entry point."""

from __future__ import annotations


def main() -> None:
    """Main entry point for the CLI."""
    _run_cli()


def _run_cli() -> None:
    """CLI definition and runner."""
    cli = build_cli()
    cli()


def build_cli():
    """Build the ``moonshell`` command."""
    import rich_click as click

    click.rich_click.USE_RICH_MARKUP = True
    click.rich_click.USE_MARKDOWN = True
    click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
    click.rich_click.ERRORS_SUGGESTION = "Try running '--help' for more information."
    click.rich_click.ERRORS_EPILOGUE = ""
    click.rich_click.MAX_WIDTH = 100

    @click.command(context_settings={"help_option_names": ["-h", "--help"]})
    @click.option("-v", "version", is_flag=True, help="Show version information")
    @click.option("-s", "script", metavar="PATH", default=None, help="Execute a script file")
    @click.option("-e", "execute", metavar="TEXT", default=None, help="Execute string")
    @click.option(
        "-i",
        "interactive",
        metavar="TEXT",
        default=None,
        help="Execute string, then enter interactive mode",
    )
    def moonshell(
        version: bool,
        script: str | None,
        execute: str | None,
        interactive: str | None,
    ):
        """Interactive front-end for an embedded Lua runtime.

        With no options, starts an interactive session. Statements that are
        not finished yet continue on the next line under the `>>` prompt.

        **Examples:**

            moonshell                       # Interactive session

            moonshell -v                    # Print the Lua version

            moonshell -s script.lua         # Run a file

            moonshell -e "print(1 + 1)"     # Run a string

            moonshell -i "x = 42"           # Run a string, then go interactive
        """
        from moonshell.core.config import ReplConfig
        from moonshell.core.errors import MoonshellError
        from moonshell.core.logging_config import configure_logging
        from moonshell.core.runtime import LuaEvaluator
        from moonshell.frontends.cli.modes import dispatch, resolve_run_modes
        from moonshell.frontends.cli.output import error_exit
        from moonshell.frontends.cli.repl.editor import create_line_reader

        configure_logging()

        modes = resolve_run_modes(
            version=version,
            script=script,
            execute=execute,
            interactive=interactive,
        )
        try:
            dispatch(modes, LuaEvaluator(), create_line_reader, ReplConfig.from_env())
        except MoonshellError as e:
            error_exit(str(e))

    return moonshell


if __name__ == "__main__":
    main()
