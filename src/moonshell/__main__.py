"""Allow ``python -m moonshell``."""

from moonshell.frontends.cli.main import main

if __name__ == "__main__":
    main()
