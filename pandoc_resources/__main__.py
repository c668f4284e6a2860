"""Entry point for running pandoc-resources as a module.

This allows the package to be executed as:
    python -m pandoc_resources
"""

from pandoc_resources.cli.main import main

if __name__ == "__main__":
    main()
