"""Allow running as: python -m qfd_engine"""

from qfd_engine.main import cli

if __name__ == "__main__":
    cli()
