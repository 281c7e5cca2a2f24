try:
    import click
except ImportError as e:
    raise ImportError(
        "CLI Dependencies not installed! Install byzop with the optional [cli] dependency group"
    ) from e


from byzop.cli.native import native
from byzop.cli.read import networks, status
from byzop.cli.symbiotic import symbiotic


@click.group("byzop")
def main() -> None:
    """
    Register and manage Byzantine operators.

    Connection settings are read from BYZOP_* environment variables,
    a .env file, byzop_config.yaml or [tool.byzop.config] in pyproject.toml.
    """


main.add_command(networks)
main.add_command(status)
main.add_command(symbiotic)
main.add_command(native)
