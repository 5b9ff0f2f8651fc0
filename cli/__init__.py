import click


from cli.check_contract_standard import check_contract_standard
from cli.check_abi_file_standard import check_abi_file_standard


@click.group()
@click.version_option(version="1.0.0")
@click.pass_context
def cli(ctx):
    pass


# Deployed contract (ABI fetched from Etherscan)
cli.add_command(check_contract_standard, "check_contract_standard")

# Local ABI JSON file or stdin
cli.add_command(check_abi_file_standard, "check_abi_file_standard")
