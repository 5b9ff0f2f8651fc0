import asyncio

import click

from config.settings import settings
from constants.constants import MSG_FAILURE
from ingestion.etherscan.etherscan_client import EtherscanClient
from standards.exceptions import ContractStandardError
from standards.models.classification_result import ClassificationResult
from standards.models.token_standard import StandardCatalog
from standards.service.contract_standard_service import ContractStandardService
from standards.service.standard_catalog_service import StandardCatalogService
from utils.formatter_utils import format_classification_result
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Check Contract Standard CLI")


async def _check_address(address: str, catalog: StandardCatalog) -> ClassificationResult:
    async with EtherscanClient(settings.etherscan, app_name=settings.app.name) as client:
        service = ContractStandardService(catalog, etherscan_client=client)
        return await service.check_address(address)


@click.command()
@click.option(
    "-a",
    "--address",
    default=settings.etherscan.default_contract_address,
    show_default=True,
    type=str,
    help="Contract address to check.",
)
@click.option(
    "--abi-dir",
    default=settings.standards.abi_dir,
    type=click.Path(file_okay=False),
    help="Directory with erc20/erc721/erc1155 .abi.json definitions. Built-in definitions if omitted.",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
@click.option("--log-level", default=settings.app.log_level, show_default=True, type=str, help="Logging level.")
@click.pass_context
def check_contract_standard(ctx, address: str, abi_dir: str, log_file: str, log_level: str):
    """
    Fetches a contract ABI from Etherscan and reports which token standard
    (ERC-20, ERC-721, ERC-1155) it complies with.
    """
    configure_logging(log_file, log_level)
    logger.info(f"Checking token standard of {address}...")

    try:
        catalog = StandardCatalogService.load_catalog(abi_dir)
        result = asyncio.run(_check_address(address, catalog))
    except KeyboardInterrupt:
        logger.info("Check interrupted by user.")
        ctx.exit(130)
    except ContractStandardError as e:
        logger.error(f"Check failed for {address}: {e}")
        click.echo(MSG_FAILURE.format(reason=e), err=True)
        ctx.exit(1)

    click.echo(format_classification_result(result, catalog.names))


if __name__ == "__main__":
    check_contract_standard()
