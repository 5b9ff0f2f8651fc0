import click

from config.settings import settings
from constants.constants import MSG_FAILURE
from standards.exceptions import ContractStandardError
from standards.mappers.abi_surface_mapper import AbiSurfaceMapper
from standards.service.contract_standard_service import ContractStandardService
from standards.service.standard_catalog_service import StandardCatalogService
from utils.file_utils import read_bytes
from utils.formatter_utils import format_classification_result
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Check ABI File Standard CLI")


@click.command()
@click.option(
    "-i",
    "--input",
    "input_file",
    required=True,
    type=str,
    help="ABI JSON file to check, or '-' to read it from stdin.",
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
def check_abi_file_standard(ctx, input_file: str, abi_dir: str, log_file: str, log_level: str):
    """
    Reports which token standard a local ABI JSON document complies with.
    No network access is needed.
    """
    configure_logging(log_file, log_level)

    try:
        catalog = StandardCatalogService.load_catalog(abi_dir)
        try:
            raw_abi = read_bytes(input_file)
        except OSError as e:
            raise click.FileError(input_file, hint=str(e)) from e
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="'-i' / '--input'") from e

        entries = AbiSurfaceMapper.json_to_abi_entries(raw_abi)
        result = ContractStandardService(catalog).check_abi(entries)
    except ContractStandardError as e:
        logger.error(f"Check failed for {input_file}: {e}")
        click.echo(MSG_FAILURE.format(reason=e), err=True)
        ctx.exit(1)

    click.echo(format_classification_result(result, catalog.names))


if __name__ == "__main__":
    check_abi_file_standard()
