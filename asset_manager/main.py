from pathlib import Path

import click
import structlog
import waitress

from asset_manager import __version__
from asset_manager.exceptions.config import ConfigurationError
from asset_manager.utils.configuration import AssetManagerConfig
from asset_manager.utils.logs import configure_logging

log = structlog.get_logger(__name__)


@click.group(context_settings={"max_content_width": 120})
@click.version_option(__version__)
def main():
    pass


@main.command(name="serve")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with the algod, kmd and wallet settings.",
)
@click.option("--host", default=None, help="Overrides 'service.host' of the config file.")
@click.option("--port", default=None, type=int, help="Overrides 'service.port' of the config file.")
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the log to this file instead of stderr.",
)
@click.option("--debug", is_flag=True, default=False, help="Log debug events.")
def serve(config_path, host, port, log_file, debug):
    """Run the asset service."""
    from asset_manager.services.assets import construct_asset_service

    configure_logging(log_file, debug=debug)
    try:
        config = AssetManagerConfig.from_file(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    host, port = host or config.service_host, port or config.service_port

    app = construct_asset_service(config)
    log.info("Starting asset service", version=__version__, host=host, port=port)
    waitress.serve(app, host=host, port=port)
