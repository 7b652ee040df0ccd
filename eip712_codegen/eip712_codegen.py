import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import AtomicWriter, CodeGenerationError, CodeGeneratorConfig, NamingMode, OutputMode, PipelineGenerator

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log generation progress")
def eip712_codegen(verbose):
    """Generate Solidity EIP-712 helpers and documentation from a type configuration."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


@eip712_codegen.command()
@click.option("--docs-dir", "-d", default=None, type=click.Path(file_okay=False, resolve_path=True), help="Write documentation pages here")
@click.option(
    "--naming-mode",
    "-m",
    default=None,
    type=click.Choice([mode.value for mode in NamingMode]),
    help="Override the accessor naming mode of the config file",
)
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite an existing output file")
@click.argument("config", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def generate(docs_dir, naming_mode, force, config, output):
    """Generate the Solidity bundle for CONFIG and write it to OUTPUT."""
    config_path = config
    try:
        with open(config_path) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    except (OSError, ValueError, TypeError) as e:
        raise click.ClickException(f"Invalid configuration {Path(config_path).name}: {e}") from e

    # CLI flags override the config file
    if naming_mode is not None:
        config.naming_mode = NamingMode(naming_mode)
    if force:
        config.output.mode = OutputMode.FORCE

    codegen = PipelineGenerator(config, generation_command=reconstruct_command_line(generate))

    try:
        out = codegen.run()
        AtomicWriter().write_output(
            Path(output),
            out.source,
            config.output,
            documentation=out.documentation,
            docs_dir=Path(docs_dir) if docs_dir else None,
        )
    except (CodeGenerationError, OSError) as e:
        raise click.ClickException(str(e)) from e

    logger.info("Generated %s (%d documentation pages)", output, len(out.documentation))
