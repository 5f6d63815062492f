import json
import logging
from pathlib import Path
from typing import Any

import click
import jinja2

from . import __version__
from .cli_utils import reconstruct_command_line
from .code_buffer import CodeBuffer
from .config import TypeGeneratorConfig
from .errors import TypeGenerationError
from .generator import TypeGenerator

CURRENT_DIR = Path(__file__).parent.resolve().absolute()

logger = logging.getLogger(__name__)


def load_prefix_template() -> jinja2.Template:
    jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
    with open(CURRENT_DIR / "templates/typescript/prefix.ts.jinja2", encoding="utf-8") as f:
        return jinja_env.from_string(f.read())


def generate(schema: dict[str, Any], config: TypeGeneratorConfig, command_line: str = "json_schema_to_ts") -> str:
    """
    Generate TypeScript declarations for the definitions of a schema document.

    Args:
        schema: Parsed JSON schema document; types are read from its "definitions"
        config: Generator configuration
        command_line: Command line written in the generation comment

    Returns:
        TypeScript source code
    """
    definitions = schema.get("definitions") or {}
    generator = TypeGenerator(definitions, config.exclude)

    for from_name, to_name in config.aliases.items():
        generator.add_alias(from_name, to_name)

    if config.emit_types:
        names = list(config.emit_types)
    else:
        # Every definition, except the ones excluded on purpose
        names = [name for name in generator.registry if not generator.is_excluded(name)]

    for name in names:
        type_name = TypeGenerator.normalize_type_name(name.split(".")[-1])
        logger.debug("emitting %s as %s", name, type_name)
        generator.emit_type(type_name, generator.registry.get(name), name)

    code = CodeBuffer(config.indent)
    if config.add_generation_comment:
        prefix = load_prefix_template().render(
            version=__version__,
            command_line=command_line,
            excluded=config.exclude,
        )
        for line in prefix.splitlines():
            code.line(line)
        code.line()

    generator.render_to_code(code)
    return code.render()


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--exclude", "-x", multiple=True, help="Regular expression of type FQNs not to generate")
@click.option("--type", "-t", "types", multiple=True, help="Definition to generate (default: all)")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution details")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", type=click.Path(resolve_path=True))
def json_schema_to_ts(config, exclude, types, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            config = TypeGeneratorConfig.from_dict(json.load(f))
    else:
        config = TypeGeneratorConfig()

    # CLI options extend the config file
    config.exclude = [*config.exclude, *exclude]
    if types:
        config.emit_types = list(types)

    try:
        out = generate(schema, config, reconstruct_command_line(json_schema_to_ts))
    except TypeGenerationError as e:
        raise click.ClickException(str(e)) from e

    with open(output, "w") as f:
        f.write(out)
