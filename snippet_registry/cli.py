"""Command-line interface for the template registry."""
import sys
from typing import Optional, Tuple

import click
import yaml

from .core.config import settings, RenderPolicy
from .core.exceptions import SnippetRegistryError, ValidationError
from .services import TemplateRegistry, build_registry
from .utils.logging import LoggerSetup
from .utils.validators import BindingValidator


def _fail(exc: SnippetRegistryError) -> None:
    """Report an error on stderr and exit with status 1."""
    click.echo(f"Error: {exc.message}", err=True)
    sys.exit(1)


def _get_registry(ctx: click.Context) -> TemplateRegistry:
    options = ctx.obj
    try:
        return build_registry(
            settings,
            catalog_path=options["catalog"],
            policy=options["policy"],
            include_builtin=options["include_builtin"],
        )
    except SnippetRegistryError as e:
        _fail(e)


@click.group()
@click.option(
    "--catalog", "catalog",
    type=click.Path(dir_okay=False),
    help="Extra YAML catalog to load after the built-in one",
)
@click.option(
    "--policy",
    type=click.Choice(RenderPolicy.ALL),
    help="What to do with placeholders that have no binding",
)
@click.option(
    "--no-builtin", "no_builtin",
    is_flag=True,
    help="Do not load the built-in JUnit 5 catalog",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging",
)
@click.pass_context
def main(
    ctx: click.Context,
    catalog: Optional[str],
    policy: Optional[str],
    no_builtin: bool,
    verbose: bool,
) -> None:
    """Look up and render JUnit 5 BDD code templates."""
    # stdout carries rendered text only
    LoggerSetup.setup_logging(level="DEBUG" if verbose else "WARNING", stream=sys.stderr)

    ctx.ensure_object(dict)
    ctx.obj.update({
        "catalog": catalog,
        "policy": policy,
        "include_builtin": False if no_builtin else None,
    })


@main.command("list")
@click.pass_context
def list_templates(ctx: click.Context) -> None:
    """List template names and descriptions."""
    registry = _get_registry(ctx)
    for template in registry:
        click.echo(f"{template.name}\t{template.description or ''}")


@main.command("show")
@click.argument("name")
@click.pass_context
def show_template(ctx: click.Context, name: str) -> None:
    """Show a template's description, placeholders and body."""
    registry = _get_registry(ctx)
    try:
        template = registry.get(name)
    except SnippetRegistryError as e:
        _fail(e)

    click.echo(f"Name: {template.name}")
    if template.description:
        click.echo(f"Description: {template.description}")
    click.echo(f"Placeholders: {', '.join(template.placeholders) or '(none)'}")
    click.echo("")
    click.echo(template.body, nl=not template.body.endswith("\n"))


@main.command("render")
@click.argument("name")
@click.argument("bindings", nargs=-1)
@click.option(
    "--bindings-file", "bindings_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML mapping of placeholder values; key=value arguments take precedence",
)
@click.pass_context
def render_template(
    ctx: click.Context,
    name: str,
    bindings: Tuple[str, ...],
    bindings_file: Optional[str],
) -> None:
    """Render template NAME with key=value bindings."""
    registry = _get_registry(ctx)

    try:
        values = {}
        if bindings_file:
            values.update(_read_bindings_file(bindings_file))
        values.update(BindingValidator.parse_pairs(bindings))

        text = registry.render(name, values)
    except SnippetRegistryError as e:
        _fail(e)

    click.echo(text, nl=not text.endswith("\n"))


def _read_bindings_file(path: str) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            # BaseLoader keeps every scalar as the text the user wrote
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except (OSError, yaml.YAMLError) as e:
        raise ValidationError(f"Cannot read bindings file {path}: {e}", {"path": path})
    return BindingValidator.validate_mapping(data)


if __name__ == "__main__":
    main()
