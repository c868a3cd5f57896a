"""Main CLI entry point."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import click
from pydantic import BaseModel

from .. import __version__
from ..config import ConfigManager
from ..core.interfaces import IMovieLinksService
from ..infrastructure import Container, setup_logging
from ..utils import ConfigurationError, FilmLinksError, QueryParseError

Lookup = Callable[[IMovieLinksService], Awaitable[Any]]


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="film-links")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Film Links - Movie and actor cross-references from TMDb."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    # Skip configuration loading for commands that don't need it
    if ctx.invoked_subcommand == "init":
        return

    # A caller may hand in a ready container (tests do)
    if ctx.obj.get("container") is not None:
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Initialization error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("name_year")
@click.pass_context
def movie(ctx: click.Context, name_year: str) -> None:
    """Look up a movie and its cast by NAME_YEAR, e.g. "Alien (1979)"."""
    _run_lookup(ctx, lambda service: service.get_movie_by_name(name_year))


@cli.command("movie-by-id")
@click.argument("movie_id", type=int)
@click.option("--exclude-actor", type=int, help="Leave this person out of the cast")
@click.pass_context
def movie_by_id(ctx: click.Context, movie_id: int, exclude_actor: Optional[int]) -> None:
    """Look up a movie and its cast by MOVIE_ID."""
    _run_lookup(ctx, lambda service: service.get_movie(movie_id, exclude_actor))


@cli.command()
@click.argument("name_year")
@click.pass_context
def links(ctx: click.Context, name_year: str) -> None:
    """Resolve linked films for the cast of the movie named NAME_YEAR."""
    _run_lookup(ctx, lambda service: service.get_links_by_name(name_year))


@cli.command("links-by-id")
@click.argument("movie_id", type=int)
@click.pass_context
def links_by_id(ctx: click.Context, movie_id: int) -> None:
    """Resolve linked films for the cast of MOVIE_ID."""
    _run_lookup(ctx, lambda service: service.get_links(movie_id))


@cli.command("actor-links")
@click.argument("actor_id", type=int)
@click.option("--exclude-movie", type=int, default=0, help="Leave this movie out")
@click.pass_context
def actor_links(ctx: click.Context, actor_id: int, exclude_movie: int) -> None:
    """Resolve linked films for ACTOR_ID."""
    _run_lookup(ctx, lambda service: service.get_links_for_actor(actor_id, exclude_movie))


@cli.command()
@click.argument("actor_id", type=int)
@click.pass_context
def actor(ctx: click.Context, actor_id: int) -> None:
    """Look up a person by ACTOR_ID without resolving links."""
    _run_lookup(ctx, lambda service: service.get_actor(actor_id))


@cli.command()
@click.argument("search")
@click.pass_context
def suggestions(ctx: click.Context, search: str) -> None:
    """Show title suggestions for SEARCH."""
    _run_lookup(ctx, lambda service: service.get_suggestions(search))


@cli.command()
@click.argument("movie_id", type=int)
@click.pass_context
def related(ctx: click.Context, movie_id: int) -> None:
    """Discover movies sharing people with the cast of MOVIE_ID."""
    _run_lookup(ctx, lambda service: service.discover_related(movie_id))


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Please edit the configuration file with your TMDb API key.")

    except Exception as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration status."""
    container: Container = ctx.obj["container"]
    config = container.get_config()

    click.echo("Film Links Status")
    click.echo("=" * 40)
    click.echo(f"TMDb Configured: {'✓' if _has_value(config.tmdb.api_key) else '✗'}")
    click.echo(f"TMDb URL: {config.tmdb.base_url}")
    click.echo(f"Suggestion URL: {config.suggestions.base_url}")
    click.echo(f"Max Concurrency: {config.enrichment.max_concurrency}")
    click.echo(f"Privileged Jobs: {', '.join(config.enrichment.privileged_jobs)}")


def _has_value(api_key: str) -> bool:
    """Check that a key is set and is not an unexpanded ${VAR}."""
    return bool(api_key) and not api_key.startswith("${")


def _run_lookup(ctx: click.Context, lookup: Lookup) -> None:
    """Run a lookup against the container's service and print it as JSON."""
    container: Container = ctx.obj["container"]

    try:
        result = asyncio.run(_lookup(container, lookup))
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(1)
    except QueryParseError as e:
        click.echo(f"Invalid query: {e}", err=True)
        sys.exit(2)
    except FilmLinksError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(_to_json(result))


async def _lookup(container: Container, lookup: Lookup) -> Any:
    """Run a lookup and close HTTP sessions afterwards."""
    try:
        service = container.get(IMovieLinksService)  # type: ignore
        return await lookup(service)
    finally:
        await container.close()


def _to_json(result: Any) -> str:
    """Serialize a view model, or a list of them, as indented JSON."""
    if isinstance(result, BaseModel):
        return result.model_dump_json(indent=2)
    return json.dumps(
        [item.model_dump(mode="json") for item in result], indent=2, ensure_ascii=False
    )


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
