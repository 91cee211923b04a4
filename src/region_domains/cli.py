"""CLI entry point for inspecting stored domains."""

from __future__ import annotations

import json

import click

from .core.config import load_settings
from .core.errors import DomainError
from .observability.logger import bind_region, get_logger, setup_logging

log = get_logger(__name__)


@click.group()
@click.option("--config", default=None, help="TOML config file path")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """Region access domains."""
    try:
        settings = load_settings(config_path=config)
    except DomainError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(settings.observability)
    ctx.obj = settings


@main.command()
@click.argument("store_path", type=click.Path(dir_okay=False))
@click.argument("key")
@click.option("--profiles", default=None, type=click.Path(exists=True, dir_okay=False),
              help="JSON file mapping uuid -> last known name")
@click.option("--json", "as_json", is_flag=True, help="Print the rich text component as JSON")
@click.pass_obj
def show(settings, store_path: str, key: str, profiles: str | None, as_json: bool) -> None:
    """Print the players and groups of a stored domain."""
    from .profile.cache import MemoryProfileCache
    from .storage.domain_store import DomainStore

    bind_region(key)
    try:
        store = DomainStore(store_path)
        cache = MemoryProfileCache.from_json_file(profiles) if profiles else None
    except DomainError as exc:
        log.error("show_failed", store=store_path, error=str(exc))
        raise click.ClickException(str(exc)) from exc

    domain = store.load(key)
    if domain is None:
        raise click.ClickException(f"No domain stored under {key!r}")
    log.debug("domain_loaded", entries=domain.size(), resolved=cache is not None)

    if as_json:
        component = domain.to_user_friendly_component(cache, style=settings.formatting)
        click.echo(json.dumps(component.to_json(), indent=2))
    else:
        click.echo(domain.to_user_friendly_string(cache))


@main.command()
@click.argument("store_path", type=click.Path(dir_okay=False))
@click.argument("target")
@click.argument("source")
def merge(store_path: str, target: str, source: str) -> None:
    """Add every member of SOURCE to TARGET and save TARGET."""
    from .domains.combined import CombinedDomain
    from .storage.domain_store import DomainStore

    bind_region(target)
    try:
        store = DomainStore(store_path)
        source_domain = store.load(source)
        if source_domain is None:
            raise click.ClickException(f"No domain stored under {source!r}")
        target_domain = store.load(target) or CombinedDomain()

        target_domain.add_all(source_domain)
        saved = store.save(target, target_domain)
    except DomainError as exc:
        log.error("merge_failed", store=store_path, source=source, error=str(exc))
        raise click.ClickException(str(exc)) from exc

    log.info("domain_merged", source=source, entries=target_domain.size(), saved=saved)
    if saved:
        click.echo(f"{target}: {target_domain.size()} entries")
    else:
        click.echo(f"{target}: unchanged")


if __name__ == "__main__":
    main()
