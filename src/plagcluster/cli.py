"""CLI entry point for plagcluster."""

import logging
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DEFAULT_CONFIG, load_config, settings_from_config

console = Console()

SEVERITY_STYLES = {"high": "bold red", "medium": "yellow", "low": "green"}


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """plagcluster - find near-duplicate assignments and group them into clusters."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _get_config(ctx) -> dict:
    return load_config(ctx.obj.get("config_path"))


def _get_settings(ctx, **overrides):
    """Load config and apply command-line overrides; exits on bad config."""
    try:
        cfg = _get_config(ctx)
        if overrides.get("threshold") is not None:
            cfg["clustering"]["threshold"] = overrides["threshold"]
        if overrides.get("edge_threshold") is not None:
            cfg["visualization"]["edge_threshold"] = overrides["edge_threshold"]
        if overrides.get("normalize") is not None:
            cfg["ingest"]["normalize"] = overrides["normalize"]
        return settings_from_config(cfg)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/]")
        ctx.exit(1)


@cli.command()
@click.option("--path", default=".", help="Directory to write config.yaml into")
def init(path):
    """Write a default config.yaml."""
    config_file = Path(path).expanduser().resolve() / "config.yaml"
    if config_file.exists():
        console.print(f"[yellow]Config already exists: {config_file}[/]")
        return

    config_file.parent.mkdir(parents=True, exist_ok=True)
    header = (
        "# plagcluster configuration\n"
        "# clustering.threshold: minimum pair similarity (%) that links two documents\n"
        "# visualization.edge_threshold: minimum similarity (%) for drawn edges\n\n"
    )
    config_file.write_text(header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False))
    console.print(f"[green]✓ Created config: {config_file}[/]")


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("--threshold", "-t", type=float, default=None, help="Clustering threshold (%)")
@click.option("--edge-threshold", type=float, default=None, help="Graph edge threshold (%)")
@click.option("--normalize/--no-normalize", default=None, help="Normalize text before comparing")
@click.option("--json", "json_path", type=click.Path(path_type=Path), default=None, help="Write full results as JSON")
@click.option("--sync", is_flag=True, help="Run in the calling thread instead of a worker")
@click.option("--top", "-n", default=10, help="Number of pairs to show")
@click.pass_context
def analyze(ctx, paths, threshold, edge_threshold, normalize, json_path, sync, top):
    """Compare every pair of documents and report clusters."""
    from .ingest.loader import load_documents
    from .pipeline import run_analysis
    from .report import rank_similarities, severity, write_json

    settings = _get_settings(ctx, threshold=threshold, edge_threshold=edge_threshold, normalize=normalize)

    try:
        docs = load_documents(paths, settings)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        ctx.exit(1)

    if len(docs) < 2:
        console.print("[yellow]Need at least two supported documents to compare.[/]")
        return

    console.print(f"[blue]Analyzing {len(docs)} document(s)...[/]")
    try:
        result = run_analysis(docs, settings, background=not sync)
    except ValueError as e:
        console.print(f"[red]✗ Analysis failed: {e}[/]")
        ctx.exit(1)

    names = {d.id: d.name for d in docs}

    if result.clusters:
        console.print(f"[green]✓ Found {len(result.clusters)} cluster(s) at {settings.cluster_threshold:g}%[/]")
        for c in result.clusters:
            members = ", ".join(escape(names[d]) for d in sorted(c.documents, key=names.get))
            console.print(f"  Cluster {c.id}: {members} (avg {c.avg_similarity:.1f}%)")
    else:
        console.print(f"[green]✓ No clusters at {settings.cluster_threshold:g}%[/]")

    table = Table(title="Most Similar Pairs")
    table.add_column("#", style="dim", width=3)
    table.add_column("Document A", style="cyan")
    table.add_column("Document B", style="cyan")
    table.add_column("Similarity", justify="right")
    table.add_column("Composite", justify="right", style="dim")
    table.add_column("Shared", justify="right", style="dim")

    for i, s in enumerate(rank_similarities(result.similarities)[:top], 1):
        style = SEVERITY_STYLES[severity(s.similarity, settings)]
        table.add_row(
            str(i),
            escape(s.doc1_name),
            escape(s.doc2_name),
            f"[{style}]{s.similarity:.1f}%[/]",
            f"{s.composite_score:.1f}%",
            str(s.raw_match_count),
        )
    console.print(table)

    if json_path:
        out = write_json(result, json_path)
        console.print(f"  → {out}")


@cli.command()
@click.argument("first", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("second", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def compare(ctx, first, second):
    """Show the full score breakdown for two documents."""
    from .ingest.loader import load_file
    from .report import severity
    from .similarity.engine import compute_all_similarities, compute_similarity

    settings = _get_settings(ctx)
    docs = [load_file(p, normalize_text=settings.normalize) for p in (first, second)]
    if any(d is None for d in docs):
        console.print("[red]Unsupported file type.[/]")
        ctx.exit(1)

    [result] = compute_all_similarities(docs, settings)
    standalone = compute_similarity(docs[0].content, docs[1].content, settings)

    console.print(f"[bold]{escape(result.doc1_name)}[/] ↔ [bold]{escape(result.doc2_name)}[/]")
    style = SEVERITY_STYLES[severity(result.similarity, settings)]
    console.print(f"  Similarity:      [{style}]{result.similarity:.1f}%[/]")
    console.print(f"  Shared shingles: {result.raw_match_count} (avg words {result.avg_words})")
    console.print(f"  Composite:       {result.composite_score:.1f}%")
    console.print(f"  Full composite:  {standalone * 100:.1f}%")
    for excerpt in result.matched_sections:
        console.print(f"  [dim]Matched: {escape(excerpt)}[/]")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("pattern")
@click.option("--raw", is_flag=True, help="Search the extracted text without normalizing it")
@click.option("--context", default=30, help="Characters of context to show around matches")
def search(file, pattern, raw, context):
    """Find every occurrence of PATTERN in a document."""
    from .ingest.loader import load_file
    from .ingest.normalizer import normalize
    from .similarity.primitives import rabin_karp_search

    doc = load_file(file, normalize_text=not raw)
    if doc is None:
        console.print("[red]Unsupported file type.[/]")
        return

    needle = pattern if raw else normalize(pattern)
    if not needle:
        console.print("[yellow]Pattern is empty after normalization; try --raw.[/]")
        return

    offsets = rabin_karp_search(doc.content, needle)
    if not offsets:
        console.print(f"[yellow]No matches for '{needle}'.[/]")
        return

    console.print(f"[green]✓ {len(offsets)} match(es) for '{needle}'[/]")
    for off in offsets:
        start = max(0, off - context)
        end = off + len(needle) + context
        snippet = doc.content[start:end].replace("\n", " ")
        console.print(f"  {off:>6}  …{escape(snippet)}…")


if __name__ == "__main__":
    cli()
