"""CLI entry point for nlptools."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import DEFAULT_CONFIG, dump_config, load_config

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """nlptools - language detection, similarity, clustering and topics for text files."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _get_config(ctx) -> dict:
    return load_config(ctx.obj.get("config_path"))


def _get_analyzer(ctx):
    from .analyzer import TextAnalyzer
    return TextAnalyzer(_get_config(ctx))


def _load(paths) -> list:
    from .ingest import load_documents

    docs = load_documents(list(paths))
    if not docs:
        console.print("[yellow]No supported files found.[/]")
    return docs


@cli.command()
@click.option("--path", default=None, help="Where to write the config file")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(path, force):
    """Write a config file with the default settings."""
    config_file = Path(path).expanduser() if path else Path.home() / ".nlptools" / "config.yaml"
    if config_file.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_file}[/]")
        return

    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(dump_config(DEFAULT_CONFIG))
    console.print(f"[bold green]✓ Created config: {config_file}[/]")


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--context", "context_language", default=None, help="Language to prefer when scores are close")
@click.pass_context
def detect(ctx, paths, context_language):
    """Detect the language of each document."""
    analyzer = _get_analyzer(ctx)
    docs = _load(paths)
    if not docs:
        return

    languages = analyzer.profiler.profiles.keys()
    table = Table(title="Language Detection")
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="cyan")
    table.add_column("Language", style="green")
    for lang in languages:
        table.add_column(lang, justify="right")
    table.add_column("Note", style="dim")

    for doc in docs:
        guess = analyzer.detect(doc.text, context_language)
        scores = [f"{guess.scores[lang]:.0f}" if lang in guess.scores else "-" for lang in languages]
        note = guess.reason if guess.fallback else ""
        table.add_row(str(doc.id), doc.title, guess.language, *scores, note)

    console.print(table)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--language", "-l", default=None, help="Language code (detected when omitted)")
@click.pass_context
def similarity(ctx, paths, language):
    """Show pairwise cosine similarity between documents."""
    analyzer = _get_analyzer(ctx)
    docs = _load(paths)
    if not docs:
        return

    matrix = analyzer.similarity_matrix([d.text for d in docs], language)
    table = Table(title="Similarity")
    table.add_column("", style="cyan")
    for doc in docs:
        table.add_column(str(doc.id), justify="right")
    for doc, row in zip(docs, matrix):
        table.add_row(f"{doc.id} {doc.title}", *(f"{v:.3f}" for v in row))

    console.print(table)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--method", type=click.Choice(["kmeans", "hierarchical", "threshold"]), default="kmeans")
@click.option("-k", "k", default=2, show_default=True, help="Number of clusters (kmeans)")
@click.option("--threshold", type=float, default=None, help="Distance (hierarchical) or similarity (threshold) cutoff")
@click.option("--seed", type=int, default=None, help="Random seed (kmeans)")
@click.option("--language", "-l", default=None, help="Language code (detected when omitted)")
@click.pass_context
def cluster(ctx, paths, method, k, threshold, seed, language):
    """Group similar documents."""
    analyzer = _get_analyzer(ctx)
    docs = _load(paths)
    if not docs:
        return
    texts = [d.text for d in docs]

    if method == "kmeans":
        result = analyzer.kmeans(texts, k, language=language, seed=seed)
        if not result.clusters:
            console.print(f"[yellow]Cannot form {k} cluster(s) from {len(docs)} document(s).[/]")
            return
        status = "converged" if result.converged else "hit iteration cap"
        console.print(f"[blue]K-means {status} after {result.iterations} iteration(s)[/]")
        groups = [(c.cluster_id, c.document_ids, c.coherence) for c in result.clusters]
    elif method == "hierarchical":
        nodes = analyzer.hierarchical(texts, threshold, language=language)
        groups = [(n.node_id, list(n.document_ids), n.distance) for n in nodes]
    else:
        clusters = analyzer.similarity_groups(texts, threshold, language=language)
        groups = [(c.cluster_id, c.document_ids, c.coherence) for c in clusters]

    table = Table(title=f"Clusters ({method})")
    table.add_column("Cluster", style="dim")
    table.add_column("Size", justify="right")
    table.add_column("Merge distance" if method == "hierarchical" else "Coherence", justify="right", style="green")
    table.add_column("Documents", style="cyan")
    for cluster_id, ids, value in groups:
        titles = ", ".join(docs[i].title for i in ids)
        table.add_row(str(cluster_id), str(len(ids)), f"{value:.3f}", titles)

    console.print(table)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--topics", "num_topics", type=int, default=None, help="Number of topics")
@click.option("--terms", "num_terms", type=int, default=None, help="Terms per topic")
@click.option("--seed", type=int, default=None, help="Random seed")
@click.option("--language", "-l", default=None, help="Language code (detected when omitted)")
@click.pass_context
def topics(ctx, paths, num_topics, num_terms, seed, language):
    """Discover topics across documents."""
    analyzer = _get_analyzer(ctx)
    docs = _load(paths)
    if not docs:
        return

    found = analyzer.topics(
        [d.text for d in docs], num_topics=num_topics, num_terms=num_terms,
        language=language, seed=seed,
    )
    if not found:
        console.print("[yellow]No topics found.[/]")
        return

    table = Table(title="Topics")
    table.add_column("Topic", style="cyan")
    table.add_column("Docs", justify="right")
    table.add_column("Coherence", justify="right", style="green")
    table.add_column("Terms")
    for topic in found:
        terms = ", ".join(term for term, _ in topic.terms)
        table.add_row(topic.topic_id, str(len(topic.document_ids)), f"{topic.coherence:.3f}", terms)

    console.print(table)


@cli.command()
@click.argument("path")
@click.option("-n", "num_phrases", type=int, default=None, help="Number of phrases")
@click.option("--language", "-l", default=None, help="Language code (detected when omitted)")
@click.pass_context
def keyphrases(ctx, path, num_phrases, language):
    """Extract key phrases from a single document."""
    analyzer = _get_analyzer(ctx)
    docs = _load([path])
    if not docs:
        return

    phrases = analyzer.key_phrases(docs[0].text, num_phrases, language=language)
    if not phrases:
        console.print("[yellow]No key phrases found.[/]")
        return

    table = Table(title=f"Key Phrases: {docs[0].title}")
    table.add_column("#", style="dim", width=3)
    table.add_column("Phrase", style="cyan")
    table.add_column("Score", justify="right", style="green")
    for i, (phrase, score) in enumerate(phrases, 1):
        table.add_row(str(i), phrase, f"{score:.2f}")

    console.print(table)


if __name__ == "__main__":
    cli()
