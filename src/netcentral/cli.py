from __future__ import annotations

import json
import warnings
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .centrality import MEASURES, compute_centralities, rank
from .centrality.closeness import COMPONENT_MODES
from .config import Settings
from .errors import DisconnectedGraphWarning, GraphError, NonConvergenceError
from .graph import Graph, connected_components
from .io import read_records


app = typer.Typer(add_completion=False, help="Network centrality: degree, betweenness, closeness, eigenvector.")
console = Console()


def _load_graph(nodes: Path, edges: Path, directed: bool, settings: Settings) -> Graph:
    try:
        node_rows = read_records(nodes)
        edge_rows = read_records(edges, numeric_keys=(settings.weight_key,))
    except ValueError as e:
        console.print(str(e), style="red")
        raise typer.Exit(code=2)

    try:
        return Graph.from_records(
            node_rows,
            edge_rows,
            directed=directed,
            node_key=settings.node_key,
            source_key=settings.source_key,
            target_key=settings.target_key,
            weight_key=settings.weight_key,
        )
    except KeyError as e:
        console.print(f"Missing column: {e}", style="red")
        console.print("  Fix: set NETCENTRAL_NODE_KEY / NETCENTRAL_SOURCE_KEY / NETCENTRAL_TARGET_KEY", style="yellow")
        raise typer.Exit(code=2)
    except GraphError as e:
        console.print(str(e), style="red")
        raise typer.Exit(code=2)


def _fmt(v: float | None) -> str:
    if v is None:
        return "-"
    if float(v).is_integer():
        return str(int(v))
    return f"{v:.4f}"


@app.command()
def centrality(
    nodes: Path = typer.Option(..., "--nodes", exists=True, file_okay=True, dir_okay=False, help="Node records (.json/.csv)"),
    edges: Path = typer.Option(..., "--edges", exists=True, file_okay=True, dir_okay=False, help="Edge records (.json/.csv)"),
    directed: bool = typer.Option(False, "--directed/--undirected", help="Treat edges as directed"),
    measure: list[str] = typer.Option(list(MEASURES), "--measure", "-m", help="Measure to compute (repeatable)"),
    weighted_paths: bool = typer.Option(False, "--weighted-paths", help="Use edge weights as distances for betweenness/closeness"),
    component: str | None = typer.Option(None, "--component", help=f"Closeness on a disconnected graph: {' or '.join(COMPONENT_MODES)}"),
    sort_by: str | None = typer.Option(None, "--sort-by", help="Measure to rank by (default: first measure)"),
    top: int = typer.Option(20, help="Rows to show"),
    max_iter: int | None = typer.Option(None, "--max-iter", help="Eigenvector iteration cap"),
    tol: float | None = typer.Option(None, "--tol", help="Eigenvector convergence tolerance"),
    out: Path | None = typer.Option(None, "--out", help="Write all scores as JSON here"),
):
    """Compute centrality scores and print the top nodes."""
    settings = Settings()

    unknown = [m for m in measure if m not in MEASURES]
    if unknown:
        raise typer.BadParameter(f"Unknown measure(s): {', '.join(unknown)}. Choose from {', '.join(MEASURES)}")
    if component is not None and component not in COMPONENT_MODES:
        raise typer.BadParameter(f"--component must be one of: {', '.join(COMPONENT_MODES)}")
    key = sort_by or measure[0]
    if key not in measure:
        raise typer.BadParameter(f"--sort-by {key} is not among the computed measures")

    graph = _load_graph(nodes, edges, directed, settings)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", DisconnectedGraphWarning)
        try:
            scores = compute_centralities(
                graph,
                measure,
                weighted_paths=weighted_paths,
                closeness_component=component,
                eigen_tol=tol if tol is not None else settings.eigen_tol,
                eigen_max_iter=max_iter if max_iter is not None else settings.eigen_max_iter,
            )
        except NonConvergenceError as e:
            console.print(str(e), style="red")
            console.print("  Fix: raise --max-iter or loosen --tol.", style="yellow")
            raise typer.Exit(code=2)

    for w in caught:
        if issubclass(w.category, DisconnectedGraphWarning):
            console.print(f"Warning: {w.message}", style="yellow", markup=False)
            console.print("  Fix: pass --component largest (or --component all to silence).", style="yellow")

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        payload = {str(nid): vals for nid, vals in scores.items()}
        out.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"Wrote scores for {len(payload)} nodes to {out}")

    table = Table(title=f"Top {min(top, len(scores))} nodes by {key}")
    table.add_column("#", justify="right", width=4)
    table.add_column("node")
    for m in measure:
        table.add_column(m, justify="right")

    for i, (nid, vals) in enumerate(rank(scores, key, top=top), start=1):
        table.add_row(Text(str(i)), Text(str(nid)), *(Text(_fmt(vals[m])) for m in measure))

    console.print(table)


@app.command()
def stats(
    nodes: Path = typer.Option(..., "--nodes", exists=True, file_okay=True, dir_okay=False),
    edges: Path = typer.Option(..., "--edges", exists=True, file_okay=True, dir_okay=False),
    directed: bool = typer.Option(False, "--directed/--undirected"),
):
    """Show network size, density and components."""
    settings = Settings()
    graph = _load_graph(nodes, edges, directed, settings)

    n = len(graph)
    pairs = graph.edge_multiplicity()
    distinct = sum(1 for a, b in pairs if a != b)
    possible = n * (n - 1) if graph.directed else n * (n - 1) / 2
    density = distinct / possible if possible else 0.0
    comps = connected_components(graph)

    table = Table(title="Network Stats")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Directed", str(graph.directed))
    table.add_row("Nodes", str(n))
    table.add_row("Edges", str(graph.number_of_edges()))
    table.add_row("Connected pairs", str(distinct))
    table.add_row("Total weight", _fmt(graph.total_weight()))
    table.add_row("Density", f"{density:.4f}")
    table.add_row("Components", str(len(comps)))
    table.add_row("Largest component", str(len(comps[0]) if comps else 0))
    console.print(table)


if __name__ == "__main__":
    app()
