"""
Visualization Module
====================

Static plots of analysis results. The visualizer only reads finished
results; nothing it does feeds back into an analysis.

Plot Types
----------
    Concept Map
        Force-directed graph of the concept hierarchy. Node size shrinks
        with hierarchy level (root concepts are drawn largest), edge colour
        and line style encode the relationship type: solid green for
        ``supports``, solid red for ``contrasts``, dashed grey for
        ``elaborates``. Parallel edges of the same type are merged into a
        thicker line.

    Topic Charts
        Topic relevance from the content analysis as a bar chart, a donut
        pie chart, or a line chart with a shaded area.

    Top Words
        Horizontal bar chart of the most frequent words.

Configuration
-------------
    All plots are saved to a configurable output directory. File format,
    DPI and figure size are controlled through :class:`PlotConfig`. The
    default style is seaborn's ``whitegrid`` theme.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

import numpy as np

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for server/CLI use
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
import seaborn as sns

from .models import ContentAnalysis, SemanticAnalysis, TextStatistics

logger = logging.getLogger(__name__)

ChartType = Literal["bar", "pie", "line"]
CHART_TYPES: tuple[str, ...] = ("bar", "pie", "line")

#: relationship type -> (line style, colour)
EDGE_STYLES: dict[str, tuple[str, str]] = {
    "supports": ("solid", "#2E7D32"),
    "contrasts": ("solid", "#C62828"),
    "elaborates": ("dashed", "#718096"),
}

# Node radius in points: MAX_RADIUS at level 0, RADIUS_STEP smaller per level.
MAX_RADIUS = 30
RADIUS_STEP = 5
MIN_RADIUS = 8


@dataclass
class PlotConfig:
    """Configuration for plot aesthetics and output.

    Attributes:
        figsize: Default figure size as (width, height) in inches.
        dpi: Resolution for saved figures.
        file_format: Output file format ('png', 'pdf', 'svg').
        style: Seaborn style preset.
        palette: Seaborn colour palette name.
        title_fontsize: Font size for plot titles.
        label_fontsize: Font size for axis labels.
        annotation_fontsize: Font size for node labels and annotations.
        node_color: Fill colour of concept nodes.
        node_edge_color: Outline colour of concept nodes.
    """
    figsize: tuple[float, float] = (10, 7)
    dpi: int = 150
    file_format: str = "png"
    style: str = "whitegrid"
    palette: str = "deep"
    title_fontsize: int = 15
    label_fontsize: int = 12
    annotation_fontsize: int = 10
    node_color: str = "#EBF8FF"
    node_edge_color: str = "#4299E1"


def node_radius(level: int) -> int:
    """Drawn radius of a concept node at hierarchy ``level``."""
    return max(MAX_RADIUS - level * RADIUS_STEP, MIN_RADIUS)


class Visualizer:
    """
    Renders analysis results to image files.

    Each ``plot_*`` method builds a matplotlib figure, saves it to the
    output directory and returns the figure.

    Parameters
    ----------
    output_dir : str or Path
        Directory where plots are saved. Created if missing.
    config : PlotConfig, optional
        Styling and output configuration.

    Examples
    --------
    >>> viz = Visualizer(output_dir="./figures")
    >>> viz.plot_concept_map(semantic_result)
    >>> viz.plot_topics(content_result, chart_type="pie")
    """

    def __init__(
        self,
        output_dir: str | Path = "./figures",
        config: Optional[PlotConfig] = None,
    ):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.config = config or PlotConfig()

        sns.set_theme(style=self.config.style, palette=self.config.palette)

        logger.info(f"Visualizer initialized, output directory: {self.output_dir}")

    def _save_figure(self, fig: plt.Figure, filename: str) -> Path:
        """Save ``fig`` as ``<filename>.<file_format>`` and close it."""
        fig.tight_layout()

        filepath = self.output_dir / f"{filename}.{self.config.file_format}"
        fig.savefig(
            filepath,
            dpi=self.config.dpi,
            format=self.config.file_format,
            bbox_inches="tight",
            facecolor="white",
            edgecolor="none",
        )
        plt.close(fig)
        logger.info(f"Saved plot: {filepath}")
        return filepath

    def _empty_figure(self, message: str, filename: str) -> plt.Figure:
        fig, ax = plt.subplots(figsize=(8, 4))
        ax.text(0.5, 0.5, message, ha="center", va="center")
        ax.set_axis_off()
        self._save_figure(fig, filename)
        return fig

    # ------------------------------------------------------------------
    # Concept map
    # ------------------------------------------------------------------

    def plot_concept_map(
        self,
        analysis: SemanticAnalysis,
        filename: str = "concept_map",
        title: Optional[str] = None,
        seed: int = 42,
    ) -> plt.Figure:
        """
        Draw the concept hierarchy as a force-directed graph.

        Parameters
        ----------
        analysis : SemanticAnalysis
            Result whose hierarchy supplies the nodes and whose
            relationships supply the edges.
        filename : str
            Output filename without extension.
        title : str, optional
            Custom title.
        seed : int
            Seed for the spring layout, so repeated plots look the same.

        Returns
        -------
        matplotlib.figure.Figure
            The generated figure.
        """
        try:
            import networkx as nx
        except ImportError:
            raise ImportError(
                "Concept maps require the 'networkx' package. "
                "Install with: pip install networkx"
            )

        if not analysis.hierarchy:
            logger.warning("No concepts to plot")
            return self._empty_figure("No concepts identified", filename)

        G = nx.DiGraph()
        for node in analysis.hierarchy:
            G.add_node(node.concept, level=node.level)

        # (source, target) -> type -> number of edges
        edge_counts: dict[tuple[str, str], dict[str, int]] = {}
        for rel in analysis.relationships:
            by_type = edge_counts.setdefault((rel.source, rel.target), {})
            by_type[rel.type] = by_type.get(rel.type, 0) + 1
            G.add_edge(rel.source, rel.target)

        pos = nx.spring_layout(G, seed=seed, k=1.5 / np.sqrt(len(G.nodes)))
        node_sizes = [node_radius(G.nodes[n]["level"]) ** 2 * 2 for n in G.nodes]

        fig, ax = plt.subplots(figsize=self.config.figsize)

        for i, (rel_type, (line_style, color)) in enumerate(EDGE_STYLES.items()):
            edgelist = [pair for pair, by_type in edge_counts.items() if rel_type in by_type]
            if not edgelist:
                continue
            widths = [1.0 + edge_counts[pair][rel_type] for pair in edgelist]
            nx.draw_networkx_edges(
                G, pos,
                edgelist=edgelist,
                width=widths,
                edge_color=color,
                style=line_style,
                arrows=True,
                arrowsize=15,
                # Bend each type differently so parallel edges stay visible.
                connectionstyle=f"arc3,rad={0.1 * i}",
                node_size=node_sizes,
                alpha=0.8,
                ax=ax,
            )

        nx.draw_networkx_nodes(
            G, pos,
            node_size=node_sizes,
            node_color=self.config.node_color,
            edgecolors=self.config.node_edge_color,
            linewidths=2,
            ax=ax,
        )
        nx.draw_networkx_labels(
            G, pos,
            font_size=self.config.annotation_fontsize,
            ax=ax,
        )

        handles = [
            Line2D([0], [0], color=color, linestyle=line_style, linewidth=2, label=rel_type)
            for rel_type, (line_style, color) in EDGE_STYLES.items()
        ]
        ax.legend(handles=handles, loc="lower right", fontsize=self.config.annotation_fontsize)
        ax.set_axis_off()

        if title is None:
            title = (
                f"Concept Relationships\n"
                f"{len(G.nodes)} concepts, {len(analysis.relationships)} relationships"
            )
        ax.set_title(title, fontsize=self.config.title_fontsize)

        self._save_figure(fig, filename)
        return fig

    # ------------------------------------------------------------------
    # Topic charts
    # ------------------------------------------------------------------

    def plot_topics(
        self,
        analysis: ContentAnalysis,
        chart_type: ChartType = "bar",
        filename: Optional[str] = None,
        title: Optional[str] = None,
    ) -> plt.Figure:
        """
        Chart topic relevance.

        Parameters
        ----------
        analysis : ContentAnalysis
            Result whose topics are plotted in rank order.
        chart_type : {"bar", "pie", "line"}
            Chart form.
        filename : str, optional
            Output filename. Defaults to ``topics_<chart_type>``.
        title : str, optional
            Custom title.

        Returns
        -------
        matplotlib.figure.Figure
            The generated figure.
        """
        if chart_type not in CHART_TYPES:
            raise ValueError(f"Unknown chart type: {chart_type}. Use one of {list(CHART_TYPES)}.")

        filename = filename or f"topics_{chart_type}"
        if not analysis.topics:
            logger.warning("No topics to plot")
            return self._empty_figure("No topics identified", filename)

        labels = [t.topic for t in analysis.topics]
        values = np.array([t.relevance for t in analysis.topics])
        colors = sns.color_palette(self.config.palette, len(labels))

        fig, ax = plt.subplots(figsize=self.config.figsize)

        if chart_type == "pie":
            ax.pie(
                values,
                labels=labels,
                colors=colors,
                startangle=90,
                counterclock=False,
                wedgeprops={"width": 0.4, "alpha": 0.8},
                textprops={"fontsize": self.config.annotation_fontsize},
            )
            ax.set_aspect("equal")
        elif chart_type == "line":
            x = np.arange(len(labels))
            ax.plot(x, values, color=colors[0], linewidth=2, marker="o")
            ax.fill_between(x, values, color=colors[0], alpha=0.2)
            for xi, value, label in zip(x, values, labels):
                ax.annotate(
                    label, (xi, value),
                    textcoords="offset points", xytext=(0, 8), ha="center",
                    fontsize=self.config.annotation_fontsize,
                )
            ax.set_xticks(x)
            ax.set_xticklabels(labels)
            ax.set_ylim(0, max(values.max(), 1e-9) * 1.2)
            ax.set_ylabel("Relevance", fontsize=self.config.label_fontsize)
        else:
            ax.bar(labels, values, color=colors, alpha=0.85)
            ax.set_ylim(0, max(values.max(), 1e-9) * 1.15)
            ax.set_ylabel("Relevance", fontsize=self.config.label_fontsize)

        ax.set_title(title or f"Topic Relevance ({analysis.main_theme})",
                     fontsize=self.config.title_fontsize)

        self._save_figure(fig, filename)
        return fig

    # ------------------------------------------------------------------
    # Word frequency
    # ------------------------------------------------------------------

    def plot_top_words(
        self,
        statistics: TextStatistics,
        filename: str = "top_words",
        title: Optional[str] = None,
    ) -> plt.Figure:
        """Horizontal bar chart of the most frequent words."""
        if not statistics.top_words:
            logger.warning("No words to plot")
            return self._empty_figure("No words found", filename)

        words = [w for w, _ in statistics.top_words][::-1]
        counts = [c for _, c in statistics.top_words][::-1]

        fig_height = max(3, len(words) * 0.6 + 1.5)
        fig, ax = plt.subplots(figsize=(self.config.figsize[0], fig_height))
        ax.barh(words, counts, color=sns.color_palette(self.config.palette, len(words)))
        ax.set_xlabel("Occurrences", fontsize=self.config.label_fontsize)

        if title is None:
            title = (
                f"Top Words\n"
                f"{statistics.word_count} words, ~{statistics.reading_time} min read"
            )
        ax.set_title(title, fontsize=self.config.title_fontsize)

        self._save_figure(fig, filename)
        return fig
