"""
Main Pipeline
=============

Orchestrates a complete analysis of one document.

Pipeline Phases:
    1. STATS         - Word/character/sentence counts, reading time, top words
    2. SEMANTICS     - Structure scores, concept graph and insights
    3. CONTENT       - Readability, style, topics and suggestions
    4. VISUALIZATION - Concept map, topic chart and top-word plots

The document is tagged once and the tagged text is shared by the semantic
and content phases. Invalid input aborts the run before any phase starts;
any other failure is recorded against its phase and the run continues.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Optional

from .config import PipelineConfig
from .errors import AnalysisError, InvalidInputError, validate_text
from .tagging import NLTKTagger, Tagger, TaggedText
from .analysis.content import ContentAnalyzer
from .analysis.models import ContentAnalysis, SemanticAnalysis, TextStatistics
from .analysis.semantic import SemanticAnalyzer
from .analysis.stats import compute_statistics

logger = logging.getLogger(__name__)

PHASES: tuple[str, ...] = ("stats", "semantics", "content", "visualization")


class Pipeline:
    """
    Runs the configured analysis phases over a document.

    Usage:
        config = PipelineConfig.from_yaml("configs/default.yaml")
        pipeline = Pipeline(config)
        results = pipeline.run(text)
    """

    def __init__(self, config: Optional[PipelineConfig] = None, tagger: Optional[Tagger] = None):
        self.config = config or PipelineConfig()
        self.tagger = tagger or NLTKTagger.from_config(self.config.tagger)

    def run(self, text: str) -> dict:
        """
        Run all configured phases on ``text``.

        Returns:
            Dict of phase_name -> JSON-serializable result. A failed phase
            maps to ``{"error": message}``.

        Raises:
            InvalidInputError: The text is empty or has no sentences/words.
            AnalysisError: Tagging the text failed.
        """
        validate_text(text)

        results: dict = {}
        phases = self.config.phases
        total_start = time.time()

        logger.info(f"Starting analysis pipeline, phases: {phases}")

        tagged: Optional[TaggedText] = None
        if "semantics" in phases or "content" in phases:
            try:
                tagged = self.tagger.tag(text)
            except Exception as e:
                logger.error(f"Tagging failed: {e}", exc_info=True)
                raise AnalysisError("Failed to analyze text") from e

        statistics: Optional[TextStatistics] = None
        semantic: Optional[SemanticAnalysis] = None
        content: Optional[ContentAnalysis] = None

        for phase in phases:
            phase_start = time.time()

            try:
                if phase == "stats":
                    statistics = compute_statistics(text)
                    results[phase] = statistics.to_dict()
                elif phase == "semantics":
                    analyzer = SemanticAnalyzer(tagger=self.tagger, config=self.config.semantic)
                    semantic = analyzer.analyze_tagged(tagged)
                    results[phase] = semantic.to_dict()
                elif phase == "content":
                    analyzer = ContentAnalyzer(tagger=self.tagger, config=self.config.content)
                    content = analyzer.analyze_tagged(tagged)
                    results[phase] = content.to_dict()
                elif phase == "visualization":
                    results[phase] = self._run_visualization(statistics, semantic, content)
                else:
                    logger.warning(f"Unknown phase: {phase}, skipping")
                    continue

                elapsed = time.time() - phase_start
                logger.debug(f"Phase {phase} completed in {elapsed:.3f}s")

            except InvalidInputError:
                raise
            except Exception as e:
                logger.error(f"Phase {phase} failed: {e}", exc_info=True)
                results[phase] = {"error": str(e)}

        logger.info(f"Pipeline completed in {time.time() - total_start:.2f}s")
        return results

    def _run_visualization(
        self,
        statistics: Optional[TextStatistics],
        semantic: Optional[SemanticAnalysis],
        content: Optional[ContentAnalysis],
    ) -> dict:
        """Render plots for whichever results are available."""
        cfg = self.config.visualization
        if not cfg.generate_plots:
            return {"status": "skipped"}

        from .analysis.visualization import PlotConfig, Visualizer

        viz = Visualizer(
            output_dir=cfg.output_dir,
            config=PlotConfig(dpi=cfg.dpi, file_format=cfg.file_format),
        )

        plots = []
        if semantic is not None:
            viz.plot_concept_map(semantic)
            plots.append("concept_map")
        if content is not None:
            viz.plot_topics(content, chart_type=cfg.chart_type)
            plots.append(f"topics_{cfg.chart_type}")
        if statistics is not None:
            viz.plot_top_words(statistics)
            plots.append("top_words")

        return {
            "output_dir": str(viz.output_dir),
            "plots": [f"{name}.{cfg.file_format}" for name in plots],
        }


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for running the pipeline from command line."""
    import argparse
    import sys

    parser = argparse.ArgumentParser(
        description="Heuristic semantic analysis of a text document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Analyse a file and print the JSON result
    lexigraph essay.txt

    # Read from stdin, semantic analysis only
    cat essay.txt | lexigraph --phases semantics

    # Also render plots
    lexigraph essay.txt --plots --output figures --chart-type pie
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Text file to analyse ('-' reads stdin)",
    )
    parser.add_argument(
        "--config", "-c",
        default="configs/default.yaml",
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--phases", "-p",
        nargs="+",
        choices=PHASES,
        help="Specific phases to run (overrides config)",
    )
    parser.add_argument(
        "--plots",
        action="store_true",
        help="Render plots in the visualization phase",
    )
    parser.add_argument(
        "--chart-type",
        choices=["bar", "pie", "line"],
        help="Topic chart type (overrides config)",
    )
    parser.add_argument(
        "--output", "-o",
        help="Plot output directory (overrides config)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Load config
    config_path = Path(args.config)
    if config_path.exists():
        config = PipelineConfig.from_yaml(config_path)
    else:
        logger.info(f"Config file {config_path} not found, using defaults")
        config = PipelineConfig()

    # Apply overrides
    if args.phases:
        config.phases = args.phases
    if args.plots:
        config.visualization.generate_plots = True
    if args.chart_type:
        config.visualization.chart_type = args.chart_type
    if args.output:
        config.visualization.output_dir = args.output

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.input).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read input {args.input}: {e}")
        return 2

    try:
        results = Pipeline(config).run(text)
    except InvalidInputError as e:
        logger.error(str(e))
        return 2
    except AnalysisError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(results, indent=2, ensure_ascii=False))

    failed = [phase for phase, r in results.items() if isinstance(r, dict) and "error" in r]
    return 1 if failed else 0


if __name__ == "__main__":
    import sys
    sys.exit(main())
