"""
Configuration
=============

Central configuration for the Lexigraph pipeline.
Loads from YAML config files with sensible defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class TaggerConfig:
    """Tokenizer/tagger configuration."""
    auto_download: bool = True  # fetch missing NLTK data on first use
    excluded_verbs: list[str] = field(default_factory=lambda: ["be", "have", "do"])


@dataclass
class SemanticConfig:
    """Concept graph and insight configuration."""
    max_concepts: int = 5
    takeaway_count: int = 3


@dataclass
class ContentConfig:
    """Style/topic analysis configuration."""
    max_topics: int = 5
    max_key_points: int = 3


@dataclass
class VisualizationConfig:
    """Plot output configuration."""
    output_dir: str = "output"
    generate_plots: bool = False
    chart_type: str = "bar"  # "bar", "pie" or "line"
    dpi: int = 150
    file_format: str = "png"


@dataclass
class PipelineConfig:
    """Master configuration for the full pipeline."""
    tagger: TaggerConfig = field(default_factory=TaggerConfig)
    semantic: SemanticConfig = field(default_factory=SemanticConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)

    # Pipeline control: which phases to run
    phases: list[str] = field(default_factory=lambda: [
        "stats",
        "semantics",
        "content",
        "visualization",
    ])

    @classmethod
    def from_yaml(cls, path: str | Path) -> PipelineConfig:
        """Load configuration from a YAML file."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        config = cls()

        if "tagger" in data:
            config.tagger = TaggerConfig(**data["tagger"])
        if "semantic" in data:
            config.semantic = SemanticConfig(**data["semantic"])
        if "content" in data:
            config.content = ContentConfig(**data["content"])
        if "visualization" in data:
            config.visualization = VisualizationConfig(**data["visualization"])
        if "phases" in data:
            config.phases = data["phases"]

        return config

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        import dataclasses
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = dataclasses.asdict(self)
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
