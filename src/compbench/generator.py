"""One generation run: order the tools, assemble both scripts, write them.

Both scripts are assembled completely in memory before anything is
written, so a configuration error (such as an unknown tool id) leaves no
partial script behind.
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from .assembler import assemble_compression_script, assemble_decompression_script
from .config import GeneratorConfig
from .corpus import find_missing
from .emitter import emit
from .randomizer import identity, permute
from .registry import ToolSpec

logger = logging.getLogger("compbench.generator")


@dataclass(frozen=True)
class RenderedScripts:
    """Script texts for one run, plus the tool orders they were built with."""

    compression: str
    decompression: str
    compression_order: tuple[ToolSpec, ...]
    decompression_order: tuple[ToolSpec, ...]


@dataclass(frozen=True)
class GenerationResult:
    """Where one run wrote its scripts and in which tool orders."""

    compress_path: Path
    decompress_path: Path
    compression_order: tuple[ToolSpec, ...]
    decompression_order: tuple[ToolSpec, ...]

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "compress_path": str(self.compress_path),
            "decompress_path": str(self.decompress_path),
            "compression_order": [t.id for t in self.compression_order],
            "decompression_order": [t.id for t in self.decompression_order],
        }


def render(config: GeneratorConfig, rng: random.Random | None = None) -> RenderedScripts:
    """Build both script texts without touching the filesystem.

    Compression and decompression get independent orders.

    Raises:
        UnknownToolError: if the config selects a tool that is not registered
    """
    tools = config.tools
    order = permute if config.shuffle else identity
    compression_order = order(tools, rng)
    decompression_order = order(tools, rng)

    logger.debug(f"Compression order: {[t.id for t in compression_order]}")
    logger.debug(f"Decompression order: {[t.id for t in decompression_order]}")

    return RenderedScripts(
        compression=assemble_compression_script(compression_order, config.files, config.layout),
        decompression=assemble_decompression_script(
            decompression_order, config.files, config.layout
        ),
        compression_order=compression_order,
        decompression_order=decompression_order,
    )


def check_config(config: GeneratorConfig) -> list[str]:
    """Collect problems that will only bite when the scripts run.

    None of these stop generation; they are logged so the operator can fix
    the corpus or tool table before a long benchmark run.
    """
    warnings: list[str] = []

    for tool in config.tools:
        if not tool.appends_extension:
            warnings.append(
                f"{tool.id}: compress template does not write {{output}}{tool.extension}; "
                f"its ratio line and decompression will not find the compressed file"
            )

    input_dir = config.script_dir / config.layout.input_dir
    for corpus_file in find_missing(config.files, input_dir):
        warnings.append(f"Corpus file not found: {input_dir / corpus_file.name}")

    return warnings


def generate(config: GeneratorConfig, rng: random.Random | None = None) -> GenerationResult:
    """Generate and write the compression and decompression scripts.

    Existing scripts at the configured paths are overwritten.

    Raises:
        UnknownToolError: before anything is written
        WriteError, ScriptPermissionError: if a script cannot be persisted
    """
    scripts = render(config, rng)

    for warning in check_config(config):
        logger.warning(warning)

    compress_path = emit(config.compress_script_path, scripts.compression)
    decompress_path = emit(config.decompress_script_path, scripts.decompression)

    return GenerationResult(
        compress_path=compress_path,
        decompress_path=decompress_path,
        compression_order=scripts.compression_order,
        decompression_order=scripts.decompression_order,
    )
