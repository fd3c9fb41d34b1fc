"""compbench: randomized benchmark scripts for command-line compressors."""

__version__ = "0.1.0"

from .assembler import ScriptBuffer, assemble_compression_script, assemble_decompression_script
from .builder import build_compression_block, build_decompression_block
from .config import DEFAULT_LAYOUT, GeneratorConfig, ScriptLayout
from .corpus import DEFAULT_CORPUS, CorpusFile
from .emitter import emit
from .errors import (
    CompbenchError,
    CorpusError,
    ScriptPermissionError,
    TemplateError,
    ToolSpecError,
    UnknownToolError,
    WriteError,
)
from .generator import GenerationResult, generate, render
from .randomizer import identity, permute
from .registry import DEFAULT_TOOLS, ToolRegistry, ToolSpec, default_registry
from .templates import CommandTemplate

__all__ = [
    # Registry
    "ToolSpec",
    "ToolRegistry",
    "DEFAULT_TOOLS",
    "default_registry",
    "CommandTemplate",
    # Corpus and config
    "CorpusFile",
    "DEFAULT_CORPUS",
    "ScriptLayout",
    "DEFAULT_LAYOUT",
    "GeneratorConfig",
    # Generation
    "permute",
    "identity",
    "build_compression_block",
    "build_decompression_block",
    "ScriptBuffer",
    "assemble_compression_script",
    "assemble_decompression_script",
    "emit",
    "generate",
    "render",
    "GenerationResult",
    # Errors
    "CompbenchError",
    "UnknownToolError",
    "ToolSpecError",
    "TemplateError",
    "CorpusError",
    "WriteError",
    "ScriptPermissionError",
]
