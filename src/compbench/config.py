"""Configuration for script generation runs."""

from dataclasses import dataclass, field
from pathlib import Path

from .corpus import DEFAULT_CORPUS, CorpusFile, load_corpus
from .registry import ToolRegistry, ToolSpec, default_registry
from .templates import is_shell_safe


def _clean_dir(value: str) -> str:
    value = str(value)
    stripped = value.rstrip("/")
    if not stripped:
        raise ValueError(f"Directory prefix must be a non-root path, got {value!r}")
    if not is_shell_safe(stripped):
        raise ValueError(f"Directory prefix is not shell-safe: {value!r}")
    return stripped


@dataclass(frozen=True)
class ScriptLayout:
    """Directory prefixes and timer format baked into generated commands.

    The directories are written into the scripts as-is and resolved by the
    shell that runs them, relative to its working directory.
    """

    input_dir: str = "corpora"
    output_dir: str = "output"
    time_format: str = "%3R"  # bash TIMEFORMAT: real time, 3 decimals

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_dir", _clean_dir(self.input_dir))
        object.__setattr__(self, "output_dir", _clean_dir(self.output_dir))
        if "'" in self.time_format:
            raise ValueError(f"Time format cannot contain a single quote: {self.time_format!r}")

    def input_path(self, corpus_file: CorpusFile) -> str:
        return f"{self.input_dir}/{corpus_file.name}"

    def output_path(self, corpus_file: CorpusFile) -> str:
        return f"{self.output_dir}/{corpus_file.name}"

    def compressed_path(self, corpus_file: CorpusFile, tool: ToolSpec) -> str:
        return tool.compressed_path(self.output_path(corpus_file))

    def restored_path(self, corpus_file: CorpusFile, tool: ToolSpec) -> str:
        return tool.restored_path(self.output_path(corpus_file))


DEFAULT_LAYOUT = ScriptLayout()


@dataclass(frozen=True)
class GeneratorConfig:
    """Everything one generation run needs, built once and passed explicitly."""

    registry: ToolRegistry = field(default_factory=default_registry)
    tool_ids: tuple[str, ...] | None = None  # None selects every registered tool
    files: tuple[CorpusFile, ...] = DEFAULT_CORPUS
    layout: ScriptLayout = DEFAULT_LAYOUT
    script_dir: Path = Path(".")
    compress_script: str = "autogen-test.bash"
    decompress_script: str = "autogen-test-dec.bash"
    shuffle: bool = True

    def __post_init__(self) -> None:
        """Normalize collection and path fields."""
        if self.tool_ids is not None:
            object.__setattr__(self, "tool_ids", tuple(self.tool_ids))
        object.__setattr__(self, "files", load_corpus(self.files))
        object.__setattr__(self, "script_dir", Path(self.script_dir))

    @property
    def tools(self) -> tuple[ToolSpec, ...]:
        """Selected tools in registry (or requested) order.

        Raises:
            UnknownToolError: if a requested id is not registered
        """
        return self.registry.select(self.tool_ids)

    @property
    def compress_script_path(self) -> Path:
        return self.script_dir / self.compress_script

    @property
    def decompress_script_path(self) -> Path:
        return self.script_dir / self.decompress_script
