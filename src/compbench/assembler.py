"""Assemble instrumented blocks into whole benchmark scripts.

Files form the outer loop and tools the inner one: consecutive blocks share
an input file and vary the tool, so page-cache effects for a file are spread
across all tools instead of landing on whichever tool happens to run first.
"""

from collections.abc import Callable, Iterable, Sequence

from .builder import build_compression_block, build_decompression_block
from .config import DEFAULT_LAYOUT, ScriptLayout
from .corpus import CorpusFile, as_corpus_file
from .registry import ToolSpec

SHEBANG = "#!/usr/bin/env bash"

BlockBuilder = Callable[[ToolSpec, CorpusFile, ScriptLayout], str]


class ScriptBuffer:
    """Ordered lines of one script being assembled."""

    def __init__(self, header: str | None = SHEBANG):
        self._lines: list[str] = [header, ""] if header else []
        self.block_count = 0

    def append(self, block: str) -> None:
        self._lines.extend(block.splitlines())
        self.block_count += 1

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def render(self) -> str:
        return "\n".join(self._lines) + "\n"


def _assemble(
    build: BlockBuilder,
    tools: Sequence[ToolSpec],
    files: Iterable[CorpusFile | str],
    layout: ScriptLayout,
) -> str:
    buffer = ScriptBuffer()
    for corpus_file in files:
        corpus_file = as_corpus_file(corpus_file)
        for tool in tools:
            buffer.append(build(tool, corpus_file, layout))
    return buffer.render()


def assemble_compression_script(
    tools: Sequence[ToolSpec],
    files: Iterable[CorpusFile | str],
    layout: ScriptLayout = DEFAULT_LAYOUT,
) -> str:
    """Compression script for every (file, tool) pair, tools in the given order."""
    return _assemble(build_compression_block, tools, files, layout)


def assemble_decompression_script(
    tools: Sequence[ToolSpec],
    files: Iterable[CorpusFile | str],
    layout: ScriptLayout = DEFAULT_LAYOUT,
) -> str:
    """Decompression script for every (file, tool) pair, tools in the given order."""
    return _assemble(build_decompression_block, tools, files, layout)
