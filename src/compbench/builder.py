"""Instrumented shell blocks around single tool invocations.

A compression block looks like::

    echo "zstd"
    TIMEFORMAT='%3R'; time zstd corpora/a.bin -o output/a.bin.zst
    echo "scale = 3; 1 - (`wc -c < output/a.bin.zst` / `wc -c < corpora/a.bin`)" | bc
    echo "a.bin"
    echo ""

A decompression block restores the file, labels it and removes it again so
repeated runs do not pile up restored copies::

    echo "zstd"
    TIMEFORMAT='%3R'; time zstd -d output/a.bin.zst -o output/a.bin
    echo "a.bin"
    rm output/a.bin
    echo ""
"""

from .config import DEFAULT_LAYOUT, ScriptLayout
from .corpus import CorpusFile, as_corpus_file
from .registry import ToolSpec


def echo(text: str) -> str:
    return f'echo "{text}"'


def timed(command: str, layout: ScriptLayout = DEFAULT_LAYOUT) -> str:
    """Wrap a command with bash's wall-clock timer."""
    return f"TIMEFORMAT='{layout.time_format}'; time {command}"


def ratio_command(compressed_path: str, original_path: str) -> str:
    """Line printing 1 - compressed/original size with 3 decimal digits."""
    return (
        f'echo "scale = 3; 1 - (`wc -c < {compressed_path}` / `wc -c < {original_path}`)" | bc'
    )


def _block(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def build_compression_block(
    tool: ToolSpec,
    corpus_file: CorpusFile | str,
    layout: ScriptLayout = DEFAULT_LAYOUT,
) -> str:
    """Build the timed compression of one corpus file with one tool."""
    corpus_file = as_corpus_file(corpus_file)
    source = layout.input_path(corpus_file)
    command = tool.compress.render(input=source, output=layout.output_path(corpus_file))

    return _block(
        [
            echo(tool.id),
            timed(command, layout),
            ratio_command(layout.compressed_path(corpus_file, tool), source),
            echo(corpus_file.name),
            echo(""),
        ]
    )


def build_decompression_block(
    tool: ToolSpec,
    corpus_file: CorpusFile | str,
    layout: ScriptLayout = DEFAULT_LAYOUT,
) -> str:
    """Build the timed decompression of one corpus file with one tool.

    The decompress template only receives the output path; the tool's own
    convention derives the compressed input from it.
    """
    corpus_file = as_corpus_file(corpus_file)
    command = tool.decompress.render(output=layout.output_path(corpus_file))

    return _block(
        [
            echo(tool.id),
            timed(command, layout),
            echo(corpus_file.name),
            f"rm {layout.restored_path(corpus_file, tool)}",
            echo(""),
        ]
    )
