"""Benchmark corpus: the files every tool is run against."""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from .errors import CorpusError
from .templates import is_shell_safe


@dataclass(frozen=True)
class CorpusFile:
    """A file in the benchmark corpus, named relative to the input directory."""

    name: str

    def __post_init__(self) -> None:
        path = PurePosixPath(self.name)
        if not self.name or self.name.strip() != self.name:
            raise CorpusError(f"Invalid corpus file name: {self.name!r}")
        if path.is_absolute() or ".." in path.parts:
            raise CorpusError(f"Corpus file must be relative to the input directory: {self.name!r}")
        if not is_shell_safe(self.name):
            raise CorpusError(f"Corpus file name is not shell-safe: {self.name!r}")

    def __str__(self) -> str:
        return self.name


# Files benchmarked out of the box, relative to the input directory
DEFAULT_CORPUS = (
    CorpusFile("jquery-3.3.1.min.js"),
    CorpusFile("vim.small.c"),
    CorpusFile("test/finnish-bank-utils.min.js"),
    CorpusFile("atest-sincos.c"),
    CorpusFile("test/sincos_drift.mix"),
    CorpusFile("test/uastar.c"),
    CorpusFile("test/finn_uastar.mix"),
)


def as_corpus_file(value: "CorpusFile | str") -> CorpusFile:
    """Accept either a CorpusFile or a bare relative name."""
    if isinstance(value, CorpusFile):
        return value
    return CorpusFile(str(value))


def load_corpus(names: Iterable["CorpusFile | str"]) -> tuple[CorpusFile, ...]:
    """Build a corpus from names, rejecting duplicates.

    Duplicates would produce the same (file, tool) block twice in a script.
    """
    files: list[CorpusFile] = []
    seen: set[str] = set()
    for value in names:
        corpus_file = as_corpus_file(value)
        if corpus_file.name in seen:
            raise CorpusError(f"Duplicate corpus file: {corpus_file.name!r}")
        seen.add(corpus_file.name)
        files.append(corpus_file)
    return tuple(files)


def find_missing(files: Iterable[CorpusFile], input_dir: Path) -> list[CorpusFile]:
    """Return the corpus files that do not exist under input_dir.

    Generation does not need the files, so callers only warn about these;
    the generated scripts will fail on them at run time.
    """
    input_dir = Path(input_dir)
    return [f for f in files if not (input_dir / f.name).is_file()]
