"""Registry of the compression tools under benchmark.

Each tool is described by a ToolSpec: how to compress a file, how to
decompress it again, and which extension the compressed file gets.

Path convention shared by every tool:
- compression reads ``<input>`` and writes ``<output><extension>``
- decompression reads ``<output><extension>`` and restores ``<output>``
"""

from collections.abc import Iterable, Iterator
from functools import cached_property

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .errors import ToolSpecError, UnknownToolError
from .templates import COMPRESS_SLOTS, DECOMPRESS_SLOTS, CommandTemplate, is_shell_safe


class ToolSpec(BaseModel):
    """One compression tool: its command templates and output extension."""

    model_config = ConfigDict(frozen=True, ignored_types=(cached_property,))

    id: str
    compress_template: str
    decompress_template: str
    extension: str

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        if not is_shell_safe(value):
            raise ValueError(f"tool id must be a single shell-safe token, got {value!r}")
        return value

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2 or not is_shell_safe(value):
            raise ValueError(f"extension must look like '.ext' and be shell-safe, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_templates(self) -> "ToolSpec":
        for template in (self.compress, self.decompress):
            if template.program != self.id:
                raise ValueError(
                    f"template {template.text!r} must start with the tool id {self.id!r}"
                )
        return self

    @cached_property
    def compress(self) -> CommandTemplate:
        return CommandTemplate(self.compress_template, COMPRESS_SLOTS)

    @cached_property
    def decompress(self) -> CommandTemplate:
        return CommandTemplate(self.decompress_template, DECOMPRESS_SLOTS)

    @property
    def appends_extension(self) -> bool:
        """Whether the compress command itself writes ``{output}<extension>``.

        The ratio line and the decompress command both expect the compressed
        file at ``<output><extension>``; a tool for which this is False will
        produce a script whose ratio line fails at run time.
        """
        marker = "{output}" if "{output}" in self.compress_template else "$2"
        return f"{marker}{self.extension}" in self.compress_template

    def compressed_path(self, output_path: str) -> str:
        """Where the compress command leaves its result for ``output_path``."""
        return f"{output_path}{self.extension}"

    def restored_path(self, output_path: str) -> str:
        """Where the decompress command writes the restored file."""
        return output_path

    @classmethod
    def create(
        cls,
        id: str,
        compress_template: str,
        decompress_template: str,
        extension: str,
    ) -> "ToolSpec":
        """Build a ToolSpec, reporting invalid definitions as ToolSpecError."""
        try:
            return cls(
                id=id,
                compress_template=compress_template,
                decompress_template=decompress_template,
                extension=extension,
            )
        except ValidationError as e:
            raise ToolSpecError(f"Invalid tool {id!r}: {e}") from e


class ToolRegistry:
    """Read-only lookup of ToolSpecs by tool id, in definition order."""

    def __init__(self, tools: Iterable[ToolSpec]):
        self._tools: dict[str, ToolSpec] = {}
        for tool in tools:
            if tool.id in self._tools:
                raise ToolSpecError(f"Duplicate tool id: {tool.id!r}")
            self._tools[tool.id] = tool

    def get(self, tool_id: str) -> ToolSpec:
        try:
            return self._tools[tool_id]
        except KeyError:
            raise UnknownToolError(tool_id) from None

    def lookup_extension(self, tool_id: str) -> str:
        return self.get(tool_id).extension

    def template_for_compress(self, tool_id: str) -> str:
        return self.get(tool_id).compress_template

    def template_for_decompress(self, tool_id: str) -> str:
        return self.get(tool_id).decompress_template

    def tool_for_command(self, command: str) -> ToolSpec:
        """Resolve a raw command line to its tool by the first token."""
        tokens = command.split()
        if not tokens:
            raise UnknownToolError(command)
        return self.get(tokens[0])

    def select(self, tool_ids: Iterable[str] | None = None) -> tuple[ToolSpec, ...]:
        """Return the named tools in the given order, or all tools if None."""
        if tool_ids is None:
            return self.tools
        return tuple(self.get(tool_id) for tool_id in tool_ids)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._tools)

    @property
    def tools(self) -> tuple[ToolSpec, ...]:
        return tuple(self._tools.values())

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


DEFAULT_TOOLS = (
    ToolSpec.create(
        "build/packingtape",
        "build/packingtape c {input} {output}.pt",
        "build/packingtape d {output}.pt {output}",
        ".pt",
    ),
    ToolSpec.create(
        "zstd",
        "zstd {input} -o {output}.zst",
        "zstd -d {output}.zst -o {output}",
        ".zst",
    ),
    ToolSpec.create(
        "brotli",
        "brotli -v {input} -o {output}.br",
        "brotli -d {output}.br -o {output}",
        ".br",
    ),
    ToolSpec.create(
        "src/fpaq0",
        "src/fpaq0 c {input} {output}.fpaq0",
        "src/fpaq0 d {output}.fpaq0 {output}",
        ".fpaq0",
    ),
)


def default_registry() -> ToolRegistry:
    """Registry with the tools benchmarked out of the box."""
    return ToolRegistry(DEFAULT_TOOLS)
