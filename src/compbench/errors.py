"""Error types raised while generating benchmark scripts.

Everything derives from CompbenchError so the CLI can catch generation
failures in one place. Each error also subclasses the closest builtin so
callers that only know about KeyError/ValueError/OSError still work.
"""


class CompbenchError(Exception):
    """Base class for all generator errors."""


class UnknownToolError(CompbenchError, KeyError):
    """A tool id was requested that the registry does not contain."""

    def __init__(self, tool_id: str):
        super().__init__(tool_id)
        self.tool_id = tool_id

    def __str__(self) -> str:
        return f"Unknown tool: {self.tool_id!r}"


class ToolSpecError(CompbenchError, ValueError):
    """A registry entry is malformed or duplicates another entry."""


class TemplateError(CompbenchError, ValueError):
    """A command template is malformed or could not be fully substituted."""


class WriteError(CompbenchError, OSError):
    """A generated script could not be written to disk."""


class ScriptPermissionError(CompbenchError, PermissionError):
    """A generated script was written but could not be made executable."""


class CorpusError(CompbenchError, ValueError):
    """A corpus file name is unusable in a generated command line."""
