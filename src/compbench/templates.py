"""Command templates with named path slots.

A template is a shell command line in which file paths are written as
named slots, e.g. ``zstd {input} -o {output}.zst``. The positional markers
``$1``, ``$2``, ... are accepted as aliases for the declared slots in
declaration order, so ``zstd $1 -o $2`` declares the same command.

Shell parameter expansions such as ``${HOME}`` are not slots and pass
through untouched.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import TemplateError

COMPRESS_SLOTS = ("input", "output")
DECOMPRESS_SLOTS = ("output",)

# {name} not preceded by "$", or $<digits>
_SLOT_RE = re.compile(r"(?<!\$)\{(?P<name>[A-Za-z_]\w*)\}|\$(?P<index>\d+)")

# Characters that change meaning inside a double-quoted or bare shell word
SHELL_UNSAFE_CHARS = "\"'`$\\"


def is_shell_safe(value: str) -> bool:
    """Whether value can be pasted into a command line as one plain word.

    Paths, labels and extensions are interpolated into the generated
    scripts unquoted and inside double-quoted echo lines.
    """
    return bool(value) and not any(ch.isspace() or ch in SHELL_UNSAFE_CHARS for ch in value)


@dataclass(frozen=True)
class CommandTemplate:
    """A parsed command line whose path slots are validated up front.

    Construction fails with TemplateError when the text references a slot
    that is not declared, when a declared slot is never referenced, or when
    the declared slot names repeat. Rendering is therefore total: once a
    template exists, ``render`` with one value per slot cannot leave a
    marker behind.
    """

    text: str
    slots: tuple[str, ...] = COMPRESS_SLOTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", tuple(self.slots))

        if not self.text.strip():
            raise TemplateError("Command template is empty")
        if len(set(self.slots)) != len(self.slots):
            raise TemplateError(f"Duplicate slot names in {self.slots!r}")

        used = {self._resolve(match) for match in _SLOT_RE.finditer(self.text)}
        unused = [slot for slot in self.slots if slot not in used]
        if unused:
            raise TemplateError(f"Template {self.text!r} never uses slot(s): {', '.join(unused)}")

    @property
    def program(self) -> str:
        """First whitespace-delimited token, i.e. the tool being invoked."""
        return self.text.split()[0]

    def markers(self) -> Iterator[str]:
        """Yield the raw slot markers in the order they appear."""
        for match in _SLOT_RE.finditer(self.text):
            yield match.group(0)

    def render(self, **paths: str) -> str:
        """Substitute every slot occurrence with its path.

        Substitution happens in a single pass, so a path that itself
        contains something slot-shaped is inserted verbatim.

        Raises:
            TemplateError: if a declared slot has no value or an undeclared
                slot is given one.
        """
        missing = [slot for slot in self.slots if slot not in paths]
        unexpected = sorted(set(paths) - set(self.slots))
        if missing:
            raise TemplateError(f"No value for slot(s) {', '.join(missing)} in {self.text!r}")
        if unexpected:
            raise TemplateError(f"Template {self.text!r} has no slot(s) {', '.join(unexpected)}")

        return _SLOT_RE.sub(lambda match: paths[self._resolve(match)], self.text)

    def _resolve(self, match: re.Match[str]) -> str:
        """Map a marker to its declared slot name."""
        name = match.group("name")
        if name is not None:
            if name not in self.slots:
                raise TemplateError(f"Unknown slot {{{name}}} in {self.text!r}")
            return name

        index = int(match.group("index"))
        if not 1 <= index <= len(self.slots):
            raise TemplateError(
                f"Positional marker ${index} in {self.text!r} is out of range "
                f"(template declares {len(self.slots)} slot(s))"
            )
        return self.slots[index - 1]

    def __str__(self) -> str:
        return self.text
