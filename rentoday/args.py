"""Command line token parsing.

RENToday takes flat ``<delimiter><name>[=<value>]`` tokens rather than GNU style options,
e.g. ``/f=data/myfile.txt /p=Backup_ /o``. A flag without a value is a boolean switch.
"""

import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from rentoday.errors import MissingMandatoryParameterError, TooFewParametersError
from rentoday.models.parameters import FileAction, Parameters


# Number of mandatory parameters
PARAM_MIN = 1

DEFAULT_DELIMITER = "/" if os.name == "nt" else "-"

# f - file name
# d - directory with file specification, e.g. data/*.txt
# o - overwrite existing file with the same name
# p - file name prefix
# s - recurse subdirectories
KNOWN_PARAMETERS = ("f", "d", "o", "p", "s")

# Value given to a flag supplied without "=<value>"
SWITCH_VALUE = True


@dataclass
class CmdArgs:
    """Tokens split into recognized flags and everything else."""

    delimiter: str = DEFAULT_DELIMITER
    values: dict[str, str | bool] = field(default_factory=dict)
    originals: dict[str, str] = field(default_factory=dict)
    unknown: list[str] = field(default_factory=list)
    count: int = 0

    @classmethod
    def parse(cls, tokens: Sequence[str], delimiter: str = DEFAULT_DELIMITER) -> "CmdArgs":
        cmd = cls(delimiter=delimiter, count=len(tokens))
        for token in tokens:
            if not delimiter or not token.startswith(delimiter):
                cmd.unknown.append(token)
                continue

            name, sep, value = token[len(delimiter) :].partition("=")
            name = name.lower()
            if name not in KNOWN_PARAMETERS:
                cmd.unknown.append(token)
                continue

            cmd.values[name] = value if sep else SWITCH_VALUE
            cmd.originals[name] = token
        return cmd

    def has(self, name: str) -> bool:
        return name in self.values

    def get(self, name: str) -> str | bool | None:
        return self.values.get(name)


def _is_missing(value: str | bool | None) -> bool:
    """A path value is missing when bare, empty, or the boolean sentinel string."""
    if not isinstance(value, str):
        return True
    return not value.strip() or value.strip().lower() == str(SWITCH_VALUE).lower()


def build_parameters(cmd: CmdArgs) -> Parameters:
    """Validate parsed flags and build the run configuration.

    Raises:
        TooFewParametersError: If fewer than PARAM_MIN tokens were supplied.
        MissingMandatoryParameterError: If neither f nor d carries a usable value.
    """
    d = cmd.delimiter
    if cmd.count < PARAM_MIN:
        raise TooFewParametersError(
            f"Too few parameters. Mandatory parameters: {PARAM_MIN}, parameters supplied: {cmd.count}"
        )

    if not cmd.has("f") and not cmd.has("d"):
        raise MissingMandatoryParameterError(f"Mandatory parameter missing. Either {d}f or {d}d is required")

    # f takes precedence over d
    if cmd.has("f"):
        file_action = FileAction.RENAME_FILE
        source = cmd.get("f")
        if _is_missing(source):
            raise MissingMandatoryParameterError(f"Missing filename: {cmd.originals['f']}")
    else:
        file_action = FileAction.RENAME_DIRECTORY
        source = cmd.get("d")
        if _is_missing(source):
            raise MissingMandatoryParameterError(f"Missing directory/file specification: {cmd.originals['d']}")

    prefix = cmd.get("p")

    return Parameters(
        file_action=file_action,
        source=source,
        overwrite=cmd.has("o"),
        prefix=prefix if isinstance(prefix, str) else None,
        recurse_subdirectories=cmd.has("s"),
    )


def parse_parameters(tokens: Sequence[str], delimiter: str = DEFAULT_DELIMITER) -> Parameters:
    """Parse raw command line tokens into Parameters."""
    return build_parameters(CmdArgs.parse(tokens, delimiter=delimiter))
