# ruff: noqa: E501
"""Usage text shown on parameter errors and for --help."""

# Formatted with the switch delimiter as {d}
HELP_TEXT = """
RENToday renames files to today's date.

RENToday Usage:
rentoday {d}f=<Filename>|{d}d=<directory with file specification> [{d}p=<prefix>] [{d}o] [{d}s]

     e.g.: rentoday {d}f=data/myfile.txt
           - Rename the single file data/myfile.txt to 20020228_134228_623.txt, assuming today's date is
             February 28th, 2002 and the time is 13:42:28 (and 623 milliseconds).
           rentoday {d}d=data/*.txt
           - Rename each file with the file extension .txt in data/ to 20020228_134228_623.txt, assuming today's date is
             February 28th, 2002 and the time is 13:42:28 (and 623 milliseconds) when the first renaming occurs.
             The time is updated for each following rename.
             RENToday waits 3 milliseconds between renames so that file names stay unique.

Please note: switch {d}f takes precedence over switch {d}d if both are supplied.

           rentoday {d}f=data/myfile.txt {d}p=MyPrefix_
           - Rename data/myfile.txt to MyPrefix_20020228_134228_623.txt, assuming the above example's date & time.
             Switch {d}p supports the special character '*'. If present, the original file name is put at this
             position in <prefix>.
             E.g. rentoday {d}f=data/myfile.txt {d}p=MyPrefix_*_ results in MyPrefix_myfile_20020228_134228_623.txt.

{d}o - Overwrite existing files with the same name.
{d}s - Recurse subdirectories. Only valid together with {d}d, ignored otherwise.

Options:
  --delimiter TEXT  Character that starts each switch (env: RENTODAY_DELIMITER).
  --version         Show the version and exit.
  --help            Show this message and exit.
"""


def format_help(delimiter: str) -> str:
    return HELP_TEXT.format(d=delimiter)
