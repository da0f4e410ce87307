#!/usr/bin/env python3
"""
enerator - Markdown to HTML with highlighted code

Converts a single Markdown document to an HTML fragment. Fenced code blocks
are syntax-highlighted into <pre><code> blocks whose token spans carry
prefixed class names (default "syn-"), and matching theme stylesheets can
be listed, printed or written to disk.

Usage:
    enerator build README.md > readme.html
    enerator syntaxes
    enerator themes
    enerator css --theme monokai
    enerator css --theme monokai --directory static/css
    enerator css --directory static/css      # every theme

Each subcommand runs as a pipeline of small stages over a ProgramState:

    build:    env_check -> source_parse -> html_compile -> html_report
    syntaxes: syntaxes_report
    themes:   themes_report
    css:      css_compile -> css_write -> css_report
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from .lib import Catalog, Converter, ThemeError, __version__, LOG, state_connectToLogger
from .lib.cli import parser_build
from .models import ProgramState, pipeline


Stage = Callable[[ProgramState], ProgramState]


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate that the markdown input exists.

    Returns:
        ProgramState with inputSourceFile and envOK set

    Exits:
        1 if the input file does not exist
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = Path(state.inputFile)
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)
    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read the markdown document from disk.

    Returns:
        ProgramState with sourceText set

    Exits:
        1 if the file cannot be read or decoded
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)
    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)
    LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    return state


def html_compile(inputstate: ProgramState) -> ProgramState:
    """
    Convert the markdown document to HTML.

    Returns:
        ProgramState with htmlOutput set
    """
    state = inputstate.copy()

    LOG("Converting markdown to HTML...", level=1)
    converter = Converter(syntaxes=state.catalog.syntaxes)
    state.htmlOutput = converter.convert(state.sourceText or "")
    LOG(f"Produced {len(state.htmlOutput)} characters of HTML", level=2)
    return state


def html_report(inputstate: ProgramState) -> ProgramState:
    """Print the rendered HTML on stdout (terminal stage)"""
    state = inputstate.copy()
    print(state.htmlOutput or "", end="")
    return state


def syntaxes_report(inputstate: ProgramState) -> ProgramState:
    """Print every grammar name with its file extensions indented beneath"""
    state = inputstate.copy()
    for entry in state.catalog.syntaxes.syntaxes_list():
        print(entry.name)
        for extension in entry.extensions:
            print(f"  {extension}")
    return state


def themes_report(inputstate: ProgramState) -> ProgramState:
    """Print every theme name, one per line"""
    state = inputstate.copy()
    for name in state.catalog.themes.themes_list():
        print(name)
    return state


def css_compile(inputstate: ProgramState) -> ProgramState:
    """
    Render stylesheets for the requested theme(s).

    One theme when --theme is given; every theme when only --directory is
    given; nothing otherwise.

    Returns:
        ProgramState with cssOutputs set

    Exits:
        1 if strict mode rejects an unknown theme
    """
    state = inputstate.copy()

    names: List[str] = []
    if state.theme is not None:
        names = [state.theme]
    elif state.directory is not None:
        names = state.catalog.themes.themes_list()

    outputs: Dict[str, str] = {}
    for name in names:
        try:
            outputs[name] = state.catalog.themes.css_render(name)
        except ThemeError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        LOG(f"Rendered CSS for '{name}'", level=3)
    state.cssOutputs = outputs
    return state


def css_write(inputstate: ProgramState) -> ProgramState:
    """
    Write each stylesheet to <directory>/<theme>.css.

    The directory and its parents are created as needed. Skipped when no
    directory was requested.

    Returns:
        ProgramState with writtenFiles set

    Exits:
        1 if the directory cannot be created or a file cannot be written
    """
    state = inputstate.copy()
    if state.directory is None:
        return state

    directory = Path(state.directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Error: Cannot create directory {directory}: {e}", file=sys.stderr)
        sys.exit(1)

    written: List[Path] = []
    for name, styles in state.cssOutputs.items():
        path = directory / f"{name}.css"
        try:
            path.write_text(styles, encoding="utf-8")
        except OSError as e:
            print(f"Error: Unable to write {path}: {e}", file=sys.stderr)
            sys.exit(1)
        LOG(f"Wrote {path}", level=2)
        written.append(path)
    state.writtenFiles = written
    return state


def css_report(inputstate: ProgramState) -> ProgramState:
    """
    Report css results (terminal stage).

    Prints the stylesheet when it was not written to disk, otherwise the
    paths written.
    """
    state = inputstate.copy()
    if state.theme is None and state.directory is None:
        print("Nothing to do: give --theme and/or --directory", file=sys.stderr)
    elif state.directory is None:
        print(state.cssOutputs.get(state.theme or "", ""), end="")
    else:
        for path in state.writtenFiles:
            print(path)
    return state


PIPELINES: Dict[str, Sequence[Stage]] = {
    "build": (env_check, source_parse, html_compile, html_report),
    "syntaxes": (syntaxes_report,),
    "themes": (themes_report,),
    "css": (css_compile, css_write, css_report),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point - parse the command line and run one pipeline.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status (0); failures exit via sys.exit(1)
    """
    parser = parser_build(version=__version__)
    options = parser.parse_args(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options)
    state_connectToLogger(state)

    state.catalog = Catalog.load()
    pipeline(state, *PIPELINES[state.command])
    return 0


if __name__ == "__main__":
    sys.exit(main())
