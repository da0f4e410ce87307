"""
Command-line parser built from a YAML definition.

The command surface (global flags, subcommands and their arguments) is
declared in cli.yml next to the package and turned into an argparse parser
here. Each argument entry supports:

    name      positional name, or option name when "long" is given
    short     single-letter option (-x)
    long      long option (--xxx)
    dest      attribute name on the parsed namespace
    action    argparse action ("count", "store_true", ...)
    default   default value
    metavar   placeholder shown in usage
    help      help text
"""

from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


CLI_SPEC_PATH = Path(__file__).parent.parent / "cli.yml"


class CliSpecError(Exception):
    """Raised when the CLI definition file cannot be loaded or is malformed"""
    pass


def spec_load(path: Path = CLI_SPEC_PATH) -> Dict[str, Any]:
    """Load and parse the CLI definition"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            spec: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CliSpecError(f"Failed to parse {path.name}: {e}")
    except OSError as e:
        raise CliSpecError(f"Failed to load {path.name}: {e}")

    if not isinstance(spec, dict) or "name" not in spec:
        raise CliSpecError(f"{path.name} must be a mapping with a 'name' key")
    return spec


def argument_add(container: Any, arg: Dict[str, Any]) -> None:
    """Add one argument entry to a parser or subparser"""
    if "name" not in arg:
        raise CliSpecError(f"Argument entry without a name: {arg}")

    flags: List[str] = []
    if "short" in arg:
        flags.append(f"-{arg['short']}")
    if "long" in arg:
        flags.append(f"--{arg['long']}")

    kwargs: Dict[str, Any] = {}
    for key in ("action", "default", "metavar", "help"):
        if key in arg:
            kwargs[key] = arg[key]

    if flags:
        kwargs["dest"] = arg.get("dest", arg["name"])
        container.add_argument(*flags, **kwargs)
    else:
        if "dest" in arg:
            kwargs["metavar"] = kwargs.get("metavar", arg["name"])
        container.add_argument(arg.get("dest", arg["name"]), **kwargs)


def parser_build(spec: Optional[Dict[str, Any]] = None, version: str = "") -> ArgumentParser:
    """
    Build the argparse parser described by the CLI definition.

    Args:
        spec: Parsed definition (loaded from cli.yml when omitted)
        version: Version string for -V/--version

    Returns:
        ArgumentParser whose namespace carries the chosen subcommand in
        "command"
    """
    spec = spec if spec is not None else spec_load()

    parser = ArgumentParser(
        prog=spec["name"],
        description=spec.get("about", ""),
        formatter_class=ArgumentDefaultsHelpFormatter,
    )
    for arg in spec.get("args") or []:
        argument_add(parser, arg)
    if version:
        parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {version}")

    subcommands = spec.get("subcommands") or []
    if subcommands:
        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
        for sub in subcommands:
            if "name" not in sub:
                raise CliSpecError(f"Subcommand entry without a name: {sub}")
            subparser = subparsers.add_parser(
                sub["name"],
                help=sub.get("about", ""),
                description=sub.get("about", ""),
                formatter_class=ArgumentDefaultsHelpFormatter,
            )
            for arg in sub.get("args") or []:
                argument_add(subparser, arg)
    return parser
