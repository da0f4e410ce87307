"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the command pipelines (state bus pattern).

    Each subcommand runs a pipeline of stages; every stage receives the
    state produced by the previous one and returns a new copy with its own
    fields filled in.

    Pipeline stages and their state additions:
        - Initial: command, verbosity, inputFile, theme, directory, catalog
        - env_check: inputSourceFile, envOK
        - source_parse: sourceText
        - html_compile: htmlOutput
        - css_compile: cssOutputs
        - css_write: writtenFiles
        - results_report: (no additions, terminal stage)

    Attributes:
        command: Selected subcommand ("build", "syntaxes", "themes", "css")
        verbosity: Logging verbosity level (0-3)
        inputFile: Markdown input path for "build"
        theme: Theme name for "css"
        directory: Output directory for "css"
        catalog: Shared read-only syntax/theme catalog
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the markdown input
        sourceText: Raw markdown document
        htmlOutput: Rendered HTML fragment
        cssOutputs: Theme name -> stylesheet text
        writtenFiles: CSS files written to disk
    """

    # CLI arguments
    command: str = field(default="")
    verbosity: int = field(default=0)
    inputFile: str = field(default="")
    theme: Optional[str] = field(default=None)
    directory: Optional[str] = field(default=None)
    catalog: Optional[Any] = field(default=None)  # Catalog at runtime

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    sourceText: Optional[str] = field(default=None)
    htmlOutput: Optional[str] = field(default=None)
    cssOutputs: Dict[str, str] = field(default_factory=dict)
    writtenFiles: List[Path] = field(default_factory=list)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, **extra: Any
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Options that do not correspond to a ProgramState field are ignored.
        Keyword arguments override values taken from the namespace.

        Args:
            options: Parsed CLI arguments
            **extra: Explicit field values (e.g., catalog=...)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {
            k: v for k, v in options_dict.items() if k in valid_fields and v is not None
        }
        merged_args = {**filtered_options, **extra}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_parse,
            html_compile,
            results_report
        )

    This is equivalent to:
        results_report(html_compile(source_parse(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
