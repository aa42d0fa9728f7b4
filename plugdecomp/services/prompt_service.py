"""
Prompt Service - Interactive questions that produce PluginData

Each question re-asks until the answer is usable. Selection questions
accept either an exact choice or a filter query that narrows the list down
to a single entry.
"""
from pathlib import Path
from typing import Callable, List, Sequence

from plugdecomp.config import JAVA_VERSIONS
from plugdecomp.schemas import PluginData, Internals, Mapping
from plugdecomp.services.version_service import VersionFetchError

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


def filter_by_substring(query: str, items: Sequence[str]) -> List[str]:
    """Case-insensitive substring filter; an empty query keeps everything"""
    if not query:
        return list(items)
    query = query.lower()
    return [item for item in items if query in item.lower()]


def filter_by_minimum(query: str, items: Sequence[int]) -> List[int]:
    """Keep versions >= the query number; a non-numeric query keeps everything"""
    try:
        minimum = int(query)
    except ValueError:
        return list(items)
    return [item for item in items if item >= minimum]


class PromptSession:
    """
    PromptSession - Asks the questions on a terminal

    Args:
        input_fn: Reads one answer given a prompt string
        output_fn: Prints a line
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def ask_text(self, question: str) -> str:
        while True:
            answer = self.input_fn(f"{question} ").strip()
            if answer:
                return answer
            self.output_fn("Please enter a value.")

    def ask_confirm(self, question: str) -> bool:
        while True:
            answer = self.input_fn(f"{question} (y/n) ").strip().lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self.output_fn("Please answer y or n.")

    def ask_choice(self, question: str, choices: Sequence[str], query_filter=filter_by_substring) -> str:
        """Pick one of `choices`; the typed text is matched exactly or used as a filter"""
        self.output_fn(question)
        self.output_fn("  " + ", ".join(choices))
        while True:
            answer = self.input_fn("> ").strip()
            if answer in choices:
                return answer

            matches = query_filter(answer, choices)
            if len(matches) == 1:
                return matches[0]
            if matches:
                self.output_fn("  " + ", ".join(matches))
            else:
                self.output_fn("No match, try again.")

    def collect_plugin_data(self, jarfile: Path, output_dir: Path, versions: Sequence[str]) -> PluginData:
        """
        Ask every question and build a validated PluginData

        Args:
            jarfile: Input jar from the command line
            output_dir: Output directory from the command line
            versions: Minecraft versions to offer

        Raises:
            VersionFetchError: If there are no versions to choose from
            pydantic.ValidationError: If the answers do not form valid PluginData
        """
        if not versions:
            raise VersionFetchError("No Minecraft versions available to choose from")

        name = self.ask_text("What is the name of the project?")
        version = self.ask_choice("What Minecraft version does it use?", list(versions))

        java_choices = [str(v) for v in JAVA_VERSIONS]
        java_version = self.ask_choice(
            "What Java version does it use?",
            java_choices,
            query_filter=lambda query, items: [
                str(v) for v in filter_by_minimum(query, [int(i) for i in items])
            ]
        )

        internals = None
        if self.ask_confirm("Does this plugin use internals?"):
            # ask_choice only returns one of the offered values
            answer = self.ask_choice("What mappings does this plugin use?", [str(m) for m in Mapping])
            internals = Internals(mapping=Mapping.parse(answer))

        return PluginData(
            name=name,
            java_version=int(java_version),
            jarfile=jarfile,
            output_dir=output_dir,
            version=version,
            internals=internals
        )


__all__ = ["PromptSession", "filter_by_substring", "filter_by_minimum"]
