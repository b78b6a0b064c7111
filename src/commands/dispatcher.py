"""Parse command lines and run them against a Family."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import ValidationError

from src.commands.sink import ConsoleSink, OutputSink
from src.family_tree.family import Family
from src.family_tree.models import AddChildRequest, Command, RelationshipKind, ResultMessage

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """
    Runs ADD_CHILD and GET_RELATIONSHIP commands.

    Every processed command produces exactly one line on the sink:
        ADD_CHILD Flora Minerva Female      -> CHILD_ADDED
        GET_RELATIONSHIP Remus Siblings     -> NONE
    """

    def __init__(self, family: Family, sink: Optional[OutputSink] = None):
        self.family = family
        self.sink = sink or ConsoleSink()

    def submit_add_child(self, mother_name: str, child_name: str, gender: str) -> ResultMessage:
        if self.family.find_member(mother_name) is None:
            return ResultMessage.PERSON_NOT_FOUND

        try:
            request = AddChildRequest(mother_name=mother_name, child_name=child_name, gender=gender)
        except ValidationError as e:
            logger.info("Rejected ADD_CHILD %s %s %s: %s", mother_name, child_name, gender, e)
            return ResultMessage.CHILD_ADDITION_FAILED

        return self.family.add_child(request.mother_name, request.child_name, request.gender)

    def submit_get_relationship(self, person_name: str, relationship: Union[RelationshipKind, str]) -> str:
        result = self.family.get_relationship(person_name, relationship)
        if isinstance(result, ResultMessage):
            return result.value
        if not result:
            return ResultMessage.NONE.value
        return " ".join(result)

    def process_command(self, line: str) -> Optional[str]:
        """Run one command line, write its result to the sink and return it."""
        parts = line.split()
        if not parts:
            return None

        action, args = parts[0], parts[1:]
        if action == Command.ADD_CHILD.value and len(args) >= 3:
            output = self.submit_add_child(args[0], args[1], args[2]).value
        elif action == Command.GET_RELATIONSHIP.value and len(args) >= 2:
            output = self.submit_get_relationship(args[0], args[1])
        else:
            logger.warning("Invalid command: %r", line)
            output = ResultMessage.INVALID_COMMAND.value

        self.sink.write(output)
        return output

    def process_commands(self, lines: Iterable[str]) -> list[str]:
        results = []
        for line in lines:
            output = self.process_command(line)
            if output is not None:
                results.append(output)
        return results

    def process_file(self, path: Union[str, Path]) -> list[str]:
        text = Path(path).read_text(encoding="utf-8")
        return self.process_commands(text.splitlines())
