"""Console input/output for questcalc.

Every answer the program needs goes through :meth:`IOManager.resolve`, which
reads from a macro file while one is loaded and from the terminal otherwise,
strips comments, answers ``help`` and re-prompts until the input is valid.
Callers therefore never see malformed answers.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path

from questcalc.console.help_text import hero_input_help, lineup_input_help
from questcalc.console.input_source import InteractiveSource, ScriptedSource
from questcalc.domain.enums import OutputLevel, QueryType
from questcalc.domain.lineup import make_army_from_strings, parse_hero_string, parse_instances
from questcalc.domain.models import Army, Instance, MonsterHandle
from questcalc.domain.results import ParseFailure
from questcalc.domain.rules_config import DEFAULT_RULES, RulesConfig
from questcalc.domain.session import SessionContext
from questcalc.interfaces.input_source import IInputSource
from questcalc.utils.text import split, to_lower

logger = logging.getLogger(__name__)

# Consecutive empty lines that end hero input.
HERO_INPUT_CANCEL_LINES = 2


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class IOManager:
    """Resilient query engine and verbosity-gated output channel.

    A scripted ``source`` is used until it runs dry; from then on every query
    reads from the interactive source.  The switch never reverts.
    """

    def __init__(
        self,
        rules: RulesConfig = DEFAULT_RULES,
        *,
        output_level: OutputLevel = OutputLevel.BASIC_OUTPUT,
        source: IInputSource | None = None,
        interactive: IInputSource | None = None,
        writer: Callable[[str], None] | None = None,
    ) -> None:
        self.rules = rules
        self.output_level = output_level
        self._interactive: IInputSource = interactive or InteractiveSource()
        self._source: IInputSource = source if source is not None else self._interactive
        if not self._source.scripted:
            self._interactive = self._source
        self._write = writer or _write_stdout

    @property
    def using_macro_file(self) -> bool:
        return self._source.scripted

    def should_output(self, urgency: OutputLevel) -> bool:
        return self.output_level >= urgency

    def output_message(
        self, message: str, urgency: OutputLevel = OutputLevel.BASIC_OUTPUT, *, linebreak: bool = True
    ) -> None:
        if self.should_output(urgency):
            self._write(message + ("\n" if linebreak else ""))

    def init_macro_file(self, path: Path | str, show_input: bool = True) -> None:
        """Read answers from the macro file at ``path`` until it is exhausted."""

        try:
            self._source = ScriptedSource.from_file(path, echo=show_input)
        except OSError as exc:
            logger.warning("cannot read macro file %s: %s", path, exc)
            self._write("Could not find Macro File. Switching to Manual Input.\n")
            self._source = self._interactive
            return
        logger.info("reading input from macro file %s", path)

    def _show_queries(self) -> bool:
        return not self._source.scripted or self._source.echo

    def resolve(self, query: str, help_text: str, query_type: QueryType) -> str:
        """Ask ``query`` until the answer is acceptable for ``query_type``.

        Returns the lower-cased, comment-stripped line for ``RAW`` queries and
        its first token for every other type.  ``help`` prints ``help_text``
        and asks again.
        """
        grammar = self.rules.grammar
        while True:
            line: str | None = None
            if self._source.scripted:
                line = self._source.next_line()
                if line is None:
                    logger.info("macro file exhausted, switching to manual input")
                    self._source = self._interactive

            if self._show_queries():
                self._write(query)
            if line is None:
                line = self._interactive.next_line()
                if line is None:
                    raise EOFError("interactive input returned no line")

            input_string = split(to_lower(line), grammar.comment_delimiter)[0]
            first_token = split(input_string, grammar.token_separator)[0]
            if self._source.scripted and self._source.echo:
                self._write(input_string + "\n")

            if first_token == grammar.help_token:
                self._write(help_text)
                continue

            if query_type == QueryType.QUESTION:
                if first_token in (grammar.positive_answer, grammar.negative_answer):
                    return first_token
            elif query_type == QueryType.INTEGER:
                try:
                    int(first_token)
                except ValueError:
                    continue
                return first_token
            elif query_type == QueryType.RAW:
                return input_string
            elif query_type == QueryType.RAW_FIRST:
                return first_token

    def ask_yes_no_question(
        self,
        question_message: str,
        help_text: str,
        urgency: OutputLevel = OutputLevel.CMD_OUTPUT,
        default_answer: str | None = None,
    ) -> bool:
        """Ask a y/n question, or answer ``default_answer`` when output is suppressed.

        Raises:
            ValueError: If the answer is neither the positive nor the negative token
        """
        grammar = self.rules.grammar
        if default_answer is None:
            default_answer = grammar.negative_answer

        if not self.should_output(urgency):
            answer = default_answer
        else:
            answer = self.resolve(
                f"{question_message} ({grammar.positive_answer}/{grammar.negative_answer}): ",
                help_text,
                QueryType.QUESTION,
            )

        if answer == grammar.negative_answer:
            return False
        if answer == grammar.positive_answer:
            return True
        raise ValueError(f"unexpected answer {answer!r} to a yes/no question")

    def ask_integer(self, query: str, help_text: str) -> int:
        return int(self.resolve(query, help_text, QueryType.INTEGER))

    def halt_execution(self) -> None:
        """Wait for enter so a double-clicked console window stays open."""

        if self.should_output(OutputLevel.CMD_OUTPUT):
            self._write("Press enter to exit...")
            with suppress(EOFError):
                self._interactive.next_line()

    def take_hero_level_input(self, session: SessionContext) -> list[MonsterHandle]:
        """Collect the player's heroes one per line.

        Unparseable heroes are skipped.  Input ends with ``done`` or two
        consecutive empty lines.
        """
        grammar = self.rules.grammar
        help_text = hero_input_help(grammar)
        heroes: list[MonsterHandle] = []

        if self._show_queries():
            self._write("\nEnter your Heroes with levels. Press enter after every Hero.\n")
            self._write(
                f"Press enter twice or type {grammar.done_token} to proceed without inputting "
                "additional Heroes.\n"
            )

        cancel_counter = 0
        while True:
            token = self.resolve(f"Enter Hero {len(heroes) + 1}: ", help_text, QueryType.RAW_FIRST)
            if token == "":
                cancel_counter += 1
            else:
                cancel_counter = 0
                if token == grammar.done_token:
                    return heroes
                parsed = parse_hero_string(session, token)
                if isinstance(parsed, ParseFailure):
                    logger.debug("skipping hero %r: %s", token, parsed.detail)
                else:
                    hero, level = parsed
                    heroes.append(session.add_leveled_hero(hero, level))
            if cancel_counter >= HERO_INPUT_CANCEL_LINES:
                return heroes

    def take_instance_input(self, session: SessionContext, prompt: str) -> list[Instance]:
        """Read one line of instances; any bad instance discards the whole line."""

        help_text = lineup_input_help(self.rules.grammar)
        while True:
            line = self.resolve(prompt, help_text, QueryType.RAW)
            instances = parse_instances(session, line)
            if isinstance(instances, ParseFailure):
                logger.debug("discarding instance input %r: %s", line, instances.detail)
                continue
            return instances

    def take_army_input(self, session: SessionContext, prompt: str, help_text: str, max_size: int) -> Army:
        """Read a single free-form lineup of at most ``max_size`` monsters."""

        while True:
            line = self.resolve(prompt, help_text, QueryType.RAW)
            army = make_army_from_strings(session, split(line, self.rules.grammar.element_separator))
            if isinstance(army, ParseFailure):
                logger.debug("discarding lineup %r: %s", line, army.detail)
                continue
            if army.monster_amount > max_size:
                logger.debug("discarding lineup %r: more than %d monsters", line, max_size)
                continue
            return army
