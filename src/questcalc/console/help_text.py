"""Help texts shown when the user answers a query with the help token."""

from __future__ import annotations

from questcalc.domain.rules_config import DEFAULT_RULES, GrammarRules


def hero_input_help(grammar: GrammarRules = DEFAULT_RULES.grammar) -> str:
    sep = grammar.herolevel_separator
    return (
        "\n"
        f"Enter one hero per line as <name>{sep}<level>, for example ladyoftwilight{sep}5.\n"
        "Hero names are written without spaces. Unknown heroes are ignored.\n"
        f"Type {grammar.done_token} or press enter twice when all heroes are entered.\n"
        "\n"
    )


def lineup_input_help(grammar: GrammarRules = DEFAULT_RULES.grammar) -> str:
    return (
        "\n"
        f"Enter a lineup as monster names separated by '{grammar.element_separator}' in battle order,\n"
        f"for example a1{grammar.element_separator}w2{grammar.element_separator}"
        f"nebra{grammar.herolevel_separator}10. Heroes need a level.\n"
        f"Quests can be entered as {grammar.quest_prefix}<number>{grammar.quest_number_separator}<stage>, "
        f"for example {grammar.quest_prefix}12{grammar.quest_number_separator}3.\n"
        "Several instances can be entered at once, separated by spaces.\n"
        "\n"
    )


def solution_input_help(grammar: GrammarRules = DEFAULT_RULES.grammar) -> str:
    return (
        "\n"
        f"Enter the lineup that beats the target, separated by '{grammar.element_separator}'.\n"
        "It may not use more monsters than the instance allows.\n"
        "\n"
    )


def continue_help(grammar: GrammarRules = DEFAULT_RULES.grammar) -> str:
    return (
        "\n"
        f"Answer {grammar.positive_answer} to enter more instances, "
        f"{grammar.negative_answer} to finish.\n"
        "\n"
    )
