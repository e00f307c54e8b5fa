"""
Name: Intent parser.
Description: Maps short free-text commands such as "Search livery op msfs sdk" onto structured operations. Matching is a small ordered table of whole-string, case-insensitive patterns; the first rule that matches wins.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Tuple

from ..constants import DEFAULT_INTENT_LIMIT
from ..models import CommandTool, ParsedCommand, PathCategory, ScopeCategory

logger = logging.getLogger(__name__)

_CATEGORY_ALTERNATION = "|".join(category.value for category in PathCategory)


@dataclass(frozen=True)
class IntentRule:
    """A command pattern and the operation it maps to."""

    name: str
    pattern: Pattern[str]
    build: Callable[[re.Match], ParsedCommand]


def _search_everywhere(match: re.Match) -> ParsedCommand:
    return ParsedCommand(
        tool=CommandTool.SEARCH,
        arguments={
            "query": match.group(1),
            "category": ScopeCategory.ALL.value,
            "limit": DEFAULT_INTENT_LIMIT,
        },
    )


def _get_content(match: re.Match) -> ParsedCommand:
    return ParsedCommand(tool=CommandTool.GET_CONTENT, arguments={"url": match.group(1)})


def _list_categories(match: re.Match) -> ParsedCommand:
    return ParsedCommand(tool=CommandTool.LIST_CATEGORIES, arguments={})


def _search_in_category(match: re.Match) -> ParsedCommand:
    return ParsedCommand(
        tool=CommandTool.SEARCH,
        arguments={
            "query": match.group(1),
            "category": match.group(2).lower(),
            "limit": DEFAULT_INTENT_LIMIT,
        },
    )


INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(
        name="search-msfs-sdk",
        pattern=re.compile(r"Search\s+(.+?)\s+op\s+msfs\s+sdk\s*", re.IGNORECASE),
        build=_search_everywhere,
    ),
    IntentRule(
        name="get-content",
        pattern=re.compile(r"Get\s+content\s+for\s+(https?://.+)", re.IGNORECASE),
        build=_get_content,
    ),
    IntentRule(
        name="list-categories",
        pattern=re.compile(r"(?:list|show) categories", re.IGNORECASE),
        build=_list_categories,
    ),
    IntentRule(
        name="search-in-category",
        pattern=re.compile(
            rf"Search\s+(.+?)\s+in\s+({_CATEGORY_ALTERNATION})", re.IGNORECASE
        ),
        build=_search_in_category,
    ),
)


class IntentParser:
    """Parses free-text commands into ParsedCommand objects."""

    def __init__(self, rules: Tuple[IntentRule, ...] = INTENT_RULES):
        self.rules = rules

    def parse(self, command: str) -> Optional[ParsedCommand]:
        """Parse a command.

        Args:
            command: Free-text command

        Returns:
            The parsed command, or None if no rule matches
        """
        for rule in self.rules:
            match = rule.pattern.fullmatch(command)
            if match:
                logger.debug(f"Command {command!r} matched rule {rule.name}")
                return rule.build(match)

        logger.debug(f"Command {command!r} matched no rule")
        return None
