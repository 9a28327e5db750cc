# SPDX-License-Identifier: MIT

import re
from typing import Optional

PREFIX_PRIORITY = "p/"
PREFIX_STATUS = "s/"
PREFIX_NOTE = "n/"
PREFIX_DEADLINE = "d/"
PREFIX_TAG = "t/"


class ArgumentTokenizer:
    """
    Split an argument string into a preamble and prefixed values.

    Example with prefixes "p/" and "t/":

        "Buy milk p/hi t/home t/errand"

    preamble: "Buy milk"
    "p/": ["hi"]
    "t/": ["home", "errand"]

    A prefix only counts at the start of the string or right after whitespace,
    so "a/b" inside a word and prefixes that were not registered stay part of
    the surrounding value.
    """

    def __init__(self, *prefixes: str) -> None:
        self.prefixes = prefixes
        self._preamble: Optional[str] = None
        self._values: dict[str, list[str]] = {}

    def tokenize(self, args: str) -> None:
        self._preamble = None
        self._values = {}

        positions = self.__find_prefix_positions(args)

        preamble_end = positions[0][0] if positions else len(args)
        self.__save_preamble(args[:preamble_end])

        for index, (start, prefix) in enumerate(positions):
            value_start = start + len(prefix)
            value_end = (
                positions[index + 1][0] if index + 1 < len(positions) else len(args)
            )
            self._values.setdefault(prefix, []).append(
                args[value_start:value_end].strip()
            )

    def get_preamble(self) -> Optional[str]:
        return self._preamble

    def get_value(self, prefix: str) -> Optional[str]:
        """Last value given for the prefix, or None if it never appeared."""
        values = self.get_all_values(prefix)
        if values is None:
            return None
        return values[-1]

    def get_all_values(self, prefix: str) -> Optional[list[str]]:
        """All values given for the prefix in input order, or None if absent."""
        if prefix not in self._values:
            return None
        return list(self._values[prefix])

    def __save_preamble(self, preamble: str) -> None:
        trimmed = preamble.strip()
        if trimmed:
            self._preamble = trimmed

    def __find_prefix_positions(self, args: str) -> list[tuple[int, str]]:
        positions: list[tuple[int, str]] = []
        for prefix in self.prefixes:
            for match in re.finditer(rf"(?:(?<=\s)|^){re.escape(prefix)}", args):
                positions.append((match.start(), prefix))
        positions.sort()
        return positions
