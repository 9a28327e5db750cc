# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    TyperGroup whose commands are registered as "name, alias" and can be
    invoked by either part, e.g. "exec" or "x" for "exec, x".
    """

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._resolve_alias(cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[Optional[str], Optional[click.Command], list[str]]:
        # Report the full registered name so help and errors stay consistent
        _, cmd, remaining = super().resolve_command(ctx, args)
        return cmd.name if cmd is not None else None, cmd, remaining

    def _resolve_alias(self, cmd_name: str) -> str:
        for name in self.commands:
            if cmd_name in self._CMD_SPLIT_P.split(name):
                return name
        return cmd_name
