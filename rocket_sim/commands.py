"""
Rocket Ascent Simulator - Command Router

Maps operator command names to handlers. A handler receives the full token
list (the command name is ``args[0]``) and the context, and dispatches onto
context operations; context failures propagate unchanged.
"""

import logging
from typing import Callable, Dict, List

from .context import RocketContext
from .errors import InvalidArgumentError, UnknownCommandError

logger = logging.getLogger(__name__)

CommandHandler = Callable[[List[str], RocketContext], None]


class CommandRouter:
    """Registry of command handlers bound to one context."""

    def __init__(self, context: RocketContext):
        self.context = context
        self._commands: Dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler):
        """Register a handler; an existing name is replaced."""
        if name in self._commands:
            logger.warning(f"Replacing handler for command '{name}'")
        self._commands[name] = handler

    @property
    def commands(self) -> List[str]:
        """Registered command names in registration order."""
        return list(self._commands)

    def handle(self, raw_input: str):
        """
        Parse one input line and dispatch it.

        Blank input is ignored.

        Raises:
            UnknownCommandError: if the first token is not registered
        """
        args = raw_input.split()
        if not args:
            return
        handler = self._commands.get(args[0])
        if handler is None:
            raise UnknownCommandError(args[0])
        logger.debug(f"Dispatching {args}")
        handler(args, self.context)


# =============================================================================
# Default command set
# =============================================================================

def start_checks(args: List[str], context: RocketContext):
    context.checks()


def launch(args: List[str], context: RocketContext):
    context.launch()


def fast_forward(args: List[str], context: RocketContext):
    if len(args) < 2:
        raise InvalidArgumentError("fast_forward <seconds>")
    context.fast_forward(args[1])


def tick(args: List[str], context: RocketContext):
    context.tick()


def exit_simulation(args: List[str], context: RocketContext):
    raise SystemExit(0)


def create_default_router(context: RocketContext) -> CommandRouter:
    """Build a router with the standard operator commands."""
    router = CommandRouter(context)
    router.register("start_checks", start_checks)
    router.register("launch", launch)
    router.register("fast_forward", fast_forward)
    router.register("tick", tick)
    router.register("exit", exit_simulation)
    router.register(
        "help",
        lambda args, ctx: ctx.info("Commands: " + ", ".join(router.commands)),
    )
    return router
