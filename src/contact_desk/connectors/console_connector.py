# src/contact_desk/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging

from rich.console import Console, RenderableType
from rich.panel import Panel

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .render import render_contacts, render_error

logger = logging.getLogger(__name__)


async def _read_line(prompt: str) -> str:
    # input() blocks; run it off-loop so debounce timers keep firing.
    return await asyncio.to_thread(input, prompt)


async def run_console_loop(state: AppState, console: Console | None = None) -> None:
    console = console or Console()
    app_name = str(getattr(state.settings, "app_name", "contact-desk"))
    logger.info("Console connector started.")

    console.print(
        Panel.fit(
            f"[bold]{app_name}[/]  Contacts & Tasks\n"
            "[dim]Type /help for commands, /exit to quit.[/]",
            border_style="blue",
        )
    )

    def emit(renderable: RenderableType) -> None:
        console.print(renderable)

    if state.error:
        console.print(render_error(state.error))
    else:
        console.print(render_contacts(state))

    while True:
        try:
            user_input = (await _read_line(">>> ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Plain text is a search, like typing into the search box.
            user_input = f"/search {user_input}"

        try:
            response = await command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "[red]Internal error while handling a command.[/]"

        if response is not None and response != "":
            console.print(response)

        if state.error:
            console.print(render_error(state.error))

    logger.info("Console connector finished.")
