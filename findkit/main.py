"""Application entrypoint."""

from __future__ import annotations

import asyncio
import sys

import httpx

from findkit.config import get_settings
from findkit.domain.session import SearchSession
from findkit.logging import configure_logging, logger
from findkit.services.backend import HttpBackendLink
from findkit.services.context import LoopContext
from findkit.services.controller import SearchController
from findkit.services.dispatcher import ActionDispatcher
from findkit.ui.console import ConsoleHost
from findkit.ui.panel import FindPanel


def handle_line(line: str, panel: FindPanel, dispatcher: ActionDispatcher) -> bool:
    """Apply one console command. Returns False when the session should end."""

    command = line.strip()
    if not command:
        return True
    if command == "quit":
        return False
    if command.startswith("find "):
        panel.on_submit(command[len("find "):])
    elif command == "ignore-case":
        logger.info("ignore_case_toggled", ignore_case=panel.on_toggle_ignore_case())
    elif command == "wrap-around":
        logger.info("wrap_around_toggled", wrap_around=panel.on_toggle_wrap_around())
    elif command == "cancel":
        panel.on_cancel()
    else:
        dispatcher.dispatch(command)
    return True


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    host = ConsoleHost()
    session = SearchSession(
        case_sensitive=settings.default_case_sensitive,
        wrap_around=settings.default_wrap_around,
    )
    async with httpx.AsyncClient() as client:
        link = HttpBackendLink(client, settings.backend)
        controller = SearchController(host, link, LoopContext(), session=session)
        dispatcher = ActionDispatcher(controller)
        panel = FindPanel(controller)

        logger.info(
            "findkit_starting",
            environment=settings.environment,
            backend=str(settings.backend.url),
        )
        try:
            while True:
                line = await asyncio.to_thread(sys.stdin.readline)
                if not line or not handle_line(line, panel, dispatcher):
                    break
        finally:
            await link.aclose()
        logger.info("findkit_stopped", pending=link.pending)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
