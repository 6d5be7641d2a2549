"""Terminal front-end for the chat widget, useful against a local server."""
import argparse
import asyncio
import logging
from pathlib import Path

from .storage import FileStorage
from .store import ConversationStore
from .widget import DEFAULT_API_URL, ChatWidget, HttpChatTransport

logging.basicConfig(level=logging.WARNING, format="%(message)s")


def _print_new(widget: ChatWidget, seen: int) -> int:
    for item in widget.view.items[seen:]:
        if item.kind != "typing":
            print(f"[{item.role}] {item.html}")
    return len(widget.view.items)


async def run(api_url: str, storage_path: Path) -> None:
    store = ConversationStore(FileStorage(storage_path))
    widget = ChatWidget(store, HttpChatTransport(api_url), typing_delay=0)
    widget.start()
    seen = _print_new(widget, 0)

    while True:
        try:
            message = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        await widget.send_message(message)
        seen = _print_new(widget, seen)


def main():
    parser = argparse.ArgumentParser(description="Linkwave chat widget (terminal)")
    parser.add_argument("--api-url", default=DEFAULT_API_URL, help="Chat endpoint URL")
    parser.add_argument(
        "--storage",
        type=Path,
        default=Path.home() / ".linkwave_chatbot" / "storage.json",
        help="File used as the widget's local storage",
    )
    args = parser.parse_args()
    asyncio.run(run(args.api_url, args.storage))


if __name__ == "__main__":
    main()
