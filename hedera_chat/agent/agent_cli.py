import logging
import os
import sys
from typing import Any, Callable, Mapping, Optional

from dotenv import load_dotenv

from .bootstrap import bootstrap

logger = logging.getLogger(__name__)

BANNER = 'Hedera Agent CLI Chatbot — type "exit" to quit'
EXIT_COMMANDS = {"exit", "quit"}


def _is_exit(user_input: Optional[str]) -> bool:
    if not user_input:
        return True
    return user_input.strip().lower() in EXIT_COMMANDS


def _format_reply(response: Any) -> Any:
    if isinstance(response, Mapping) and response.get("output") is not None:
        return response["output"]
    return response


def _read_line(read_input: Callable[[str], str]) -> Optional[str]:
    try:
        return read_input("You: ")
    except (KeyboardInterrupt, EOFError):
        print()
        return None


def run_repl(executor, read_input: Callable[[str], str] = input) -> None:
    """Prompt, forward each line to ``executor`` and print its reply until exit."""
    print(BANNER)

    while True:
        user_input = _read_line(read_input)
        if _is_exit(user_input):
            print("Goodbye!")
            break

        try:
            response = executor.invoke({"input": user_input})
        except Exception as exc:
            logger.debug("Agent turn failed", exc_info=True)
            print(f"Error: {exc}", file=sys.stderr)
            continue

        print(f"AI: {_format_reply(response)}")


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    try:
        executor = bootstrap()
    except Exception as exc:
        logger.debug("Bootstrap failed", exc_info=True)
        print(f"Fatal error during CLI bootstrap: {exc}", file=sys.stderr)
        return 1

    run_repl(executor)
    return 0


if __name__ == "__main__":
    sys.exit(main())
