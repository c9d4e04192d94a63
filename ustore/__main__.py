import argparse
import logging

from typing import Optional

from . import add, create_store, reduce, reset, subtract


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ustore",
        description="Run the counter store through add, subtract and reset"
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="logging level, default: %(default)s"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level)

    store = create_store(reduce)

    print("State:", store.get_state().count)
    store.dispatch(add())
    store.dispatch(add())
    print("State:", store.get_state().count)
    store.dispatch(subtract())
    print("State:", store.get_state().count)
    store.dispatch(reset())
    print("State:", store.get_state().count)


if __name__ == "__main__":
    main()
