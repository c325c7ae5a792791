# SPDX-License-Identifier: MIT

from yeardots.cleanup import register_cleanup
from yeardots.initialize import initialize
from yeardots.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
