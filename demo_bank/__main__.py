"""Start the account service for the configured account.

Run one process per account, e.g. the sender and the recipient::

    BANK_ACCOUNT_NAME=Tom BANK_PORT=8888 python -m demo_bank
    BANK_ACCOUNT_NAME=Ted BANK_PORT=8889 python -m demo_bank
"""

import uvicorn

from demo_bank.app.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "demo_bank.app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
