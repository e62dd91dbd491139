"""Account snapshot report: client,available,held,total,locked."""

import csv
from typing import TextIO

from src.tp_ledger.domain.database import Database

REPORT_HEADER: tuple[str, ...] = ("client", "available", "held", "total", "locked")


def write_account_report(database: Database, out: TextIO) -> int:
    """Write one row per account in ascending client id. Returns the row count."""
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(REPORT_HEADER)
    rows = 0
    for client_id, account in database.accounts_sorted():
        writer.writerow([
            client_id,
            str(account.available),
            str(account.held),
            str(account.total),
            "true" if account.locked else "false",
        ])
        rows += 1
    return rows
