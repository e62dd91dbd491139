"""CSV driver: reads transaction records and feeds them to a Database.

Expected header (column order is free, names are whitespace-trimmed):
    type,client,tx,amount

A bad record never stops the run. Each failure is collected as a
RecordError carrying the file line number (header = line 1) and
processing continues with the next record.
"""

import csv
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.tp_common.errors import AppError
from src.tp_ledger.domain.database import Database
from src.tp_ledger.domain.models import MAX_CLIENT_ID, MAX_TX_ID
from src.tp_ledger.domain.transaction import parse_transaction

logger = logging.getLogger(__name__)

_WHITESPACE = " \t"


class TransactionRecord(BaseModel):
    type: str
    client: int = Field(..., ge=0, le=MAX_CLIENT_ID)
    tx: int = Field(..., ge=0, le=MAX_TX_ID)
    amount: str | None = None  # absent for dispute / resolve / chargeback

    @field_validator("amount")
    @classmethod
    def blank_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip(_WHITESPACE):
            return None
        return v


@dataclass
class RecordError:
    source: str
    line: int
    message: str
    code: int | None = None  # AppError code; None for CSV parse failures

    def __str__(self) -> str:
        return self.message


@dataclass
class ProcessResult:
    database: Database
    errors: list[RecordError] = field(default_factory=list)


def _validation_detail(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def process_record(database: Database, record: TransactionRecord) -> None:
    """Build the transaction and apply it. Raises AppError on rejection."""
    transaction = parse_transaction(record.type, record.amount)
    database.process_transaction(record.client, record.tx, transaction)


def process_csv_stream(lines: Iterable[str], source: str = "<stream>") -> ProcessResult:
    result = ProcessResult(database=Database())
    reader = csv.reader(lines)

    header: list[str] | None = None
    processed = 0
    for row in reader:
        line_number = reader.line_num
        cells = [cell.strip(_WHITESPACE) for cell in row]
        if not any(cells):
            continue
        if header is None:
            header = cells
            continue

        # Short rows are fine (trailing amount omitted); extra cells are not
        if len(cells) > len(header):
            result.errors.append(RecordError(
                source=source,
                line=line_number,
                message=(
                    f"Error parsing CSV at {source}:{line_number}: found record with "
                    f"{len(cells)} fields, but the header has {len(header)} fields"
                ),
            ))
            continue

        try:
            record = TransactionRecord.model_validate(dict(zip(header, cells)))
        except ValidationError as exc:
            result.errors.append(RecordError(
                source=source,
                line=line_number,
                message=f"Error parsing CSV at {source}:{line_number}: {_validation_detail(exc)}",
            ))
            continue

        try:
            process_record(result.database, record)
        except AppError as exc:
            result.errors.append(RecordError(
                source=source,
                line=line_number,
                message=f"Error processing transaction at {source}:{line_number}: {exc.message}",
                code=exc.code,
            ))
            continue
        processed += 1

    logger.info(
        "Processed %s: %d applied, %d rejected, %d accounts",
        source, processed, len(result.errors), len(result.database),
    )
    return result


def process_csv_file(file_path: str | Path) -> ProcessResult:
    """Raises OSError if the file cannot be opened; record errors are collected."""
    path = Path(file_path)
    with path.open(newline="", encoding="utf-8") as fh:
        return process_csv_stream(fh, source=str(file_path))
