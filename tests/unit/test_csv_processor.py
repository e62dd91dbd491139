"""Tests for tp_ingest.csv_processor — CSV driver over Database."""

from pathlib import Path

import pytest

from src.tp_common.amount import Amount
from src.tp_ingest.csv_processor import (
    ProcessResult,
    TransactionRecord,
    process_csv_file,
    process_csv_stream,
)
from src.tp_ledger.domain.database import Database


def _run(tmp_path: Path, content: str) -> ProcessResult:
    csv_file = tmp_path / "transactions.csv"
    csv_file.write_text(content)
    return process_csv_file(csv_file)


def _available(db: Database, client_id: int) -> str:
    account = db.get_account(client_id)
    assert account is not None, f"client {client_id} should have an account"
    return str(account.available)


class TestTransactionRecord:
    def test_blank_amount_is_none(self) -> None:
        rec = TransactionRecord.model_validate({"type": "dispute", "client": "1", "tx": "1", "amount": ""})
        assert rec.amount is None

    def test_client_range(self) -> None:
        with pytest.raises(ValueError):
            TransactionRecord.model_validate({"type": "deposit", "client": "65536", "tx": "1"})

    def test_tx_range(self) -> None:
        rec = TransactionRecord.model_validate({"type": "deposit", "client": "0", "tx": "4294967295"})
        assert rec.tx == 4294967295
        with pytest.raises(ValueError):
            TransactionRecord.model_validate({"type": "deposit", "client": "0", "tx": "-1"})


class TestBasicFlow:
    def test_basic_transactions(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,1,1,1.0",
            "deposit,2,2,2.0",
            "deposit,1,3,2.0",
            "withdrawal,1,4,1.5",
            "withdrawal,2,5,3.0",
        ]))
        assert len(result.errors) == 1
        assert "Insufficient funds" in result.errors[0].message
        assert result.errors[0].line == 6
        assert result.errors[0].code == 2001

        assert _available(result.database, 1) == "1.5000"
        assert _available(result.database, 2) == "2.0000"

    def test_disputes_and_chargeback(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,1,1,1.0",
            "deposit,2,2,2.0",
            "deposit,1,3,2.0",
            "withdrawal,1,4,1.5",
            "withdrawal,2,5,3.0",
            "dispute,1,1,",
            "resolve,1,1,",
            "deposit,1,6,1.0",
            "dispute,1,3,",
            "chargeback,1,3,",
        ]))
        assert len(result.errors) == 1
        account1 = result.database.get_account(1)
        assert account1 is not None
        assert account1.available == Amount.parse("0.5")
        assert account1.held == Amount.zero()
        assert account1.locked is True

    def test_empty_file(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "type,client,tx,amount\n")
        assert result.errors == []
        assert result.database.get_all_client_ids() == []

    def test_missing_amount_column_on_dispute(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "type,client,tx,amount\ndeposit,1,1,5\ndispute,1,1\n")
        assert result.errors == []
        assert str(result.database.get_account(1).held) == "5.0000"  # type: ignore[union-attr]

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "type,client,tx,amount\n\ndeposit,1,1,5\n\n")
        assert result.errors == []
        assert _available(result.database, 1) == "5.0000"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            process_csv_file(tmp_path / "nope.csv")


class TestRecordErrors:
    def test_unknown_type_and_bad_amount(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,1,1,1.0",
            "invalid_transaction,2,2,2.0",
            "deposit,1,3,abc",
            "deposit,3,4,5.0",
        ]))
        assert len(result.errors) == 2
        assert result.errors[0].line == 3
        assert "Unknown transaction type: invalid_transaction" in result.errors[0].message
        assert result.errors[1].line == 4
        assert "Invalid amount format" in result.errors[1].message
        assert _available(result.database, 1) == "1.0000"
        assert _available(result.database, 3) == "5.0000"

    def test_unparseable_ids(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,1,1,1.0",
            "deposit,not_a_number,2,2.0",
            "deposit,3,not_a_number,1.5",
            "deposit,4,3,0.5",
        ]))
        assert [e.line for e in result.errors] == [3, 4]
        assert all(e.message.startswith("Error parsing CSV at ") for e in result.errors)
        assert "client" in result.errors[0].message
        assert "tx" in result.errors[1].message
        assert all(e.code is None for e in result.errors)
        assert _available(result.database, 4) == "0.5000"

    def test_precision(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,1,1,0.0001",
            "deposit,1,2,0.9999",
            "deposit,2,3,123.45678",
            "withdrawal,1,4,1.0",
        ]))
        assert len(result.errors) == 1
        assert "Too many decimal places" in result.errors[0].message
        assert _available(result.database, 1) == "0.0000"
        # construction failed before the registry was reached
        assert result.database.get_account(2) is None

    def test_huge_amount_is_a_record_error(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,1,1," + "9" * 5000,
            "deposit,1,2,1.0",
        ]))
        assert len(result.errors) == 1
        assert result.errors[0].line == 2
        assert result.errors[0].code == 4001
        assert "Amount out of range" in result.errors[0].message
        assert _available(result.database, 1) == "1.0000"

    def test_extra_cells_rejected(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,1,1,1.0,garbage",
            "deposit,1,2,2.0",
        ]))
        assert len(result.errors) == 1
        assert result.errors[0].line == 2
        assert result.errors[0].message.startswith("Error parsing CSV at ")
        assert "5 fields" in result.errors[0].message
        account = result.database.get_account(1)
        assert account is not None
        assert not account.has_transaction(1)
        assert str(account.available) == "2.0000"

    def test_dispute_nonexistent_transaction(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "type,client,tx,amount\ndeposit,1,1,100.0\ndispute,1,999,\n")
        assert len(result.errors) == 1
        assert "Transaction not found" in result.errors[0].message
        assert result.errors[0].line == 3
        assert _available(result.database, 1) == "100.0000"

    def test_deposit_without_amount(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "type,client,tx,amount\ndeposit,1,1,\n")
        assert "Deposit requires an amount" in result.errors[0].message
        assert result.database.get_account(1) is None

    def test_message_names_source_and_line(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "type,client,tx,amount\nwithdrawal,1,1,1\n")
        err = result.errors[0]
        assert err.message == (
            f"Error processing transaction at {tmp_path / 'transactions.csv'}:2: Insufficient funds"
        )
        assert str(err) == err.message


class TestWhitespace:
    def test_spaces_after_commas(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type, client, tx, amount",
            "deposit, 1, 1, 1.0",
            "deposit, 2, 2, 2.0",
            "withdrawal, 1, 4, 0.5",
        ]))
        assert result.errors == []
        assert _available(result.database, 1) == "0.5000"
        assert _available(result.database, 2) == "2.0000"

    def test_mixed_tabs_and_spaces(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            "deposit,\t1\t,1, 100.50 ",
            "withdrawal, 1 ,2,25.25",
            "dispute,1, 1 ,",
            "resolve, 1,1,",
        ]))
        assert result.errors == []
        assert _available(result.database, 1) == "75.2500"
        assert str(result.database.get_account(1).held) == "0.0000"  # type: ignore[union-attr]

    def test_whitespace_around_types(self, tmp_path: Path) -> None:
        result = _run(tmp_path, "\n".join([
            "type,client,tx,amount",
            " deposit ,1,1,100.0",
            "\twithdrawal\t,1,2,25.0",
            " dispute ,1,1,",
            "\tresolve\t,1,1,",
            " chargeback ,1,1,",
        ]))
        assert len(result.errors) == 1
        assert "Transaction is not disputed" in result.errors[0].message
        account = result.database.get_account(1)
        assert account is not None
        assert str(account.available) == "75.0000"
        assert account.locked is False


class TestStream:
    def test_stream_source_label(self) -> None:
        result = process_csv_stream(["type,client,tx,amount\n", "withdrawal,9,1,1\n"], source="stdin")
        assert result.errors[0].source == "stdin"
        assert result.errors[0].message.startswith("Error processing transaction at stdin:2:")
