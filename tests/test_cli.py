"""Tests for the command-line interface."""

import json
import re

import pytest

from pennywise.cli.main import cli

ID_PATTERN = re.compile(r"ID: ([0-9a-f-]{36})")


def extract_id(output: str) -> str:
    match = ID_PATTERN.search(output)
    assert match is not None, output
    return match.group(1)


@pytest.fixture
def run(cli_runner, temp_db):
    """Invoke the CLI against the temporary database."""

    def invoke(*args):
        return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])

    return invoke


@pytest.fixture
def jane(run):
    result = run("user", "create", "Jane Doe", "--email", "Jane@Example.com", "--password", "secret123")
    assert result.exit_code == 0, result.output
    return extract_id(result.output)


def add_expense(run, *extra):
    return run(
        "transaction", "add",
        "--user", "jane@example.com",
        "--amount", "50.00",
        "--type", "expense",
        "--description", "Lunch",
        "--date", "2024-01-15",
        *extra,
    )


class TestUserCommands:
    """Tests for user and login commands."""

    def test_create_user(self, run):
        result = run("user", "create", "Jane Doe", "--email", "Jane@Example.com", "--password", "secret123")
        assert result.exit_code == 0
        assert "Created user 'Jane Doe' <jane@example.com>" in result.output

    def test_duplicate_email(self, run, jane):
        result = run("user", "create", "Jane", "--email", "jane@example.com", "--password", "secret456")
        assert result.exit_code == 1
        assert "Error: User with email jane@example.com already exists" in result.output

    def test_login(self, run, jane):
        result = run("login", "--email", "JANE@example.com", "--password", "secret123")
        assert result.exit_code == 0
        assert f"Token: temporary-token-{jane}" in result.output

    def test_login_failure(self, run, jane):
        result = run("login", "--email", "jane@example.com", "--password", "wrong-password")
        assert result.exit_code == 1
        assert "Error: Invalid credentials" in result.output


class TestCategoryCommands:
    """Tests for category commands."""

    def test_create_category_by_email(self, run, jane):
        result = run("category", "create", "Groceries", "--user", "jane@example.com", "--type", "expense")
        assert result.exit_code == 0
        assert "Created category 'Groceries'" in result.output

    def test_create_subcategory_by_user_id(self, run, jane):
        parent = extract_id(
            run("category", "create", "Food", "--user", jane, "--type", "expense").output
        )
        result = run(
            "category", "create", "Fruit", "--user", jane, "--type", "expense",
            "--parent", parent, "--color", "#FF5733",
        )
        assert result.exit_code == 0
        assert f"under {parent}" in result.output

    def test_invalid_color(self, run, jane):
        result = run(
            "category", "create", "Food", "--user", jane, "--type", "expense", "--color", "red"
        )
        assert result.exit_code == 1
        assert "Error: Color must be in hex format" in result.output

    def test_unknown_user(self, run):
        result = run("category", "create", "Food", "--user", "nobody@example.com", "--type", "expense")
        assert result.exit_code == 1
        assert "Error: User 'nobody@example.com' not found" in result.output


class TestTransactionCommands:
    """Tests for transaction commands."""

    def test_add_transaction(self, run, jane):
        result = add_expense(run)
        assert result.exit_code == 0, result.output
        assert "Created expense of BRL 50.00 on 2024-01-15" in result.output

    def test_add_with_currency_and_category(self, run, jane):
        category_id = extract_id(
            run("category", "create", "Food", "--user", jane, "--type", "expense").output
        )
        result = add_expense(run, "--currency", "usd", "--category", category_id)
        assert result.exit_code == 0, result.output
        assert "USD 50.00" in result.output

    def test_default_currency_from_environment(self, run, jane, monkeypatch):
        monkeypatch.setenv("PENNYWISE_DEFAULT_CURRENCY", "EUR")
        result = add_expense(run)
        assert "EUR 50.00" in result.output

    def test_add_rejects_bad_amount(self, run, jane):
        result = run(
            "transaction", "add", "--user", jane, "--amount", "abc",
            "--type", "expense", "--description", "Lunch",
        )
        assert result.exit_code == 1
        assert "Error: Invalid amount format" in result.output

    def test_add_rejects_zero_amount(self, run, jane):
        result = run(
            "transaction", "add", "--user", jane, "--amount", "0",
            "--type", "expense", "--description", "Lunch",
        )
        assert result.exit_code == 1
        assert "Error: Amount must be greater than zero" in result.output

    def test_update_description(self, run, jane):
        txn_id = extract_id(add_expense(run).output)
        result = run("transaction", "update", txn_id, "--description", "Team lunch")
        assert result.exit_code == 0
        assert f"Updated transaction {txn_id}" in result.output

        listing = run("transaction", "list", "--user", jane)
        assert "Team lunch" in listing.output

    def test_update_amount_rejected(self, run, jane):
        txn_id = extract_id(add_expense(run).output)
        result = run("transaction", "update", txn_id, "--amount", "75")
        assert result.exit_code == 1
        assert (
            "Error: Cannot update amount - field is immutable. Create a new transaction instead."
            in result.output
        )

    def test_update_date_rejected(self, run, jane):
        txn_id = extract_id(add_expense(run).output)
        result = run("transaction", "update", txn_id, "--date", "2024-02-01")
        assert result.exit_code == 1
        assert "Cannot update date" in result.output

    def test_delete(self, run, jane):
        txn_id = extract_id(add_expense(run).output)
        result = run("transaction", "delete", txn_id)
        assert result.exit_code == 0
        assert f"Deleted transaction {txn_id}" in result.output

        again = run("transaction", "delete", txn_id)
        assert again.exit_code == 1
        assert f"Error: Transaction not found with id: {txn_id}" in again.output

    def test_list_with_filters_and_pages(self, run, jane):
        for day in ("2024-01-01", "2024-01-10", "2024-01-20"):
            run(
                "transaction", "add", "--user", jane, "--amount", "10",
                "--type", "expense", "--description", f"Expense {day}", "--date", day,
            )
        run(
            "transaction", "add", "--user", jane, "--amount", "1000",
            "--type", "income", "--description", "Salary", "--date", "2024-01-05",
        )

        result = run(
            "transaction", "list", "--user", "jane@example.com",
            "--start-date", "2024-01-01", "--end-date", "2024-01-10", "--type", "expense",
        )
        assert result.exit_code == 0
        assert "Found 2 transaction(s)" in result.output
        assert "Expense 2024-01-20" not in result.output
        assert "Salary" not in result.output

        paged = run("transaction", "list", "--user", jane, "--size", "3", "--page", "1")
        assert "Found 4 transaction(s)" in paged.output
        assert "Page 2 of 2" in paged.output

    def test_list_empty(self, run, jane):
        result = run("transaction", "list", "--user", jane)
        assert result.exit_code == 0
        assert "No transactions found." in result.output

    def test_list_rejects_inverted_range(self, run, jane):
        result = run(
            "transaction", "list", "--user", jane,
            "--start-date", "2024-02-01", "--end-date", "2024-01-01",
        )
        assert result.exit_code == 1
        assert "Error: Start date cannot be after end date" in result.output


class TestLogging:
    """Tests for log output of CLI commands."""

    def test_json_log_events(self, run, monkeypatch):
        monkeypatch.setenv("PENNYWISE_LOG_JSON", "true")
        result = run("--log-level", "INFO", "user", "create", "Jane", "--email", "jane@example.com", "--password", "secret123")
        assert result.exit_code == 0

        events = [
            json.loads(line)
            for line in result.output.splitlines()
            if line.startswith("{")
        ]
        assert any(event["event"] == "user_created" for event in events)
        assert "secret123" not in result.output

    def test_default_level_hides_info_events(self, run):
        result = run("user", "create", "Jane", "--email", "jane@example.com", "--password", "secret123")
        assert "user_created" not in result.output
