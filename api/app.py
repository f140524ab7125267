"""Flask REST API exposing the finance tracker ledger and command parser."""

from __future__ import annotations

import io
import os
import threading
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence, Tuple, Type

from flask import Flask, jsonify, request
from flask_cors import CORS

from tracker_core.budget import BudgetManager
from tracker_core.commands import InvalidCommand
from tracker_core.exceptions import RecordNotFoundError, ValidationError
from tracker_core.ledger import Ledger
from tracker_core.models import Entry, Expense, Income, format_amount
from tracker_core.parser import Parser
from tracker_core.ui import ConsoleUI
from tracker_core.validators import (
    parse_amount,
    parse_date,
    validate_category,
    validate_description,
)


def create_app(
    ledger: Optional[Ledger] = None, budget_manager: Optional[BudgetManager] = None
) -> Flask:
    app = Flask(__name__)

    env_name = os.getenv("FINANCE_TRACKER_ENV", "prod").lower()
    if env_name in {"dev", "development"}:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    else:
        allowed_origins = os.getenv("FINANCE_TRACKER_ALLOWED_ORIGINS")
        if allowed_origins:
            origins = [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]
            CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)
        else:
            CORS(app)

    ledger = ledger if ledger is not None else Ledger()
    budget_manager = budget_manager if budget_manager is not None else BudgetManager()
    parser = Parser()
    # Request threads share one ledger; every read and write goes through this lock.
    lock = threading.Lock()

    def _success(payload: Any, status: int = 200):
        if status == 204:
            return ("", status)
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error")

    @app.errorhandler(RecordNotFoundError)
    def handle_not_found(exc: RecordNotFoundError):
        return _handle_error(exc, 404, "Record not found")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    def _date_range() -> Optional[Tuple[date, date]]:
        start = request.args.get("start")
        end = request.args.get("end")
        if not start and not end:
            return None
        if not start or not end:
            raise ValidationError("Both start and end are required to filter by date")
        return parse_date(start), parse_date(end)

    def _build_entry(entry_type: Type[Entry], payload: Dict[str, Any]) -> Entry:
        fields: Dict[str, Any] = {
            "amount": parse_amount(payload.get("amount")),
            "description": validate_description(payload.get("description")),
            "category": validate_category(payload.get("category")),
        }
        if payload.get("date") is not None:
            fields["date"] = parse_date(payload["date"])
        return entry_type(**fields)

    def _listing(entries: Sequence[Entry], window: Optional[Tuple[date, date]]):
        # Indices stay ledger positions so they can be fed back to DELETE.
        numbered = list(enumerate(entries, start=1))
        if window is not None:
            numbered = [(n, entry) for n, entry in numbered if entry.falls_between(*window)]
        total = sum((entry.amount for _, entry in numbered), start=Decimal("0"))
        return {
            "items": [{"index": number, **entry.to_dict()} for number, entry in numbered],
            "total": format_amount(total),
        }

    @app.post("/commands")
    def run_command():
        payload = _json_body()
        line = payload.get("input")
        if not isinstance(line, str):
            raise ValidationError("input must be a string")

        out, err = io.StringIO(), io.StringIO()
        # Parser holds no state, so only execution needs the lock.
        command = parser.parse_command(line)
        with lock:
            command.execute(ledger, ConsoleUI(out=out, err=err), budget_manager)
        return _success({
            "valid": not isinstance(command, InvalidCommand),
            "exit": command.is_exit,
            "output": out.getvalue().splitlines(),
            "errors": err.getvalue().splitlines(),
        })

    @app.get("/expenses")
    def list_expenses():
        window = _date_range()
        with lock:
            expenses = ledger.expenses
        return _success(_listing(expenses, window))

    @app.post("/expenses")
    def create_expense():
        expense = _build_entry(Expense, _json_body())
        with lock:
            ledger.add_expense(expense)
        return _success(expense.to_dict(), 201)

    @app.delete("/expenses/<int:index>")
    def delete_expense(index: int):
        with lock:
            ledger.remove_expense(index)
        return _success({}, 204)

    @app.get("/incomes")
    def list_incomes():
        window = _date_range()
        with lock:
            incomes = ledger.incomes
        return _success(_listing(incomes, window))

    @app.post("/incomes")
    def create_income():
        income = _build_entry(Income, _json_body())
        with lock:
            ledger.add_income(income)
        return _success(income.to_dict(), 201)

    @app.delete("/incomes/<int:index>")
    def delete_income(index: int):
        with lock:
            ledger.remove_income(index)
        return _success({}, 204)

    @app.get("/summary")
    def summary():
        with lock:
            total_expense = ledger.total_expense()
            total_income = ledger.total_income()
            balance = ledger.balance()
        return _success({
            "total_expense": format_amount(total_expense),
            "total_income": format_amount(total_income),
            "balance": format_amount(balance),
        })

    return app
