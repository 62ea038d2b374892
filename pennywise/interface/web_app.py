"""Mini README: FastAPI-powered dashboard for Pennywise.

Structure:
    * create_application - application factory wiring routes and templates.
    * _build_default_* helpers - collaborators built from settings when the
      caller does not inject its own.

The ledger, session and chat are plain objects passed into the factory, so
tests and alternative front ends can supply their own instances. Routes
validate form input here and hand only well-formed values to the ledger.
"""

from __future__ import annotations

import random
from datetime import date
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urlencode

from fastapi import Body, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..assistant import ChatSession, MockResponder
from ..configuration import PennywiseSettings, get_settings
from ..finance import (
    DashboardCategory,
    Transaction,
    TransactionCategory,
    TransactionLedger,
    build_transaction,
)
from ..logging_utils import get_logger
from ..session import CURRENCIES, AuthenticationError, JsonFileStore, SessionManager, find_currency

LOGGER = get_logger(__name__)


def _build_default_session(settings: PennywiseSettings) -> SessionManager:
    return SessionManager(
        JsonFileStore(settings.storage_path),
        login_delay=settings.login_delay_seconds,
        register_delay=settings.register_delay_seconds,
    )


def _build_default_chat(settings: PennywiseSettings) -> ChatSession:
    return ChatSession(MockResponder(settings.chat_reply_delay_seconds, random.Random()))


def create_application(
    ledger: Optional[TransactionLedger] = None,
    session: Optional[SessionManager] = None,
    chat: Optional[ChatSession] = None,
    settings: Optional[PennywiseSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and injected collaborators."""

    if settings is None:
        settings = get_settings()
    if ledger is None:
        ledger = TransactionLedger(legacy_last_month=settings.legacy_last_month_estimate)
    if session is None:
        session = _build_default_session(settings)
    if chat is None:
        chat = _build_default_chat(settings)

    app = FastAPI(title="Pennywise Finance Assistant", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    def _profile_payload() -> Dict[str, object]:
        if session.current_user is None:
            raise HTTPException(status_code=401, detail="Not signed in")
        payload = session.current_user.as_dict()
        payload["fullName"] = session.current_user.full_name
        return payload

    def _currency_symbol() -> str:
        if session.current_user is None:
            return "$"
        try:
            return find_currency(session.current_user.currency).symbol
        except KeyError:
            return "$"

    def _transaction_from_form(
        title: str, amount: str, category: str, entry_type: str, occurred_on: Optional[str]
    ) -> Transaction:
        """Turn add-transaction form fields into a transaction or raise ``ValueError``."""

        kind = entry_type.strip().lower()
        if kind not in {"expense", "income"}:
            raise ValueError("Type must be 'expense' or 'income'.")
        parsed_date = date.fromisoformat(occurred_on) if occurred_on else ledger.today()
        return build_transaction(
            title,
            amount,
            category,
            is_expense=kind == "expense",
            occurred_on=parsed_date,
        )

    def _back_to_dashboard(error: Optional[str] = None) -> RedirectResponse:
        url = "/" if error is None else f"/?{urlencode({'error': error})}"
        return RedirectResponse(url, status_code=303)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request, search: str = "", error: str = "") -> HTMLResponse:
        """Render the dashboard, ledger and chat in one page."""

        snapshot = ledger.export_snapshot(ledger.search(search))
        LOGGER.debug(
            "Rendering dashboard -> income: %.2f expenses: %.2f balance: %.2f",
            snapshot["total_income"],
            snapshot["total_expenses"],
            snapshot["balance"],
        )
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "snapshot": snapshot,
                "search": search,
                "error": error,
                "categories": [category.value for category in TransactionCategory],
                "messages": chat.messages,
                "profile": session.current_user,
                "currency_symbol": _currency_symbol(),
                "today": ledger.today().isoformat(),
            },
        )

    @app.get("/api/summary")
    async def summary() -> JSONResponse:
        return JSONResponse(ledger.export_snapshot())

    @app.get("/api/transactions")
    async def list_transactions(search: str = "") -> JSONResponse:
        matches = ledger.search(search)
        return JSONResponse({"transactions": [transaction.as_dict() for transaction in matches]})

    @app.post("/api/transactions", status_code=201)
    async def add_transaction(
        title: str = Form(...),
        amount: str = Form(...),
        category: str = Form(TransactionCategory.SHOPPING.value),
        entry_type: str = Form("expense", alias="type"),
        occurred_on: Optional[str] = Form(None, alias="date"),
    ) -> JSONResponse:
        """Validate the add-transaction form and record it."""

        try:
            transaction = _transaction_from_form(title, amount, category, entry_type, occurred_on)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        ledger.add(transaction)
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.post("/transactions")
    async def submit_transaction_form(
        title: str = Form(""),
        amount: str = Form(""),
        category: str = Form(TransactionCategory.SHOPPING.value),
        entry_type: str = Form("expense", alias="type"),
        occurred_on: Optional[str] = Form(None, alias="date"),
    ) -> RedirectResponse:
        """Record a transaction from the dashboard form and return to the page."""

        try:
            transaction = _transaction_from_form(title, amount, category, entry_type, occurred_on)
        except ValueError as error:
            return _back_to_dashboard(str(error))
        ledger.add(transaction)
        return _back_to_dashboard()

    @app.post("/chat")
    async def submit_chat_form(message: str = Form("")) -> RedirectResponse:
        """Send a chat message from the dashboard and return once answered."""

        pending = chat.send(message)
        if pending is None:
            return _back_to_dashboard("Message must not be empty.")
        await pending
        return _back_to_dashboard()

    @app.get("/api/categories")
    async def categories() -> JSONResponse:
        return JSONResponse(
            {
                "transaction_categories": [category.value for category in TransactionCategory],
                "dashboard_categories": [
                    {"name": category.value, "icon_name": category.icon_name, "color": category.color}
                    for category in DashboardCategory
                ],
            }
        )

    @app.get("/api/chat")
    async def chat_history() -> JSONResponse:
        return JSONResponse(
            {
                "messages": [message.as_dict() for message in chat.messages],
                "is_typing": chat.is_typing,
            }
        )

    @app.post("/api/chat")
    async def send_chat(message: str = Form(...)) -> JSONResponse:
        """Post a user message and wait for the assistant's reply."""

        pending = chat.send(message)
        if pending is None:
            raise HTTPException(status_code=400, detail="Message must not be empty.")
        reply = await pending
        return JSONResponse(
            {
                "reply": reply.as_dict(),
                "messages": [entry.as_dict() for entry in chat.messages],
            }
        )

    @app.post("/api/login")
    async def login(email: str = Form(...), password: str = Form(...)) -> JSONResponse:
        try:
            await session.login(email, password)
        except AuthenticationError as error:
            raise HTTPException(status_code=401, detail=str(error)) from error
        return JSONResponse(_profile_payload())

    @app.post("/api/register")
    async def register(
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
        password: str = Form(""),
    ) -> JSONResponse:
        try:
            await session.register(first_name, last_name, email, password)
        except AuthenticationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(_profile_payload())

    @app.post("/api/logout")
    async def logout() -> JSONResponse:
        session.logout()
        return JSONResponse({"logged_in": False})

    @app.get("/api/profile")
    async def profile() -> JSONResponse:
        return JSONResponse(_profile_payload())

    @app.post("/api/profile")
    async def edit_profile(
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
    ) -> JSONResponse:
        try:
            session.edit_profile(first_name, last_name, email)
        except AuthenticationError as error:
            raise HTTPException(status_code=401, detail=str(error)) from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(_profile_payload())

    @app.post("/api/profile/currency")
    async def update_currency(code: str = Form(...)) -> JSONResponse:
        try:
            session.set_currency(code)
        except AuthenticationError as error:
            raise HTTPException(status_code=401, detail=str(error)) from error
        except KeyError as error:
            raise HTTPException(status_code=404, detail=f"Unsupported currency '{code}'") from error
        return JSONResponse(_profile_payload())

    @app.post("/api/profile/budget")
    async def update_budget(monthly_budget: str = Form(...)) -> JSONResponse:
        try:
            session.set_monthly_budget(float(monthly_budget))
        except AuthenticationError as error:
            raise HTTPException(status_code=401, detail=str(error)) from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(_profile_payload())

    @app.post("/api/profile/notifications")
    async def update_notifications(enabled: bool = Form(...)) -> JSONResponse:
        try:
            session.set_notifications(enabled)
        except AuthenticationError as error:
            raise HTTPException(status_code=401, detail=str(error)) from error
        return JSONResponse(_profile_payload())

    @app.get("/api/category-budgets")
    async def category_budgets() -> JSONResponse:
        return JSONResponse({"budgets": session.category_budgets()})

    @app.post("/api/category-budgets")
    async def save_category_budgets(budgets: Dict[str, float] = Body(...)) -> JSONResponse:
        try:
            saved = session.save_category_budgets(budgets)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"budgets": saved})

    @app.get("/api/currencies")
    async def currencies() -> JSONResponse:
        return JSONResponse(
            {
                "currencies": [
                    {"code": currency.code, "name": currency.name, "symbol": currency.symbol}
                    for currency in CURRENCIES
                ]
            }
        )

    return app
