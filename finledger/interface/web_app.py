"""Mini README: FastAPI-powered browser surface for the ledger.

Structure:
    * create_application - application factory wiring routes and templates.
    * Confirmation/notification state - request-scoped answers handed to
      the view-model's confirm and notify ports.

The page lists transactions with search and sort controls, shows the
running balance, and offers an entry form, per-row delete buttons and a
theme toggle. The JSON routes under ``/api`` back those controls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import LedgerSettings, get_settings
from ..finance import SortKey, load_seed_transactions
from ..logging_utils import configure_root_logger, get_logger, level_for_environment
from ..storage import KeyValueStore, create_store
from .display import RecordingDisplay
from .view_model import LedgerViewModel

LOGGER = get_logger(__name__)

SORT_LABELS: Dict[str, str] = {
    SortKey.DATE_DESC.value: "Newest first",
    SortKey.DATE_ASC.value: "Oldest first",
    SortKey.AMOUNT_DESC.value: "Largest amount",
    SortKey.AMOUNT_ASC.value: "Smallest amount",
}


def create_application(
    settings: Optional[LedgerSettings] = None,
    store: Optional[KeyValueStore] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and a single view-model."""

    settings = settings or get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    store = store or create_store(settings)

    app = FastAPI(title="finledger", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    confirmation: Dict[str, bool] = {"granted": False}
    notifications: List[str] = []

    def confirm(message: str) -> bool:
        LOGGER.debug("Confirmation '%s' answered %s", message, confirmation["granted"])
        return confirmation["granted"]

    display = RecordingDisplay()
    view_model = LedgerViewModel(
        store,
        seed_provider=load_seed_transactions if settings.seed_demo_data else None,
        confirm=confirm,
        notify=notifications.append,
        display=display,
        settings=settings,
    )
    view_model.start()
    app.state.view_model = view_model

    def _screen_payload() -> Dict[str, object]:
        return {
            "rows": [row.as_dict() for row in display.rows],
            "balance": display.balance.as_dict() if display.balance else None,
            "theme": view_model.theme.value,
            "search": view_model.search_term,
            "sort": view_model.sort_key.value,
        }

    @app.get("/", response_class=HTMLResponse)
    async def ledger_page(
        request: Request, search: str = "", sort: str = SortKey.DATE_DESC.value
    ) -> HTMLResponse:
        """Render the ledger screen for the given search and sort inputs."""

        view_model.set_search_term(search)
        view_model.set_sort_key(sort)
        view_model.refresh()
        LOGGER.debug("Rendering ledger page with %s rows", len(display.rows))
        return templates.TemplateResponse(
            request,
            "ledger.html",
            {
                "rows": display.rows,
                "balance": display.balance,
                "theme": view_model.theme.value,
                "search": view_model.search_term,
                "sort": view_model.sort_key.value,
                "sort_labels": SORT_LABELS,
                "allow_deletion": view_model.allow_deletion,
            },
        )

    @app.get("/api/transactions")
    async def list_transactions(
        search: str = "", sort: str = SortKey.DATE_DESC.value
    ) -> JSONResponse:
        """Return the filtered, sorted rows and the balance."""

        view_model.set_search_term(search)
        view_model.set_sort_key(sort)
        view_model.refresh()
        return JSONResponse(_screen_payload())

    @app.post("/api/transactions", status_code=201)
    async def add_transaction(
        description: str = Form(""),
        amount: str = Form(""),
        date: str = Form(""),
        type: str = Form(""),
    ) -> JSONResponse:
        """Record a transaction submitted from the entry form."""

        notifications.clear()
        transaction = view_model.add(description, amount, date, type)
        if transaction is None:
            detail = notifications[-1] if notifications else "Transaction rejected"
            raise HTTPException(status_code=400, detail=detail)
        return JSONResponse(
            {"transaction": transaction.as_dict(), **_screen_payload()}, status_code=201
        )

    @app.delete("/api/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: int, confirmed: bool = False) -> JSONResponse:
        """Delete a transaction once the browser has confirmed it."""

        if not view_model.allow_deletion:
            raise HTTPException(status_code=403, detail="Deletion is disabled")
        if not confirmed:
            raise HTTPException(status_code=409, detail="Deletion requires confirmation")
        try:
            transaction = view_model.ledger.get_transaction(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=error.args[0]) from error

        confirmation["granted"] = True
        try:
            view_model.remove(transaction_id)
        finally:
            confirmation["granted"] = False
        LOGGER.info("Deleted %s via the web page", transaction.description or transaction.id)
        return JSONResponse({"deleted": transaction_id, **_screen_payload()})

    @app.post("/api/theme/toggle")
    async def toggle_theme() -> JSONResponse:
        """Flip the persisted theme preference."""

        theme = view_model.toggle_theme()
        return JSONResponse({"theme": theme.value})

    @app.get("/api/snapshot")
    async def snapshot() -> JSONResponse:
        """Export the ledger grouped into income and expenses."""

        summary = view_model.ledger.summarise()
        return JSONResponse(
            {
                **view_model.ledger.export_snapshot(),
                "totals": {
                    "income": summary.income_total,
                    "expenses": summary.expense_total,
                    "balance": summary.balance,
                    "count": summary.count,
                },
            }
        )

    return app
