"""
FastAPI REST API Module

Exposes the in-process account over HTTP: deposits, withdrawals, balance
and statement. State lives in memory for the lifetime of the server.
"""

from datetime import datetime, timezone
from fastapi import FastAPI, HTTPException, Depends, status
from pydantic import BaseModel, Field
import uvicorn

from .config import get_config
from .errors import InsufficientFunds, InvalidAmount
from .logging_config import setup_logging, log_action
from .service import AccountService


# Pydantic models for API requests/responses
class AmountRequest(BaseModel):
    amount: int = Field(..., description="Whole-unit amount, must be positive")


class TransactionResponse(BaseModel):
    date: str
    amount: int
    balance_after: int


_config = get_config()
logger = setup_logging(
    level=_config.log_level,
    logger_name="bank_account.api",
    log_format=_config.log_format,
    log_file=_config.log_file
)

# Global account service instance
account_service = AccountService()


app = FastAPI(
    title="Bank Account API",
    description="Single in-memory bank account with statement printing",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


# Dependency to get the account service
def get_account_service() -> AccountService:
    return account_service


def _to_response(record) -> TransactionResponse:
    return TransactionResponse(**record.to_dict())


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.post("/deposit", status_code=status.HTTP_201_CREATED, response_model=TransactionResponse)
async def deposit(
    request: AmountRequest,
    service: AccountService = Depends(get_account_service)
):
    """Deposit money into the account"""
    try:
        record = service.deposit(request.amount)
    except InvalidAmount as e:
        log_action(logger, "warning", f"Deposit rejected: {e}",
                   action="deposit", extra={"amount": request.amount})
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(record)


@app.post("/withdraw", status_code=status.HTTP_201_CREATED, response_model=TransactionResponse)
async def withdraw(
    request: AmountRequest,
    service: AccountService = Depends(get_account_service)
):
    """Withdraw money from the account"""
    try:
        record = service.withdraw(request.amount)
    except InvalidAmount as e:
        log_action(logger, "warning", f"Withdrawal rejected: {e}",
                   action="withdraw", extra={"amount": request.amount})
        raise HTTPException(status_code=400, detail=str(e))
    except InsufficientFunds as e:
        log_action(logger, "warning", f"Withdrawal rejected: {e}",
                   action="withdraw", extra={"balance": e.balance, "requested": e.requested})
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"message": str(e), "balance": e.balance, "requested": e.requested}
        )

    return _to_response(record)


@app.get("/balance")
async def get_balance(service: AccountService = Depends(get_account_service)):
    """Get the current balance"""
    return {"balance": service.balance}


@app.get("/statement")
async def get_statement(service: AccountService = Depends(get_account_service)):
    """Get the statement lines, most recent posting first"""
    return {"lines": service.statement_lines()}


def run_server(host: str = "0.0.0.0", port: int = 8090, debug: bool = False):
    """Run the FastAPI server"""
    uvicorn.run(
        "bank_account.api:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info"
    )
