"""JSON-RPC access to the cluster, with retries and fee estimates."""

import base64
import itertools
import os
import time
from typing import Callable, List, Optional, Sequence, TypeVar

import requests

from . import gauge_state
from .errors import PriorityFeeNotInResultError, VoteMarketManagerError
from .pubkey import Pubkey

R = TypeVar("R")

_JUPITER_PROGRAM = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"


def retry_rpc(operation: Callable[[], R], attempts: int = 3, delay: float = 0.1) -> R:
    """Call operation, retrying it up to attempts more times after failures.

    Waits delay seconds between calls and re-raises the last error.
    """
    for remaining in range(attempts, -1, -1):
        try:
            return operation()
        except Exception:
            if remaining == 0:
                raise
            time.sleep(delay)
    raise AssertionError("unreachable")


class RpcClient:
    """A small JSON-RPC client over HTTP."""

    def __init__(self, url: str, session: Optional[requests.Session] = None, timeout: float = 30.0):
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self._ids = itertools.count(1)

    def call(self, method: str, params: Optional[list] = None):
        """Send one request and return its result; raise on an RPC error."""
        body = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params or []}
        response = self.session.post(self.url, json=body, timeout=self.timeout)
        reply = response.json()
        if not isinstance(reply, dict):
            raise VoteMarketManagerError("malformed RPC reply")
        if "error" in reply:
            error = reply["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise VoteMarketManagerError(f"RPC error: {message}")
        if "result" not in reply:
            raise VoteMarketManagerError("RPC reply holds no result")
        return reply["result"]

    def get_multiple_accounts(self, pubkeys: Sequence[Pubkey]) -> List[Optional[dict]]:
        """Fetch accounts; None for each that does not exist.

        Each account is the RPC's dict, with "data" decoded into bytes.
        """
        result = self.call(
            "getMultipleAccounts",
            [[str(key) for key in pubkeys], {"encoding": "base64"}],
        )
        accounts = []
        for account in result["value"]:
            if account is None:
                accounts.append(None)
                continue
            decoded = dict(account)
            data = account.get("data")
            if isinstance(data, list) and data:
                decoded["data"] = base64.b64decode(data[0])
            accounts.append(decoded)
        return accounts


def get_priority_fee(rpc_url: Optional[str] = None, session=None) -> float:
    """The medium priority fee estimate; 0.0 for RPCs without the estimate API.

    rpc_url defaults to the RPC_URL environment variable.
    """
    url = rpc_url if rpc_url is not None else os.environ["RPC_URL"]
    if "helius" not in url:
        return 0.0
    http = session if session is not None else requests
    body = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "getPriorityFeeEstimate",
        "params": [
            {
                "accountKeys": [str(gauge_state.PROGRAM_ID), _JUPITER_PROGRAM],
                "options": {"priority_level": "MEDIUM"},
            }
        ],
    }
    reply = http.post(url, json=body).json()
    result = reply.get("result") if isinstance(reply, dict) else None
    fee = result.get("priorityFeeEstimate") if isinstance(result, dict) else None
    if isinstance(fee, bool) or not isinstance(fee, (int, float)):
        raise PriorityFeeNotInResultError()
    return float(fee)