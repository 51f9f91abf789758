"""
JSON-RPC wallet provider.

Talks to a wallet endpoint that implements the EIP-1193 request methods
over HTTP. Provider error code 4001 means the user declined the request.
"""

import itertools
from typing import Any, Optional

import httpx
import structlog

from ..errors import SubmissionRejected, WalletProviderError
from .provider import WalletProvider

logger = structlog.get_logger(__name__)

USER_REJECTED_CODE = 4001


class JsonRpcWalletProvider(WalletProvider):
    """Wallet provider speaking JSON-RPC over HTTP."""

    def __init__(self, url: str, timeout: float = 30.0,
                 client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self.timeout = timeout
        self._client = client
        self._ids = itertools.count(1)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(self, method: str, params: Optional[list] = None) -> Any:
        """
        Send a single JSON-RPC request and return its result.

        Raises:
            SubmissionRejected: If the wallet reports a user rejection
            WalletProviderError: On transport, protocol or provider errors
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        client = await self._get_client()

        try:
            response = await client.post(self.url, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            logger.warning("Wallet RPC transport error", method=method, error=str(e))
            raise WalletProviderError(
                f"Wallet request {method} failed: {e}", method=method
            ) from e
        except ValueError as e:
            raise WalletProviderError(
                f"Wallet returned a non-JSON response for {method}", method=method
            ) from e

        if not isinstance(body, dict):
            raise WalletProviderError(
                f"Wallet returned a malformed response for {method}", method=method
            )

        error = body.get("error")
        if error:
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message", "unknown error") if isinstance(error, dict) else str(error)
            if code == USER_REJECTED_CODE:
                raise SubmissionRejected(message, method=method, code=code)
            raise WalletProviderError(message, method=method, code=code)

        return body.get("result")

    async def request_accounts(self) -> list[str]:
        return self._as_accounts(await self.request("eth_requestAccounts"), "eth_requestAccounts")

    async def get_accounts(self) -> list[str]:
        return self._as_accounts(await self.request("eth_accounts"), "eth_accounts")

    @staticmethod
    def _as_accounts(result: Any, method: str) -> list[str]:
        if result is None:
            return []
        if not isinstance(result, list) or not all(isinstance(a, str) for a in result):
            raise WalletProviderError(
                f"Wallet returned invalid accounts for {method}", method=method
            )
        return result
