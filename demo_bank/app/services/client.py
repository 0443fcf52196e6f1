from __future__ import annotations

import logging
import re
from typing import Optional

import httpx

from ..core.errors import AccountServiceError, InsufficientFundsError
from ..models import ERROR_KIND_HEADER, ErrorKind


logger = logging.getLogger(__name__)

_INSUFFICIENT_FUNDS_DETAIL = re.compile(r"INSUFFICIENT_FUNDS:\s(.*)")


class AccountClient:
    """Calls the operations of an account service over HTTP.

    Pass ``http_client`` to reuse an existing ``httpx.Client`` (its
    ``base_url`` must point at the service); otherwise the client opens
    its own connection pool and ``close`` releases it.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 8888,
        timeout: float = 5.0,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.host = host
        self.port = port
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            base_url=f"http://{host}:{port}",
            timeout=timeout,
        )

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    def __enter__(self) -> "AccountClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_name(self) -> str:
        return self._value_after_equals(self._call("/name"), "name")

    def get_balance(self) -> int:
        content = self._call("/balance")
        value = self._value_after_equals(content, "balance")
        try:
            return int(value)
        except ValueError as exc:
            raise AccountServiceError(
                f"failed to parse balance from service response: {content}"
            ) from exc

    def deposit(self, amount: int, idempotency_key: str = "") -> str:
        content = self._call(
            "/deposit", {"amount": amount, "idempotency-key": idempotency_key}
        )
        return self._value_after_equals(content, "ID")

    def withdraw(self, amount: int, idempotency_key: str = "") -> str:
        content = self._call(
            "/withdraw", {"amount": amount, "idempotency-key": idempotency_key}
        )
        return self._value_after_equals(content, "ID")

    def is_service_running(self) -> bool:
        try:
            self._http.get("/balance")
        except httpx.TransportError:
            return False
        return True

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _call(self, path: str, params: Optional[dict] = None) -> str:
        # httpx URL-encodes query parameters, including the idempotency key.
        try:
            response = self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("client.transport_error", extra={"path": path})
            raise AccountServiceError(f"request to {path} failed: {exc}") from exc

        content = response.text
        if response.status_code >= 400:
            raise self._error_from_response(response.status_code, content, response.headers)
        return content

    @staticmethod
    def _error_from_response(
        status_code: int, content: str, headers: httpx.Headers
    ) -> Exception:
        kind = headers.get(ERROR_KIND_HEADER)
        if kind is None and ErrorKind.INSUFFICIENT_FUNDS.value in content:
            # older services only flag the error in the body text
            kind = ErrorKind.INSUFFICIENT_FUNDS.value

        if kind == ErrorKind.INSUFFICIENT_FUNDS.value:
            match = _INSUFFICIENT_FUNDS_DETAIL.search(content)
            detail = match.group(1).strip() if match else content.strip()
            return InsufficientFundsError(detail)

        return AccountServiceError(
            f"HTTP Error {status_code}: {content}",
            status_code=status_code,
            body=content,
        )

    @staticmethod
    def _value_after_equals(content: str, label: str) -> str:
        _, found, value = content.partition("=")
        if not found:
            raise AccountServiceError(
                f"failed to parse {label} from service response: {content}"
            )
        return value.rstrip("\r\n")
