"""XML-RPC remote call primitive.

Every hosting API method takes the API key as its first argument;
XmlRpcCaller prepends it so callers only pass the method parameters.

Example:
    with XmlRpcCaller(PRODUCTION_URL, api_key) as caller:
        disks = caller.send("hosting.disk.list", [])
"""

from __future__ import annotations

import functools
import http.client
import xmlrpc.client
from typing import Any
from xml.parsers.expat import ExpatError

from loguru import logger

from gandi_hosting.exceptions import RemoteError

PRODUCTION_URL = "https://rpc.gandi.net/xmlrpc/"
OTE_URL = "https://rpc.ote.gandi.net/xmlrpc/"


class _TimeoutMixin:
    timeout: float

    def make_connection(self, host: Any) -> http.client.HTTPConnection:
        conn = super().make_connection(host)  # type: ignore[misc]
        conn.timeout = self.timeout
        return conn


class _Transport(_TimeoutMixin, xmlrpc.client.Transport):
    def __init__(self, timeout: float) -> None:
        super().__init__()
        self.timeout = timeout


class _SafeTransport(_TimeoutMixin, xmlrpc.client.SafeTransport):
    def __init__(self, timeout: float) -> None:
        super().__init__()
        self.timeout = timeout


class XmlRpcCaller:
    """Caller backed by ``xmlrpc.client``.

    Args:
        url: XML-RPC endpoint.
        api_key: API key sent as the first parameter of every call.
        timeout: Socket timeout per request, in seconds.
    """

    def __init__(self, url: str, api_key: str, *, timeout: float = 30.0) -> None:
        transport = (
            _SafeTransport(timeout) if url.startswith("https://") else _Transport(timeout)
        )
        self._url = url
        self._api_key = api_key
        self._proxy = xmlrpc.client.ServerProxy(url, transport=transport, allow_none=True)
        self._log = logger.bind(component="caller")

    def __enter__(self) -> XmlRpcCaller:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def send(self, method: str, params: list[Any]) -> Any:
        self._log.trace("{method} {params}", method=method, params=params)
        remote = functools.reduce(getattr, method.split("."), self._proxy)
        try:
            return remote(self._api_key, *params)
        except xmlrpc.client.Fault as e:
            self._log.warning("{method} fault {code}", method=method, code=e.faultCode)
            raise RemoteError(method, f"fault {e.faultCode}: {e.faultString}") from e
        except xmlrpc.client.ProtocolError as e:
            self._log.warning("{method} HTTP {status}", method=method, status=e.errcode)
            raise RemoteError(method, f"HTTP {e.errcode}: {e.errmsg}") from e
        except (OSError, http.client.HTTPException) as e:
            self._log.warning("{method} transport error: {error}", method=method, error=e)
            raise RemoteError(method, str(e) or type(e).__name__) from e
        except OverflowError as e:
            # XML-RPC ints are signed 32-bit
            raise RemoteError(method, f"parameter out of range: {e}") from e
        except (xmlrpc.client.ResponseError, ExpatError) as e:
            self._log.warning("{method} malformed response: {error}", method=method, error=e)
            raise RemoteError(method, f"malformed response: {e}") from e

    def close(self) -> None:
        self._proxy("close")()
